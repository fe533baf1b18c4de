
import math

import pytest

from geodatum.ellipsoid import *
from geodatum.exceptions import ConvergenceError, InvalidParameterError


def test_ellipsoid_defining_constants():
    assert WGS84.a == 6378137.0
    assert WGS84.f == pytest.approx(1 / 298.257223563, rel=1e-15)
    assert WGS84.b == pytest.approx(6356752.314245, abs=1e-6)
    assert WGS84.e2 == pytest.approx(0.00669437999014, abs=1e-14)
    assert WGS84.ep2 == pytest.approx(0.00673949674228, abs=1e-14)
    assert WGS84.c == pytest.approx(6399593.6258, abs=1e-4)
    assert WGS84.e == pytest.approx(math.sqrt(WGS84.e2))
    assert WGS84.n == pytest.approx((WGS84.a - WGS84.b) / (WGS84.a + WGS84.b))


def test_ellipsoid_derived_radii():
    assert WGS84.mean_radius == pytest.approx(6371008.7714, abs=1e-4)
    assert WGS84.authalic_radius == pytest.approx(6371007.1809, abs=1e-3)
    assert WGS84.volumetric_radius == pytest.approx(6371000.7900, abs=1e-3)
    assert WGS84.quarter_meridian == pytest.approx(10001965.7293, abs=1e-3)
    assert WGS84.rectifying_radius == pytest.approx(2 * WGS84.quarter_meridian / math.pi)
    assert WGS84.volume == pytest.approx(4 / 3 * math.pi * WGS84.volumetric_radius ** 3)


def test_ellipsoid_invalid():
    with pytest.raises(InvalidParameterError):
        _ = Ellipsoid(-1., 298.)

    with pytest.raises(InvalidParameterError):
        _ = Ellipsoid(6378137., 0.5)

    with pytest.raises(InvalidParameterError):
        _ = Ellipsoid(math.inf, 298.)

    with pytest.raises(ValueError):
        _ = Ellipsoid('not a number', 298.)

    with pytest.raises(InvalidParameterError):
        _ = Ellipsoid.from_axes(6356752., 6378137.)


def test_ellipsoid_eq():
    # Same size, different names
    assert GRS80 == CGCS2000
    assert hash(GRS80) == hash(CGCS2000)

    assert WGS84 != GRS80
    assert WGS84 != 'WGS84'
    assert Ellipsoid(6378137.0, 298.257223563) == WGS84


def test_ellipsoid_repr():
    assert repr(WGS84) == '<Ellipsoid WGS84 (a=6378137.0, 1/f=298.257223563)>'
    assert repr(Ellipsoid(6378137.0, 300.)) == '<Ellipsoid(a=6378137.0, 1/f=300.0)>'


def test_ellipsoid_from_axes():
    assert CLARKE_1866.inverse_flattening == pytest.approx(294.9786982, abs=1e-6)
    assert CLARKE_1866.b == pytest.approx(6356583.8, abs=1e-6)

    sphere = Ellipsoid.from_axes(6371000., 6371000.)
    assert sphere.is_sphere
    assert sphere == Ellipsoid.sphere(6371000.)


def test_sphere():
    assert SPHERE.is_sphere
    assert SPHERE.e2 == 0.
    assert SPHERE.b == SPHERE.a
    assert SPHERE.area == pytest.approx(4 * math.pi * SPHERE.a ** 2)
    assert SPHERE.meridian_arc(1.) == pytest.approx(SPHERE.a)
    assert SPHERE.prime_vertical_radius(0.7) == SPHERE.a
    assert SPHERE.meridian_radius(0.7) == SPHERE.a
    assert not WGS84.is_sphere


def test_curvature_radii():
    # Equator
    assert WGS84.prime_vertical_radius(0.) == WGS84.a
    assert WGS84.meridian_radius(0.) == pytest.approx(WGS84.a * (1 - WGS84.e2))
    assert WGS84.parallel_radius(0.) == WGS84.a

    # Poles
    assert WGS84.N(math.pi / 2) == pytest.approx(WGS84.c)
    assert WGS84.M(math.pi / 2) == pytest.approx(WGS84.c)
    assert WGS84.parallel_radius(math.pi / 2) == pytest.approx(0., abs=1e-6)

    lat = math.radians(37.5)
    m, n = WGS84.meridian_radius(lat), WGS84.prime_vertical_radius(lat)
    assert WGS84.mean_curvature_radius(lat) == pytest.approx(math.sqrt(m * n))
    assert WGS84.azimuth_radius(lat, 0.) == pytest.approx(m)
    assert WGS84.azimuth_radius(lat, math.pi / 2) == pytest.approx(n)
    assert m < WGS84.azimuth_radius(lat, math.pi / 4) < n

    assert WGS84.W(lat) == pytest.approx(WGS84.a / n)
    assert WGS84.V(lat) == pytest.approx(WGS84.c / n)


def test_parallel_arc():
    # One degree along the equator
    assert WGS84.parallel_arc(0., 0., math.radians(1.)) == pytest.approx(111_319.4908, abs=1e-4)

    lat = math.radians(45.)
    expected = WGS84.parallel_radius(lat) * math.radians(10.)
    assert WGS84.parallel_arc(lat, math.radians(5.), math.radians(15.)) == pytest.approx(expected)
    assert WGS84.parallel_arc(lat, math.radians(15.), math.radians(5.)) == pytest.approx(expected)

    # Across the antimeridian
    assert WGS84.parallel_arc(lat, math.radians(175.), math.radians(-175.)) == pytest.approx(expected)

    assert WGS84.parallel_arc(math.pi / 2, 0., 1.) == pytest.approx(0., abs=1e-6)


def test_meridian_arc():
    assert WGS84.meridian_arc(0.) == 0.
    assert WGS84.meridian_arc(math.radians(45)) == pytest.approx(4984944.378, abs=1e-3)
    assert WGS84.meridian_arc(math.radians(-30)) == pytest.approx(-WGS84.meridian_arc(math.radians(30)))

    # Arc increases at the rate of the meridian radius
    lat, step = math.radians(52.), 1e-6
    rate = (WGS84.meridian_arc(lat + step) - WGS84.meridian_arc(lat - step)) / (2 * step)
    assert rate == pytest.approx(WGS84.meridian_radius(lat), rel=1e-7)


def test_footpoint_latitude():
    for degrees in (-89., -45., -0.5, 0., 10., 45., 60., 89.9):
        lat = math.radians(degrees)
        assert WGS84.footpoint_latitude(WGS84.meridian_arc(lat)) == pytest.approx(lat, abs=1e-12)

    assert KRASSOVSKY.footpoint_latitude(KRASSOVSKY.quarter_meridian) == pytest.approx(math.pi / 2, abs=1e-12)


def test_footpoint_latitude_logs_iterations(caplog):
    caplog.set_level('DEBUG', logger='geodatum')
    WGS84.footpoint_latitude(1_000_000.)
    assert 'Footpoint latitude converged' in caplog.text


def test_footpoint_latitude_nonconvergence():
    with pytest.raises(ConvergenceError):
        WGS84.footpoint_latitude(math.nan)
