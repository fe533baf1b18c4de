
import math

import pytest

from geodatum.angles import Longitude
from geodatum.coordinates import ProjectedCoord
from geodatum.ellipsoid import AIRY_1830, CGCS2000, KRASSOVSKY, WGS84
from geodatum.exceptions import DomainError, InvalidParameterError
from geodatum.geodesic import vincenty_direct
from geodatum.projection import *
from geodatum.utils.functions import wrap_pi


def _utm(zone: int, south: bool = False) -> TransverseMercator:
    return TransverseMercator(WGS84, utm_parameters(zone, south))


def _gauss_krueger(zone: int, width: float = 6, prefix: bool = True) -> TransverseMercator:
    return TransverseMercator(CGCS2000, gauss_krueger_parameters(zone, width, prefix))


def test_projection_parameters():
    params = ProjectionParameters(
        central_meridian=Longitude.from_degrees(-2.),
        latitude_of_origin=math.radians(49.),
        scale_factor=0.9996012717,
        false_easting=400_000,
        false_northing=-100_000,
        name='British National Grid',
    )
    assert params.central_meridian == pytest.approx(math.radians(-2.))
    assert params.false_easting == 400_000.
    assert params.unit_factor == 1.
    assert params == ProjectionParameters(
        Longitude.from_degrees(-2.), math.radians(49.), 0.9996012717, 400_000., -100_000.
    )
    assert repr(params).startswith('<British National Grid (CM=')

    assert ProjectionParameters(central_meridian=math.radians(190.)).central_meridian == pytest.approx(
        math.radians(-170.)
    )
    assert ProjectionParameters(unit='us-ft').unit_factor == pytest.approx(1200 / 3937)


def test_projection_parameters_invalid():
    with pytest.raises(InvalidParameterError):
        _ = ProjectionParameters(scale_factor=0.2)

    with pytest.raises(InvalidParameterError):
        _ = ProjectionParameters(scale_factor=3.5)

    with pytest.raises(InvalidParameterError):
        _ = ProjectionParameters(unit='furlong')

    with pytest.raises(InvalidParameterError):
        _ = ProjectionParameters(latitude_of_origin=2.)

    with pytest.raises(InvalidParameterError):
        _ = ProjectionParameters(zone_prefix=True)

    with pytest.raises(ValueError):
        _ = ProjectionParameters(central_meridian='east')


def test_transverse_mercator_init():
    with pytest.raises(InvalidParameterError):
        _ = TransverseMercator('WGS84', utm_parameters(31))


def test_forward_origin():
    utm = _utm(31)
    coord = utm.forward(0., math.radians(3.))
    assert isinstance(coord, ProjectedCoord)
    assert coord.to_float() == pytest.approx((0., 500_000.), abs=1e-9)
    assert coord.false_easting == 500_000.

    # Northing along the central meridian is the scaled meridian arc
    coord = utm.forward(math.radians(45.), math.radians(3.))
    assert coord.northing == pytest.approx(4982950.400, abs=1e-3)
    assert coord.easting == pytest.approx(500_000., abs=1e-9)

    coord = _utm(31, south=True).forward(math.radians(-45.), math.radians(3.))
    assert coord.northing == pytest.approx(10_000_000. - 4982950.400, abs=1e-3)


def test_forward_symmetry():
    utm = _utm(33)
    lat = math.radians(47.)
    east = utm.forward(lat, math.radians(15. + 2.))
    west = utm.forward(lat, math.radians(15. - 2.))
    assert east.northing == pytest.approx(west.northing, abs=1e-6)
    assert east.easting - 500_000. == pytest.approx(500_000. - west.easting, abs=1e-6)

    # Parallels curve toward the pole away from the central meridian
    assert east.northing > utm.forward(lat, math.radians(15.)).northing


def test_round_trip():
    tm = TransverseMercator(KRASSOVSKY, gauss_krueger_parameters(20))
    cm = math.radians(117.)
    for lat_deg in (-80., -45., -10., 0., 20., 45., 70., 80.):
        for d_lon_deg in (-3.4, -1., 0., 0.5, 3.4):
            lat, lon = math.radians(lat_deg), cm + math.radians(d_lon_deg)
            coord = tm.forward(lat, lon)
            result = tm.inverse(coord.northing, coord.easting)
            assert result[0] == pytest.approx(lat, abs=1e-9)
            assert result[1] == pytest.approx(lon, abs=1e-9)


def test_british_national_grid():
    params = ProjectionParameters(
        central_meridian=math.radians(-2.),
        latitude_of_origin=math.radians(49.),
        scale_factor=0.9996012717,
        false_easting=400_000.,
        false_northing=-100_000.,
    )
    tm = TransverseMercator(AIRY_1830, params)
    lat = math.radians(52. + 39 / 60 + 27.2531 / 3600)
    lon = math.radians(1. + 43 / 60 + 4.5177 / 3600)

    coord = tm.forward(lat, lon)
    assert coord.easting == pytest.approx(651409.903, abs=0.01)
    assert coord.northing == pytest.approx(313177.270, abs=0.01)

    result = tm.inverse(313177.270, 651409.903)
    assert result[0] == pytest.approx(lat, abs=1e-8)
    assert result[1] == pytest.approx(lon, abs=1e-8)

    point = tm.inverse_point(coord)
    assert point.ellipsoid == AIRY_1830
    assert point.latitude.radians == pytest.approx(lat, abs=1e-9)


def test_projection_units():
    meters = TransverseMercator(WGS84, ProjectionParameters(central_meridian=math.radians(-120.)))
    feet = TransverseMercator(WGS84, ProjectionParameters(central_meridian=math.radians(-120.), unit='us-ft'))

    lat, lon = math.radians(37.), math.radians(-121.)
    coord_m, coord_ft = meters.forward(lat, lon), feet.forward(lat, lon)
    assert coord_ft.unit == 'us-ft'
    assert coord_ft.northing * 1200 / 3937 == pytest.approx(coord_m.northing, abs=1e-6)
    assert coord_ft.easting * 1200 / 3937 == pytest.approx(coord_m.easting, abs=1e-6)

    result = feet.inverse(*coord_ft.to_float())
    assert result == pytest.approx((lat, lon), abs=1e-9)

    with pytest.raises(InvalidParameterError):
        _ = feet.inverse_point(coord_m)


def test_natural_coordinates():
    tm = _gauss_krueger(20)
    assert tm.natural_coordinates(3_500_000., 20_512_345.) == pytest.approx((3_500_000., 12_345.))
    assert tm.grid_coordinates(3_500_000., 12_345.) == pytest.approx((3_500_000., 20_512_345.))

    utm = _utm(50, south=True)
    x, y = utm.natural_coordinates(6_000_000., 400_000.)
    assert x == pytest.approx(-4_000_000. / 0.9996)
    assert y == pytest.approx(-100_000. / 0.9996)
    assert utm.grid_coordinates(x, y) == pytest.approx((6_000_000., 400_000.))

    # Easting from another zone
    with pytest.raises(InvalidParameterError):
        _ = tm.natural_coordinates(3_500_000., 21_512_345.)

    # West of the false easting the prefix digit reads as the previous zone
    lat, lon = 0., math.radians(112.)
    result = tm.forward(lat, lon)
    assert 19_900_000. < result.easting < 20_000_000.
    assert zone_from_easting(result.easting) == 19
    _, y = tm.natural_coordinates(*result.to_float())
    assert y == pytest.approx(result.easting - 20_500_000.)
    assert tm.inverse(*result.to_float()) == pytest.approx((lat, lon), abs=1e-9)

    with pytest.raises(InvalidParameterError):
        _ = tm.natural_coordinates(3_500_000., 19_500_000.)


def test_projection_domain():
    utm = _utm(31)
    with pytest.raises(DomainError):
        _ = utm.forward(math.radians(89.995), math.radians(3.))

    with pytest.raises(DomainError):
        _ = utm.forward(0., math.radians(13.))

    # Beyond a pole
    with pytest.raises(DomainError):
        _ = utm.inverse(12_000_000., 500_000.)

    # Too far east of the central meridian
    with pytest.raises(DomainError):
        _ = utm.inverse(0., 2_500_000.)


def test_projection_wide_zone_warning(caplog, monkeypatch):
    monkeypatch.setattr('geodatum.utils.logging._WARNINGS', set())
    _ = _utm(31).forward(math.radians(10.), math.radians(8.))
    assert 'Projecting points more than 3.5 degrees from the central meridian' in caplog.text


def test_scale_factor_at():
    utm = _utm(31)
    assert utm.scale_factor_at(math.radians(45.), math.radians(3.)) == pytest.approx(0.9996)

    # Against the numerical derivative of the projection along the parallel
    lat, lon, step = math.radians(45.), math.radians(5.5), 1e-6
    n1, e1 = utm.natural_forward(lat, lon - step)
    n2, e2 = utm.natural_forward(lat, lon + step)
    numerical = 0.9996 * math.hypot(n2 - n1, e2 - e1) / (WGS84.parallel_radius(lat) * 2 * step)
    assert utm.scale_factor_at(lat, lon) == pytest.approx(numerical, rel=1e-7)
    assert utm.scale_factor_at(lat, lon) > 0.9996


def test_meridian_convergence():
    tm = _gauss_krueger(20)
    assert tm.meridian_convergence(math.radians(30.), math.radians(117.)) == 0.

    # Grid bearing of true north, measured numerically
    lat, lon, step = math.radians(30.), math.radians(119.), 1e-6
    x1, y1 = tm.natural_forward(lat - step, lon)
    x2, y2 = tm.natural_forward(lat + step, lon)
    gamma = tm.meridian_convergence(lat, lon)
    assert gamma > 0.
    assert gamma == pytest.approx(math.atan2(-(y2 - y1), x2 - x1), abs=1e-9)

    # Mirrored west of the central meridian and in the southern hemisphere
    assert tm.meridian_convergence(lat, math.radians(115.)) == pytest.approx(-gamma)
    assert tm.meridian_convergence(-lat, lon) == pytest.approx(-gamma)


def test_direction_correction():
    tm = _gauss_krueger(20)
    lat1, lon1 = math.radians(30.), math.radians(119.)

    for az_deg in (0., 30., 100., 225.):
        azimuth = math.radians(az_deg)
        lat2, lon2, _ = vincenty_direct(CGCS2000, lat1, lon1, 20_000., azimuth)

        n1, e1 = tm.forward(lat1, lon1).to_float()
        n2, e2 = tm.forward(lat2, lon2).to_float()
        chord = math.atan2(e2 - e1, n2 - n1)

        delta = tm.direction_correction(lat1, lon1, lat2, lon2)
        expected = azimuth - tm.meridian_convergence(lat1, lon1) + delta
        assert wrap_pi(chord - expected) == pytest.approx(0., abs=5e-7)

    # Lines heading north, east of the central meridian, bow away from it
    lat2, lon2, _ = vincenty_direct(CGCS2000, lat1, lon1, 20_000., 0.)
    assert tm.direction_correction(lat1, lon1, lat2, lon2) < 0.


def test_gauss_krueger_zone():
    assert gauss_krueger_zone(math.radians(117.)) == 20
    assert gauss_krueger_zone(math.radians(117.), 3) == 39
    assert gauss_krueger_zone(math.radians(119.2), 3) == 40
    assert gauss_krueger_zone(math.radians(0.5), 3) == 120
    assert gauss_krueger_zone(math.radians(1.)) == 1
    assert gauss_krueger_zone(math.radians(-1.)) == 60
    assert gauss_krueger_zone(math.radians(-179.)) == 31

    with pytest.raises(InvalidParameterError):
        _ = gauss_krueger_zone(0., 4)


def test_gauss_krueger_central_meridian():
    assert gauss_krueger_central_meridian(20) == pytest.approx(math.radians(117.))
    assert gauss_krueger_central_meridian(39, 3) == pytest.approx(math.radians(117.))
    assert gauss_krueger_central_meridian(60) == pytest.approx(math.radians(-3.))
    assert gauss_krueger_central_meridian(120, 3) == pytest.approx(0., abs=1e-12)

    with pytest.raises(InvalidParameterError):
        _ = gauss_krueger_central_meridian(61)

    with pytest.raises(InvalidParameterError):
        _ = gauss_krueger_central_meridian(0, 3)


def test_gauss_krueger_parameters():
    params = gauss_krueger_parameters(20)
    assert params.scale_factor == 1.
    assert params.false_easting == 500_000.
    assert params.false_northing == 0.
    assert params.zone == 20
    assert params.zone_width == 6
    assert params.zone_prefix

    coord = _gauss_krueger(20).forward(math.radians(30.), math.radians(117.))
    assert coord.easting == pytest.approx(20_500_000.)

    coord = _gauss_krueger(20, prefix=False).forward(math.radians(30.), math.radians(117.))
    assert coord.easting == pytest.approx(500_000.)


def test_zone_from_easting():
    assert zone_from_easting(20_512_345.) == 20
    assert zone_from_easting(512_345.) == 0
    assert natural_easting(20_512_345.) == pytest.approx(12_345.)
    assert natural_easting(12_345.) == 12_345.


def test_rezone():
    lat, lon = math.radians(30.), math.radians(119.9)
    zone20, zone21 = _gauss_krueger(20), _gauss_krueger(21)
    coord = zone20.forward(lat, lon)

    expected = zone21.forward(lat, lon)
    result = rezone(zone20, zone21, coord.northing, coord.easting)
    assert result.to_float() == pytest.approx(expected.to_float(), abs=1e-3)
    assert zone_from_easting(result.easting) == 21

    result = to_adjacent_zone(zone20, coord.northing, coord.easting)
    assert result.to_float() == pytest.approx(expected.to_float(), abs=1e-3)

    back = to_adjacent_zone(zone21, result.northing, result.easting, east=False)
    assert back.to_float() == pytest.approx(coord.to_float(), abs=1e-3)

    with pytest.raises(InvalidParameterError):
        _ = rezone(zone20, TransverseMercator(WGS84, gauss_krueger_parameters(21)), *coord.to_float())


def test_adjacent_zone_wraps():
    zone1 = _gauss_krueger(1)
    coord = zone1.forward(math.radians(10.), math.radians(0.2))
    result = to_adjacent_zone(zone1, coord.northing, coord.easting, east=False)
    assert zone_from_easting(result.easting) == 60
    assert result.to_float() == pytest.approx(
        _gauss_krueger(60).forward(math.radians(10.), math.radians(0.2)).to_float(), abs=1e-3
    )


def test_six_and_three_degree_zones():
    lat, lon = math.radians(30.), math.radians(119.2)
    six = _gauss_krueger(20)
    coord = six.forward(lat, lon)

    result = six_to_three_zone(six, coord.northing, coord.easting)
    assert zone_from_easting(result.easting) == 40
    assert result.to_float() == pytest.approx(_gauss_krueger(40, 3).forward(lat, lon).to_float(), abs=1e-3)

    back = three_to_six_zone(_gauss_krueger(40, 3), result.northing, result.easting)
    assert back.to_float() == pytest.approx(coord.to_float(), abs=1e-3)

    with pytest.raises(InvalidParameterError):
        _ = three_to_six_zone(six, coord.northing, coord.easting)

    with pytest.raises(InvalidParameterError):
        _ = to_adjacent_zone(TransverseMercator(WGS84, ProjectionParameters()), 0., 0.)


def test_utm_zone():
    assert utm_zone(math.radians(52.2), math.radians(0.1)) == 31
    assert utm_zone(math.radians(-33.9), math.radians(18.4)) == 34
    assert utm_zone(0., math.radians(179.9)) == 60
    assert utm_zone(0., math.pi) == 1
    assert utm_zone(0., -math.pi) == 1

    # Norway
    assert utm_zone(math.radians(60.), math.radians(5.)) == 32
    assert utm_zone(math.radians(60.), math.radians(2.)) == 31

    # Svalbard
    assert utm_zone(math.radians(78.), math.radians(5.)) == 31
    assert utm_zone(math.radians(78.), math.radians(10.)) == 33
    assert utm_zone(math.radians(78.), math.radians(25.)) == 35
    assert utm_zone(math.radians(78.), math.radians(40.)) == 37

    with pytest.raises(DomainError):
        _ = utm_zone(math.radians(85.), 0.)

    with pytest.raises(DomainError):
        _ = utm_zone(math.radians(-80.5), 0.)


def test_utm_latitude_band():
    assert utm_latitude_band(math.radians(52.2)) == 'U'
    assert utm_latitude_band(0.) == 'N'
    assert utm_latitude_band(math.radians(-0.1)) == 'M'
    assert utm_latitude_band(math.radians(-80.)) == 'C'
    assert utm_latitude_band(math.radians(75.)) == 'X'
    assert utm_latitude_band(math.radians(84.)) == 'X'

    with pytest.raises(DomainError):
        _ = utm_latitude_band(math.radians(84.5))


def test_utm_parameters():
    assert utm_central_meridian(31) == pytest.approx(math.radians(3.))
    assert utm_central_meridian(1) == pytest.approx(math.radians(-177.))

    params = utm_parameters(31)
    assert params.scale_factor == 0.9996
    assert params.false_easting == 500_000.
    assert params.false_northing == 0.
    assert not params.zone_prefix
    assert utm_parameters(31, south=True).false_northing == 10_000_000.

    with pytest.raises(InvalidParameterError):
        _ = utm_central_meridian(0)

    with pytest.raises(InvalidParameterError):
        _ = utm_parameters(61)
