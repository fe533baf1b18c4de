
import pytest

from geodatum import GeoPoint
from geodatum.geodesic import vincenty_inverse
from geodatum.utils.functions import wrap_pi


def assert_points_equal(p1: GeoPoint, p2: GeoPoint, abs_tol=1e-9):
    """
    Asserts that two points are equal within a specified absolute tolerance, in radians.
    Longitudes are compared across the antimeridian.

    Args:
        p1: The first GeoPoint
        p2: The second GeoPoint
        abs_tol: The absolute tolerance for floating point comparison.
    """
    assert p1.latitude.radians == pytest.approx(p2.latitude.radians, abs=abs_tol)
    assert wrap_pi(p1.longitude.radians - p2.longitude.radians) == pytest.approx(0., abs=abs_tol)


def separation_meters(p1: GeoPoint, p2: GeoPoint) -> float:
    """Geodesic distance between two nearby points on the same ellipsoid"""
    return vincenty_inverse(p1.ellipsoid, *p1.to_float(), *p2.to_float())[0]
