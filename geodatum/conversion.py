"""
Conversions between geodetic, geocentric and topocentric coordinates, and between
linear units
"""
__all__ = [
    'blh_to_xyz', 'convert_from_meters', 'convert_to_meters', 'geocentric_to_geodetic',
    'geocentric_to_topocentric', 'geodetic_to_geocentric', 'polar_to_topocentric',
    'topocentric_to_geocentric', 'topocentric_to_polar', 'xyz_to_blh'
]

import math
from typing import Tuple

import numpy as np

from geodatum._const import XYZ_MAX_ITERATIONS, XYZ_TOLERANCE
from geodatum.coordinates import (
    GeodeticCoord, PolarCoord, SpaceRectangularCoord, TopocentricCoord
)
from geodatum.ellipsoid import Ellipsoid
from geodatum.exceptions import ConvergenceError, InvalidParameterError
from geodatum.utils.functions import wrap_two_pi
from geodatum.utils.logging import LOGGER

# Meters per unit
_LINEAR_UNITS = {
    'm': 1.,
    'km': 1000.,
    'mi': 1609.344,
    'ft': 0.3048,
    'us-ft': 1200 / 3937,
    'nmi': 1852.,
    'yd': 0.9144,
}


def _unit_factor(unit: str) -> float:
    try:
        return _LINEAR_UNITS[unit.lower()]
    except KeyError as exc:
        raise InvalidParameterError(
            f"Unknown linear unit '{unit}'. Options: {list(_LINEAR_UNITS.keys())}"
        ) from exc


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', kilometer = 'km', mile = 'mi',
        feet = 'ft', US survey feet = 'us-ft', nautical mile = 'nmi', yard = 'yd').

    Returns:
        float: The distance in meters.
    """
    return distance * _unit_factor(unit)


def convert_from_meters(distance: float, unit: str) -> float:
    """
    Converts a distance in meters to another unit. See convert_to_meters for the
    recognized units.
    """
    return distance / _unit_factor(unit)


def geodetic_to_geocentric(
    ellipsoid: Ellipsoid,
    latitude: float,
    longitude: float,
    height: float = 0.
) -> Tuple[float, float, float]:
    """
    Converts geodetic latitude, longitude and height to earth-centered cartesian X, Y, Z.

    Args:
        ellipsoid:
            The reference ellipsoid

        latitude:
            Geodetic latitude, in radians

        longitude:
            Longitude, in radians

        height: (Default 0)
            Ellipsoidal height, in meters

    Returns:
        An (X, Y, Z) tuple, in meters
    """
    latitude, longitude = float(latitude), float(longitude)
    n = ellipsoid.prime_vertical_radius(latitude)
    cos_lat = math.cos(latitude)

    return (
        (n + height) * cos_lat * math.cos(longitude),
        (n + height) * cos_lat * math.sin(longitude),
        (n * (1 - ellipsoid.e2) + height) * math.sin(latitude),
    )


def geocentric_to_geodetic(
    ellipsoid: Ellipsoid,
    x: float,
    y: float,
    z: float
) -> Tuple[float, float, float]:
    """
    Converts earth-centered cartesian X, Y, Z to geodetic latitude, longitude and height.

    Latitude is solved by fixed-point iteration on the ellipsoid normal, starting from
    the latitude of the point's projection onto the ellipsoid surface.

    Args:
        ellipsoid:
            The reference ellipsoid

        x, y, z:
            Geocentric coordinates, in meters

    Returns:
        A (latitude, longitude, height) tuple in radians and meters
    """
    p = math.hypot(x, y)
    longitude = math.atan2(y, x)
    e2 = ellipsoid.e2

    if p == 0.:
        if z == 0.:
            raise ConvergenceError('Latitude is undefined at the center of the ellipsoid')
        # On the polar axis
        return math.copysign(math.pi / 2, z), 0., abs(z) - ellipsoid.b

    latitude = math.atan2(z, p * (1 - e2))
    for iteration in range(1, XYZ_MAX_ITERATIONS + 1):
        n = ellipsoid.prime_vertical_radius(latitude)
        updated = math.atan2(z + e2 * n * math.sin(latitude), p)
        delta = updated - latitude
        latitude = updated
        if abs(delta) < XYZ_TOLERANCE:
            LOGGER.debug('Geodetic latitude converged after %d iterations', iteration)
            break
    else:
        raise ConvergenceError(
            f'Geodetic latitude for ({x}, {y}, {z}) did not converge '
            f'within {XYZ_MAX_ITERATIONS} iterations',
            XYZ_MAX_ITERATIONS
        )

    n = ellipsoid.prime_vertical_radius(latitude)
    if abs(latitude) < math.pi / 4:
        height = p / math.cos(latitude) - n
    else:
        height = z / math.sin(latitude) - n * (1 - e2)

    return latitude, longitude, height


def blh_to_xyz(ellipsoid: Ellipsoid, coord: GeodeticCoord) -> SpaceRectangularCoord:
    """Converts a GeodeticCoord to a SpaceRectangularCoord on the given ellipsoid"""
    return SpaceRectangularCoord(*geodetic_to_geocentric(ellipsoid, *coord.to_float()))


def xyz_to_blh(ellipsoid: Ellipsoid, coord: SpaceRectangularCoord) -> GeodeticCoord:
    """Converts a SpaceRectangularCoord to a GeodeticCoord on the given ellipsoid"""
    return GeodeticCoord(*geocentric_to_geodetic(ellipsoid, *coord.to_float()))


def _enu_rotation(latitude: float, longitude: float) -> np.ndarray:
    """Rotation taking geocentric deltas to local (north, east, up)"""
    sin_b, cos_b = math.sin(latitude), math.cos(latitude)
    sin_l, cos_l = math.sin(longitude), math.cos(longitude)
    return np.array([
        [-sin_b * cos_l, -sin_b * sin_l, cos_b],
        [-sin_l, cos_l, 0.],
        [cos_b * cos_l, cos_b * sin_l, sin_b],
    ])


def geocentric_to_topocentric(
    ellipsoid: Ellipsoid,
    origin: GeodeticCoord,
    point: SpaceRectangularCoord
) -> TopocentricCoord:
    """
    Expresses a geocentric point in the local north/east/up frame of an origin.

    Args:
        ellipsoid:
            The reference ellipsoid of the origin

        origin:
            The geodetic origin of the local frame

        point:
            The geocentric point to convert

    Returns:
        TopocentricCoord
    """
    origin_xyz = np.array(geodetic_to_geocentric(ellipsoid, *origin.to_float()))
    rotation = _enu_rotation(origin.latitude.radians, origin.longitude.radians)
    north, east, up = rotation @ (np.array(point.to_float()) - origin_xyz)
    return TopocentricCoord(north, east, up)


def topocentric_to_geocentric(
    ellipsoid: Ellipsoid,
    origin: GeodeticCoord,
    point: TopocentricCoord
) -> SpaceRectangularCoord:
    """Inverse of geocentric_to_topocentric"""
    origin_xyz = np.array(geodetic_to_geocentric(ellipsoid, *origin.to_float()))
    rotation = _enu_rotation(origin.latitude.radians, origin.longitude.radians)
    x, y, z = origin_xyz + rotation.T @ np.array(point.to_float())
    return SpaceRectangularCoord(x, y, z)


def topocentric_to_polar(point: TopocentricCoord) -> PolarCoord:
    """Converts a north/east/up coordinate to slant range, azimuth and elevation"""
    horizontal = math.hypot(point.north, point.east)
    slant = math.hypot(horizontal, point.up)
    if slant == 0.:
        return PolarCoord(0., 0., 0.)

    azimuth = wrap_two_pi(math.atan2(point.east, point.north))
    elevation = math.atan2(point.up, horizontal)
    return PolarCoord(slant, azimuth, elevation)


def polar_to_topocentric(point: PolarCoord) -> TopocentricCoord:
    """Converts slant range, azimuth and elevation to a north/east/up coordinate"""
    horizontal = point.range * math.cos(point.elevation.radians)
    return TopocentricCoord(
        horizontal * math.cos(point.azimuth.radians),
        horizontal * math.sin(point.azimuth.radians),
        point.range * math.sin(point.elevation.radians),
    )
