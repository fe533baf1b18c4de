"""
Reduction of ground observations to the ellipsoid.

Directions observed with a theodolite are referred to the plumb line and to the normal
section through the target. Before they can be used on the ellipsoid, they receive
three small corrections:

    deflection_correction       plumb line to ellipsoid normal at the station
    height_correction           target height above the ellipsoid
    normal_section_correction   normal section to geodesic

Zenith distances, slope distances and astronomic azimuths have their own reductions.

Angles are radians, except the deflection of the vertical components (xi, eta), which
are arc-seconds as they are usually tabulated. Distances and heights are meters.
"""

__all__ = [
    'deflection_correction', 'distance_to_ellipsoid', 'geodetic_azimuth',
    'geodetic_azimuth_from_deflection', 'height_correction',
    'normal_section_correction', 'zenith_to_ellipsoid',
]

import math

from geodatum._const import ARCSEC_TO_RAD
from geodatum.ellipsoid import Ellipsoid
from geodatum.exceptions import InvalidParameterError

# Empirical height and latitude term of the slope distance reduction, per meter of mean
# height and square meter of distance
_DISTANCE_HEIGHT_TERM = 1.25e-16


def deflection_correction(xi: float, eta: float, azimuth: float, vertical_angle: float) -> float:
    """
    Correction of an observed direction for the deflection of the vertical at the
    station.

    Args:
        xi:
            Meridian (north-south) component of the deflection, in arc-seconds

        eta:
            Prime vertical (east-west) component of the deflection, in arc-seconds

        azimuth:
            Geodetic azimuth of the target, in radians

        vertical_angle:
            Vertical angle (elevation) of the target, in radians

    Returns:
        The correction, in radians
    """
    xi, eta = xi * ARCSEC_TO_RAD, eta * ARCSEC_TO_RAD
    return -(xi * math.sin(azimuth) - eta * math.cos(azimuth)) * math.tan(vertical_angle)


def height_correction(
    ellipsoid: Ellipsoid,
    latitude2: float,
    height2: float,
    azimuth: float
) -> float:
    """
    Correction of an observed direction for the height of the target above the
    ellipsoid. The normals at the station and at the target are skew lines, so a
    raised target is seen in a slightly different normal section.

    Args:
        ellipsoid:
            The reference ellipsoid

        latitude2:
            Geodetic latitude of the target, in radians

        height2:
            Ellipsoidal height of the target, in meters

        azimuth:
            Geodetic azimuth from the station to the target, in radians

    Returns:
        The correction, in radians
    """
    m = ellipsoid.meridian_radius(latitude2)
    return ellipsoid.e2 * height2 * math.cos(latitude2) ** 2 * math.sin(2 * azimuth) / (2 * m)


def normal_section_correction(
    ellipsoid: Ellipsoid,
    distance: float,
    latitude1: float,
    azimuth: float
) -> float:
    """
    Correction from the normal section through the target to the geodesic.

    Args:
        ellipsoid:
            The reference ellipsoid

        distance:
            Length of the line, in meters

        latitude1:
            Geodetic latitude of the station, in radians

        azimuth:
            Geodetic azimuth from the station to the target, in radians

    Returns:
        The correction, in radians
    """
    n = ellipsoid.prime_vertical_radius(latitude1)
    return (
        -ellipsoid.e2 * distance ** 2 * math.cos(latitude1) ** 2 * math.sin(2 * azimuth)
        / (12 * n ** 2)
    )


def zenith_to_ellipsoid(xi: float, eta: float, zenith: float, azimuth: float) -> float:
    """
    Reduces an observed zenith distance from the plumb line to the ellipsoid normal.

    Args:
        xi, eta:
            Components of the deflection of the vertical, in arc-seconds

        zenith:
            Observed zenith distance, in radians

        azimuth:
            Geodetic azimuth of the target, in radians

    Returns:
        The zenith distance relative to the ellipsoid normal, in radians
    """
    xi, eta = xi * ARCSEC_TO_RAD, eta * ARCSEC_TO_RAD
    return zenith + xi * math.cos(azimuth) + eta * math.sin(azimuth)


def distance_to_ellipsoid(
    ellipsoid: Ellipsoid,
    distance: float,
    height1: float,
    height2: float,
    latitude: float,
    azimuth: float
) -> float:
    """
    Reduces a measured slope distance between two stations to the length of the
    geodesic on the ellipsoid.

    The slope distance is first reduced to the chord at mean height, scaled down to the
    ellipsoid by the radius of curvature in the direction of the line, and finally
    lengthened from chord to arc.

    Args:
        ellipsoid:
            The reference ellipsoid

        distance:
            The measured slope distance, in meters

        height1, height2:
            Ellipsoidal heights of the station and the target, in meters

        latitude:
            Geodetic latitude of the station, in radians

        azimuth:
            Geodetic azimuth from the station to the target, in radians

    Returns:
        float, in meters
    """
    rise = height2 - height1
    if distance < 0 or abs(rise) > distance:
        raise InvalidParameterError(
            f'Slope distance {distance} m cannot span a height difference of {rise} m'
        )

    chord = math.sqrt(distance ** 2 - rise ** 2)
    mean_height = (height1 + height2) / 2
    cos_a = math.cos(azimuth)
    radius = ellipsoid.prime_vertical_radius(latitude) / math.sqrt(
        1 + ellipsoid.e2 * math.cos(latitude) ** 2 * cos_a ** 2
    )

    return (
        chord * radius / (radius + mean_height)
        + distance ** 3 / (24 * radius ** 2)
        + _DISTANCE_HEIGHT_TERM * mean_height * distance ** 2 * math.sin(2 * latitude) * cos_a
    )


def geodetic_azimuth(
    azimuth: float,
    astronomic_latitude: float,
    astronomic_longitude: float,
    geodetic_longitude: float
) -> float:
    """
    Converts an astronomic azimuth to a geodetic azimuth with the Laplace equation.

    Args:
        azimuth:
            Astronomic azimuth, in radians

        astronomic_latitude, astronomic_longitude:
            Astronomic position of the station, in radians

        geodetic_longitude:
            Geodetic longitude of the station, in radians

    Returns:
        The geodetic azimuth, in radians
    """
    return azimuth - (astronomic_longitude - geodetic_longitude) * math.sin(astronomic_latitude)


def geodetic_azimuth_from_deflection(azimuth: float, astronomic_latitude: float, eta: float) -> float:
    """
    Converts an astronomic azimuth to a geodetic azimuth from the prime vertical
    component of the deflection of the vertical (eta, arc-seconds).
    """
    return azimuth - eta * ARCSEC_TO_RAD * math.tan(astronomic_latitude)
