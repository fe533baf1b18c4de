"""
Direct and inverse geodesic problem solvers.

Four interchangeable solutions are provided, each as a pair of plain functions
sharing one contract:

    <name>_direct(ellipsoid, latitude, longitude, distance, azimuth)
        -> (latitude, longitude, inverse_azimuth)

    <name>_inverse(ellipsoid, latitude1, longitude1, latitude2, longitude2)
        -> (distance, azimuth, inverse_azimuth)

Angles are radians, distances meters. The inverse azimuth is the azimuth at the end
point looking back along the geodesic toward the start, within [0, 2pi).

GeodesicSolution selects a solver pair by GeodesicMethod.
"""

__all__ = [
    'Geodesic', 'GeodesicMethod', 'GeodesicSolution',
    'bessel_direct', 'bessel_inverse', 'gauss_direct', 'gauss_inverse',
    'harvesine_direct', 'harvesine_inverse', 'vincenty_direct', 'vincenty_inverse',
]

from enum import Enum
import math
from typing import Callable, Dict, Optional, Tuple, Union

from geodatum._const import (
    BESSEL_MAX_ITERATIONS, BESSEL_TOLERANCE, EPSILON4, GAUSS_MAX_ITERATIONS,
    GAUSS_NOMINAL_DISTANCE, VINCENTY_MAX_ITERATIONS, VINCENTY_TOLERANCE
)
from geodatum.angles import Angle
from geodatum.coordinates import GeoPoint
from geodatum.ellipsoid import Ellipsoid, WGS84
from geodatum.exceptions import ConvergenceError, InvalidParameterError
from geodatum.utils.functions import wrap_pi, wrap_two_pi
from geodatum.utils.logging import LOGGER, warn_once

_AngleLike = Union[float, int, Angle]
_DirectResult = Tuple[float, float, float]
_InverseResult = Tuple[float, float, float]


# -------------------------------------------------------------------------
# Vincenty (ellipsoidal, reduced latitudes on the auxiliary sphere)
# -------------------------------------------------------------------------

def vincenty_direct(
    ellipsoid: Ellipsoid,
    latitude: _AngleLike,
    longitude: _AngleLike,
    distance: float,
    azimuth: _AngleLike,
) -> _DirectResult:
    """
    Solve the direct problem using Vincenty's formulae.

    Args:
        ellipsoid:
            The reference ellipsoid

        latitude, longitude:
            The start point, in radians

        distance:
            Length of the geodesic, in meters

        azimuth:
            Azimuth at the start point, in radians

    Returns:
        (latitude, longitude, inverse azimuth) of the end point, in radians
    """
    lat1, lon1, alpha1 = float(latitude), float(longitude), float(azimuth)
    if distance == 0:
        return lat1, lon1, wrap_two_pi(alpha1 + math.pi)

    f, b = ellipsoid.f, ellipsoid.b
    sin_alpha1, cos_alpha1 = math.sin(alpha1), math.cos(alpha1)

    tan_u1 = (1 - f) * math.tan(lat1)
    cos_u1 = 1 / math.sqrt(1 + tan_u1 ** 2)
    sin_u1 = tan_u1 * cos_u1

    sigma1 = math.atan2(tan_u1, cos_alpha1)
    sin_alpha = cos_u1 * sin_alpha1
    cos_sq_alpha = 1 - sin_alpha ** 2
    u_sq = cos_sq_alpha * ellipsoid.ep2

    big_a = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    big_b = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))

    sigma = distance / (b * big_a)
    for iteration in range(1, VINCENTY_MAX_ITERATIONS + 1):
        cos_2sigma_m = math.cos(2 * sigma1 + sigma)
        sin_sigma, cos_sigma = math.sin(sigma), math.cos(sigma)
        delta_sigma = big_b * sin_sigma * (
            cos_2sigma_m + big_b / 4 * (
                cos_sigma * (-1 + 2 * cos_2sigma_m ** 2) -
                big_b / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma ** 2) * (-3 + 4 * cos_2sigma_m ** 2)
            )
        )
        sigma_prev = sigma
        sigma = distance / (b * big_a) + delta_sigma
        if abs(sigma - sigma_prev) < VINCENTY_TOLERANCE:
            LOGGER.debug('Vincenty direct converged after %d iterations', iteration)
            break
    else:
        raise ConvergenceError(
            f'Vincenty direct solution did not converge within {VINCENTY_MAX_ITERATIONS} iterations',
            VINCENTY_MAX_ITERATIONS
        )

    sin_sigma, cos_sigma = math.sin(sigma), math.cos(sigma)
    cos_2sigma_m = math.cos(2 * sigma1 + sigma)

    tmp = sin_u1 * sin_sigma - cos_u1 * cos_sigma * cos_alpha1
    lat2 = math.atan2(
        sin_u1 * cos_sigma + cos_u1 * sin_sigma * cos_alpha1,
        (1 - f) * math.sqrt(sin_alpha ** 2 + tmp ** 2)
    )
    lambda_val = math.atan2(
        sin_sigma * sin_alpha1,
        cos_u1 * cos_sigma - sin_u1 * sin_sigma * cos_alpha1
    )
    c_val = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))
    big_l = lambda_val - (1 - c_val) * f * sin_alpha * (
        sigma + c_val * sin_sigma * (cos_2sigma_m + c_val * cos_sigma * (-1 + 2 * cos_2sigma_m ** 2))
    )

    # Forward azimuth at the end point
    alpha2 = math.atan2(sin_alpha, -tmp)

    return lat2, wrap_pi(lon1 + big_l), wrap_two_pi(alpha2 + math.pi)


def vincenty_inverse(
    ellipsoid: Ellipsoid,
    latitude1: _AngleLike,
    longitude1: _AngleLike,
    latitude2: _AngleLike,
    longitude2: _AngleLike,
) -> _InverseResult:
    """
    Solve the inverse problem using Vincenty's formulae.

    Vincenty's iteration on the auxiliary longitude is not guaranteed to converge for
    nearly antipodal points; such inputs raise ConvergenceError rather than returning an
    unreliable answer. Callers may fall back to another solver.

    Args:
        ellipsoid:
            The reference ellipsoid

        latitude1, longitude1:
            The start point, in radians

        latitude2, longitude2:
            The end point, in radians

    Returns:
        (distance, azimuth, inverse azimuth) in meters and radians
    """
    lat1, lat2 = float(latitude1), float(latitude2)
    big_l = wrap_pi(float(longitude2) - float(longitude1))
    if lat1 == lat2 and big_l == 0.:
        return 0., 0., 0.

    f, b = ellipsoid.f, ellipsoid.b

    # The auxiliary longitude may exceed pi within the antipodal lune
    if abs(big_l) > math.pi * (1 - f) and abs(lat1 + lat2) < math.pi * f:
        raise ConvergenceError(
            'Vincenty inverse solution is not guaranteed to converge for nearly antipodal '
            f'points ({math.degrees(lat1)}, {math.degrees(float(longitude1))}) and '
            f'({math.degrees(lat2)}, {math.degrees(float(longitude2))})'
        )

    u1 = math.atan((1 - f) * math.tan(lat1))
    u2 = math.atan((1 - f) * math.tan(lat2))
    sin_u1, cos_u1 = math.sin(u1), math.cos(u1)
    sin_u2, cos_u2 = math.sin(u2), math.cos(u2)

    lambda_val = big_l
    for iteration in range(1, VINCENTY_MAX_ITERATIONS + 1):
        sin_lambda, cos_lambda = math.sin(lambda_val), math.cos(lambda_val)

        # eq. 14
        sin_sigma = math.sqrt((cos_u2 * sin_lambda) ** 2 +
                              (cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lambda) ** 2)
        if sin_sigma == 0:
            return 0., 0., 0.  # Coincident points

        # eq. 15, 16
        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lambda
        sigma = math.atan2(sin_sigma, cos_sigma)

        # eq. 17
        sin_alpha = cos_u1 * cos_u2 * sin_lambda / sin_sigma
        cos_sq_alpha = 1 - sin_alpha ** 2

        # eq. 18; equatorial lines have cos_sq_alpha == 0
        cos_2sigma_m = cos_sigma - 2 * sin_u1 * sin_u2 / cos_sq_alpha if cos_sq_alpha else 0.

        # eq. 10, 11
        c_val = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))
        lambda_prev = lambda_val
        lambda_val = big_l + (1 - c_val) * f * sin_alpha * (
            sigma + c_val * sin_sigma * (cos_2sigma_m + c_val * cos_sigma * (-1 + 2 * cos_2sigma_m ** 2))
        )

        if abs(lambda_val) > math.pi:
            raise ConvergenceError(
                'Vincenty inverse solution diverged (auxiliary longitude exceeds pi)',
                iteration
            )

        if abs(lambda_val - lambda_prev) < VINCENTY_TOLERANCE:
            LOGGER.debug('Vincenty inverse converged after %d iterations', iteration)
            break
    else:
        raise ConvergenceError(
            f'Vincenty inverse solution did not converge within {VINCENTY_MAX_ITERATIONS} iterations',
            VINCENTY_MAX_ITERATIONS
        )

    u_sq = cos_sq_alpha * ellipsoid.ep2
    big_a = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    big_b = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    delta_sigma = big_b * sin_sigma * (
        cos_2sigma_m + big_b / 4 * (
            cos_sigma * (-1 + 2 * cos_2sigma_m ** 2) -
            big_b / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma ** 2) * (-3 + 4 * cos_2sigma_m ** 2)
        )
    )
    distance = b * big_a * (sigma - delta_sigma)

    # eq. 20
    sin_lambda, cos_lambda = math.sin(lambda_val), math.cos(lambda_val)
    alpha1 = math.atan2(cos_u2 * sin_lambda, cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lambda)
    alpha2 = math.atan2(cos_u1 * sin_lambda, -sin_u1 * cos_u2 + cos_u1 * sin_u2 * cos_lambda)

    return distance, wrap_two_pi(alpha1), wrap_two_pi(alpha2 + math.pi)


# -------------------------------------------------------------------------
# Bessel (ellipsoidal, series in the equatorial azimuth)
# -------------------------------------------------------------------------

def _sin_series(coefficients: Tuple[float, ...], x: float) -> float:
    """Sum of c_j sin(2 j x), j counting from 1"""
    return sum(c * math.sin(2 * j * x) for j, c in enumerate(coefficients, start=1))


def _bessel_distance_coefficients(ellipsoid: Ellipsoid, cos_sq_m: float):
    """
    Coefficients relating spherical arc to geodesic length, expanded to the sixth
    power of eps = k^2 / (1 + sqrt(1 + k^2))^2 with k^2 = e'^2 cos^2 m.

    Returns:
        (scale, forward, reverse) where, for arcs sigma measured from the equator
        crossing, s = (tau(sigma) - tau(sigma0)) / scale with
        tau = sigma + sum(forward[j] sin 2j sigma), and
        sigma = tau + sum(reverse[j] sin 2j tau)
    """
    k2 = ellipsoid.ep2 * cos_sq_m
    eps = k2 / (1 + math.sqrt(1 + k2)) ** 2
    eps2 = eps * eps

    a1 = (1 + eps2 * (1 / 4 + eps2 * (1 / 64 + eps2 / 256))) / (1 - eps)
    forward = (
        eps * (-1 / 2 + eps2 * (3 / 16 - eps2 / 32)),
        eps2 * (-1 / 16 + eps2 * (1 / 32 - 9 * eps2 / 2048)),
        eps * eps2 * (-1 / 48 + 3 * eps2 / 256),
        eps2 * eps2 * (-5 / 512 + 3 * eps2 / 512),
        -7 * eps * eps2 * eps2 / 1280,
        -7 * eps2 * eps2 * eps2 / 2048,
    )
    reverse = (
        eps * (1 / 2 + eps2 * (-9 / 32 + 205 * eps2 / 1536)),
        eps2 * (5 / 16 + eps2 * (-37 / 96 + 1335 * eps2 / 4096)),
        eps * eps2 * (29 / 96 - 75 * eps2 / 128),
        eps2 * eps2 * (539 / 1536 - 2391 * eps2 / 2560),
        3467 * eps * eps2 * eps2 / 7680,
        38081 * eps2 * eps2 * eps2 / 61440,
    )
    return 1 / (ellipsoid.b * a1), forward, reverse


def _bessel_longitude_coefficients(ellipsoid: Ellipsoid, cos_sq_m: float):
    """
    Coefficients relating spherical longitude to ellipsoidal longitude. The difference
    is f sin m times the integral of (2 - f) / (1 + (1 - f) sqrt(1 + k^2 sin^2 sigma)),
    expanded here to k^6.

    Returns:
        (secular, periodic): the integral over an arc sigma from sigma0 is
        secular * sigma plus the change in sum(periodic[j] sin 2j sigma)
    """
    f = ellipsoid.f
    k2 = ellipsoid.ep2 * cos_sq_m
    k4 = k2 * k2
    k6 = k4 * k2

    r = (1 - f) / (2 - f)
    c1 = -r / 2
    c2 = r / 8 + r * r / 4
    c3 = -(r / 16 + r * r / 8 + r ** 3 / 8)

    secular = 1 + c1 * k2 / 2 + 3 * c2 * k4 / 8 + 5 * c3 * k6 / 16
    periodic = (
        -(c1 * k2 / 2 + c2 * k4 / 2 + 15 * c3 * k6 / 32) / 2,
        (c2 * k4 / 8 + 3 * c3 * k6 / 16) / 4,
        -c3 * k6 / 32 / 6,
    )
    return f * secular, tuple(f * c for c in periodic)


def _bessel_longitude_correction(
    ellipsoid: Ellipsoid,
    sin_m: float,
    sigma0: float,
    sigma: float
) -> float:
    """Spherical minus ellipsoidal longitude difference along an arc sigma from sigma0"""
    secular, periodic = _bessel_longitude_coefficients(ellipsoid, 1 - sin_m ** 2)
    return sin_m * (
        secular * sigma
        + _sin_series(periodic, sigma0 + sigma)
        - _sin_series(periodic, sigma0)
    )


def bessel_direct(
    ellipsoid: Ellipsoid,
    latitude: _AngleLike,
    longitude: _AngleLike,
    distance: float,
    azimuth: _AngleLike,
) -> _DirectResult:
    """
    Solve the direct problem using Bessel's method.

    The geodesic is mapped to a great circle on the auxiliary sphere of reduced
    latitudes. M is the spherical arc from the equator crossing to the start point and
    m the azimuth at which the great circle crosses the equator. Arc length and
    longitude follow from series in the second eccentricity, solved without iteration.

    Args:
        ellipsoid:
            The reference ellipsoid

        latitude, longitude:
            The start point, in radians

        distance:
            Length of the geodesic, in meters

        azimuth:
            Azimuth at the start point, in radians

    Returns:
        (latitude, longitude, inverse azimuth) of the end point, in radians
    """
    lat1, lon1, a1 = float(latitude), float(longitude), float(azimuth)
    if distance == 0:
        return lat1, lon1, wrap_two_pi(a1 + math.pi)

    f = ellipsoid.f
    u1 = math.atan2((1 - f) * math.sin(lat1), math.cos(lat1))
    sin_u1, cos_u1 = math.sin(u1), math.cos(u1)
    sin_a1, cos_a1 = math.sin(a1), math.cos(a1)

    sin_m = cos_u1 * sin_a1
    cos_sq_m = 1 - sin_m ** 2
    big_m = math.atan2(sin_u1, cos_u1 * cos_a1)

    scale, forward, reverse = _bessel_distance_coefficients(ellipsoid, cos_sq_m)
    tau2 = big_m + _sin_series(forward, big_m) + distance * scale
    sigma = tau2 + _sin_series(reverse, tau2) - big_m

    sin_sigma, cos_sigma = math.sin(sigma), math.cos(sigma)

    # End point on the auxiliary sphere
    sin_u2 = sin_u1 * cos_sigma + cos_u1 * sin_sigma * cos_a1
    cos_u2_cos_a2 = cos_u1 * cos_sigma * cos_a1 - sin_u1 * sin_sigma
    cos_u2 = math.hypot(sin_m, cos_u2_cos_a2)
    lambda_val = math.atan2(sin_sigma * sin_a1, cos_u1 * cos_sigma - sin_u1 * sin_sigma * cos_a1)
    a2 = math.atan2(sin_m, cos_u2_cos_a2)

    lat2 = math.atan2(sin_u2, (1 - f) * cos_u2)

    delta_l = lambda_val - _bessel_longitude_correction(ellipsoid, sin_m, big_m, sigma)

    return lat2, wrap_pi(lon1 + delta_l), wrap_two_pi(a2 + math.pi)


def _bessel_sphere(sin_u1, cos_u1, sin_u2, cos_u2, lambda_val):
    """Great circle quantities for a given auxiliary longitude difference"""
    sin_lambda, cos_lambda = math.sin(lambda_val), math.cos(lambda_val)
    east = cos_u2 * sin_lambda
    north = cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lambda
    sin_sigma = math.hypot(east, north)
    cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lambda
    if sin_sigma == 0:
        raise ConvergenceError('Bessel inverse solution is undefined for exactly antipodal points')

    sigma = math.atan2(sin_sigma, cos_sigma)
    sin_m = cos_u1 * cos_u2 * sin_lambda / sin_sigma
    a1 = math.atan2(east, north)
    big_m = math.atan2(sin_u1, cos_u1 * math.cos(a1))
    return sigma, sin_m, big_m, a1


def bessel_inverse(
    ellipsoid: Ellipsoid,
    latitude1: _AngleLike,
    longitude1: _AngleLike,
    latitude2: _AngleLike,
    longitude2: _AngleLike,
) -> _InverseResult:
    """
    Solve the inverse problem using Bessel's method.

    Points on the same meridian are solved directly from the meridian arc.

    Args:
        ellipsoid:
            The reference ellipsoid

        latitude1, longitude1:
            The start point, in radians

        latitude2, longitude2:
            The end point, in radians

    Returns:
        (distance, azimuth, inverse azimuth) in meters and radians
    """
    lat1, lat2 = float(latitude1), float(latitude2)
    delta_l = wrap_pi(float(longitude2) - float(longitude1))
    if lat1 == lat2 and delta_l == 0.:
        return 0., 0., 0.

    if delta_l == 0.:
        arc = ellipsoid.meridian_arc(lat2) - ellipsoid.meridian_arc(lat1)
        if arc > 0:
            return arc, 0., math.pi
        return -arc, math.pi, 0.

    f = ellipsoid.f
    u1 = math.atan2((1 - f) * math.sin(lat1), math.cos(lat1))
    u2 = math.atan2((1 - f) * math.sin(lat2), math.cos(lat2))
    sin_u1, cos_u1 = math.sin(u1), math.cos(u1)
    sin_u2, cos_u2 = math.sin(u2), math.cos(u2)

    lambda_val = delta_l
    for iteration in range(1, BESSEL_MAX_ITERATIONS + 1):
        sigma, sin_m, big_m, _ = _bessel_sphere(sin_u1, cos_u1, sin_u2, cos_u2, lambda_val)
        lambda_prev = lambda_val
        lambda_val = delta_l + _bessel_longitude_correction(ellipsoid, sin_m, big_m, sigma)
        if abs(lambda_val - lambda_prev) < BESSEL_TOLERANCE:
            LOGGER.debug('Bessel inverse converged after %d iterations', iteration)
            break
    else:
        raise ConvergenceError(
            f'Bessel inverse solution did not converge within {BESSEL_MAX_ITERATIONS} iterations',
            BESSEL_MAX_ITERATIONS
        )

    sigma, sin_m, big_m, a1 = _bessel_sphere(sin_u1, cos_u1, sin_u2, cos_u2, lambda_val)
    scale, forward, _ = _bessel_distance_coefficients(ellipsoid, 1 - sin_m ** 2)
    distance = (sigma + _sin_series(forward, big_m + sigma) - _sin_series(forward, big_m)) / scale

    sin_lambda, cos_lambda = math.sin(lambda_val), math.cos(lambda_val)
    a2 = math.atan2(cos_u1 * sin_lambda, -sin_u1 * cos_u2 + cos_u1 * sin_u2 * cos_lambda)

    return distance, wrap_two_pi(a1), wrap_two_pi(a2 + math.pi)


# -------------------------------------------------------------------------
# Gauss mid-latitude (series about the mean latitude and azimuth)
# -------------------------------------------------------------------------

def _gauss_increments(ellipsoid: Ellipsoid, distance: float, latitude: float, azimuth: float):
    """Latitude, longitude and azimuth increments evaluated at mean arguments"""
    cos_b, tan_b = math.cos(latitude), math.tan(latitude)
    sin_a, cos_a = math.sin(azimuth), math.cos(azimuth)
    sin_a2, cos_a2 = sin_a * sin_a, cos_a * cos_a

    t2 = tan_b * tan_b
    eta2 = ellipsoid.ep2 * cos_b * cos_b
    v2 = 1 + eta2
    sn = distance / ellipsoid.c * math.sqrt(v2)
    sn2 = sn * sn

    d_b = (1 + sn2 / 24 * (sin_a2 * (2 + 3 * t2 + 2 * eta2)
                           + 3 * cos_a2 * eta2 * (t2 - 1 - eta2 - 4 * eta2 * t2))) * sn * v2 * cos_a
    d_l = (1 + sn2 / 24 * (t2 * sin_a2 - cos_a2 * (1 + eta2 - 9 * eta2 * t2))) * sn * sin_a / cos_b
    d_a = (1 + sn2 / 24 * (cos_a2 * (2 + 7 * eta2 + 9 * eta2 * t2 + 5 * eta2 * eta2)
                           + sin_a2 * (2 + t2 + 2 * eta2))) * sn * sin_a * tan_b
    return d_b, d_l, d_a


def gauss_direct(
    ellipsoid: Ellipsoid,
    latitude: _AngleLike,
    longitude: _AngleLike,
    distance: float,
    azimuth: _AngleLike,
) -> _DirectResult:
    """
    Solve the direct problem using Gauss' mid-latitude formulae.

    The increments are evaluated at the mean latitude, longitude and azimuth of the
    line, which are refined until all three settle. Intended for lines up to a few
    hundred kilometers.

    Args:
        ellipsoid:
            The reference ellipsoid

        latitude, longitude:
            The start point, in radians

        distance:
            Length of the geodesic, in meters

        azimuth:
            Azimuth at the start point, in radians

    Returns:
        (latitude, longitude, inverse azimuth) of the end point, in radians
    """
    lat1, lon1, a1 = float(latitude), float(longitude), float(azimuth)
    if distance == 0:
        return lat1, lon1, wrap_two_pi(a1 + math.pi)

    if distance > GAUSS_NOMINAL_DISTANCE:
        warn_once(
            'Gauss mid-latitude solution requested for lines longer than %d km; '
            'accuracy degrades', int(GAUSS_NOMINAL_DISTANCE / 1000)
        )

    # First approximation, evaluated at the start point
    cos_b = math.cos(lat1)
    v = ellipsoid.V(lat1)
    sn = distance / ellipsoid.c * v
    d_b = sn * math.cos(a1) * v * v
    d_l = sn * math.sin(a1) / cos_b
    d_a = sn * math.sin(a1) * math.tan(lat1)

    mean_b, mean_l, mean_a = lat1 + d_b / 2, lon1 + d_l / 2, a1 + d_a / 2
    for iteration in range(1, GAUSS_MAX_ITERATIONS + 1):
        d_b, d_l, d_a = _gauss_increments(ellipsoid, distance, mean_b, mean_a)
        prev_b, prev_l, prev_a = mean_b, mean_l, mean_a
        mean_b, mean_l, mean_a = lat1 + d_b / 2, lon1 + d_l / 2, a1 + d_a / 2
        if (
            abs(mean_a - prev_a) < EPSILON4 and
            abs(mean_l - prev_l) < EPSILON4 and
            abs(mean_b - prev_b) < EPSILON4
        ):
            LOGGER.debug('Gauss direct converged after %d iterations', iteration)
            break
    else:
        raise ConvergenceError(
            f'Gauss mid-latitude solution did not converge within {GAUSS_MAX_ITERATIONS} iterations',
            GAUSS_MAX_ITERATIONS
        )

    return lat1 + d_b, wrap_pi(lon1 + d_l), wrap_two_pi(a1 + d_a + math.pi)


def gauss_inverse(
    ellipsoid: Ellipsoid,
    latitude1: _AngleLike,
    longitude1: _AngleLike,
    latitude2: _AngleLike,
    longitude2: _AngleLike,
) -> _InverseResult:
    """
    Solve the inverse problem using Gauss' mid-latitude formulae.

    Args:
        ellipsoid:
            The reference ellipsoid

        latitude1, longitude1:
            The start point, in radians

        latitude2, longitude2:
            The end point, in radians

    Returns:
        (distance, azimuth, inverse azimuth) in meters and radians
    """
    lat1, lat2 = float(latitude1), float(latitude2)
    d_b = lat2 - lat1
    d_l = wrap_pi(float(longitude2) - float(longitude1))
    if d_b == 0. and d_l == 0.:
        return 0., 0., 0.

    mean_b = (lat1 + lat2) / 2
    cos_b, tan_b = math.cos(mean_b), math.tan(mean_b)
    t2 = tan_b * tan_b
    eta2 = ellipsoid.ep2 * cos_b * cos_b
    v2 = 1 + eta2
    n = ellipsoid.prime_vertical_radius(mean_b)

    r01 = n * cos_b
    r21 = n * cos_b * (1 + eta2 - 9 * eta2 * t2) / 24
    r03 = -n * cos_b ** 3 * t2 / 24
    s_sin_a = r01 * d_l + r21 * d_b * d_b * d_l + r03 * d_l ** 3

    s10 = n / v2
    s12 = -n * cos_b * cos_b * (2 + 3 * t2 + 3 * t2 * eta2) / 24
    s30 = n * (eta2 - t2 * eta2) / 8
    s_cos_a = s10 * d_b + s12 * d_b * d_l * d_l + s30 * d_b ** 3

    # Quadrant table of the mean azimuth; the raw angle is always within [0, pi/2]
    if abs(d_b) >= abs(d_l):
        mean_a = math.atan(abs(s_sin_a / s_cos_a))
    else:
        cot_a = abs(s_cos_a / s_sin_a)
        mean_a = math.pi / 4 + math.atan((1 - cot_a) / (1 + cot_a))

    if d_b < 0 and d_l >= 0:
        mean_a = math.pi - mean_a
    elif d_b <= 0 and d_l < 0:
        mean_a = math.pi + mean_a
    elif d_b > 0 and d_l < 0:
        mean_a = 2 * math.pi - mean_a
    elif d_b == 0 and d_l > 0:
        mean_a = math.pi / 2

    distance = math.hypot(s_sin_a, s_cos_a)

    t01 = tan_b * cos_b
    t21 = cos_b * tan_b * (3 + 2 * eta2 - 2 * eta2 * eta2) / 24
    t03 = cos_b ** 3 * tan_b * (1 + eta2) / 12
    d_a = t01 * d_l + t21 * d_b * d_b * d_l + t03 * d_l ** 3

    return (
        distance,
        wrap_two_pi(mean_a - d_a / 2),
        wrap_two_pi(mean_a + d_a / 2 + math.pi),
    )


# -------------------------------------------------------------------------
# Harvesine (spherical, mean radius of the ellipsoid)
# -------------------------------------------------------------------------

def _spherical_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    d_lon = lon2 - lon1
    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)
    return wrap_two_pi(math.atan2(y, x))


def harvesine_direct(
    ellipsoid: Ellipsoid,
    latitude: _AngleLike,
    longitude: _AngleLike,
    distance: float,
    azimuth: _AngleLike,
) -> _DirectResult:
    """
    Solve the direct problem on a sphere of the ellipsoid's mean radius.

    Args:
        ellipsoid:
            The reference ellipsoid, used only for its mean radius

        latitude, longitude:
            The start point, in radians

        distance:
            Length of the great circle arc, in meters

        azimuth:
            Azimuth at the start point, in radians

    Returns:
        (latitude, longitude, inverse azimuth) of the end point, in radians
    """
    lat1, lon1, bearing = float(latitude), float(longitude), float(azimuth)
    if distance == 0:
        return lat1, lon1, wrap_two_pi(bearing + math.pi)

    ang_dist = distance / ellipsoid.mean_radius

    sin_lat2 = (math.sin(lat1) * math.cos(ang_dist) +
                math.cos(lat1) * math.sin(ang_dist) * math.cos(bearing))
    lat2 = math.asin(max(-1., min(1., sin_lat2)))
    lon2 = wrap_pi(
        lon1 + math.atan2(math.sin(bearing) * math.sin(ang_dist) * math.cos(lat1),
                          math.cos(ang_dist) - math.sin(lat1) * math.sin(lat2))
    )

    return lat2, lon2, _spherical_bearing(lat2, lon2, lat1, lon1)


def harvesine_inverse(
    ellipsoid: Ellipsoid,
    latitude1: _AngleLike,
    longitude1: _AngleLike,
    latitude2: _AngleLike,
    longitude2: _AngleLike,
) -> _InverseResult:
    """
    Solve the inverse problem on a sphere of the ellipsoid's mean radius, using the
    haversine formula for distance and the spherical bearing formula for azimuths.

    Args:
        ellipsoid:
            The reference ellipsoid, used only for its mean radius

        latitude1, longitude1:
            The start point, in radians

        latitude2, longitude2:
            The end point, in radians

    Returns:
        (distance, azimuth, inverse azimuth) in meters and radians
    """
    lat1, lon1 = float(latitude1), float(longitude1)
    lat2, lon2 = float(latitude2), float(longitude2)
    if lat1 == lat2 and wrap_pi(lon2 - lon1) == 0.:
        return 0., 0., 0.

    d_lat, d_lon = lat2 - lat1, lon2 - lon1
    hav = (math.sin(d_lat / 2) ** 2 +
           math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2)
    hav = min(1., hav)
    distance = ellipsoid.mean_radius * 2 * math.atan2(math.sqrt(hav), math.sqrt(1 - hav))

    return (
        distance,
        _spherical_bearing(lat1, lon1, lat2, lon2),
        _spherical_bearing(lat2, lon2, lat1, lon1),
    )


# -------------------------------------------------------------------------
# Dispatch
# -------------------------------------------------------------------------

class GeodesicMethod(Enum):
    """The available geodesic problem solutions"""
    VINCENTY = 'vincenty'
    BESSEL = 'bessel'
    GAUSS = 'gauss'
    HARVESINE = 'harvesine'


_DirectFn = Callable[[Ellipsoid, _AngleLike, _AngleLike, float, _AngleLike], _DirectResult]
_InverseFn = Callable[[Ellipsoid, _AngleLike, _AngleLike, _AngleLike, _AngleLike], _InverseResult]

_SOLVERS: Dict[GeodesicMethod, Tuple[_DirectFn, _InverseFn]] = {
    GeodesicMethod.VINCENTY: (vincenty_direct, vincenty_inverse),
    GeodesicMethod.BESSEL: (bessel_direct, bessel_inverse),
    GeodesicMethod.GAUSS: (gauss_direct, gauss_inverse),
    GeodesicMethod.HARVESINE: (harvesine_direct, harvesine_inverse),
}

_PointLike = Union[GeoPoint, Tuple[_AngleLike, _AngleLike]]


class Geodesic:
    """
    A geodesic line described by its start point, length and starting azimuth.

    Args:
        start:
            The start point

        length:
            Length of the line, in meters

        azimuth:
            Azimuth at the start point, in radians
    """

    def __init__(self, start: GeoPoint, length: float, azimuth: _AngleLike):
        if length < 0:
            raise InvalidParameterError(f'Geodesic length must not be negative; received {length}')

        self.start = start
        self.length = float(length)
        self.azimuth = float(azimuth)

    def __eq__(self, other):
        if not isinstance(other, Geodesic):
            return False

        return (
            self.start == other.start and
            self.length == other.length and
            self.azimuth == other.azimuth
        )

    def __hash__(self):
        return hash((self.start, self.length, self.azimuth))

    def __repr__(self):
        return f'<Geodesic from {self.start!r}, {self.length} m at {math.degrees(self.azimuth)} deg>'


class GeodesicSolution:
    """
    Solves direct and inverse geodesic problems with one of the available methods.

    Points may be given as GeoPoints, or as (latitude, longitude) tuples in radians
    together with the ellipsoid keyword. Direct problems may alternatively be given
    as a single Geodesic.

    Args:
        method: (Default GeodesicMethod.VINCENTY)
            The solution to use, as a GeodesicMethod or its name
    """

    def __init__(self, method: Union[GeodesicMethod, str] = GeodesicMethod.VINCENTY):
        try:
            self.method = GeodesicMethod(method)
        except ValueError as exc:
            raise InvalidParameterError(
                f"Unknown geodesic method '{method}'. "
                f"Options: {[x.value for x in GeodesicMethod]}"
            ) from exc

        self._direct, self._inverse = _SOLVERS[self.method]

    def __eq__(self, other):
        if not isinstance(other, GeodesicSolution):
            return False

        return self.method == other.method

    def __hash__(self):
        return hash(self.method)

    def __repr__(self):
        return f'<GeodesicSolution({self.method.value})>'

    @staticmethod
    def _point(point: _PointLike, ellipsoid: Ellipsoid) -> GeoPoint:
        if isinstance(point, GeoPoint):
            return point
        return GeoPoint(point[0], point[1], ellipsoid)

    def direct(
        self,
        start: Union[_PointLike, Geodesic],
        distance: Optional[float] = None,
        azimuth: Optional[_AngleLike] = None,
        ellipsoid: Ellipsoid = WGS84,
    ) -> Tuple[GeoPoint, float]:
        """
        Solve the direct problem.

        Args:
            start:
                The start point, or a Geodesic (in which case distance and azimuth
                must be omitted)

            distance:
                Length of the geodesic, in meters

            azimuth:
                Azimuth at the start point, in radians

            ellipsoid: (Default WGS84)
                Ellipsoid for a start point given as a tuple

        Returns:
            The end point and the inverse azimuth (radians) at the end point
        """
        if isinstance(start, Geodesic):
            if distance is not None or azimuth is not None:
                raise InvalidParameterError(
                    'Distance and azimuth must not be provided alongside a Geodesic'
                )
            start, distance, azimuth = start.start, start.length, start.azimuth

        if distance is None or azimuth is None:
            raise InvalidParameterError('Direct problem requires a distance and an azimuth')

        point = self._point(start, ellipsoid)
        lat2, lon2, inverse_azimuth = self._direct(
            point.ellipsoid, point.latitude, point.longitude, distance, azimuth
        )
        return GeoPoint(lat2, lon2, point.ellipsoid), inverse_azimuth

    def inverse(
        self,
        start: _PointLike,
        end: _PointLike,
        ellipsoid: Ellipsoid = WGS84,
    ) -> Tuple[float, float, float]:
        """
        Solve the inverse problem.

        Args:
            start:
                The start point

            end:
                The end point

            ellipsoid: (Default WGS84)
                Ellipsoid for points given as tuples

        Returns:
            The distance (meters), the azimuth at the start and the inverse azimuth at
            the end (radians)
        """
        start, end = self._point(start, ellipsoid), self._point(end, ellipsoid)
        if start.ellipsoid != end.ellipsoid:
            raise InvalidParameterError(
                f'Points reference different ellipsoids: {start.ellipsoid!r} and {end.ellipsoid!r}'
            )

        return self._inverse(
            start.ellipsoid, start.latitude, start.longitude, end.latitude, end.longitude
        )

    def end_point(self, *args, **kwargs) -> GeoPoint:
        """The end point of a direct problem; accepts the same arguments as direct()"""
        return self.direct(*args, **kwargs)[0]

    def inverse_azimuth(self, *args, **kwargs) -> float:
        """The inverse azimuth of a direct problem; accepts the same arguments as direct()"""
        return self.direct(*args, **kwargs)[1]

    def distance(self, start: _PointLike, end: _PointLike, ellipsoid: Ellipsoid = WGS84) -> float:
        """Geodesic distance between two points, in meters"""
        return self.inverse(start, end, ellipsoid)[0]

    def azimuth(self, start: _PointLike, end: _PointLike, ellipsoid: Ellipsoid = WGS84) -> float:
        """Azimuth at the start point toward the end point, in radians"""
        return self.inverse(start, end, ellipsoid)[1]

    def inverse_bearing(
        self, start: _PointLike, end: _PointLike, ellipsoid: Ellipsoid = WGS84
    ) -> float:
        """Azimuth at the end point back toward the start point, in radians"""
        return self.inverse(start, end, ellipsoid)[2]
