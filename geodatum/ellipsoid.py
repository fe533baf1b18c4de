"""
Reference ellipsoid model and its derived constants
"""

__all__ = [
    'Ellipsoid',
    'AIRY_1830', 'BESSEL_1841', 'CGCS2000', 'CLARKE_1866', 'GRS80',
    'INTERNATIONAL_1924', 'KRASSOVSKY', 'SPHERE', 'WGS72', 'WGS84',
]

from functools import cached_property
import math
from typing import Tuple

from pydantic import validate_call

from geodatum._const import FOOTPOINT_MAX_ITERATIONS, FOOTPOINT_TOLERANCE
from geodatum.exceptions import ConvergenceError, InvalidParameterError
from geodatum.utils.functions import wrap_pi
from geodatum.utils.logging import LOGGER


def _arc_coefficients(e2: float) -> Tuple[float, ...]:
    """Coefficients of the meridian arc series, expanded to e^10"""
    e4 = e2 * e2
    e6 = e4 * e2
    e8 = e4 * e4
    e10 = e8 * e2
    return (
        1 + 3 * e2 / 4 + 45 * e4 / 64 + 175 * e6 / 256 + 11025 * e8 / 16384 + 43659 * e10 / 65536,
        3 * e2 / 4 + 15 * e4 / 16 + 525 * e6 / 512 + 2205 * e8 / 2048 + 72765 * e10 / 65536,
        15 * e4 / 64 + 105 * e6 / 256 + 2205 * e8 / 4096 + 10395 * e10 / 16384,
        35 * e6 / 512 + 315 * e8 / 2048 + 31185 * e10 / 131072,
        315 * e8 / 16384 + 3465 * e10 / 65536,
        693 * e10 / 131072,
    )


class Ellipsoid:
    """
    A rotational (oblate) ellipsoid, defined by its semi-major axis and inverse flattening.

    Ellipsoids are immutable values. Two ellipsoids are equal when their semi-major axes
    and flattenings are equal, regardless of the name they were given.

    Args:
        a:
            The semi-major axis, in meters

        inverse_flattening:
            The inverse flattening (1/f). Use math.inf for a sphere.

        name: (Optional)
            A display name for the ellipsoid
    """

    @validate_call
    def __init__(self, a: float, inverse_flattening: float, name: str = ''):
        if not math.isfinite(a) or a <= 0:
            raise InvalidParameterError(f'Semi-major axis must be positive; received {a}')

        if math.isnan(inverse_flattening) or inverse_flattening <= 1:
            raise InvalidParameterError(
                f'Inverse flattening must be greater than 1; received {inverse_flattening}'
            )

        self.a = a
        self.inverse_flattening = inverse_flattening
        self.name = name

        self.f = 0. if math.isinf(inverse_flattening) else 1 / inverse_flattening
        self.b = a * (1 - self.f)
        if self.b <= 0:
            raise InvalidParameterError(f'Semi-minor axis must be positive; received {self.b}')

        # First and second eccentricities (squared)
        self.e2 = self.f * (2 - self.f)
        self.ep2 = self.e2 / (1 - self.e2)

        # Polar radius of curvature
        self.c = a * a / self.b

        self._arc = _arc_coefficients(self.e2)

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.f == other.f

    def __hash__(self):
        return hash((self.a, self.f))

    def __repr__(self):
        if self.name:
            return f'<Ellipsoid {self.name} (a={self.a}, 1/f={self.inverse_flattening})>'
        return f'<Ellipsoid(a={self.a}, 1/f={self.inverse_flattening})>'

    @classmethod
    def from_axes(cls, a: float, b: float, name: str = ''):
        """
        Creates an ellipsoid from its semi-major and semi-minor axes.

        Args:
            a:
                The semi-major axis, in meters

            b:
                The semi-minor axis, in meters. Must not exceed a.

            name: (Optional)
                A display name for the ellipsoid

        Returns:
            Ellipsoid
        """
        if b <= 0 or b > a:
            raise InvalidParameterError(
                f'Semi-minor axis must be within (0, a]; received a={a}, b={b}'
            )

        if a == b:
            return cls(a, math.inf, name)

        return cls(a, a / (a - b), name)

    @classmethod
    def sphere(cls, radius: float, name: str = ''):
        """Creates a sphere of the given radius (meters)"""
        return cls(radius, math.inf, name)

    @property
    def is_sphere(self) -> bool:
        return self.f == 0.

    @property
    def e(self) -> float:
        """First eccentricity"""
        return math.sqrt(self.e2)

    @property
    def n(self) -> float:
        """Third flattening, (a - b) / (a + b)"""
        return self.f / (2 - self.f)

    @property
    def mean_radius(self) -> float:
        """The IUGG mean radius, (2a + b) / 3"""
        return (2 * self.a + self.b) / 3

    @cached_property
    def area(self) -> float:
        """Surface area, in square meters"""
        if self.is_sphere:
            return 4 * math.pi * self.a ** 2

        e = self.e
        return 2 * math.pi * self.a ** 2 * (1 + (1 - self.e2) / e * math.atanh(e))

    @property
    def authalic_radius(self) -> float:
        """Radius of the sphere having the same surface area"""
        return math.sqrt(self.area / (4 * math.pi))

    @property
    def volume(self) -> float:
        """Volume, in cubic meters"""
        return 4 / 3 * math.pi * self.a ** 2 * self.b

    @property
    def volumetric_radius(self) -> float:
        """Radius of the sphere having the same volume"""
        return (self.a ** 2 * self.b) ** (1 / 3)

    @cached_property
    def quarter_meridian(self) -> float:
        """Meridian arc length from the equator to a pole"""
        return self.meridian_arc(math.pi / 2)

    @property
    def rectifying_radius(self) -> float:
        return 2 * self.quarter_meridian / math.pi

    def W(self, latitude: float) -> float:  # pylint: disable=invalid-name
        """The auxiliary function W = sqrt(1 - e^2 sin^2 B)"""
        return math.sqrt(1 - self.e2 * math.sin(latitude) ** 2)

    def V(self, latitude: float) -> float:  # pylint: disable=invalid-name
        """The auxiliary function V = sqrt(1 + e'^2 cos^2 B)"""
        return math.sqrt(1 + self.ep2 * math.cos(latitude) ** 2)

    def prime_vertical_radius(self, latitude: float) -> float:
        """
        Radius of curvature in the prime vertical, N = a / sqrt(1 - e^2 sin^2 B).

        Args:
            latitude:
                Geodetic latitude, in radians

        Returns:
            float
        """
        return self.a / self.W(latitude)

    def meridian_radius(self, latitude: float) -> float:
        """
        Radius of curvature in the meridian, M = a (1 - e^2) / (1 - e^2 sin^2 B)^1.5.

        Args:
            latitude:
                Geodetic latitude, in radians

        Returns:
            float
        """
        return self.a * (1 - self.e2) / self.W(latitude) ** 3

    # Conventional geodetic notation
    N = prime_vertical_radius
    M = meridian_radius

    def mean_curvature_radius(self, latitude: float) -> float:
        """Gaussian mean radius of curvature, sqrt(MN)"""
        return self.c / self.V(latitude) ** 2

    def parallel_radius(self, latitude: float) -> float:
        """Radius of the parallel circle at the given latitude"""
        return self.prime_vertical_radius(latitude) * math.cos(latitude)

    def parallel_arc(self, latitude: float, longitude1: float, longitude2: float) -> float:
        """
        Length of the arc along a parallel between two longitudes, taking the shorter way
        around.

        Args:
            latitude:
                Geodetic latitude of the parallel, in radians

            longitude1, longitude2:
                The end longitudes, in radians

        Returns:
            float, in meters
        """
        return self.parallel_radius(latitude) * abs(wrap_pi(longitude2 - longitude1))

    def azimuth_radius(self, latitude: float, azimuth: float) -> float:
        """
        Radius of curvature of the normal section at the given azimuth (Euler's formula).

        Args:
            latitude:
                Geodetic latitude, in radians

            azimuth:
                Azimuth of the normal section, in radians

        Returns:
            float
        """
        m = self.meridian_radius(latitude)
        n = self.prime_vertical_radius(latitude)
        return m * n / (n * math.cos(azimuth) ** 2 + m * math.sin(azimuth) ** 2)

    def meridian_arc(self, latitude: float) -> float:
        """
        Length of the meridian arc from the equator to the given latitude.

        Args:
            latitude:
                Geodetic latitude, in radians. Negative latitudes yield negative lengths.

        Returns:
            float, in meters
        """
        c_a, c_b, c_c, c_d, c_e, c_f = self._arc
        return self.a * (1 - self.e2) * (
            c_a * latitude
            - c_b * math.sin(2 * latitude) / 2
            + c_c * math.sin(4 * latitude) / 4
            - c_d * math.sin(6 * latitude) / 6
            + c_e * math.sin(8 * latitude) / 8
            - c_f * math.sin(10 * latitude) / 10
        )

    def footpoint_latitude(self, arc_length: float) -> float:
        """
        Inverts the meridian arc: returns the latitude at which the meridian arc from the
        equator has the given length.

        Args:
            arc_length:
                Meridian arc length, in meters

        Returns:
            float, latitude in radians
        """
        latitude = arc_length / (self.a * (1 - self.e2) * self._arc[0])
        for iteration in range(1, FOOTPOINT_MAX_ITERATIONS + 1):
            delta = (arc_length - self.meridian_arc(latitude)) / self.meridian_radius(latitude)
            latitude += delta
            if abs(delta) < FOOTPOINT_TOLERANCE:
                LOGGER.debug('Footpoint latitude converged after %d iterations', iteration)
                return latitude

        raise ConvergenceError(
            f'Footpoint latitude for arc length {arc_length} did not converge '
            f'within {FOOTPOINT_MAX_ITERATIONS} iterations',
            FOOTPOINT_MAX_ITERATIONS
        )


WGS84 = Ellipsoid(6378137.0, 298.257223563, 'WGS84')
GRS80 = Ellipsoid(6378137.0, 298.257222101, 'GRS80')
CGCS2000 = Ellipsoid(6378137.0, 298.257222101, 'CGCS2000')
WGS72 = Ellipsoid(6378135.0, 298.26, 'WGS72')
KRASSOVSKY = Ellipsoid(6378245.0, 298.3, 'Krassovsky')
INTERNATIONAL_1924 = Ellipsoid(6378388.0, 297.0, 'International 1924')
BESSEL_1841 = Ellipsoid(6377397.155, 299.1528128, 'Bessel 1841')
CLARKE_1866 = Ellipsoid.from_axes(6378206.4, 6356583.8, 'Clarke 1866')
AIRY_1830 = Ellipsoid(6377563.396, 299.3249646, 'Airy 1830')
SPHERE = Ellipsoid.sphere(6371000.0, 'Sphere')
