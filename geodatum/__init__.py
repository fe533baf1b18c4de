
from geodatum._version import __version__  # noqa: F401
from geodatum.utils.logging import LOGGER
from geodatum.angles import Angle, Azimuth, Latitude, Longitude
from geodatum.coordinates import (
    GeoPoint, GeodeticCoord, PolarCoord, ProjectedCoord, SpaceRectangularCoord,
    TopocentricCoord
)
from geodatum.datum import TransParameters
from geodatum.ellipsoid import (
    AIRY_1830, BESSEL_1841, CGCS2000, CLARKE_1866, GRS80, INTERNATIONAL_1924,
    KRASSOVSKY, SPHERE, WGS72, WGS84, Ellipsoid
)
from geodatum.exceptions import (
    ConvergenceError, DomainError, GeodeticError, InvalidParameterError
)
from geodatum.geodesic import Geodesic, GeodesicMethod, GeodesicSolution
from geodatum.projection import ProjectionParameters, TransverseMercator

__all__ = [
    'AIRY_1830',
    'Angle',
    'Azimuth',
    'BESSEL_1841',
    'CGCS2000',
    'CLARKE_1866',
    'ConvergenceError',
    'DomainError',
    'Ellipsoid',
    'GRS80',
    'GeoPoint',
    'GeodeticCoord',
    'GeodeticError',
    'Geodesic',
    'GeodesicMethod',
    'GeodesicSolution',
    'INTERNATIONAL_1924',
    'InvalidParameterError',
    'KRASSOVSKY',
    'Latitude',
    'Longitude',
    'PolarCoord',
    'ProjectedCoord',
    'ProjectionParameters',
    'SPHERE',
    'SpaceRectangularCoord',
    'TopocentricCoord',
    'TransParameters',
    'TransverseMercator',
    'WGS72',
    'WGS84',
    'LOGGER',
]
