"""
Representations of points: on the ellipsoid, in space, on a map grid and in a local frame
"""

__all__ = [
    'GeoPoint', 'GeodeticCoord', 'PolarCoord', 'ProjectedCoord',
    'SpaceRectangularCoord', 'TopocentricCoord'
]

import math
from typing import Tuple, Union

from geodatum.angles import Angle, Azimuth, Latitude, Longitude
from geodatum.ellipsoid import Ellipsoid, WGS84
from geodatum.exceptions import InvalidParameterError

_AngleLike = Union[float, int, Angle]


class GeoPoint:
    """
    A point on the surface of a specific ellipsoid.

    The ellipsoid is referenced, never copied.

    Args:
        latitude:
            Geodetic latitude, in radians (or a Latitude)

        longitude:
            Longitude, in radians (or a Longitude)

        ellipsoid: (Default WGS84)
            The reference ellipsoid
    """

    def __init__(
        self,
        latitude: _AngleLike,
        longitude: _AngleLike,
        ellipsoid: Ellipsoid = WGS84,
    ):
        if not isinstance(ellipsoid, Ellipsoid):
            raise InvalidParameterError(
                f'GeoPoint requires an Ellipsoid; received {type(ellipsoid).__name__}'
            )

        self.latitude = latitude if isinstance(latitude, Latitude) else Latitude(latitude)
        self.longitude = longitude if isinstance(longitude, Longitude) else Longitude(longitude)
        self.ellipsoid = ellipsoid

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.ellipsoid == other.ellipsoid
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.ellipsoid))

    def __repr__(self):
        return f'<GeoPoint({self.latitude.degrees}, {self.longitude.degrees}) on {self.ellipsoid!r}>'

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float, ellipsoid: Ellipsoid = WGS84):
        """Creates a GeoPoint from a latitude/longitude pair in degrees"""
        return cls(math.radians(latitude), math.radians(longitude), ellipsoid)

    def to_float(self) -> Tuple[float, float]:
        """Returns the (latitude, longitude) pair, in radians"""
        return self.latitude.radians, self.longitude.radians

    @property
    def prime_vertical_radius(self) -> float:
        return self.ellipsoid.prime_vertical_radius(self.latitude.radians)

    @property
    def meridian_radius(self) -> float:
        return self.ellipsoid.meridian_radius(self.latitude.radians)

    @property
    def mean_curvature_radius(self) -> float:
        return self.ellipsoid.mean_curvature_radius(self.latitude.radians)

    def azimuth_radius(self, azimuth: _AngleLike) -> float:
        """Radius of curvature of the normal section through this point at the given azimuth"""
        return self.ellipsoid.azimuth_radius(self.latitude.radians, float(azimuth))


class GeodeticCoord:
    """
    A geodetic coordinate: latitude, longitude and height above the ellipsoid.

    Args:
        latitude:
            Geodetic latitude, in radians (or a Latitude)

        longitude:
            Longitude, in radians (or a Longitude)

        height: (Default 0)
            Ellipsoidal height, in meters
    """

    def __init__(self, latitude: _AngleLike, longitude: _AngleLike, height: float = 0.):
        self.latitude = latitude if isinstance(latitude, Latitude) else Latitude(latitude)
        self.longitude = longitude if isinstance(longitude, Longitude) else Longitude(longitude)
        self.height = float(height)

    def __eq__(self, other):
        if not isinstance(other, GeodeticCoord):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.height == other.height
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.height))

    def __repr__(self):
        return f'<GeodeticCoord({self.latitude.degrees}, {self.longitude.degrees}, {self.height})>'

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float, height: float = 0.):
        return cls(math.radians(latitude), math.radians(longitude), height)

    def to_float(self) -> Tuple[float, float, float]:
        """Returns (latitude, longitude, height) in radians and meters"""
        return self.latitude.radians, self.longitude.radians, self.height

    def to_geopoint(self, ellipsoid: Ellipsoid = WGS84) -> GeoPoint:
        """Drops the height, placing the point on the given ellipsoid"""
        return GeoPoint(self.latitude, self.longitude, ellipsoid)


class SpaceRectangularCoord:
    """An earth-centered, earth-fixed cartesian coordinate, in meters"""

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __eq__(self, other):
        if not isinstance(other, SpaceRectangularCoord):
            return False

        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f'<SpaceRectangularCoord({self.x}, {self.y}, {self.z})>'

    def __sub__(self, other: 'SpaceRectangularCoord') -> Tuple[float, float, float]:
        return self.x - other.x, self.y - other.y, self.z - other.z

    def to_float(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z


class ProjectedCoord:
    """
    A map grid coordinate.

    Args:
        northing:
            Grid northing, in the projection's unit

        easting:
            Grid easting, in the projection's unit (including any zone prefix)

        unit: (Default 'm')
            The projection's linear unit

        false_northing: (Default 0)
            The false northing already applied to the northing

        false_easting: (Default 0)
            The false easting already applied to the easting
    """

    def __init__(
        self,
        northing: float,
        easting: float,
        unit: str = 'm',
        false_northing: float = 0.,
        false_easting: float = 0.,
    ):
        self.northing = float(northing)
        self.easting = float(easting)
        self.unit = unit
        self.false_northing = float(false_northing)
        self.false_easting = float(false_easting)

    def __eq__(self, other):
        if not isinstance(other, ProjectedCoord):
            return False

        return (
            self.northing == other.northing and
            self.easting == other.easting and
            self.unit == other.unit
        )

    def __hash__(self):
        return hash((self.northing, self.easting, self.unit))

    def __repr__(self):
        return f'<ProjectedCoord(N={self.northing}, E={self.easting} {self.unit})>'

    def to_float(self) -> Tuple[float, float]:
        """Returns the (northing, easting) pair"""
        return self.northing, self.easting


class TopocentricCoord:
    """A local north/east/up coordinate relative to some origin, in meters"""

    def __init__(self, north: float, east: float, up: float):
        self.north = float(north)
        self.east = float(east)
        self.up = float(up)

    def __eq__(self, other):
        if not isinstance(other, TopocentricCoord):
            return False

        return self.north == other.north and self.east == other.east and self.up == other.up

    def __hash__(self):
        return hash((self.north, self.east, self.up))

    def __repr__(self):
        return f'<TopocentricCoord(N={self.north}, E={self.east}, U={self.up})>'

    def to_float(self) -> Tuple[float, float, float]:
        return self.north, self.east, self.up


class PolarCoord:
    """
    A local polar coordinate: slant range, azimuth and elevation angle.

    Args:
        range_:
            Slant range, in meters

        azimuth:
            Azimuth clockwise from north, in radians (or an Azimuth)

        elevation:
            Elevation above the local horizon, in radians (or an Angle)
    """

    def __init__(self, range_: float, azimuth: _AngleLike, elevation: _AngleLike):
        if range_ < 0:
            raise InvalidParameterError(f'Range must not be negative; received {range_}')

        self.range = float(range_)
        self.azimuth = azimuth if isinstance(azimuth, Azimuth) else Azimuth(azimuth)
        self.elevation = elevation if isinstance(elevation, Angle) else Angle(elevation)
        if abs(self.elevation.radians) > math.pi / 2:
            raise InvalidParameterError(
                f'Elevation must be within [-90, 90] degrees; received {self.elevation.degrees}'
            )

    def __eq__(self, other):
        if not isinstance(other, PolarCoord):
            return False

        return (
            self.range == other.range and
            self.azimuth == other.azimuth and
            self.elevation == other.elevation
        )

    def __hash__(self):
        return hash((self.range, self.azimuth, self.elevation))

    def __repr__(self):
        return (
            f'<PolarCoord(range={self.range}, azimuth={self.azimuth.degrees}, '
            f'elevation={self.elevation.degrees})>'
        )

    def to_float(self) -> Tuple[float, float, float]:
        return self.range, self.azimuth.radians, self.elevation.radians
