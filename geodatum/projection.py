"""
Transverse Mercator map projection, with Gauss-Krueger and UTM zoning.

Coordinates pass through three representations:

    geodetic (latitude, longitude)
        <-> natural (x north, y east): true-scale series coordinates, relative to the
            central meridian and the latitude of origin
        <-> grid (northing, easting): natural coordinates multiplied by the scale
            factor, converted to the projection's unit and offset by the false
            origin (and, for prefixed Gauss-Krueger grids, the zone number)
"""

__all__ = [
    'ProjectionParameters', 'TransverseMercator',
    'gauss_krueger_central_meridian', 'gauss_krueger_parameters', 'gauss_krueger_zone',
    'natural_easting', 'rezone', 'six_to_three_zone', 'three_to_six_zone',
    'to_adjacent_zone', 'utm_central_meridian', 'utm_latitude_band', 'utm_parameters',
    'utm_zone', 'zone_from_easting',
]

import math
from typing import Optional, Tuple, Union

from pydantic import validate_call

from geodatum._const import (
    GK_FALSE_EASTING, GK_ZONE_PREFIX, TM_MAX_DELTA_LONGITUDE, TM_MAX_LATITUDE,
    TM_NOMINAL_DELTA_LONGITUDE, UTM_FALSE_EASTING, UTM_FALSE_NORTHING_SOUTH,
    UTM_MAX_LATITUDE, UTM_MIN_LATITUDE, UTM_SCALE_FACTOR
)
from geodatum.angles import Angle
from geodatum.conversion import convert_to_meters
from geodatum.coordinates import GeoPoint, ProjectedCoord
from geodatum.ellipsoid import Ellipsoid
from geodatum.exceptions import DomainError, InvalidParameterError
from geodatum.utils.functions import wrap_pi, wrap_two_pi
from geodatum.utils.logging import warn_once

_AngleLike = Union[float, int, Angle]

_MIN_SCALE_FACTOR = 0.3
_MAX_SCALE_FACTOR = 3.0
_MAX_NATURAL_NORTHING = 20_000_000.
_MAX_NATURAL_EASTING = 40_000_000.
_UTM_BANDS = 'CDEFGHJKLMNPQRSTUVWX'


class ProjectionParameters:
    """
    The defining constants of a projected grid. Built once per grid system and shared
    by every forward and inverse projection on it.

    Args:
        central_meridian: (Default 0)
            Longitude of the central meridian, in radians

        latitude_of_origin: (Default 0)
            Latitude of the grid origin, in radians

        scale_factor: (Default 1)
            Scale factor on the central meridian

        false_easting: (Default 0)
            Easting of the origin, in the projection's unit

        false_northing: (Default 0)
            Northing of the origin, in the projection's unit

        unit: (Default 'm')
            The linear unit of grid coordinates

        standard_parallels: (Optional)
            The two standard parallels of conic variants, in radians

        zone: (Optional)
            The zone number, for zoned grid systems

        zone_width: (Optional)
            The zone width in degrees, for zoned grid systems

        zone_prefix: (Default False)
            Whether eastings carry the zone number in their millions digits

        name: (Optional)
            A display name for the grid
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        central_meridian: _AngleLike = 0.,
        latitude_of_origin: _AngleLike = 0.,
        scale_factor: float = 1.,
        false_easting: float = 0.,
        false_northing: float = 0.,
        unit: str = 'm',
        standard_parallels: Optional[Tuple[float, float]] = None,
        zone: Optional[int] = None,
        zone_width: Optional[float] = None,
        zone_prefix: bool = False,
        name: str = '',
    ):
        if not _MIN_SCALE_FACTOR <= scale_factor <= _MAX_SCALE_FACTOR:
            raise InvalidParameterError(
                f'Scale factor must be within [{_MIN_SCALE_FACTOR}, {_MAX_SCALE_FACTOR}]; '
                f'received {scale_factor}'
            )

        if abs(float(latitude_of_origin)) > math.pi / 2:
            raise InvalidParameterError(
                f'Latitude of origin must be within [-90, 90] degrees; '
                f'received {math.degrees(float(latitude_of_origin))}'
            )

        if zone_prefix and (zone is None or zone < 1):
            raise InvalidParameterError('A zone prefix requires a positive zone number')

        self.central_meridian = wrap_pi(float(central_meridian))
        self.latitude_of_origin = float(latitude_of_origin)
        self.scale_factor = scale_factor
        self.false_easting = false_easting
        self.false_northing = false_northing
        self.unit = unit
        self.unit_factor = convert_to_meters(1., unit)
        self.standard_parallels = standard_parallels
        self.zone = zone
        self.zone_width = zone_width
        self.zone_prefix = zone_prefix
        self.name = name

    def __eq__(self, other):
        if not isinstance(other, ProjectionParameters):
            return False

        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        label = self.name or 'ProjectionParameters'
        return (
            f'<{label} (CM={math.degrees(self.central_meridian)}, k0={self.scale_factor}, '
            f'FE={self.false_easting}, FN={self.false_northing} {self.unit})>'
        )

    def _key(self):
        return (
            self.central_meridian, self.latitude_of_origin, self.scale_factor,
            self.false_easting, self.false_northing, self.unit, self.standard_parallels,
            self.zone, self.zone_width, self.zone_prefix
        )


class TransverseMercator:
    """
    Transverse Mercator (Gauss-Krueger) projection of an ellipsoid, using the extended
    power series in the longitude difference (to the eighth order).

    Args:
        ellipsoid:
            The ellipsoid being projected

        parameters:
            The grid definition
    """

    def __init__(self, ellipsoid: Ellipsoid, parameters: ProjectionParameters):
        if not isinstance(ellipsoid, Ellipsoid):
            raise InvalidParameterError(
                f'TransverseMercator requires an Ellipsoid; received {type(ellipsoid).__name__}'
            )

        self.ellipsoid = ellipsoid
        self.parameters = parameters
        self._origin_arc = ellipsoid.meridian_arc(parameters.latitude_of_origin)

    def __repr__(self):
        return f'<TransverseMercator {self.parameters!r} on {self.ellipsoid!r}>'

    def _delta_longitude(self, longitude: float) -> float:
        delta = wrap_pi(longitude - self.parameters.central_meridian)
        if abs(delta) > TM_MAX_DELTA_LONGITUDE:
            raise DomainError(
                f'Longitude {math.degrees(longitude)} is too far from the central meridian '
                f'{math.degrees(self.parameters.central_meridian)}'
            )

        if abs(delta) > TM_NOMINAL_DELTA_LONGITUDE:
            warn_once(
                'Projecting points more than %.1f degrees from the central meridian',
                math.degrees(TM_NOMINAL_DELTA_LONGITUDE)
            )

        return delta

    def _series_forward(self, latitude: float, delta_lon: float) -> Tuple[float, float]:
        """Geodetic latitude and longitude difference to natural (x, y)"""
        if abs(latitude) > TM_MAX_LATITUDE:
            raise DomainError(f'Latitude {math.degrees(latitude)} is too close to a pole')

        cos_b, sin_b, tan_b = math.cos(latitude), math.sin(latitude), math.tan(latitude)
        c3 = cos_b ** 3
        c5 = cos_b ** 5
        c7 = cos_b ** 7
        t2 = tan_b * tan_b
        t4 = t2 * t2
        t6 = t4 * t2

        eta = self.ellipsoid.ep2 * cos_b * cos_b
        eta2 = eta * eta
        eta3 = eta2 * eta
        eta4 = eta3 * eta

        n = self.ellipsoid.prime_vertical_radius(latitude)
        arc = self.ellipsoid.meridian_arc(latitude) - self._origin_arc

        x = (
            arc
            + delta_lon ** 2 * n * sin_b * cos_b / 2
            + delta_lon ** 4 * n * sin_b * c3 * (5 - t2 + 9 * eta + 4 * eta2) / 24
            + delta_lon ** 6 * n * sin_b * c5 * (
                61 - 58 * t2 + t4 + 270 * eta - 330 * t2 * eta + 445 * eta2 + 324 * eta3
                - 680 * t2 * eta2 + 88 * eta4 - 600 * t2 * eta3 - 192 * t2 * eta4
            ) / 720
            + delta_lon ** 8 * n * sin_b * c7 * (1385 - 3111 * t2 + 543 * t4 - t6) / 40320
        )
        y = (
            delta_lon * n * cos_b
            + delta_lon ** 3 * n * c3 * (1 - t2 + eta) / 6
            + delta_lon ** 5 * n * c5 * (
                5 - 18 * t2 + t4 + 14 * eta - 58 * t2 * eta + 13 * eta2 + 4 * eta3
                - 64 * t2 * eta2 - 24 * t2 * eta3
            ) / 120
            + delta_lon ** 7 * n * c7 * (61 - 479 * t2 + 179 * t4 - t6) / 5040
        )
        return x, y

    def _series_inverse(self, x: float, y: float) -> Tuple[float, float]:
        """Natural (x, y) to geodetic latitude and longitude difference"""
        if abs(x) > _MAX_NATURAL_NORTHING or abs(y) > _MAX_NATURAL_EASTING:
            raise DomainError(f'Natural coordinate ({x}, {y}) is outside the projection')

        footpoint = self.ellipsoid.footpoint_latitude(self._origin_arc + x)
        if abs(footpoint) >= math.pi / 2:
            raise DomainError(f'Northing {x} lies beyond a pole')

        tan_b = math.tan(footpoint)
        cos_b = math.cos(footpoint)
        t2 = tan_b * tan_b
        t4 = t2 * t2
        t6 = t4 * t2

        eta = self.ellipsoid.ep2 * cos_b * cos_b
        eta2 = eta * eta
        eta3 = eta2 * eta
        eta4 = eta3 * eta

        m = self.ellipsoid.meridian_radius(footpoint)
        n = self.ellipsoid.prime_vertical_radius(footpoint)

        t10 = tan_b / (2 * m * n)
        t11 = tan_b * (5 + 3 * t2 + eta - 4 * eta2 - 9 * t2 * eta) / (24 * m * n ** 3)
        t12 = tan_b * (
            61 + 90 * t2 + 46 * eta + 45 * t4 - 252 * t2 * eta - 3 * eta2 + 100 * eta3
            - 66 * t2 * eta2 - 90 * t4 * eta + 88 * eta4 + 225 * t4 * eta2 + 84 * t2 * eta3
            - 192 * t2 * eta4
        ) / (720 * m * n ** 5)
        t13 = tan_b * (1385 + 3633 * t2 + 4095 * t4 + 1575 * t6) / (40320 * m * n ** 7)
        latitude = footpoint - y ** 2 * t10 + y ** 4 * t11 - y ** 6 * t12 + y ** 8 * t13

        t14 = 1 / (n * cos_b)
        t15 = (1 + 2 * t2 + eta) / (6 * n ** 3 * cos_b)
        t16 = (
            5 + 6 * eta + 28 * t2 - 3 * eta2 + 8 * t2 * eta + 24 * t4 - 4 * eta3
            + 4 * t2 * eta2 + 24 * t2 * eta3
        ) / (120 * n ** 5 * cos_b)
        t17 = (61 + 662 * t2 + 1320 * t4 + 720 * t6) / (5040 * n ** 7 * cos_b)
        delta_lon = y * t14 - y ** 3 * t15 + y ** 5 * t16 - y ** 7 * t17

        if abs(delta_lon) > TM_MAX_DELTA_LONGITUDE:
            raise DomainError(f'Easting {y} is too far from the central meridian')

        return latitude, delta_lon

    def natural_coordinates(self, northing: float, easting: float) -> Tuple[float, float]:
        """
        Removes the zone prefix, false origin, unit and scale from a grid coordinate.

        Args:
            northing:
                Grid northing

            easting:
                Grid easting

        Returns:
            The natural (x, y) pair, in meters
        """
        params = self.parameters
        if params.zone_prefix:
            # West of the false easting the millions digit reads as the previous zone
            offset = easting - params.zone * GK_ZONE_PREFIX
            if abs(offset - params.false_easting) >= GK_ZONE_PREFIX:
                raise InvalidParameterError(
                    f'Easting {easting} is outside zone {params.zone}'
                )
            easting = offset

        k = params.scale_factor / params.unit_factor
        return (northing - params.false_northing) / k, (easting - params.false_easting) / k

    def grid_coordinates(self, x: float, y: float) -> Tuple[float, float]:
        """
        Applies scale, unit, false origin and zone prefix to a natural coordinate.

        Args:
            x:
                Natural northing, in meters

            y:
                Natural easting, in meters

        Returns:
            The grid (northing, easting) pair
        """
        params = self.parameters
        k = params.scale_factor / params.unit_factor
        northing = x * k + params.false_northing
        easting = y * k + params.false_easting
        if params.zone_prefix:
            easting += params.zone * GK_ZONE_PREFIX
        return northing, easting

    def natural_forward(self, latitude: _AngleLike, longitude: _AngleLike) -> Tuple[float, float]:
        """Projects a geodetic position to natural (x, y), in meters"""
        return self._series_forward(float(latitude), self._delta_longitude(float(longitude)))

    def forward(self, latitude: _AngleLike, longitude: _AngleLike) -> ProjectedCoord:
        """
        Projects a geodetic position onto the grid.

        Args:
            latitude:
                Geodetic latitude, in radians

            longitude:
                Longitude, in radians

        Returns:
            ProjectedCoord
        """
        northing, easting = self.grid_coordinates(*self.natural_forward(latitude, longitude))
        params = self.parameters
        return ProjectedCoord(
            northing, easting, params.unit, params.false_northing, params.false_easting
        )

    def inverse(self, northing: float, easting: float) -> Tuple[float, float]:
        """
        Recovers the geodetic position of a grid coordinate.

        Args:
            northing:
                Grid northing

            easting:
                Grid easting

        Returns:
            The (latitude, longitude) pair, in radians
        """
        latitude, delta_lon = self._series_inverse(*self.natural_coordinates(northing, easting))
        return latitude, wrap_pi(self.parameters.central_meridian + delta_lon)

    def inverse_point(self, coord: ProjectedCoord) -> GeoPoint:
        """Recovers the geodetic position of a ProjectedCoord as a GeoPoint"""
        if coord.unit.lower() != self.parameters.unit.lower():
            raise InvalidParameterError(
                f"Coordinate unit '{coord.unit}' does not match projection unit '{self.parameters.unit}'"
            )

        return GeoPoint(*self.inverse(coord.northing, coord.easting), self.ellipsoid)

    def meridian_convergence(self, latitude: _AngleLike, longitude: _AngleLike) -> float:
        """
        Angle from true north to grid north at a point, in radians; positive east of the
        central meridian in the northern hemisphere.
        """
        latitude = float(latitude)
        delta_lon = self._delta_longitude(float(longitude))
        cos_b = math.cos(latitude)
        t2 = math.tan(latitude) ** 2
        eta = self.ellipsoid.ep2 * cos_b * cos_b
        lc2 = (delta_lon * cos_b) ** 2
        return delta_lon * math.sin(latitude) * (
            1 + lc2 * (1 + 3 * eta + 2 * eta * eta) / 3 + lc2 * lc2 * (2 - t2) / 15
        )

    def scale_factor_at(self, latitude: _AngleLike, longitude: _AngleLike) -> float:
        """Point scale factor of the grid at a geodetic position"""
        latitude = float(latitude)
        delta_lon = self._delta_longitude(float(longitude))
        cos_b = math.cos(latitude)
        t2 = math.tan(latitude) ** 2
        eta = self.ellipsoid.ep2 * cos_b * cos_b
        lc2 = (delta_lon * cos_b) ** 2
        return self.parameters.scale_factor * (
            1 + lc2 * (1 + eta) / 2 + lc2 * lc2 * (5 - 4 * t2) / 24
        )

    def direction_correction(
        self,
        latitude1: _AngleLike,
        longitude1: _AngleLike,
        latitude2: _AngleLike,
        longitude2: _AngleLike,
    ) -> float:
        """
        The angle between the grid chord from point 1 to point 2 and the projected image
        of the geodesic at point 1, in radians.

        The grid bearing of the chord equals the geodesic azimuth, less the meridian
        convergence at point 1, plus this correction.

        Args:
            latitude1, longitude1:
                The start point, in radians

            latitude2, longitude2:
                The end point, in radians

        Returns:
            float
        """
        x1, y1 = self.natural_forward(latitude1, longitude1)
        x2, y2 = self.natural_forward(latitude2, longitude2)

        mean_b = (float(latitude1) + float(latitude2)) / 2
        eta2 = self.ellipsoid.ep2 * math.cos(mean_b) ** 2
        tan_b = math.tan(mean_b)
        rm = self.ellipsoid.mean_curvature_radius(mean_b)
        rm2 = rm * rm
        ym = (y1 + y2) / 2

        return (
            -(x2 - x1) * (2 * y1 + y2 - ym ** 3 / rm2) / (6 * rm2)
            - eta2 * tan_b * (y2 - y1) * ym * ym / (rm * rm2)
        )


# -------------------------------------------------------------------------
# Gauss-Krueger zoning
# -------------------------------------------------------------------------

def _check_zone_width(width: float):
    if width not in (3, 6):
        raise InvalidParameterError(f'Gauss-Krueger zones are 3 or 6 degrees wide; received {width}')


def gauss_krueger_zone(longitude: _AngleLike, width: float = 6) -> int:
    """
    The Gauss-Krueger zone containing a longitude. Zone boundaries belong to the zone
    to their east.

    Args:
        longitude:
            Longitude, in radians

        width: (Default 6)
            Zone width in degrees; 3 or 6

    Returns:
        int: 1-60 for 6 degree zones, 1-120 for 3 degree zones
    """
    _check_zone_width(width)
    degrees = math.degrees(wrap_two_pi(float(longitude)))
    if width == 6:
        return min(int(degrees // 6) + 1, 60)

    zone = int((degrees + 1.5) // 3) % 120
    return zone or 120


def gauss_krueger_central_meridian(zone: int, width: float = 6) -> float:
    """
    Central meridian of a Gauss-Krueger zone, in radians within (-pi, pi].

    Args:
        zone:
            The zone number

        width: (Default 6)
            Zone width in degrees; 3 or 6

    Returns:
        float
    """
    _check_zone_width(width)
    max_zone = 60 if width == 6 else 120
    if not 1 <= zone <= max_zone:
        raise InvalidParameterError(f'Zone must be within [1, {max_zone}]; received {zone}')

    degrees = zone * 6 - 3 if width == 6 else zone * 3
    return wrap_pi(math.radians(degrees))


def gauss_krueger_parameters(zone: int, width: float = 6, prefix: bool = True) -> ProjectionParameters:
    """
    Grid parameters of a Gauss-Krueger zone: unit scale on the central meridian,
    500 km false easting, no false northing.

    Args:
        zone:
            The zone number

        width: (Default 6)
            Zone width in degrees; 3 or 6

        prefix: (Default True)
            Whether eastings carry the zone number in their millions digits

    Returns:
        ProjectionParameters
    """
    return ProjectionParameters(
        central_meridian=gauss_krueger_central_meridian(zone, width),
        scale_factor=1.,
        false_easting=GK_FALSE_EASTING,
        zone=zone,
        zone_width=width,
        zone_prefix=prefix,
        name=f'Gauss-Kruger {width} deg zone {zone}',
    )


def zone_from_easting(easting: float) -> int:
    """The zone number encoded in a prefixed easting, or 0 when there is none"""
    return max(int(math.floor(easting / GK_ZONE_PREFIX)), 0)


def natural_easting(easting: float) -> float:
    """
    Strips the zone prefix and false easting from a prefixed Gauss-Krueger easting.
    Eastings without a zone prefix are returned unchanged.
    """
    zone = zone_from_easting(easting)
    if zone > 0:
        return easting - zone * GK_ZONE_PREFIX - GK_FALSE_EASTING
    return easting


def rezone(
    source: TransverseMercator,
    target: TransverseMercator,
    northing: float,
    easting: float
) -> ProjectedCoord:
    """
    Re-expresses a grid coordinate of one projection in another, via geodetic position.

    Args:
        source:
            The projection the coordinate is expressed in

        target:
            The projection to express the coordinate in

        northing, easting:
            The grid coordinate in the source projection

    Returns:
        ProjectedCoord
    """
    if source.ellipsoid != target.ellipsoid:
        raise InvalidParameterError(
            f'Cannot rezone between ellipsoids {source.ellipsoid!r} and {target.ellipsoid!r}'
        )

    return target.forward(*source.inverse(northing, easting))


def _zoned_parameters(projection: TransverseMercator) -> ProjectionParameters:
    params = projection.parameters
    if params.zone is None or params.zone_width is None:
        raise InvalidParameterError(f'{params!r} is not a zoned grid')
    return params


def to_adjacent_zone(
    projection: TransverseMercator,
    northing: float,
    easting: float,
    east: bool = True
) -> ProjectedCoord:
    """
    Transforms a Gauss-Krueger coordinate into the neighboring zone.

    Args:
        projection:
            The Gauss-Krueger projection of the coordinate

        northing, easting:
            The grid coordinate

        east: (Default True)
            Whether to move to the zone to the east (otherwise, the west)

    Returns:
        ProjectedCoord
    """
    params = _zoned_parameters(projection)
    max_zone = 60 if params.zone_width == 6 else 120
    zone = params.zone % max_zone + 1 if east else (params.zone - 2) % max_zone + 1

    target = TransverseMercator(
        projection.ellipsoid,
        gauss_krueger_parameters(zone, params.zone_width, params.zone_prefix)
    )
    return rezone(projection, target, northing, easting)


def six_to_three_zone(projection: TransverseMercator, northing: float, easting: float) -> ProjectedCoord:
    """Transforms a 6 degree Gauss-Krueger coordinate into the 3 degree zone containing it"""
    params = _zoned_parameters(projection)
    if params.zone_width != 6:
        raise InvalidParameterError(f'{params!r} is not a 6 degree zone')

    _, longitude = projection.inverse(northing, easting)
    target = TransverseMercator(
        projection.ellipsoid,
        gauss_krueger_parameters(gauss_krueger_zone(longitude, 3), 3, params.zone_prefix)
    )
    return rezone(projection, target, northing, easting)


def three_to_six_zone(projection: TransverseMercator, northing: float, easting: float) -> ProjectedCoord:
    """Transforms a 3 degree Gauss-Krueger coordinate into the 6 degree zone containing it"""
    params = _zoned_parameters(projection)
    if params.zone_width != 3:
        raise InvalidParameterError(f'{params!r} is not a 3 degree zone')

    _, longitude = projection.inverse(northing, easting)
    target = TransverseMercator(
        projection.ellipsoid,
        gauss_krueger_parameters(gauss_krueger_zone(longitude, 6), 6, params.zone_prefix)
    )
    return rezone(projection, target, northing, easting)


# -------------------------------------------------------------------------
# Universal Transverse Mercator
# -------------------------------------------------------------------------

def _check_utm_latitude(latitude: float):
    if not UTM_MIN_LATITUDE <= latitude <= UTM_MAX_LATITUDE:
        raise DomainError(
            f'UTM is defined between 80S and 84N; received latitude {math.degrees(latitude)}'
        )


def utm_zone(latitude: _AngleLike, longitude: _AngleLike) -> int:
    """
    The UTM zone of a position, including the Norway and Svalbard exceptions.

    Args:
        latitude:
            Geodetic latitude, in radians

        longitude:
            Longitude, in radians

    Returns:
        int, 1-60
    """
    latitude = float(latitude)
    _check_utm_latitude(latitude)

    lat = math.degrees(latitude)
    lon = math.degrees(wrap_pi(float(longitude)))
    if lon >= 180:
        lon -= 360

    if 56 <= lat < 64 and 3 <= lon < 12:
        return 32

    if 72 <= lat <= 84 and 0 <= lon < 42:
        if lon < 9:
            return 31
        if lon < 21:
            return 33
        if lon < 33:
            return 35
        return 37

    return int((lon + 180) // 6) % 60 + 1


def utm_latitude_band(latitude: _AngleLike) -> str:
    """The UTM latitude band letter ('C' to 'X', omitting 'I' and 'O')"""
    latitude = float(latitude)
    _check_utm_latitude(latitude)
    index = int((math.degrees(latitude) + 80) // 8)
    return _UTM_BANDS[min(max(index, 0), len(_UTM_BANDS) - 1)]


def utm_central_meridian(zone: int) -> float:
    """Central meridian of a UTM zone, in radians"""
    if not 1 <= zone <= 60:
        raise InvalidParameterError(f'UTM zone must be within [1, 60]; received {zone}')
    return math.radians(zone * 6 - 183)


def utm_parameters(zone: int, south: bool = False) -> ProjectionParameters:
    """
    Grid parameters of a UTM zone.

    Args:
        zone:
            The zone number, 1-60

        south: (Default False)
            Whether the grid is the southern hemisphere variant (10,000 km false northing)

    Returns:
        ProjectionParameters
    """
    return ProjectionParameters(
        central_meridian=utm_central_meridian(zone),
        scale_factor=UTM_SCALE_FACTOR,
        false_easting=UTM_FALSE_EASTING,
        false_northing=UTM_FALSE_NORTHING_SOUTH if south else 0.,
        zone=zone,
        zone_width=6,
        name=f'UTM zone {zone}{"S" if south else "N"}',
    )
