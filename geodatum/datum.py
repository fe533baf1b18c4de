"""
Datum transformations: seven-parameter Bursa-Wolf (Helmert), Molodensky-Badekas,
standard Molodensky, and least-squares estimation of the seven
parameters from common points.

Rotations follow the position-vector convention, in which a positive rotation turns the
point counter-clockwise when viewed from the positive axis toward the origin:

    X' = T + (1 + s) R X

        | 1   -rz  ry |
    R = | rz   1  -rx |
        | -ry  rx  1  |
"""

__all__ = [
    'TransParameters', 'bursa_wolf', 'bursa_wolf_array', 'bursa_wolf_inverse',
    'estimate_parameters', 'helmert', 'molodensky', 'molodensky_badekas',
    'transform_geodetic', 'transform_point',
]

import math
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from geodatum._const import ARCSEC_TO_RAD, PPM, RAD_TO_ARCSEC
from geodatum.conversion import geocentric_to_geodetic, geodetic_to_geocentric
from geodatum.coordinates import GeoPoint, GeodeticCoord, SpaceRectangularCoord
from geodatum.ellipsoid import Ellipsoid
from geodatum.exceptions import InvalidParameterError
from geodatum.utils.logging import LOGGER, warn_once

_PointLike = Union[SpaceRectangularCoord, Sequence[float], np.ndarray]


class TransParameters:
    """
    The parameters of a datum shift from a source to a target ellipsoid.

    Args:
        source:
            The ellipsoid of the input coordinates

        target:
            The ellipsoid of the output coordinates

        dx, dy, dz: (Default 0)
            Translations, in meters

        rx, ry, rz: (Default 0)
            Rotations, in arc-seconds (position-vector convention)

        scale: (Default 0)
            Scale difference, in parts per million

        px, py, pz: (Optional)
            The rotation pivot used by the Molodensky-Badekas transformation, in meters.
            Omitted pivots rotate about the geocenter.
    """

    def __init__(
        self,
        source: Ellipsoid,
        target: Ellipsoid,
        dx: float = 0.,
        dy: float = 0.,
        dz: float = 0.,
        rx: float = 0.,
        ry: float = 0.,
        rz: float = 0.,
        scale: float = 0.,
        px: Optional[float] = None,
        py: Optional[float] = None,
        pz: Optional[float] = None,
    ):
        for name, ellipsoid in (('source', source), ('target', target)):
            if not isinstance(ellipsoid, Ellipsoid):
                raise InvalidParameterError(
                    f'TransParameters {name} must be an Ellipsoid; received {type(ellipsoid).__name__}'
                )

        try:
            values = tuple(float(value) for value in (dx, dy, dz, rx, ry, rz, scale))
            pivot = tuple(None if value is None else float(value) for value in (px, py, pz))
        except (TypeError, ValueError) as exc:
            raise InvalidParameterError(f'Transformation parameters must be numeric: {exc}') from exc

        if not all(math.isfinite(value) for value in values):
            raise InvalidParameterError(f'Transformation parameters must be finite; received {values}')

        if any(value is None for value in pivot) and not all(value is None for value in pivot):
            raise InvalidParameterError('A rotation pivot requires all three of px, py and pz')

        dx, dy, dz, rx, ry, rz, scale = values

        self.source = source
        self.target = target
        self.dx, self.dy, self.dz = dx, dy, dz
        self.rx, self.ry, self.rz = rx, ry, rz
        self.scale = scale
        self.px, self.py, self.pz = pivot

    def __eq__(self, other):
        if not isinstance(other, TransParameters):
            return False

        return (
            self.source == other.source and
            self.target == other.target and
            self.to_tuple() == other.to_tuple() and
            self.pivot == other.pivot
        )

    def __hash__(self):
        return hash((self.source, self.target, self.to_tuple(), self.pivot))

    def __repr__(self):
        return (
            f'<TransParameters {self.source.name or "?"} -> {self.target.name or "?"} '
            f'T=({self.dx}, {self.dy}, {self.dz}) m, R=({self.rx}, {self.ry}, {self.rz})", '
            f's={self.scale} ppm>'
        )

    @property
    def has_pivot(self) -> bool:
        return self.px is not None

    @property
    def pivot(self) -> Optional[Tuple[float, float, float]]:
        if not self.has_pivot:
            return None
        return self.px, self.py, self.pz

    @property
    def translation(self) -> np.ndarray:
        return np.array([self.dx, self.dy, self.dz])

    @property
    def scale_multiplier(self) -> float:
        """The multiplier 1 + s, with s converted from ppm"""
        return 1 + self.scale * PPM

    @property
    def rotation_matrix(self) -> np.ndarray:
        """The small-angle rotation matrix, position-vector convention"""
        rx, ry, rz = (value * ARCSEC_TO_RAD for value in (self.rx, self.ry, self.rz))
        return np.array([
            [1., -rz, ry],
            [rz, 1., -rx],
            [-ry, rx, 1.],
        ])

    def to_tuple(self) -> Tuple[float, ...]:
        """Returns (dx, dy, dz, rx, ry, rz, scale)"""
        return self.dx, self.dy, self.dz, self.rx, self.ry, self.rz, self.scale

    def inverted(self) -> 'TransParameters':
        """
        The approximate reverse transformation: all seven parameters negated and the
        ellipsoids swapped. Composing a transformation with its inversion recovers the
        original point to second order in the parameters.
        """
        return TransParameters(
            self.target,
            self.source,
            *(-value for value in self.to_tuple()),
            px=self.px,
            py=self.py,
            pz=self.pz,
        )


def _as_vector(xyz: _PointLike) -> np.ndarray:
    if isinstance(xyz, SpaceRectangularCoord):
        return np.array(xyz.to_float())

    vector = np.asarray(xyz, dtype=float)
    if vector.shape != (3,):
        raise InvalidParameterError(f'Expected an (x, y, z) coordinate; received shape {vector.shape}')
    return vector


def bursa_wolf(xyz: _PointLike, params: TransParameters) -> SpaceRectangularCoord:
    """
    Applies a seven-parameter Bursa-Wolf transformation to a geocentric coordinate.

    Args:
        xyz:
            A geocentric coordinate on the source datum

        params:
            The transformation parameters

    Returns:
        SpaceRectangularCoord on the target datum
    """
    vector = _as_vector(xyz)
    x, y, z = params.translation + params.scale_multiplier * (params.rotation_matrix @ vector)
    return SpaceRectangularCoord(x, y, z)


# The seven-parameter similarity transformation goes by both names
helmert = bursa_wolf


def bursa_wolf_inverse(
    xyz: _PointLike,
    params: TransParameters,
    exact: bool = False
) -> SpaceRectangularCoord:
    """
    Reverses a Bursa-Wolf transformation, taking a target datum coordinate back to the
    source datum.

    Args:
        xyz:
            A geocentric coordinate on the target datum

        params:
            The (forward) transformation parameters

        exact: (Default False)
            By default, the transformation is reversed by applying the negated
            parameters, which is accurate to second order in the parameters. If True,
            the linear system is solved instead.

    Returns:
        SpaceRectangularCoord on the source datum
    """
    if not exact:
        return bursa_wolf(xyz, params.inverted())

    vector = _as_vector(xyz)
    x, y, z = np.linalg.solve(
        params.scale_multiplier * params.rotation_matrix,
        vector - params.translation
    )
    return SpaceRectangularCoord(x, y, z)


def bursa_wolf_array(points, params: TransParameters) -> np.ndarray:
    """
    Applies a Bursa-Wolf transformation to many geocentric coordinates at once.

    Args:
        points:
            An array-like of shape (n, 3)

        params:
            The transformation parameters

    Returns:
        numpy array of shape (n, 3)
    """
    points = np.asarray(points, dtype=float)
    if points.ndim != 2 or points.shape[1] != 3:
        raise InvalidParameterError(f'Expected an array of shape (n, 3); received {points.shape}')

    return points @ (params.scale_multiplier * params.rotation_matrix).T + params.translation


def transform_geodetic(coord: GeodeticCoord, params: TransParameters) -> GeodeticCoord:
    """
    Transforms a geodetic coordinate between datums, through geocentric coordinates
    on each ellipsoid.

    Args:
        coord:
            Latitude, longitude and height on the source ellipsoid

        params:
            The transformation parameters

    Returns:
        GeodeticCoord on the target ellipsoid
    """
    xyz = geodetic_to_geocentric(params.source, *coord.to_float())
    shifted = bursa_wolf(xyz, params)
    return GeodeticCoord(*geocentric_to_geodetic(params.target, *shifted.to_float()))


def transform_point(point: GeoPoint, params: TransParameters, height: float = 0.) -> GeoPoint:
    """
    Transforms a GeoPoint between datums. The height above the target ellipsoid is
    discarded.

    Args:
        point:
            A point on the source ellipsoid

        params:
            The transformation parameters

        height: (Default 0)
            The point's height above the source ellipsoid, in meters

    Returns:
        GeoPoint on the target ellipsoid
    """
    if point.ellipsoid != params.source:
        raise InvalidParameterError(
            f'Point lies on {point.ellipsoid!r}, but the transformation expects {params.source!r}'
        )

    result = transform_geodetic(GeodeticCoord(point.latitude, point.longitude, height), params)
    return GeoPoint(result.latitude, result.longitude, params.target)


def molodensky(coord: GeodeticCoord, params: TransParameters) -> GeodeticCoord:
    """
    Standard Molodensky transformation: shifts latitude, longitude and height directly
    for a translation between datums and a change of ellipsoid. Rotation and scale
    parameters are ignored.

    Args:
        coord:
            Latitude, longitude and height on the source ellipsoid

        params:
            The transformation parameters

    Returns:
        GeodeticCoord on the target ellipsoid
    """
    if params.rx or params.ry or params.rz or params.scale:
        warn_once('Molodensky transformation ignores rotation and scale parameters')

    source = params.source
    da = params.target.a - source.a
    df = params.target.f - source.f
    a, f, e2 = source.a, source.f, source.e2

    lat, lon, height = coord.to_float()
    sin_b, cos_b = math.sin(lat), math.cos(lat)
    sin_l, cos_l = math.sin(lon), math.cos(lon)
    rm = source.meridian_radius(lat)
    rn = source.prime_vertical_radius(lat)
    dx, dy, dz = params.dx, params.dy, params.dz

    d_lat = (
        -dx * sin_b * cos_l - dy * sin_b * sin_l + dz * cos_b
        + da * rn * e2 * sin_b * cos_b / a
        + df * (rm / (1 - f) + rn * (1 - f)) * sin_b * cos_b
    ) / (rm + height)

    d_lon = (-dx * sin_l + dy * cos_l) / ((rn + height) * cos_b)

    d_height = (
        dx * cos_b * cos_l + dy * cos_b * sin_l + dz * sin_b
        - da * a / rn
        + df * rn * (1 - f) * sin_b * sin_b
    )

    return GeodeticCoord(lat + d_lat, lon + d_lon, height + d_height)


def molodensky_badekas(xyz: _PointLike, params: TransParameters) -> SpaceRectangularCoord:
    """
    Molodensky-Badekas transformation: a seven-parameter transformation whose rotation
    and scale act about a pivot point rather than the geocenter.

        X' = T + P + (1 + s) R (X - P)

    Args:
        xyz:
            A geocentric coordinate on the source datum

        params:
            The transformation parameters. Without a pivot, this reduces to Bursa-Wolf.

    Returns:
        SpaceRectangularCoord on the target datum
    """
    vector = _as_vector(xyz)
    pivot = np.array(params.pivot) if params.has_pivot else np.zeros(3)
    x, y, z = (
        params.translation + pivot
        + params.scale_multiplier * (params.rotation_matrix @ (vector - pivot))
    )
    return SpaceRectangularCoord(x, y, z)


def _as_points(points) -> np.ndarray:
    rows = [
        point.to_float() if isinstance(point, SpaceRectangularCoord) else point
        for point in points
    ]
    array = np.asarray(rows, dtype=float)
    if array.ndim != 2 or array.shape[1] != 3:
        raise InvalidParameterError(f'Expected (x, y, z) coordinates; received shape {array.shape}')
    return array


def estimate_parameters(
    source_points,
    target_points,
    source: Ellipsoid,
    target: Ellipsoid,
) -> TransParameters:
    """
    Fits the seven Bursa-Wolf parameters to pairs of common points by least squares,
    using the small-angle linearization of the rotation.

    Args:
        source_points:
            Geocentric coordinates on the source datum; SpaceRectangularCoords or an
            array-like of shape (n, 3)

        target_points:
            The same points' geocentric coordinates on the target datum

        source:
            The source ellipsoid

        target:
            The target ellipsoid

    Returns:
        TransParameters
    """
    src = _as_points(source_points)
    dst = _as_points(target_points)
    if src.shape != dst.shape:
        raise InvalidParameterError(
            f'Source and target point sets differ in shape: {src.shape} vs. {dst.shape}'
        )

    if src.shape[0] < 3:
        raise InvalidParameterError(
            f'At least 3 common points are required; received {src.shape[0]}'
        )

    x, y, z = src[:, 0], src[:, 1], src[:, 2]
    ones, zeros = np.ones_like(x), np.zeros_like(x)

    # Unknowns: dx, dy, dz, rx, ry, rz (radians), scale (unitless)
    design = np.empty((3 * len(src), 7))
    design[0::3] = np.column_stack([ones, zeros, zeros, zeros, z, -y, x])
    design[1::3] = np.column_stack([zeros, ones, zeros, -z, zeros, x, y])
    design[2::3] = np.column_stack([zeros, zeros, ones, y, -x, zeros, z])
    observed = (dst - src).reshape(-1)

    solution, _, rank, _ = np.linalg.lstsq(design, observed, rcond=None)
    if rank < 7:
        raise InvalidParameterError('Common points are degenerate; parameters are not determined')

    residuals = observed - design @ solution
    LOGGER.debug(
        'Estimated transformation from %d points, RMS residual %.4f m',
        len(src), float(np.sqrt(np.mean(residuals ** 2)))
    )

    dx, dy, dz, rx, ry, rz, scale = solution.tolist()
    return TransParameters(
        source,
        target,
        dx, dy, dz,
        rx * RAD_TO_ARCSEC, ry * RAD_TO_ARCSEC, rz * RAD_TO_ARCSEC,
        scale / PPM,
    )
