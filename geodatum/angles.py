"""
Normalized angular value types
"""

__all__ = ['Angle', 'Azimuth', 'Latitude', 'Longitude']

import math
from typing import Optional, Tuple, Union

from geodatum.exceptions import InvalidParameterError
from geodatum.utils.functions import round_half_up, wrap_pi, wrap_two_pi

_POLE_TOLERANCE = 1e-12


class Angle:
    """
    A signed angle, held in radians.

    Subclasses bound the value to a range; arithmetic on any angle returns
    a new angle of the same type, normalized to that type's range.
    """

    def __init__(self, radians: Union[float, int, 'Angle']):
        value = float(radians)
        if not math.isfinite(value):
            raise InvalidParameterError(f'{type(self).__name__} must be finite; received {value}')

        self.radians = self._normalize(value)

    @staticmethod
    def _normalize(value: float) -> float:
        return value

    def __float__(self):
        return self.radians

    def __eq__(self, other):
        if type(other) is not type(self):
            return False

        return self.radians == other.radians

    def __hash__(self):
        return hash((type(self).__name__, self.radians))

    def __repr__(self):
        return f'<{type(self).__name__}({self.degrees} deg)>'

    def __add__(self, other: Union[float, 'Angle']):
        return type(self)(self.radians + float(other))

    def __sub__(self, other: Union[float, 'Angle']):
        return type(self)(self.radians - float(other))

    def __neg__(self):
        return type(self)(-self.radians)

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    @property
    def dms(self) -> Tuple[int, int, float]:
        return self.to_dms()

    @classmethod
    def from_degrees(cls, degrees: float):
        """Creates an angle from a value in degrees"""
        return cls(math.radians(degrees))

    @classmethod
    def from_dms(
        cls,
        degrees: float,
        minutes: float = 0.,
        seconds: float = 0.,
        hemisphere: Optional[str] = None
    ):
        """
        Creates an angle from degrees, minutes and seconds.

        The angle is negative if any component is negative, or if the hemisphere
        is 'S' or 'W'.

        Args:
            degrees:
                Whole (or fractional) degrees

            minutes:
                Minutes of arc

            seconds:
                Seconds of arc

            hemisphere: (Optional)
                One of 'N', 'S', 'E', 'W'

        Returns:
            Angle
        """
        if hemisphere is not None and hemisphere.upper() not in ('N', 'S', 'E', 'W'):
            raise InvalidParameterError(f'Unrecognized hemisphere {hemisphere!r}')

        negative = degrees < 0 or minutes < 0 or seconds < 0
        if hemisphere is not None and hemisphere.upper() in ('S', 'W'):
            negative = not negative

        value = abs(degrees) + abs(minutes) / 60 + abs(seconds) / 3600
        return cls.from_degrees(-value if negative else value)

    def to_dms(self, precision: int = 5) -> Tuple[int, int, float]:
        """
        Splits the angle into degrees, minutes and seconds.

        The sign is carried by the first non-zero component.

        Args:
            precision: (Default 5)
                Decimal places of the seconds component

        Returns:
            A (degrees, minutes, seconds) tuple
        """
        total = abs(self.degrees)
        sign = -1 if self.radians < 0 else 1

        deg = int(total)
        minutes = int((total - deg) * 60)
        seconds = round_half_up((total - deg - minutes / 60) * 3600, precision)
        if seconds >= 60:
            seconds -= 60
            minutes += 1
        if minutes >= 60:
            minutes -= 60
            deg += 1

        if deg:
            return sign * deg, minutes, seconds
        if minutes:
            return 0, sign * minutes, seconds
        return 0, 0, sign * seconds


class Latitude(Angle):
    """
    A geodetic latitude, within [-pi/2, pi/2].

    Values are first wrapped into (-pi, pi]; anything still beyond a pole
    is rejected.
    """

    @staticmethod
    def _normalize(value: float) -> float:
        value = wrap_pi(value)
        if abs(value) > math.pi / 2:
            if abs(value) - math.pi / 2 > _POLE_TOLERANCE:
                raise InvalidParameterError(
                    f'Latitude must be within [-90, 90] degrees; received {math.degrees(value)}'
                )
            value = math.copysign(math.pi / 2, value)

        return value


class Longitude(Angle):
    """A longitude, wrapped into (-pi, pi]"""

    @staticmethod
    def _normalize(value: float) -> float:
        return wrap_pi(value)


class Azimuth(Angle):
    """An azimuth or bearing, clockwise from north and wrapped into [0, 2pi)"""

    @staticmethod
    def _normalize(value: float) -> float:
        return wrap_two_pi(value)
