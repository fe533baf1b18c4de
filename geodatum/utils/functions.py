"""Module for miscellaneous multi-use functions"""

__all__ = [
    'round_half_up', 'wrap_pi', 'wrap_two_pi'
]

import math

_TWO_PI = 2 * math.pi


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def wrap_two_pi(value: float) -> float:
    """
    Wraps an angle (radians) into [0, 2pi).

    Args:
        value:
            The angle, in radians

    Returns:
        float
    """
    wrapped = value % _TWO_PI
    if wrapped >= _TWO_PI:
        # -1e-17 % 2pi rounds up to 2pi
        return 0.
    return wrapped


def wrap_pi(value: float) -> float:
    """
    Wraps an angle (radians) into (-pi, pi].

    Args:
        value:
            The angle, in radians

    Returns:
        float
    """
    wrapped = wrap_two_pi(value)
    if wrapped > math.pi:
        wrapped -= _TWO_PI
    return wrapped
