"""Module for miscellaneous multi-use functions"""

__all__ = ['round_half_up', 'round_to_meter']

import math


def round_half_up(value: float, precision: int) -> float:
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


def round_to_meter(value: float) -> int:
    """
    Rounds a projected distance to a whole number of meters, halves rounding up.

    round_half_up's nudge is lost to float spacing at UTM magnitudes
    (~1e-10 at 10,000km), so halves are resolved with floor() instead.
    """
    return int(math.floor(value + 0.5))
