"""Rounding used for every presented figure."""

import math
from typing import Union


def round_half_up(value: float) -> Union[int, float]:
    """Round to the nearest whole unit, halves toward +infinity.

    Python's round() uses banker's rounding, which would report 2 for 2.5.
    Non-finite values (an overflowed balance) pass through unchanged.
    """
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))
