"""Rounding helpers.

Dashboard figures round half away from zero for positive values (2.5 -> 3),
not to even as the builtin ``round`` does.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


def round1(value: float) -> float:
    """Round to one decimal place, halves going up."""
    return math.floor(value * 10 + 0.5) / 10
