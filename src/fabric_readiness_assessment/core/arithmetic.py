"""Numeric helpers shared by the scorers and the value calculator."""

import math


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into the closed range [lower, upper]."""
    return min(upper, max(lower, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going towards +infinity.

    Unlike the built-in round(), round_half_up(2.5) == 3 and
    round_half_up(-2.5) == -2.
    """
    return math.floor(value + 0.5)
