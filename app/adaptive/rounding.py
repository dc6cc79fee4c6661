"""
Rounding helpers.

Halves round towards +inf (2.5 -> 3, -2.5 -> -2).  The built-in
:func:`round` rounds half to even and would give 2 and -2.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding towards +inf."""
    return int(math.floor(value + 0.5))


def round_to_increment(value: float, increment: float = 2.5) -> float:
    """Round ``value`` to the nearest multiple of ``increment`` (halves up)."""
    return math.floor(value / increment + 0.5) * increment
