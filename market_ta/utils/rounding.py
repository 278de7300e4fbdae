"""
Rounding helpers for report figures.

Report figures round halves toward positive infinity (2.5 -> 3, -2.5 -> -2).
The builtin round() rounds halves to even.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upward."""
    return math.floor(value + 0.5)


def round_half_up_to(value: float, ndigits: int) -> float:
    """
    Round to `ndigits` decimal places, halves upward.

    Args:
        value: Number to round
        ndigits: Decimal places to keep

    Returns:
        Rounded value
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor
