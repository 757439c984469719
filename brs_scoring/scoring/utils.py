"""
Decimal Utilities
brs_scoring/scoring/utils.py

Provides precision-safe decimal math for scoring calculations.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List

SCORE_PLACES = 2


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def mean(values: List[Decimal], places: int = SCORE_PLACES) -> Decimal:
    """
    Arithmetic mean rounded half-up.

    Returns Decimal("0") for an empty list.
    """
    if not values:
        return Decimal("0")
    return (sum(values) / Decimal(len(values))).quantize(
        Decimal(10) ** -places, rounding=ROUND_HALF_UP
    )
