"""
Score Transformer
brs_scoring/scoring/score_transformer.py

Converts a raw sum of answer values into the 0-100 transformed score used by
every normative table.

Formula (BRS):
    transformed = round((raw_score / max_raw_score) × 100, 2)

Examples:
    raw 6 of 12    → 50.00
    raw 2 of 52    → 3.85
    raw 0 of 48    → 0.00
"""

from decimal import Decimal, ROUND_HALF_UP

from brs_scoring.scoring.utils import SCORE_PLACES, clamp

_HUNDRED = Decimal("100")
_QUANTUM = Decimal(10) ** -SCORE_PLACES


def transform(raw_score: int, max_raw_score: int) -> Decimal:
    """
    Transform a raw score into a percentage of its maximum.

    Args:
        raw_score: Sum of the answered values.
        max_raw_score: Maximum attainable raw score (> 0).

    Returns:
        Decimal rounded half-up to 2 places.
    """
    if max_raw_score <= 0:
        raise ValueError(f"max_raw_score must be > 0, got {max_raw_score}")

    ratio = Decimal(raw_score) / Decimal(max_raw_score)
    return (ratio * _HUNDRED).quantize(_QUANTUM, rounding=ROUND_HALF_UP)


def percentile(transformed_score: Decimal) -> Decimal:
    """BRS tables are expressed on the 0-100 scale, so the percentile is the bounded score."""
    return clamp(transformed_score)
