"""
Risk Classifier
brs_scoring/scoring/risk_classifier.py

Assigns one of the five BRS risk levels to a transformed score.

Algorithm:
  1. Scan ranges from sin_riesgo up to riesgo_muy_alto; return the first
     whose [lower, upper] contains the score (both bounds inclusive).
  2. Otherwise apply the boundary policy:
       score < lowest lower bound    → sin_riesgo
       score > highest upper bound   → riesgo_muy_alto
       anything else (a gap)         → riesgo_medio

Gaps come from the literal tables, e.g. caracteristicas_liderazgo (Forma A)
ends sin_riesgo at 3.8 and starts riesgo_bajo at 3.9, so 3.85 matches no
range. Unmatched scores are logged and flagged on the outcome.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

import structlog

from brs_scoring.models.enumerations import RiskLevel
from brs_scoring.scoring.normative_tables import RiskTable

logger = structlog.get_logger(__name__)


class BoundaryPolicy(str, Enum):
    """Rule applied when a score matches no range."""
    BELOW_LOWEST = "below_lowest"
    ABOVE_HIGHEST = "above_highest"
    GAP = "gap"


@dataclass(frozen=True)
class ClassificationOutcome:
    """Output of classify()."""
    level: RiskLevel
    score: Decimal
    matched: bool                            # False when the boundary policy decided
    policy: Optional[BoundaryPolicy] = None  # set only when matched is False


def classify(score: Union[Decimal, float, int], table: RiskTable) -> ClassificationOutcome:
    """
    Classify a transformed score against a 5-level risk table.

    Args:
        score: Transformed score on the 0-100 scale.
        table: RiskTable of the dimension, domain or total.

    Returns:
        ClassificationOutcome with the level and whether a range matched.

    Examples:
        >>> table = get_normative_repository().lookup(
        ...     QuestionnaireVariant.INTRALABORAL_A, TableScope.DIMENSION, "demandas_cuantitativas")
        >>> classify(Decimal("50.00"), table).level
        <RiskLevel.RIESGO_ALTO: 'riesgo_alto'>
    """
    score = Decimal(str(score))

    for risk_range in table.ranges:
        if risk_range.contains(score):
            return ClassificationOutcome(level=risk_range.level, score=score, matched=True)

    if score < table.lowest.lower:
        level, policy = RiskLevel.SIN_RIESGO, BoundaryPolicy.BELOW_LOWEST
    elif score > table.highest.upper:
        level, policy = RiskLevel.RIESGO_MUY_ALTO, BoundaryPolicy.ABOVE_HIGHEST
    else:
        level, policy = RiskLevel.RIESGO_MEDIO, BoundaryPolicy.GAP

    logger.warning(
        "score_outside_ranges",
        score=float(score),
        policy=policy.value,
        assigned_level=level.value,
        table_provenance=table.provenance.value,
    )
    return ClassificationOutcome(level=level, score=score, matched=False, policy=policy)


def classify_level(score: Union[Decimal, float, int], table: RiskTable) -> RiskLevel:
    """Convenience wrapper returning only the risk level."""
    return classify(score, table).level
