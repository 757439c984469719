"""
Evaluation Statistics
brs_scoring/scoring/statistics.py

Aggregates the result sets of many participants into per-dimension
statistics for organizational reports:
  - participants per risk level (all five levels, zero-filled)
  - average transformed score
  - count of degraded results (fallback table or boundary policy)
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence, Tuple

from brs_scoring.models.enumerations import QuestionnaireVariant, RiskLevel
from brs_scoring.scoring.results import DimensionResult
from brs_scoring.scoring.utils import mean


@dataclass
class DimensionStatistics:
    """Risk distribution of one (variant, dimension) across participants."""
    variant: QuestionnaireVariant
    dimension: str
    is_domain_total: bool
    risk_levels: Dict[RiskLevel, int] = field(
        default_factory=lambda: {level: 0 for level in RiskLevel}
    )
    participant_count: int = 0
    average_score: Decimal = Decimal("0")
    degraded_count: int = 0

    @property
    def intervention_count(self) -> int:
        """Participants at riesgo_alto or riesgo_muy_alto."""
        return sum(n for level, n in self.risk_levels.items() if level.requires_intervention)


def summarize_results(result_sets: Iterable[Sequence[DimensionResult]]) -> List[DimensionStatistics]:
    """
    Args:
        result_sets: One result list per participant (calculate_results output).

    Returns:
        Statistics per (variant, dimension) in order of first appearance.
    """
    stats: Dict[Tuple[QuestionnaireVariant, str], DimensionStatistics] = {}
    scores: Dict[Tuple[QuestionnaireVariant, str], List[Decimal]] = {}

    for results in result_sets:
        for result in results:
            key = (result.variant, result.dimension)
            entry = stats.get(key)
            if entry is None:
                entry = DimensionStatistics(
                    variant=result.variant,
                    dimension=result.dimension,
                    is_domain_total=result.is_domain_total,
                )
                stats[key] = entry
                scores[key] = []

            entry.risk_levels[result.risk_level] += 1
            entry.participant_count += 1
            if result.degraded:
                entry.degraded_count += 1
            scores[key].append(result.transformed_score)

    for key, entry in stats.items():
        entry.average_score = mean(scores[key])

    return list(stats.values())
