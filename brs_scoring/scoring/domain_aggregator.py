"""
Domain Aggregator
brs_scoring/scoring/domain_aggregator.py

Rolls dimension results up into domain totals for the intralaboral forms.

Formula (per domain, over dimensions that produced a result):
    domain_raw = Σ dimension.raw_score
    domain_max = Σ dimension.max_raw_score
    domain_transformed = round(domain_raw / domain_max × 100, 2)

The domain is classified against its own table (Tablas 31/32) and emitted
as "<domain>_total" with is_domain_total=True.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

import structlog

from brs_scoring.models.enumerations import QuestionnaireVariant, TableScope
from brs_scoring.scoring.normative_tables import NormativeTableRepository
from brs_scoring.scoring.results import DimensionResult, score_target

logger = structlog.get_logger(__name__)


@dataclass
class _DomainAccumulator:
    raw_score: int = 0
    max_raw_score: int = 0
    answered: int = 0
    total: int = 0


class DomainAggregator:
    """Combine the dimension results of each domain into a domain total."""

    def __init__(self, repository: NormativeTableRepository, strict: bool = False):
        self.repository = repository
        self.strict = strict

    def aggregate(
        self,
        variant: QuestionnaireVariant,
        dimension_results: Sequence[DimensionResult],
    ) -> List[DimensionResult]:
        """
        Args:
            variant: Questionnaire variant the results belong to.
            dimension_results: Dimension-level results in schema order.

        Returns:
            One domain total per domain present, in order of first appearance.
            Empty for variants without domains.
        """
        if not variant.has_domains:
            return []

        domains: Dict[str, _DomainAccumulator] = {}
        for result in dimension_results:
            if result.is_domain_total or result.domain_id is None:
                continue
            acc = domains.setdefault(result.domain_id, _DomainAccumulator())
            acc.raw_score += result.raw_score
            acc.max_raw_score += result.max_raw_score
            acc.answered += result.answered_question_count
            acc.total += result.total_question_count

        domain_results = []
        for domain_id, acc in domains.items():
            result = score_target(
                self.repository,
                variant,
                TableScope.DOMAIN,
                domain_id,
                dimension=f"{domain_id}_total",
                domain_id=domain_id,
                raw_score=acc.raw_score,
                max_raw_score=acc.max_raw_score,
                answered_question_count=acc.answered,
                total_question_count=acc.total,
                is_domain_total=True,
                strict=self.strict,
            )
            logger.debug(
                "domain_scored",
                variant=variant.value,
                domain=domain_id,
                raw_score=acc.raw_score,
                max_raw_score=acc.max_raw_score,
                transformed_score=float(result.transformed_score),
                risk_level=result.risk_level.value,
            )
            domain_results.append(result)

        return domain_results
