"""
Dimension Results
brs_scoring/scoring/results.py

DimensionResult is the single output record of the scoring core, used for
dimensions, domain totals and the intralaboral / general totals.

score_target() is the shared path every result goes through:
    raw / max ──► transform ──► resolve table ──► classify ──► DimensionResult
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional

from brs_scoring.models.enumerations import (
    QuestionnaireVariant,
    RiskLevel,
    TableProvenance,
    TableScope,
)
from brs_scoring.scoring.normative_tables import NormativeTableRepository
from brs_scoring.scoring.risk_classifier import classify
from brs_scoring.scoring.score_transformer import percentile, transform


@dataclass(frozen=True)
class DimensionResult:
    """Classified score of one dimension, domain or total."""
    variant: QuestionnaireVariant
    dimension: str                 # dimension id, "<domain>_total" or a total id
    domain_id: Optional[str]
    raw_score: int
    max_raw_score: int
    transformed_score: Decimal     # [0, 100], 2 decimals
    percentile: Decimal
    risk_level: RiskLevel
    answered_question_count: int
    total_question_count: int
    is_domain_total: bool = False
    table_provenance: TableProvenance = TableProvenance.OFFICIAL
    gap_fallback: bool = False     # True when the boundary policy assigned the level

    @property
    def degraded(self) -> bool:
        """Scored against placeholder ranges or outside every declared range."""
        return self.table_provenance == TableProvenance.FALLBACK or self.gap_fallback

    def to_dict(self) -> Dict[str, Any]:
        return {
            "questionnaire_type": self.variant.value,
            "dimension": self.dimension,
            "domain": self.domain_id,
            "raw_score": self.raw_score,
            "max_raw_score": self.max_raw_score,
            "transformed_score": float(self.transformed_score),
            "percentile": float(self.percentile),
            "risk_level": self.risk_level.value,
            "answered_questions": self.answered_question_count,
            "total_questions": self.total_question_count,
            "is_domain_total": self.is_domain_total,
            "table_provenance": self.table_provenance.value,
            "gap_fallback": self.gap_fallback,
        }


def score_target(
    repository: NormativeTableRepository,
    variant: QuestionnaireVariant,
    scope: TableScope,
    table_key: str,
    *,
    dimension: str,
    domain_id: Optional[str],
    raw_score: int,
    max_raw_score: int,
    answered_question_count: int,
    total_question_count: int,
    is_domain_total: bool = False,
    strict: bool = False,
) -> DimensionResult:
    """Transform, classify and package one scoring target."""
    transformed = transform(raw_score, max_raw_score)
    lookup = repository.resolve(variant, scope, table_key, strict=strict)
    outcome = classify(transformed, lookup.table)

    return DimensionResult(
        variant=variant,
        dimension=dimension,
        domain_id=domain_id,
        raw_score=raw_score,
        max_raw_score=max_raw_score,
        transformed_score=transformed,
        percentile=percentile(transformed),
        risk_level=outcome.level,
        answered_question_count=answered_question_count,
        total_question_count=total_question_count,
        is_domain_total=is_domain_total,
        table_provenance=lookup.table.provenance,
        gap_fallback=not outcome.matched,
    )
