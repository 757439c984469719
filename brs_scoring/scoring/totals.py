"""
Total Scores
brs_scoring/scoring/totals.py

Questionnaire-level totals for the intralaboral forms, computed from result
sets already produced by the orchestrator.

Formulas (dimension-level entries only, domain totals are excluded so no
answer is counted twice):
    intralaboral_total = Σ raw / Σ max          → total/intralaboral (Tabla 33)
    general_total      = (Σ raw_intra + Σ raw_extra)
                         / (Σ max_intra + Σ max_extra)
                                                → total/general (Tabla 34)
"""

from typing import List, Optional, Sequence

import structlog

from brs_scoring.config import get_settings
from brs_scoring.core.exceptions import EmptyInputException, UnsupportedVariantException
from brs_scoring.models.enumerations import QuestionnaireVariant, TableScope
from brs_scoring.scoring.baremos import TOTAL_GENERAL, TOTAL_INTRALABORAL
from brs_scoring.scoring.normative_tables import NormativeTableRepository, get_normative_repository
from brs_scoring.scoring.results import DimensionResult, score_target

logger = structlog.get_logger(__name__)


def _dimension_entries(results: Sequence[DimensionResult]) -> List[DimensionResult]:
    return [r for r in results if not r.is_domain_total]


def _single_variant(results: Sequence[DimensionResult]) -> QuestionnaireVariant:
    variants = {r.variant for r in results}
    if len(variants) != 1:
        raise ValueError(f"expected results of a single variant, got {sorted(v.value for v in variants)}")
    return variants.pop()


class TotalScoreCalculator:
    """Compute intralaboral and general (intralaboral + extralaboral) totals."""

    def __init__(
        self,
        repository: Optional[NormativeTableRepository] = None,
        strict: Optional[bool] = None,
    ):
        self.repository = repository or get_normative_repository()
        self.strict = get_settings().STRICT_NORMATIVE_TABLES if strict is None else strict

    def intralaboral_total(self, results: Sequence[DimensionResult]) -> DimensionResult:
        """
        Args:
            results: Output of calculate_results() for intralaboral_a or _b.

        Raises:
            EmptyInputException: no dimension-level entries.
            UnsupportedVariantException: results are not from an intralaboral form.
        """
        entries = _dimension_entries(results)
        if not entries:
            raise EmptyInputException("No dimension results to total")

        variant = _single_variant(entries)
        if not variant.has_domains:
            raise UnsupportedVariantException(variant.value)

        return self._score(variant, TOTAL_INTRALABORAL, entries)

    def general_total(
        self,
        intralaboral_results: Sequence[DimensionResult],
        extralaboral_results: Sequence[DimensionResult],
    ) -> DimensionResult:
        """
        Combine one participant's intralaboral and extralaboral results.

        The general table is chosen by the intralaboral form.
        """
        intra = _dimension_entries(intralaboral_results)
        extra = _dimension_entries(extralaboral_results)
        if not intra or not extra:
            raise EmptyInputException("General total needs intralaboral and extralaboral results")

        variant = _single_variant(intra)
        if not variant.has_domains:
            raise UnsupportedVariantException(variant.value)
        extra_variant = _single_variant(extra)
        if extra_variant != QuestionnaireVariant.EXTRALABORAL:
            raise UnsupportedVariantException(extra_variant.value)

        return self._score(variant, TOTAL_GENERAL, intra + extra)

    def _score(
        self,
        variant: QuestionnaireVariant,
        total_key: str,
        entries: Sequence[DimensionResult],
    ) -> DimensionResult:
        raw_score = sum(r.raw_score for r in entries)
        max_raw_score = sum(r.max_raw_score for r in entries)

        result = score_target(
            self.repository,
            variant,
            TableScope.TOTAL,
            total_key,
            dimension=f"{total_key}_total",
            domain_id=None,
            raw_score=raw_score,
            max_raw_score=max_raw_score,
            answered_question_count=sum(r.answered_question_count for r in entries),
            total_question_count=sum(r.total_question_count for r in entries),
            strict=self.strict,
        )
        logger.info(
            "total_calculated",
            variant=variant.value,
            total=total_key,
            raw_score=raw_score,
            max_raw_score=max_raw_score,
            transformed_score=float(result.transformed_score),
            risk_level=result.risk_level.value,
        )
        return result


def calculate_intralaboral_total(results: Sequence[DimensionResult]) -> DimensionResult:
    return TotalScoreCalculator().intralaboral_total(results)


def calculate_general_total(
    intralaboral_results: Sequence[DimensionResult],
    extralaboral_results: Sequence[DimensionResult],
) -> DimensionResult:
    return TotalScoreCalculator().general_total(intralaboral_results, extralaboral_results)
