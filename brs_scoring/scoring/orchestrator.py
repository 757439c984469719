"""
Scoring Orchestrator
brs_scoring/scoring/orchestrator.py

Entry point of the scoring core. Dispatches on questionnaire variant and
drives schema → transformer → classifier → domain aggregator.

Steps per call:
  1. Reject an empty answer collection (EmptyInputException)
  2. Resolve the variant (UnsupportedVariantException)
  3. Index answers by question number (last answer wins)
  4. Score each dimension in schema order, skipping unanswered ones
  5. Append domain totals for variants with domains

Usage:
    results = calculate_results("intralaboral_a", [
        {"question_number": 13, "value": 2},
        {"question_number": 14, "value": 3},
        {"question_number": 15, "value": 1},
    ])
    # [DimensionResult(dimension="demandas_cuantitativas", transformed_score=Decimal("50.00"),
    #                  risk_level=RiskLevel.RIESGO_ALTO, ...),
    #  DimensionResult(dimension="demandas_trabajo_total", is_domain_total=True, ...)]
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import structlog

from brs_scoring.config import get_settings
from brs_scoring.core.exceptions import EmptyInputException
from brs_scoring.models.answer import Answer
from brs_scoring.models.enumerations import QuestionnaireVariant, TableScope
from brs_scoring.scoring.dimension_schema import get_dimension_schema
from brs_scoring.scoring.domain_aggregator import DomainAggregator
from brs_scoring.scoring.normative_tables import NormativeTableRepository, get_normative_repository
from brs_scoring.scoring.results import DimensionResult, score_target

logger = structlog.get_logger(__name__)

AnswerInput = Union[Answer, Mapping[str, Any]]


def _coerce_answer(answer: AnswerInput) -> Answer:
    if isinstance(answer, Answer):
        return answer
    return Answer.model_validate(answer)


class ScoringOrchestrator:
    """Produce the ordered result set of one questionnaire variant."""

    def __init__(
        self,
        repository: Optional[NormativeTableRepository] = None,
        strict: Optional[bool] = None,
    ):
        self.repository = repository or get_normative_repository()
        self.strict = get_settings().STRICT_NORMATIVE_TABLES if strict is None else strict
        self.aggregator = DomainAggregator(self.repository, strict=self.strict)

    def calculate(
        self,
        variant: Union[QuestionnaireVariant, str],
        answers: Iterable[AnswerInput],
    ) -> List[DimensionResult]:
        """
        Score one participant's answers to one questionnaire variant.

        Args:
            variant: QuestionnaireVariant or its identifier ("intralaboral_a", ...).
            answers: Answer models or mappings with question_number and
                     value (or response_value).

        Returns:
            Dimension results in schema order, followed by domain totals.

        Raises:
            EmptyInputException: no answers supplied.
            UnsupportedVariantException: unknown variant identifier.
            pydantic.ValidationError: an answer is out of range.
        """
        answers = list(answers or [])
        if not answers:
            raise EmptyInputException()

        variant = QuestionnaireVariant.from_identifier(variant)

        responses: Dict[int, int] = {}
        for answer in map(_coerce_answer, answers):
            responses[answer.question_number] = answer.value

        results: List[DimensionResult] = []
        for definition in get_dimension_schema(variant):
            raw_score = 0
            answered = 0
            for number in definition.question_numbers:
                if number in responses:
                    raw_score += responses[number]
                    answered += 1

            if answered == 0:
                continue

            result = score_target(
                self.repository,
                variant,
                TableScope.DIMENSION,
                definition.id,
                dimension=definition.id,
                domain_id=definition.domain_id,
                raw_score=raw_score,
                max_raw_score=definition.max_raw_score,
                answered_question_count=answered,
                total_question_count=definition.total_questions,
                strict=self.strict,
            )
            logger.debug(
                "dimension_scored",
                variant=variant.value,
                dimension=definition.id,
                raw_score=raw_score,
                answered=answered,
                transformed_score=float(result.transformed_score),
                risk_level=result.risk_level.value,
            )
            results.append(result)

        results.extend(self.aggregator.aggregate(variant, results))

        logger.info(
            "results_calculated",
            variant=variant.value,
            answers=len(responses),
            dimensions=sum(1 for r in results if not r.is_domain_total),
            domains=sum(1 for r in results if r.is_domain_total),
            degraded=sum(1 for r in results if r.degraded),
        )
        return results

    def calculate_participant(
        self,
        answers_by_variant: Mapping[Union[QuestionnaireVariant, str], Iterable[AnswerInput]],
    ) -> List[DimensionResult]:
        """Score every variant a participant answered, in the mapping's order."""
        results: List[DimensionResult] = []
        for variant, answers in answers_by_variant.items():
            results.extend(self.calculate(variant, answers))
        return results


def calculate_results(
    variant: Union[QuestionnaireVariant, str],
    answers: Iterable[AnswerInput],
) -> List[DimensionResult]:
    """Score answers with the process-wide normative tables."""
    return ScoringOrchestrator().calculate(variant, answers)


def calculate_participant_results(
    answers_by_variant: Mapping[Union[QuestionnaireVariant, str], Iterable[AnswerInput]],
) -> List[DimensionResult]:
    """Score all questionnaires of one participant."""
    return ScoringOrchestrator().calculate_participant(answers_by_variant)
