# tests/conftest.py

"""
Pytest Fixtures - shared answer sets and scoring components

ANSWER SET REFERENCE:
- Forma A:      questions 1-123 (relacion_colaboradores is 115-123)
- Forma B:      questions 1-97
- Extralaboral: questions 1-31
- Estrés:       questions 1-31
"""

from typing import Dict, List

import pytest

from brs_scoring.models.enumerations import QuestionnaireVariant, TableScope
from brs_scoring.scoring.normative_tables import NormativeTableRepository, get_normative_repository
from brs_scoring.scoring.orchestrator import ScoringOrchestrator

QUESTION_COUNTS = {
    QuestionnaireVariant.INTRALABORAL_A: 123,
    QuestionnaireVariant.INTRALABORAL_B: 97,
    QuestionnaireVariant.EXTRALABORAL: 31,
    QuestionnaireVariant.STRESS: 31,
}


def make_answers(values: Dict[int, int]) -> List[Dict[str, int]]:
    """Build answer dicts from a {question_number: value} mapping."""
    return [{"question_number": q, "value": v} for q, v in values.items()]


def uniform_answers(variant: QuestionnaireVariant, value: int) -> List[Dict[str, int]]:
    """Answer every question of a variant with the same value."""
    return make_answers({q: value for q in range(1, QUESTION_COUNTS[variant] + 1)})


# =============================================================================
# SCORING COMPONENT FIXTURES
# =============================================================================

@pytest.fixture
def repository():
    """Process-wide repository built from the embedded baremos."""
    return get_normative_repository()


@pytest.fixture
def orchestrator(repository):
    """Orchestrator in lenient mode (missing tables fall back)."""
    return ScoringOrchestrator(repository=repository, strict=False)


@pytest.fixture
def empty_repository():
    """Repository with no tables at all, so every lookup falls back."""
    return NormativeTableRepository({
        QuestionnaireVariant.INTRALABORAL_A: {TableScope.DIMENSION: {}},
    })


# =============================================================================
# ANSWER SET FIXTURES
# =============================================================================

@pytest.fixture
def scenario_a_answers():
    """demandas_cuantitativas (Forma A, questions 13-15) → raw 6 of 12."""
    return make_answers({13: 2, 14: 3, 15: 1})


@pytest.fixture
def forma_a_all_twos():
    """Every Forma A question answered with 2 → 50.00 everywhere."""
    return uniform_answers(QuestionnaireVariant.INTRALABORAL_A, 2)


@pytest.fixture
def forma_a_all_ones():
    return uniform_answers(QuestionnaireVariant.INTRALABORAL_A, 1)


@pytest.fixture
def extralaboral_all_ones():
    return uniform_answers(QuestionnaireVariant.EXTRALABORAL, 1)
