from brs_scoring.models.answer import ANSWER_SCALE_MAX, ANSWER_SCALE_MIN, Answer
from brs_scoring.models.enumerations import (
    QuestionnaireVariant,
    RiskLevel,
    TableProvenance,
    TableScope,
)

__all__ = [
    "ANSWER_SCALE_MAX",
    "ANSWER_SCALE_MIN",
    "Answer",
    "QuestionnaireVariant",
    "RiskLevel",
    "TableProvenance",
    "TableScope",
]
