from enum import Enum
from typing import Dict

from brs_scoring.core.exceptions import UnsupportedVariantException


class QuestionnaireVariant(str, Enum):
    INTRALABORAL_A = "intralaboral_a"  # Forma A: jefes, profesionales, técnicos
    INTRALABORAL_B = "intralaboral_b"  # Forma B: auxiliares y operarios
    EXTRALABORAL = "extralaboral"
    STRESS = "stress"

    @classmethod
    def from_identifier(cls, identifier) -> "QuestionnaireVariant":
        """Resolve a stored identifier or one of its spelled-out aliases."""
        if isinstance(identifier, cls):
            return identifier
        key = str(identifier).strip().lower()
        variant = _VARIANT_ALIASES.get(key)
        if variant is None:
            raise UnsupportedVariantException(str(identifier))
        return variant

    @property
    def has_domains(self) -> bool:
        return self in (QuestionnaireVariant.INTRALABORAL_A, QuestionnaireVariant.INTRALABORAL_B)


_VARIANT_ALIASES: Dict[str, QuestionnaireVariant] = {
    **{v.value: v for v in QuestionnaireVariant},
    "intralaboral-form-a": QuestionnaireVariant.INTRALABORAL_A,
    "intralaboral-form-b": QuestionnaireVariant.INTRALABORAL_B,
    "estres": QuestionnaireVariant.STRESS,
}


class TableScope(str, Enum):
    DIMENSION = "dimension"
    DOMAIN = "domain"
    TOTAL = "total"


class TableProvenance(str, Enum):
    OFFICIAL = "official"        # Published ministry tables
    PROVISIONAL = "provisional"  # Estimates pending confirmation
    FALLBACK = "fallback"        # Placeholder for a missing table


class RiskLevel(str, Enum):
    """Risk levels, declared in ascending order of severity."""
    SIN_RIESGO = "sin_riesgo"
    RIESGO_BAJO = "riesgo_bajo"
    RIESGO_MEDIO = "riesgo_medio"
    RIESGO_ALTO = "riesgo_alto"
    RIESGO_MUY_ALTO = "riesgo_muy_alto"

    @property
    def rank(self) -> int:
        return list(RiskLevel).index(self)

    @property
    def requires_intervention(self) -> bool:
        """High and very high risk call for immediate intervention."""
        return self in (RiskLevel.RIESGO_ALTO, RiskLevel.RIESGO_MUY_ALTO)
