"""
Dimension Schema
brs_scoring/scoring/dimension_schema.py

Maps every questionnaire variant to its ordered dimension definitions:
member question numbers, owning domain and maximum raw score.

Variants and their structure:
    intralaboral_a   19 dimensions, 4 domains, questions 1-123
    intralaboral_b   16 dimensions, 4 domains, questions 1-97
    extralaboral      7 dimensions, no domains, questions 1-31
    stress            4 symptom groups, no domains, questions 1-31

max_raw_score = ANSWER_SCALE_MAX × number of questions, so every transformed
score lands in [0, 100].

Schemas are checked when this module is imported: every variant has one,
dimension ids are unique, and no question belongs to two dimensions.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from brs_scoring.core.exceptions import SchemaDefinitionException
from brs_scoring.models.answer import ANSWER_SCALE_MAX
from brs_scoring.models.enumerations import QuestionnaireVariant


@dataclass(frozen=True)
class DimensionDefinition:
    """One scored sub-scale of a questionnaire variant."""
    id: str
    domain_id: Optional[str]
    question_numbers: Tuple[int, ...]
    conditional: bool = False  # answered only by some participants

    @property
    def total_questions(self) -> int:
        return len(self.question_numbers)

    @property
    def max_raw_score(self) -> int:
        return ANSWER_SCALE_MAX * len(self.question_numbers)


def _dim(
    dimension_id: str,
    domain_id: Optional[str],
    questions: Iterable[int],
    conditional: bool = False,
) -> DimensionDefinition:
    return DimensionDefinition(dimension_id, domain_id, tuple(questions), conditional)


# Domain ids
DEMANDAS_TRABAJO = "demandas_trabajo"
CONTROL_TRABAJO = "control_trabajo"
LIDERAZGO_RELACIONES = "liderazgo_relaciones_sociales"
RECOMPENSAS = "recompensas"


FORMA_A_DIMENSIONS: Tuple[DimensionDefinition, ...] = (
    # Demandas del trabajo
    _dim("demandas_ambientales", DEMANDAS_TRABAJO, range(1, 13)),
    _dim("demandas_cuantitativas", DEMANDAS_TRABAJO, range(13, 16)),
    _dim("demandas_carga_mental", DEMANDAS_TRABAJO, range(16, 22)),
    _dim("demandas_emocionales", DEMANDAS_TRABAJO, range(22, 31)),
    _dim("exigencias_responsabilidad", DEMANDAS_TRABAJO, range(31, 39)),
    _dim("demandas_jornada", DEMANDAS_TRABAJO, range(39, 43)),
    _dim("consistencia_rol", DEMANDAS_TRABAJO, range(43, 48)),
    _dim("influencia_trabajo_entorno", DEMANDAS_TRABAJO, range(48, 52)),
    # Control sobre el trabajo
    _dim("control_autonomia", CONTROL_TRABAJO, range(52, 60)),
    _dim("oportunidades_desarrollo", CONTROL_TRABAJO, range(60, 64)),
    _dim("participacion_manejo_cambio", CONTROL_TRABAJO, range(64, 67)),
    _dim("claridad_rol", CONTROL_TRABAJO, range(67, 72)),
    _dim("capacitacion", CONTROL_TRABAJO, range(72, 75)),
    # Liderazgo y relaciones sociales en el trabajo
    _dim("caracteristicas_liderazgo", LIDERAZGO_RELACIONES, range(75, 88)),
    _dim("relaciones_sociales_trabajo", LIDERAZGO_RELACIONES, range(88, 99)),
    _dim("retroalimentacion_desempeño", LIDERAZGO_RELACIONES, range(99, 104)),
    _dim("relacion_colaboradores", LIDERAZGO_RELACIONES, range(115, 124), conditional=True),
    # Recompensas
    _dim("reconocimiento_compensacion", RECOMPENSAS, range(104, 110)),
    _dim("recompensas_pertenencia", RECOMPENSAS, range(110, 115)),
)

FORMA_B_DIMENSIONS: Tuple[DimensionDefinition, ...] = (
    # Demandas del trabajo
    _dim("demandas_ambientales", DEMANDAS_TRABAJO, range(1, 13)),
    _dim("demandas_cuantitativas", DEMANDAS_TRABAJO, range(13, 16)),
    _dim("demandas_carga_mental", DEMANDAS_TRABAJO, range(16, 21)),
    _dim("demandas_emocionales", DEMANDAS_TRABAJO, range(21, 29)),
    _dim("demandas_jornada", DEMANDAS_TRABAJO, range(29, 33)),
    _dim("influencia_trabajo_entorno", DEMANDAS_TRABAJO, range(33, 37)),
    # Control sobre el trabajo
    _dim("control_autonomia", CONTROL_TRABAJO, range(37, 41)),
    _dim("oportunidades_desarrollo", CONTROL_TRABAJO, range(41, 45)),
    _dim("participacion_manejo_cambio", CONTROL_TRABAJO, range(45, 48)),
    _dim("claridad_rol", CONTROL_TRABAJO, range(48, 53)),
    _dim("capacitacion", CONTROL_TRABAJO, range(53, 56)),
    # Liderazgo y relaciones sociales en el trabajo
    _dim("caracteristicas_liderazgo", LIDERAZGO_RELACIONES, range(56, 69)),
    _dim("relaciones_sociales_trabajo", LIDERAZGO_RELACIONES, range(69, 80)),
    _dim("retroalimentacion_desempeño", LIDERAZGO_RELACIONES, range(80, 85)),
    # Recompensas
    _dim("reconocimiento_compensacion", RECOMPENSAS, range(85, 91)),
    _dim("recompensas_pertenencia", RECOMPENSAS, range(91, 98)),
)

EXTRALABORAL_DIMENSIONS: Tuple[DimensionDefinition, ...] = (
    _dim("tiempo_fuera_trabajo", None, range(1, 5)),
    _dim("relaciones_familiares", None, range(5, 11)),
    _dim("comunicacion_relaciones_interpersonales", None, range(11, 19)),
    _dim("situacion_economica", None, range(19, 22)),
    _dim("caracteristicas_vivienda", None, range(22, 26)),
    _dim("influencia_entorno_trabajo", None, range(26, 30)),
    _dim("desplazamiento_vivienda_trabajo", None, range(30, 32)),
)

STRESS_DIMENSIONS: Tuple[DimensionDefinition, ...] = (
    _dim("sintomas_fisiologicos", None, range(1, 9)),
    _dim("sintomas_comportamiento_social", None, range(9, 15)),
    _dim("sintomas_intelectuales_laborales", None, range(15, 25)),
    _dim("sintomas_psicoemocionales", None, range(25, 32)),
)


def validate_schema(variant: QuestionnaireVariant, definitions: Sequence[DimensionDefinition]) -> None:
    """
    Check one variant's schema.

    Raises:
        SchemaDefinitionException: on empty or duplicate dimensions, or a
            question number claimed by two dimensions.
    """
    seen_ids = set()
    owner: Dict[int, str] = {}
    for definition in definitions:
        if definition.id in seen_ids:
            raise SchemaDefinitionException(
                f"{variant.value}: duplicate dimension id {definition.id!r}"
            )
        seen_ids.add(definition.id)

        if not definition.question_numbers:
            raise SchemaDefinitionException(
                f"{variant.value}: dimension {definition.id!r} has no questions"
            )
        if variant.has_domains != (definition.domain_id is not None):
            raise SchemaDefinitionException(
                f"{variant.value}: dimension {definition.id!r} domain assignment "
                f"does not match the variant's domain structure"
            )
        for number in definition.question_numbers:
            if number < 1:
                raise SchemaDefinitionException(
                    f"{variant.value}: invalid question number {number} in {definition.id!r}"
                )
            if number in owner:
                raise SchemaDefinitionException(
                    f"{variant.value}: question {number} belongs to both "
                    f"{owner[number]!r} and {definition.id!r}"
                )
            owner[number] = definition.id


def _build_schemas(
    schemas: Mapping[QuestionnaireVariant, Tuple[DimensionDefinition, ...]],
) -> Mapping[QuestionnaireVariant, Tuple[DimensionDefinition, ...]]:
    missing = [v.value for v in QuestionnaireVariant if v not in schemas]
    if missing:
        raise SchemaDefinitionException(f"No dimension schema for variants: {missing}")
    for variant, definitions in schemas.items():
        validate_schema(variant, definitions)
    return MappingProxyType(dict(schemas))


DIMENSION_SCHEMAS = _build_schemas({
    QuestionnaireVariant.INTRALABORAL_A: FORMA_A_DIMENSIONS,
    QuestionnaireVariant.INTRALABORAL_B: FORMA_B_DIMENSIONS,
    QuestionnaireVariant.EXTRALABORAL: EXTRALABORAL_DIMENSIONS,
    QuestionnaireVariant.STRESS: STRESS_DIMENSIONS,
})


def get_dimension_schema(variant: QuestionnaireVariant) -> Tuple[DimensionDefinition, ...]:
    """Ordered dimension definitions of a variant."""
    return DIMENSION_SCHEMAS[variant]


def get_domains(variant: QuestionnaireVariant) -> List[str]:
    """Domain ids of a variant in definition order (empty for flat variants)."""
    domains: List[str] = []
    for definition in DIMENSION_SCHEMAS[variant]:
        if definition.domain_id is not None and definition.domain_id not in domains:
            domains.append(definition.domain_id)
    return domains


def get_dimension(variant: QuestionnaireVariant, dimension_id: str) -> DimensionDefinition:
    for definition in DIMENSION_SCHEMAS[variant]:
        if definition.id == dimension_id:
            return definition
    raise KeyError(f"{variant.value}: unknown dimension {dimension_id!r}")
