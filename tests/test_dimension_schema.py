# tests/test_dimension_schema.py
"""
Dimension Schema tests: question coverage, maximum raw scores, domain
structure and load-time validation.
"""

import pytest

from brs_scoring.core.exceptions import SchemaDefinitionException
from brs_scoring.models.enumerations import QuestionnaireVariant
from brs_scoring.scoring.dimension_schema import (
    CONTROL_TRABAJO,
    DEMANDAS_TRABAJO,
    LIDERAZGO_RELACIONES,
    RECOMPENSAS,
    DimensionDefinition,
    get_dimension,
    get_dimension_schema,
    get_domains,
    validate_schema,
)

from conftest import QUESTION_COUNTS


class TestCoverage:

    @pytest.mark.parametrize("variant", list(QuestionnaireVariant))
    def test_questions_cover_the_whole_form(self, variant):
        numbers = [n for d in get_dimension_schema(variant) for n in d.question_numbers]
        assert sorted(numbers) == list(range(1, QUESTION_COUNTS[variant] + 1))

    @pytest.mark.parametrize("variant,count", [
        (QuestionnaireVariant.INTRALABORAL_A, 19),
        (QuestionnaireVariant.INTRALABORAL_B, 16),
        (QuestionnaireVariant.EXTRALABORAL, 7),
        (QuestionnaireVariant.STRESS, 4),
    ])
    def test_dimension_counts(self, variant, count):
        assert len(get_dimension_schema(variant)) == count


class TestDefinitions:

    def test_max_raw_score_is_four_per_question(self):
        cuantitativas = get_dimension(QuestionnaireVariant.INTRALABORAL_A, "demandas_cuantitativas")
        assert cuantitativas.question_numbers == (13, 14, 15)
        assert cuantitativas.max_raw_score == 12

        fisiologicos = get_dimension(QuestionnaireVariant.STRESS, "sintomas_fisiologicos")
        assert fisiologicos.total_questions == 8
        assert fisiologicos.max_raw_score == 32

    def test_relacion_colaboradores_is_conditional(self):
        colaboradores = get_dimension(QuestionnaireVariant.INTRALABORAL_A, "relacion_colaboradores")
        assert colaboradores.conditional
        assert colaboradores.question_numbers == tuple(range(115, 124))
        assert colaboradores.domain_id == LIDERAZGO_RELACIONES

    def test_forma_b_has_no_collaborator_dimension(self):
        with pytest.raises(KeyError):
            get_dimension(QuestionnaireVariant.INTRALABORAL_B, "relacion_colaboradores")

    def test_identifier_keeps_accent(self):
        retro = get_dimension(QuestionnaireVariant.INTRALABORAL_B, "retroalimentacion_desempeño")
        assert retro.question_numbers == tuple(range(80, 85))


class TestDomains:

    @pytest.mark.parametrize("variant", [
        QuestionnaireVariant.INTRALABORAL_A,
        QuestionnaireVariant.INTRALABORAL_B,
    ])
    def test_intralaboral_domains_in_order(self, variant):
        assert get_domains(variant) == [
            DEMANDAS_TRABAJO, CONTROL_TRABAJO, LIDERAZGO_RELACIONES, RECOMPENSAS,
        ]

    @pytest.mark.parametrize("variant", [
        QuestionnaireVariant.EXTRALABORAL,
        QuestionnaireVariant.STRESS,
    ])
    def test_flat_variants_have_no_domains(self, variant):
        assert get_domains(variant) == []
        assert all(d.domain_id is None for d in get_dimension_schema(variant))


class TestValidation:

    def test_shared_question_rejected(self):
        definitions = (
            DimensionDefinition("a", None, (1, 2, 3)),
            DimensionDefinition("b", None, (3, 4)),
        )
        with pytest.raises(SchemaDefinitionException, match="question 3"):
            validate_schema(QuestionnaireVariant.STRESS, definitions)

    def test_duplicate_id_rejected(self):
        definitions = (
            DimensionDefinition("a", None, (1,)),
            DimensionDefinition("a", None, (2,)),
        )
        with pytest.raises(SchemaDefinitionException, match="duplicate"):
            validate_schema(QuestionnaireVariant.STRESS, definitions)

    def test_empty_dimension_rejected(self):
        with pytest.raises(SchemaDefinitionException, match="no questions"):
            validate_schema(QuestionnaireVariant.STRESS, (DimensionDefinition("a", None, ()),))

    def test_missing_domain_rejected(self):
        definitions = (DimensionDefinition("a", None, (1,)),)
        with pytest.raises(SchemaDefinitionException, match="domain"):
            validate_schema(QuestionnaireVariant.INTRALABORAL_A, definitions)

    def test_question_zero_rejected(self):
        definitions = (DimensionDefinition("a", None, (0, 1)),)
        with pytest.raises(SchemaDefinitionException, match="invalid question number"):
            validate_schema(QuestionnaireVariant.EXTRALABORAL, definitions)
