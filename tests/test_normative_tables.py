# tests/test_normative_tables.py
"""
Normative Table Repository tests: table validation, lookup, fallback
resolution and the descriptive views.
"""

from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from brs_scoring.core.exceptions import MissingNormativeTableException, NormativeDataException
from brs_scoring.models.enumerations import (
    QuestionnaireVariant,
    RiskLevel,
    TableProvenance,
    TableScope,
)
from brs_scoring.scoring.baremos import TOTAL_GENERAL, TOTAL_INTRALABORAL
from brs_scoring.scoring.dimension_schema import get_dimension_schema, get_domains
from brs_scoring.scoring.normative_tables import (
    FALLBACK_RISK_TABLE,
    NormativeTableRepository,
    build_risk_table,
)

VALID_TABLE = {
    "sin_riesgo": (0.0, 20.0),
    "riesgo_bajo": (20.1, 40.0),
    "riesgo_medio": (40.1, 60.0),
    "riesgo_alto": (60.1, 80.0),
    "riesgo_muy_alto": (80.1, 100),
}


class TestBuildRiskTable:

    def test_valid_table_in_ascending_order(self):
        table = build_risk_table(VALID_TABLE)
        assert [r.level for r in table.ranges] == list(RiskLevel)
        assert table.lowest.lower == Decimal("0.0")
        assert table.highest.upper == Decimal("100")

    def test_missing_level_rejected(self):
        raw = dict(VALID_TABLE)
        del raw["riesgo_medio"]
        with pytest.raises(NormativeDataException, match="missing"):
            build_risk_table(raw)

    def test_unknown_level_rejected(self):
        raw = dict(VALID_TABLE, riesgo_extremo=(90, 100))
        with pytest.raises(NormativeDataException, match="unknown"):
            build_risk_table(raw)

    def test_overlapping_ranges_rejected(self):
        raw = dict(VALID_TABLE, riesgo_bajo=(20.0, 40.0))
        with pytest.raises(NormativeDataException, match="overlaps"):
            build_risk_table(raw)

    @pytest.mark.parametrize("bounds", [(80.1, 120), (-5, 20.0), (30, 10)])
    def test_malformed_bounds_rejected(self, bounds):
        raw = dict(VALID_TABLE)
        level = "riesgo_muy_alto" if bounds[0] > 50 else "sin_riesgo"
        raw[level] = bounds
        with pytest.raises(NormativeDataException):
            build_risk_table(raw)

    def test_gaps_are_allowed(self):
        raw = dict(VALID_TABLE, sin_riesgo=(0.0, 19.5))
        table = build_risk_table(raw)
        assert table.range_for(RiskLevel.SIN_RIESGO).upper == Decimal("19.5")


class TestEmbeddedTables:

    @pytest.mark.parametrize("variant", list(QuestionnaireVariant))
    def test_every_dimension_has_a_table(self, repository, variant):
        keys = set(repository.keys(variant, TableScope.DIMENSION))
        assert {d.id for d in get_dimension_schema(variant)} <= keys

    @pytest.mark.parametrize("variant", [
        QuestionnaireVariant.INTRALABORAL_A,
        QuestionnaireVariant.INTRALABORAL_B,
    ])
    def test_intralaboral_domains_and_totals(self, repository, variant):
        assert set(repository.keys(variant, TableScope.DOMAIN)) == set(get_domains(variant))
        assert set(repository.keys(variant, TableScope.TOTAL)) == {TOTAL_INTRALABORAL, TOTAL_GENERAL}

    def test_provenance(self, repository):
        official = repository.lookup(
            QuestionnaireVariant.INTRALABORAL_B, TableScope.DIMENSION, "demandas_ambientales"
        )
        provisional = repository.lookup(
            QuestionnaireVariant.STRESS, TableScope.DIMENSION, "sintomas_fisiologicos"
        )
        assert official.provenance == TableProvenance.OFFICIAL
        assert provisional.provenance == TableProvenance.PROVISIONAL

    def test_repository_is_read_only(self, repository):
        with pytest.raises(TypeError):
            repository._tables[QuestionnaireVariant.STRESS] = {}


class TestLookupAndResolve:

    def test_lookup_missing_raises(self, repository):
        with pytest.raises(MissingNormativeTableException) as exc_info:
            repository.lookup(QuestionnaireVariant.EXTRALABORAL, TableScope.DOMAIN, "extralaboral")
        assert exc_info.value.variant == "extralaboral"
        assert exc_info.value.scope == "domain"

    def test_resolve_found(self, repository):
        found = repository.resolve(
            QuestionnaireVariant.INTRALABORAL_A, TableScope.TOTAL, TOTAL_INTRALABORAL
        )
        assert not found.is_fallback
        assert found.table.provenance == TableProvenance.OFFICIAL

    def test_resolve_falls_back_and_logs(self, repository):
        with capture_logs() as logs:
            found = repository.resolve(QuestionnaireVariant.STRESS, TableScope.DIMENSION, "unknown")

        assert found.is_fallback
        assert found.table is FALLBACK_RISK_TABLE
        assert found.table.provenance == TableProvenance.FALLBACK
        assert [e["event"] for e in logs] == ["normative_table_fallback"]
        assert logs[0]["key"] == "unknown"

    def test_resolve_strict_raises(self, repository):
        with pytest.raises(MissingNormativeTableException):
            repository.resolve(
                QuestionnaireVariant.STRESS, TableScope.DIMENSION, "unknown", strict=True
            )

    def test_fallback_ranges(self):
        assert FALLBACK_RISK_TABLE.describe() == {
            "sin_riesgo": "0 - 20",
            "riesgo_bajo": "20.1 - 40",
            "riesgo_medio": "40.1 - 60",
            "riesgo_alto": "60.1 - 80",
            "riesgo_muy_alto": "80.1 - 100",
        }


class TestDescriptiveViews:

    def test_describe(self, repository):
        table = repository.lookup(
            QuestionnaireVariant.INTRALABORAL_A, TableScope.DIMENSION, "demandas_cuantitativas"
        )
        assert table.describe() == {
            "sin_riesgo": "0.0 - 25.0",
            "riesgo_bajo": "25.1 - 33.3",
            "riesgo_medio": "33.4 - 45.8",
            "riesgo_alto": "45.9 - 54.2",
            "riesgo_muy_alto": "54.3 - 100",
        }

    def test_summary(self, repository):
        summary = repository.summary()

        assert set(summary) == {v.value for v in QuestionnaireVariant}
        assert summary["intralaboral_a"]["provenance"] == "official"
        assert "demandas_trabajo" in summary["intralaboral_a"]["domain"]
        assert summary["extralaboral"]["domain"] == []
        assert summary["extralaboral"]["provenance"] == "provisional"
        assert len(summary["stress"]["dimension"]) == 4

    def test_custom_repository(self):
        repo = NormativeTableRepository(
            {QuestionnaireVariant.STRESS: {TableScope.DIMENSION: {"x": VALID_TABLE}}},
            {QuestionnaireVariant.STRESS: TableProvenance.PROVISIONAL},
        )
        assert repo.keys(QuestionnaireVariant.STRESS, TableScope.DIMENSION) == ["x"]
        assert repo.keys(QuestionnaireVariant.EXTRALABORAL, TableScope.DIMENSION) == []
        assert repo.lookup(
            QuestionnaireVariant.STRESS, TableScope.DIMENSION, "x"
        ).provenance == TableProvenance.PROVISIONAL
