"""
Normative Table Repository
brs_scoring/scoring/normative_tables.py

Read-only lookup of risk-range tables keyed by
(questionnaire variant, scope, key):

    variant ─┬─ dimension ─ <dimension id> ─► RiskTable
             ├─ domain ──── <domain id> ────► RiskTable
             └─ total ───── intralaboral | general ─► RiskTable

Tables are validated once when the repository is built:
  - all five risk levels present, nothing else
  - bounds inside [0, 100] with lower <= upper
  - ranges ascending and non-overlapping (gaps are allowed, the classifier
    handles them)

Usage:
    repo = get_normative_repository()
    table = repo.lookup(QuestionnaireVariant.INTRALABORAL_A, TableScope.DIMENSION,
                        "demandas_cuantitativas")
    found = repo.resolve(QuestionnaireVariant.EXTRALABORAL, TableScope.DIMENSION, "x")
    found.is_fallback   # True, found.table is the fallback table
"""

from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

import structlog

from brs_scoring.core.exceptions import MissingNormativeTableException, NormativeDataException
from brs_scoring.models.enumerations import (
    QuestionnaireVariant,
    RiskLevel,
    TableProvenance,
    TableScope,
)
from brs_scoring.scoring.baremos import FALLBACK_TABLE, NORMATIVE_DATA, PROVENANCE, RawTable

logger = structlog.get_logger(__name__)

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


@dataclass(frozen=True)
class RiskRange:
    """Inclusive [lower, upper] interval of one risk level."""
    level: RiskLevel
    lower: Decimal
    upper: Decimal

    def contains(self, score: Decimal) -> bool:
        return self.lower <= score <= self.upper


@dataclass(frozen=True)
class RiskTable:
    """The five risk ranges of one scoring target, in ascending risk order."""
    ranges: Tuple[RiskRange, ...]
    provenance: TableProvenance = TableProvenance.OFFICIAL

    @property
    def lowest(self) -> RiskRange:
        return self.ranges[0]

    @property
    def highest(self) -> RiskRange:
        return self.ranges[-1]

    def range_for(self, level: RiskLevel) -> RiskRange:
        for risk_range in self.ranges:
            if risk_range.level == level:
                return risk_range
        raise KeyError(level)

    def describe(self) -> Dict[str, str]:
        """Render each level as 'lower - upper'."""
        return {r.level.value: f"{r.lower} - {r.upper}" for r in self.ranges}


@dataclass(frozen=True)
class TableLookup:
    """Outcome of resolve(): the table used and whether it is the placeholder."""
    table: RiskTable
    is_fallback: bool
    variant: QuestionnaireVariant
    scope: TableScope
    key: str


def build_risk_table(
    raw: Mapping[str, Tuple[float, float]],
    provenance: TableProvenance = TableProvenance.OFFICIAL,
    label: str = "",
) -> RiskTable:
    """
    Validate literal bounds and build a RiskTable.

    Raises:
        NormativeDataException: on missing/unknown levels or malformed bounds.
    """
    expected = {level.value for level in RiskLevel}
    present = set(raw.keys())
    if present != expected:
        missing = sorted(expected - present)
        unknown = sorted(present - expected)
        raise NormativeDataException(
            f"Table {label!r} must define exactly the five risk levels "
            f"(missing={missing}, unknown={unknown})"
        )

    ranges: List[RiskRange] = []
    for level in RiskLevel:
        lower_raw, upper_raw = raw[level.value]
        lower = Decimal(str(lower_raw))
        upper = Decimal(str(upper_raw))

        if not (_ZERO <= lower <= upper <= _HUNDRED):
            raise NormativeDataException(
                f"Table {label!r} level {level.value}: bounds [{lower}, {upper}] "
                f"must satisfy 0 <= lower <= upper <= 100"
            )
        if ranges and lower <= ranges[-1].upper:
            raise NormativeDataException(
                f"Table {label!r} level {level.value}: lower bound {lower} overlaps "
                f"previous upper bound {ranges[-1].upper}"
            )
        ranges.append(RiskRange(level=level, lower=lower, upper=upper))

    return RiskTable(ranges=tuple(ranges), provenance=provenance)


FALLBACK_RISK_TABLE = build_risk_table(FALLBACK_TABLE, TableProvenance.FALLBACK, "fallback")


class NormativeTableRepository:
    """Immutable, validated store of normative tables."""

    def __init__(
        self,
        data: Mapping[QuestionnaireVariant, Mapping[TableScope, Mapping[str, RawTable]]],
        provenance: Optional[Mapping[QuestionnaireVariant, TableProvenance]] = None,
        fallback: RiskTable = FALLBACK_RISK_TABLE,
    ):
        provenance = provenance or {}
        tables = {}
        for variant, scopes in data.items():
            variant_provenance = provenance.get(variant, TableProvenance.OFFICIAL)
            variant_tables = {}
            for scope, keyed in scopes.items():
                variant_tables[TableScope(scope)] = MappingProxyType({
                    key: build_risk_table(raw, variant_provenance, f"{variant.value}/{scope.value}/{key}")
                    for key, raw in keyed.items()
                })
            tables[QuestionnaireVariant(variant)] = MappingProxyType(variant_tables)

        self._tables = MappingProxyType(tables)
        self._fallback = fallback

    @property
    def fallback(self) -> RiskTable:
        return self._fallback

    def lookup(self, variant: QuestionnaireVariant, scope: TableScope, key: str) -> RiskTable:
        """
        Return the table for (variant, scope, key).

        Raises:
            MissingNormativeTableException: if the triple has no entry.
        """
        table = self._tables.get(variant, {}).get(scope, {}).get(key)
        if table is None:
            raise MissingNormativeTableException(variant.value, scope.value, key)
        return table

    def resolve(
        self,
        variant: QuestionnaireVariant,
        scope: TableScope,
        key: str,
        strict: bool = False,
    ) -> TableLookup:
        """
        Like lookup(), but substitutes the fallback table when the triple is
        missing. With strict=True the MissingNormativeTableException propagates.
        """
        try:
            table = self.lookup(variant, scope, key)
        except MissingNormativeTableException:
            if strict:
                raise
            logger.warning(
                "normative_table_fallback",
                variant=variant.value,
                scope=scope.value,
                key=key,
            )
            return TableLookup(self._fallback, True, variant, scope, key)
        return TableLookup(table, False, variant, scope, key)

    def keys(self, variant: QuestionnaireVariant, scope: TableScope) -> List[str]:
        return list(self._tables.get(variant, {}).get(scope, {}).keys())

    def summary(self) -> Dict[str, Dict[str, object]]:
        """Per-variant listing of table keys by scope, plus provenance."""
        summary: Dict[str, Dict[str, object]] = {}
        for variant, scopes in self._tables.items():
            entry: Dict[str, object] = {}
            provenance = None
            for scope in TableScope:
                keys = list(scopes.get(scope, {}).keys())
                entry[scope.value] = keys
                if keys and provenance is None:
                    provenance = scopes[scope][keys[0]].provenance.value
            entry["provenance"] = provenance
            summary[variant.value] = entry
        return summary


@lru_cache
def get_normative_repository() -> NormativeTableRepository:
    """Process-wide repository built from the embedded baremos."""
    missing = [v.value for v in QuestionnaireVariant if v not in NORMATIVE_DATA]
    if missing:
        raise NormativeDataException(f"No normative tables for variants: {missing}")
    return NormativeTableRepository(NORMATIVE_DATA, PROVENANCE)
