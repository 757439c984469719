"""
scoring/ — BRS psychosocial-risk scoring core

Modules:
    utils.py               - Decimal utilities
    baremos.py             - Literal normative tables (Tablas 29-34)
    normative_tables.py    - Normative Table Repository (lookup / resolve)
    dimension_schema.py    - Dimension Schema per questionnaire variant
    score_transformer.py   - Raw score → 0-100 transformed score
    risk_classifier.py     - Transformed score → risk level
    results.py             - DimensionResult and the shared scoring path
    domain_aggregator.py   - Domain totals for the intralaboral forms
    orchestrator.py        - calculate_results() entry point
    totals.py              - Intralaboral and general totals
    statistics.py          - Per-dimension statistics across participants
"""

from brs_scoring.scoring.orchestrator import (
    ScoringOrchestrator,
    calculate_participant_results,
    calculate_results,
)
from brs_scoring.scoring.results import DimensionResult

__all__ = [
    "DimensionResult",
    "ScoringOrchestrator",
    "calculate_participant_results",
    "calculate_results",
]
