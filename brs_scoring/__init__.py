"""
BRS Scoring Engine

Scores the Batería de Riesgo Psicosocial questionnaires (intralaboral forms
A and B, extralaboral, stress symptoms) against the official normative tables.
"""

from brs_scoring.scoring import (
    DimensionResult,
    ScoringOrchestrator,
    calculate_participant_results,
    calculate_results,
)

__all__ = [
    "DimensionResult",
    "ScoringOrchestrator",
    "calculate_participant_results",
    "calculate_results",
]
