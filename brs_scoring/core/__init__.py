"""
Core Package - BRS Scoring Engine
brs_scoring/core/__init__.py

Core infrastructure: exceptions, logging.
"""

from brs_scoring.core.exceptions import (
    EmptyInputException,
    MissingNormativeTableException,
    NormativeDataException,
    SchemaDefinitionException,
    ScoringException,
    UnsupportedVariantException,
)
from brs_scoring.core.logging import configure_logging

__all__ = [
    # Logging
    "configure_logging",
    # Exceptions
    "EmptyInputException",
    "MissingNormativeTableException",
    "NormativeDataException",
    "SchemaDefinitionException",
    "ScoringException",
    "UnsupportedVariantException",
]
