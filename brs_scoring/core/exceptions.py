"""
Custom Exceptions - BRS Scoring Engine
brs_scoring/core/exceptions.py

Exception classes raised by the scoring core.
"""


class ScoringException(Exception):
    """Base exception for scoring operations."""

    pass


class EmptyInputException(ScoringException):
    """No answers were supplied for scoring."""

    def __init__(self, message: str = "No answers supplied for scoring"):
        self.message = message
        super().__init__(message)


class UnsupportedVariantException(ScoringException):
    """Questionnaire identifier is not one of the known variants."""

    def __init__(self, variant: str):
        self.variant = variant
        super().__init__(f"Unsupported questionnaire variant: {variant!r}")


class MissingNormativeTableException(ScoringException):
    """No normative table for a (variant, scope, key) triple."""

    def __init__(self, variant: str, scope: str, key: str):
        self.variant = variant
        self.scope = scope
        self.key = key
        super().__init__(
            f"Normative table not found: variant={variant} scope={scope} key={key}"
        )


class NormativeDataException(ScoringException):
    """Normative reference data failed validation at load time."""

    def __init__(self, message: str = "Invalid normative table data"):
        self.message = message
        super().__init__(message)


class SchemaDefinitionException(ScoringException):
    """Dimension schema failed validation at load time."""

    def __init__(self, message: str = "Invalid dimension schema"):
        self.message = message
        super().__init__(message)
