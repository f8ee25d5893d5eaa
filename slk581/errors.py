"""
Error taxonomy for SLK581 encoding.

Every failure raised by the encoder derives from SLK581Error, so callers can
catch the whole family with a single except clause or handle each kind
separately.
"""


class SLK581Error(ValueError):
    """Base class for all SLK581 encoding errors."""

    description = "SLK581 encoding error."

    def __str__(self) -> str:
        return self.description

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidDateOfBirth(SLK581Error):
    """Date of birth was provided but is not in YYYY-MM-DD format."""

    description = "Unsupported date of birth format."


class UnknownDateOfBirth(SLK581Error):
    """Date of birth was not provided."""

    description = "Unknown date of birth."


class UnsupportedSex(SLK581Error):
    """
    Sex value outside the recognized vocabulary.

    The offending value is kept exactly as the caller passed it (no case
    normalization) for diagnostics.
    """

    description = "Unsupported sex"

    def __init__(self, sex: str):
        super().__init__(sex)
        self.sex = sex

    def __str__(self) -> str:
        return f"{self.description}: '{self.sex}'"
