"""Errors raised by the fuzzy lookup index."""

from __future__ import annotations


class FuzzyLookupError(Exception):
    """Base error for the fuzzy lookup package."""


class TypeMismatchError(FuzzyLookupError, TypeError):
    """Raised when a non-string value is passed where a string is required."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Must use a string as argument to FuzzySet functions, got {type(value).__name__}")
        self.value = value


class InvalidComparisonError(FuzzyLookupError, ValueError):
    """Raised when an edit distance is requested between two absent values."""
