"""
Custom exception hierarchy for number conversion.

Each exception type maps to one category of rejected input, so callers
(the HTTP layer, the CLI) can report a machine-readable code.
"""

from __future__ import annotations


class NumberConversionError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidInput(NumberConversionError):
    """The value is not a number at all."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_INPUT", message, details)


class OutOfRange(NumberConversionError):
    """The magnitude exceeds the 64-bit signed integer ceiling."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("OUT_OF_RANGE", message, details)
