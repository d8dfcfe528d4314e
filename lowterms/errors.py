"""Exceptions raised by :mod:`lowterms`.

Each error also derives from the closest built-in exception so callers that
already catch ``ZeroDivisionError`` or ``ValueError`` keep working.
"""
from __future__ import annotations


class FractionError(Exception):
    """Base class for every error raised by this package."""


class DivideByZero(FractionError, ZeroDivisionError):
    """Zero denominator, division by zero, or zero raised to a negative power."""


class RoundingRequired(FractionError, ArithmeticError):
    """``RoundingMode.UNNECESSARY`` was requested for a non-integral value."""


class NoExactValue(FractionError, ArithmeticError):
    """The value has no exact representation in the requested type."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Value does not have an exact {type_name} representation")
        self.type_name = type_name


class FractionOverflow(FractionError, OverflowError):
    """A fixed-width integer operation left the representable range."""


class InvalidArgument(FractionError, ValueError):
    """Missing operand, non-finite float, bad bound, or malformed text."""


__all__ = [
    "FractionError",
    "DivideByZero",
    "RoundingRequired",
    "NoExactValue",
    "FractionOverflow",
    "InvalidArgument",
]
