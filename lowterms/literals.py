"""Numeric inputs as a closed set of literal kinds.

Python numbers arrive in many types. :func:`literal_of` is the only place
that looks at those types; it turns a value into one of four literal
records, and the fraction engine works from the records alone.
"""
from __future__ import annotations

import decimal
import numbers
from dataclasses import dataclass
from typing import Any, Tuple, Union

import numpy as np

from .checked import IntegerOps
from .decimals import decimal_pair_to_ratio, decimal_to_ratio, split_decimal
from .errors import InvalidArgument
from .ieee754 import DOUBLE, SINGLE, FloatFormat, ratio_from_floats, to_ratio


@dataclass(frozen=True)
class IntegerLiteral:
    value: int


@dataclass(frozen=True)
class DecimalLiteral:
    """``unscaled / 10**scale``; a negative scale multiplies."""

    unscaled: int
    scale: int


@dataclass(frozen=True)
class FloatLiteral:
    value: float
    fmt: FloatFormat = DOUBLE


@dataclass(frozen=True)
class AlreadyFraction:
    numerator: int
    denominator: int
    reduced: bool = False


Literal = Union[IntegerLiteral, DecimalLiteral, FloatLiteral, AlreadyFraction]


def literal_of(value: Any) -> Literal:
    """Classify a Python number."""
    if value is None:
        raise InvalidArgument("Null argument")
    if isinstance(value, (IntegerLiteral, DecimalLiteral, FloatLiteral, AlreadyFraction)):
        return value
    if isinstance(value, numbers.Integral):
        return IntegerLiteral(int(value))
    if isinstance(value, numbers.Rational):
        # fractions.Fraction and our own fraction types are always reduced
        return AlreadyFraction(int(value.numerator), int(value.denominator), reduced=True)
    if isinstance(value, decimal.Decimal):
        if not value.is_finite():
            raise InvalidArgument(f"cannot convert {value} to a fraction")
        return DecimalLiteral(*split_decimal(value))
    if isinstance(value, np.float32):
        return FloatLiteral(value, SINGLE)
    if isinstance(value, numbers.Real):
        return FloatLiteral(float(value), DOUBLE)
    raise TypeError(f"Cannot interpret {type(value)!r} as a fraction")


def literal_ratio(literal: Literal) -> Tuple[int, int, bool]:
    """Return ``(numerator, denominator, reduced)`` for one literal."""
    if isinstance(literal, IntegerLiteral):
        return literal.value, 1, True
    if isinstance(literal, DecimalLiteral):
        return (*decimal_to_ratio(literal.unscaled, literal.scale), True)
    if isinstance(literal, FloatLiteral):
        return (*to_ratio(literal.value, literal.fmt), True)
    return literal.numerator, literal.denominator, literal.reduced


def resolve_pair(ops: IntegerOps, top: Literal, bottom: Literal) -> Tuple[int, int, bool]:
    """Return the integer pair for ``top / bottom``.

    Matching kinds use a dedicated path; anything else is converted side by
    side and cross-multiplied, ``(n1/d1) / (n2/d2) = (n1*d2) / (d1*n2)``.
    """
    if isinstance(top, IntegerLiteral) and isinstance(bottom, IntegerLiteral):
        return ops.check(top.value), ops.check(bottom.value), False
    if isinstance(top, FloatLiteral) and isinstance(bottom, FloatLiteral):
        fmt = DOUBLE if DOUBLE in (top.fmt, bottom.fmt) else SINGLE
        num, den = ratio_from_floats(top.value, bottom.value, fmt)
        return ops.check(num), ops.check(den), True
    if isinstance(top, DecimalLiteral) and isinstance(bottom, DecimalLiteral):
        num, den = decimal_pair_to_ratio(top.unscaled, top.scale, bottom.unscaled, bottom.scale)
        return ops.check(num), ops.check(den), False

    n1, d1, _ = literal_ratio(top)
    n2, d2, _ = literal_ratio(bottom)
    n1, d1, n2, d2 = (ops.check(v) for v in (n1, d1, n2, d2))
    return ops.mul(n1, d2), ops.mul(d1, n2), False


__all__ = [
    "IntegerLiteral",
    "DecimalLiteral",
    "FloatLiteral",
    "AlreadyFraction",
    "Literal",
    "literal_of",
    "literal_ratio",
    "resolve_pair",
]
