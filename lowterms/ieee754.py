"""Bit-exact bridge between IEEE-754 binary floats and fractions.

Every finite binary float is ``(-1)**sign * n0 / 2**k`` for integers
``n0``, ``k``; :func:`to_ratio` recovers that pair directly from the sign,
exponent and mantissa fields, so no rounding is ever involved. The reverse
direction goes through :mod:`decimal` with two guard digits, which is enough
for any float that came from :func:`to_ratio` to survive the round trip.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Tuple

import numpy as np

from .decimals import ratio_to_decimal
from .errors import DivideByZero, InvalidArgument, NoExactValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FloatFormat:
    """Layout of an IEEE-754 binary interchange format."""

    name: str
    dtype: Any          # numpy scalar type holding the value
    bits_dtype: Any     # unsigned numpy integer of the same width
    exponent_width: int
    mantissa_width: int
    decimal_digits: int

    @property
    def width(self) -> int:
        return 1 + self.exponent_width + self.mantissa_width

    @property
    def bias(self) -> int:
        return (1 << (self.exponent_width - 1)) - 1

    @property
    def max_exponent_bits(self) -> int:
        return (1 << self.exponent_width) - 1

    @property
    def mantissa_mask(self) -> int:
        return (1 << self.mantissa_width) - 1

    @property
    def subnormal_shift(self) -> int:
        """Power of two under every subnormal: 1074 for doubles, 149 for singles."""
        return self.bias + self.mantissa_width - 1

    def box(self, scalar: Any) -> Any:
        """Return ``scalar`` as the Python-facing value for this format."""
        if self.dtype is np.float64:
            return float(scalar)
        return self.dtype(scalar)


DOUBLE = FloatFormat("double", np.float64, np.uint64, 11, 52, 16)
SINGLE = FloatFormat("float", np.float32, np.uint32, 8, 23, 7)


@dataclass(frozen=True)
class FloatParts:
    """Sign, biased exponent field and mantissa field of a float."""

    sign: int
    exponent_bits: int
    mantissa: int
    fmt: FloatFormat = DOUBLE

    @property
    def exponent(self) -> int:
        """Unbiased exponent."""
        return self.exponent_bits - self.fmt.bias

    @property
    def is_subnormal(self) -> bool:
        return self.exponent_bits == 0 and self.mantissa != 0

    @property
    def is_zero(self) -> bool:
        return self.exponent_bits == 0 and self.mantissa == 0

    @property
    def is_nan(self) -> bool:
        return self.exponent_bits == self.fmt.max_exponent_bits and self.mantissa != 0

    @property
    def is_infinite(self) -> bool:
        return self.exponent_bits == self.fmt.max_exponent_bits and self.mantissa == 0

    @property
    def is_finite(self) -> bool:
        return self.exponent_bits != self.fmt.max_exponent_bits


def _trailing_zeros(n: int) -> int:
    return (n & -n).bit_length() - 1


def raw_bits(value: Any, fmt: FloatFormat = DOUBLE) -> int:
    """Return the raw bit pattern of ``value`` narrowed to ``fmt``."""
    with np.errstate(over="ignore"):
        scalar = fmt.dtype(value)
    return int(scalar.view(fmt.bits_dtype))


def decompose(value: Any, fmt: FloatFormat = DOUBLE) -> FloatParts:
    bits = raw_bits(value, fmt)
    return FloatParts(
        sign=bits >> (fmt.width - 1),
        exponent_bits=(bits >> fmt.mantissa_width) & fmt.max_exponent_bits,
        mantissa=bits & fmt.mantissa_mask,
        fmt=fmt,
    )


def compose(sign: int, exponent_bits: int, mantissa: int, fmt: FloatFormat = DOUBLE) -> Any:
    """Build a float from its three fields (the exponent is the biased field)."""
    if sign not in (0, 1):
        raise InvalidArgument(f"Illegal sign bit: {sign}")
    if mantissa & ~fmt.mantissa_mask:
        raise InvalidArgument(f"Illegal mantissa: {mantissa}")
    if exponent_bits & ~fmt.max_exponent_bits:
        raise InvalidArgument(f"Illegal exponent: {exponent_bits}")
    bits = (sign << (fmt.width - 1)) | (exponent_bits << fmt.mantissa_width) | mantissa
    return fmt.box(fmt.bits_dtype(bits).view(fmt.dtype))


def to_ratio(value: Any, fmt: FloatFormat = DOUBLE) -> Tuple[int, int]:
    """Return the exact ``(numerator, denominator)`` of a finite float.

    The denominator is a power of two and every factor of two has already
    been stripped from the numerator, so the pair is in lowest terms.
    """
    parts = decompose(value, fmt)
    if parts.is_nan:
        raise InvalidArgument(f"{fmt.name} val is NaN")
    if parts.is_infinite:
        raise InvalidArgument(f"{fmt.name} val is infinite")
    if parts.is_zero:
        return 0, 1

    width = fmt.mantissa_width
    if parts.is_subnormal:
        # value = mantissa / 2**subnormal_shift
        n0 = parts.mantissa
        shift = fmt.subnormal_shift
        y = min(_trailing_zeros(n0), shift)
        numerator, denominator = n0 >> y, 1 << (shift - y)
    else:
        # value = 2**e * (2**width + mantissa) / 2**width
        n0 = (1 << width) + parts.mantissa
        e = parts.exponent
        if e > width:
            numerator, denominator = n0 << (e - width), 1
        elif e == width:
            numerator, denominator = n0, 1
        else:
            y = min(_trailing_zeros(n0), width - e)
            numerator, denominator = n0 >> y, 1 << (width - e - y)

    if parts.sign:
        numerator = -numerator
    return numerator, denominator


def ratio_from_floats(numerator: Any, denominator: Any, fmt: FloatFormat = DOUBLE) -> Tuple[int, int]:
    """Return ``numerator / denominator`` for two floats, in lowest terms.

    Both operands are ``n / 2**x`` with ``n`` odd whenever ``x > 0``, so the
    only common factor left to find is ``gcd(n1, n2)``.
    """
    if denominator == 0.0:
        raise DivideByZero("Divide by zero: fraction denominator is zero.")
    if numerator == 0.0:
        return 0, 1
    if denominator < 0.0:
        numerator, denominator = -numerator, -denominator

    n1, p1 = to_ratio(numerator, fmt)
    n2, p2 = to_ratio(denominator, fmt)
    g = math.gcd(n1, n2)
    num, den = n1 // g, n2 // g

    x1 = _trailing_zeros(p1)
    x2 = _trailing_zeros(p2)
    if x1 < x2:
        num <<= x2 - x1
    elif x1 > x2:
        den <<= x1 - x2
    return num, den


def from_ratio(numerator: int, denominator: int, fmt: FloatFormat = DOUBLE) -> Any:
    """Nearest ``fmt`` value to ``numerator / denominator``.

    Values beyond the format's range come back as infinities, values below
    its smallest subnormal as zero.
    """
    value = ratio_to_decimal(numerator, denominator, fmt.decimal_digits + 2)
    with np.errstate(over="ignore"):
        return fmt.box(fmt.dtype(float(value)))


def from_ratio_exact(numerator: int, denominator: int, fmt: FloatFormat = DOUBLE) -> Any:
    """Like :func:`from_ratio`, but fail unless the conversion is exact."""
    value = from_ratio(numerator, denominator, fmt)
    if decompose(value, fmt).is_finite and to_ratio(value, fmt) == (numerator, denominator):
        return value
    logger.debug("%s/%s has no exact %s value (nearest %r)", numerator, denominator, fmt.name, value)
    raise NoExactValue(fmt.name)


__all__ = [
    "FloatFormat",
    "FloatParts",
    "DOUBLE",
    "SINGLE",
    "raw_bits",
    "decompose",
    "compose",
    "to_ratio",
    "ratio_from_floats",
    "from_ratio",
    "from_ratio_exact",
]
