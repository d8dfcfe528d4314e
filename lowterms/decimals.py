"""Conversions between fractions and :class:`decimal.Decimal`."""
from __future__ import annotations

import decimal
from typing import Tuple

from .errors import DivideByZero

DEFAULT_DECIMAL_PRECISION = 18


def _context(precision: int) -> decimal.Context:
    return decimal.Context(
        prec=precision,
        rounding=decimal.ROUND_HALF_EVEN,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
    )


def decimal_to_ratio(unscaled: int, scale: int) -> Tuple[int, int]:
    """Return ``unscaled / 10**scale`` in lowest terms.

    ``10**scale`` only has the prime factors 2 and 5, so the common factor is
    found by stripping twos (trailing zero bits) and fives instead of a gcd.
    """
    if unscaled == 0:
        return 0, 1
    if scale <= 0:
        return unscaled * 10 ** (-scale), 1

    numerator = unscaled
    common_twos = min(scale, (numerator & -numerator).bit_length() - 1)
    numerator >>= common_twos
    denominator = 1 << (scale - common_twos)

    common_fives = 0
    while common_fives < scale:
        q, r = divmod(numerator, 5)
        if r:
            break
        numerator = q
        common_fives += 1
    if common_fives < scale:
        denominator *= 5 ** (scale - common_fives)
    return numerator, denominator


def decimal_pair_to_ratio(
    num_unscaled: int, num_scale: int, den_unscaled: int, den_scale: int
) -> Tuple[int, int]:
    """Return ``(u1 / 10**s1) / (u2 / 10**s2)`` as an unreduced pair."""
    if den_unscaled == 0:
        raise DivideByZero("Divide by zero: fraction denominator is zero.")
    if num_unscaled == 0:
        return 0, 1
    if num_scale > den_scale:
        return num_unscaled, den_unscaled * 10 ** (num_scale - den_scale)
    return num_unscaled * 10 ** (den_scale - num_scale), den_unscaled


def split_decimal(value: decimal.Decimal) -> Tuple[int, int]:
    """Return ``(unscaled, scale)`` so that ``value == unscaled / 10**scale``."""
    sign, digits, exponent = value.as_tuple()
    if not isinstance(exponent, int):
        raise ValueError(f"cannot convert {value} to a fraction")
    unscaled = int("".join(map(str, digits))) if digits else 0
    return (-unscaled if sign else unscaled), -exponent


def ratio_to_decimal(numerator: int, denominator: int, precision: int) -> decimal.Decimal:
    """Divide with ``precision`` significant digits, rounding half-even."""
    ctx = _context(precision)
    return ctx.divide(decimal.Decimal(numerator), decimal.Decimal(denominator))


def exact_decimal(numerator: int, denominator: int) -> decimal.Decimal:
    """Return the exact decimal value when it terminates.

    A reduced fraction terminates in base 10 iff its denominator is
    ``2**a * 5**b``. Other values are rounded to
    :data:`DEFAULT_DECIMAL_PRECISION` significant digits.
    """
    twos = (denominator & -denominator).bit_length() - 1
    rest = denominator >> twos
    fives = 0
    while rest % 5 == 0:
        rest //= 5
        fives += 1

    if rest != 1:
        return ratio_to_decimal(numerator, denominator, DEFAULT_DECIMAL_PRECISION)

    unscaled = numerator
    scale = max(twos, fives)
    if twos < fives:
        unscaled <<= fives - twos
    elif fives < twos:
        unscaled *= 5 ** (twos - fives)
    return decimal.Decimal(f"{unscaled}E-{scale}")


__all__ = [
    "DEFAULT_DECIMAL_PRECISION",
    "decimal_to_ratio",
    "decimal_pair_to_ratio",
    "split_decimal",
    "ratio_to_decimal",
    "exact_decimal",
]
