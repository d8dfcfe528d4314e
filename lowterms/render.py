"""Text forms of a reduced fraction.

Rendering never produces a new fraction value, so every function here works
on plain (unbounded) integers whatever backing the fraction uses.
"""
from __future__ import annotations

import logging
from typing import Dict, List

from .checked import UNBOUNDED
from .digits import DEFAULT_RADIX, digit_char, from_digits, normalize_radix, to_digits
from .errors import InvalidArgument
from .modes import DEFAULT_ROUNDING_MODE, RoundingMode
from .reduction import reduce
from .rounding import round_ratio

logger = logging.getLogger(__name__)


def fraction_string(
    numerator: int, denominator: int, radix: int = DEFAULT_RADIX, denominator_optional: bool = False
) -> str:
    """``"N/D"``; just ``"N"`` for whole numbers when ``denominator_optional``."""
    radix = normalize_radix(radix)
    if denominator_optional and denominator == 1:
        return to_digits(numerator, radix)
    return f"{to_digits(numerator, radix)}/{to_digits(denominator, radix)}"


def mixed_string(numerator: int, denominator: int, radix: int = DEFAULT_RADIX) -> str:
    """``"W N/D"`` with the sign carried by ``W``, e.g. ``-4/3`` is ``"-1 1/3"``."""
    radix = normalize_radix(radix)
    if denominator == 1:
        return to_digits(numerator, radix)
    if abs(numerator) < denominator:
        return fraction_string(numerator, denominator, radix)
    whole, rest = UNBOUNDED.divmod(numerator, denominator)
    return f"{to_digits(whole, radix)} {to_digits(abs(rest), radix)}/{to_digits(denominator, radix)}"


def radixed_string(
    numerator: int,
    denominator: int,
    radix: int = DEFAULT_RADIX,
    digits: int = 0,
    mode: RoundingMode = DEFAULT_ROUNDING_MODE,
) -> str:
    """Fixed number of digits after the radix point, rounded under ``mode``.

    Negative ``digits`` round to the nearest ``radix ** -digits``. Trailing
    zeros are kept: one half with three decimal digits is ``"0.500"``.
    """
    if mode is None:
        raise InvalidArgument("Null argument")
    radix = normalize_radix(radix)

    if digits == 0:
        return to_digits(round_ratio(UNBOUNDED, numerator, denominator, mode), radix)

    if digits < 0:
        scale = radix ** -digits
        rounded = round_ratio(UNBOUNDED, *reduce(UNBOUNDED, numerator, denominator * scale), mode)
        if rounded == 0:
            return "0"
        return to_digits(rounded, radix) + "0" * -digits

    rounded = round_ratio(UNBOUNDED, *reduce(UNBOUNDED, numerator * radix ** digits, denominator), mode)
    text = to_digits(abs(rounded), radix)
    if len(text) > digits:
        before, after = text[:-digits], text[-digits:]
    else:
        before, after = "0", text.rjust(digits, "0")
    # sign of the rounded value: a tiny negative may round to zero
    sign = "-" if rounded < 0 else ""
    return f"{sign}{before}.{after}"


def repeating_digit_string(
    numerator: int, denominator: int, radix: int = DEFAULT_RADIX, force_repeating: bool = False
) -> str:
    """Radix expansion with the repeating block in parentheses.

    ``1/9`` is ``"0.(1)"``, ``45/22`` is ``"2.0(45)"`` and ``500/11`` is
    ``"45.(45)"``. With ``force_repeating`` a terminating expansion is
    rewritten to end in the radix's largest digit repeated: ``1`` becomes
    ``"0.(9)"`` and ``1/100`` becomes ``"0.00(9)"``.
    """
    radix = normalize_radix(radix)

    if numerator == 0:
        return "0.(0)" if force_repeating else "0.0"

    sign = "-" if numerator < 0 else ""
    magnitude = abs(numerator)
    max_digit = digit_char(radix - 1)

    if denominator == 1:
        if force_repeating:
            return f"{sign}{to_digits(magnitude - 1, radix)}.({max_digit})"
        return to_digits(numerator, radix) + ".0"

    integer_part = "0"
    dividend = magnitude
    if dividend > denominator:
        whole, dividend = divmod(magnitude, denominator)
        integer_part = to_digits(whole, radix)

    # long division; a remainder seen before means the digits from its first
    # position onward repeat forever
    quotient: List[str] = []
    seen: Dict[int, int] = {}
    while dividend != 0 and dividend not in seen:
        seen[dividend] = len(quotient)
        digit, dividend = divmod(dividend * radix, denominator)
        quotient.append(digit_char(digit))

    head = f"{sign}{integer_part}."

    if dividend == 0:
        digits = "".join(quotient)
        if not force_repeating:
            return head + digits
        # 0.11 == 0.10(9): drop one unit in the last place, then repeat the max digit
        lowered = to_digits(from_digits(digits, radix) - 1, radix)
        return f"{head}{lowered.rjust(len(digits), '0')}({max_digit})"

    start = seen[dividend]
    logger.debug(
        "%s/%s in radix %s repeats after %s digits with period %s",
        numerator, denominator, radix, start, len(quotient) - start,
    )
    return f"{head}{''.join(quotient[:start])}({''.join(quotient[start:])})"


__all__ = ["fraction_string", "mixed_string", "radixed_string", "repeating_digit_string"]
