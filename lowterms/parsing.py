"""Text front end: turns ``"numerator[/denominator]"`` into literals.

Accepted forms for each side:

* base 10: an integer or decimal literal with an optional ``e`` exponent,
  e.g. ``"-12"``, ``"3.25"``, ``"1.5e-3"``;
* any radix: digits with an optional radix point and an optional
  parenthesised repeating group, e.g. ``"0.(3)"``, ``"1f.0(a)"`` in base 16.

Repeating groups never combine with an exponent.
"""
from __future__ import annotations

import decimal
import re
from typing import Optional, Tuple

from .decimals import split_decimal
from .digits import DEFAULT_RADIX, DIGITS, from_digits, normalize_radix
from .errors import InvalidArgument
from .literals import AlreadyFraction, DecimalLiteral, IntegerLiteral, Literal

_DECIMAL_RE = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


def _radix_pattern(radix: int) -> "re.Pattern[str]":
    group = "[" + re.escape(DIGITS[:radix]) + "]"
    return re.compile(
        rf"^([+-]?)({group}*)(?:\.({group}*)(?:\(({group}+)\))?)?$",
        re.IGNORECASE | re.ASCII,
    )


def _malformed(text: str, radix: int) -> InvalidArgument:
    return InvalidArgument(f"Malformed fraction {text!r} for radix {radix}")


def _parse_decimal(text: str) -> Literal:
    if _INTEGER_RE.match(text):
        return IntegerLiteral(int(text))
    if not _DECIMAL_RE.match(text):
        raise _malformed(text, 10)
    return DecimalLiteral(*split_decimal(decimal.Decimal(text)))


def _parse_radixed(text: str, radix: int) -> Literal:
    match = _radix_pattern(radix).match(text)
    if match is None:
        raise _malformed(text, radix)
    sign, ipart, fpart, repeating = match.groups()
    fpart = fpart or ""
    if not (ipart or fpart or repeating):
        raise _malformed(text, radix)

    ipart, fpart = ipart.lower(), fpart.lower()
    if "." not in text:
        value = from_digits(ipart, radix)
        return IntegerLiteral(-value if sign == "-" else value)

    # A.B(C) = (AB * (r**|C| - 1) + C) / ((r**|C| - 1) * r**|B|)
    numerator = from_digits(ipart + fpart, radix)
    denominator = radix ** len(fpart)
    if repeating:
        period = radix ** len(repeating) - 1
        numerator = numerator * period + from_digits(repeating.lower(), radix)
        denominator *= period
    if sign == "-":
        numerator = -numerator
    return AlreadyFraction(numerator, denominator)


def parse_literal(text: str, radix: int = DEFAULT_RADIX) -> Literal:
    """Parse one side of a fraction."""
    if text is None:
        raise InvalidArgument("Null argument")
    radix = normalize_radix(radix)
    text = text.strip()
    if radix == 10 and "(" not in text:
        return _parse_decimal(text)
    return _parse_radixed(text, radix)


def parse_fraction(text: str, radix: int = DEFAULT_RADIX) -> Tuple[Literal, Optional[Literal]]:
    """Split ``text`` on ``/`` and parse each side.

    Returns ``(numerator, None)`` when there is no denominator.
    """
    if text is None:
        raise InvalidArgument("Null argument")
    pieces = text.split("/")
    if len(pieces) > 2:
        raise _malformed(text, normalize_radix(radix))
    numerator = parse_literal(pieces[0], radix)
    if len(pieces) == 1:
        return numerator, None
    return numerator, parse_literal(pieces[1], radix)


__all__ = ["parse_literal", "parse_fraction"]
