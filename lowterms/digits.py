"""Radix handling shared by the parser and the renderers."""
from __future__ import annotations

DEFAULT_RADIX = 10
MIN_RADIX = 2
MAX_RADIX = 36

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def normalize_radix(radix: int) -> int:
    """Out-of-range radixes fall back to 10, as ``int.__format__`` users expect."""
    if radix < MIN_RADIX or radix > MAX_RADIX:
        return DEFAULT_RADIX
    return radix


def digit_char(value: int) -> str:
    return DIGITS[value]


def to_digits(n: int, radix: int = DEFAULT_RADIX) -> str:
    """Render an integer in ``radix`` with a leading ``-`` for negatives."""
    if radix == 10:
        return str(n)
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    n = abs(n)
    out = []
    while n:
        n, d = divmod(n, radix)
        out.append(DIGITS[d])
    return sign + "".join(reversed(out))


def from_digits(text: str, radix: int = DEFAULT_RADIX) -> int:
    """Parse unsigned digits; the empty string is zero."""
    if not text:
        return 0
    return int(text, radix)


__all__ = [
    "DEFAULT_RADIX",
    "MIN_RADIX",
    "MAX_RADIX",
    "normalize_radix",
    "digit_char",
    "to_digits",
    "from_digits",
]
