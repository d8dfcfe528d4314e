"""Division, rounding and Farey-search modes."""
from __future__ import annotations

from enum import Enum, auto


class DivisionMode(Enum):
    """How the integer quotient is chosen when operands may be negative."""

    TRUNCATED = auto()   # quotient toward zero, remainder follows the dividend
    FLOORED = auto()     # quotient toward -inf, remainder follows the divisor
    EUCLIDEAN = auto()   # remainder is never negative


class RoundingMode(Enum):
    """Rounding policies, with the same meanings as :mod:`decimal`'s."""

    UP = auto()
    DOWN = auto()
    CEILING = auto()
    FLOOR = auto()
    HALF_UP = auto()
    HALF_DOWN = auto()
    HALF_EVEN = auto()
    UNNECESSARY = auto()

    @property
    def is_half(self) -> bool:
        return self in _HALF_MODES


_HALF_MODES = frozenset({RoundingMode.HALF_UP, RoundingMode.HALF_DOWN, RoundingMode.HALF_EVEN})


class FareyMode(Enum):
    NEXT = auto()
    PREV = auto()
    CLOSEST = auto()


DEFAULT_DIVISION_MODE = DivisionMode.TRUNCATED
DEFAULT_ROUNDING_MODE = RoundingMode.HALF_UP


__all__ = [
    "DivisionMode",
    "RoundingMode",
    "FareyMode",
    "DEFAULT_DIVISION_MODE",
    "DEFAULT_ROUNDING_MODE",
]
