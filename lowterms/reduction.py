"""Canonical form for numerator/denominator pairs."""
from __future__ import annotations

import math
from typing import Tuple

from .checked import IntegerOps
from .errors import DivideByZero


def reduce(
    ops: IntegerOps, numerator: int, denominator: int, *, reduced: bool = False
) -> Tuple[int, int]:
    """Return ``(numerator, denominator)`` in lowest terms with a positive denominator.

    ``reduced=True`` is the trusted path for callers that already know the
    pair shares no common factor: the gcd is skipped but the sign is still
    moved onto the numerator.
    """
    if denominator == 0:
        raise DivideByZero("Divide by zero: fraction denominator is zero.")

    if numerator == 0:
        return 0, 1

    if not (reduced or denominator in (1, -1)):
        # the gcd is 2**63 when both parts are the int64 minimum, but the
        # quotients always fit
        g = math.gcd(numerator, denominator)
        if g != 1:
            numerator //= g
            denominator //= g

    if denominator < 0:
        numerator = ops.neg(numerator)
        denominator = ops.neg(denominator)
    return numerator, denominator


def is_reduced(numerator: int, denominator: int) -> bool:
    """Check the canonical-form invariant without changing anything."""
    if denominator <= 0:
        return False
    if numerator == 0:
        return denominator == 1
    return math.gcd(numerator, denominator) == 1


__all__ = ["reduce", "is_reduced"]
