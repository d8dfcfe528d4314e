"""Integer division of fractions under the three division modes.

For dividend ``a`` and divisor ``b`` every mode produces an integer ``q`` and
a fraction ``r`` with ``a == b*q + r``. The work is one truncated division of
the cross products; FLOORED and EUCLIDEAN then nudge ``q`` by at most one.
"""
from __future__ import annotations

from typing import Tuple

from .checked import IntegerOps
from .errors import DivideByZero, InvalidArgument
from .modes import DEFAULT_DIVISION_MODE, DivisionMode
from .reduction import reduce

Pair = Tuple[int, int]

_ZERO: Pair = (0, 1)


def _adjustment(mode: DivisionMode, num: int, den: int) -> int:
    """How far the truncated quotient has to move for ``mode``."""
    if mode is DivisionMode.FLOORED:
        # floor differs from trunc only for a negative quotient
        return -1 if (num < 0) != (den < 0) else 0
    if mode is DivisionMode.EUCLIDEAN and num < 0:
        # -/+ needs floor (trunc - 1), -/- needs ceil (trunc + 1)
        return -1 if den > 0 else 1
    return 0


def _truncated(ops: IntegerOps, a: Pair, b: Pair) -> Tuple[int, int, int, int]:
    if b[0] == 0:
        raise DivideByZero("Divide by zero.")

    # a/b = (a.n * b.d) / (a.d * b.n); sign(num) == sign(a), sign(den) == sign(b)
    num = ops.mul(a[0], b[1])
    den = ops.mul(a[1], b[0])
    q, r = ops.divmod(num, den)
    return num, den, q, r


def divide_and_remainder(
    ops: IntegerOps, a: Pair, b: Pair, mode: DivisionMode = DEFAULT_DIVISION_MODE
) -> Tuple[int, Pair]:
    """Return ``(q, (r_num, r_den))`` with ``a == b*q + r`` and ``r`` reduced."""
    if mode is None:
        raise InvalidArgument("Null argument")
    if a[0] == 0:
        if b[0] == 0:
            raise DivideByZero("Divide by zero.")
        return 0, _ZERO
    num, den, q, r = _truncated(ops, a, b)
    if r == 0:
        return q, _ZERO

    # q' = q + x  and  r' = r - x*den keep num/den == q' + r'/den
    x = _adjustment(mode, num, den)
    if x == -1:
        q = ops.sub(q, 1)
        r = ops.add(r, den)
    elif x == 1:
        q = ops.add(q, 1)
        r = ops.sub(r, den)

    # r'/den is a remainder over num/den; scale it back onto b: r * b.n / (b.d * den)
    return q, reduce(ops, ops.mul(r, b[0]), ops.mul(b[1], den))


def integral_quotient(
    ops: IntegerOps, a: Pair, b: Pair, mode: DivisionMode = DEFAULT_DIVISION_MODE
) -> int:
    """Quotient only; the remainder is never rescaled."""
    if mode is None:
        raise InvalidArgument("Null argument")
    if a[0] == 0:
        if b[0] == 0:
            raise DivideByZero("Divide by zero.")
        return 0
    num, den, q, r = _truncated(ops, a, b)
    if r == 0:
        return q
    x = _adjustment(mode, num, den)
    return ops.add(q, x) if x else q


def remainder(
    ops: IntegerOps, a: Pair, b: Pair, mode: DivisionMode = DEFAULT_DIVISION_MODE
) -> Pair:
    return divide_and_remainder(ops, a, b, mode)[1]


def parts(
    ops: IntegerOps, numerator: int, denominator: int, mode: DivisionMode = DEFAULT_DIVISION_MODE
) -> Tuple[int, Pair]:
    """Split a reduced fraction into integer part and fraction part.

    The sign lives on the numerator and the denominator is positive, so
    FLOORED and EUCLIDEAN always agree here.
    """
    if mode is None:
        raise InvalidArgument("Null argument")
    if denominator == 1:
        return numerator, _ZERO
    q, r = ops.divmod(numerator, denominator)
    if numerator < 0 and mode is not DivisionMode.TRUNCATED:
        q = ops.sub(q, 1)
        r = ops.add(r, denominator)
    # gcd(r, d) == gcd(n, d) == 1, so the fraction part is already reduced
    return q, (r, denominator)


__all__ = ["divide_and_remainder", "integral_quotient", "remainder", "parts"]
