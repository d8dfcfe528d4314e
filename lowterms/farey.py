"""Neighbours of a fraction in the Farey sequence of a given order.

The search walks the Stern-Brocot tree: keep a lower bound ``a/b`` and an
upper bound ``c/d`` around the target and replace one of them by their
mediant until the next mediant's denominator would exceed the order.
"""
from __future__ import annotations

import logging
from typing import Tuple

from .checked import IntegerOps
from .errors import InvalidArgument
from .modes import FareyMode

logger = logging.getLogger(__name__)

_MIRROR = {FareyMode.NEXT: FareyMode.PREV, FareyMode.PREV: FareyMode.NEXT}


def farey(
    ops: IntegerOps, numerator: int, denominator: int, max_denominator: int, mode: FareyMode
) -> Tuple[int, int]:
    """Return the reduced ``(numerator, denominator)`` neighbour selected by ``mode``.

    NEXT is the smallest fraction strictly greater than the target with a
    denominator of at most ``max_denominator``; PREV the largest strictly
    smaller one; CLOSEST the nearer of the two (the lower one on a tie), or
    the target itself when it is already in the sequence.
    """
    if max_denominator <= 0:
        raise InvalidArgument("maxDenominator must be positive")
    max_denominator = ops.check(max_denominator)

    if mode is FareyMode.CLOSEST and denominator <= max_denominator:
        return numerator, denominator

    if denominator == 1:
        # k/1 -> (k*N +- 1)/N
        scaled = ops.mul(numerator, max_denominator)
        if mode is FareyMode.NEXT:
            return ops.add(scaled, 1), max_denominator
        return ops.sub(scaled, 1), max_denominator

    if numerator < 0:
        n, d = farey(ops, ops.neg(numerator), denominator, max_denominator, _MIRROR.get(mode, mode))
        return ops.neg(n), d

    if numerator > denominator:
        whole, rest = ops.divmod(numerator, denominator)
        n, d = farey(ops, rest, denominator, max_denominator, mode)
        return ops.add(ops.mul(whole, d), n), d

    a, b, c, d = 0, 1, 1, 1
    steps = 0
    while b + d <= max_denominator:
        med_n, med_d = a + c, b + d
        cmp = ops.cross_compare(med_n, denominator, med_d, numerator)
        if cmp < 0 or (cmp == 0 and mode is FareyMode.NEXT):
            a, b = med_n, med_d
        else:
            c, d = med_n, med_d
        steps += 1
    logger.debug(
        "farey %s of %s/%s at order %s: %s steps", mode.name, numerator, denominator, max_denominator, steps
    )

    if mode is FareyMode.NEXT:
        return c, d
    if mode is FareyMode.PREV:
        return a, b

    # x - a/b = (n*b - a*den) / (den*b)  vs  c/d - x = (c*den - n*d) / (den*d)
    below = numerator * b - a * denominator
    above = c * denominator - numerator * d
    if ops.cross_compare(below, d, above, b) > 0:
        return c, d
    return a, b


__all__ = ["farey"]
