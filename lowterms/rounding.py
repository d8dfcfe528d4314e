"""Rounding a fraction to an integer."""
from __future__ import annotations

from .checked import IntegerOps
from .errors import InvalidArgument, RoundingRequired
from .modes import DEFAULT_ROUNDING_MODE, RoundingMode


def round_ratio(
    ops: IntegerOps, numerator: int, denominator: int, mode: RoundingMode = DEFAULT_ROUNDING_MODE
) -> int:
    """Round a reduced fraction to an integer under ``mode``.

    Every mode is first resolved to UP (one unit away from zero) or DOWN
    (truncate). Because the fraction is reduced, an exact half can only
    occur when the denominator is 2.
    """
    if mode is None:
        raise InvalidArgument("Null argument")

    if denominator == 1:
        return numerator

    if mode is RoundingMode.UNNECESSARY:
        raise RoundingRequired("Rounding necessary")

    if mode.is_half and denominator != 2:
        value, remainder = ops.divmod(numerator, denominator)
        mode = RoundingMode.UP if ops.abs(remainder) > denominator >> 1 else RoundingMode.DOWN
    else:
        value = ops.divmod(numerator, denominator)[0]
        if mode.is_half:
            if mode is RoundingMode.HALF_UP or (mode is RoundingMode.HALF_EVEN and value & 1):
                mode = RoundingMode.UP
            else:
                mode = RoundingMode.DOWN

    # the sign of the numerator, not of value: value is 0 for -1 < x < 0
    if mode is RoundingMode.CEILING:
        mode = RoundingMode.UP if numerator > 0 else RoundingMode.DOWN
    elif mode is RoundingMode.FLOOR:
        mode = RoundingMode.DOWN if numerator > 0 else RoundingMode.UP

    if mode is RoundingMode.UP:
        return ops.add(value, 1) if numerator > 0 else ops.sub(value, 1)
    return value


__all__ = ["round_ratio"]
