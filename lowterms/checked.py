"""Integer backings shared by every fraction algorithm.

The algorithms in :mod:`lowterms` never touch ``+``/``*`` on numerators and
denominators directly; they go through an :class:`IntegerOps` object. The
unbounded backing is plain Python ``int`` arithmetic. The fixed-width
backing emulates a signed two's-complement register and raises
:class:`~lowterms.errors.FractionOverflow` instead of wrapping.
"""
from __future__ import annotations

import logging
import math
from typing import Optional, Protocol, Tuple

from .errors import DivideByZero, FractionOverflow

logger = logging.getLogger(__name__)


def tdiv(a: int, b: int) -> int:
    """Return ``a / b`` rounded toward zero (Python's ``//`` floors)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class IntegerOps(Protocol):
    """Capability every fraction backing must provide."""

    name: str
    bounded: bool
    min_value: Optional[int]
    max_value: Optional[int]

    def check(self, value: int) -> int: ...

    def add(self, a: int, b: int) -> int: ...

    def sub(self, a: int, b: int) -> int: ...

    def mul(self, a: int, b: int) -> int: ...

    def neg(self, a: int) -> int: ...

    def abs(self, a: int) -> int: ...

    def pow(self, n: int, x: int) -> int: ...

    def gcd(self, a: int, b: int) -> int: ...

    def lcm(self, a: int, b: int) -> int: ...

    def divmod(self, a: int, b: int) -> Tuple[int, int]: ...

    def cross_compare(self, a: int, b: int, c: int, d: int) -> int: ...


class UnboundedIntegers:
    """Arbitrary-precision arithmetic. No operation can overflow."""

    name = "integer"
    bounded = False
    min_value: Optional[int] = None
    max_value: Optional[int] = None

    def check(self, value: int) -> int:
        return value

    def add(self, a: int, b: int) -> int:
        return a + b

    def sub(self, a: int, b: int) -> int:
        return a - b

    def mul(self, a: int, b: int) -> int:
        return a * b

    def neg(self, a: int) -> int:
        return -a

    def abs(self, a: int) -> int:
        return -a if a < 0 else a

    def pow(self, n: int, x: int) -> int:
        if x < 0:
            raise ValueError("exponent must be non-negative")
        return n ** x

    def gcd(self, a: int, b: int) -> int:
        return math.gcd(a, b)

    def lcm(self, a: int, b: int) -> int:
        if a == 0 and b == 0:
            return 0
        return abs(a * b) // math.gcd(a, b)

    def divmod(self, a: int, b: int) -> Tuple[int, int]:
        """Truncated division: ``a == b*q + r`` with ``r`` carrying the sign of ``a``."""
        if b == 0:
            raise DivideByZero("Divide by zero.")
        q = tdiv(a, b)
        return q, a - b * q

    def cross_compare(self, a: int, b: int, c: int, d: int) -> int:
        """Return the sign of ``a*b - c*d``.

        Only the sign leaves this method, so the products are formed exactly
        even for bounded backings.
        """
        lhs = a * b
        rhs = c * d
        return (lhs > rhs) - (lhs < rhs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FixedWidthIntegers(UnboundedIntegers):
    """Signed ``bits``-wide integers with overflow detection."""

    bounded = True

    def __init__(self, bits: int = 64) -> None:
        if bits < 2:
            raise ValueError("bits must be >= 2")
        self.bits = bits
        self.name = f"int{bits}"
        self.min_value = -(1 << (bits - 1))
        self.max_value = (1 << (bits - 1)) - 1

    def _overflow(self, expression: str) -> FractionOverflow:
        logger.debug("%s overflow in %s", self.name, expression)
        return FractionOverflow(f"Integer Overflow: {expression}")

    def check(self, value: int) -> int:
        if value < self.min_value or value > self.max_value:
            raise self._overflow(f"{value} does not fit in {self.name}")
        return value

    def add(self, a: int, b: int) -> int:
        # order the operands so only two boundary cases remain
        if a > b:
            a, b = b, a
        if a < 0 and b < 0 and a < self.min_value - b:
            raise self._overflow(f"{a} + {b}")
        if a > 0 and b > 0 and a > self.max_value - b:
            raise self._overflow(f"{a} + {b}")
        return a + b

    def sub(self, a: int, b: int) -> int:
        if b != self.min_value:
            return self.add(a, -b)
        if a < 0:
            return a - b
        raise self._overflow(f"{a} - ({b})")

    def mul(self, a: int, b: int) -> int:
        if a == 0 or b == 0:
            return 0
        if a > b:
            a, b = b, a
        if a > 0:
            # both positive
            if a > tdiv(self.max_value, b):
                raise self._overflow(f"{a} * {b}")
        elif b > 0:
            # negative a, positive b
            if a < tdiv(self.min_value, b):
                raise self._overflow(f"{a} * {b}")
        elif a < tdiv(self.max_value, b):
            # both negative
            raise self._overflow(f"{a} * {b}")
        return a * b

    def neg(self, a: int) -> int:
        if a == self.min_value:
            raise self._overflow(f"-({a})")
        return -a

    def abs(self, a: int) -> int:
        if a == self.min_value:
            raise self._overflow(f"abs({a})")
        return -a if a < 0 else a

    def pow(self, n: int, x: int) -> int:
        if x < 0:
            raise ValueError("exponent must be non-negative")
        if x == 0:
            return 1
        if n in (0, 1):
            return n
        if n == -1:
            return -1 if x & 1 else 1
        result = 1
        try:
            for _ in range(x):
                result = self.mul(result, n)
        except FractionOverflow as exc:
            raise self._overflow(f"({n})^({x})") from exc
        return result

    def gcd(self, a: int, b: int) -> int:
        g = math.gcd(a, b)
        if g > self.max_value:
            raise self._overflow(f"gcd({a}, {b})")
        return g

    def lcm(self, a: int, b: int) -> int:
        # |larger / gcd * smaller| keeps the intermediate below |a*b|
        if a == 0 and b == 0:
            return 0
        g = self.gcd(a, b)
        if abs(a) >= abs(b):
            return self.abs(self.mul(tdiv(a, g), b))
        return self.abs(self.mul(tdiv(b, g), a))

    def divmod(self, a: int, b: int) -> Tuple[int, int]:
        if b == -1 and a == self.min_value:
            raise self._overflow(f"{a} / {b}")
        return super().divmod(a, b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(bits={self.bits})"


UNBOUNDED = UnboundedIntegers()
INT64 = FixedWidthIntegers(64)


__all__ = [
    "IntegerOps",
    "UnboundedIntegers",
    "FixedWidthIntegers",
    "UNBOUNDED",
    "INT64",
    "tdiv",
]
