"""Exact rational numbers with NumPy interoperability.

:class:`BaseFraction` holds the algorithms; the concrete classes only pick the
integer backing that every numerator and denominator operation goes through:

* :class:`BigFraction` uses Python integers and never overflows;
* :class:`LongFraction` keeps both parts in signed 64-bit range and raises
  :class:`~lowterms.errors.FractionOverflow` instead of wrapping.
"""
from __future__ import annotations

import decimal
import math
import numbers
import operator
import sys
from typing import Any, Callable, Optional, Tuple, Union

import numpy as np

from . import division
from .checked import INT64, UNBOUNDED, IntegerOps
from .decimals import exact_decimal, ratio_to_decimal
from .digits import DEFAULT_RADIX
from .errors import DivideByZero, InvalidArgument, NoExactValue
from .farey import farey
from .ieee754 import DOUBLE, SINGLE, from_ratio, from_ratio_exact
from .literals import AlreadyFraction, FloatLiteral, Literal, literal_of, literal_ratio, resolve_pair
from .modes import DEFAULT_DIVISION_MODE, DEFAULT_ROUNDING_MODE, DivisionMode, FareyMode, RoundingMode
from .parsing import parse_fraction
from .reduction import reduce
from .render import fraction_string, mixed_string, radixed_string, repeating_digit_string
from .rounding import round_ratio

NumberLike = Union["BaseFraction", numbers.Rational, numbers.Real, decimal.Decimal, str]

Pair = Tuple[int, int]

DEFAULT_MAX_DENOMINATOR = 10**6

_HASH_MODULUS = sys.hash_info.modulus
_HASH_INF = sys.hash_info.inf


def _exact_pair(value: Any) -> Optional[Pair]:
    """Reduced ``(numerator, denominator)`` of a number, or ``None`` if it is not one."""
    if value is None or isinstance(value, (str, bytes)):
        return None
    try:
        literal = literal_of(value)
    except TypeError:
        return None
    n, d, reduced = literal_ratio(literal)
    return reduce(UNBOUNDED, n, d, reduced=reduced)


def _is_non_finite(value: Any) -> bool:
    if isinstance(value, decimal.Decimal):
        return not value.is_finite()
    if isinstance(value, numbers.Real) and not isinstance(value, numbers.Rational):
        return not math.isfinite(value)
    return False


class BaseFraction:
    """Immutable fraction in lowest terms with a positive denominator."""

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer fraction semantics in NumPy expressions.

    _ops: IntegerOps = UNBOUNDED

    ZERO: "BaseFraction"
    ONE: "BaseFraction"
    ONE_HALF: "BaseFraction"
    ONE_TENTH: "BaseFraction"
    TEN: "BaseFraction"

    def __init__(self, numerator: NumberLike = 0, denominator: Optional[NumberLike] = None) -> None:
        num, den = self._components(numerator, denominator)
        self._numerator = num
        self._denominator = den

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def _make(cls, numerator: int, denominator: int, *, reduced: bool = False) -> "BaseFraction":
        num, den = reduce(cls._ops, numerator, denominator, reduced=reduced)
        obj = object.__new__(cls)
        obj._numerator = num
        obj._denominator = den
        return obj

    @staticmethod
    def _literal(value: Any, radix: int = DEFAULT_RADIX) -> Literal:
        if isinstance(value, str):
            top, bottom = parse_fraction(value, radix)
            if bottom is None:
                return top
            n, d, reduced = resolve_pair(UNBOUNDED, top, bottom)
            return AlreadyFraction(*reduce(UNBOUNDED, n, d, reduced=reduced), reduced=True)
        return literal_of(value)

    @classmethod
    def _components(
        cls, numerator: Any, denominator: Any = None, radix: int = DEFAULT_RADIX
    ) -> Pair:
        ops = cls._ops
        top = cls._literal(numerator, radix)
        if denominator is None:
            n, d, reduced = literal_ratio(top)
        else:
            n, d, reduced = resolve_pair(ops, top, cls._literal(denominator, radix))
        return reduce(ops, ops.check(n), ops.check(d), reduced=reduced)

    @classmethod
    def value_of(cls, numerator: NumberLike, denominator: Optional[NumberLike] = None) -> "BaseFraction":
        """Return ``numerator / denominator`` as this class, reusing fractions already of it."""
        if denominator is None and type(numerator) is cls:
            return numerator
        return cls(numerator, denominator)

    @classmethod
    def from_float(cls, value: float) -> "BaseFraction":
        """Exact value of a double; ``from_float(0.1)`` is ``3602879701896397/36028797018963968``."""
        return cls(FloatLiteral(float(value), DOUBLE))

    @classmethod
    def from_float32(cls, value: Any) -> "BaseFraction":
        """Exact value of ``value`` after narrowing it to single precision."""
        with np.errstate(over="ignore"):
            narrowed = np.float32(value)
        return cls(FloatLiteral(narrowed, SINGLE))

    @classmethod
    def from_decimal(cls, value: Union[decimal.Decimal, str, int]) -> "BaseFraction":
        return cls(decimal.Decimal(value))

    @classmethod
    def parse(cls, text: str, radix: int = DEFAULT_RADIX) -> "BaseFraction":
        """Parse ``"numerator[/denominator]"``, e.g. ``"1.5e-3"``, ``"0.(3)"`` or ``"ff/10"`` in base 16."""
        if not isinstance(text, str):
            raise InvalidArgument("Null argument" if text is None else f"Expected text, got {type(text)!r}")
        return cls._make(*cls._components(text, None, radix), reduced=True)

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def _pair(self) -> Pair:
        return self._numerator, self._denominator

    def _argument(self, value: Any) -> "BaseFraction":
        """Operand of a named method, converted to this fraction's type."""
        if value is None:
            raise InvalidArgument("Null argument")
        if type(value) is type(self):
            return value
        return type(self)(value)

    def _coerce(self, value: Any) -> "BaseFraction":
        """Operand of an operator; ``TypeError`` for anything that is not a number."""
        if type(value) is type(self):
            return value
        if value is None or isinstance(value, (str, bytes)):
            raise TypeError(f"Cannot interpret {type(value)!r} as {type(self).__name__}")
        return type(self)(value)

    def _defers_to(self, other: Any) -> bool:
        # a bounded fraction leaves mixed expressions to the unbounded operand
        return isinstance(other, BaseFraction) and self._ops.bounded and not other._ops.bounded

    def is_integer(self) -> bool:
        return self._denominator == 1

    def as_integer_ratio(self) -> Pair:
        return self._pair

    # ------------------------------------------------------------------
    # Arithmetic
    def _add(self, other: "BaseFraction") -> "BaseFraction":
        ops = self._ops
        if other._numerator == 0:
            return self
        if self._numerator == 0:
            return other
        a, b = self._pair
        c, d = other._pair
        # n/d + k = (n + d*k)/d is already reduced
        if d == 1:
            return self._make(ops.add(a, ops.mul(b, c)), b, reduced=True)
        if b == 1:
            return self._make(ops.add(ops.mul(a, d), c), d, reduced=True)
        return self._make(ops.add(ops.mul(a, d), ops.mul(c, b)), ops.mul(b, d))

    def _subtract(self, other: "BaseFraction") -> "BaseFraction":
        ops = self._ops
        if other._numerator == 0:
            return self
        if self._numerator == 0:
            return other.negate()
        a, b = self._pair
        c, d = other._pair
        if d == 1:
            return self._make(ops.sub(a, ops.mul(b, c)), b, reduced=True)
        if b == 1:
            return self._make(ops.sub(ops.mul(a, d), c), d, reduced=True)
        return self._make(ops.sub(ops.mul(a, d), ops.mul(c, b)), ops.mul(b, d))

    def _multiply(self, other: "BaseFraction") -> "BaseFraction":
        ops = self._ops
        a, b = self._pair
        c, d = other._pair
        if a == 0 or c == 0:
            return type(self).ZERO
        if not ops.bounded:
            return self._make(a * c, b * d)
        # (a/b)(c/d) = (a/g1)(c/g2) / ((b/g2)(d/g1)) keeps the products small
        g1 = ops.gcd(a, d)
        g2 = ops.gcd(c, b)
        return self._make(
            ops.mul(a // g1, c // g2),
            ops.mul(b // g2, d // g1),
            reduced=True,
        )

    def _pow(self, exponent: int) -> "BaseFraction":
        ops = self._ops
        if exponent == 0:
            return type(self).ONE
        if exponent == 1:
            return self
        if exponent < 0:
            if self._numerator == 0:
                raise DivideByZero("Divide by zero: raising zero to negative exponent.")
            exponent = -exponent
            return self._make(
                ops.pow(self._denominator, exponent), ops.pow(self._numerator, exponent), reduced=True
            )
        return self._make(ops.pow(self._numerator, exponent), ops.pow(self._denominator, exponent), reduced=True)

    def add(self, n: NumberLike) -> "BaseFraction":
        return self._add(self._argument(n))

    def subtract(self, n: NumberLike) -> "BaseFraction":
        return self._subtract(self._argument(n))

    def subtract_from(self, n: NumberLike) -> "BaseFraction":
        """Return ``n - self``."""
        return self._argument(n)._subtract(self)

    def multiply(self, n: NumberLike) -> "BaseFraction":
        return self._multiply(self._argument(n))

    def divide(self, n: NumberLike) -> "BaseFraction":
        """Return ``self / n``; the same as constructing a fraction from the pair."""
        if n is None:
            raise InvalidArgument("Null argument")
        return type(self)(self, n)

    def divide_into(self, n: NumberLike) -> "BaseFraction":
        """Return ``n / self``."""
        if n is None:
            raise InvalidArgument("Null argument")
        return type(self)(n, self)

    def reciprocal(self) -> "BaseFraction":
        if self._numerator == 0:
            raise DivideByZero("Divide by zero: reciprocal of zero.")
        return self._make(self._denominator, self._numerator, reduced=True)

    def complement(self) -> "BaseFraction":
        """Return ``1 - self``."""
        return self._make(self._ops.sub(self._denominator, self._numerator), self._denominator, reduced=True)

    def negate(self) -> "BaseFraction":
        return self._make(self._ops.neg(self._numerator), self._denominator, reduced=True)

    def abs(self) -> "BaseFraction":
        return self.negate() if self._numerator < 0 else self

    def with_sign(self, sign: int) -> "BaseFraction":
        """Same magnitude with the sign of ``sign``; zero for a zero ``sign``."""
        if sign == 0 or self._numerator == 0:
            return type(self).ZERO
        if (self._numerator < 0) != (sign < 0):
            return self.negate()
        return self

    def signum(self) -> int:
        return (self._numerator > 0) - (self._numerator < 0)

    def pow(self, exponent: Any) -> "BaseFraction":
        """Integer powers only; ``0 ** 0`` is one."""
        return self._pow(self._integral(exponent, "Exponent"))

    @staticmethod
    def _integral(value: Any, what: str) -> int:
        """``value`` as an int; ``InvalidArgument`` unless it is a whole number."""
        if value is None:
            raise InvalidArgument("Null argument")
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, numbers.Rational):
            if value.denominator != 1:
                raise InvalidArgument(f"{what} must be an integer")
            return int(value.numerator)
        if isinstance(value, (numbers.Real, decimal.Decimal)):
            if not (_is_non_finite(value) or value % 1):
                return int(value)
            raise InvalidArgument(f"{what} must be an integer")
        raise TypeError(f"Unsupported {what.lower()} type {type(value)!r}")

    def gcd(self, n: NumberLike) -> "BaseFraction":
        """Largest fraction that divides both ``self`` and ``n`` a whole number of times.

        ``gcd(a/b, c/d) = gcd(a, c) / lcm(b, d)``, which is already reduced.
        The result is never negative.
        """
        other = self._argument(n)
        if self._numerator == 0:
            return other.abs()
        if other._numerator == 0:
            return self.abs()
        ops = self._ops
        return self._make(
            ops.gcd(self._numerator, other._numerator),
            ops.lcm(self._denominator, other._denominator),
            reduced=True,
        )

    def lcm(self, n: NumberLike) -> "BaseFraction":
        """Smallest non-negative fraction both ``self`` and ``n`` divide; zero if either is zero."""
        other = self._argument(n)
        if self._numerator == 0 or other._numerator == 0:
            return type(self).ZERO
        ops = self._ops
        return self._make(
            ops.lcm(self._numerator, other._numerator),
            ops.gcd(self._denominator, other._denominator),
            reduced=True,
        )

    def mediant(self, n: NumberLike) -> "BaseFraction":
        """``(a + c) / (b + d)`` for ``a/b`` and ``c/d``."""
        other = self._argument(n)
        if self._pair == other._pair:
            return self
        ops = self._ops
        return self._make(
            ops.add(self._numerator, other._numerator),
            ops.add(self._denominator, other._denominator),
        )

    def compare_to(self, n: NumberLike) -> int:
        """Return -1, 0 or 1 as ``self`` is less than, equal to or greater than ``n``."""
        if n is None:
            raise InvalidArgument("Null argument")
        pair = _exact_pair(n)
        if pair is None:
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(n)!r}")
        return self._cmp(pair)

    def _cmp(self, pair: Pair) -> int:
        c, d = pair
        if self._denominator == d:
            return (self._numerator > c) - (self._numerator < c)
        return UNBOUNDED.cross_compare(self._numerator, d, c, self._denominator)

    def min(self, n: NumberLike) -> Any:
        """The smaller of ``self`` and ``n`` (``self`` on a tie), returned unconverted."""
        return self if self.compare_to(n) <= 0 else n

    def max(self, n: NumberLike) -> Any:
        return self if self.compare_to(n) >= 0 else n

    @classmethod
    def sum(cls, a: NumberLike, b: NumberLike) -> "BaseFraction":
        return cls.value_of(a).add(b)

    @classmethod
    def difference(cls, a: NumberLike, b: NumberLike) -> "BaseFraction":
        return cls.value_of(a).subtract(b)

    @classmethod
    def product(cls, a: NumberLike, b: NumberLike) -> "BaseFraction":
        return cls.value_of(a).multiply(b)

    @classmethod
    def quotient(cls, a: NumberLike, b: NumberLike) -> "BaseFraction":
        if a is None or b is None:
            raise InvalidArgument("Null argument")
        return cls(a, b)

    # ------------------------------------------------------------------
    # Integer division
    def divide_and_remainder(
        self, n: NumberLike, mode: DivisionMode = DEFAULT_DIVISION_MODE
    ) -> Tuple[int, "BaseFraction"]:
        """Return ``(q, r)`` with ``self == n*q + r``.

        >>> BigFraction(-5, 4).divide_and_remainder(BigFraction(1, 2), DivisionMode.FLOORED)
        (-3, BigFraction(1, 4))
        """
        other = self._argument(n)
        q, (rn, rd) = division.divide_and_remainder(self._ops, self._pair, other._pair, mode)
        return q, self._make(rn, rd, reduced=True)

    def divide_to_integral_value(self, n: NumberLike, mode: DivisionMode = DEFAULT_DIVISION_MODE) -> int:
        return division.integral_quotient(self._ops, self._pair, self._argument(n)._pair, mode)

    def remainder(self, n: NumberLike, mode: DivisionMode = DEFAULT_DIVISION_MODE) -> "BaseFraction":
        return self.divide_and_remainder(n, mode)[1]

    @classmethod
    def integral_quotient(
        cls, a: NumberLike, b: NumberLike, mode: DivisionMode = DEFAULT_DIVISION_MODE
    ) -> int:
        return cls.value_of(a).divide_to_integral_value(b, mode)

    @classmethod
    def remainder_of(
        cls, a: NumberLike, b: NumberLike, mode: DivisionMode = DEFAULT_DIVISION_MODE
    ) -> "BaseFraction":
        return cls.value_of(a).remainder(b, mode)

    @classmethod
    def quotient_and_remainder(
        cls, a: NumberLike, b: NumberLike, mode: DivisionMode = DEFAULT_DIVISION_MODE
    ) -> Tuple[int, "BaseFraction"]:
        return cls.value_of(a).divide_and_remainder(b, mode)

    def parts(self, mode: DivisionMode = DEFAULT_DIVISION_MODE) -> Tuple[int, "BaseFraction"]:
        """Split into integer part and fraction part; ``-7/3`` is ``(-2, -1/3)`` truncated."""
        q, (rn, rd) = division.parts(self._ops, self._numerator, self._denominator, mode)
        return q, self._make(rn, rd, reduced=True)

    def integer_part(self, mode: DivisionMode = DEFAULT_DIVISION_MODE) -> int:
        return self.parts(mode)[0]

    def fraction_part(self, mode: DivisionMode = DEFAULT_DIVISION_MODE) -> "BaseFraction":
        return self.parts(mode)[1]

    # ------------------------------------------------------------------
    # Rounding
    def round(self, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> int:
        return round_ratio(self._ops, self._numerator, self._denominator, mode)

    def round_to_denominator(
        self, new_denominator: int, mode: RoundingMode = DEFAULT_ROUNDING_MODE
    ) -> int:
        """Numerator ``x`` of the closest ``x / new_denominator`` under ``mode``."""
        if new_denominator is None or mode is None:
            raise InvalidArgument("Null argument")
        new_denominator = self._integral(new_denominator, "newDenominator")
        if new_denominator <= 0:
            raise InvalidArgument("newDenominator must be positive")
        return self.multiply(new_denominator).round(mode)

    def round_to_number(self, n: NumberLike, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> "BaseFraction":
        """Round to a multiple of the positive number ``n``.

        >>> BigFraction(7, 10).round_to_number(BigFraction(1, 4))
        BigFraction(3, 4)
        """
        if mode is None:
            raise InvalidArgument("Null argument")
        step = self._argument(n)
        if step._numerator <= 0:
            raise InvalidArgument("Rounding step must be positive")
        return step.multiply(self.divide(step).round(mode))

    # ------------------------------------------------------------------
    # Farey sequence
    def _farey(self, max_denominator: int, mode: FareyMode) -> "BaseFraction":
        if max_denominator is None:
            raise InvalidArgument("Null argument")
        max_denominator = self._integral(max_denominator, "maxDenominator")
        pair = farey(self._ops, self._numerator, self._denominator, max_denominator, mode)
        return self._make(*pair, reduced=True)

    def farey_next(self, max_denominator: int) -> "BaseFraction":
        """Smallest fraction above ``self`` with denominator at most ``max_denominator``."""
        return self._farey(max_denominator, FareyMode.NEXT)

    def farey_prev(self, max_denominator: int) -> "BaseFraction":
        """Largest fraction below ``self`` with denominator at most ``max_denominator``."""
        return self._farey(max_denominator, FareyMode.PREV)

    def farey_closest(self, max_denominator: int) -> "BaseFraction":
        return self._farey(max_denominator, FareyMode.CLOSEST)

    def limit_denominator(self, max_denominator: int = DEFAULT_MAX_DENOMINATOR) -> "BaseFraction":
        """Closest fraction with a bounded denominator, as :meth:`fractions.Fraction.limit_denominator`."""
        return self.farey_closest(max_denominator)

    # ------------------------------------------------------------------
    # Conversions
    def to_float(self) -> float:
        return from_ratio(self._numerator, self._denominator, DOUBLE)

    def to_float_exact(self) -> float:
        return from_ratio_exact(self._numerator, self._denominator, DOUBLE)

    def to_float32(self) -> np.float32:
        return from_ratio(self._numerator, self._denominator, SINGLE)

    def to_float32_exact(self) -> np.float32:
        return from_ratio_exact(self._numerator, self._denominator, SINGLE)

    def to_decimal(self, precision: Optional[int] = None) -> decimal.Decimal:
        """Exact when the decimal expansion terminates, otherwise rounded half-even.

        ``precision`` forces that many significant digits.
        """
        if precision is None:
            return exact_decimal(self._numerator, self._denominator)
        if precision < 1:
            raise InvalidArgument("precision must be positive")
        return ratio_to_decimal(self._numerator, self._denominator, precision)

    def to_int_exact(self, bits: Optional[int] = None) -> int:
        """The integer value, optionally required to fit a signed ``bits``-wide integer."""
        if bits is not None and bits < 1:
            raise InvalidArgument("bits must be positive")
        if self._denominator != 1:
            raise NoExactValue("integer" if bits is None else f"int{bits}")
        if bits is not None and not -(1 << (bits - 1)) <= self._numerator < (1 << (bits - 1)):
            raise NoExactValue(f"int{bits}")
        return self._numerator

    # ------------------------------------------------------------------
    # Text
    def to_string(self, radix: int = DEFAULT_RADIX, denominator_optional: bool = False) -> str:
        return fraction_string(self._numerator, self._denominator, radix, denominator_optional)

    def to_mixed_string(self, radix: int = DEFAULT_RADIX) -> str:
        return mixed_string(self._numerator, self._denominator, radix)

    def to_decimal_string(self, digits: int, mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> str:
        return radixed_string(self._numerator, self._denominator, DEFAULT_RADIX, digits, mode)

    def to_radixed_string(
        self, radix: int, digits: int, mode: RoundingMode = DEFAULT_ROUNDING_MODE
    ) -> str:
        return radixed_string(self._numerator, self._denominator, radix, digits, mode)

    def to_repeating_digit_string(self, radix: int = DEFAULT_RADIX, force_repeating: bool = False) -> str:
        return repeating_digit_string(self._numerator, self._denominator, radix, force_repeating)

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return self.to_float()

    def __int__(self) -> int:
        return self.round(RoundingMode.DOWN)

    def __bool__(self) -> bool:
        return self._numerator != 0

    def __trunc__(self) -> int:
        return self.round(RoundingMode.DOWN)

    def __floor__(self) -> int:
        return self.round(RoundingMode.FLOOR)

    def __ceil__(self) -> int:
        return self.round(RoundingMode.CEILING)

    def __round__(self, ndigits: Optional[int] = None) -> Any:
        if ndigits is None:
            return self.round(RoundingMode.HALF_EVEN)
        shift = 10 ** abs(ndigits)
        if ndigits > 0:
            return type(self)(self.multiply(shift).round(RoundingMode.HALF_EVEN), shift)
        return type(self)(self.divide(shift).round(RoundingMode.HALF_EVEN) * shift)

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return self.to_string(denominator_optional=True)

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        try:
            return format(self.to_decimal(), format_spec)
        except (ValueError, TypeError):
            pass
        try:
            return format(str(self), format_spec)
        except ValueError:
            raise ValueError(
                f"Unknown format code {format_spec!r} for object of type {type(self).__name__!r}"
            ) from None

    def __reduce__(self):
        return type(self), (self._numerator, self._denominator)

    def __copy__(self) -> "BaseFraction":
        return self

    def __deepcopy__(self, memo: Any) -> "BaseFraction":
        return self

    # ------------------------------------------------------------------
    # Operators
    def _vectorize_iterable(self, iterable, func):
        mapped = [func(item) for item in iterable]
        return np.array(mapped, dtype=object)

    def _binary_operation(self, other: Any, op: Callable[[Any, Any], Any]) -> Any:
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(lambda x: op(self, self._coerce(x)), otypes=[object])
            return vectorised(other)
        if isinstance(other, (list, tuple)):
            return self._vectorize_iterable(other, lambda x: op(self, self._coerce(x)))
        if self._defers_to(other):
            return NotImplemented
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        return op(self, other)

    def _reflected_operation(self, other: Any, op: Callable[[Any, Any], Any]) -> Any:
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(lambda x: op(self._coerce(x), self), otypes=[object])
            return vectorised(other)
        if isinstance(other, (list, tuple)):
            return self._vectorize_iterable(other, lambda x: op(self._coerce(x), self))
        if self._defers_to(other):
            return NotImplemented
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        return op(other, self)

    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, BaseFraction._add)

    def __radd__(self, other: Any) -> Any:
        return self._reflected_operation(other, BaseFraction._add)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, BaseFraction._subtract)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, BaseFraction._subtract)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, BaseFraction._multiply)

    def __rmul__(self, other: Any) -> Any:
        return self._reflected_operation(other, BaseFraction._multiply)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, BaseFraction.divide)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, BaseFraction.divide)

    # //, % and divmod follow Python's floored convention
    def __floordiv__(self, other: Any) -> Any:
        return self._binary_operation(other, _floordiv)

    def __rfloordiv__(self, other: Any) -> Any:
        return self._reflected_operation(other, _floordiv)

    def __mod__(self, other: Any) -> Any:
        return self._binary_operation(other, _mod)

    def __rmod__(self, other: Any) -> Any:
        return self._reflected_operation(other, _mod)

    def __divmod__(self, other: Any) -> Any:
        return self._binary_operation(other, _divmod)

    def __rdivmod__(self, other: Any) -> Any:
        return self._reflected_operation(other, _divmod)

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.__pow__(x), otypes=[object])
            return vectorised(exponent)
        if exponent is None or isinstance(exponent, (str, bytes)):
            return NotImplemented
        try:
            power = self._integral(exponent, "Exponent")
        except TypeError:
            return NotImplemented
        return self._pow(power)

    def __rpow__(self, base: Any) -> Any:
        if self._defers_to(base):
            return NotImplemented
        try:
            base = self._coerce(base)
        except TypeError:
            return NotImplemented
        return base._pow(self._integral(self, "Exponent"))

    def __neg__(self) -> "BaseFraction":
        return self.negate()

    def __pos__(self) -> "BaseFraction":
        return self

    def __abs__(self) -> "BaseFraction":
        return self.abs()

    # ------------------------------------------------------------------
    # Comparisons
    def _compare(self, other: Any, op: Callable[[Any, Any], bool]) -> Any:
        if isinstance(other, BaseFraction):
            return op(self._cmp(other._pair), 0)
        if _is_non_finite(other):
            # only the sign of an infinity matters; NaN compares false
            return op(type(other)(0), other)
        pair = _exact_pair(other)
        if pair is None:
            return NotImplemented
        return op(self._cmp(pair), 0)

    def __eq__(self, other: Any) -> Any:
        if isinstance(other, BaseFraction):
            return self._pair == other._pair
        return self._compare(other, operator.eq)

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        # same value as hash(fractions.Fraction(n, d)), so equal numbers hash alike
        try:
            inverse = pow(self._denominator, -1, _HASH_MODULUS)
        except ValueError:
            result = _HASH_INF
        else:
            result = hash(hash(abs(self._numerator)) * inverse)
        if self._numerator < 0:
            result = -result
        return -2 if result == -1 else result

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.floor_divide: operator.floordiv,
        np.remainder: operator.mod,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.absolute: operator.abs,
        np.power: operator.pow,
        np.equal: operator.eq,
        np.not_equal: operator.ne,
        np.less: operator.lt,
        np.less_equal: operator.le,
        np.greater: operator.gt,
        np.greater_equal: operator.ge,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for fraction ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        def coerce(value: Any) -> Any:
            return value if isinstance(value, BaseFraction) else self._coerce(value)

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, np.ndarray):
                coerced.append(np.vectorize(coerce, otypes=[object])(value))
                has_array = True
            else:
                coerced.append(coerce(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


def _floordiv(a: BaseFraction, b: BaseFraction) -> int:
    return a.divide_to_integral_value(b, DivisionMode.FLOORED)


def _mod(a: BaseFraction, b: BaseFraction) -> BaseFraction:
    return a.remainder(b, DivisionMode.FLOORED)


def _divmod(a: BaseFraction, b: BaseFraction) -> Tuple[int, BaseFraction]:
    return a.divide_and_remainder(b, DivisionMode.FLOORED)


class BigFraction(BaseFraction):
    """Fraction over arbitrary-precision integers."""

    __slots__ = ()
    _ops = UNBOUNDED


class LongFraction(BaseFraction):
    """Fraction whose numerator and denominator stay within signed 64 bits.

    Any operation whose exact result would not fit raises
    :class:`~lowterms.errors.FractionOverflow`; it never wraps.
    """

    __slots__ = ()
    _ops = INT64


for _cls in (BaseFraction, BigFraction, LongFraction):
    _cls.ZERO = _cls._make(0, 1, reduced=True)
    _cls.ONE = _cls._make(1, 1, reduced=True)
    _cls.ONE_HALF = _cls._make(1, 2, reduced=True)
    _cls.ONE_TENTH = _cls._make(1, 10, reduced=True)
    _cls.TEN = _cls._make(10, 1, reduced=True)
del _cls

numbers.Rational.register(BaseFraction)


__all__ = ["BaseFraction", "BigFraction", "LongFraction", "NumberLike", "DEFAULT_MAX_DENOMINATOR"]
