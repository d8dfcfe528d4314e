"""Exact fractions in lowest terms over unbounded or 64-bit integers."""
import logging

from .arrays import as_fraction_array, zeros, zeros_like
from .checked import INT64, UNBOUNDED, FixedWidthIntegers, IntegerOps, UnboundedIntegers
from .decimals import DEFAULT_DECIMAL_PRECISION
from .digits import DEFAULT_RADIX, MAX_RADIX, MIN_RADIX
from .errors import (
    DivideByZero,
    FractionError,
    FractionOverflow,
    InvalidArgument,
    NoExactValue,
    RoundingRequired,
)
from .fraction import DEFAULT_MAX_DENOMINATOR, BaseFraction, BigFraction, LongFraction
from .ieee754 import DOUBLE, SINGLE
from .modes import (
    DEFAULT_DIVISION_MODE,
    DEFAULT_ROUNDING_MODE,
    DivisionMode,
    FareyMode,
    RoundingMode,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BaseFraction",
    "BigFraction",
    "LongFraction",
    "DivisionMode",
    "RoundingMode",
    "FareyMode",
    "FractionError",
    "DivideByZero",
    "RoundingRequired",
    "NoExactValue",
    "FractionOverflow",
    "InvalidArgument",
    "IntegerOps",
    "UnboundedIntegers",
    "FixedWidthIntegers",
    "UNBOUNDED",
    "INT64",
    "DOUBLE",
    "SINGLE",
    "DEFAULT_RADIX",
    "MIN_RADIX",
    "MAX_RADIX",
    "DEFAULT_DIVISION_MODE",
    "DEFAULT_ROUNDING_MODE",
    "DEFAULT_DECIMAL_PRECISION",
    "DEFAULT_MAX_DENOMINATOR",
    "as_fraction_array",
    "zeros",
    "zeros_like",
]
