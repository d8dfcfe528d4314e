"""NumPy object arrays of fractions."""
from __future__ import annotations

from typing import Any, Type

import numpy as np

from .fraction import BaseFraction, BigFraction


def as_fraction_array(
    values: Any,
    *,
    cls: Type[BaseFraction] = BigFraction,
    copy: bool = True,
) -> np.ndarray:
    """Return a ``numpy.ndarray`` of ``cls`` values.

    ``values`` can be any iterable containing numeric-like entries or an existing
    NumPy array. Floats are converted exactly. When ``copy`` is ``False`` and
    ``values`` is already an object array holding only ``cls`` instances, the
    original array is returned.
    """
    if isinstance(values, np.ndarray):
        array = values.copy() if copy else values
        if array.dtype != object:
            array = array.astype(object, copy=False)
        if all(type(item) is cls for item in array.flat):
            return array
        vectorised = np.vectorize(cls.value_of, otypes=[object])
        return vectorised(array)

    if isinstance(values, (list, tuple)):
        array = np.empty(len(values), dtype=object)
        array[:] = [cls.value_of(item) for item in values]
        return array

    return as_fraction_array(list(values), cls=cls, copy=copy)


def zeros(length: int, *, cls: Type[BaseFraction] = BigFraction) -> np.ndarray:
    """Return a one-dimensional array of length ``length`` filled with zeros."""
    if length < 0:
        raise ValueError("length must be non-negative")
    array = np.empty(length, dtype=object)
    array.fill(cls.ZERO)
    return array


def zeros_like(values: Any, *, cls: Type[BaseFraction] = BigFraction) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""
    shape = np.shape(values)
    array = np.empty(shape, dtype=object)
    array.fill(cls.ZERO)
    return array


__all__ = ["as_fraction_array", "zeros", "zeros_like"]
