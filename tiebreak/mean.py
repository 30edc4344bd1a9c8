"""Implements arithmetic, geometric and harmonic means over list-like data.

These are plain reductions with IEEE-754 semantics: empty input, zeros and
infinities produce NaN or infinity instead of raising, and the corresponding
floating point warnings are suppressed.
"""
from __future__ import annotations

import numpy as np

from tiebreak.util.array import as_array
from tiebreak.util.type_hints import list_like


def arithmetic(values: list_like) -> float:
    """Arithmetic mean of `values`.

    Examples
    --------
    .. doctest::

        >>> arithmetic([8, 16])
        12.0
    """
    arr = as_array(values)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.add.reduce(arr) / np.float64(arr.size))


def geometric(values: list_like) -> float:
    """Geometric mean of `values`.

    If the product of `values` is negative, the result would be imaginary and
    NaN is returned instead.

    Examples
    --------
    .. doctest::

        >>> geometric([9, 16])
        12.0
        >>> geometric([-4, 1, 3, 8, 12])
        nan
    """
    arr = as_array(values)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        product = np.multiply.reduce(arr)
        if product < 0:
            return float("nan")
        return float(np.power(product, 1.0 / np.float64(arr.size)))


def harmonic(values: list_like) -> float:
    """Harmonic mean of `values`.

    Examples
    --------
    .. doctest::

        >>> harmonic([1, 7])
        1.75
    """
    arr = as_array(values)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(arr.size) / np.add.reduce(1.0 / arr))
