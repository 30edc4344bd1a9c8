"""Implements `extract_digits`, which exposes the two digits that decide how a
floating point number is rounded at a given decimal scale.

The value is magnified by ``10**(scale + 2)`` and truncated (not rounded) to a
64-bit integer, which exposes two digits beyond the kept scale without
rounding twice.  The last digit kept by the scale is the *ones* digit, and the
digit immediately after it is the *decisive* digit that is compared against 5.

Precision is bounded by the ~15-17 significant decimal digits of a ``double``.
For large scales or magnitudes, the decisive digit silently degrades, and once
the magnified value leaves 64-bit integer range the result is undefined.
"""
from __future__ import annotations
import logging
from typing import NamedTuple

import numpy as np

from tiebreak.util.array import as_array
from tiebreak.util.error import shorten_indices
from tiebreak.util.type_hints import array_like


logger = logging.getLogger(__name__)


# |value * 10**(scale + 2)| must stay below this bound
INT64_LIMIT = 2.0**63


class DigitPair(NamedTuple):
    """The last kept digit and the digit that follows it, both in [0, 9]."""

    ones: int | np.ndarray
    decisive: int | np.ndarray


def extract_digits(val: float | array_like, scale: int) -> DigitPair:
    """Get the ones digit and decisive digit of `val` at the given `scale`.

    Parameters
    ----------
    val : float | array_like
        The value(s) to inspect.  Can be vectorized.
    scale : int
        The number of decimal digits that would be kept by rounding.

    Returns
    -------
    DigitPair
        A pair ``(ones, decisive)``.  These are integers if `val` is a scalar,
        or ``int64`` arrays with the same shape as `val` otherwise.  Non-finite
        values always map to ``(0, 0)``.

    Examples
    --------
    .. doctest::

        >>> extract_digits(2.375, 2)
        DigitPair(ones=7, decisive=5)
        >>> extract_digits(-2.375, 1)
        DigitPair(ones=3, decisive=7)
        >>> extract_digits(float("nan"), 3)
        DigitPair(ones=0, decisive=0)
    """
    pair = digits_of(as_array(val), scale)
    if np.ndim(val) == 0:
        return DigitPair(int(pair.ones[0]), int(pair.decisive[0]))

    shape = np.shape(val)
    return DigitPair(pair.ones.reshape(shape), pair.decisive.reshape(shape))


def digits_of(arr: np.ndarray, scale: int) -> DigitPair:
    """Vectorized digit extraction over a flat ``float64`` array."""
    return split_digits(magnify(arr, scale))


def magnify(arr: np.ndarray, scale: int) -> np.ndarray:
    """Truncate ``arr * 10**(scale + 2)`` to ``int64``.

    Non-finite values map to 0.  The last two digits of each result lie past
    the kept scale, and everything before them is the kept (truncated) value.
    """
    finite = np.isfinite(arr)
    magnified = np.where(finite, arr, 0.0) * float(10**(scale + 2))

    # out-of-range values are undefined, but should not pass unnoticed
    overflow = np.abs(magnified) >= INT64_LIMIT
    if overflow.any():
        logger.warning(
            "value * 10**%d exceeds 64-bit integer range at index %s; rounded "
            "result is undefined",
            scale + 2,
            shorten_indices(overflow)
        )

    with np.errstate(invalid="ignore"):
        return np.trunc(magnified).astype(np.int64)


def split_digits(magnified: np.ndarray) -> DigitPair:
    """Get the ones and decisive digits of an array from `magnify()`."""
    last_three = np.abs(magnified) % 1000
    return DigitPair(last_three // 100, last_three // 10 % 10)


def kept_of(magnified: np.ndarray) -> np.ndarray:
    """Drop the two trailing digits of an array from `magnify()`, truncating
    toward zero.
    """
    return (magnified - np.fmod(magnified, 100)) // 100
