"""This module contains helpers to move numeric input in and out of the
``float64`` arrays that ``tiebreak`` computes on.

Scalars, numpy arrays, pandas Series and plain list-likes are all accepted.
Results are returned in the same container they came in, so that rounding a
Series yields a Series with the same index, rounding an array yields an array
of the same shape, and rounding a scalar yields a ``float``.
"""
from __future__ import annotations

import numpy as np
import pandas as pd

from .type_hints import array_like


def as_array(val: array_like) -> np.ndarray:
    """Convert a numeric scalar or vector into a flat ``float64`` array.

    The result is always at least 1-dimensional and never shares memory with
    ``val`` when a dtype conversion is required.
    """
    if isinstance(val, pd.Series):
        val = val.to_numpy(dtype=np.float64, na_value=np.nan)
    return np.atleast_1d(np.asarray(val, dtype=np.float64)).ravel()


def restore(
    result: np.ndarray,
    original: array_like,
    copy: bool = True
) -> float | np.ndarray | pd.Series:
    """Pack a flat ``float64`` result back into the container of `original`.

    Parameters
    ----------
    result : np.ndarray
        A flat array holding one output per element of `original`.
    original : array_like
        The input that `result` was computed from.
    copy : bool, default True
        If ``False`` and `original` is a ``float64`` array or Series, write
        `result` back into `original` and return it.  Other containers are
        always copied.

    Returns
    -------
    float | np.ndarray | pd.Series
        A ``float`` if `original` was a scalar, a Series if it was a Series,
        and an array of the same shape otherwise.
    """
    # case 1: pandas
    if isinstance(original, pd.Series):
        if not copy and original.dtype == np.float64:
            original[:] = result
            return original
        return pd.Series(
            result,
            index=original.index,
            name=original.name,
            copy=False
        )

    # case 2: numpy
    if isinstance(original, np.ndarray) and original.ndim:
        if not copy and original.dtype == np.float64:
            original[...] = result.reshape(original.shape)
            return original
        return result.reshape(original.shape)

    # case 3: scalar (always copied)
    if np.ndim(original) == 0:
        return float(result[0])

    # everything else (lists, tuples)
    return result.reshape(np.shape(original))
