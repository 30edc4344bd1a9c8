"""Implements the two directed rounding primitives, `ceiling` and `floor`,
which round toward positive and negative infinity at a decimal scale.

The directed rules `ceiling` and `floor` of :func:`tiebreak.round` call these.
NaN and infinity propagate through them unchanged.
"""
from __future__ import annotations

import numpy as np

from tiebreak.util.type_hints import array_like


def ceiling(val: float | array_like, scale: int) -> float | np.ndarray:
    """Round `val` toward positive infinity, keeping `scale` decimal digits.

    A value that already holds `scale` digits (i.e. the closest double to a
    multiple of ``10**-scale``) is returned unchanged, even if its magnified
    product lands just past an integer.
    """
    return _directed(np.ceil, val, scale)


def floor(val: float | array_like, scale: int) -> float | np.ndarray:
    """Round `val` toward negative infinity, keeping `scale` decimal digits.

    Like :func:`ceiling`, values that already hold `scale` digits are
    returned unchanged.
    """
    return _directed(np.floor, val, scale)


#######################
####    PRIVATE    ####
#######################


def _directed(func, val, scale: int):
    """Apply ``func(val * 10**scale) / 10**scale`` to every element that does
    not already sit on the grid.
    """
    multiplier = float(10**scale)
    scaled = np.multiply(val, multiplier)
    on_grid = np.round(scaled) / multiplier == val
    return np.where(on_grid, val, func(scaled) / multiplier)[()]
