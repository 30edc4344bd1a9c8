"""Implements `round`, a drop-in replacement for the builtin ``round()`` with a
selectable tie-breaking rule, as well as one shortcut per rule.

Every element is rounded independently:

    1.  NaN and infinity are returned unchanged.
    2.  ``ceiling`` and ``floor`` are applied directly.
    3.  Otherwise, the decisive digit (the first digit past the kept scale) is
        extracted.  If it is not 5, the value rounds to nearest.  If it is 5,
        the rule's tie-breaker picks a direction.  The result is stepped from
        the same truncated integer that the digits were read from.
"""
from __future__ import annotations
import logging

import numpy as np

from tiebreak.decorators import extension_func
from tiebreak.util.array import as_array, restore
from tiebreak.util.type_hints import array_like

from . import boundary
from .digits import kept_of, magnify, split_digits
from .policy import RoundingPolicy, nearest_direction


logger = logging.getLogger(__name__)


######################
####    PUBLIC    ####
######################


@extension_func
def round(
    val: float | array_like,
    scale: int = 0,
    rule: str | RoundingPolicy = "half_to_even",
    rng: np.random.Generator | None = None,
    copy: bool = True
) -> float | array_like:
    """Round a float or vector of floats to `scale` decimal digits according
    to the specified `rule`.

    Parameters
    ----------
    val : float | array_like
        The value to be rounded.  Can be vectorized.
    scale : int, default 0
        The number of decimal digits to keep.  Must be non-negative, and small
        enough that ``val * 10**(scale + 2)`` fits in a 64-bit integer.
    rule : str | RoundingPolicy, default "half_to_even"
        The rounding rule to apply.  See :class:`RoundingPolicy` for the
        available options.
    rng : np.random.Generator | None, default None
        The random source used to break ties under the ``"stochastic"`` rule.
        If this is ``None``, then a generator local to the current thread is
        used instead.
    copy : bool, default True
        Indicates whether to return a modified copy of an input array
        (``True``), or modify it in-place (``False``).  In either case, the
        return value of this function is unaltered, and scalars are always
        copied.

    Returns
    -------
    float | array_like
        The result of rounding `val` according to the given rule, in the same
        container that `val` was given in.

    Raises
    ------
    TypeError
        If `scale` is not integer-like, `rule` is not a string, or `rng` is
        not a valid random source.
    ValueError
        If `scale` is negative or `rule` is not one of the recognized rules.

    Notes
    -----
    The default values of `scale`, `rule` and `rng` are managed and can be
    changed at runtime by assigning to the corresponding attribute of this
    function (e.g. ``tiebreak.round.rule = "half_up"``).

    Examples
    --------
    .. doctest::

        >>> round(2.5)
        2.0
        >>> round(2.5, rule="half_up")
        3.0
        >>> round(-2.5, rule="half_up")
        -2.0
        >>> round(3.14159, 3, rule="ceiling")
        3.142
    """
    arr = as_array(val)
    finite = np.isfinite(arr)

    # case 1: directed rounding
    if rule.is_directed:
        logger.debug(
            "rounding %d value(s) at scale %d with rule %r",
            arr.size,
            scale,
            rule.value
        )
        if rule is RoundingPolicy.CEILING:
            result = boundary.ceiling(arr, scale)
        else:
            result = boundary.floor(arr, scale)
        return restore(np.where(finite, result, arr), val, copy=copy)

    # case 2: round to nearest, breaking ties according to rule
    magnified = magnify(arr, scale)
    ones, decisive = split_digits(magnified)
    up = nearest_direction(arr, decisive)
    tie = decisive == 5
    ties = int(np.count_nonzero(tie))
    if ties:
        up[tie] = rule.tie(arr[tie], ones[tie], rng)

    logger.debug(
        "rounding %d value(s) at scale %d with rule %r (%d tie(s))",
        arr.size,
        scale,
        rule.value,
        ties
    )

    # kept value is truncated toward zero: positives step up, negatives down
    step = up.astype(np.int64) - (arr < 0)
    result = (kept_of(magnified) + step) / float(10**scale)
    result = np.copysign(result, arr)  # keep -0.0 for negative inputs
    return restore(np.where(finite, result, arr), val, copy=copy)


def ceiling(val: float | array_like, scale: int = None, **kwargs):
    """Round `val` toward positive infinity.

    Examples
    --------
    .. doctest::

        >>> ceiling(3.14159, 3)
        3.142
        >>> ceiling(-3.14159, 3)
        -3.141
    """
    return _round_by(RoundingPolicy.CEILING, val, scale, kwargs)


def floor(val: float | array_like, scale: int = None, **kwargs):
    """Round `val` toward negative infinity.

    Examples
    --------
    .. doctest::

        >>> floor(3.14159, 3)
        3.141
        >>> floor(-3.14159, 3)
        -3.142
    """
    return _round_by(RoundingPolicy.FLOOR, val, scale, kwargs)


def half_up(val: float | array_like, scale: int = None, **kwargs):
    """Round `val` to nearest, with ties toward positive infinity."""
    return _round_by(RoundingPolicy.HALF_UP, val, scale, kwargs)


def half_down(val: float | array_like, scale: int = None, **kwargs):
    """Round `val` to nearest, with ties toward negative infinity."""
    return _round_by(RoundingPolicy.HALF_DOWN, val, scale, kwargs)


def half_towards_zero(val: float | array_like, scale: int = None, **kwargs):
    """Round `val` to nearest, with ties toward zero."""
    return _round_by(RoundingPolicy.HALF_TOWARDS_ZERO, val, scale, kwargs)


def half_away_from_zero(val: float | array_like, scale: int = None, **kwargs):
    """Round `val` to nearest, with ties away from zero."""
    return _round_by(RoundingPolicy.HALF_AWAY_FROM_ZERO, val, scale, kwargs)


def half_to_even(val: float | array_like, scale: int = None, **kwargs):
    """Round `val` to nearest, with ties toward an even last digit.

    Examples
    --------
    .. doctest::

        >>> half_to_even(0.5, 0), half_to_even(1.5, 0), half_to_even(2.5, 0)
        (0.0, 2.0, 2.0)
    """
    return _round_by(RoundingPolicy.HALF_TO_EVEN, val, scale, kwargs)


def half_to_odd(val: float | array_like, scale: int = None, **kwargs):
    """Round `val` to nearest, with ties toward an odd last digit."""
    return _round_by(RoundingPolicy.HALF_TO_ODD, val, scale, kwargs)


def stochastic(val: float | array_like, scale: int = None, **kwargs):
    """Round `val` to nearest, with ties broken by a fair coin flip.

    A fresh draw is made for every tied element.  Pass ``rng=`` to supply a
    specific generator.
    """
    return _round_by(RoundingPolicy.STOCHASTIC, val, scale, kwargs)


#######################
####    PRIVATE    ####
#######################


def _round_by(
    policy: RoundingPolicy,
    val: float | array_like,
    scale: int | None,
    kwargs: dict
):
    """Forward a shortcut to `round`, using its managed scale if omitted."""
    if scale is not None:
        kwargs["scale"] = scale
    return round(val, rule=policy, **kwargs)
