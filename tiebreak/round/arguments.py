"""Managed arguments for :func:`tiebreak.round`.

Each validator below is registered with ``round`` and runs whenever the
argument is passed explicitly or assigned as a new default, e.g.
``tiebreak.round.rule = "half_up"``.
"""
from __future__ import annotations
import numbers

import numpy as np

from tiebreak.util.type_hints import seed_like

from .base import round
from .policy import RoundingPolicy


@round.argument
def scale(val: int, context: dict) -> int:
    """The number of decimal digits to keep.

    Parameters
    ----------
    val : int
        A non-negative integer.  Defaults to ``0``.

    Returns
    -------
    int
        A validated version of `val`.

    Raises
    ------
    TypeError
        If `val` is not integer-like.
    ValueError
        If `val` is negative.

    Notes
    -----
    `val` should stay small enough that ``val * 10**(scale + 2)`` fits in a
    64-bit integer.  Past roughly 15 significant digits, the rounded result
    silently loses accuracy.
    """
    if isinstance(val, bool) or not isinstance(val, numbers.Integral):
        raise TypeError(f"`scale` must be an integer, not {repr(val)}")
    if val < 0:
        raise ValueError(f"`scale` must be non-negative, not {val}")
    return int(val)


@round.argument
def rule(val: str | RoundingPolicy, context: dict) -> RoundingPolicy:
    """The rounding rule to apply.

    Parameters
    ----------
    val : str | RoundingPolicy
        One of ``"ceiling"``, ``"floor"``, ``"half_up"``, ``"half_down"``,
        ``"half_towards_zero"``, ``"half_away_from_zero"``,
        ``"half_to_even"``, ``"half_to_odd"`` or ``"stochastic"``, or the
        equivalent :class:`RoundingPolicy`.  Defaults to ``"half_to_even"``.

    Returns
    -------
    RoundingPolicy
        The policy that corresponds to `val`.

    Raises
    ------
    TypeError
        If `val` is not a string or :class:`RoundingPolicy`.
    ValueError
        If `val` does not correspond to one of the recognized rounding rules.
    """
    return RoundingPolicy.from_rule(val)


@round.argument
def rng(val: seed_like | np.random.Generator, context: dict):
    """The random source used to break ``"stochastic"`` ties.

    Parameters
    ----------
    val : int | np.random.SeedSequence | np.random.Generator | None
        A seed is converted into a new :class:`numpy.random.Generator`.  Any
        other object must expose a numpy-style ``random(size)`` method.
        ``None`` selects the current thread's default generator at call time.

    Returns
    -------
    np.random.Generator | None
        A random source, or ``None``.

    Raises
    ------
    TypeError
        If `val` is neither ``None``, a seed, nor a random source.
    """
    if val is None:
        return None
    if isinstance(val, (numbers.Integral, np.random.SeedSequence)):
        if isinstance(val, bool):
            raise TypeError(f"`rng` must be a seed or generator, not {val}")
        return np.random.default_rng(val)
    if not callable(getattr(val, "random", None)):
        raise TypeError(
            f"`rng` must be a seed or an object with a `random()` method, not "
            f"{repr(val)}"
        )
    return val
