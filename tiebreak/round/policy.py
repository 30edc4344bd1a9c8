"""Implements the closed set of rounding rules accepted by ``tiebreak``, along
with the shared round-to-nearest rule that every ``half_*`` policy falls back
on when it is not breaking a tie.

Directions are expressed on the number line: ``True`` rounds toward positive
infinity (ceiling) and ``False`` toward negative infinity (floor).  Several
rules target the magnitude of a value instead, which is why most of them are
written as ``(val < 0) ^ ...``: ceiling and floor swap roles for negative
numbers.
"""
from __future__ import annotations
from enum import Enum

import numpy as np

from .entropy import random_directions


######################
####    PUBLIC    ####
######################


class RoundingPolicy(Enum):
    """The rounding rules that are recognized by :func:`tiebreak.round`.

    Notes
    -----
    The available options are as follows:

        *   ``"ceiling"`` - round toward positive infinity.
        *   ``"floor"`` - round toward negative infinity.
        *   ``"half_up"`` - round to nearest with ties toward positive
            infinity.
        *   ``"half_down"`` - round to nearest with ties toward negative
            infinity.
        *   ``"half_towards_zero"`` - round to nearest with ties toward zero.
        *   ``"half_away_from_zero"`` - round to nearest with ties away from
            zero.
        *   ``"half_to_even"`` - round to nearest with ties toward the
            neighbor whose last kept digit is even.  Also known as
            *convergent rounding*, *statistician's rounding*, or *banker's
            rounding*.
        *   ``"half_to_odd"`` - round to nearest with ties toward the neighbor
            whose last kept digit is odd.
        *   ``"stochastic"`` - round to nearest with ties broken by a fair
            coin flip.

    A tie is any value whose decisive digit (the first digit past the kept
    scale) is exactly 5.
    """

    CEILING = "ceiling"
    FLOOR = "floor"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_TOWARDS_ZERO = "half_towards_zero"
    HALF_AWAY_FROM_ZERO = "half_away_from_zero"
    HALF_TO_EVEN = "half_to_even"
    HALF_TO_ODD = "half_to_odd"
    STOCHASTIC = "stochastic"

    @classmethod
    def from_rule(cls, val: str | RoundingPolicy) -> RoundingPolicy:
        """Look up a policy by its rule name.

        Raises
        ------
        TypeError
            If `val` is not a string or :class:`RoundingPolicy`.
        ValueError
            If `val` does not name one of the recognized rules.
        """
        if isinstance(val, cls):
            return val
        if not isinstance(val, str):
            raise TypeError(
                f"`rule` must be a string or RoundingPolicy, not {repr(val)}"
            )
        try:
            return cls(val)
        except ValueError as err:
            valid = tuple(policy.value for policy in cls)
            raise ValueError(
                f"`rule` must be one of {valid}, not {repr(val)}"
            ) from err

    @property
    def is_directed(self) -> bool:
        """Indicates whether this policy ignores the decisive digit."""
        return self in (RoundingPolicy.CEILING, RoundingPolicy.FLOOR)

    def tie(self, val: np.ndarray, ones: np.ndarray, rng=None) -> np.ndarray:
        """Choose a direction for values that sit exactly on a midpoint.

        Parameters
        ----------
        val : np.ndarray
            The tied values.
        ones : np.ndarray
            The last kept digit of each tied value.
        rng : np.random.Generator | None, default None
            The random source for ``STOCHASTIC`` ties.

        Returns
        -------
        np.ndarray
            A boolean array where ``True`` rounds toward positive infinity.

        Raises
        ------
        ValueError
            If this policy is directed, and therefore has no midpoints.
        """
        if self.is_directed:
            raise ValueError(f"'{self.value}' does not break ties")
        return tie_rules[self](val, ones, rng)


def nearest_direction(val, decisive):
    """Round-to-nearest direction for values that are not ties.

    A positive value with a decisive digit below 5 rounds toward negative
    infinity, and one above 5 rounds toward positive infinity.  Negative
    values are mirrored.  The result is not meaningful when `decisive` is 5.
    Can be vectorized.
    """
    return (val < 0) ^ (decisive > 5)


#######################
####    PRIVATE    ####
#######################


tie_rules = {
    RoundingPolicy.HALF_UP:
        lambda v, d, rng: np.full(np.shape(v), True),
    RoundingPolicy.HALF_DOWN:
        lambda v, d, rng: np.full(np.shape(v), False),
    RoundingPolicy.HALF_TOWARDS_ZERO:
        lambda v, d, rng: v < 0,
    RoundingPolicy.HALF_AWAY_FROM_ZERO:
        lambda v, d, rng: v >= 0,
    RoundingPolicy.HALF_TO_EVEN:
        lambda v, d, rng: (v < 0) ^ (d % 2 == 1),
    RoundingPolicy.HALF_TO_ODD:
        lambda v, d, rng: (v < 0) ^ (d % 2 == 0),
    RoundingPolicy.STOCHASTIC:
        lambda v, d, rng: random_directions(rng, np.size(v)),
}
