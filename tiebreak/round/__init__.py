"""This package contains customizable rounding for floating point numbers and
vectors, with a wider range of tie-breaking rules than numpy or pandas.

Modules
-------
base
    The `round` dispatcher and one shortcut per rounding rule.

arguments
    Managed arguments for `round`.

boundary
    Directed rounding toward positive/negative infinity.

digits
    Extraction of the digits that decide a rounding.

entropy
    Thread-local random source for stochastic ties.

policy
    The closed set of rounding rules and their tie-breakers.
"""
from .base import (
    round, ceiling, floor, half_up, half_down, half_towards_zero,
    half_away_from_zero, half_to_even, half_to_odd, stochastic
)
from .arguments import rng, rule, scale
from .digits import DigitPair, extract_digits
from .entropy import seed
from .policy import RoundingPolicy, nearest_direction
