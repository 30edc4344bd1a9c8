"""Deterministic decimal rounding of floating point numbers under a selectable
tie-breaking rule, plus arithmetic, geometric and harmonic means.
"""
from .round import (
    round, ceiling, floor, half_up, half_down, half_towards_zero,
    half_away_from_zero, half_to_even, half_to_odd, stochastic,
    DigitPair, RoundingPolicy, extract_digits, nearest_direction, seed
)
from . import mean


__version__ = "0.1.0"
