import threading

import numpy as np
import pytest

import tiebreak
from tiebreak.round import entropy


class ConstantDraw:
    """A stand-in generator that always draws the same number."""

    def __init__(self, draw: float):
        self.draw = draw
        self.sizes = []

    def random(self, size=None):
        self.sizes.append(size)
        return np.full(size, self.draw)


ALWAYS_UP = 0.0
ALWAYS_DOWN = 0.75


@pytest.mark.parametrize("val, draw, expected", [
    (1.5, ALWAYS_UP, 2.0),
    (1.5, ALWAYS_DOWN, 1.0),
    (-1.5, ALWAYS_UP, -1.0),
    (-1.5, ALWAYS_DOWN, -2.0),
    (2.375, ALWAYS_UP, 2.38),
    (2.375, ALWAYS_DOWN, 2.37),
])
def test_stochastic_tie_follows_injected_generator(val, draw, expected):
    scale = 2 if val == 2.375 else 0
    assert tiebreak.stochastic(val, scale, rng=ConstantDraw(draw)) == expected


@pytest.mark.parametrize("val, expected", [
    (1.4, 1.0), (1.6, 2.0), (-1.4, -1.0), (-1.6, -2.0)
])
def test_stochastic_rounds_to_nearest_off_tie(val, expected):
    rng = ConstantDraw(ALWAYS_UP)
    assert tiebreak.stochastic(val, 0, rng=rng) == expected
    assert rng.sizes == []


def test_stochastic_draws_once_per_call_for_ties_only():
    rng = ConstantDraw(ALWAYS_UP)
    val = np.array([1.5, 1.4, 2.5, 1.6, np.nan])
    result = tiebreak.stochastic(val, 0, rng=rng)
    np.testing.assert_array_equal(result, [2.0, 1.0, 3.0, 2.0, np.nan])
    assert rng.sizes == [2]


def test_stochastic_produces_both_outcomes():
    result = tiebreak.stochastic(np.full(1000, 1.5), 0, rng=12345)
    assert set(np.unique(result)) == {1.0, 2.0}
    assert 350 < np.count_nonzero(result == 2.0) < 650


def test_stochastic_scalar_calls_produce_both_outcomes():
    outcomes = {tiebreak.stochastic(1.5, 0) for _ in range(200)}
    assert outcomes == {1.0, 2.0}


def test_seed_makes_ties_reproducible():
    val = np.full(64, 0.5)
    tiebreak.seed(7)
    first = tiebreak.stochastic(val, 0)
    tiebreak.seed(7)
    second = tiebreak.stochastic(val, 0)
    np.testing.assert_array_equal(first, second)


def test_integer_rng_is_a_seed():
    val = np.full(64, 0.5)
    first = tiebreak.stochastic(val, 0, rng=99)
    second = tiebreak.stochastic(val, 0, rng=np.random.default_rng(99))
    np.testing.assert_array_equal(first, second)


def test_each_thread_has_its_own_generator():
    main = entropy.generator()
    seen = []

    def worker():
        seen.append(entropy.generator())
        tiebreak.stochastic(np.full(10, 1.5), 0)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(seen) == 4
    assert all(rng is not main for rng in seen)
    assert len({id(rng) for rng in seen}) == 4
    assert entropy.generator() is main


def test_seed_only_affects_calling_thread():
    main = entropy.generator()
    thread = threading.Thread(target=tiebreak.seed, args=(3,))
    thread.start()
    thread.join()
    assert entropy.generator() is main
