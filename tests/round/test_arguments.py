import threading

import numpy as np
import pytest

import tiebreak
from tiebreak import RoundingPolicy


@pytest.fixture(autouse=True)
def reset_round():
    tiebreak.round.reset_defaults()
    yield
    tiebreak.round.reset_defaults()


def test_round_has_hardcoded_defaults():
    assert tiebreak.round.scale == 0
    assert tiebreak.round.rule is RoundingPolicy.HALF_TO_EVEN
    assert tiebreak.round.rng is None
    assert dict(tiebreak.round.settings) == {
        "scale": 0,
        "rule": RoundingPolicy.HALF_TO_EVEN,
        "rng": None,
    }


def test_round_managed_arguments():
    assert set(tiebreak.round.arguments) == {"scale", "rule", "rng"}


def test_setting_rule_changes_default_behavior():
    assert tiebreak.round(2.5) == 2.0
    tiebreak.round.rule = "half_up"
    assert tiebreak.round.rule is RoundingPolicy.HALF_UP
    assert tiebreak.round(2.5) == 3.0
    assert tiebreak.round(2.5, rule="half_down") == 2.0


def test_setting_scale_changes_default_behavior():
    tiebreak.round.scale = 2
    assert tiebreak.round(3.14159) == 3.14
    assert tiebreak.half_up(2.375) == 2.38
    assert tiebreak.half_up(2.375, 0) == 2.0


def test_deleting_setting_restores_default():
    tiebreak.round.scale = 3
    del tiebreak.round.scale
    assert tiebreak.round.scale == 0


def test_reset_defaults():
    tiebreak.round.scale = 3
    tiebreak.round.rule = RoundingPolicy.FLOOR
    tiebreak.round.reset_defaults()
    assert tiebreak.round.scale == 0
    assert tiebreak.round.rule is RoundingPolicy.HALF_TO_EVEN


def test_assigned_defaults_are_validated():
    with pytest.raises(ValueError, match="must be one of"):
        tiebreak.round.rule = "banker"
    with pytest.raises(ValueError, match="must be non-negative"):
        tiebreak.round.scale = -2
    with pytest.raises(TypeError, match="must be a seed"):
        tiebreak.round.rng = object()

    assert tiebreak.round.rule is RoundingPolicy.HALF_TO_EVEN
    assert tiebreak.round.scale == 0


def test_seeded_rng_default_is_stored_as_generator():
    tiebreak.round.rng = 5
    assert isinstance(tiebreak.round.rng, np.random.Generator)


def test_settings_are_thread_local():
    tiebreak.round.scale = 2
    seen = {}

    def worker():
        seen["inherited"] = tiebreak.round.scale
        tiebreak.round.rule = "half_up"
        seen["rule"] = tiebreak.round.rule

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()

    assert seen["inherited"] == 2
    assert seen["rule"] is RoundingPolicy.HALF_UP
    assert tiebreak.round.rule is RoundingPolicy.HALF_TO_EVEN


def test_repr_shows_current_defaults():
    tiebreak.round.scale = 4
    assert repr(tiebreak.round).startswith("round(val, scale=4, rule=")
