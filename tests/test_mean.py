import math

import numpy as np
import pandas as pd
import pytest

from tests.scheme import Case, Parameters, parametrize

import tiebreak
from tiebreak import mean


INF = math.inf
NAN = math.nan


####################
####    DATA    ####
####################


# each case is rounded half up to `scale` before comparison
def mean_data(func: str, scale: int, *expected: float) -> Parameters:
    inputs = (
        [-7., -4., 1., 3., 8.],
        [-4., 1., 3., 8., 12.],
        [0., 0., 0., 0., 0.],
        [0., 4., 7., 9., 17.],
        [1., 2., 6., 4., 13.],
        [1., 5., 10., 20., 25.],
        [2., 3., 5., 7., 11.],
        [-INF, 1., 2., 3., 4.],
        [1., 2., 3., 4., INF],
    )
    return Parameters(*[
        Case({"func": func, "scale": scale}, values, out, id=f"{func}{values}")
        for values, out in zip(inputs, expected)
    ])


def all_mean_data():
    return Parameters(
        mean_data(
            "arithmetic", 4,
            0.2, 4.0, 0.0, 7.4, 5.2, 12.2, 5.6, -INF, INF
        ),
        mean_data(
            "geometric", 4,
            3.6768, NAN, 0.0, 0.0, 3.6227, 7.5786, 4.7068, NAN, INF
        ),
        mean_data(
            "harmonic", 5,
            4.69274, 3.87097, 0.0, 0.0, 2.50804, 3.59712, 3.94602, 2.4, 2.4
        ),
    )


#####################
####    TESTS    ####
#####################


@parametrize(all_mean_data())
def test_means(case: Case):
    func = getattr(mean, case.kwargs["func"])
    result = func(case.input)
    if math.isnan(case.output):
        assert math.isnan(result)
    else:
        rounded = tiebreak.half_up(result, case.kwargs["scale"])
        assert rounded == case.output, (
            f"{case.kwargs['func']}({case.input}) failed:\n"
            f"expected: {case.output}\n"
            f"received: {result}"
        )


def test_mean_scenarios():
    assert mean.arithmetic([8, 16]) == 12.0
    assert mean.geometric([9, 16]) == 12.0
    assert math.isnan(mean.geometric([-4, 1, 3, 8, 12]))
    assert mean.harmonic([1, 7]) == 1.75


@pytest.mark.parametrize("values", [
    [8., 16.],
    (8, 16),
    np.array([8., 16.]),
    pd.Series([8, 16], index=["a", "b"]),
])
def test_means_accept_list_likes(values):
    assert mean.arithmetic(values) == 12.0
    assert type(mean.arithmetic(values)) is float


def test_empty_input_follows_ieee():
    with np.errstate(all="raise"):
        assert math.isnan(mean.arithmetic([]))
        assert math.isnan(mean.harmonic([]))
        assert mean.geometric([]) == 1.0
