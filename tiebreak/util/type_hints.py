"""This module provides PEP 484-style type hints for ``tiebreak`` constructs.
"""
from typing import List, Tuple, Union

import numpy as np
import numpy.typing
import pandas as pd


#########################
####    ITERABLES    ####
#########################


array_like = numpy.typing.ArrayLike


list_like = Union[
    List,
    Tuple,
    np.ndarray,
    pd.Series
]


#############################
####    RANDOM SOURCES   ####
#############################


seed_like = Union[
    None,
    int,
    np.integer,
    np.random.SeedSequence
]
