"""This module contains helpers for formatting `tiebreak` warnings."""
import numpy as np


def shorten_indices(mask: np.ndarray, max_length: int = 5) -> str:
    """List the positions where `mask` is true, abridged past `max_length`.

    Examples
    --------
    .. doctest::

        >>> shorten_indices(np.array([False, True, True]))
        '[1, 2]'
        >>> shorten_indices(np.ones(8, dtype=bool), max_length=3)
        '[0, 1, 2, ...] (8 total)'
    """
    index = np.flatnonzero(mask)
    shown = ", ".join(str(int(i)) for i in index[:max_length])
    if index.size > max_length:
        return f"[{shown}, ...] ({index.size} total)"
    return f"[{shown}]"
