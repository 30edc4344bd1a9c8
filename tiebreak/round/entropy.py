"""Random source for stochastic tie-breaking.

Each thread draws from its own :class:`numpy.random.Generator`, which is held
in :class:`threading.local` storage and created lazily on first use.  Threads
therefore never contend for a generator's internal lock, and reseeding one
thread leaves the others' streams untouched.

Callers that need reproducible ties can either reseed the current thread with
:func:`seed` or pass their own generator to :func:`tiebreak.round` through its
``rng`` argument.  Any object with a numpy-style ``random(size)`` method is
accepted there.
"""
from __future__ import annotations
import logging
import threading

import numpy as np

from tiebreak.util.type_hints import seed_like


logger = logging.getLogger(__name__)


class ThreadGenerator(threading.local):
    """Per-thread holder for the default generator."""

    def __init__(self):
        self.rng = np.random.default_rng()


_local = ThreadGenerator()


def generator() -> np.random.Generator:
    """Get the calling thread's default generator."""
    return _local.rng


def seed(val: seed_like = None) -> None:
    """Reseed the calling thread's default generator.

    Other threads are unaffected.  Passing ``None`` draws fresh entropy from
    the operating system.
    """
    logger.debug(
        "reseeding tie-break generator for thread %r with %r",
        threading.current_thread().name,
        val
    )
    _local.rng = np.random.default_rng(val)


def random_directions(rng, size: int) -> np.ndarray:
    """Draw `size` independent coin flips from `rng`.

    ``True`` means toward positive infinity.  A ``None`` `rng` uses the calling
    thread's default generator.
    """
    if rng is None:
        rng = generator()
    return np.asarray(rng.random(size)) < 0.5
