"""This package contains various utilities related to ``tiebreak``
functionality.

Modules
-------
error
    utilities for formatting errors and warnings raised by ``tiebreak``
    functions.

type_hints
    type hints for mypy and other static type checkers.
"""
