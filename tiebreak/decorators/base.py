"""This module describes a base class for decorators that stand in for the
function they wrap.
"""
from __future__ import annotations
from functools import update_wrapper, WRAPPER_ASSIGNMENTS
import inspect
from typing import Any, Callable


# shortcut for inspect.Parameter.empty
EMPTY = inspect.Parameter.empty


class FunctionDecorator:
    """Base class for decorators that forward unknown attributes to the
    decorated function.

    Subclasses list their own instance attributes in ``_reserved``.  Those,
    along with anything defined on the class itself (such as managed
    properties), are stored on the decorator.  Every other attribute is read
    from and written to ``__wrapped__``.
    """

    _reserved = set(WRAPPER_ASSIGNMENTS) | {"__wrapped__", "__dict__"}

    def __init__(self, func: Callable):
        update_wrapper(self, func)

    def __getattr__(self, name: str) -> Any:
        if name == "__wrapped__":  # not yet initialized
            raise AttributeError(name)
        return getattr(self.__wrapped__, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if self._owns(name):
            super().__setattr__(name, value)
        else:
            setattr(self.__wrapped__, name, value)

    def __delattr__(self, name: str) -> None:
        if self._owns(name):
            super().__delattr__(name)
        else:
            delattr(self.__wrapped__, name)

    def _owns(self, name: str) -> bool:
        return name in self._reserved or hasattr(type(self), name)
