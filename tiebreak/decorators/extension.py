"""This module describes an ``@extension_func`` decorator that transforms an
ordinary Python function into one that can accept managed arguments with custom
validators and dynamic default values.
"""
from __future__ import annotations
from functools import wraps
import inspect
import threading
from types import MappingProxyType
from typing import Any, Callable

from .base import EMPTY, FunctionDecorator


######################
####    PUBLIC    ####
######################


def extension_func(func: Callable) -> ExtensionFunc:
    """A decorator that allows a function to accept managed arguments with
    dynamic default values.

    Parameters
    ----------
    func : Callable
        A Python function or other callable to be decorated.

    Returns
    -------
    ExtensionFunc
        A cooperative decorator that allows transparent access to the decorated
        function.  These objects manage default values and argument validators
        for the decorated callable.

    Notes
    -----
    Default values are stored in :class:`threading.local
    <python:threading.local>` storage.  Each thread inherits the default values
    of the main thread the first time it calls the function, and can then
    modify them without affecting any other thread.

    Examples
    --------
    .. doctest::

        >>> @extension_func
        ... def foo(bar, baz=2):
        ...     return bar, baz

        >>> @foo.argument
        ... def baz(val, context: dict) -> int:
        ...     return int(val)

        >>> foo(1)
        (1, 2)
        >>> foo.baz = "3"
        >>> foo(1)
        (1, 3)
        >>> del foo.baz
        >>> foo(1)
        (1, 2)
    """
    # each function gets its own subclass so that @properties do not leak
    # between instances
    cls = type("_ExtensionFunc", (ExtensionFunc,), {})
    return cls(func)


#######################
####    PRIVATE    ####
#######################


class ExtensionFunc(FunctionDecorator):
    """A wrapper for a function that manages its arguments.

    Parameters
    ----------
    func : Callable
        The decorated function or other callable.

    Notes
    -----
    Whenever an argument is :meth:`registered <ExtensionFunc.argument>` with
    this function, it is added as a managed :class:`property <python:property>`
    with appropriate getter, setter, and deleter methods.  These are
    automatically derived from the validation function itself, and can be used
    to manage its default value externally, without touching any hard code.
    """

    _reserved = FunctionDecorator._reserved | {
        "_signature", "_validators", "_defaults", "_main", "_local"
    }

    def __init__(self, func: Callable):
        super().__init__(func=func)
        self._signature = inspect.signature(func)
        self._validators = {}
        self._defaults = {}  # hardcoded (validated) defaults
        self._main = {}  # settings of the main thread
        self._local = ThreadSettings(self)

    ####################
    ####    BASE    ####
    ####################

    # NOTE: @properties will be added to this class by the @argument decorator

    @property
    def arguments(self) -> MappingProxyType:
        """A read-only mapping of all managed arguments to their respective
        validators.
        """
        return MappingProxyType(self._validators)

    @property
    def settings(self) -> MappingProxyType:
        """A read-only mapping of all managed arguments to their current
        default values in this thread.

        Arguments with no default value are excluded from the map.
        """
        return MappingProxyType(self._local.values)

    def argument(
        self,
        func: Callable = None,
        *,
        name: str | None = None,
        default: Any = EMPTY
    ) -> Callable:
        """A decorator that transforms a validation function into a managed
        argument for this :class:`ExtensionFunc`.

        Parameters
        ----------
        name : str | None, default None
            The name of the argument that the validator validates.  If this is
            left as :data:`None <python:None>`, then the name of the validator
            will be used instead.
        default : Any, default EMPTY
            The default value to use for this argument.  This is passed through
            the validator itself before being stored.  If this is omitted and
            the decorated function defines a default value in its call
            signature, then that value will be used instead.

        Returns
        -------
        Callable
            A decorated version of the validation function that automatically
            fills out its second positional argument (a ``context`` dict) with
            the current settings of this function.

        Raises
        ------
        TypeError
            If the validator is not callable, does not accept at least two
            arguments, or if its ``name`` does not appear in the decorated
            function's signature or conflicts with a reserved attribute.
        KeyError
            If a managed argument of the same name already exists.

        Notes
        -----
        Validation functions must accept at least two positional arguments:

        .. code:: python

            def validator(val, context: dict):
                ...

        Where ``val`` is an arbitrary input to the argument and ``context`` is
        a dictionary containing the values of the other arguments at the time
        the function was invoked.  These are not guaranteed to have been
        validated yet.
        """

        def decorator(validator: Callable) -> Callable:
            """Attach a validation function to the ExtensionFunc as a managed
            property.
            """
            if not callable(validator):
                raise TypeError(f"validator must be callable: {validator}")
            if len(inspect.signature(validator).parameters) < 2:
                raise TypeError(
                    f"validator must accept at least 2 arguments: {validator}"
                )

            # use name of validator as argument name if not explicitly given
            _name = name
            if _name is None:
                _name = validator.__name__
            elif not isinstance(_name, str):
                raise TypeError(f"name must be a string, not {type(_name)}")

            if _name in self._validators:
                raise KeyError(f"argument '{_name}' already exists")
            if _name not in self._signature.parameters:
                raise TypeError(
                    f"'{self.__qualname__}()' has no argument '{_name}'"
                )
            if _name in dir(type(self)):
                raise TypeError(f"'{_name}' is a reserved attribute")

            @wraps(validator)
            def validate_context(val, context=None):
                """Automatically populate `context` argument of validator."""
                if context is None:
                    context = dict(self.settings)
                return validator(val, context)

            # pass default value through validator
            _default = default
            if _default is EMPTY:
                _default = self._signature.parameters[_name].default
            if _default is not EMPTY:
                _default = validate_context(_default)
                self._defaults[_name] = _default
                self._main[_name] = _default
                self._local.values[_name] = _default

            self._validators[_name] = validate_context
            setattr(type(self), _name, self._managed_property(_name))
            return validate_context

        if func is None:
            return decorator
        return decorator(func)

    def reset_defaults(self) -> None:
        """Reset all arguments to their hardcoded defaults in this thread.

        This is equivalent to calling the ``del`` keyword on every argument
        registered to this :class:`ExtensionFunc`.
        """
        self._local.values.clear()
        self._local.values.update(self._defaults)

    def _managed_property(self, name: str) -> property:
        """Generate a getter, setter, and deleter for a managed argument."""
        validator = self._validators[name]

        def getter(self) -> Any:
            """Get the value of a managed argument."""
            try:
                return self._local.values[name]
            except KeyError as err:
                raise TypeError(f"'{name}' has no default value") from err

        def setter(self, val: Any) -> None:
            """Set the value of a managed argument."""
            self._local.values[name] = validator(val)

        def deleter(self) -> None:
            """Replace the value of a managed argument with its default."""
            if name in self._defaults:
                self._local.values[name] = self._defaults[name]
            else:
                self._local.values.pop(name, None)

        return property(getter, setter, deleter, doc=validator.__doc__)

    ###############################
    ####    SPECIAL METHODS    ####
    ###############################

    def __call__(self, *args, **kwargs) -> Any:
        """Execute the decorated function with the managed arguments.

        Explicit arguments are passed through their respective validators.
        Omitted arguments take their current default value, which was already
        validated when it was assigned.
        """
        bound = self._signature.bind_partial(*args, **kwargs)
        settings = self.settings
        context = {**settings, **bound.arguments}

        # validate the explicit arguments
        for name in tuple(bound.arguments):
            if name in self._validators:
                validator = self._validators[name]
                bound.arguments[name] = validator(bound.arguments[name], context)

        # apply managed defaults.  These are pre-validated by their properties.
        for name, val in settings.items():
            bound.arguments.setdefault(name, val)

        bound.apply_defaults()
        return self.__wrapped__(*bound.args, **bound.kwargs)

    def __repr__(self) -> str:
        """Reconstruct the function's effective signature using the current
        value of each argument.
        """
        settings = self.settings
        sig = self._signature.replace(parameters=[
            par.replace(default=settings[par.name], annotation=EMPTY)
            if par.name in settings else par.replace(annotation=EMPTY)
            for par in self._signature.parameters.values()
        ], return_annotation=EMPTY)
        return f"{self.__name__}{sig}"


class ThreadSettings(threading.local):
    """Thread-local storage for the current settings of an
    :class:`ExtensionFunc`.

    The main thread owns the reference copy.  Every other thread starts from a
    snapshot of it, taken the first time that thread touches the settings.
    """

    def __init__(self, owner: ExtensionFunc):
        if threading.current_thread() is threading.main_thread():
            self.values = owner._main
        else:
            self.values = dict(owner._main)
