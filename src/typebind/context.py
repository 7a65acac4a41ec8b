"""
The public injection context.

A :class:`Context` holds already-constructed values, indexed by type, and calls
functions or ``bind`` methods with arguments chosen from them. It never builds
objects itself and keeps no state beyond the registered values.

    >>> context = new_context().add(FileHandle("data.txt"))
    >>> def count_lines(reader: Reader) -> int:
    ...     return len(reader.read().splitlines())
    >>> context.inject(count_lines)

Contexts are independent of one another and safe to share between threads.
"""

import logging
from typing import Any

from typebind.dispatcher import DEFAULT_BIND_METHOD, injection_point, invoke
from typebind.errors import NotInjectableError
from typebind.registry import Registry
from typebind.resolver import resolve
from typebind.signature import parameters_of

__all__ = ["Context", "new_context"]

logger = logging.getLogger(__name__)


class Context:
    """A set of values which can be injected into functions and bindable objects.

    Args:
        bind_method: Name of the method called on targets that are not
            themselves callable.
    """

    def __init__(self, bind_method: str = DEFAULT_BIND_METHOD):
        self._registry = Registry()
        self._bind_method = bind_method

    @property
    def bind_method(self) -> str:
        return self._bind_method

    def add(self, *values: Any) -> "Context":
        """Register values, indexed by their runtime type.

        A value replaces any previously registered value of the same type.
        ``None`` values are ignored.

        Returns:
            This context, so that calls can be chained.
        """
        self._registry.add(*values)
        return self

    def inject(self, target: Any) -> None:
        """Call a function, or an object's bind method, with registered values.

        Each parameter is filled according to its annotated type:

        * If a value of exactly that type was registered, it is used.
        * If exactly one registered value satisfies the type (by subclassing,
          ABC registration or protocol structure), it is used.
        * If no registered value satisfies it, the parameter's default is used,
          or the type's empty value, or None.
        * If more than one registered value satisfies it, nothing is invoked and
          AmbiguousDependencyError is raised.

        The return value of the call is discarded.

        Args:
            target: A callable, or an object with a bind method.

        Raises:
            NilTargetError: If the target is None.
            NotInjectableError: If the target is not callable, has no bind
                method, or its signature cannot be inspected.
            AmbiguousDependencyError: If a parameter could be filled by more
                than one registered value.
        """
        func = injection_point(target, self._bind_method)
        try:
            parameters = parameters_of(func)
        except (ValueError, TypeError) as e:
            raise NotInjectableError(target, self._bind_method) from e

        resolutions = resolve(self._registry, parameters)
        logger.debug(
            "Invoking %s with %d resolved arguments",
            getattr(func, "__qualname__", func),
            len(resolutions),
        )
        invoke(func, resolutions)


def new_context(bind_method: str = DEFAULT_BIND_METHOD) -> Context:
    """Create an empty context."""
    return Context(bind_method)
