"""Extraction of typed parameters from injection points."""

import functools
import inspect
from typing import Any, Callable, get_type_hints

from typebind.domain import Parameter

__all__ = ["parameters_of"]

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def parameters_of(func: Callable) -> list[Parameter]:
    """Extract the fillable parameters of a callable, in declaration order.

    Variadic ``*args`` and ``**kwargs`` parameters are left out, as is ``self``
    on bound methods and any keyword already bound by a ``functools.partial``,
    which the partial keeps supplying itself. Annotations are resolved with
    ``get_type_hints``, so string and forward-reference annotations are
    supported, and ``Annotated`` metadata is stripped.

    Args:
        func: The callable to analyse.

    Returns:
        List of Parameter objects describing each parameter.

    Raises:
        ValueError, TypeError: If the callable has no introspectable signature.
        NameError: If an annotation refers to a name that cannot be resolved.

    Example:
        >>> def service(untyped, db: Database, cache: Annotated[Cache, "redis"]):
        ...     pass
        >>> parameters_of(service)
        >>> # [Parameter("untyped", None),
        >>> #  Parameter("db", Database),
        >>> #  Parameter("cache", Cache)]
    """
    sig = inspect.signature(func)
    hints = get_type_hints(_annotation_source(func))
    bound = _partial_keywords(func)
    return [
        Parameter(name, hints.get(name), param.kind, param.default)
        for name, param in sig.parameters.items()
        if param.kind not in _VARIADIC and name not in bound
    ]


def _partial_keywords(func: Callable) -> set[str]:
    keywords = set()
    while isinstance(func, functools.partial):
        keywords.update(func.keywords)
        func = func.func
    return keywords


def _annotation_source(func: Callable) -> Any:
    while isinstance(func, functools.partial):
        func = func.func

    if inspect.isroutine(func):
        return func
    # instances with __call__
    return getattr(func, "__call__")
