"""Selection and invocation of a target's injection point."""

import inspect
import logging
from typing import Any, Callable, Iterable

from typebind.domain import Resolution
from typebind.errors import NilTargetError, NotInjectableError

__all__ = ["DEFAULT_BIND_METHOD", "injection_point", "invoke"]

logger = logging.getLogger(__name__)

DEFAULT_BIND_METHOD = "bind"


def injection_point(target: Any, bind_method: str = DEFAULT_BIND_METHOD) -> Callable:
    """Find the callable that dependencies should be injected into.

    Functions, lambdas, bound methods, partials and instances with ``__call__``
    are their own injection point. Any other object is injected through its bind
    method. Classes are rejected rather than called, since calling a class would
    construct an object.

    Args:
        target: The object to inject into.
        bind_method: Name of the method used when the target is not callable.

    Returns:
        The callable to invoke with resolved arguments.

    Raises:
        NilTargetError: If the target is None.
        NotInjectableError: If the target is a class, or is neither callable nor
            has a callable bind method.
    """
    if target is None:
        raise NilTargetError()
    if inspect.isclass(target):
        raise NotInjectableError(target, bind_method)

    if callable(target):
        return target

    bind = getattr(target, bind_method, None)
    if bind is not None and callable(bind):
        logger.debug("Injecting through %s.%s", type(target).__qualname__, bind_method)
        return bind

    raise NotInjectableError(target, bind_method)


def invoke(func: Callable, resolutions: Iterable[Resolution]) -> None:
    """Call a function with resolved values, discarding its return value.

    Keyword-only parameters are passed by name; all others positionally, in
    declaration order.
    """
    args = []
    kwargs = {}
    for resolution in resolutions:
        parameter = resolution.parameter
        if parameter.kind is inspect.Parameter.KEYWORD_ONLY:
            kwargs[parameter.name] = resolution.value
        else:
            args.append(resolution.value)

    func(*args, **kwargs)
