"""
Matching of parameters against registered values.

Each parameter is resolved independently, in declaration order:

1. An entry whose type *is* the parameter's declared type is used directly.
2. Otherwise every registered value is checked against the declared type (see
   :func:`satisfies`). Exactly one match is used; no match falls back to the
   parameter's zero value; more than one match is an error.

The asymmetry in step 2 is deliberate: a dependency nobody provides is treated as
optional, while a dependency several values could provide is never guessed.

Resolution of a whole parameter list happens under the registry lock, so every
parameter of one injection sees the same set of registered values. Protocol
members are looked up statically, so properties and ``__getattr__`` of registered
values never run under the lock. ``isinstance`` checks against classes with a
custom ``__instancecheck__`` or ``__subclasshook__`` do run that hook under the
lock, and such a hook must not register values on the same context.
"""

import inspect
import logging
import types
from typing import Any, Iterable, Mapping, Union, get_args, get_origin

from typing_extensions import get_protocol_members, is_protocol

from typebind.domain import MatchKind, Parameter, Resolution
from typebind.errors import AmbiguousDependencyError
from typebind.registry import Registry

__all__ = ["resolve", "satisfies", "zero_value"]

logger = logging.getLogger(__name__)

_UNION_TYPES = (Union, types.UnionType)

_MISSING = object()

# Builtin value types whose no-argument constructor gives their empty value.
_ZERO_CONSTRUCTIBLE = frozenset(
    {int, float, complex, bool, str, bytes, bytearray, list, dict, set, frozenset, tuple}
)


def resolve(registry: Registry, parameters: Iterable[Parameter]) -> list[Resolution]:
    """Choose a value for each parameter from the registry.

    Args:
        registry: The registry to draw values from.
        parameters: The parameters to fill, in declaration order.

    Returns:
        One Resolution per parameter, in the same order.

    Raises:
        AmbiguousDependencyError: If more than one registered value satisfies a
            parameter's declared type. No further parameters are resolved.
    """
    with registry.entries() as entries:
        return [_resolve_parameter(entries, parameter) for parameter in parameters]


def satisfies(value: Any, required_type: Any) -> bool:
    """Check whether a value can be supplied for a parameter of the given type.

    * ``Any`` is satisfied by everything.
    * A union is satisfied if any of its members is.
    * A parameterised generic is checked against its origin, so ``list[int]``
      accepts any list.
    * A protocol is checked structurally: the value must have every member the
      protocol declares, whether or not the protocol is runtime-checkable.
      Members are found with ``inspect.getattr_static``, so members supplied
      only by ``__getattr__`` do not count.
    * Any other class is checked with ``isinstance``, which covers subclasses
      and ABC registration.

    Anything else (``Literal``, ``NewType``, ``TypeVar``, unresolved strings) is
    never satisfied.
    """
    if required_type is Any:
        return True

    origin = get_origin(required_type)
    if origin in _UNION_TYPES:
        return any(satisfies(value, member) for member in get_args(required_type))
    if origin is not None:
        required_type = origin

    if is_protocol(required_type):
        return all(
            inspect.getattr_static(value, member, _MISSING) is not _MISSING
            for member in get_protocol_members(required_type)
        )
    if isinstance(required_type, type):
        return isinstance(value, required_type)
    return False


def zero_value(parameter: Parameter) -> Any:
    """The value given to a parameter that nothing registered satisfies.

    This is the parameter's declared default if it has one, the empty value of
    builtin types such as ``int``, ``str`` and ``list``, and ``None`` otherwise.
    """
    if parameter.has_default:
        return parameter.default
    if parameter.required_type in _ZERO_CONSTRUCTIBLE:
        return parameter.required_type()
    return None


def _resolve_parameter(entries: Mapping[type, Any], parameter: Parameter) -> Resolution:
    required_type = parameter.required_type
    if required_type is None:
        return Resolution(parameter, zero_value(parameter), MatchKind.DEFAULT)

    exact = entries.get(required_type)
    if exact is not None:
        logger.debug("Parameter '%s' matched %r exactly", parameter.name, required_type)
        return Resolution(parameter, exact, MatchKind.EXACT)

    candidates = [
        (entry_type, value)
        for entry_type, value in entries.items()
        if satisfies(value, required_type)
    ]

    if not candidates:
        logger.debug(
            "No registered value satisfies %r for parameter '%s', using zero value",
            required_type,
            parameter.name,
        )
        return Resolution(parameter, zero_value(parameter), MatchKind.DEFAULT)

    if len(candidates) > 1:
        candidate_types = sorted(
            (entry_type for entry_type, _ in candidates),
            key=lambda t: (t.__module__, t.__qualname__),
        )
        logger.debug(
            "Parameter '%s' is ambiguous between %d types",
            parameter.name,
            len(candidate_types),
        )
        raise AmbiguousDependencyError(parameter.name, required_type, candidate_types)

    entry_type, value = candidates[0]
    logger.debug(
        "Parameter '%s' matched %r with %s",
        parameter.name,
        required_type,
        entry_type.__qualname__,
    )
    return Resolution(parameter, value, MatchKind.CAPABILITY)


