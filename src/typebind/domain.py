"""Value types shared by the signature, resolver and dispatcher modules."""

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any


class MatchKind(Enum):
    """How a parameter's value was found."""

    EXACT = "exact"
    CAPABILITY = "capability"
    DEFAULT = "default"


@dataclass(frozen=True)
class Parameter:
    """A parameter of an injection point.

    Attributes:
        name: The parameter name in the function signature.
        required_type: The declared type with any ``Annotated`` metadata removed,
            or None if the parameter is not annotated.
        kind: The ``inspect.Parameter`` kind, used to decide how the value is passed.
        default: The declared default, or ``inspect.Parameter.empty``.
    """

    name: str
    required_type: Any
    kind: inspect._ParameterKind = inspect.Parameter.POSITIONAL_OR_KEYWORD
    default: Any = inspect.Parameter.empty

    @property
    def has_default(self) -> bool:
        return self.default is not inspect.Parameter.empty


@dataclass(frozen=True)
class Resolution:
    """The value chosen for a single parameter, and how it was chosen."""

    parameter: Parameter
    value: Any
    match: MatchKind
