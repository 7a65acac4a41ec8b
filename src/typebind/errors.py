from typing import Any

__all__ = [
    "InjectionError",
    "NilTargetError",
    "NotInjectableError",
    "AmbiguousDependencyError",
]


class InjectionError(Exception):
    """Raised when a target cannot be injected. The target is never invoked."""

    pass


class NilTargetError(InjectionError):
    """Raised when ``None`` is passed as the injection target."""

    def __init__(self):
        super().__init__("Cannot inject into None")


class NotInjectableError(InjectionError):
    """Raised when a target is neither callable nor has a callable bind method."""

    def __init__(self, target: Any, bind_method: str):
        self.target = target
        self.bind_method = bind_method
        super().__init__(
            f"{target!r} is not a function and does not have a '{bind_method}' method"
        )


class AmbiguousDependencyError(InjectionError):
    """Raised when more than one registered value satisfies a parameter's type.

    Attributes:
        parameter_name: The parameter that could not be resolved.
        required_type: The type declared for that parameter.
        candidate_types: The runtime types of every registered value that matched.
    """

    def __init__(self, parameter_name: str, required_type: Any, candidate_types: list[type]):
        self.parameter_name = parameter_name
        self.required_type = required_type
        self.candidate_types = candidate_types
        super().__init__(
            f"More than one dependency satisfies {_type_name(required_type)} "
            f"for parameter '{parameter_name}', registered types with possible match: "
            f"{[_type_name(t) for t in candidate_types]}"
        )


def _type_name(t: Any) -> str:
    if isinstance(t, type):
        return f"{t.__module__}.{t.__qualname__}"
    return repr(t)
