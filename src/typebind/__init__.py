"""Typebind dependency injection library.

Typebind supplies already-constructed values to functions by matching each
parameter's annotated type against a set of registered values. It is a library,
not a framework: it never constructs objects, manages lifecycles or takes over
program flow, it only fills in the arguments of the call it is asked to make.

Key Features:
    - Values indexed by exact runtime type, last registration wins
    - Exact type matches, then unique subclass, ABC or protocol matches
    - Optional dependencies: unmatched parameters get their default or empty value
    - Ambiguous matches are reported, never guessed
    - Injection into functions or into objects with a ``bind`` method
    - Thread-safe registration and injection

Basic Usage:
    >>> from typebind.context import new_context
    >>>
    >>> context = new_context().add(Database(), Printer())
    >>>
    >>> def report(db: Database, out: Output):
    ...     out.print(db.summary())
    >>>
    >>> context.inject(report)

The library consists of several modules:
    - context: The Context facade and new_context()
    - registry: Type-indexed, lock-guarded value storage
    - signature: Parameter extraction from callables
    - resolver: Matching of parameters against registered values
    - dispatcher: Injection point selection and invocation
    - domain: Core value types (Parameter, Resolution, MatchKind)
    - errors: Library-specific exceptions
"""
