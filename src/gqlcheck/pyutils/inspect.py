from inspect import isclass, isfunction, ismethod
from typing import Any

from .undefined import Undefined

__all__ = ["inspect"]


def inspect(value: Any) -> str:
    """Get a short string representation of a value for error messages.

    Python values and containers are shown like ``repr()`` shows them. GraphQL types
    are shown with their names, and other objects only with the name of their class,
    so that error messages do not leak their internals.
    """
    if value is None or value is Undefined or isinstance(value, (bool, int, float)):
        return repr(value)
    if isinstance(value, str):
        return repr(value)
    if isinstance(value, list):
        return f"[{', '.join(map(inspect, value))}]"
    if isinstance(value, tuple):
        items = ", ".join(map(inspect, value))
        return f"({items},)" if len(value) == 1 else f"({items})"
    if isinstance(value, dict):
        items = ", ".join(f"{inspect(k)}: {inspect(v)}" for k, v in value.items())
        return f"{{{items}}}"
    if isinstance(value, (set, frozenset)):
        return f"{{{', '.join(map(inspect, value))}}}" if value else "<empty set>"
    if isclass(value):
        kind = "exception class" if issubclass(value, BaseException) else "class"
        return f"<{kind} {value.__name__}>"
    if isfunction(value) or ismethod(value):
        kind = "method" if ismethod(value) else "function"
        name = value.__name__
        return f"<{kind} {name}>" if "<" not in name else f"<{kind}>"
    if isinstance(value, BaseException):
        return f"<exception {type(value).__name__}>"

    # stringify (only) the GraphQL types, these are shown in error messages
    from ..type import GraphQLNamedType, GraphQLWrappingType

    if isinstance(value, (GraphQLNamedType, GraphQLWrappingType)):
        return str(value)
    inspect_method = getattr(value, "__inspect__", None)
    if callable(inspect_method):
        return inspect_method()
    return f"<{type(value).__name__} instance>"
