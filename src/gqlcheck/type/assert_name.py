from re import compile as re_compile

from ..pyutils import inspect

__all__ = ["assert_name"]


is_name = re_compile("[_a-zA-Z][_a-zA-Z0-9]*").fullmatch


def assert_name(name: str) -> str:
    """Make sure that the given value can be used as a GraphQL name."""
    if not isinstance(name, str):
        raise TypeError(f"Expected name to be a string, but got: {inspect(name)}.")
    if not is_name(name):
        raise ValueError(f"Names must match /^[_a-zA-Z][_a-zA-Z0-9]*$/: {name!r}.")
    return name
