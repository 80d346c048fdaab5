from typing import Tuple, TypeVar

__all__ = ["FrozenList"]


T = TypeVar("T", covariant=True)


class FrozenList(Tuple[T, ...]):
    """List that can only be read, but not changed."""
