from typing import Any, Dict, NoReturn, TypeVar

from .frozen_error import FrozenError

__all__ = ["FrozenDict"]

K = TypeVar("K")
T = TypeVar("T", covariant=True)


class FrozenDict(Dict[K, T]):
    """Dictionary which cannot be changed after it has been created

    The schema view keeps its type, field and argument maps in frozen dicts, so
    that a schema can be shared by concurrent validation runs.
    """

    def _refuse(self, *_args: Any, **_kwargs: Any) -> NoReturn:
        raise FrozenError(f"{self.__class__.__name__} cannot be changed.")

    __setitem__ = __delitem__ = __ior__ = _refuse  # type: ignore
    clear = pop = popitem = setdefault = update = _refuse  # type: ignore

    def __hash__(self) -> int:  # type: ignore
        return hash(tuple(self.items()))

    def copy(self) -> "FrozenDict[K, T]":
        return self.__class__(self)

    __copy__ = copy
