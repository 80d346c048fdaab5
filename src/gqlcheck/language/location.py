from typing import Any, Dict, NamedTuple

__all__ = ["SourceLocation"]


class SourceLocation(NamedTuple):
    """A 1-indexed line and column in a source document

    Source locations compare equal to plain tuples and to their formatted dicts.
    """

    line: int
    column: int

    @property
    def formatted(self) -> Dict[str, int]:
        return {"line": self.line, "column": self.column}

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, dict):
            return self.formatted == other
        return tuple(self) == other

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(tuple(self))
