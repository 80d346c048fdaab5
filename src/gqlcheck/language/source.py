import re
from typing import Any, List, Tuple, Union

from .location import SourceLocation

__all__ = ["Source", "split_lines"]


_split_lines = re.compile(r"\r\n|[\n\r]").split


def split_lines(text: str) -> List[str]:
    """Split text into lines at any kind of GraphQL line terminator.

    Unlike ``str.splitlines()``, this always returns at least one line, and a
    terminator at the end of the text starts another, empty line.
    """
    return _split_lines(text)


class Source:
    """The text of a GraphQL document

    The validator never parses a source. AST locations refer to it so that errors can
    be reported with line and column numbers.

    Documents which are embedded in other files can pass the position where they
    start as ``location_offset``, e.g. ``(40, 1)`` for a document starting at line 40
    of ``Foo.graphql``. Lines and columns are 1-indexed.
    """

    __slots__ = "__weakref__", "body", "name", "location_offset"

    def __init__(
        self,
        body: str,
        name: str = "GraphQL request",
        location_offset: Union[SourceLocation, Tuple[int, int]] = SourceLocation(1, 1),
    ) -> None:
        if not isinstance(body, str):
            raise TypeError("body must be a string.")
        if not isinstance(name, str):
            raise TypeError("name must be a string.")
        line, column = location_offset
        if line <= 0:
            raise ValueError(
                "line in location_offset is 1-indexed and must be positive."
            )
        if column <= 0:
            raise ValueError(
                "column in location_offset is 1-indexed and must be positive."
            )
        self.body = body
        self.name = name
        self.location_offset = SourceLocation(line, column)

    def get_location(self, position: int) -> SourceLocation:
        """Get the line and column of a character offset in the body."""
        lines = split_lines(self.body[:position])
        return SourceLocation(len(lines), len(lines[-1]) + 1)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Source):
            return other.body == self.body
        return isinstance(other, str) and other == self.body

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(self.body)
