from typing import Any, Collection, Dict, List, Optional, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from ..language.ast import Node  # noqa: F401
    from ..language.location import SourceLocation  # noqa: F401
    from ..language.source import Source  # noqa: F401

__all__ = ["GraphQLError", "format_error", "print_error"]


class GraphQLError(Exception):
    """An error found while validating a GraphQL document

    Besides the message, an error knows the AST nodes it is about and the response
    path from the root of the operation down to the field containing these nodes.
    The source, the character positions and the line and column numbers of the
    error are derived from the locations of the nodes.

    Validation errors are collected rather than raised. They are still exceptions,
    so that callers can raise them when refusing a request.
    """

    __slots__ = ("message", "nodes", "path")

    # attributes compared with other errors and with dicts
    _compared = ("message", "nodes", "source", "positions", "locations", "path")
    _compared_keys = frozenset(_compared)

    message: str
    nodes: Optional[List["Node"]]
    path: Optional[List[Union[str, int]]]

    __hash__ = Exception.__hash__

    def __init__(
        self,
        message: str,
        nodes: Union[Collection["Node"], "Node", None] = None,
        path: Optional[Collection[Union[str, int]]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if nodes is not None and not isinstance(nodes, (list, tuple)):
            nodes = [nodes]  # a single node
        self.nodes = list(nodes) if nodes else None
        self.path = list(path) if path else None

    @property
    def source(self) -> Optional["Source"]:
        """The source document of the first node which has a location"""
        for node in self.nodes or ():
            if node.loc:
                return node.loc.source
        return None

    @property
    def positions(self) -> Optional[List[int]]:
        """Character offsets of the nodes within their source documents"""
        return [node.loc.start for node in self.nodes or () if node.loc] or None

    @property
    def locations(self) -> Optional[List["SourceLocation"]]:
        """Line and column numbers of the nodes within their source documents"""
        return [
            node.loc.source.get_location(node.loc.start)
            for node in self.nodes or ()
            if node.loc
        ] or None

    def __str__(self) -> str:
        return print_error(self)

    def __repr__(self) -> str:
        args = [repr(self.message)]
        locations = self.locations
        if locations:
            args.append(f"locations={locations!r}")
        if self.path:
            args.append(f"path={self.path!r}")
        return f"{self.__class__.__name__}({', '.join(args)})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, dict):
            return (
                "message" in other
                and self._compared_keys.issuperset(other)
                and all(getattr(self, key) == value for key, value in other.items())
            )
        return (
            isinstance(other, GraphQLError)
            and self.__class__ is other.__class__
            and all(
                getattr(self, attr) == getattr(other, attr) for attr in self._compared
            )
        )

    def __ne__(self, other: Any) -> bool:
        return not self == other

    @property
    def formatted(self) -> Dict[str, Any]:
        """Get error formatted according to the GraphQL response format."""
        return format_error(self)


def print_error(error: GraphQLError) -> str:
    """Print a GraphQLError to a string.

    The message is followed by an excerpt of the source for every node which has
    a location.
    """
    # Lazy import to avoid a cyclic dependency between error and language
    from ..language.print_location import print_location

    return "\n\n".join(
        [error.message]
        + [print_location(node.loc) for node in error.nodes or () if node.loc]
    )


def format_error(error: GraphQLError) -> Dict[str, Any]:
    """Format a GraphQL error as an entry of the "errors" list of a response."""
    if not isinstance(error, GraphQLError):
        raise TypeError("Expected a GraphQLError.")
    locations = error.locations
    formatted: Dict[str, Any] = {
        "message": error.message or "An unknown error occurred.",
        "locations": None
        if locations is None
        else [location.formatted for location in locations],
        "path": error.path,
    }
    return formatted
