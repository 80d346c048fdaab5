from typing import Any, Mapping, Optional, Tuple

from .assert_name import assert_name
from .definition import GraphQLArgument, GraphQLNonNull, define_arguments
from .scalars import GraphQLBoolean, GraphQLString

try:
    from typing import TypeGuard
except ImportError:  # Python < 3.10
    from typing_extensions import TypeGuard

__all__ = [
    "is_directive",
    "specified_directives",
    "GraphQLDirective",
    "GraphQLIncludeDirective",
    "GraphQLSkipDirective",
    "GraphQLDeprecatedDirective",
]


class GraphQLDirective:
    """GraphQL Directive

    Only the name of a directive and the arguments it accepts are needed to validate
    its usages. Locations and execution behavior are not modelled.
    """

    def __init__(self, name: str, args: Optional[Mapping[str, Any]] = None) -> None:
        self.name = assert_name(name)
        self.args = define_arguments(args)

    def __str__(self) -> str:
        return f"@{self.name}"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}({self})>"

    def __eq__(self, other: Any) -> bool:
        return self is other or (
            isinstance(other, GraphQLDirective)
            and self.name == other.name
            and self.args == other.args
        )

    __hash__ = object.__hash__


def is_directive(directive: Any) -> TypeGuard[GraphQLDirective]:
    return isinstance(directive, GraphQLDirective)


GraphQLIncludeDirective = GraphQLDirective(
    "include", {"if": GraphQLNonNull(GraphQLBoolean)}
)

GraphQLSkipDirective = GraphQLDirective("skip", {"if": GraphQLNonNull(GraphQLBoolean)})

GraphQLDeprecatedDirective = GraphQLDirective(
    "deprecated",
    {"reason": GraphQLArgument(GraphQLString, default_value="No longer supported")},
)

specified_directives: Tuple[GraphQLDirective, ...] = (
    GraphQLIncludeDirective,
    GraphQLSkipDirective,
    GraphQLDeprecatedDirective,
)
"""The directives which are present in every schema unless overridden"""
