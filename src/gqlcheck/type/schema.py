from typing import Any, Collection, Dict, Iterator, Mapping, Optional, Tuple

from ..language.ast import (
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    OperationType,
    TypeNode,
)
from ..pyutils import inspect, FrozenDict
from .definition import (
    GraphQLFieldsType,
    GraphQLInputObjectType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLType,
    GraphQLUnionType,
    get_named_type,
)
from .directives import GraphQLDirective, specified_directives, is_directive

__all__ = ["GraphQLSchema", "is_schema", "assert_schema"]


TypeMap = Mapping[str, GraphQLNamedType]


class GraphQLSchema:
    """Schema Definition

    A schema is created from the root types of the operations it supports, and
    validated documents are checked against it. Example::

        MyAppSchema = GraphQLSchema(
          query=MyAppQueryRootType,
          mutation=MyAppMutationRootType)

    The type map holds the additionally passed ``types`` first, followed by the types
    which can be reached from the root types and from the arguments of directives.

    The specified directives (@include, @skip and @deprecated) are used unless
    ``directives`` are passed, in which case these are exactly the directives the
    schema knows about.

    A schema never changes after it has been created, so the same schema can be used
    by any number of validation runs at the same time.
    """

    query_type: Optional[GraphQLObjectType]
    mutation_type: Optional[GraphQLObjectType]
    subscription_type: Optional[GraphQLObjectType]
    type_map: TypeMap
    directives: Tuple[GraphQLDirective, ...]

    def __init__(
        self,
        query: Optional[GraphQLObjectType] = None,
        mutation: Optional[GraphQLObjectType] = None,
        subscription: Optional[GraphQLObjectType] = None,
        types: Optional[Collection[GraphQLNamedType]] = None,
        directives: Optional[Collection[GraphQLDirective]] = None,
    ) -> None:
        for operation, root_type in (
            ("query", query),
            ("mutation", mutation),
            ("subscription", subscription),
        ):
            if root_type is not None and not isinstance(root_type, GraphQLObjectType):
                raise TypeError(f"Expected {operation} to be a GraphQL object type.")
        if types is None:
            types = ()
        elif (
            isinstance(types, str)
            or not isinstance(types, Collection)
            or not all(isinstance(type_, GraphQLNamedType) for type_ in types)
        ):
            raise TypeError(
                "Schema types must be specified as a collection of GraphQL types."
            )
        if directives is None:
            directives = specified_directives
        elif (
            isinstance(directives, str)
            or not isinstance(directives, Collection)
            or not all(is_directive(directive) for directive in directives)
        ):
            raise TypeError(
                "Schema directives must be specified"
                " as a collection of GraphQL directives."
            )

        self.query_type = query
        self.mutation_type = mutation
        self.subscription_type = subscription
        self.directives = tuple(directives)

        # User provided types come first, each followed by the types it references.
        collected: Dict[GraphQLNamedType, None] = dict.fromkeys(types)

        def collect(type_: GraphQLType) -> None:
            named_type = get_named_type(type_)
            if named_type is not None and named_type not in collected:
                collected[named_type] = None
                for referenced_type in referenced_types(named_type):
                    collect(referenced_type)

        for type_ in types:
            collected.pop(type_, None)
            collect(type_)
        for root_type in (query, mutation, subscription):
            if root_type is not None:
                collect(root_type)
        for directive in self.directives:
            for arg in directive.args.values():
                collect(arg.type)

        type_map: Dict[str, GraphQLNamedType] = {}
        for named_type in collected:
            if named_type.name in type_map:
                raise TypeError(
                    "Schema must contain uniquely named types"
                    f" but contains multiple types named '{named_type.name}'."
                )
            type_map[named_type.name] = named_type
        self.type_map = FrozenDict(type_map)
        self._directive_map = FrozenDict(
            {directive.name: directive for directive in self.directives}
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} with {len(self.type_map)} types>"

    def get_type(self, name: str) -> Optional[GraphQLNamedType]:
        return self.type_map.get(name)

    def get_directive(self, name: str) -> Optional[GraphQLDirective]:
        return self._directive_map.get(name)

    def get_root_type(self, operation: OperationType) -> Optional[GraphQLObjectType]:
        """Get the root type for the given kind of operation."""
        return getattr(self, f"{operation.value}_type")

    def get_type_from_ast(self, type_node: TypeNode) -> Optional[GraphQLType]:
        """Get the type referenced by a type node, e.g. ``[User!]``.

        Returns None if the named type at the core does not exist in the schema.
        """
        if isinstance(type_node, NamedTypeNode):
            return self.get_type(type_node.name.value)
        if isinstance(type_node, (ListTypeNode, NonNullTypeNode)):
            of_type = self.get_type_from_ast(type_node.type)
            if of_type is None:
                return None
            if isinstance(type_node, ListTypeNode):
                return GraphQLList(of_type)
            if isinstance(of_type, GraphQLNonNull):
                return None
            return GraphQLNonNull(of_type)
        raise TypeError(f"Unexpected type node: {inspect(type_node)}.")


def referenced_types(named_type: GraphQLNamedType) -> Iterator[GraphQLType]:
    """Get the types directly referenced by the given named type."""
    if isinstance(named_type, GraphQLUnionType):
        yield from named_type.types
    elif isinstance(named_type, GraphQLFieldsType):
        yield from named_type.interfaces
        for field in named_type.fields.values():
            yield field.type
            for arg in field.args.values():
                yield arg.type
    elif isinstance(named_type, GraphQLInputObjectType):
        for input_field in named_type.fields.values():
            yield input_field.type


def is_schema(schema: Any) -> bool:
    return isinstance(schema, GraphQLSchema)


def assert_schema(schema: Any) -> GraphQLSchema:
    if not is_schema(schema):
        raise TypeError(f"Expected {inspect(schema)} to be a GraphQL schema.")
    return schema
