from .definition import GraphQLScalarType

__all__ = [
    "GraphQLInt",
    "GraphQLFloat",
    "GraphQLString",
    "GraphQLBoolean",
    "GraphQLID",
]

# The built-in scalars. Schemas only contain those which are referenced.

GraphQLInt = GraphQLScalarType("Int")
GraphQLFloat = GraphQLScalarType("Float")
GraphQLString = GraphQLScalarType("String")
GraphQLBoolean = GraphQLScalarType("Boolean")
GraphQLID = GraphQLScalarType("ID")
