from .definition import GraphQLField, GraphQLNonNull
from .scalars import GraphQLString

__all__ = ["TypeNameMetaFieldDef"]

# Not part of the fields of any type, but can be selected on every composite type.
TypeNameMetaFieldDef = GraphQLField(GraphQLNonNull(GraphQLString))
