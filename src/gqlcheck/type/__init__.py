"""GraphQL Type System

The :mod:`gqlcheck.type` package defines the view of a GraphQL schema which documents
are validated against.
"""

from .schema import GraphQLSchema, is_schema, assert_schema

from .definition import (
    # Predicates
    is_object_type,
    is_input_object_type,
    is_list_type,
    is_non_null_type,
    is_wrapping_type,
    is_input_type,
    is_output_type,
    is_composite_type,
    # Un-modifiers
    get_nullable_type,
    get_named_type,
    # Arguments
    get_argument_map,
    define_arguments,
    # Definitions
    GraphQLScalarType,
    GraphQLObjectType,
    GraphQLInterfaceType,
    GraphQLUnionType,
    GraphQLEnumType,
    GraphQLInputObjectType,
    # Type Wrappers
    GraphQLList,
    GraphQLNonNull,
    # Types
    GraphQLType,
    GraphQLInputType,
    GraphQLOutputType,
    GraphQLCompositeType,
    GraphQLWrappingType,
    GraphQLNamedType,
    GraphQLFieldsType,
    Thunk,
    GraphQLInputValue,
    GraphQLArgument,
    GraphQLArgumentMap,
    GraphQLField,
    GraphQLFieldMap,
    GraphQLInputField,
    GraphQLInputFieldMap,
)

from .directives import (
    is_directive,
    GraphQLDirective,
    specified_directives,
    GraphQLIncludeDirective,
    GraphQLSkipDirective,
    GraphQLDeprecatedDirective,
)

from .scalars import GraphQLInt, GraphQLFloat, GraphQLString, GraphQLBoolean, GraphQLID

from .introspection import TypeNameMetaFieldDef

from .assert_name import assert_name

__all__ = [
    "GraphQLSchema",
    "is_schema",
    "assert_schema",
    "is_object_type",
    "is_input_object_type",
    "is_list_type",
    "is_non_null_type",
    "is_wrapping_type",
    "is_input_type",
    "is_output_type",
    "is_composite_type",
    "get_nullable_type",
    "get_named_type",
    "get_argument_map",
    "define_arguments",
    "GraphQLScalarType",
    "GraphQLObjectType",
    "GraphQLInterfaceType",
    "GraphQLUnionType",
    "GraphQLEnumType",
    "GraphQLInputObjectType",
    "GraphQLList",
    "GraphQLNonNull",
    "GraphQLType",
    "GraphQLInputType",
    "GraphQLOutputType",
    "GraphQLCompositeType",
    "GraphQLWrappingType",
    "GraphQLNamedType",
    "GraphQLFieldsType",
    "Thunk",
    "GraphQLInputValue",
    "GraphQLArgument",
    "GraphQLArgumentMap",
    "GraphQLField",
    "GraphQLFieldMap",
    "GraphQLInputField",
    "GraphQLInputFieldMap",
    "is_directive",
    "GraphQLDirective",
    "specified_directives",
    "GraphQLIncludeDirective",
    "GraphQLSkipDirective",
    "GraphQLDeprecatedDirective",
    "GraphQLInt",
    "GraphQLFloat",
    "GraphQLString",
    "GraphQLBoolean",
    "GraphQLID",
    "TypeNameMetaFieldDef",
    "assert_name",
]
