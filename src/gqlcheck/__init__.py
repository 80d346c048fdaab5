"""gqlcheck

Static validation of GraphQL documents against a schema.

A document that has already been parsed into an AST is walked through once. For
every node, the validation rules interested in its kind are called in order. The
rules report the problems they find as errors, and may stop the validator from
descending into parts of the document which cannot be checked meaningfully.

The :mod:`gqlcheck` package is organized into the following sub-packages:

  - :mod:`gqlcheck.pyutils`: Utilities which are used throughout the package
  - :mod:`gqlcheck.error`: Creating and formatting validation errors
  - :mod:`gqlcheck.language`: The AST of GraphQL documents and how to walk it
  - :mod:`gqlcheck.type`: Defining the GraphQL type system and schema
  - :mod:`gqlcheck.utilities`: Keeping track of type information in documents
  - :mod:`gqlcheck.validation`: The validator and the validation rules
"""

# The version info of this package
from .version import version, version_info

__version__ = version
__version_info__ = version_info

# Create and format validation errors.
from .error import (
    GraphQLError,
    GraphQLValidationError,
    format_error,
    print_error,
)

# The AST of documents and the visitor to walk through it.
from .language import (
    Source,
    SourceLocation,
    Location,
    Node,
    DocumentNode,
    OperationDefinitionNode,
    OperationType,
    FieldNode,
    ArgumentNode,
    DirectiveNode,
    ObjectValueNode,
    ObjectFieldNode,
    visit,
    Visitor,
    TraversalSignal,
    CONTINUE,
    SKIP,
)

# Define the type system and the schema.
from .type import (
    GraphQLSchema,
    GraphQLScalarType,
    GraphQLObjectType,
    GraphQLInterfaceType,
    GraphQLUnionType,
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLField,
    GraphQLArgument,
    GraphQLInputField,
    GraphQLDirective,
    GraphQLInt,
    GraphQLFloat,
    GraphQLString,
    GraphQLBoolean,
    GraphQLID,
    specified_directives,
    get_argument_map,
)

# Keep track of type information while walking through documents.
from .utilities import TypeInfo, TypeInfoVisitor

# Validate documents.
from .validation import (
    validate,
    assert_valid_document,
    ValidationAbortedError,
    ValidationContext,
    ValidationVisitor,
    Instrumentation,
    ValidationRule,
    RuleType,
    ArgumentsValidator,
    specified_rules,
    DirectivesAreDefined,
    FieldsAreDefinedOnType,
    ArgumentsAreDefined,
    RequiredArgumentsArePresent,
)

__all__ = [
    "version",
    "version_info",
    "GraphQLError",
    "GraphQLValidationError",
    "format_error",
    "print_error",
    "Source",
    "SourceLocation",
    "Location",
    "Node",
    "DocumentNode",
    "OperationDefinitionNode",
    "OperationType",
    "FieldNode",
    "ArgumentNode",
    "DirectiveNode",
    "ObjectValueNode",
    "ObjectFieldNode",
    "visit",
    "Visitor",
    "TraversalSignal",
    "CONTINUE",
    "SKIP",
    "GraphQLSchema",
    "GraphQLScalarType",
    "GraphQLObjectType",
    "GraphQLInterfaceType",
    "GraphQLUnionType",
    "GraphQLEnumType",
    "GraphQLInputObjectType",
    "GraphQLList",
    "GraphQLNonNull",
    "GraphQLField",
    "GraphQLArgument",
    "GraphQLInputField",
    "GraphQLDirective",
    "GraphQLInt",
    "GraphQLFloat",
    "GraphQLString",
    "GraphQLBoolean",
    "GraphQLID",
    "specified_directives",
    "get_argument_map",
    "TypeInfo",
    "TypeInfoVisitor",
    "validate",
    "assert_valid_document",
    "ValidationAbortedError",
    "ValidationContext",
    "ValidationVisitor",
    "Instrumentation",
    "ValidationRule",
    "RuleType",
    "ArgumentsValidator",
    "specified_rules",
    "DirectivesAreDefined",
    "FieldsAreDefinedOnType",
    "ArgumentsAreDefined",
    "RequiredArgumentsArePresent",
]
