"""GraphQL Language

The :mod:`gqlcheck.language` package is responsible for the AST of GraphQL documents
and for walking through it. Parsing is left to the caller: the validator consumes
documents that have already been parsed.
"""

from .source import Source, split_lines

from .location import SourceLocation

from .print_location import print_location

from .visitor import (
    visit,
    Visitor,
    TraversalSignal,
    VisitorKeyMap,
    CONTINUE,
    SKIP,
)

from .ast import (
    Location,
    Node,
    # Each kind of AST node
    NameNode,
    DocumentNode,
    DefinitionNode,
    ExecutableDefinitionNode,
    OperationDefinitionNode,
    OperationType,
    VariableDefinitionNode,
    VariableNode,
    SelectionSetNode,
    SelectionNode,
    FieldNode,
    ArgumentNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    FragmentDefinitionNode,
    ValueNode,
    IntValueNode,
    FloatValueNode,
    StringValueNode,
    BooleanValueNode,
    NullValueNode,
    EnumValueNode,
    ListValueNode,
    ObjectValueNode,
    ObjectFieldNode,
    DirectiveNode,
    TypeNode,
    NamedTypeNode,
    ListTypeNode,
    NonNullTypeNode,
    QUERY_DOCUMENT_KEYS,
    node_name,
)

__all__ = [
    "SourceLocation",
    "print_location",
    "Source",
    "split_lines",
    "visit",
    "Visitor",
    "TraversalSignal",
    "VisitorKeyMap",
    "CONTINUE",
    "SKIP",
    "Location",
    "Node",
    "NameNode",
    "DocumentNode",
    "DefinitionNode",
    "ExecutableDefinitionNode",
    "OperationDefinitionNode",
    "OperationType",
    "VariableDefinitionNode",
    "VariableNode",
    "SelectionSetNode",
    "SelectionNode",
    "FieldNode",
    "ArgumentNode",
    "FragmentSpreadNode",
    "InlineFragmentNode",
    "FragmentDefinitionNode",
    "ValueNode",
    "IntValueNode",
    "FloatValueNode",
    "StringValueNode",
    "BooleanValueNode",
    "NullValueNode",
    "EnumValueNode",
    "ListValueNode",
    "ObjectValueNode",
    "ObjectFieldNode",
    "DirectiveNode",
    "TypeNode",
    "NamedTypeNode",
    "ListTypeNode",
    "NonNullTypeNode",
    "QUERY_DOCUMENT_KEYS",
    "node_name",
]
