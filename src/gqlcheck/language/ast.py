from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from .source import Source
from ..pyutils import camel_to_snake, FrozenError, FrozenList

__all__ = [
    "Location",
    "Node",
    "NameNode",
    "DocumentNode",
    "DefinitionNode",
    "ExecutableDefinitionNode",
    "OperationDefinitionNode",
    "VariableDefinitionNode",
    "SelectionSetNode",
    "SelectionNode",
    "FieldNode",
    "ArgumentNode",
    "FragmentSpreadNode",
    "InlineFragmentNode",
    "FragmentDefinitionNode",
    "ValueNode",
    "VariableNode",
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
    "OperationType",
    "QUERY_DOCUMENT_KEYS",
    "node_name",
]


class Location:
    """The region of a source document an AST node has been parsed from

    ``start`` and ``end`` are character offsets into the body of the ``source``.
    Locations compare equal to ``(start, end)`` pairs.
    """

    __slots__ = "start", "end", "source"

    def __init__(self, start: int, end: int, source: Source) -> None:
        self.start = start
        self.end = end
        self.source = source

    def __str__(self) -> str:
        return f"{self.start}:{self.end}"

    def __repr__(self) -> str:
        return f"<Location {self}>"

    __inspect__ = __repr__

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Location):
            other = other.start, other.end
        elif isinstance(other, list):
            other = tuple(other)
        return other == (self.start, self.end)

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((self.start, self.end))


class OperationType(Enum):

    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


# The child nodes of each kind of node, in the order they are traversed
QUERY_DOCUMENT_KEYS: Dict[str, Tuple[str, ...]] = {
    "name": (),
    "document": ("definitions",),
    "operation_definition": (
        "name",
        "variable_definitions",
        "directives",
        "selection_set",
    ),
    "variable_definition": ("variable", "type", "default_value", "directives"),
    "variable": ("name",),
    "selection_set": ("selections",),
    "field": ("alias", "name", "arguments", "directives", "selection_set"),
    "argument": ("name", "value"),
    "fragment_spread": ("name", "directives"),
    "inline_fragment": ("type_condition", "directives", "selection_set"),
    "fragment_definition": (
        "name",
        "type_condition",
        "directives",
        "selection_set",
    ),
    "int_value": (),
    "float_value": (),
    "string_value": (),
    "boolean_value": (),
    "null_value": (),
    "enum_value": (),
    "list_value": ("values",),
    "object_value": ("fields",),
    "object_field": ("name", "value"),
    "directive": ("name", "arguments"),
    "named_type": ("name",),
    "list_type": ("type",),
    "non_null_type": ("type",),
}


class Node:
    """Base class of all AST nodes

    Nodes are created with keyword arguments for their attributes. Missing
    attributes are set to None, and lists are turned into frozen lists.

    Nodes are immutable: any attempt to set or delete an attribute after the node
    has been created raises a :class:`~gqlcheck.pyutils.FrozenError`. A document
    can therefore be validated by concurrent runs, and copying a node just returns
    the node itself.

    The ``kind`` of a node is derived from the name of its class, e.g. ``FieldNode``
    has the kind ``field``, and its ``keys`` are the names of all its attributes.
    """

    __slots__ = "__weakref__", "loc", "_hash"

    loc: Optional[Location]

    kind: str = "ast"
    keys: Tuple[str, ...] = ("loc",)

    def __init_subclass__(cls) -> None:
        super().__init_subclass__()
        name = cls.__name__
        cls.kind = camel_to_snake(name[:-4] if name.endswith("Node") else name)
        inherited = tuple(key for base in cls.__bases__ for key in base.keys)
        cls.keys = inherited + tuple(cls.__slots__)

    def __init__(self, **kwargs: Any) -> None:
        init = object.__setattr__
        for key in self.keys:
            value = kwargs.get(key)
            init(self, key, FrozenList(value) if isinstance(value, list) else value)

    def __setattr__(self, key: str, value: Any) -> None:
        raise FrozenError(f"{self.__class__.__name__} nodes cannot be changed.")

    def __delattr__(self, key: str) -> None:
        raise FrozenError(f"{self.__class__.__name__} nodes cannot be changed.")

    def __repr__(self) -> str:
        name, loc = self.__class__.__name__, getattr(self, "loc", None)
        return f"{name} at {loc}" if loc else name

    def __eq__(self, other: Any) -> bool:
        """Compare the node with another one recursively, including locations."""
        if not isinstance(other, Node) or other.__class__ is not self.__class__:
            return False
        return all(getattr(self, key) == getattr(other, key) for key in self.keys)

    def __hash__(self) -> int:
        try:
            return self._hash
        except AttributeError:
            hashed = hash(tuple(getattr(self, key) for key in self.keys))
            object.__setattr__(self, "_hash", hashed)
            return hashed

    def __copy__(self) -> "Node":
        return self

    def __deepcopy__(self, _memo: Dict) -> "Node":
        return self

    def children(self) -> Iterator["Node"]:
        """Iterate over the child nodes in traversal order.

        A new iterator is returned on every call, so that the same tree can be
        traversed repeatedly by independent validation runs.
        """
        for key in QUERY_DOCUMENT_KEYS.get(self.kind, ()):
            value = getattr(self, key, None)
            if isinstance(value, tuple):
                yield from value
            elif value is not None:
                yield value


class NameNode(Node):
    """A name, e.g. of a field, argument, fragment or type"""

    __slots__ = ("value",)

    value: str


def node_name(node: Node) -> Optional[str]:
    """Get the name of the given node as a string if it has one."""
    name = getattr(node, "name", None)
    return name.value if isinstance(name, NameNode) else None


# Definitions


class DocumentNode(Node):
    """The root of an executable document"""

    __slots__ = ("definitions",)

    definitions: FrozenList["DefinitionNode"]


class DefinitionNode(Node):
    __slots__ = ()


class ExecutableDefinitionNode(DefinitionNode):
    """An operation or a fragment definition"""

    __slots__ = "name", "directives", "selection_set"

    name: Optional[NameNode]
    directives: FrozenList["DirectiveNode"]
    selection_set: "SelectionSetNode"


class OperationDefinitionNode(ExecutableDefinitionNode):
    """``query Name($var: Type) @dir { ... }``, the name may be omitted"""

    __slots__ = "operation", "variable_definitions"

    operation: OperationType
    variable_definitions: FrozenList["VariableDefinitionNode"]


class VariableDefinitionNode(Node):
    """``$var: Type = default @dir`` in the head of an operation"""

    __slots__ = "variable", "type", "default_value", "directives"

    variable: "VariableNode"
    type: "TypeNode"
    default_value: Optional["ValueNode"]
    directives: FrozenList["DirectiveNode"]


class FragmentDefinitionNode(ExecutableDefinitionNode):
    """``fragment Name on Type @dir { ... }``"""

    __slots__ = ("type_condition",)

    name: NameNode
    type_condition: "NamedTypeNode"


# Selections


class SelectionSetNode(Node):
    """The selections between a pair of braces"""

    __slots__ = ("selections",)

    selections: FrozenList["SelectionNode"]


class SelectionNode(Node):
    __slots__ = ("directives",)

    directives: FrozenList["DirectiveNode"]


class FieldNode(SelectionNode):
    """``alias: name(arg: value) @dir { ... }``"""

    __slots__ = "alias", "name", "arguments", "selection_set"

    alias: Optional[NameNode]
    name: NameNode
    arguments: FrozenList["ArgumentNode"]
    selection_set: Optional[SelectionSetNode]

    @property
    def response_key(self) -> str:
        """The key of this field in the response (its alias or its name)."""
        return (self.alias or self.name).value


class FragmentSpreadNode(SelectionNode):
    """``...Name @dir``"""

    __slots__ = ("name",)

    name: NameNode


class InlineFragmentNode(SelectionNode):
    """``... on Type @dir { ... }``, the type condition may be omitted"""

    __slots__ = "type_condition", "selection_set"

    type_condition: Optional["NamedTypeNode"]
    selection_set: SelectionSetNode


class ArgumentNode(Node):
    """``name: value`` in the arguments of a field or a directive"""

    __slots__ = "name", "value"

    name: NameNode
    value: "ValueNode"


class DirectiveNode(Node):
    """``@name(arg: value)``"""

    __slots__ = "name", "arguments"

    name: NameNode
    arguments: FrozenList[ArgumentNode]


# Values


class ValueNode(Node):
    __slots__ = ()


class VariableNode(ValueNode):
    """``$name``"""

    __slots__ = ("name",)

    name: NameNode


class IntValueNode(ValueNode):
    __slots__ = ("value",)

    value: str  # as written in the document


class FloatValueNode(ValueNode):
    __slots__ = ("value",)

    value: str  # as written in the document


class StringValueNode(ValueNode):
    __slots__ = "value", "block"

    value: str
    block: Optional[bool]


class BooleanValueNode(ValueNode):
    __slots__ = ("value",)

    value: bool


class NullValueNode(ValueNode):
    __slots__ = ()


class EnumValueNode(ValueNode):
    __slots__ = ("value",)

    value: str


class ListValueNode(ValueNode):
    """``[value, ...]``"""

    __slots__ = ("values",)

    values: FrozenList[ValueNode]


class ObjectValueNode(ValueNode):
    """``{name: value, ...}``"""

    __slots__ = ("fields",)

    fields: FrozenList["ObjectFieldNode"]


class ObjectFieldNode(Node):
    __slots__ = "name", "value"

    name: NameNode
    value: ValueNode


# Type references


class TypeNode(Node):
    __slots__ = ()


class NamedTypeNode(TypeNode):
    __slots__ = ("name",)

    name: NameNode


class ListTypeNode(TypeNode):
    """``[Type]``"""

    __slots__ = ("type",)

    type: TypeNode


class NonNullTypeNode(TypeNode):
    """``Type!``"""

    __slots__ = ("type",)

    type: Union[NamedTypeNode, ListTypeNode]
