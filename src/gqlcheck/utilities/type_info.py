from typing import Any, Callable, List, Optional, Sequence, TypeVar, Union

from ..language import (
    ArgumentNode,
    DirectiveNode,
    FieldNode,
    InlineFragmentNode,
    Node,
    ObjectFieldNode,
    OperationDefinitionNode,
    VariableDefinitionNode,
    Visitor,
)
from ..pyutils import inspect
from ..type import (
    GraphQLArgument,
    GraphQLCompositeType,
    GraphQLDirective,
    GraphQLField,
    GraphQLFieldsType,
    GraphQLInputField,
    GraphQLInputType,
    GraphQLOutputType,
    GraphQLSchema,
    GraphQLType,
    TypeNameMetaFieldDef,
    assert_schema,
    get_named_type,
    get_nullable_type,
    is_composite_type,
    is_input_object_type,
    is_input_type,
    is_list_type,
    is_object_type,
    is_output_type,
)

__all__ = ["TypeInfo", "TypeInfoVisitor", "get_field_def"]

T = TypeVar("T")

GetFieldDefType = Callable[
    [GraphQLSchema, GraphQLType, FieldNode], Optional[GraphQLField]
]


def _peek(stack: Sequence[Optional[T]], depth: int = 1) -> Optional[T]:
    return stack[-depth] if len(stack) >= depth else None


def _or_none(value: Any, predicate: Callable[[Any], bool]) -> Any:
    return value if predicate(value) else None


class TypeInfo:
    """Keep track of the type definitions while walking through a document.

    Given a schema, TypeInfo knows the current parent type, output type and field
    definition, as well as the current directive, argument and input type, at any
    point of a depth-first walk which calls ``enter(node)`` and ``leave(node)``.

    Everything which cannot be found in the schema is tracked as None, so that
    unknown fields or types never interrupt the walk.
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        get_field_def_fn: Optional[GetFieldDefType] = None,
    ) -> None:
        """Initialize the TypeInfo for the given GraphQL schema.

        The optional second parameter can be used to look up field definitions
        differently, e.g. in order to support additional meta fields.
        """
        self._schema = assert_schema(schema)
        self._get_field_def = get_field_def_fn or get_field_def
        self._type_stack: List[Optional[GraphQLOutputType]] = []
        self._parent_type_stack: List[Optional[GraphQLCompositeType]] = []
        self._field_def_stack: List[Optional[GraphQLField]] = []
        self._input_type_stack: List[Optional[GraphQLInputType]] = []
        # None outside of directives, False inside of an unknown directive.
        self._directive: Union[GraphQLDirective, bool, None] = None
        self._argument: Optional[Union[GraphQLArgument, GraphQLInputField]] = None

    @property
    def schema(self) -> GraphQLSchema:
        return self._schema

    def get_type(self) -> Optional[GraphQLOutputType]:
        return _peek(self._type_stack)

    def get_parent_type(self) -> Optional[GraphQLCompositeType]:
        return _peek(self._parent_type_stack)

    def get_input_type(self) -> Optional[GraphQLInputType]:
        return _peek(self._input_type_stack)

    def get_parent_input_type(self) -> Optional[GraphQLInputType]:
        return _peek(self._input_type_stack, 2)

    def get_field_def(self) -> Optional[GraphQLField]:
        return _peek(self._field_def_stack)

    def get_directive(self) -> Optional[GraphQLDirective]:
        return self._directive or None

    def get_argument(self) -> Optional[Union[GraphQLArgument, GraphQLInputField]]:
        return self._argument

    def enter(self, node: Node) -> None:
        method = getattr(self, f"enter_{node.kind}", None)
        if method:
            method(node)

    def leave(self, node: Node) -> None:
        method = getattr(self, f"leave_{node.kind}", None)
        if method:
            method()

    def enter_selection_set(self, _node: Node) -> None:
        named_type = get_named_type(self.get_type())
        self._parent_type_stack.append(_or_none(named_type, is_composite_type))

    def leave_selection_set(self) -> None:
        self._parent_type_stack.pop()

    def enter_field(self, node: FieldNode) -> None:
        parent_type = self.get_parent_type()
        field_def = (
            self._get_field_def(self._schema, parent_type, node)
            if parent_type
            else None
        )
        self._field_def_stack.append(field_def)
        self._type_stack.append(
            _or_none(field_def.type, is_output_type) if field_def else None
        )

    def leave_field(self) -> None:
        self._field_def_stack.pop()
        self._type_stack.pop()

    def enter_directive(self, node: DirectiveNode) -> None:
        self._directive = self._schema.get_directive(node.name.value) or False

    def leave_directive(self) -> None:
        self._directive = None

    def enter_operation_definition(self, node: OperationDefinitionNode) -> None:
        root_type = self._schema.get_root_type(node.operation)
        self._type_stack.append(_or_none(root_type, is_object_type))

    def enter_inline_fragment(self, node: InlineFragmentNode) -> None:
        if node.type_condition:
            type_ = self._schema.get_type_from_ast(node.type_condition)
        else:
            type_ = get_named_type(self.get_type())
        self._type_stack.append(_or_none(type_, is_output_type))

    enter_fragment_definition = enter_inline_fragment

    def leave_operation_definition(self) -> None:
        self._type_stack.pop()

    leave_inline_fragment = leave_fragment_definition = leave_operation_definition

    def enter_variable_definition(self, node: VariableDefinitionNode) -> None:
        type_ = self._schema.get_type_from_ast(node.type)
        self._input_type_stack.append(_or_none(type_, is_input_type))

    def leave_variable_definition(self) -> None:
        self._input_type_stack.pop()

    def enter_argument(self, node: ArgumentNode) -> None:
        # Inside an unknown directive, there is no fallback to the field arguments.
        owner = self.get_field_def() if self._directive is None else self._directive
        arg_def = owner.args.get(node.name.value) if owner else None
        self._argument = arg_def
        self._input_type_stack.append(
            _or_none(arg_def.type, is_input_type) if arg_def else None
        )

    def leave_argument(self) -> None:
        self._argument = None
        self._input_type_stack.pop()

    def enter_list_value(self, _node: Node) -> None:
        list_type = get_nullable_type(self.get_input_type())
        item_type = list_type.of_type if is_list_type(list_type) else list_type
        self._input_type_stack.append(_or_none(item_type, is_input_type))

    def enter_object_field(self, node: ObjectFieldNode) -> None:
        object_type = get_named_type(self.get_input_type())
        input_field = (
            object_type.fields.get(node.name.value)
            if is_input_object_type(object_type)
            else None
        )
        self._input_type_stack.append(
            _or_none(input_field.type, is_input_type) if input_field else None
        )

    def leave_list_value(self) -> None:
        self._input_type_stack.pop()

    leave_object_field = leave_list_value


def get_field_def(
    schema: GraphQLSchema, parent_type: GraphQLType, field_node: FieldNode
) -> Optional[GraphQLField]:
    """Get the definition of the selected field on the given parent type.

    Parent types can also be interfaces or unions here. Unions have no fields of
    their own, only ``__typename`` can be selected on them.
    """
    name = field_node.name.value
    if name == "__typename" and is_composite_type(parent_type):
        return TypeNameMetaFieldDef
    if isinstance(parent_type, GraphQLFieldsType):
        return parent_type.fields.get(name)
    return None


class TypeInfoVisitor(Visitor):
    """A visitor which keeps the given TypeInfo in sync with another visitor.

    The TypeInfo is updated before the wrapped visitor enters a node and after it
    has left the node. When the wrapped visitor skips a node, the TypeInfo leaves
    it right away, since the walk will not come back to it.
    """

    def __init__(self, type_info: TypeInfo, visitor: Visitor):
        if not isinstance(type_info, TypeInfo):
            raise TypeError(f"Not a TypeInfo: {inspect(type_info)}.")
        self.type_info = type_info
        self.visitor = visitor

    def enter(self, node, *args):
        self.type_info.enter(node)
        fn = self.visitor.get_visit_fn(node.kind)
        if fn:
            result = fn(node, *args)
            if result is not None and result is not self.CONTINUE:
                self.type_info.leave(node)
            return result

    def leave(self, node, *args):
        fn = self.visitor.get_visit_fn(node.kind, is_leaving=True)
        result = fn(node, *args) if fn else None
        self.type_info.leave(node)
        return result
