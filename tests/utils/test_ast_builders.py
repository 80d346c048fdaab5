from pytest import raises

from gqlcheck.language import (
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NullValueNode,
    ObjectValueNode,
    OperationType,
    StringValueNode,
)

from . import doc, enum, field, inline, query, value, var


def describe_ast_builders():
    def builds_a_query_document():
        document = doc(query(field("user", field("name"), alias="me", args={"id": 4})))
        operation = document.definitions[0]
        assert operation.operation is OperationType.QUERY
        user = operation.selection_set.selections[0]
        assert user.response_key == "me"
        assert user.name.value == "user"
        assert user.arguments[0].name.value == "id"
        assert user.arguments[0].value.value == "4"
        assert user.selection_set.selections[0].selection_set is None

    def builds_inline_fragments_without_type_condition():
        fragment = inline(None, field("name"))
        assert fragment.type_condition is None
        assert fragment.selection_set.selections[0].name.value == "name"

    def converts_python_values():
        assert isinstance(value(None), NullValueNode)
        assert isinstance(value(True), BooleanValueNode)
        assert isinstance(value(1), IntValueNode)
        assert isinstance(value(1.5), FloatValueNode)
        assert isinstance(value("a"), StringValueNode)
        assert isinstance(value([1, 2]), ListValueNode)
        assert isinstance(value({"a": 1}), ObjectValueNode)
        assert value(1).value == "1"
        assert value(1.5).value == "1.5"

    def passes_value_nodes_through():
        node = enum("SIT")
        assert isinstance(node, EnumValueNode)
        assert value(node) is node
        variable = var("v")
        assert value(variable) is variable

    def rejects_other_values():
        with raises(TypeError) as exc_info:
            value(object)
        assert str(exc_info.value) == "Cannot turn <class 'object'> into a value node."
