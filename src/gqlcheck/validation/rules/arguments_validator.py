from typing import Any, Dict, Optional, Union

from ...language import (
    ArgumentNode,
    DirectiveNode,
    FieldNode,
    Node,
    ObjectFieldNode,
    ObjectValueNode,
    TraversalSignal,
    CONTINUE,
    node_name,
)
from ...type import get_named_type, is_input_object_type
from ..validation_context import ValidationContext
from . import ValidationRule

__all__ = ["ArgumentsValidator", "NODE_TYPE_NAMES"]


NODE_TYPE_NAMES: Dict[str, str] = {
    "field": "Field",
    "directive": "Directive",
    "object_value": "InputObject",
}
"""How the owners of arguments are called in error messages, by node kind"""


class ArgumentsValidator(ValidationRule):
    """Base class for rules checking arguments and input object fields.

    The rule is called with the argument as node and the field, directive or input
    object value which owns it as parent. The definition is the one of the owner,
    i.e. the field definition, the directive or the input object type. If the owner
    could not be resolved against the schema, the argument is not checked.
    """

    kinds = ("argument", "object_field")

    def get_definition(
        self, parent: Optional[Node], node: Node, context: ValidationContext
    ) -> Any:
        if isinstance(parent, FieldNode):
            return context.get_field_def()
        if isinstance(parent, DirectiveNode):
            return context.get_directive()
        if isinstance(parent, ObjectValueNode):
            # the object field has already been entered, so its owner is one level up
            input_type = get_named_type(context.get_parent_input_type())
            return input_type if is_input_object_type(input_type) else None
        return None

    def inspect(
        self,
        parent: Optional[Node],
        node: Node,
        defn: Any,
        context: ValidationContext,
    ) -> Optional[TraversalSignal]:
        if defn is None:
            return CONTINUE
        return self.validate_node(parent, node, defn, context)

    def validate_node(
        self,
        parent: Node,
        node: Union[ArgumentNode, ObjectFieldNode],
        defn: Any,
        context: ValidationContext,
    ) -> Optional[TraversalSignal]:
        raise NotImplementedError

    @staticmethod
    def node_type(parent: Node) -> str:
        """Get the kind of the owner as it is called in error messages."""
        return NODE_TYPE_NAMES[parent.kind]

    @staticmethod
    def parent_name(parent: Node, defn: Any) -> str:
        """Get the name of the owner as it is used in error messages.

        Fields are called by their response key, input objects by the name of their
        type, and directives by their own name.
        """
        if isinstance(parent, FieldNode):
            return parent.response_key
        if isinstance(parent, ObjectValueNode):
            return defn.name
        return node_name(parent) or ""
