from typing import Any, Optional

from ...language import FieldNode, Node, TraversalSignal, SKIP
from ..validation_context import ValidationContext
from . import ValidationRule

__all__ = ["FieldsAreDefinedOnType", "undefined_field_message"]


def undefined_field_message(field_name: str, type_name: str) -> str:
    return f"Field '{field_name}' doesn't exist on type '{type_name}'"


class FieldsAreDefinedOnType(ValidationRule):
    """Fields are defined on type

    A GraphQL document is only valid if all fields selected are defined by the parent
    type, or are the ``__typename`` meta field. Nothing below an unknown field is
    checked. If the parent type is unknown itself, the field is not reported.
    """

    kinds = ("field",)

    def get_definition(
        self, parent: Optional[Node], node: Node, context: ValidationContext
    ) -> Any:
        return context.get_field_def()

    def inspect(
        self,
        parent: Optional[Node],
        node: FieldNode,
        defn: Any,
        context: ValidationContext,
    ) -> Optional[TraversalSignal]:
        if defn is not None:
            return None
        parent_type = context.get_parent_type()
        if parent_type is None:
            return None
        context.record_error(
            undefined_field_message(node.name.value, parent_type.name), node
        )
        return SKIP
