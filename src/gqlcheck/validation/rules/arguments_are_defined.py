from typing import Any, Optional, Union

from ...language import ArgumentNode, Node, ObjectFieldNode, TraversalSignal
from ...language import CONTINUE, SKIP
from ...type import get_argument_map
from ..validation_context import ValidationContext
from .arguments_validator import ArgumentsValidator

__all__ = ["ArgumentsAreDefined", "undefined_argument_message"]


def undefined_argument_message(kind: str, owner_name: str, arg_name: str) -> str:
    return f"{kind} '{owner_name}' doesn't accept argument '{arg_name}'"


class ArgumentsAreDefined(ArgumentsValidator):
    """Arguments are defined

    A field, a directive or an input object value is only valid if all supplied
    arguments or fields have been declared by its definition. The value of an
    undeclared argument is not checked any further.
    """

    def validate_node(
        self,
        parent: Node,
        node: Union[ArgumentNode, ObjectFieldNode],
        defn: Any,
        context: ValidationContext,
    ) -> Optional[TraversalSignal]:
        arg_name = node.name.value
        if arg_name in get_argument_map(defn):
            return CONTINUE
        context.record_error(
            undefined_argument_message(
                self.node_type(parent), self.parent_name(parent, defn), arg_name
            ),
            node,
        )
        return SKIP
