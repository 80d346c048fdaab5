from typing import Any, Iterable, Optional, Union

from ...language import DirectiveNode, FieldNode, Node, TraversalSignal
from ..validation_context import ValidationContext
from . import ValidationRule
from .arguments_validator import NODE_TYPE_NAMES

__all__ = ["RequiredArgumentsArePresent", "missing_arguments_message"]


def missing_arguments_message(
    kind: str, name: str, arg_names: Iterable[str]
) -> str:
    return f"{kind} '{name}' is missing required arguments: {', '.join(arg_names)}"


class RequiredArgumentsArePresent(ValidationRule):
    """Required arguments are present

    A field or directive is only valid if all required (non-null without a default
    value) arguments have been provided.
    """

    kinds = ("field", "directive")

    def get_definition(
        self, parent: Optional[Node], node: Node, context: ValidationContext
    ) -> Any:
        if isinstance(node, DirectiveNode):
            return context.get_directive()
        return context.get_field_def()

    def inspect(
        self,
        parent: Optional[Node],
        node: Node,
        defn: Any,
        context: ValidationContext,
    ) -> Optional[TraversalSignal]:
        return None

    def leave(
        self,
        parent: Optional[Node],
        node: Union[FieldNode, DirectiveNode],
        defn: Any,
        context: ValidationContext,
    ) -> None:
        # Validate on leave to allow for deeper errors to appear first.
        if defn is None:
            return
        provided = {arg.name.value for arg in node.arguments or ()}
        missing = [
            arg_name
            for arg_name, arg_def in defn.args.items()
            if arg_name not in provided and arg_def.required
        ]
        if missing:
            context.record_error(
                missing_arguments_message(
                    NODE_TYPE_NAMES[node.kind], node.name.value, missing
                ),
                node,
            )
