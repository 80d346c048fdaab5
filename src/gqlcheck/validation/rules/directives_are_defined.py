from typing import Any, Optional

from ...language import DirectiveNode, Node, TraversalSignal, CONTINUE, SKIP
from ..validation_context import ValidationContext
from . import ValidationRule

__all__ = ["DirectivesAreDefined", "undefined_directive_message"]


def undefined_directive_message(directive_name: str) -> str:
    return f"Directive @{directive_name} is not defined"


class DirectivesAreDefined(ValidationRule):
    """Directives are defined

    A GraphQL document is only valid if all directives it uses are known by the
    schema. The arguments of an unknown directive are not checked.
    """

    kinds = ("directive",)

    def get_definition(
        self, parent: Optional[Node], node: Node, context: ValidationContext
    ) -> Any:
        return context.get_directive()

    def inspect(
        self,
        parent: Optional[Node],
        node: DirectiveNode,
        defn: Any,
        context: ValidationContext,
    ) -> Optional[TraversalSignal]:
        if defn is not None:
            return CONTINUE
        context.record_error(undefined_directive_message(node.name.value), node)
        return SKIP
