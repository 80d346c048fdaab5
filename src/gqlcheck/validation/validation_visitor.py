from typing import Any, Collection, Dict, List, Optional, Tuple

from ..language import FieldNode, Node, Visitor, TraversalSignal, CONTINUE, SKIP
from ..pyutils import inspect
from .rules import ValidationRule
from .validation_context import ValidationContext

__all__ = ["ValidationVisitor"]


class ValidationVisitor(Visitor):
    """A visitor which dispatches the visited nodes to validation rules.

    The rules are called in the order in which they have been given. As soon as one
    of the rules returns ``SKIP`` for a node, the remaining rules are not called for
    that node and its children are not visited.

    The visitor keeps track of the response path in the context. It needs to be
    wrapped in a TypeInfoVisitor, so that the rules can access type information.
    """

    def __init__(
        self, context: ValidationContext, rules: Collection[ValidationRule]
    ) -> None:
        self.context = context
        rules_by_kind: Dict[str, List[ValidationRule]] = {}
        for rule in rules:
            for kind in rule.kinds:
                rules_by_kind.setdefault(kind, []).append(rule)
        self.rules_by_kind: Dict[str, Tuple[ValidationRule, ...]] = {
            kind: tuple(kind_rules) for kind, kind_rules in rules_by_kind.items()
        }

    def enter(
        self, node: Node, key: Any, parent: Any, path: Any, ancestors: List[Any]
    ) -> Optional[TraversalSignal]:
        context = self.context
        is_field = isinstance(node, FieldNode)
        if is_field:
            context.enter_response_key(node.response_key)
        rules = self.rules_by_kind.get(node.kind)
        if rules:
            owner = get_owner(parent, ancestors)
            for rule in rules:
                defn = rule.get_definition(owner, node, context)
                result = rule.inspect(owner, node, defn, context)
                if result is SKIP or result is False:
                    if is_field:
                        context.leave_response_key()
                    return SKIP
                if result is not None and result is not CONTINUE:
                    raise TypeError(
                        f"Invalid traversal signal from {rule.__class__.__name__}:"
                        f" {inspect(result)}."
                    )
        return None

    def leave(
        self, node: Node, key: Any, parent: Any, path: Any, ancestors: List[Any]
    ) -> None:
        context = self.context
        rules = self.rules_by_kind.get(node.kind)
        if rules:
            owner = get_owner(parent, ancestors)
            for rule in rules:
                defn = rule.get_definition(owner, node, context)
                rule.leave(owner, node, defn, context)
        if isinstance(node, FieldNode):
            context.leave_response_key()


def get_owner(parent: Any, ancestors: List[Any]) -> Optional[Node]:
    """Get the nearest enclosing node, skipping lists of nodes."""
    if isinstance(parent, Node):
        return parent
    for ancestor in reversed(ancestors):
        if isinstance(ancestor, Node):
            return ancestor
    return None
