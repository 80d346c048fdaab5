"""gqlcheck.validation.rules package"""

from typing import Any, Optional, Tuple, Type

from ...language import Node, TraversalSignal
from ..validation_context import ValidationContext

__all__ = ["ValidationRule", "RuleType"]


class ValidationRule:
    """Base class for all validation rules.

    A rule declares the kinds of nodes it is interested in with the ``kinds``
    attribute. For every such node, the validator first asks the rule for the schema
    definition belonging to the node with :meth:`get_definition`, then calls
    :meth:`inspect`. The returned signal decides whether the children of the node
    will be visited. After the children have been visited, :meth:`leave` is called.

    Rules are instantiated once per validation run and get the context passed with
    every call, so that they do not need to hold any state of their own.
    """

    kinds: Tuple[str, ...] = ()

    def get_definition(
        self, parent: Optional[Node], node: Node, context: ValidationContext
    ) -> Any:
        """Get the schema definition the given node is checked against."""
        return None

    def inspect(
        self,
        parent: Optional[Node],
        node: Node,
        defn: Any,
        context: ValidationContext,
    ) -> Optional[TraversalSignal]:
        """Check the given node and report errors to the context."""
        raise NotImplementedError

    def leave(
        self,
        parent: Optional[Node],
        node: Node,
        defn: Any,
        context: ValidationContext,
    ) -> None:
        """Called after the children of the node have been visited."""


RuleType = Type[ValidationRule]
