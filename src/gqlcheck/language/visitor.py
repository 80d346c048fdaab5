from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from ..pyutils import inspect, camel_to_snake
from . import ast

from .ast import Node, QUERY_DOCUMENT_KEYS

__all__ = [
    "Visitor",
    "TraversalSignal",
    "VisitorKeyMap",
    "visit",
    "CONTINUE",
    "SKIP",
]


class TraversalSignal(Enum):
    """Result of entering a node.

    ``CONTINUE`` descends into the children of the node, ``SKIP`` prunes the whole
    subtree below it.
    """

    CONTINUE = None
    SKIP = False


CONTINUE = TraversalSignal.CONTINUE
SKIP = TraversalSignal.SKIP

VisitorKeyMap = Dict[str, Tuple[str, ...]]


class Visitor:
    """Base class of the visitors passed to :func:`visit`

    Subclasses handle nodes by defining ``enter_<kind>`` and ``leave_<kind>``
    methods, e.g. ``enter_field()`` for field nodes. The generic methods ``enter``
    and ``leave`` handle all kinds of nodes without a specific method. All of them
    are called with the same arguments::

        def enter_field(self, node, key, parent, path, ancestors):
            return SKIP  # do not visit the children of this field

    ``key`` is the attribute name or list index under which the node hangs below its
    ``parent``, which can be a node or a tuple of nodes. ``path`` holds the keys
    leading from the root to the node, and ``ancestors`` the nodes and tuples above
    the parent. Both are None or empty for the root.

    Enter methods may return ``SKIP`` (or False) to prune the subtree, the leave
    method of the node will then not be called either. The return values of leave
    methods are ignored.

    Method names are checked when a subclass is defined, so that a misspelled kind
    is not silently ignored.
    """

    # Provide special return values as attributes
    CONTINUE, SKIP = CONTINUE, SKIP

    def __init_subclass__(cls) -> None:
        super().__init_subclass__()
        for attr in cls.__dict__:
            method, _, kind = attr.partition("_")
            if method in ("enter", "leave") and kind and kind not in _node_kinds:
                raise TypeError(f"Invalid AST node kind: {kind}.")

    def get_visit_fn(self, kind: str, is_leaving: bool = False) -> Optional[Callable]:
        """Get the visit function for the given node kind and direction."""
        method = "leave" if is_leaving else "enter"
        return getattr(self, f"{method}_{kind}", None) or getattr(self, method, None)


_node_kinds = {
    camel_to_snake(name[:-4])
    for name in ast.__all__
    if name.endswith("Node") and name != "Node"
}


def visit(
    root: Node,
    visitor: Visitor,
    visitor_keys: Optional[VisitorKeyMap] = None,
) -> None:
    """Walk depth first through an AST, calling the visitor for every node.

    The enter method of the visitor is called before the children of a node are
    visited, the leave method after them. A node whose enter method returns
    :data:`~.SKIP` is left out together with its subtree.

    The AST is never modified, every node is visited at most once, and the walk
    does not stop before the root has been left.

    ``visitor_keys`` maps node kinds to the attributes holding their children and
    defaults to :data:`~.QUERY_DOCUMENT_KEYS`. Nodes of kinds which are not in the
    map cannot be visited.
    """
    if not isinstance(root, Node):
        raise TypeError(f"Not an AST Node: {inspect(root)}.")
    if not isinstance(visitor, Visitor):
        raise TypeError(f"Not an AST Visitor: {inspect(visitor)}.")
    keys_by_kind = QUERY_DOCUMENT_KEYS if visitor_keys is None else visitor_keys

    path: List[Union[str, int]] = []
    ancestors: List[Any] = []

    def children(node: Node) -> Iterator[Tuple[Any, Any]]:
        return ((key, getattr(node, key, None)) for key in keys_by_kind[node.kind])

    def enter(node: Any, key: Any, parent: Any) -> bool:
        if not isinstance(node, Node):
            raise TypeError(f"Invalid AST Node: {inspect(node)}.")
        if node.kind not in keys_by_kind:
            raise TypeError(f"Unknown AST node kind: {inspect(node.kind)}.")
        enter_fn = visitor.get_visit_fn(node.kind)
        if not enter_fn:
            return True
        result = enter_fn(node, key, parent, path, ancestors)
        if result is SKIP or result is False:
            return False
        if result is not None and result is not CONTINUE:
            raise TypeError(f"Invalid traversal signal: {inspect(result)}.")
        return True

    def leave(node: Node, key: Any, parent: Any) -> None:
        leave_fn = visitor.get_visit_fn(node.kind, is_leaving=True)
        if leave_fn:
            leave_fn(node, key, parent, path, ancestors)

    if not enter(root, None, None):
        return
    # nodes and tuples of nodes which are being walked, with their remaining children
    stack: List[Tuple[Any, Iterator[Tuple[Any, Any]]]] = [(root, children(root))]
    while stack:
        parent, items = stack[-1]
        for key, node in items:
            if node is None:
                continue
            path.append(key)
            if isinstance(node, tuple):
                ancestors.append(parent)
                stack.append((node, enumerate(node)))
                break
            if enter(node, key, parent):
                ancestors.append(parent)
                stack.append((node, children(node)))
                break
            path.pop()
        else:
            node = stack.pop()[0]
            if stack:
                parent = ancestors.pop()
                if not isinstance(node, tuple):
                    leave(node, path[-1], parent)
                path.pop()
            else:
                leave(root, None, None)
