"""Test utilities"""

from .ast_builders import (
    arg,
    directive,
    doc,
    enum,
    field,
    fragment,
    inline,
    list_type,
    mutation,
    name,
    named_type,
    non_null,
    obj,
    operation,
    query,
    selections,
    spread,
    value,
    var,
    var_def,
)

__all__ = [
    "arg",
    "directive",
    "doc",
    "enum",
    "field",
    "fragment",
    "inline",
    "list_type",
    "mutation",
    "name",
    "named_type",
    "non_null",
    "obj",
    "operation",
    "query",
    "selections",
    "spread",
    "value",
    "var",
    "var_def",
]
