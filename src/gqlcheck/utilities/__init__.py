"""GraphQL Utilities

The :mod:`gqlcheck.utilities` package contains helpers which are used while
walking through a document together with the schema it is validated against.
"""

from .type_info import TypeInfo, TypeInfoVisitor, get_field_def

__all__ = ["TypeInfo", "TypeInfoVisitor", "get_field_def"]
