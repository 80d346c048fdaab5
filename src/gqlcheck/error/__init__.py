"""GraphQL Errors

The :mod:`gqlcheck.error` package is responsible for creating and formatting the
errors found while validating GraphQL documents.
"""

from .graphql_error import GraphQLError, format_error, print_error

from .validation_error import GraphQLValidationError

__all__ = [
    "GraphQLError",
    "GraphQLValidationError",
    "format_error",
    "print_error",
]
