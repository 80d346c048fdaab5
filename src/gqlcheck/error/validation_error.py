from typing import List, Sequence

from .graphql_error import GraphQLError

__all__ = ["GraphQLValidationError"]


class GraphQLValidationError(Exception):
    """A document failed validation and must not be executed.

    Raised by :func:`~gqlcheck.validation.assert_valid_document` with all errors
    which have been found, in the order they have been found.
    """

    errors: List[GraphQLError]

    def __init__(self, errors: Sequence[GraphQLError]) -> None:
        self.errors = list(errors)
        super().__init__("\n\n".join(error.message for error in self.errors))
