from typing import List

from ..error import GraphQLError
from ..language import DocumentNode

__all__ = ["Instrumentation"]


class Instrumentation:
    """Instrumentation provides a pattern to hook into the validation process for
    observability purposes.

    Subclass it and override the hooks you are interested in, then pass an instance
    to :func:`~gqlcheck.validation.validate`.
    """

    def on_validation_start(self, document: DocumentNode) -> None:
        """This will be called before the document is validated."""

    def on_validation_end(self, errors: List[GraphQLError]) -> None:
        """This will be called after the document has been validated.

        This is also called if the validation has been aborted because too many
        errors have been found.
        """
