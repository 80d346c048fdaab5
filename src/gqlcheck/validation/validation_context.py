from typing import Callable, List, Optional, Sequence, Tuple, Union

from ..error import GraphQLError
from ..language import DocumentNode, Node
from ..type import (
    GraphQLArgument,
    GraphQLCompositeType,
    GraphQLDirective,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputType,
    GraphQLOutputType,
    GraphQLSchema,
)
from ..utilities import TypeInfo

__all__ = ["ValidationContext"]


class ValidationContext:
    """Utility class providing a context for validation.

    An instance of this class is passed as the context to each method called by a
    validation rule. It provides access to the schema, to the document being
    validated and to the type information collected while walking through the
    document, and it gathers the errors found by the rules.

    A context belongs to exactly one validation run and must not be shared.
    """

    schema: GraphQLSchema
    document: DocumentNode
    on_error: Optional[Callable[[GraphQLError], None]]

    def __init__(
        self,
        schema: GraphQLSchema,
        document: DocumentNode,
        type_info: TypeInfo,
        on_error: Optional[Callable[[GraphQLError], None]] = None,
    ) -> None:
        self.schema = schema
        self.document = document
        self._type_info = type_info
        self.on_error = on_error
        self._errors: List[GraphQLError] = []
        self._path: List[str] = []

    @property
    def type_info(self) -> TypeInfo:
        return self._type_info

    @property
    def errors(self) -> Tuple[GraphQLError, ...]:
        """All errors that have been reported so far, in the order of reporting.

        This is a snapshot, errors can only be added through :meth:`report_error`.
        """
        return tuple(self._errors)

    def report_error(self, error: GraphQLError) -> None:
        """Report an error that has been found.

        If an ``on_error`` callback has been given, it is called before the error is
        added. The callback may raise an exception to stop the validation, in which
        case the error is dropped.
        """
        if not isinstance(error, GraphQLError):
            raise TypeError("Expected a GraphQLError.")
        if self.on_error:
            self.on_error(error)
        self._errors.append(error)

    def record_error(
        self,
        message: str,
        node: Union[Node, Sequence[Node], None],
        path: Optional[Sequence[str]] = None,
    ) -> GraphQLError:
        """Create an error with the given message at the given node and report it.

        If no path is given, the response path of the current position in the document
        is used.
        """
        error = GraphQLError(
            message, node, path=self.get_path() if path is None else path
        )
        self.report_error(error)
        return error

    def enter_response_key(self, key: str) -> None:
        self._path.append(key)

    def leave_response_key(self) -> None:
        self._path.pop()

    def get_path(self) -> List[str]:
        """Get the response keys from the operation root to the current position."""
        return self._path[:]

    def get_type(self) -> Optional[GraphQLOutputType]:
        return self._type_info.get_type()

    def get_parent_type(self) -> Optional[GraphQLCompositeType]:
        return self._type_info.get_parent_type()

    def get_input_type(self) -> Optional[GraphQLInputType]:
        return self._type_info.get_input_type()

    def get_parent_input_type(self) -> Optional[GraphQLInputType]:
        return self._type_info.get_parent_input_type()

    def get_field_def(self) -> Optional[GraphQLField]:
        return self._type_info.get_field_def()

    def get_directive(self) -> Optional[GraphQLDirective]:
        return self._type_info.get_directive()

    def get_argument(self) -> Optional[Union[GraphQLArgument, GraphQLInputField]]:
        return self._type_info.get_argument()
