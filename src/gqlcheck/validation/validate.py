from logging import getLogger
from typing import List, Optional, Sequence

from ..error import GraphQLError, GraphQLValidationError
from ..language import DocumentNode, visit
from ..pyutils import inspect
from ..type import GraphQLSchema, assert_schema
from ..utilities import TypeInfo, TypeInfoVisitor
from .instrumentation import Instrumentation
from .rules import RuleType, ValidationRule
from .specified_rules import specified_rules
from .validation_context import ValidationContext
from .validation_visitor import ValidationVisitor

__all__ = ["assert_valid_document", "validate", "ValidationAbortedError"]

logger = getLogger(__name__)


class ValidationAbortedError(RuntimeError):
    """Error when a validation has been aborted (error limit reached)."""


def validate(
    schema: GraphQLSchema,
    document_ast: DocumentNode,
    rules: Optional[Sequence[RuleType]] = None,
    type_info: Optional[TypeInfo] = None,
    max_errors: Optional[int] = None,
    instrumentation: Optional[Instrumentation] = None,
) -> List[GraphQLError]:
    """Validate a GraphQL document against a schema.

    Validation runs synchronously, returning a list of encountered errors, or an empty
    list if no errors were encountered and the document is valid. The errors are
    ordered as they have been found while walking through the document.

    A list of specific validation rules may be provided. If not provided, the default
    list of rules defined by :data:`specified_rules` will be used. The rules are
    called in the given order for every node.

    Each validation rule is a subclass of ValidationRule which will be instantiated
    once for this validation run.

    Optionally a custom TypeInfo instance may be provided. If not provided, one will be
    created from the provided schema.

    Validation stops with an additional error after ``max_errors`` errors have been
    found. By default, all errors are collected.
    """
    if not document_ast or not isinstance(document_ast, DocumentNode):
        raise TypeError("Must provide document.")
    assert_schema(schema)
    if type_info is None:
        type_info = TypeInfo(schema)
    elif not isinstance(type_info, TypeInfo):
        raise TypeError(f"Not a TypeInfo object: {inspect(type_info)}.")
    if rules is None:
        rules = specified_rules
    elif not isinstance(rules, (list, tuple)) or not all(
        isinstance(rule, type) and issubclass(rule, ValidationRule) for rule in rules
    ):
        raise TypeError(
            "Rules must be specified as a collection of ValidationRule subclasses."
        )
    if max_errors is not None and not isinstance(max_errors, int):
        raise TypeError("The maximum number of errors must be passed as an int.")
    if instrumentation is not None and not isinstance(
        instrumentation, Instrumentation
    ):
        raise TypeError(f"Not an Instrumentation object: {inspect(instrumentation)}.")

    def on_error(_error: GraphQLError) -> None:
        if len(context.errors) >= max_errors:  # type: ignore
            raise ValidationAbortedError

    context = ValidationContext(
        schema, document_ast, type_info, None if max_errors is None else on_error
    )

    if instrumentation:
        instrumentation.on_validation_start(document_ast)
    logger.debug("Validating document with %d rules.", len(rules))

    visitor = ValidationVisitor(context, [rule() for rule in rules])
    try:
        # Visit the whole document with all provided rules in a single pass.
        visit(document_ast, TypeInfoVisitor(type_info, visitor))
    except ValidationAbortedError:
        logger.warning(
            "Validation aborted after the error limit of %d has been reached.",
            max_errors,
        )
        aborted = True
    else:
        aborted = False

    errors = list(context.errors)
    if aborted:
        errors.append(
            GraphQLError(
                "Too many validation errors, error limit reached. Validation aborted."
            )
        )
    logger.debug("Validation finished with %d errors.", len(errors))
    if instrumentation:
        instrumentation.on_validation_end(errors)
    return errors


def assert_valid_document(
    schema: GraphQLSchema,
    document_ast: DocumentNode,
    rules: Optional[Sequence[RuleType]] = None,
) -> None:
    """Assert that a document is valid.

    Utility function which asserts a document is valid by raising a
    GraphQLValidationError with all errors found if it is invalid. A document
    which does not pass must not be executed.
    """
    errors = validate(schema, document_ast, rules)
    if errors:
        raise GraphQLValidationError(errors)
