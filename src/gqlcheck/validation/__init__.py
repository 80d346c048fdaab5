"""GraphQL Validation

The :mod:`gqlcheck.validation` package fulfills the Validation phase of fulfilling a
GraphQL result.
"""

from .validate import validate, assert_valid_document, ValidationAbortedError

from .validation_context import ValidationContext

from .validation_visitor import ValidationVisitor

from .instrumentation import Instrumentation

from .rules import ValidationRule, RuleType

from .rules.arguments_validator import ArgumentsValidator, NODE_TYPE_NAMES

# All validation rules run by default
from .specified_rules import specified_rules

# Directives must be known by the schema
from .rules.directives_are_defined import DirectivesAreDefined

# Selected fields must be defined by the parent type
from .rules.fields_are_defined_on_type import FieldsAreDefinedOnType

# Supplied arguments must be declared
from .rules.arguments_are_defined import ArgumentsAreDefined

# Required arguments must be supplied
from .rules.required_arguments_are_present import RequiredArgumentsArePresent

__all__ = [
    "validate",
    "assert_valid_document",
    "ValidationAbortedError",
    "ValidationContext",
    "ValidationVisitor",
    "Instrumentation",
    "ValidationRule",
    "RuleType",
    "ArgumentsValidator",
    "NODE_TYPE_NAMES",
    "specified_rules",
    "DirectivesAreDefined",
    "FieldsAreDefinedOnType",
    "ArgumentsAreDefined",
    "RequiredArgumentsArePresent",
]
