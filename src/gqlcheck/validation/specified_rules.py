from typing import Tuple

from .rules import RuleType

# Directives are defined
from .rules.directives_are_defined import DirectivesAreDefined

# Fields are defined on type
from .rules.fields_are_defined_on_type import FieldsAreDefinedOnType

# Arguments are defined
from .rules.arguments_are_defined import ArgumentsAreDefined

# Required arguments are present
from .rules.required_arguments_are_present import RequiredArgumentsArePresent

__all__ = ["specified_rules"]


# This tuple includes all validation rules run by default, in the order in which
# they are called for every node. Rules which make sure that a definition exists
# come first, so that they can prevent the following rules from seeing nodes which
# cannot be checked against the schema.

specified_rules: Tuple[RuleType, ...] = (
    DirectivesAreDefined,
    FieldsAreDefinedOnType,
    ArgumentsAreDefined,
    RequiredArgumentsArePresent,
)
