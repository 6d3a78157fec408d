"""Application layer: condition library, rule checking, reporting."""

from archrules.application.conditions import (
    depend_on_class,
    depend_on_classes_in_package,
    have_fully_qualified_name,
    have_simple_name_ending_with,
    reside_in_package,
)
from archrules.application.reporters import (
    BaseReporter,
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from archrules.application.services import RuleChecker

__all__ = [
    # Conditions
    "depend_on_class",
    "depend_on_classes_in_package",
    "have_fully_qualified_name",
    "have_simple_name_ending_with",
    "reside_in_package",
    # Reporters
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
    # Services
    "RuleChecker",
]
