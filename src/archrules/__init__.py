"""archrules - compose architecture rules and evaluate them against an artifact graph."""

__version__ = "0.1.0"

from archrules.application.conditions import (
    depend_on_class,
    depend_on_classes_in_package,
    have_fully_qualified_name,
    have_simple_name_ending_with,
    reside_in_package,
)
from archrules.domain.exceptions import (
    ArchitectureViolationError,
    ArchRulesError,
    ArtifactImportError,
    ResolutionError,
    RuleValidationError,
)
from archrules.domain.model import (
    ArtifactGraph,
    CodeClass,
    Condition,
    EvaluationResult,
    Priority,
    Rule,
    and_,
    never,
    or_,
    satisfy,
)
from archrules.presentation.api import (
    all_,
    classes,
    no,
    no_class,
    no_classes,
    priority,
    the_class,
)

__all__ = [
    "__version__",
    # DSL
    "all_",
    "classes",
    "no",
    "no_class",
    "no_classes",
    "priority",
    "the_class",
    # Conditions
    "and_",
    "never",
    "or_",
    "satisfy",
    "depend_on_class",
    "depend_on_classes_in_package",
    "have_fully_qualified_name",
    "have_simple_name_ending_with",
    "reside_in_package",
    # Model
    "ArtifactGraph",
    "CodeClass",
    "Condition",
    "EvaluationResult",
    "Priority",
    "Rule",
    # Errors
    "ArchRulesError",
    "ArchitectureViolationError",
    "ArtifactImportError",
    "ResolutionError",
    "RuleValidationError",
]
