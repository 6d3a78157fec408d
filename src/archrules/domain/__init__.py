"""archrules domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, logging, re, collections.abc
"""

from archrules.domain.exceptions import (
    ArchitectureViolationError,
    ArchRulesError,
    ArtifactImportError,
    ResolutionError,
    RuleValidationError,
)
from archrules.domain.model import (
    ArtifactGraph,
    CheckReport,
    CodeClass,
    Condition,
    Description,
    EvaluationResult,
    Priority,
    Rule,
    SourceLocation,
    Transformer,
    Violation,
    never,
)

__all__ = [
    # Exceptions
    "ArchRulesError",
    "ArchitectureViolationError",
    "ArtifactImportError",
    "ResolutionError",
    "RuleValidationError",
    # Model
    "ArtifactGraph",
    "CheckReport",
    "CodeClass",
    "Condition",
    "Description",
    "EvaluationResult",
    "Priority",
    "Rule",
    "SourceLocation",
    "Transformer",
    "Violation",
    "never",
]
