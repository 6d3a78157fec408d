"""Domain exceptions."""

from archrules.domain.exceptions.base import ArchRulesError
from archrules.domain.exceptions.importing import ArtifactImportError
from archrules.domain.exceptions.resolution import ResolutionError
from archrules.domain.exceptions.validation import RuleValidationError
from archrules.domain.exceptions.violation import ArchitectureViolationError

__all__ = [
    "ArchRulesError",
    "ArtifactImportError",
    "ResolutionError",
    "RuleValidationError",
    "ArchitectureViolationError",
]
