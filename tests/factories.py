"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories accept simplified parameters and return fully
constructed domain objects.
"""

from pathlib import Path

from archrules.domain.model.artifact_graph import ArtifactGraph
from archrules.domain.model.code_class import CodeClass
from archrules.domain.model.condition import Condition, ConditionEvents
from archrules.domain.model.description import Description
from archrules.domain.model.location import SourceLocation
from archrules.domain.model.priority import Priority
from archrules.domain.model.rule import EvaluationResult
from archrules.domain.model.violation import Violation

# Default test file path - consistent across all tests
DEFAULT_TEST_FILE = Path("/test/file.py")


def make_class(
    qualified_name: str,
    dependencies: tuple[str, ...] = (),
    bases: tuple[str, ...] = (),
    line: int | None = None,
) -> CodeClass:
    """Create a CodeClass for tests.

    Args:
        qualified_name: Full name ("myapp.domain.User")
        dependencies: Qualified names the class refers to
        bases: Base class names
        line: If given, class gets a location in the default test file

    Returns:
        CodeClass instance
    """
    location = SourceLocation(DEFAULT_TEST_FILE, line) if line is not None else None
    return CodeClass.of(
        qualified_name,
        bases=bases,
        dependencies=dependencies,
        location=location,
    )


def make_graph(*classes: CodeClass | str) -> ArtifactGraph:
    """Create an ArtifactGraph; strings become classes without dependencies."""
    return ArtifactGraph.of(
        *(make_class(c) if isinstance(c, str) else c for c in classes)
    )


def make_violation(message: str, subject: object = "subject") -> Violation:
    """Create a Violation for tests."""
    return Violation(message, subject)


def make_result(
    description: str = "classes should depend on x",
    violations: tuple[str, ...] = (),
    checked_count: int = 1,
    priority: Priority = Priority.MEDIUM,
) -> EvaluationResult:
    """Create an EvaluationResult from violation messages."""
    return EvaluationResult(
        violations=tuple(make_violation(m) for m in violations),
        checked_count=checked_count,
        description=description,
        priority=priority,
    )


class StubCondition(Condition[object]):
    """Condition with fixed outcome and message, for combinator tests."""

    __slots__ = ("_label", "_holds", "_message")

    def __init__(self, label: str, holds: bool, message: str | None = None) -> None:
        self._label = Description(label)
        self._holds = holds
        self._message = message or f"<{label}> {'holds' if holds else 'fails'}"

    @property
    def description(self) -> str:
        return str(self._label)

    def evaluate(self, item: object, events: ConditionEvents[object]) -> None:
        if self._holds:
            events.satisfied(item, self._message)
        else:
            events.violated(item, self._message)


class ExplodingCondition(Condition[object]):
    """Condition whose evaluation fails with a defect."""

    __slots__ = ()

    @property
    def description(self) -> str:
        return "explode"

    def evaluate(self, item: object, events: ConditionEvents[object]) -> None:
        raise RuntimeError(f"cannot evaluate {item!r}")
