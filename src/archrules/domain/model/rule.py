"""Rule and evaluation result."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from archrules.domain.exceptions.violation import ArchitectureViolationError
from archrules.domain.model.description import Description
from archrules.domain.model.priority import Priority

if TYPE_CHECKING:
    from archrules.domain.model.artifact_graph import ArtifactGraph
    from archrules.domain.model.condition import Condition
    from archrules.domain.model.transformer import Transformer
    from archrules.domain.model.violation import Violation

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EvaluationResult[T]:
    """Outcome of evaluating one rule against one graph.

    Equality is by outcome: description and priority are carried for
    reporting and do not take part in comparisons.

    Attributes:
        violations: All violations, in element order
        checked_count: Number of elements checked
        description: Description of the evaluated rule
        priority: Priority of the evaluated rule
    """

    violations: tuple[Violation[T], ...]
    checked_count: int
    description: str = field(compare=False)
    priority: Priority = field(default=Priority.MEDIUM, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.description:
            raise ValueError("description must not be empty")
        if self.checked_count < 0:
            raise ValueError(f"checked_count must be >= 0, got {self.checked_count}")

    @property
    def passed(self) -> bool:
        """True if no violations."""
        return not self.violations

    @property
    def failed(self) -> bool:
        """True if rule check failed."""
        return not self.passed

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)


@dataclass(frozen=True, slots=True)
class Rule[T]:
    """Priority, transformer and condition bound into one evaluable unit.

    Built once (usually through the DSL), immutable afterwards, evaluated
    any number of times with identical results for the same graph.

    Attributes:
        priority: Reporting severity
        transformer: Selects elements to check
        condition: Checked against every selected element
        override: Description set through as_(), if any
    """

    priority: Priority
    transformer: Transformer[T]
    condition: Condition[T]
    override: Description | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.priority, Priority):
            raise TypeError(f"priority must be Priority, got {type(self.priority).__name__}")

    @property
    def description(self) -> str:
        """Composed "<transformer> should <condition>" unless overridden."""
        if self.override is not None:
            return str(self.override)
        return str(
            Description.compose(self.transformer.description, "should", self.condition.description)
        )

    def as_(self, description: str | Description) -> Rule[T]:
        """Same evaluation, replaced description."""
        return replace(self, override=Description.of(description))

    def evaluate(self, graph: ArtifactGraph) -> EvaluationResult[T]:
        """Check condition against every selected element.

        Business-rule failures are returned as data. Errors of the
        transformer (ResolutionError) or of a condition propagate.

        Args:
            graph: Imported artifact graph

        Returns:
            EvaluationResult (passed if no violations; vacuously for no elements)
        """
        description = self.description
        logger.debug("Evaluating rule '%s'", description)

        elements = self.transformer.apply(graph)
        violations: list[Violation[T]] = []
        for element in elements:
            violations.extend(self.condition.check(element))

        logger.debug(
            "Rule '%s' checked %d element(s), %d violation(s)",
            description,
            len(elements),
            len(violations),
        )
        return EvaluationResult(
            violations=tuple(violations),
            checked_count=len(elements),
            description=description,
            priority=self.priority,
        )

    def check(self, graph: ArtifactGraph) -> EvaluationResult[T]:
        """Evaluate and raise on violations.

        Raises:
            ArchitectureViolationError: If any violation found
        """
        result = self.evaluate(graph)
        if result.failed:
            raise ArchitectureViolationError((result,))
        return result

    def __str__(self) -> str:
        return self.description
