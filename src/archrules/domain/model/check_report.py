"""Check report aggregate for a set of rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from archrules.domain.model.priority import Priority

if TYPE_CHECKING:
    from archrules.domain.model.rule import EvaluationResult
    from archrules.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class CheckReport:
    """Results of evaluating several rules against one graph.

    Immutable aggregate consumed by reporters.

    Attributes:
        results: One result per rule, highest priority first
    """

    results: tuple[EvaluationResult, ...]

    @property
    def passed(self) -> bool:
        """True if every rule passed (vacuously for no rules)."""
        return all(r.passed for r in self.results)

    @property
    def rule_count(self) -> int:
        """Number of evaluated rules."""
        return len(self.results)

    @property
    def failed_results(self) -> tuple[EvaluationResult, ...]:
        """Results with violations."""
        return tuple(r for r in self.results if r.failed)

    @property
    def violations(self) -> tuple[Violation, ...]:
        """All violations across rules."""
        return tuple(v for r in self.results for v in r.violations)

    @property
    def violation_count(self) -> int:
        """Number of violations across rules."""
        return sum(r.violation_count for r in self.results)

    def failed_count(self, priority: Priority) -> int:
        """Number of failed rules with given priority."""
        return sum(1 for r in self.failed_results if r.priority is priority)

    @classmethod
    def of(cls, results: tuple[EvaluationResult, ...]) -> CheckReport:
        """Create report ordered by priority (HIGH first), stable otherwise."""
        return cls(results=tuple(sorted(results, key=lambda r: -r.priority.value)))

    @classmethod
    def empty(cls) -> CheckReport:
        """Report without rules."""
        return cls(results=())
