"""Architecture violation exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.domain.exceptions.base import ArchRulesError

if TYPE_CHECKING:
    from archrules.domain.model.rule import EvaluationResult
    from archrules.domain.model.violation import Violation


class ArchitectureViolationError(ArchRulesError, AssertionError):
    """Architecture rules violated.

    Raised by Rule.check() and RuleChecker.check() when evaluation
    reports violations. Evaluation itself never raises for violations.

    Inherits AssertionError so test runners report a failed assertion.

    Attributes:
        results: Failed evaluation results (at least one)
    """

    def __init__(self, results: tuple[EvaluationResult, ...]) -> None:
        if not results:
            raise ValueError("ArchitectureViolationError requires at least one result")
        for result in results:
            if result.passed:
                raise ValueError(f"rule '{result.description}' passed, cannot be reported")

        self.results = results

        msg_parts: list[str] = []
        for result in results:
            msg_parts.append(
                f"Architecture Violation [Priority: {result.priority.name}] - "
                f"Rule '{result.description}' was violated "
                f"({result.violation_count} times):"
            )
            msg_parts.extend(str(v) for v in result.violations)

        super().__init__("\n".join(msg_parts))

    @property
    def violations(self) -> tuple[Violation, ...]:
        """All violations across failed rules, in report order."""
        return tuple(v for result in self.results for v in result.violations)
