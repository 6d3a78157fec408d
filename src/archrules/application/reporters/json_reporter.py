"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

from archrules.application.reporters._base import BaseReporter
from archrules.domain.model.violation import describe_subject

if TYPE_CHECKING:
    from archrules.domain.model.check_report import CheckReport
    from archrules.domain.model.rule import EvaluationResult
    from archrules.domain.model.violation import Violation


class JSONReporter(BaseReporter):
    """JSON reporter for CI/CD integration and tooling."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        super().__init__(output)
        self._indent = indent

    def report(self, report: CheckReport) -> None:
        """Report results as one JSON document."""
        json.dump(self._report_to_dict(report), self._output, indent=self._indent)
        self._output.write("\n")

    def _report_to_dict(self, report: CheckReport) -> dict[str, object]:
        return {
            "passed": report.passed,
            "summary": {
                "rule_count": report.rule_count,
                "failed_count": len(report.failed_results),
                "violation_count": report.violation_count,
            },
            "rules": [self._result_to_dict(r) for r in report.results],
        }

    def _result_to_dict(self, result: EvaluationResult) -> dict[str, object]:
        return {
            "description": result.description,
            "priority": result.priority.name,
            "passed": result.passed,
            "checked_count": result.checked_count,
            "violations": [self._violation_to_dict(v) for v in result.violations],
        }

    def _violation_to_dict(self, violation: Violation) -> dict[str, str]:
        return {
            "message": violation.message,
            "subject": describe_subject(violation.subject),
        }
