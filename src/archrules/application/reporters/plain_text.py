"""Plain text reporter.

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from archrules.domain.model.check_report import CheckReport
    from archrules.domain.model.rule import EvaluationResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter.

    One block per rule, highest priority first.
    """

    def report(self, report: CheckReport) -> None:
        """Report results as plain text."""
        self._write("=" * 70)
        self._write("Architecture Rules")
        self._write("=" * 70)

        for result in report.results:
            self._report_result(result)

        self._write()
        self._write("-" * 70)
        self._write(f"Rules: {report.rule_count}")
        self._write(f"Failed: {len(report.failed_results)}")
        self._write(f"Violations: {report.violation_count}")
        self._write(f"Status: {'PASS' if report.passed else 'FAIL'}")

    def _report_result(self, result: EvaluationResult) -> None:
        status = "PASS" if result.passed else "FAIL"
        self._write()
        self._write(f"[{status}] [{result.priority.name}] {result.description}")
        self._write(f"  checked: {result.checked_count}")
        for i, violation in enumerate(result.violations, start=1):
            self._write(f"  {i}. {violation.message}")
