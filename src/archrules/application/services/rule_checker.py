"""Facade for checking a set of rules.

RuleChecker evaluates rules against one artifact graph and hands the
report to an optional reporter.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from archrules.domain.exceptions.violation import ArchitectureViolationError
from archrules.domain.model.check_report import CheckReport

if TYPE_CHECKING:
    from archrules.domain.model.artifact_graph import ArtifactGraph
    from archrules.domain.model.rule import Rule
    from archrules.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


class RuleChecker:
    """Evaluates rules and produces a CheckReport.

    Composition-based: accepts rules and reporter as dependencies.
    Holds no state between calls; the same checker may be run against
    several graphs.

    Example:
        graph = ASTImporter(Path("src")).import_from([Path("src/myapp")])
        checker = RuleChecker([no_classes().that_reside_in_package("myapp.domain.**")
                               .should(depend_on_classes_in_package("myapp.infra.**"))])
        report = checker.evaluate(graph)
        if not report.passed:
            print(f"Violations: {report.violation_count}")
    """

    def __init__(
        self,
        rules: Sequence[Rule],
        *,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            rules: Rules to evaluate
            reporter: Optional reporter for output
        """
        self._rules = tuple(rules)
        self._reporter = reporter

    def evaluate(self, graph: ArtifactGraph) -> CheckReport:
        """Evaluate every rule and report.

        Errors raised while evaluating a rule (ResolutionError, defects in
        a condition) propagate; nothing is reported in that case.

        Args:
            graph: Imported artifact graph

        Returns:
            CheckReport ordered by priority
        """
        logger.debug("Checking %d rule(s) against %d class(es)", len(self._rules), len(graph))
        report = CheckReport.of(tuple(rule.evaluate(graph) for rule in self._rules))

        if report.passed:
            logger.debug("All %d rule(s) passed", report.rule_count)
        else:
            logger.debug(
                "%d of %d rule(s) failed with %d violation(s)",
                len(report.failed_results),
                report.rule_count,
                report.violation_count,
            )

        if self._reporter is not None:
            self._reporter.report(report)

        return report

    def check(self, graph: ArtifactGraph) -> CheckReport:
        """Evaluate and raise if any rule failed.

        Raises:
            ArchitectureViolationError: Listing every failed rule
        """
        report = self.evaluate(graph)
        if not report.passed:
            raise ArchitectureViolationError(report.failed_results)
        return report

    @property
    def rule_count(self) -> int:
        """Number of configured rules."""
        return len(self._rules)
