"""Base reporter class for output formatting."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from archrules.domain.model.check_report import CheckReport


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Writes to a text stream, stdout by default.

    Example:
        class CountReporter(BaseReporter):
            def report(self, report: CheckReport) -> None:
                self._write(f"Violations: {report.violation_count}")
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    @abstractmethod
    def report(self, report: CheckReport) -> None:
        """Report results of a rule check.

        Args:
            report: Results of every evaluated rule
        """

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
