"""Reporter protocol for output formatting.

Users extend archrules by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from archrules.domain.model.check_report import CheckReport


class ReporterProtocol(Protocol):
    """Contract for reporters.

    archrules provides PlainTextReporter, JSONReporter and ConsoleReporter.
    Implementation decides output format and destination.
    """

    def report(self, report: CheckReport) -> None:
        """Report results of a rule check.

        Args:
            report: Results of every evaluated rule
        """
        ...
