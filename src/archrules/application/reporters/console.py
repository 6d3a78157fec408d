"""Console reporter: CheckReport → rich formatted output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from archrules.application.reporters._base import BaseReporter
from archrules.domain.model.priority import Priority

if TYPE_CHECKING:
    from archrules.domain.model.check_report import CheckReport
    from archrules.domain.model.rule import EvaluationResult

_PRIORITY_STYLES = {
    Priority.HIGH: "bold red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "dim",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable.

    Attributes:
        width: Console width in characters.
        color: Emit ANSI styles even when output is not a terminal.
        show_passed: List rules that passed.
        max_violations: Max violations shown per rule. None = unlimited.
    """

    width: int = 120
    color: bool = True
    show_passed: bool = True
    max_violations: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")
        if self.max_violations is not None and self.max_violations < 0:
            raise ValueError(f"max_violations must be >= 0, got {self.max_violations}")


class ConsoleReporter(BaseReporter):
    """Console reporter: summary table plus violations per failed rule."""

    def __init__(
        self,
        config: ConsoleConfig | None = None,
        output: TextIO | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
            output: Output stream (default: sys.stdout)
        """
        super().__init__(output)
        self._config = config or ConsoleConfig()

    def report(self, report: CheckReport) -> None:
        """Render report to output."""
        console = Console(
            file=self._output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        console.print()
        console.rule("[bold]ARCHITECTURE RULES[/bold]")
        console.print()
        console.print(self._build_table(report))
        console.print()

        for result in report.failed_results:
            self._render_violations(console, result)

        if report.passed:
            console.print(f"[bold green]PASS[/bold green] {report.rule_count} rule(s)")
        else:
            console.print(
                f"[bold red]FAIL[/bold red] {len(report.failed_results)} of "
                f"{report.rule_count} rule(s), {report.violation_count} violation(s)"
            )

    def _build_table(self, report: CheckReport) -> Table:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Priority")
        table.add_column("Rule")
        table.add_column("Checked", justify="right")
        table.add_column("Violations", justify="right")

        for result in report.results:
            if result.passed and not self._config.show_passed:
                continue
            style = _PRIORITY_STYLES[result.priority]
            table.add_row(
                f"[{style}]{result.priority.name}[/{style}]",
                Text(result.description),
                str(result.checked_count),
                str(result.violation_count) if result.failed else "[green]0[/green]",
            )
        return table

    def _render_violations(self, console: Console, result: EvaluationResult) -> None:
        console.print(Text(result.description, style="bold"))

        shown = result.violations
        if self._config.max_violations is not None:
            shown = shown[: self._config.max_violations]

        for violation in shown:
            console.print(f"  - {violation.message}", markup=False, highlight=False)

        hidden = result.violation_count - len(shown)
        if hidden:
            console.print(f"  [dim]... {hidden} more[/dim]")
        console.print()
