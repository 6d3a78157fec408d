"""Tests for PlainTextReporter."""

from io import StringIO

from archrules.application.reporters.plain_text import PlainTextReporter
from archrules.domain.model.check_report import CheckReport
from archrules.domain.model.priority import Priority
from tests.factories import make_result


def render(report: CheckReport) -> list[str]:
    output = StringIO()
    PlainTextReporter(output).report(report)
    return output.getvalue().splitlines()


class TestPlainTextReporter:
    """Tests for PlainTextReporter output."""

    def test_failed_rule_block(self) -> None:
        result = make_result(
            description="no classes should depend on a.Bar",
            violations=("Foo depends on Bar", "Baz depends on Bar"),
            checked_count=3,
            priority=Priority.HIGH,
        )
        lines = render(CheckReport.of((result,)))

        assert "[FAIL] [HIGH] no classes should depend on a.Bar" in lines
        assert "  checked: 3" in lines
        assert "  1. Foo depends on Bar" in lines
        assert "  2. Baz depends on Bar" in lines
        assert lines[-1] == "Status: FAIL"

    def test_passed_summary(self) -> None:
        lines = render(CheckReport.of((make_result(description="rule"),)))
        assert "[PASS] [MEDIUM] rule" in lines
        assert "Rules: 1" in lines
        assert "Failed: 0" in lines
        assert "Violations: 0" in lines
        assert lines[-1] == "Status: PASS"

    def test_header(self) -> None:
        lines = render(CheckReport.empty())
        assert lines[1] == "Architecture Rules"
