"""Tests for presentation/pytest_plugin/fixtures.py helpers."""

from pathlib import Path

import pytest

from archrules.application.conditions.class_conditions import depend_on_class
from archrules.domain.exceptions.violation import ArchitectureViolationError
from archrules.presentation.api.dsl import classes, no_classes
from archrules.presentation.pytest_plugin.fixtures import (
    _get_ini_value,
    make_rule_runner,
    resolve_sources,
)
from tests.factories import make_class, make_graph


class FakeConfig:
    """Minimal stand-in for pytest.Config.getini."""

    def __init__(self, values: dict[str, str]) -> None:
        self._values = values

    def getini(self, name: str) -> str:
        return self._values.get(name, "")


class TestGetIniValue:
    """Tests for _get_ini_value."""

    def test_configured(self) -> None:
        config = FakeConfig({"arch_source_dir": "lib"})
        assert _get_ini_value(config, "arch_source_dir", "src") == "lib"  # type: ignore[arg-type]

    def test_default(self) -> None:
        assert _get_ini_value(FakeConfig({}), "arch_source_dir", "src") == "src"  # type: ignore[arg-type]


class TestResolveSources:
    """Tests for resolve_sources."""

    def test_whole_source_dir(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        assert resolve_sources(tmp_path, "src", "") == (tmp_path / "src", tmp_path / "src")

    def test_package(self, tmp_path: Path) -> None:
        (tmp_path / "src" / "myapp" / "domain").mkdir(parents=True)
        root, source = resolve_sources(tmp_path, "src", "myapp.domain")
        assert root == tmp_path / "src"
        assert source == tmp_path / "src" / "myapp" / "domain"

    def test_missing_source_dir_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="arch_source_dir"):
            resolve_sources(tmp_path, "src", "")

    def test_missing_package_raises(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        with pytest.raises(FileNotFoundError, match="arch_package 'myapp' not found"):
            resolve_sources(tmp_path, "src", "myapp")


class TestRuleRunner:
    """Tests for make_rule_runner."""

    GRAPH = make_graph(make_class("a.Foo", dependencies=("a.Bar",)), "a.Bar")

    def test_passing_rules_return_report(self) -> None:
        run = make_rule_runner(self.GRAPH)
        report = run(no_classes().should(depend_on_class("a.Missing")))
        assert report.passed
        assert report.rule_count == 1

    def test_failing_rule_raises(self) -> None:
        run = make_rule_runner(self.GRAPH)
        with pytest.raises(ArchitectureViolationError):
            run(classes().should(depend_on_class("a.Bar")))
