"""pytest fixtures for architecture rules.

Provides fixtures for evaluating rules in tests.
User overrides arch_rules_reporter in their conftest.py.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from archrules.application.services import RuleChecker
from archrules.infrastructure.importer import ASTImporter

if TYPE_CHECKING:
    from archrules.domain.model.artifact_graph import ArtifactGraph
    from archrules.domain.model.check_report import CheckReport
    from archrules.domain.model.rule import Rule
    from archrules.domain.ports.reporter import ReporterProtocol


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback."""
    value = config.getini(name)
    if value:
        return str(value)
    return default


def resolve_sources(root_dir: Path, source_dir: str, package: str) -> tuple[Path, Path]:
    """Compute importer root and source to import.

    Args:
        root_dir: pytest rootdir
        source_dir: Directory holding packages, relative to root_dir
        package: Package to import ("" = everything under source_dir)

    Returns:
        (root for module names, path to import)

    Raises:
        FileNotFoundError: If source directory or package does not exist
    """
    source_path = root_dir / source_dir
    if not source_path.is_dir():
        raise FileNotFoundError(
            f"arch_source_dir '{source_path}' does not exist. "
            f"Configure arch_source_dir in pytest.ini or pyproject.toml."
        )

    if not package:
        return source_path, source_path

    package_path = source_path.joinpath(*package.split("."))
    if not package_path.exists():
        raise FileNotFoundError(f"arch_package '{package}' not found under '{source_path}'")
    return source_path, package_path


def make_rule_runner(
    graph: ArtifactGraph,
    reporter: ReporterProtocol | None = None,
) -> Callable[..., CheckReport]:
    """Create callable that checks rules against graph.

    The callable raises ArchitectureViolationError listing every
    failed rule.
    """

    def run(*rules: Rule) -> CheckReport:
        return RuleChecker(rules, reporter=reporter).check(graph)

    return run


@pytest.fixture(scope="session")
def arch_graph(request: pytest.FixtureRequest) -> ArtifactGraph:
    """Import artifact graph from configured source directory.

    Reads arch_source_dir and arch_package from pytest.ini.
    Defaults: arch_source_dir="src", arch_package="" (whole directory).

    Returns:
        Imported ArtifactGraph
    """
    root_dir = Path(request.config.rootpath)
    source_dir = _get_ini_value(request.config, "arch_source_dir", "src")
    package = _get_ini_value(request.config, "arch_package", "")

    root, source = resolve_sources(root_dir, source_dir, package)
    return ASTImporter(root).import_from([source])


@pytest.fixture(scope="session")
def arch_rules_reporter() -> ReporterProtocol | None:
    """Reporter used by arch_check.

    Override in conftest.py to print reports (e.g. ConsoleReporter()).

    Returns:
        None (no report output)
    """
    return None


@pytest.fixture
def arch_check(
    arch_graph: ArtifactGraph,
    arch_rules_reporter: ReporterProtocol | None,
) -> Callable[..., CheckReport]:
    """Check rules against the imported graph.

    Example:
        def test_layers(arch_check):
            arch_check(no_classes().that_reside_in_package("app.domain.**")
                       .should(depend_on_classes_in_package("app.infra.**")))

    Returns:
        Callable taking rules, raising ArchitectureViolationError on failure
    """
    return make_rule_runner(arch_graph, arch_rules_reporter)
