"""pytest plugin for archrules.

Provides fixtures for architecture rules:
    arch_graph: Artifact graph imported from the source directory
    arch_rules_reporter: Reporter for arch_check (override in conftest.py)
    arch_check: Checks rules, fails the test on violations

Configuration (pytest.ini or pyproject.toml):
    arch_source_dir: Source directory to import (default: "src")
    arch_package: Package to import (default: whole source directory)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.presentation.pytest_plugin.fixtures import (
    arch_check,
    arch_graph,
    arch_rules_reporter,
)

if TYPE_CHECKING:
    import pytest

__all__ = [
    "arch_check",
    "arch_graph",
    "arch_rules_reporter",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini("arch_source_dir", "Source directory to import for architecture rules")
    parser.addini("arch_package", "Package to import for architecture rules")


def pytest_configure(config: pytest.Config) -> None:
    """Register marker for architecture tests."""
    config.addinivalue_line(
        "markers",
        "arch: mark test as architecture test",
    )
