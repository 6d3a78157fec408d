"""archrules checks its own layering.

Imports the real source tree with ASTImporter and evaluates layer
rules against it.
"""

from pathlib import Path

import pytest

from archrules.application.conditions.class_conditions import depend_on_classes_in_package
from archrules.application.services.rule_checker import RuleChecker
from archrules.domain.model.artifact_graph import ArtifactGraph
from archrules.domain.model.priority import Priority
from archrules.domain.predicates.class_predicates import has_simple_name_ending_with
from archrules.infrastructure.importer.ast_importer import ASTImporter
from archrules.presentation.api.dsl import classes, no_classes, priority, the_class

SRC = Path(__file__).resolve().parents[2] / "src"


@pytest.fixture(scope="module")
def graph() -> ArtifactGraph:
    """Graph of the archrules package itself."""
    return ASTImporter(SRC).import_from([SRC / "archrules"])


class TestLayering:
    """Layer rules on archrules."""

    def test_classes_imported(self, graph: ArtifactGraph) -> None:
        assert graph.has_class("archrules.domain.model.rule.Rule")
        assert graph.has_class("archrules.infrastructure.importer.ast_importer.ASTImporter")

    @pytest.mark.parametrize(
        "outer",
        ["archrules.application.**", "archrules.infrastructure.**", "archrules.presentation.**"],
    )
    def test_domain_is_independent(self, graph: ArtifactGraph, outer: str) -> None:
        rule = (
            priority(Priority.HIGH)
            .no_classes()
            .that_reside_in_package("archrules.domain.**")
            .should(depend_on_classes_in_package(outer))
        )
        assert rule.check(graph).checked_count > 0

    def test_infrastructure_ignores_presentation(self, graph: ArtifactGraph) -> None:
        rule = (
            no_classes()
            .that_reside_in_package("archrules.infrastructure.**")
            .should(depend_on_classes_in_package("archrules.presentation.**"))
        )
        rule.check(graph)

    def test_importer_depends_on_port(self, graph: ArtifactGraph) -> None:
        rule = the_class(
            "archrules.infrastructure.importer.ast_importer.ASTImporter"
        ).should_depend_on_class("archrules.domain.ports.importer.ImporterPort")
        rule.check(graph)

    def test_reporters_live_in_reporters_package(self, graph: ArtifactGraph) -> None:
        rule = (
            classes()
            .that(has_simple_name_ending_with("Reporter"))
            .should_reside_in_package("archrules.application.reporters.*")
        )
        assert rule.check(graph).checked_count == 4

    def test_checker_reports_all_rules(self, graph: ArtifactGraph) -> None:
        rules = [
            no_classes()
            .that_reside_in_package("archrules.domain.**")
            .should(depend_on_classes_in_package("rich.**")),
            classes()
            .that_reside_in_package("archrules.application.services.**")
            .should(depend_on_classes_in_package("archrules.domain.**")),
        ]
        report = RuleChecker(rules).check(graph)
        assert report.passed
