"""Tests for domain/model/transformer.py."""

import pytest

from archrules.domain.exceptions.resolution import ResolutionError
from archrules.domain.exceptions.validation import RuleValidationError
from archrules.domain.model.artifact_graph import ArtifactGraph
from archrules.domain.model.description import Description
from archrules.domain.model.transformer import (
    FunctionTransformer,
    classes,
    qualified_name_of,
    single_element,
)
from archrules.domain.predicates.class_predicates import resides_in_package
from tests.factories import make_class, make_graph


class Handle:
    """Type used only as a naming handle."""


GRAPH = make_graph("a.domain.User", "a.infra.Repo", "a.domain.Order")


class TestClasses:
    """Tests for classes() transformer."""

    def test_selects_every_class_in_order(self) -> None:
        assert classes().apply(GRAPH) == GRAPH.classes

    def test_description(self) -> None:
        assert classes().description == "classes"
        assert str(classes()) == "classes"

    def test_empty_graph(self) -> None:
        assert classes().apply(ArtifactGraph.empty()) == ()

    def test_deterministic(self) -> None:
        assert classes().apply(GRAPH) == classes().apply(GRAPH)


class TestThatAndAs:
    """Tests for narrowing and renaming."""

    def test_that_filters(self) -> None:
        transformer = classes().that(resides_in_package("a.domain"))
        assert [c.name for c in transformer.apply(GRAPH)] == ["User", "Order"]

    def test_that_description(self) -> None:
        transformer = classes().that(resides_in_package("a.domain"))
        assert transformer.description == "classes that reside in package 'a.domain'"

    def test_as_renames_keeps_selection(self) -> None:
        transformer = classes().as_("all the classes")
        assert transformer.description == "all the classes"
        assert transformer.apply(GRAPH) == GRAPH.classes

    def test_as_empty_raises(self) -> None:
        with pytest.raises(RuleValidationError):
            classes().as_("")


class TestFunctionTransformer:
    """Tests for FunctionTransformer."""

    def test_function_result(self) -> None:
        names = FunctionTransformer(
            Description("class names"), lambda graph: (c.name for c in graph.classes)
        )
        assert names.apply(GRAPH) == ("User", "Repo", "Order")
        assert names.description == "class names"


class TestSingleElement:
    """Tests for single_element() transformer."""

    def test_resolves_through_graph(self) -> None:
        transformer = single_element("a.infra.Repo")
        assert transformer.apply(GRAPH) == (GRAPH.lookup("a.infra.Repo"),)
        assert transformer.description == "the class a.infra.Repo"

    def test_unknown_key_raises_on_apply(self) -> None:
        transformer = single_element("a.Missing")
        with pytest.raises(ResolutionError, match="a.Missing") as exc_info:
            transformer.apply(GRAPH)
        assert exc_info.value.key == "a.Missing"

    def test_unknown_key_raises_on_construction_with_graph(self) -> None:
        with pytest.raises(ResolutionError):
            single_element("a.Missing", graph=GRAPH)

    def test_known_key_with_graph(self) -> None:
        transformer = single_element("a.domain.User", graph=GRAPH)
        assert transformer.key == "a.domain.User"

    def test_type_handle_uses_name_only(self) -> None:
        key = f"{Handle.__module__}.Handle"
        graph = make_graph(make_class(key))
        assert single_element(Handle).apply(graph) == (graph.lookup(key),)

    def test_type_handle_absent_from_graph_raises(self) -> None:
        with pytest.raises(ResolutionError):
            single_element(Handle).apply(GRAPH)

    def test_description_override(self) -> None:
        transformer = single_element("a.infra.Repo", description="the repository")
        assert transformer.description == "the repository"


class TestQualifiedNameOf:
    """Tests for qualified_name_of()."""

    def test_str_is_stripped(self) -> None:
        assert qualified_name_of("  a.Foo ") == "a.Foo"

    def test_type(self) -> None:
        assert qualified_name_of(Handle) == f"{Handle.__module__}.Handle"

    @pytest.mark.parametrize("identifier", ["", "   "])
    def test_blank_raises(self, identifier: str) -> None:
        with pytest.raises(RuleValidationError, match="class identifier"):
            qualified_name_of(identifier)

    def test_other_type_raises(self) -> None:
        with pytest.raises(TypeError, match="must be str or type"):
            qualified_name_of(42)  # type: ignore[arg-type]
