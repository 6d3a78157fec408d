"""Tests for domain/model/description.py."""

import pytest

from archrules.domain.exceptions.validation import RuleValidationError
from archrules.domain.model.description import Description


class TestDescriptionCreation:
    """Tests for valid Description creation."""

    def test_text(self) -> None:
        assert str(Description("classes")) == "classes"

    def test_equality_by_text(self) -> None:
        assert Description("classes") == Description("classes")
        assert Description("classes") != Description("no classes")

    def test_of_passes_description_through(self) -> None:
        desc = Description("classes")
        assert Description.of(desc) is desc

    def test_of_wraps_str(self) -> None:
        assert Description.of("classes") == Description("classes")

    def test_is_frozen(self) -> None:
        desc = Description("classes")
        with pytest.raises(AttributeError):
            desc.text = "other"  # type: ignore[misc]


class TestDescriptionFailFirst:
    """Tests for FAIL-FIRST validation in Description."""

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_raises(self, text: str) -> None:
        with pytest.raises(RuleValidationError, match="description"):
            Description(text)

    def test_non_str_raises(self) -> None:
        with pytest.raises(TypeError, match="description must be str"):
            Description(42)  # type: ignore[arg-type]


class TestDescriptionComposition:
    """Tests for compose, prefixed and joined."""

    def test_compose_skips_empty_parts(self) -> None:
        assert str(Description.compose("", "no", "classes")) == "no classes"

    def test_compose_rule_text(self) -> None:
        desc = Description.compose("classes", "should", "depend on a.Bar")
        assert str(desc) == "classes should depend on a.Bar"

    def test_compose_strips_parts(self) -> None:
        assert str(Description.compose(" classes ", " that ", " x ")) == "classes that x"

    def test_prefixed(self) -> None:
        assert Description("depend on a.Bar").prefixed("never") == Description(
            "never depend on a.Bar"
        )

    def test_joined(self) -> None:
        joined = Description("reside in 'a'").joined("or", Description("reside in 'b'"))
        assert str(joined) == "reside in 'a' or reside in 'b'"

    def test_composition_does_not_mutate(self) -> None:
        base = Description("classes")
        base.prefixed("no")
        assert str(base) == "classes"
