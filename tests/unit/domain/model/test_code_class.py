"""Tests for domain/model/code_class.py and location.py."""

from pathlib import Path

import pytest

from archrules.domain.model.code_class import CodeClass
from archrules.domain.model.location import SourceLocation


class TestCodeClassCreation:
    """Tests for valid CodeClass creation."""

    def test_of_splits_qualified_name(self) -> None:
        cls = CodeClass.of("myapp.domain.User")
        assert cls.name == "User"
        assert cls.module == "myapp.domain"
        assert cls.qualified_name == "myapp.domain.User"
        assert cls.bases == ()
        assert cls.dependencies == ()
        assert cls.location is None

    def test_depends_on(self) -> None:
        cls = CodeClass.of("a.Foo", dependencies=("a.Bar",))
        assert cls.depends_on("a.Bar")
        assert not cls.depends_on("a.Baz")

    def test_describe_without_location(self) -> None:
        assert CodeClass.of("a.Foo").describe() == "Class <a.Foo>"

    def test_describe_with_location(self) -> None:
        cls = CodeClass.of("a.Foo", location=SourceLocation(Path("/src/a.py"), 3))
        assert cls.describe() == "Class <a.Foo> in (a.py:3)"


class TestCodeClassFailFirst:
    """Tests for FAIL-FIRST validation in CodeClass."""

    def test_of_without_module_raises(self) -> None:
        with pytest.raises(ValueError, match="must contain a module"):
            CodeClass.of("Foo")

    def test_mismatched_qualified_name_raises(self) -> None:
        with pytest.raises(ValueError, match="must be 'a.Foo'"):
            CodeClass(name="Foo", qualified_name="b.Foo", module="a")

    def test_self_dependency_raises(self) -> None:
        with pytest.raises(ValueError, match="must not depend on itself"):
            CodeClass.of("a.Foo", dependencies=("a.Foo",))

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="class name must not be empty"):
            CodeClass(name="", qualified_name="a.", module="a")


class TestSourceLocation:
    """Tests for SourceLocation."""

    def test_str(self) -> None:
        assert str(SourceLocation(Path("/x/y/mod.py"), 10)) == "(mod.py:10)"

    def test_non_positive_line_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be > 0"):
            SourceLocation(Path("mod.py"), 0)
