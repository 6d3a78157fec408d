"""Tests for infrastructure/importer/module_names.py."""

from pathlib import Path

import pytest

from archrules.domain.exceptions.importing import ArtifactImportError
from archrules.infrastructure.importer.module_names import (
    compute_module_name,
    resolve_relative_import,
)

ROOT = Path("/project/src")


class TestComputeModuleName:
    """Tests for compute_module_name."""

    def test_module(self) -> None:
        assert compute_module_name(ROOT / "myapp" / "domain" / "user.py", ROOT) == "myapp.domain.user"

    def test_package_init(self) -> None:
        assert compute_module_name(ROOT / "myapp" / "__init__.py", ROOT) == "myapp"

    def test_outside_root_raises(self) -> None:
        with pytest.raises(ArtifactImportError, match="not under"):
            compute_module_name(Path("/elsewhere/x.py"), ROOT)

    def test_root_init_raises(self) -> None:
        with pytest.raises(ArtifactImportError, match="empty"):
            compute_module_name(ROOT / "__init__.py", ROOT)

    def test_invalid_identifier_raises(self) -> None:
        with pytest.raises(ArtifactImportError, match="not valid Python identifier"):
            compute_module_name(ROOT / "my-app" / "x.py", ROOT)


class TestResolveRelativeImport:
    """Tests for resolve_relative_import."""

    def test_absolute(self) -> None:
        assert resolve_relative_import("os.path", 0, "myapp.x") == "os.path"

    def test_sibling(self) -> None:
        assert resolve_relative_import("user", 1, "myapp.domain.order") == "myapp.domain.user"

    def test_parent(self) -> None:
        assert resolve_relative_import("infra", 2, "myapp.domain.order") == "myapp.infra"

    def test_bare_dot(self) -> None:
        assert resolve_relative_import(None, 1, "myapp.domain.order") == "myapp.domain"

    def test_inside_package_init(self) -> None:
        resolved = resolve_relative_import("user", 1, "myapp.domain", is_package=True)
        assert resolved == "myapp.domain.user"

    def test_beyond_top_level_raises(self) -> None:
        with pytest.raises(ValueError, match="exceeds package depth"):
            resolve_relative_import("x", 3, "myapp.domain")

    def test_absolute_without_module_raises(self) -> None:
        with pytest.raises(ValueError, match="absolute import must have module"):
            resolve_relative_import(None, 0, "myapp")
