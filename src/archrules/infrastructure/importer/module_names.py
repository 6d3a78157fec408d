"""Module name helpers for the AST importer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archrules.domain.exceptions.importing import ArtifactImportError

if TYPE_CHECKING:
    from pathlib import Path


def compute_module_name(file_path: Path, root_path: Path) -> str:
    """Compute fully qualified module name from file path.

    Args:
        file_path: Path to .py file
        root_path: Directory module names are relative to

    Returns:
        Dotted module name ("pkg/sub/__init__.py" -> "pkg.sub")

    Raises:
        ArtifactImportError: If path is outside root or not importable
    """
    try:
        relative = file_path.relative_to(root_path)
    except ValueError as e:
        raise ArtifactImportError(file_path, f"not under {root_path}") from e

    parts = list(relative.with_suffix("").parts)
    if parts and parts[-1] == "__init__":
        parts = parts[:-1]

    if not parts:
        raise ArtifactImportError(file_path, "cannot determine module name (empty)")
    for part in parts:
        if not part.isidentifier():
            raise ArtifactImportError(file_path, f"'{part}' is not valid Python identifier")

    return ".".join(parts)


def resolve_relative_import(
    node_module: str | None,
    node_level: int,
    current_module: str,
    *,
    is_package: bool = False,
) -> str:
    """Resolve "from .x import y" to an absolute module path.

    Args:
        node_module: Module part of import (after dots)
        node_level: Number of dots (0=absolute)
        current_module: Importing module's qualified name
        is_package: Importing module is a package __init__

    Raises:
        ValueError: If relative import escapes top-level package
    """
    if node_level == 0:
        if node_module is None:
            raise ValueError("absolute import must have module")
        return node_module

    parts = current_module.split(".")
    # inside pkg/__init__.py "." is pkg itself
    drop = node_level - 1 if is_package else node_level
    if drop >= len(parts):
        raise ValueError(
            f"relative import level {node_level} exceeds package depth of module '{current_module}'"
        )

    base_parts = parts[: len(parts) - drop]
    if node_module:
        return ".".join([*base_parts, node_module])
    return ".".join(base_parts)
