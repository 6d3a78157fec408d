"""AST-based importer adapter.

Implements ImporterPort for Python source trees. Source files are
parsed with ast, never executed or imported.
"""

from __future__ import annotations

import ast
import logging
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from archrules.domain.exceptions.importing import ArtifactImportError
from archrules.domain.model.artifact_graph import ArtifactGraph
from archrules.domain.model.code_class import CodeClass
from archrules.domain.model.location import SourceLocation
from archrules.domain.ports.importer import ImporterPort
from archrules.infrastructure.importer.module_names import (
    compute_module_name,
    resolve_relative_import,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


class ASTImporter(ImporterPort):
    """Importer using Python AST to extract classes and dependencies.

    Records every top-level class with its bases and the qualified names
    referenced in its body, resolved through the module's imports.
    Names that resolve to nothing (builtins, locals) are ignored.

    Stateless between import_from() calls.
    FAIL-FIRST: raises ArtifactImportError on any unreadable source.
    """

    def __init__(self, root_path: Path) -> None:
        """Initialize importer.

        Args:
            root_path: Directory module names are computed relative to

        Raises:
            TypeError: If root_path is None
        """
        if root_path is None:
            raise TypeError("root_path must not be None")
        self._root_path = root_path

    def import_from(self, sources: Iterable[Path]) -> ArtifactGraph:
        """Import files and directories into one graph.

        Directories are walked recursively in sorted order, skipping
        __pycache__. A file reached twice is imported once.

        Raises:
            ArtifactImportError: If a source is missing or cannot be parsed
        """
        seen: set[Path] = set()
        classes: list[CodeClass] = []

        for source in sources:
            for path in _python_files(source):
                if path in seen:
                    continue
                seen.add(path)
                classes.extend(self.import_file(path))

        known = frozenset(c.qualified_name for c in classes)
        try:
            graph = ArtifactGraph.from_classes(_link_to_known(c, known) for c in classes)
        except ValueError as e:
            raise ArtifactImportError(self._root_path, str(e)) from e

        logger.info("Imported %d class(es) from %d file(s)", len(graph), len(seen))
        return graph

    def import_file(self, path: Path) -> tuple[CodeClass, ...]:
        """Import top-level classes of one file.

        Raises:
            ArtifactImportError: If file cannot be read or parsed
        """
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ArtifactImportError(path, "file not found") from e
        except PermissionError as e:
            raise ArtifactImportError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ArtifactImportError(path, f"encoding error: {e}") from e

        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ArtifactImportError(path, f"syntax error: {e}") from e

        module_name = compute_module_name(path, self._root_path)
        names = _build_name_table(tree, path, module_name)

        classes = tuple(
            _to_code_class(node, path, module_name, names)
            for node in tree.body
            if isinstance(node, ast.ClassDef)
        )
        logger.debug("Parsed %s: %d class(es)", module_name, len(classes))
        return classes


def _owning_class(dependency: str, known: frozenset[str]) -> str:
    """Longest prefix of dependency naming a known class, else dependency.

    "app.infra.Db.connect" becomes "app.infra.Db" when Db was imported.
    """
    candidate = dependency
    while candidate:
        if candidate in known:
            return candidate
        candidate = candidate.rpartition(".")[0]
    return dependency


def _link_to_known(code_class: CodeClass, known: frozenset[str]) -> CodeClass:
    """Point attribute references (Db.connect, mod.Db.CONST) at their class."""
    linked = dict.fromkeys(_owning_class(dep, known) for dep in code_class.dependencies)
    linked.pop(code_class.qualified_name, None)
    dependencies = tuple(linked)
    if dependencies == code_class.dependencies:
        return code_class
    return replace(code_class, dependencies=dependencies)


def _python_files(source: Path) -> Iterator[Path]:
    if not source.exists():
        raise ArtifactImportError(source, "does not exist")

    if source.is_file():
        if source.suffix != ".py":
            raise ArtifactImportError(source, "not a Python source file")
        yield source
        return

    for path in sorted(source.rglob("*.py")):
        if "__pycache__" in path.parts:
            continue
        yield path


def _build_name_table(tree: ast.Module, path: Path, module_name: str) -> dict[str, str]:
    """Map names bound in module to qualified names.

    Covers imports anywhere in the module (including TYPE_CHECKING
    blocks and function bodies) and top-level classes and functions.
    """
    is_package = path.name == "__init__.py"
    names: dict[str, str] = {}

    for node in ast.walk(tree):
        match node:
            case ast.Import(names=aliases):
                for alias in aliases:
                    if alias.asname:
                        names[alias.asname] = alias.name
                    else:
                        root = alias.name.split(".", 1)[0]
                        names[root] = root

            case ast.ImportFrom(module=module, level=level, names=aliases):
                try:
                    resolved = resolve_relative_import(
                        module, level, module_name, is_package=is_package
                    )
                except ValueError as e:
                    raise ArtifactImportError(path, str(e)) from e
                for alias in aliases:
                    if alias.name == "*":
                        continue
                    names[alias.asname or alias.name] = f"{resolved}.{alias.name}"

    for node in tree.body:
        if isinstance(node, ast.ClassDef | ast.FunctionDef | ast.AsyncFunctionDef):
            names[node.name] = f"{module_name}.{node.name}"

    return names


def _dotted_name(node: ast.expr) -> str | None:
    """Return "a.b.c" for Name/Attribute chains, None otherwise."""
    match node:
        case ast.Name(id=name):
            return name
        case ast.Attribute(value=value, attr=attr):
            base = _dotted_name(value)
            return f"{base}.{attr}" if base is not None else None
        case _:
            return None


def _resolve(dotted: str, names: dict[str, str]) -> str | None:
    root, _, rest = dotted.partition(".")
    target = names.get(root)
    if target is None:
        return None
    return f"{target}.{rest}" if rest else target


class _ReferenceCollector(ast.NodeVisitor):
    """Collects dotted names referenced in a class, outermost chain only."""

    def __init__(self) -> None:
        self.references: list[str] = []

    def visit_Name(self, node: ast.Name) -> None:
        self.references.append(node.id)

    def visit_Attribute(self, node: ast.Attribute) -> None:
        dotted = _dotted_name(node)
        if dotted is None:
            self.generic_visit(node)
        else:
            self.references.append(dotted)


def _to_code_class(
    node: ast.ClassDef,
    path: Path,
    module_name: str,
    names: dict[str, str],
) -> CodeClass:
    qualified_name = f"{module_name}.{node.name}"

    bases: list[str] = []
    for base in node.bases:
        dotted = _dotted_name(base)
        if dotted is None:
            bases.append(ast.unparse(base))
        else:
            bases.append(_resolve(dotted, names) or dotted)

    collector = _ReferenceCollector()
    collector.visit(node)
    resolved = (_resolve(ref, names) for ref in collector.references)
    dependencies = tuple(
        dict.fromkeys(
            dep
            for dep in resolved
            if dep is not None
            and dep != qualified_name
            and not dep.startswith(f"{qualified_name}.")
        )
    )

    return CodeClass(
        name=node.name,
        qualified_name=qualified_name,
        module=module_name,
        bases=tuple(bases),
        dependencies=dependencies,
        location=SourceLocation(file=path, line=node.lineno),
    )
