"""Artifact graph: the imported universe of classes."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from archrules.domain.model.graph import DiGraph

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from archrules.domain.model.code_class import CodeClass


@dataclass(frozen=True, slots=True)
class ArtifactGraph:
    """Immutable set of imported classes and their dependencies.

    Built once by an importer; shared read-only by every rule.
    Dependency edges only connect classes present in the graph.

    Attributes:
        classes: All classes in import order
        dependencies: Class dependency graph (qualified names)
    """

    classes: tuple[CodeClass, ...]
    dependencies: DiGraph[str]
    _index: Mapping[str, CodeClass] = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self._index) != len(self.classes):
            raise ValueError("duplicate qualified names in artifact graph")
        for cls in self.classes:
            if self._index.get(cls.qualified_name) is not cls:
                raise ValueError(f"class '{cls.qualified_name}' missing from index")
        if self.dependencies.nodes != frozenset(self._index):
            raise ValueError("dependency graph nodes must match graph classes")

    @classmethod
    def from_classes(cls, classes: Iterable[CodeClass]) -> ArtifactGraph:
        """Build graph from classes.

        Raises:
            ValueError: If two classes share a qualified name
        """
        ordered = tuple(classes)
        index: dict[str, CodeClass] = {}
        for code_class in ordered:
            if code_class.qualified_name in index:
                raise ValueError(f"class '{code_class.qualified_name}' imported twice")
            index[code_class.qualified_name] = code_class

        edges = (
            (code_class.qualified_name, dep)
            for code_class in ordered
            for dep in code_class.dependencies
            if dep in index
        )
        return cls(
            classes=ordered,
            dependencies=DiGraph.from_edges(edges, extra_nodes=index),
            _index=MappingProxyType(index),
        )

    @classmethod
    def of(cls, *classes: CodeClass) -> ArtifactGraph:
        """Build graph from positional classes."""
        return cls.from_classes(classes)

    @classmethod
    def empty(cls) -> ArtifactGraph:
        """Graph without classes."""
        return cls.from_classes(())

    def lookup(self, key: str) -> CodeClass | None:
        """Find class by qualified name. Returns None if absent."""
        return self._index.get(key)

    def has_class(self, key: str) -> bool:
        """Check if class is in graph. O(1)."""
        return key in self._index

    def dependencies_of(self, key: str) -> frozenset[str]:
        """Classes of this graph that key depends on."""
        return self.dependencies.successors(key)

    def dependents_of(self, key: str) -> frozenset[str]:
        """Classes of this graph that depend on key."""
        return self.dependencies.predecessors(key)

    def __iter__(self) -> Iterator[CodeClass]:
        return iter(self.classes)

    def __len__(self) -> int:
        return len(self.classes)
