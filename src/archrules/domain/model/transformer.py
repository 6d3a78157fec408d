"""Transformers: select the elements a rule is about.

A transformer is a pure function from the artifact graph to an ordered
tuple of elements, paired with a description ("classes",
"the class myapp.domain.User", "classes that reside in package 'x'").
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from archrules.domain.exceptions.resolution import ResolutionError
from archrules.domain.exceptions.validation import RuleValidationError
from archrules.domain.model.description import Description

if TYPE_CHECKING:
    from archrules.domain.model.artifact_graph import ArtifactGraph
    from archrules.domain.model.code_class import CodeClass
    from archrules.domain.predicates.base import DescribedPredicate

logger = logging.getLogger(__name__)


class Transformer[T](ABC):
    """Selects elements of interest from an artifact graph.

    Subclasses implement description and do_transform(). apply() must be
    deterministic and must not mutate the graph.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def description(self) -> str:
        """Plural description of the selection ("classes")."""
        ...

    @abstractmethod
    def do_transform(self, graph: ArtifactGraph) -> Iterable[T]:
        """Produce elements from graph."""
        ...

    def apply(self, graph: ArtifactGraph) -> tuple[T, ...]:
        """Select elements from graph.

        Args:
            graph: Imported artifact graph

        Returns:
            Elements in deterministic order

        Raises:
            ResolutionError: If a requested element does not exist
        """
        return tuple(self.do_transform(graph))

    def as_(self, description: str | Description) -> Transformer[T]:
        """Same selection, replaced description."""
        return RenamedTransformer(self, Description.of(description))

    def that(self, predicate: DescribedPredicate[T]) -> Transformer[T]:
        """Keep only elements matching predicate."""
        return FilteredTransformer(self, predicate)

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class FunctionTransformer[T](Transformer[T]):
    """Transformer backed by a plain function."""

    label: Description
    function: Callable[[ArtifactGraph], Iterable[T]]

    @property
    def description(self) -> str:
        return str(self.label)

    def do_transform(self, graph: ArtifactGraph) -> Iterable[T]:
        return self.function(graph)


@dataclass(frozen=True, slots=True)
class RenamedTransformer[T](Transformer[T]):
    """Delegates selection, reports another description."""

    transformer: Transformer[T]
    label: Description

    @property
    def description(self) -> str:
        return str(self.label)

    def do_transform(self, graph: ArtifactGraph) -> Iterable[T]:
        return self.transformer.do_transform(graph)


@dataclass(frozen=True, slots=True)
class FilteredTransformer[T](Transformer[T]):
    """Selection narrowed by a predicate ("classes that ...")."""

    transformer: Transformer[T]
    predicate: DescribedPredicate[T]

    @property
    def description(self) -> str:
        return str(Description.compose(self.transformer.description, "that", self.predicate.label))

    def do_transform(self, graph: ArtifactGraph) -> Iterable[T]:
        return (item for item in self.transformer.do_transform(graph) if self.predicate(item))


@dataclass(frozen=True, slots=True)
class SingleElementTransformer(Transformer["CodeClass"]):
    """Selects exactly one class by qualified name.

    Resolution goes through ArtifactGraph.lookup only. A key that does
    not resolve raises ResolutionError; it never yields an empty selection.

    Attributes:
        key: Qualified name to resolve
        label: Description ("the class myapp.Foo")
    """

    key: str
    label: Description

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.key or not self.key.strip():
            raise RuleValidationError("class identifier", "must not be empty")

    @property
    def description(self) -> str:
        return str(self.label)

    def resolve(self, graph: ArtifactGraph) -> CodeClass:
        """Look up the element.

        Raises:
            ResolutionError: If key is not in graph
        """
        element = graph.lookup(self.key)
        if element is None:
            raise ResolutionError(self.key)
        logger.debug("Resolved '%s' in artifact graph", self.key)
        return element

    def do_transform(self, graph: ArtifactGraph) -> Iterable[CodeClass]:
        return (self.resolve(graph),)


def _all_classes(graph: ArtifactGraph) -> Iterable[CodeClass]:
    return graph.classes


_CLASSES: FunctionTransformer[CodeClass] = FunctionTransformer(Description("classes"), _all_classes)


def classes() -> Transformer[CodeClass]:
    """Identity transformer over all classes of the graph."""
    return _CLASSES


def qualified_name_of(identifier: str | type) -> str:
    """Turn a class identifier into a lookup key.

    A Python type is only used as a naming handle; nothing is loaded.

    Raises:
        RuleValidationError: If identifier is an empty string
        TypeError: If identifier is neither str nor type
    """
    if isinstance(identifier, type):
        return f"{identifier.__module__}.{identifier.__qualname__}"
    if not isinstance(identifier, str):
        raise TypeError(f"class identifier must be str or type, got {type(identifier).__name__}")
    if not identifier.strip():
        raise RuleValidationError("class identifier", "must not be empty")
    return identifier.strip()


def single_element(
    identifier: str | type,
    *,
    graph: ArtifactGraph | None = None,
    description: str | Description | None = None,
) -> SingleElementTransformer:
    """Create transformer selecting one class.

    Args:
        identifier: Qualified name or type used as naming handle
        graph: If given, resolve now (construction fails on unknown key)
        description: Override for "the class <key>"

    Raises:
        ResolutionError: If graph is given and key does not resolve
    """
    key = qualified_name_of(identifier)
    label = Description.of(description) if description is not None else Description(f"the class {key}")
    transformer = SingleElementTransformer(key, label)
    if graph is not None:
        transformer.resolve(graph)
    return transformer
