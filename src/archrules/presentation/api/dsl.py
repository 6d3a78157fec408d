"""Fluent API (DSL) for defining architecture rules.

Entry points assemble a transformer and a priority into a given stage;
should(...) turns it into a Rule. "no" entry points rename the selection
and negate the eventual condition per element.

Example:
    rule = (
        no_classes()
        .that_reside_in_package("myapp.domain.**")
        .should(depend_on_classes_in_package("myapp.infrastructure.**"))
    )
    rule.check(graph)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Self

from archrules.application.conditions.class_conditions import (
    depend_on_class,
    reside_in_package,
)
from archrules.domain.model.condition import Condition, never
from archrules.domain.model.description import Description
from archrules.domain.model.priority import Priority
from archrules.domain.model.rule import Rule
from archrules.domain.model.transformer import SingleElementTransformer, qualified_name_of
from archrules.domain.model.transformer import classes as all_classes
from archrules.domain.predicates.class_predicates import resides_in_package

if TYPE_CHECKING:
    from archrules.domain.model.code_class import CodeClass
    from archrules.domain.model.transformer import Transformer
    from archrules.domain.predicates.base import DescribedPredicate


def keep_condition[T](condition: Condition[T]) -> Condition[T]:
    """Condition preparer for "all"/"classes" rules."""
    return condition


def negate_condition[T](condition: Condition[T]) -> Condition[T]:
    """Condition preparer for "no" rules.

    Keeps the caller's positive description so the rule reads
    "no classes should depend on x".
    """
    return never(condition).as_(condition.description)


@dataclass(frozen=True, slots=True)
class GivenObjects[T]:
    """Selected elements waiting for a condition.

    Attributes:
        priority: Priority of the eventual rule
        transformer: Selection
        prepare_condition: Applied to the condition passed to should()
    """

    priority: Priority
    transformer: Transformer[T]
    prepare_condition: Callable[[Condition[T]], Condition[T]] = keep_condition

    def that(self, predicate: DescribedPredicate[T]) -> Self:
        """Narrow selection ("classes that <predicate>")."""
        return replace(self, transformer=self.transformer.that(predicate))

    def should(self, condition: Condition[T]) -> Rule[T]:
        """Bind condition and build rule."""
        return Rule(
            priority=self.priority,
            transformer=self.transformer,
            condition=self.prepare_condition(condition),
        )


@dataclass(frozen=True, slots=True)
class _GivenCodeClasses(GivenObjects["CodeClass"]):
    """Condition shortcuts shared by class stages."""

    def should_depend_on_class(self, identifier: str | type) -> Rule[CodeClass]:
        """Shortcut for should(depend_on_class(identifier))."""
        return self.should(depend_on_class(identifier))

    def should_reside_in_package(self, pattern: str) -> Rule[CodeClass]:
        """Shortcut for should(reside_in_package(pattern))."""
        return self.should(reside_in_package(pattern))


@dataclass(frozen=True, slots=True)
class GivenClasses(_GivenCodeClasses):
    """Selected classes waiting for a condition."""

    def that_reside_in_package(self, pattern: str) -> GivenClasses:
        """Narrow to classes whose module matches package glob."""
        return self.that(resides_in_package(pattern))


@dataclass(frozen=True, slots=True)
class GivenClass(_GivenCodeClasses):
    """One class waiting for a condition."""


@dataclass(frozen=True, slots=True)
class Creator:
    """Builds given stages with a fixed priority.

    Every method is side-effect free: no I/O, no caching, no lookup.
    """

    priority: Priority

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.priority, Priority):
            raise TypeError(f"priority must be Priority, got {type(self.priority).__name__}")

    def classes(self) -> GivenClasses:
        """All classes."""
        return GivenClasses(self.priority, all_classes())

    def no_classes(self) -> GivenClasses:
        """No class; the eventual condition is negated per class."""
        return GivenClasses(
            self.priority,
            all_classes().as_("no classes"),
            negate_condition,
        )

    def all_[T](self, transformer: Transformer[T]) -> GivenObjects[T]:
        """All elements selected by transformer."""
        return GivenObjects(self.priority, transformer)

    def no[T](self, transformer: Transformer[T]) -> GivenObjects[T]:
        """No element selected by transformer; negates the eventual condition.

        The selection is renamed once, here, from its current description.
        """
        renamed = transformer.as_(Description.of(transformer.description).prefixed("no"))
        return GivenObjects(self.priority, renamed, negate_condition)

    def the_class(self, identifier: str | type) -> GivenClass:
        """Exactly one class, resolved through the graph at evaluation.

        Args:
            identifier: Qualified name, or a type used only for its name

        Raises:
            RuleValidationError: If identifier is empty
        """
        key = qualified_name_of(identifier)
        return GivenClass(
            self.priority,
            SingleElementTransformer(key, Description(f"the class {key}")),
        )

    def no_class(self, identifier: str | type) -> GivenClass:
        """Exactly one class that must not satisfy the eventual condition."""
        key = qualified_name_of(identifier)
        return GivenClass(
            self.priority,
            SingleElementTransformer(key, Description(f"no class {key}")),
            negate_condition,
        )


def priority(p: Priority) -> Creator:
    """Start rule with given priority."""
    return Creator(p)


def classes() -> GivenClasses:
    """All classes, MEDIUM priority."""
    return priority(Priority.MEDIUM).classes()


def no_classes() -> GivenClasses:
    """No class, MEDIUM priority."""
    return priority(Priority.MEDIUM).no_classes()


def all_[T](transformer: Transformer[T]) -> GivenObjects[T]:
    """All elements of transformer, MEDIUM priority."""
    return priority(Priority.MEDIUM).all_(transformer)


def no[T](transformer: Transformer[T]) -> GivenObjects[T]:
    """No element of transformer, MEDIUM priority."""
    return priority(Priority.MEDIUM).no(transformer)


def the_class(identifier: str | type) -> GivenClass:
    """Exactly one class, MEDIUM priority."""
    return priority(Priority.MEDIUM).the_class(identifier)


def no_class(identifier: str | type) -> GivenClass:
    """Exactly one class that must not satisfy condition, MEDIUM priority."""
    return priority(Priority.MEDIUM).no_class(identifier)
