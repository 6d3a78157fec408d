"""Conditions and condition combinators.

A condition evaluates one element and records events: one per finding,
each either satisfied or violated. Violations are what fails a rule;
satisfied events are kept so that negation can turn them into precise
violation messages.

Combinators (never, and_, or_) are immutable wrappers. They redescribe
the result and hold no state between calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from archrules.domain.exceptions.validation import RuleValidationError
from archrules.domain.model.description import Description
from archrules.domain.model.violation import Violation, describe_subject

if TYPE_CHECKING:
    from archrules.domain.predicates.base import DescribedPredicate


@dataclass(frozen=True, slots=True)
class ConditionEvent[T]:
    """Single finding of a condition for one element.

    Attributes:
        subject: Element the finding is about
        satisfied: True if the element satisfies the condition here
        message: Human-readable finding
    """

    subject: T
    satisfied: bool
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")


class ConditionEvents[T]:
    """Events collected while evaluating one element.

    Local to a single check() call, never shared between calls.
    """

    __slots__ = ("_events",)

    def __init__(self) -> None:
        self._events: list[ConditionEvent[T]] = []

    def add(self, event: ConditionEvent[T]) -> None:
        """Record event."""
        self._events.append(event)

    def satisfied(self, subject: T, message: str) -> None:
        """Record satisfied finding."""
        self.add(ConditionEvent(subject, True, message))

    def violated(self, subject: T, message: str) -> None:
        """Record violated finding."""
        self.add(ConditionEvent(subject, False, message))

    @property
    def violations(self) -> tuple[ConditionEvent[T], ...]:
        """Violated events in record order."""
        return tuple(e for e in self._events if not e.satisfied)

    @property
    def satisfied_events(self) -> tuple[ConditionEvent[T], ...]:
        """Satisfied events in record order."""
        return tuple(e for e in self._events if e.satisfied)

    @property
    def has_violation(self) -> bool:
        """True if any event is violated."""
        return any(not e.satisfied for e in self._events)

    def __iter__(self) -> Iterator[ConditionEvent[T]]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)


class Condition[T](ABC):
    """Named predicate over a single element.

    Subclasses implement description and evaluate(). check() is the
    entry point used by rules; it must not be overridden to swallow
    errors: an exception raised by evaluate() propagates.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def description(self) -> str:
        """Plural-verb description ("depend on x")."""
        ...

    @abstractmethod
    def evaluate(self, item: T, events: ConditionEvents[T]) -> None:
        """Record satisfied/violated events for item.

        Args:
            item: Element to evaluate
            events: Collector for findings
        """
        ...

    def events_for(self, item: T) -> ConditionEvents[T]:
        """Evaluate item into a fresh event collector."""
        events: ConditionEvents[T] = ConditionEvents()
        self.evaluate(item, events)
        return events

    def check(self, item: T) -> tuple[Violation[T], ...]:
        """Evaluate item and return its violations.

        Duplicate violations are reported once; order is preserved.

        Args:
            item: Element to check

        Returns:
            Violations (empty if item satisfies condition)
        """
        violations: list[Violation[T]] = []
        for event in self.events_for(item).violations:
            violation = Violation(event.message, event.subject)
            if violation not in violations:
                violations.append(violation)
        return tuple(violations)

    def as_(self, description: str | Description) -> Condition[T]:
        """Same checks, replaced description."""
        return DescribedCondition(self, Description.of(description))

    def and_(self, other: Condition[T]) -> Condition[T]:
        """Conjunction with other."""
        return and_(self, other)

    def or_(self, other: Condition[T]) -> Condition[T]:
        """Disjunction with other."""
        return or_(self, other)

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True, slots=True)
class DescribedCondition[T](Condition[T]):
    """Condition with an overridden description."""

    condition: Condition[T]
    label: Description

    @property
    def description(self) -> str:
        return str(self.label)

    def evaluate(self, item: T, events: ConditionEvents[T]) -> None:
        self.condition.evaluate(item, events)


@dataclass(frozen=True, slots=True)
class NeverCondition[T](Condition[T]):
    """Negation of a condition, per element.

    An element violates exactly when the wrapped condition reports no
    violation for it. The single violation reuses the wrapped condition's
    satisfied findings as message, so "Class <a.Foo> depends on <a.Bar>"
    becomes the reason why "never depend on a.Bar" failed.
    """

    condition: Condition[T]

    @property
    def description(self) -> str:
        return str(Description.of(self.condition.description).prefixed("never"))

    def evaluate(self, item: T, events: ConditionEvents[T]) -> None:
        inner = self.condition.events_for(item)
        if inner.has_violation:
            for event in inner.violations:
                events.satisfied(event.subject, event.message)
            return

        messages = [e.message for e in inner.satisfied_events]
        if not messages:
            messages = [f"{describe_subject(item)} satisfies '{self.condition.description}'"]
        events.violated(item, "; ".join(messages))


@dataclass(frozen=True, slots=True)
class AndCondition[T](Condition[T]):
    """All conditions must hold; violations are the union."""

    conditions: tuple[Condition[T], ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.conditions) < 2:
            raise RuleValidationError("and condition", "requires at least two conditions")

    @property
    def description(self) -> str:
        return " and ".join(c.description for c in self.conditions)

    def evaluate(self, item: T, events: ConditionEvents[T]) -> None:
        for condition in self.conditions:
            condition.evaluate(item, events)


@dataclass(frozen=True, slots=True)
class OrCondition[T](Condition[T]):
    """At least one condition must hold.

    An element violates only if every alternative reports a violation;
    the single violation joins their messages.
    """

    conditions: tuple[Condition[T], ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.conditions) < 2:
            raise RuleValidationError("or condition", "requires at least two conditions")

    @property
    def description(self) -> str:
        return " or ".join(c.description for c in self.conditions)

    def evaluate(self, item: T, events: ConditionEvents[T]) -> None:
        alternatives = [c.events_for(item) for c in self.conditions]
        passing = [alt for alt in alternatives if not alt.has_violation]

        if passing:
            for alt in passing:
                for event in alt.satisfied_events:
                    events.add(event)
            return

        messages = [e.message for alt in alternatives for e in alt.violations]
        events.violated(item, " and ".join(messages))


@dataclass(frozen=True, slots=True)
class PredicateCondition[T](Condition[T]):
    """Condition lifted from a described predicate.

    Findings use the predicate's own wording ("Class <a.Foo> resides in
    package 'a'"), or "satisfies '<description>'" when it has none.
    """

    predicate: DescribedPredicate[T]

    @property
    def description(self) -> str:
        return self.predicate.description

    def evaluate(self, item: T, events: ConditionEvents[T]) -> None:
        subject = describe_subject(item)
        predicate = self.predicate
        if predicate(item):
            finding = predicate.holds or f"satisfies '{predicate.description}'"
            events.satisfied(item, f"{subject} {finding}")
        else:
            finding = predicate.fails or f"does not satisfy '{predicate.description}'"
            events.violated(item, f"{subject} {finding}")


def never[T](condition: Condition[T]) -> Condition[T]:
    """Negate condition per element ("never <condition>")."""
    return NeverCondition(condition)


def and_[T](*conditions: Condition[T]) -> Condition[T]:
    """Conjunction: violations of every condition."""
    return AndCondition(tuple(conditions))


def or_[T](*conditions: Condition[T]) -> Condition[T]:
    """Disjunction: violation only if no alternative holds."""
    return OrCondition(tuple(conditions))


def satisfy[T](predicate: DescribedPredicate[T]) -> Condition[T]:
    """Condition that holds where predicate holds."""
    return PredicateCondition(predicate)
