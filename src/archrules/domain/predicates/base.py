"""Described predicates.

A predicate paired with a description, so that selections read as
"classes that reside in package 'x'" in rule text.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace

from archrules.domain.model.description import Description


@dataclass(frozen=True, slots=True)
class DescribedPredicate[T]:
    """Boolean test over elements, with a plural-verb description.

    Attributes:
        label: Description ("reside in package 'x'")
        test: Predicate function
        holds: Finding when test passes ("resides in package 'x'")
        fails: Finding when test fails ("does not reside in package 'x'")
    """

    label: Description
    test: Callable[[T], bool]
    holds: str | None = None
    fails: str | None = None

    @property
    def description(self) -> str:
        """Description text."""
        return str(self.label)

    def __call__(self, item: T) -> bool:
        return self.test(item)

    def as_(self, description: str | Description) -> DescribedPredicate[T]:
        """Same test, replaced description and generic findings."""
        return replace(self, label=Description.of(description), holds=None, fails=None)

    def and_(self, other: DescribedPredicate[T]) -> DescribedPredicate[T]:
        """Both predicates hold."""
        first, second = self.test, other.test
        return DescribedPredicate(
            self.label.joined("and", other.label),
            lambda item: first(item) and second(item),
        )

    def or_(self, other: DescribedPredicate[T]) -> DescribedPredicate[T]:
        """At least one predicate holds."""
        first, second = self.test, other.test
        return DescribedPredicate(
            self.label.joined("or", other.label),
            lambda item: first(item) or second(item),
        )


def describe[T](
    description: str,
    test: Callable[[T], bool],
    *,
    holds: str | None = None,
    fails: str | None = None,
) -> DescribedPredicate[T]:
    """Create predicate from description and test function.

    Args:
        description: Plural-verb description ("reside in package 'x'")
        test: Predicate function
        holds: Third-person finding when test passes
        fails: Third-person finding when test fails
    """
    return DescribedPredicate(Description.of(description), test, holds, fails)


def not_[T](predicate: DescribedPredicate[T]) -> DescribedPredicate[T]:
    """Negate predicate; description becomes "not <predicate>".

    Findings of predicate are swapped.
    """
    test = predicate.test
    return DescribedPredicate(
        predicate.label.prefixed("not"),
        lambda item: not test(item),
        holds=predicate.fails,
        fails=predicate.holds,
    )
