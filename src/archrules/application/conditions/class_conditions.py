"""Class conditions.

Each condition records satisfied findings as well as violations, so
that never(...) reports what was actually found ("Class <a.Foo>
depends on <a.Bar>"). Elements that are not classes are reported as
violations instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass

from archrules.domain.model.code_class import CodeClass
from archrules.domain.model.condition import Condition, ConditionEvents, satisfy
from archrules.domain.model.transformer import qualified_name_of
from archrules.domain.model.violation import describe_subject
from archrules.domain.predicates.class_predicates import (
    has_fully_qualified_name,
    has_simple_name_ending_with,
    resides_in_package,
)
from archrules.domain.predicates.patterns import CompiledPattern, compile_pattern


def _not_a_class(item: object, events: ConditionEvents[CodeClass]) -> bool:
    """Record violation for non-class input. Returns True if reported."""
    if isinstance(item, CodeClass):
        return False
    events.violated(item, f"{describe_subject(item)} is not a class")  # type: ignore[arg-type]
    return True


@dataclass(frozen=True, slots=True)
class DependOnClassCondition(Condition[CodeClass]):
    """Class refers to target.

    A class never depends on itself: whether the target class should
    count as satisfying is a decision of the rule author, expressed by
    composing with have_fully_qualified_name(target).

    Attributes:
        target: Qualified name of required dependency
    """

    target: str

    @property
    def description(self) -> str:
        return f"depend on {self.target}"

    def evaluate(self, item: CodeClass, events: ConditionEvents[CodeClass]) -> None:
        if _not_a_class(item, events):
            return
        if item.depends_on(self.target):
            events.satisfied(item, f"{item.describe()} depends on <{self.target}>")
        else:
            events.violated(item, f"{item.describe()} does not depend on <{self.target}>")


@dataclass(frozen=True, slots=True)
class DependOnPackageCondition(Condition[CodeClass]):
    """Class refers to something in a package.

    The pattern is matched against the package of each dependency
    ("myapp.infra" for "myapp.infra.Db"), as resides_in_package matches
    a class module. One satisfied finding is recorded per matching
    dependency.

    Attributes:
        pattern: Package glob of required dependencies
    """

    pattern: CompiledPattern

    @property
    def description(self) -> str:
        return f"depend on classes in package '{self.pattern}'"

    def evaluate(self, item: CodeClass, events: ConditionEvents[CodeClass]) -> None:
        if _not_a_class(item, events):
            return
        matching = [
            dep for dep in item.dependencies if self.pattern.match(dep.rpartition(".")[0])
        ]
        if not matching:
            events.violated(
                item,
                f"{item.describe()} does not depend on any class in package '{self.pattern}'",
            )
            return
        for dep in matching:
            events.satisfied(item, f"{item.describe()} depends on <{dep}>")


def depend_on_class(identifier: str | type) -> Condition[CodeClass]:
    """Class must refer to identifier (qualified name or type handle)."""
    return DependOnClassCondition(qualified_name_of(identifier))


def depend_on_classes_in_package(pattern: str) -> Condition[CodeClass]:
    """Class must refer to something matching package glob."""
    return DependOnPackageCondition(compile_pattern(pattern))


def reside_in_package(pattern: str) -> Condition[CodeClass]:
    """Class module must match package glob."""
    return satisfy(resides_in_package(pattern))


def have_fully_qualified_name(identifier: str | type) -> Condition[CodeClass]:
    """Class must be exactly identifier."""
    return satisfy(has_fully_qualified_name(qualified_name_of(identifier)))


def have_simple_name_ending_with(suffix: str) -> Condition[CodeClass]:
    """Class simple name must end with suffix."""
    return satisfy(has_simple_name_ending_with(suffix))
