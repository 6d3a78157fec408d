"""Rule violation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Describable(Protocol):
    """Element that knows how to label itself in messages."""

    def describe(self) -> str: ...


def describe_subject(subject: object) -> str:
    """Label subject for a violation message."""
    if isinstance(subject, Describable):
        return subject.describe()
    return f"<{subject!r}>"


@dataclass(frozen=True, slots=True)
class Violation[T]:
    """Failure of a condition for one element.

    Attributes:
        message: Human-readable message
        subject: Element the violation belongs to
    """

    message: str
    subject: T

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")

    def __str__(self) -> str:
        return self.message
