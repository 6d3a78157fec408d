"""Composable human-readable description."""

from __future__ import annotations

from dataclasses import dataclass

from archrules.domain.exceptions.validation import RuleValidationError


@dataclass(frozen=True, slots=True)
class Description:
    """Immutable label attached to transformers, conditions and rules.

    Built by composition so violation messages stay traceable to the
    exact constraint that produced them. Equality is by text.

    Attributes:
        text: Description text (never empty)
    """

    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.text, str):
            raise TypeError(f"description must be str, got {type(self.text).__name__}")
        if not self.text.strip():
            raise RuleValidationError("description", "must not be empty")

    @classmethod
    def of(cls, value: str | Description) -> Description:
        """Coerce str or Description to Description."""
        if isinstance(value, Description):
            return value
        return cls(value)

    @classmethod
    def compose(
        cls,
        base: str | Description,
        operator: str,
        detail: str | Description,
    ) -> Description:
        """Join non-empty parts with single spaces.

        Examples:
            compose("", "no", "classes") -> "no classes"
            compose("classes", "should", "depend on x") -> "classes should depend on x"
        """
        parts = (str(base).strip(), operator.strip(), str(detail).strip())
        return cls(" ".join(p for p in parts if p))

    def prefixed(self, word: str) -> Description:
        """Return description with word in front ("never " + self)."""
        return Description.compose("", word, self)

    def joined(self, word: str, other: str | Description) -> Description:
        """Return "self word other"."""
        return Description.compose(self, word, other)

    def __str__(self) -> str:
        return self.text
