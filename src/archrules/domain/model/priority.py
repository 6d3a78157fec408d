"""Rule priority."""

from enum import Enum, auto


class Priority(Enum):
    """Severity classification of a rule.

    Only affects reporting and sorting, never evaluation.
    Declaration order is ascending severity.
    """

    LOW = auto()
    MEDIUM = auto()
    HIGH = auto()
