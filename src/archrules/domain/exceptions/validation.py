"""Rule validation exceptions."""

from archrules.domain.exceptions.base import ArchRulesError


class RuleValidationError(ArchRulesError, ValueError):
    """Error in rule definition.

    Raised when a rule is built from malformed parts (empty description,
    empty identifier, invalid pattern). FAIL-FIRST: raised at construction,
    never at evaluation.

    Inherits ValueError for semantic correctness (bad value supplied).

    Attributes:
        subject: What was being defined (must not be empty)
        reason: Why it is invalid (must not be empty)
    """

    def __init__(self, subject: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not subject:
            raise ValueError("subject must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.subject = subject
        self.reason = reason
        super().__init__(f"Invalid {subject}: {reason}")
