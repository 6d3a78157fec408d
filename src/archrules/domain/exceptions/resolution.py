"""Resolution exceptions."""

from archrules.domain.exceptions.base import ArchRulesError


class ResolutionError(ArchRulesError, LookupError):
    """Requested element does not exist in the artifact graph.

    Raised by single-element selection when the lookup key does not
    resolve. Never converted into an empty selection.

    Inherits LookupError for semantic correctness (key not found).

    Attributes:
        key: Lookup key that failed to resolve
    """

    def __init__(self, key: str) -> None:
        if not key:
            raise ValueError("key must not be empty")

        self.key = key
        super().__init__(f"'{key}' was not found in the artifact graph")
