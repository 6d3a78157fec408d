"""Glob patterns for package names.

Syntax:
    *    one segment (no dots)
    **   any segments (with dots)
    ?    one character
    .    literal dot

Special cases:
    foo.**   matches foo AND all children (foo, foo.bar, foo.bar.baz)
    **.foo   matches foo AND any prefix (foo, bar.foo, bar.baz.foo)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from archrules.domain.exceptions.validation import RuleValidationError


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Package pattern with its compiled regex.

    Attributes:
        original: Pattern as written by the user
        regex: Compiled regex for matching
    """

    original: str
    regex: re.Pattern[str]

    def match(self, name: str) -> bool:
        """Check if dotted name matches pattern."""
        return self.regex.match(name) is not None

    def __str__(self) -> str:
        return self.original


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile glob pattern to regex.

    Raises:
        RuleValidationError: If pattern is empty or not compilable
    """
    if not pattern:
        raise RuleValidationError("package pattern", "must not be empty")

    if pattern == "**":
        return CompiledPattern(original=pattern, regex=re.compile(r"^.*$"))

    escaped = re.escape(pattern)

    # \.\*\* and \*\*\. are 6 chars each once escaped
    if escaped.endswith(r"\.\*\*"):
        escaped = escaped[:-6] + r"(\..*)?$"
    else:
        escaped += "$"

    if escaped.startswith(r"\*\*\."):
        escaped = r"^(.*\.)?" + escaped[6:]
    else:
        escaped = "^" + escaped

    # middle .**. before the general ** replacement
    escaped = escaped.replace(r"\.\*\*\.", r"(\..*)?\.")
    escaped = escaped.replace(r"\*\*", r".*")
    escaped = escaped.replace(r"\*", r"[^.]+")
    escaped = escaped.replace(r"\?", r".")

    try:
        regex = re.compile(escaped)
    except re.error as e:
        raise RuleValidationError("package pattern", f"'{pattern}': {e}") from e

    return CompiledPattern(original=pattern, regex=regex)
