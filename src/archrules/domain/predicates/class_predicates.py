"""Class predicates.

Every predicate answers False for elements that are not classes, so a
condition built from it reports such elements instead of crashing.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from fnmatch import fnmatch

from archrules.domain.exceptions.validation import RuleValidationError
from archrules.domain.model.code_class import CodeClass
from archrules.domain.predicates.base import DescribedPredicate, describe
from archrules.domain.predicates.patterns import compile_pattern

type ClassPredicate = DescribedPredicate[CodeClass]


def _class_predicate(
    description: str,
    test: Callable[[CodeClass], bool],
    holds: str,
    fails: str,
) -> ClassPredicate:
    return describe(
        description,
        lambda item: isinstance(item, CodeClass) and test(item),
        holds=holds,
        fails=fails,
    )


def resides_in_package(pattern: str) -> ClassPredicate:
    """Create predicate: class module matches package pattern.

    Args:
        pattern: Package glob ("myapp.domain.**")

    Returns:
        Described predicate
    """
    compiled = compile_pattern(pattern)
    return _class_predicate(
        f"reside in package '{pattern}'",
        lambda cls: compiled.match(cls.module),
        f"resides in package '{pattern}'",
        f"does not reside in package '{pattern}'",
    )


def has_simple_name(name: str) -> ClassPredicate:
    """Create predicate: class simple name equals name."""
    return _class_predicate(
        f"have simple name '{name}'",
        lambda cls: cls.name == name,
        f"has simple name '{name}'",
        f"does not have simple name '{name}'",
    )


def has_simple_name_ending_with(suffix: str) -> ClassPredicate:
    """Create predicate: class simple name ends with suffix."""
    return _class_predicate(
        f"have simple name ending with '{suffix}'",
        lambda cls: cls.name.endswith(suffix),
        f"has simple name ending with '{suffix}'",
        f"does not have simple name ending with '{suffix}'",
    )


def has_name_matching(regex: str) -> ClassPredicate:
    """Create predicate: qualified name matches regex.

    Raises:
        RuleValidationError: If regex is invalid
    """
    try:
        compiled = re.compile(regex)
    except re.error as e:
        raise RuleValidationError("name regex", f"'{regex}': {e}") from e

    return _class_predicate(
        f"have name matching '{regex}'",
        lambda cls: compiled.search(cls.qualified_name) is not None,
        f"has name matching '{regex}'",
        f"does not have name matching '{regex}'",
    )


def has_fully_qualified_name(qualified_name: str) -> ClassPredicate:
    """Create predicate: class is exactly qualified_name."""
    return _class_predicate(
        f"have fully qualified name '{qualified_name}'",
        lambda cls: cls.qualified_name == qualified_name,
        f"has fully qualified name '{qualified_name}'",
        f"does not have fully qualified name '{qualified_name}'",
    )


def inherits_from(base: str) -> ClassPredicate:
    """Create predicate: some base class matches glob base."""
    return _class_predicate(
        f"inherit from '{base}'",
        lambda cls: any(fnmatch(b, base) for b in cls.bases),
        f"inherits from '{base}'",
        f"does not inherit from '{base}'",
    )
