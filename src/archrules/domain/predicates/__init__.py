"""Domain predicates."""

from archrules.domain.predicates.base import DescribedPredicate, describe, not_
from archrules.domain.predicates.class_predicates import (
    ClassPredicate,
    has_fully_qualified_name,
    has_name_matching,
    has_simple_name,
    has_simple_name_ending_with,
    inherits_from,
    resides_in_package,
)
from archrules.domain.predicates.patterns import CompiledPattern, compile_pattern

__all__ = [
    # Building blocks
    "DescribedPredicate",
    "describe",
    "not_",
    "CompiledPattern",
    "compile_pattern",
    # Class predicates
    "ClassPredicate",
    "resides_in_package",
    "has_simple_name",
    "has_simple_name_ending_with",
    "has_name_matching",
    "has_fully_qualified_name",
    "inherits_from",
]
