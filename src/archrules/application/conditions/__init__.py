"""Condition library for class rules."""

from archrules.application.conditions.class_conditions import (
    DependOnClassCondition,
    DependOnPackageCondition,
    depend_on_class,
    depend_on_classes_in_package,
    have_fully_qualified_name,
    have_simple_name_ending_with,
    reside_in_package,
)

__all__ = [
    "DependOnClassCondition",
    "DependOnPackageCondition",
    "depend_on_class",
    "depend_on_classes_in_package",
    "have_fully_qualified_name",
    "have_simple_name_ending_with",
    "reside_in_package",
]
