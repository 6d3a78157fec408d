"""Fluent API for defining architecture rules.

Public exports:
    priority, classes, no_classes, all_, no, the_class, no_class: Entry points
    Creator: Entry points with fixed priority
    GivenObjects/GivenClasses/GivenClass: Stages waiting for a condition
"""

from archrules.presentation.api.dsl import (
    Creator,
    GivenClass,
    GivenClasses,
    GivenObjects,
    all_,
    classes,
    no,
    no_class,
    no_classes,
    priority,
    the_class,
)

__all__ = [
    "Creator",
    "GivenClass",
    "GivenClasses",
    "GivenObjects",
    "all_",
    "classes",
    "no",
    "no_class",
    "no_classes",
    "priority",
    "the_class",
]
