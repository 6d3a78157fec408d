"""Domain model: elements, descriptions, transformers, conditions, rules."""

from archrules.domain.model.artifact_graph import ArtifactGraph
from archrules.domain.model.check_report import CheckReport
from archrules.domain.model.code_class import CodeClass
from archrules.domain.model.condition import (
    AndCondition,
    Condition,
    ConditionEvent,
    ConditionEvents,
    DescribedCondition,
    NeverCondition,
    OrCondition,
    PredicateCondition,
    and_,
    never,
    or_,
    satisfy,
)
from archrules.domain.model.description import Description
from archrules.domain.model.graph import DiGraph
from archrules.domain.model.location import SourceLocation
from archrules.domain.model.priority import Priority
from archrules.domain.model.rule import EvaluationResult, Rule
from archrules.domain.model.transformer import (
    FilteredTransformer,
    FunctionTransformer,
    RenamedTransformer,
    SingleElementTransformer,
    Transformer,
    classes,
    qualified_name_of,
    single_element,
)
from archrules.domain.model.violation import Violation, describe_subject

__all__ = [
    # Elements
    "ArtifactGraph",
    "CodeClass",
    "DiGraph",
    "SourceLocation",
    # Descriptions
    "Description",
    "Priority",
    # Transformers
    "Transformer",
    "FunctionTransformer",
    "RenamedTransformer",
    "FilteredTransformer",
    "SingleElementTransformer",
    "classes",
    "qualified_name_of",
    "single_element",
    # Conditions
    "Condition",
    "ConditionEvent",
    "ConditionEvents",
    "DescribedCondition",
    "NeverCondition",
    "AndCondition",
    "OrCondition",
    "PredicateCondition",
    "never",
    "and_",
    "or_",
    "satisfy",
    # Rules
    "Rule",
    "EvaluationResult",
    "CheckReport",
    "Violation",
    "describe_subject",
]
