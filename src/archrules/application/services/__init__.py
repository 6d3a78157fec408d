"""Application services.

RuleChecker is the facade for checking several rules at once.
"""

from archrules.application.services.rule_checker import RuleChecker

__all__ = [
    "RuleChecker",
]
