"""Reporters for rule check results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders with rich.
"""

from archrules.application.reporters._base import BaseReporter
from archrules.application.reporters.console import ConsoleConfig, ConsoleReporter
from archrules.application.reporters.json_reporter import JSONReporter
from archrules.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
