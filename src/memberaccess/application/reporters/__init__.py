"""Reporters for check results.

- PlainTextReporter: file:line:column lines (stdlib)
- JSONReporter: machine-readable output (stdlib)
- ConsoleReporter: rich tables
"""

from memberaccess.application.reporters._base import BaseReporter
from memberaccess.application.reporters.console import ConsoleConfig, ConsoleReporter
from memberaccess.application.reporters.json_reporter import JSONReporter
from memberaccess.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
