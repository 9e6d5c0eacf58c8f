"""Syntax tree analyzers."""

from memberaccess.application.analyzers.visibility import (
    ANGULAR_LIFECYCLE_HOOKS,
    RULE_NAME,
    ViolationStream,
    VisibilityAnalyzer,
    analyze,
)

__all__ = [
    "ANGULAR_LIFECYCLE_HOOKS",
    "RULE_NAME",
    "ViolationStream",
    "VisibilityAnalyzer",
    "analyze",
]
