"""Domain model entities."""

from memberaccess.domain.model.check_result import CheckResult, FileResult
from memberaccess.domain.model.check_stats import CheckStats
from memberaccess.domain.model.configuration import MemberAccessConfig
from memberaccess.domain.model.enums import Keyword, MemberRole, NodeKind, Severity
from memberaccess.domain.model.location import Location
from memberaccess.domain.model.source import ParsedSource, SourceText
from memberaccess.domain.model.span import Span
from memberaccess.domain.model.syntax import (
    ClassLike,
    Constructor,
    GetAccessor,
    Member,
    MemberName,
    Method,
    Modifier,
    Other,
    Parameter,
    Property,
    SetAccessor,
    SyntaxNode,
)
from memberaccess.domain.model.text_edit import DeleteRange, Insert, TextEdit
from memberaccess.domain.model.violation import Violation

__all__ = [
    # Results
    "CheckResult",
    "CheckStats",
    "FileResult",
    "Violation",
    # Configuration
    "MemberAccessConfig",
    # Enums
    "Keyword",
    "MemberRole",
    "NodeKind",
    "Severity",
    # Source
    "Location",
    "ParsedSource",
    "SourceText",
    "Span",
    # Syntax tree
    "ClassLike",
    "Constructor",
    "GetAccessor",
    "Member",
    "MemberName",
    "Method",
    "Modifier",
    "Other",
    "Parameter",
    "Property",
    "SetAccessor",
    "SyntaxNode",
    # Fixes
    "DeleteRange",
    "Insert",
    "TextEdit",
]
