"""Domain exceptions."""

from memberaccess.domain.exceptions.analysis import UnhandledNodeKindError
from memberaccess.domain.exceptions.base import MemberAccessError
from memberaccess.domain.exceptions.configuration import (
    ConfigurationConflictError,
    ConfigurationError,
)
from memberaccess.domain.exceptions.fixes import OverlappingEditsError
from memberaccess.domain.exceptions.parsing import ParsingError

__all__ = [
    "MemberAccessError",
    "ParsingError",
    "ConfigurationError",
    "ConfigurationConflictError",
    "OverlappingEditsError",
    "UnhandledNodeKindError",
]
