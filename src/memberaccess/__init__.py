"""memberaccess - explicit visibility checks for TypeScript class members."""

__version__ = "0.1.0"

from memberaccess.application.analyzers.visibility import VisibilityAnalyzer, analyze
from memberaccess.application.fixes import apply_edits
from memberaccess.application.options import resolve_options
from memberaccess.application.services.checker import MemberAccessChecker

__all__ = [
    "MemberAccessChecker",
    "VisibilityAnalyzer",
    "__version__",
    "analyze",
    "apply_edits",
    "resolve_options",
]
