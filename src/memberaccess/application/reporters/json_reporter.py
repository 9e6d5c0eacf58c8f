"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from memberaccess.application.reporters._base import BaseReporter
from memberaccess.domain.model.text_edit import DeleteRange, Insert

if TYPE_CHECKING:
    from memberaccess.domain.model.check_result import CheckResult, FileResult
    from memberaccess.domain.model.text_edit import TextEdit
    from memberaccess.domain.model.violation import Violation


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs check results as JSON for CI/CD integration or editor
    tooling that applies the offset-based fixes itself.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Report check results as JSON.

        Args:
            result: Complete check result
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        """Convert CheckResult to JSON-serializable dict."""
        return {
            "passed": result.passed,
            "summary": {
                "violation_count": result.violation_count,
                "error_count": result.error_count,
                "warning_count": result.warning_count,
                "fixable_count": result.fixable_count,
            },
            "files": [self._file_to_dict(f) for f in result.files],
            "stats": {
                "files_analyzed": result.stats.files_analyzed,
                "analysis_time_ms": result.stats.analysis_time_ms,
            },
        }

    def _file_to_dict(self, file_result: FileResult) -> dict[str, object]:
        return {
            "path": str(file_result.source.path),
            "violations": [self._violation_to_dict(file_result, v) for v in file_result.violations],
        }

    def _violation_to_dict(self, file_result: FileResult, violation: Violation) -> dict[str, object]:
        location = file_result.location_of(violation)
        return {
            "rule_name": violation.rule_name,
            "severity": violation.severity.name,
            "message": violation.message,
            "role": violation.role.value,
            "member_name": violation.member_name,
            "start": violation.span.start,
            "end": violation.span.end,
            "line": location.line,
            "column": location.column,
            "fix": self._fix_to_dict(violation.fix),
        }

    @staticmethod
    def _fix_to_dict(fix: TextEdit | None) -> dict[str, object] | None:
        match fix:
            case Insert(offset=offset, text=text):
                return {"type": "insert", "offset": offset, "text": text}
            case DeleteRange(start=start, end=end):
                return {"type": "delete", "start": start, "end": end}
            case _:
                return None
