"""Plain text reporter using print().

Stdlib-only reporter, one line per violation in file:line:column form.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from memberaccess.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from memberaccess.domain.model.check_result import CheckResult, FileResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: CheckResult) -> None:
        """Report check results as plain text.

        Args:
            result: Complete check result
        """
        for file_result in result.files:
            self._report_file(file_result)

        self._report_summary(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_file(self, file_result: FileResult) -> None:
        for violation in file_result.violations:
            location = file_result.location_of(violation)
            fix_marker = " (fixable)" if violation.fixable else ""
            self._write(
                f"{location}: {violation.severity.name} {violation.rule_name}: "
                f"{violation.message}{fix_marker}"
            )

    def _report_summary(self, result: CheckResult) -> None:
        self._write()
        self._write(f"Files: {result.stats.files_analyzed}")
        self._write(f"Violations: {result.violation_count}")
        self._write(f"  Errors: {result.error_count}")
        self._write(f"  Warnings: {result.warning_count}")
        self._write(f"  Fixable: {result.fixable_count}")
        self._write(f"Result: {'PASSED' if result.passed else 'FAILED'}")
