"""Console reporter: CheckResult → rich formatted tables."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from memberaccess.application.reporters._base import BaseReporter
from memberaccess.domain.model.enums import Severity

if TYPE_CHECKING:
    from memberaccess.domain.model.check_result import CheckResult, FileResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters.
        force_terminal: Emit colour codes even when output is not a TTY.
        show_passed_files: List files without violations in the summary.
    """

    width: int = 120
    force_terminal: bool = True
    show_passed_files: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: one rich table per file with violations.

    render() returns the formatted string; report() writes it to output.
    """

    def __init__(self, output: TextIO | None = None, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            config: Reporter configuration. Uses defaults if None.
        """
        self._output = output if output is not None else sys.stdout
        self._config = config or ConsoleConfig()

    def report(self, result: CheckResult) -> None:
        """Write formatted result to output."""
        self._output.write(self.render(result))

    def render(self, result: CheckResult) -> str:
        """Format check result as rich formatted string.

        Args:
            result: Check result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        console.print()
        console.rule("[bold]MEMBER ACCESS[/bold]")
        console.print()

        for file_result in result.files:
            if file_result.violations:
                self._render_file(console, file_result)
            elif self._config.show_passed_files:
                console.print(f"[green]✓[/green] {escape(str(file_result.source.path))}")

        self._render_summary(console, result)
        return output.getvalue()

    def _render_file(self, console: Console, file_result: FileResult) -> None:
        table = Table(title=escape(str(file_result.source.path)), title_justify="left")
        table.add_column("Line", justify="right", style="cyan")
        table.add_column("Col", justify="right", style="cyan")
        table.add_column("Severity")
        table.add_column("Message")
        table.add_column("Fix", justify="center")

        for violation in file_result.violations:
            location = file_result.location_of(violation)
            severity_style = "red" if violation.severity is Severity.ERROR else "yellow"
            table.add_row(
                str(location.line),
                str(location.column),
                f"[{severity_style}]{violation.severity.name}[/{severity_style}]",
                escape(violation.message),
                "✓" if violation.fixable else "",
            )

        console.print(table)
        console.print()

    def _render_summary(self, console: Console, result: CheckResult) -> None:
        status = "[bold green]PASSED[/bold green]" if result.passed else "[bold red]FAILED[/bold red]"
        console.print(
            f"[bold]Files:[/bold] {result.stats.files_analyzed}  "
            f"[bold]Violations:[/bold] {result.violation_count} "
            f"(errors: {result.error_count}, warnings: {result.warning_count}, "
            f"fixable: {result.fixable_count})  {status}"
        )
