"""Main facade for member-access checking.

MemberAccessChecker is the primary entry point for running the rule
over TypeScript sources. Composition-based: accepts a parser, a
configuration and an optional reporter.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Self

from memberaccess.application.analyzers.visibility import analyze
from memberaccess.application.fixes import apply_edits, collect_edits
from memberaccess.application.options import resolve_options
from memberaccess.domain.model.check_result import CheckResult, FileResult
from memberaccess.domain.model.check_stats import CheckStats
from memberaccess.domain.model.enums import Severity

if TYPE_CHECKING:
    from memberaccess.domain.model.configuration import MemberAccessConfig
    from memberaccess.domain.model.source import ParsedSource
    from memberaccess.domain.ports.reporter import ReporterProtocol
    from memberaccess.domain.ports.source_parser import SourceParserPort

logger = logging.getLogger(__name__)


class MemberAccessChecker:
    """Main facade for member-access checking.

    Stateless between calls: every check parses and analyzes afresh.

    Example:
        checker = MemberAccessChecker.from_options(parser, ["no-public"])
        result = checker.check_files([Path("src/app.ts")])
        if not result.passed:
            print(f"Violations: {result.violation_count}")
    """

    def __init__(
        self,
        parser: SourceParserPort,
        config: MemberAccessConfig,
        *,
        severity: Severity = Severity.ERROR,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            parser: Parser producing syntax trees
            config: Resolved rule configuration
            severity: Severity assigned to every violation
            reporter: Optional reporter for output
        """
        if parser is None:
            raise TypeError("parser must not be None")
        if config is None:
            raise TypeError("config must not be None")

        self._parser = parser
        self._config = config
        self._severity = severity
        self._reporter = reporter

    @classmethod
    def from_options(
        cls,
        parser: SourceParserPort,
        tokens: Iterable[str],
        *,
        strict: bool = False,
        severity: Severity = Severity.ERROR,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create checker from raw option tokens.

        Raises:
            ConfigurationConflictError: strict=True and tokens conflict
        """
        return cls(
            parser,
            resolve_options(tokens, strict=strict),
            severity=severity,
            reporter=reporter,
        )

    @property
    def config(self) -> MemberAccessConfig:
        """Resolved rule configuration."""
        return self._config

    def check_source(self, text: str, path: Path = Path("<input>.ts")) -> FileResult:
        """Check a single source string.

        Raises:
            ParsingError: If text cannot be parsed
        """
        return self._check_parsed(self._parser.parse_source(text, path))

    def check_files(self, paths: Sequence[Path]) -> CheckResult:
        """Check files and return aggregated result.

        Reports result if reporter is configured.

        Raises:
            ParsingError: If any file cannot be read or parsed
        """
        start_time = time.perf_counter()

        files = tuple(self._check_parsed(self._parser.parse_file(path)) for path in paths)

        result = CheckResult(files=files, stats=self._build_stats(files, start_time))

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def fix_source(self, text: str, path: Path = Path("<input>.ts")) -> str:
        """Return text with every fixable violation repaired."""
        return self.fixed_text(self.check_source(text, path))

    @staticmethod
    def fixed_text(file_result: FileResult) -> str:
        """Apply all fixes of one file result to its source text.

        Raises:
            OverlappingEditsError: If fixes collide
        """
        edits = collect_edits(file_result.violations)
        if not edits:
            return file_result.source.text
        logger.debug("Fixing %d violation(s) in %s", len(edits), file_result.source.path)
        return apply_edits(file_result.source.text, edits)

    def _check_parsed(self, parsed: ParsedSource) -> FileResult:
        violations = tuple(analyze(parsed.root, self._config))
        if self._severity is not Severity.ERROR:
            violations = tuple(dataclasses.replace(v, severity=self._severity) for v in violations)
        logger.debug("%s: %d violation(s)", parsed.source.path, len(violations))
        return FileResult(source=parsed.source, violations=violations)

    @staticmethod
    def _build_stats(files: tuple[FileResult, ...], start_time: float) -> CheckStats:
        violations = [v for f in files for v in f.violations]
        return CheckStats(
            files_analyzed=len(files),
            violations_found=len(violations),
            fixable_count=sum(1 for v in violations if v.fixable),
            analysis_time_ms=(time.perf_counter() - start_time) * 1000,
        )
