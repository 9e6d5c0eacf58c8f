"""Check result aggregates."""

from __future__ import annotations

from dataclasses import dataclass

from memberaccess.domain.model.check_stats import CheckStats
from memberaccess.domain.model.enums import Severity
from memberaccess.domain.model.location import Location
from memberaccess.domain.model.source import SourceText
from memberaccess.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class FileResult:
    """Violations found in one source unit.

    Attributes:
        source: Analyzed source text
        violations: Violations sorted by start offset
    """

    source: SourceText
    violations: tuple[Violation, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.source is None:
            raise TypeError("source must not be None")
        starts = [v.start for v in self.violations]
        if starts != sorted(starts):
            raise ValueError("violations must be sorted by start offset")

    @property
    def passed(self) -> bool:
        """Check if file has no violations."""
        return len(self.violations) == 0

    def location_of(self, violation: Violation) -> Location:
        """Line/column of violation start."""
        return self.source.location_of(violation.start)


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a member-access check over several source units.

    Attributes:
        files: Per-file results in input order
        stats: Analysis statistics
    """

    files: tuple[FileResult, ...]
    stats: CheckStats

    @property
    def violations(self) -> tuple[Violation, ...]:
        """All violations, file by file."""
        return tuple(v for f in self.files for v in f.violations)

    @property
    def passed(self) -> bool:
        """Check if analysis passed (no ERROR violations)."""
        return self.error_count == 0

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return sum(len(f.violations) for f in self.files)

    @property
    def error_count(self) -> int:
        """Number of ERROR severity violations."""
        return sum(1 for v in self.violations if v.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity violations."""
        return sum(1 for v in self.violations if v.severity == Severity.WARNING)

    @property
    def fixable_count(self) -> int:
        """Number of violations that carry a fix."""
        return sum(1 for v in self.violations if v.fixable)

    @classmethod
    def empty(cls) -> CheckResult:
        """Create empty check result (passed, no violations)."""
        return cls(files=(), stats=CheckStats.empty())
