"""Check statistics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Statistics from a member-access check.

    Attributes:
        files_analyzed: Number of source units analyzed
        violations_found: Number of violations found
        fixable_count: Violations that carry a fix
        analysis_time_ms: Total analysis time in milliseconds
    """

    files_analyzed: int
    violations_found: int
    fixable_count: int
    analysis_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.files_analyzed < 0:
            raise ValueError(f"files_analyzed must be >= 0, got {self.files_analyzed}")
        if self.violations_found < 0:
            raise ValueError(f"violations_found must be >= 0, got {self.violations_found}")
        if not 0 <= self.fixable_count <= self.violations_found:
            raise ValueError(
                f"fixable_count must be in 0..{self.violations_found}, got {self.fixable_count}"
            )
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> CheckStats:
        """Create empty check stats."""
        return cls(files_analyzed=0, violations_found=0, fixable_count=0, analysis_time_ms=0.0)
