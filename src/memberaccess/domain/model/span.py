"""Source offset span value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """Zero-based half-open offset range into source text.

    Attributes:
        start: First offset (must be >= 0)
        end: One past the last offset (must be >= start)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")

    @property
    def length(self) -> int:
        """Number of offsets covered."""
        return self.end - self.start

    def __str__(self) -> str:
        """Format as [start, end)."""
        return f"[{self.start}, {self.end})"

    def contains(self, offset: int) -> bool:
        """Check if offset lies in the span (end inclusive, for insertions)."""
        return self.start <= offset <= self.end

    def encloses(self, other: "Span") -> bool:
        """Check if other lies entirely within this span."""
        return self.start <= other.start and other.end <= self.end
