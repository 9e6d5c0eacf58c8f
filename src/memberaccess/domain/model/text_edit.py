"""Offset-addressed text edits proposed as fixes."""

from __future__ import annotations

from dataclasses import dataclass

from memberaccess.domain.model.span import Span


@dataclass(frozen=True, slots=True)
class Insert:
    """Insert text at an offset.

    Attributes:
        offset: Position to insert before (must be >= 0)
        text: Text to insert (must not be empty)
    """

    offset: int
    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")
        if not self.text:
            raise ValueError("text must not be empty")

    @property
    def span(self) -> Span:
        """Empty span at the insertion point."""
        return Span(self.offset, self.offset)

    def __str__(self) -> str:
        return f"insert {self.text!r} at {self.offset}"


@dataclass(frozen=True, slots=True)
class DeleteRange:
    """Delete the text between two offsets.

    Attributes:
        start: First offset removed (must be >= 0)
        end: One past the last offset removed (must be > start)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end <= self.start:
            raise ValueError(f"end ({self.end}) must be > start ({self.start})")

    @property
    def span(self) -> Span:
        """Range removed."""
        return Span(self.start, self.end)

    def __str__(self) -> str:
        return f"delete [{self.start}, {self.end})"


TextEdit = Insert | DeleteRange
"""Single fix operation."""
