"""Source text value object."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from memberaccess.domain.model.location import Location

if TYPE_CHECKING:
    from memberaccess.domain.model.syntax import SyntaxNode


@dataclass(frozen=True, slots=True)
class SourceText:
    """Text of one source unit with offset → line/column lookup.

    Attributes:
        path: File the text came from
        text: Full source text
        _line_starts: Offset of the first character of every line
    """

    path: Path
    text: str
    _line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if self.text is None:
            raise TypeError("text must not be None")

        starts = [0]
        starts.extend(i + 1 for i, char in enumerate(self.text) if char == "\n")
        object.__setattr__(self, "_line_starts", tuple(starts))

    def location_of(self, offset: int) -> Location:
        """Convert character offset to file:line:column.

        Raises:
            ValueError: If offset is outside the text
        """
        if not 0 <= offset <= len(self.text):
            raise ValueError(f"offset {offset} outside text of length {len(self.text)}")

        index = bisect_right(self._line_starts, offset) - 1
        return Location(file=self.path, line=index + 1, column=offset - self._line_starts[index])

    def slice(self, start: int, end: int) -> str:
        """Text between two offsets."""
        return self.text[start:end]


@dataclass(frozen=True, slots=True)
class ParsedSource:
    """Source text together with its syntax tree.

    Attributes:
        source: Parsed text
        root: Root node of the tree
    """

    source: SourceText
    root: SyntaxNode

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.source is None:
            raise TypeError("source must not be None")
        if self.root is None:
            raise TypeError("root must not be None")
        if self.root.span.end > len(self.source.text):
            raise ValueError(
                f"root span {self.root.span} exceeds text of length {len(self.source.text)}"
            )
