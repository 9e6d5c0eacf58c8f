"""Source parser port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from memberaccess.domain.model.source import ParsedSource


class SourceParserPort(ABC):
    """Port for turning TypeScript source into the domain syntax tree.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def parse_source(self, text: str, path: Path) -> ParsedSource:
        """Parse source text.

        Args:
            text: Source text
            path: Path reported in locations (may not exist on disk)

        Returns:
            Source text with its syntax tree

        Raises:
            ParsingError: If the text cannot be parsed
        """
        ...

    @abstractmethod
    def parse_file(self, path: Path) -> ParsedSource:
        """Read and parse a single file.

        Args:
            path: Path to .ts/.tsx file

        Returns:
            Source text with its syntax tree

        Raises:
            ParsingError: If the file cannot be read or parsed
        """
        ...
