"""Domain ports (interfaces implemented by outer layers)."""

from memberaccess.domain.ports.reporter import ReporterProtocol
from memberaccess.domain.ports.source_parser import SourceParserPort

__all__ = ["ReporterProtocol", "SourceParserPort"]
