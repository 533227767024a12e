"""Non-fatal parse diagnostics.

Diagnostics never change the control flow of the parser. They are handed to
a sink, by default a DiagnosticCollector that keeps them for the finished
document and mirrors them to the logging package.
"""

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .protocols import IDiagnosticSink

log = logging.getLogger(__name__)


class DiagnosticKind(Enum):
    UNEXPECTED_SECTION_CODE = "UNEXPECTED_SECTION_CODE"
    UNKNOWN_SECTION = "UNKNOWN_SECTION"
    UNKNOWN_TABLE = "UNKNOWN_TABLE"
    UNKNOWN_ENTITY = "UNKNOWN_ENTITY"
    UNHANDLED_GROUP = "UNHANDLED_GROUP"
    MISSING_BLOCK_NAME = "MISSING_BLOCK_NAME"
    MISSING_RECORD_NAME = "MISSING_RECORD_NAME"
    TABLE_COUNT_MISMATCH = "TABLE_COUNT_MISMATCH"
    PATTERN_LENGTH_MISMATCH = "PATTERN_LENGTH_MISMATCH"
    VERTEX_COUNT_MISMATCH = "VERTEX_COUNT_MISMATCH"
    UNDEFINED_GROUP_CODE = "UNDEFINED_GROUP_CODE"
    UNTERMINATED_SECTION = "UNTERMINATED_SECTION"


_LOG_LEVELS = {
    DiagnosticKind.UNHANDLED_GROUP: logging.DEBUG,
    DiagnosticKind.MISSING_BLOCK_NAME: logging.ERROR,
}


@dataclass(frozen=True)
class Diagnostic:
    """A single non-fatal finding of the parser.

    Parameters
    ----------
    kind : DiagnosticKind
        Category of the finding
    message : str
        Human readable description
    code : int | None
        Group code of the offending group, if any
    value : Any
        Value of the offending group, if any
    line : int | None
        1-based line number of the offending group code
    """

    kind: DiagnosticKind
    message: str
    code: int | None = None
    value: Any = None
    line: int | None = None

    def __str__(self) -> str:
        if self.line is None:
            return f"{self.kind.value}: {self.message}"
        return f"{self.kind.value}: {self.message} (line {self.line})"


class DiagnosticCollector:
    """Collects diagnostics and writes them to the log.

    Parameters
    ----------
    forward : IDiagnosticSink | None
        Optional sink that receives every collected diagnostic as well
    ignored : Iterable[DiagnosticKind]
        Kinds that are dropped without being collected or logged
    logger : logging.Logger | None
        Logger used for the mirrored messages, defaults to this module's logger
    """

    def __init__(
        self,
        forward: "IDiagnosticSink | None" = None,
        ignored: Iterable[DiagnosticKind] = (),
        logger: logging.Logger | None = None,
    ) -> None:
        self.forward = forward
        self.ignored = frozenset(ignored)
        self.logger = logger or log
        self.diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        if diagnostic.kind in self.ignored:
            return
        self.diagnostics.append(diagnostic)
        self.logger.log(_LOG_LEVELS.get(diagnostic.kind, logging.WARNING), str(diagnostic))
        if self.forward is not None:
            self.forward.report(diagnostic)

    def by_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Get all collected diagnostics of one kind."""
        return [diagnostic for diagnostic in self.diagnostics if diagnostic.kind == kind]

    def get_statistics(self) -> dict[DiagnosticKind, int]:
        """Count the collected diagnostics per kind."""
        return dict(Counter(diagnostic.kind for diagnostic in self.diagnostics))

    def __len__(self) -> int:
        return len(self.diagnostics)
