"""The current-group cursor passed through every grammar function.

Each grammar receives the cursor positioned on the first group it is
responsible for and returns with the cursor on the first group it did not
consume. There is no backtracking, the cursor only moves forward.
"""

import logging

from ..codes import GroupValue
from ..diagnostics import Diagnostic, DiagnosticKind
from ..handles import HandleAllocator
from ..protocols import IDiagnosticSink
from ..scanner import Group, GroupScanner

log = logging.getLogger(__name__)


class GroupCursor:
    """Owns the scanner, the current group and the per-parse state.

    Parameters
    ----------
    scanner : GroupScanner
        Scanner the groups are read from
    sink : IDiagnosticSink
        Receives the non-fatal findings of all grammars
    handles : HandleAllocator | None
        Allocator for missing handles, a fresh one if omitted
    """

    def __init__(self, scanner: GroupScanner, sink: IDiagnosticSink, handles: HandleAllocator | None = None) -> None:
        self.scanner = scanner
        self.sink = sink
        self.handles = handles or HandleAllocator()
        self._current: Group | None = None

    @property
    def current(self) -> Group:
        if self._current is None:
            raise RuntimeError("Cursor has no current group. Call advance() first.")
        return self._current

    @property
    def code(self) -> int:
        return self.current.code

    @property
    def value(self) -> GroupValue:
        return self.current.value

    @property
    def at_eof(self) -> bool:
        return self.scanner.is_eof()

    def advance(self) -> Group:
        """Read the next group and make it the current one."""
        self._current = self.scanner.next()
        return self._current

    def is_group(self, code: int, value: GroupValue) -> bool:
        return self._current is not None and self._current.is_(code, value)

    def report(self, kind: DiagnosticKind, message: str) -> None:
        """Report a diagnostic about the current group."""
        group = self._current
        if group is None:
            self.sink.report(Diagnostic(kind, message))
            return
        self.sink.report(Diagnostic(kind, message, code=group.code, value=group.value, line=group.line))

    def skip_unhandled(self) -> None:
        """Report the current group as unhandled and move past it."""
        self.report(DiagnosticKind.UNHANDLED_GROUP, f"unhandled group {self.current}")
        self.advance()

    def stops_at_eof(self, construct: str) -> bool:
        """Check for the EOF group inside an unterminated construct."""
        if not self.at_eof:
            return False
        self.report(DiagnosticKind.UNTERMINATED_SECTION, f"{construct} is not terminated before EOF")
        return True
