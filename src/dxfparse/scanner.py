"""Group scanner over the lines of a DXF file.

A DXF file is a sequence of groups, each group being two lines: an integer
group code followed by the value. The scanner turns an already split list of
lines into typed groups and keeps track of whether the EOF group was read.
"""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .codes import GroupValue, coerce, parse_int
from .errors import AlreadyAtEOFError, PrematureEndError
from .protocols import IDiagnosticSink

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Group:
    """A (code, value) pair, the atomic token of a DXF file.

    Parameters
    ----------
    code : int
        Group code
    value : GroupValue
        Value coerced to the type of the group code
    line : int | None
        1-based line number of the group code in the input
    """

    code: int
    value: GroupValue
    line: int | None = None

    def is_(self, code: int, value: GroupValue) -> bool:
        """Check if this group has the given code and value."""
        return self.code == code and self.value == value

    def __str__(self) -> str:
        return f"{self.code}:{self.value}"


class GroupScanner:
    """Reads groups from a sequence of DXF lines.

    Parameters
    ----------
    lines : Sequence[str]
        Lines of the DXF input, already split on CRLF, CR or LF
    sink : IDiagnosticSink | None
        Receives diagnostics for group codes without a defined type
    """

    def __init__(self, lines: Sequence[str], sink: IDiagnosticSink | None = None) -> None:
        self._lines = lines
        self._pointer = 0
        self._eof = False
        self.sink = sink

    def next(self) -> Group:
        """Read the next group.

        Returns
        -------
        Group
            The group starting at the current position

        Raises
        ------
        PrematureEndError
            If the input ends before the EOF group was read
        AlreadyAtEOFError
            If the EOF group has already been read
        """
        if not self.has_next():
            if self._eof:
                raise AlreadyAtEOFError("Cannot read the next group after the EOF group has been read")
            ended_on = self._lines[self._pointer] if self._pointer < len(self._lines) else "<end of input>"
            raise PrematureEndError(
                f"Unexpected end of input: EOF group not read before end of file. Ended on code {ended_on!r}",
                line=self._pointer + 1,
            )

        line = self._pointer + 1
        code = parse_int(self._lines[self._pointer].strip(), line=line)
        raw = self._lines[self._pointer + 1].strip()
        self._pointer += 2

        group = Group(code=code, value=coerce(code, raw, sink=self.sink, line=line), line=line)
        if group.code == 0 and group.value == "EOF":
            self._eof = True
        return group

    def has_next(self) -> bool:
        """Check if another group can be read."""
        if self._eof:
            return False
        return self._pointer <= len(self._lines) - 2

    def is_eof(self) -> bool:
        """Check if the EOF group has been read."""
        return self._eof

    @property
    def position(self) -> int:
        """Index of the next line to read."""
        return self._pointer

    def __iter__(self) -> Iterator[Group]:
        while self.has_next():
            yield self.next()
