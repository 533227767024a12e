"""Top level driver that turns DXF lines into a Document."""

import logging
from collections.abc import Callable, Iterable, Sequence
from enum import Enum

from ..diagnostics import DiagnosticCollector, DiagnosticKind
from ..errors import EmptyInputError
from ..handles import HandleAllocator
from ..models import Document
from ..protocols import IDiagnosticSink
from ..scanner import GroupScanner
from .blocks import parse_blocks
from .cursor import GroupCursor
from .entities import parse_entities
from .header import parse_header
from .tables import parse_tables

log = logging.getLogger(__name__)


class SectionType(Enum):
    HEADER = "HEADER"
    TABLES = "TABLES"
    BLOCKS = "BLOCKS"
    ENTITIES = "ENTITIES"

    @classmethod
    def from_name(cls, name: object) -> "SectionType | None":
        for section in cls:
            if section.value == name:
                return section
        return None


def _parse_header_section(cursor: GroupCursor, document: Document) -> None:
    parse_header(cursor, document.header)


def _parse_tables_section(cursor: GroupCursor, document: Document) -> None:
    parse_tables(cursor, document.tables)


def _parse_blocks_section(cursor: GroupCursor, document: Document) -> None:
    parse_blocks(cursor, document.blocks)


def _parse_entities_section(cursor: GroupCursor, document: Document) -> None:
    document.entities.extend(parse_entities(cursor, for_block=False))


SECTION_GRAMMARS: dict[SectionType, Callable[[GroupCursor, Document], None]] = {
    SectionType.HEADER: _parse_header_section,
    SectionType.TABLES: _parse_tables_section,
    SectionType.BLOCKS: _parse_blocks_section,
    SectionType.ENTITIES: _parse_entities_section,
}


class DxfParser:
    """Builds a Document from the lines of a DXF file.

    Each call of ``parse`` uses its own scanner, handle counter and
    diagnostic collector, one parser can be reused for many files.

    Parameters
    ----------
    sink : IDiagnosticSink | None
        Receives every diagnostic in addition to the document
    ignored : Iterable[DiagnosticKind]
        Diagnostic kinds that are neither collected nor logged
    """

    def __init__(self, sink: IDiagnosticSink | None = None, ignored: Iterable[DiagnosticKind] = ()) -> None:
        self.sink = sink
        self.ignored = tuple(ignored)

    def parse(self, lines: Sequence[str]) -> Document:
        """Parse the lines of a DXF file.

        Parameters
        ----------
        lines : Sequence[str]
            Lines already split on their line endings

        Returns
        -------
        Document
            The parsed document with the collected diagnostics

        Raises
        ------
        EmptyInputError
            If the lines do not contain a single group
        DXFParseError
            On a fatal scanner, coercion or point error
        """
        collector = DiagnosticCollector(forward=self.sink, ignored=self.ignored)
        scanner = GroupScanner(lines, sink=collector)
        if not scanner.has_next():
            raise EmptyInputError("DXF input does not contain any group")

        cursor = GroupCursor(scanner, collector, HandleAllocator())
        document = Document()
        cursor.advance()
        while not cursor.at_eof:
            if not cursor.is_group(0, "SECTION"):
                cursor.advance()
                continue

            group = cursor.advance()
            if group.code != 2:
                cursor.report(
                    DiagnosticKind.UNEXPECTED_SECTION_CODE,
                    f"Unexpected code {group.code} after SECTION, expected 2",
                )
                continue

            section = SectionType.from_name(group.value)
            if section is None:
                cursor.report(DiagnosticKind.UNKNOWN_SECTION, f"Unhandled section {group.value}")
                if not cursor.at_eof:
                    cursor.advance()
                continue

            log.debug(f"> {section.value}")
            cursor.advance()
            SECTION_GRAMMARS[section](cursor, document)
            log.debug(f"< {section.value}")

        document.diagnostics = collector.diagnostics
        log.info(
            f"Parsed {len(document.entities)} entities, {len(document.blocks)} blocks "
            f"and {len(collector)} diagnostics"
        )
        return document


def parse(
    lines: Sequence[str], sink: IDiagnosticSink | None = None, ignored: Iterable[DiagnosticKind] = ()
) -> Document:
    """Parse DXF lines with a fresh DxfParser."""
    return DxfParser(sink=sink, ignored=ignored).parse(lines)
