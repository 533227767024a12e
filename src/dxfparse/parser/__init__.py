from .blocks import parse_block, parse_blocks
from .cursor import GroupCursor
from .document import DxfParser, SectionType, parse
from .entities import EntityType, parse_entities
from .header import parse_header
from .points import parse_point
from .tables import TableKind, parse_table, parse_tables

__all__ = [
    "DxfParser",
    "GroupCursor",
    "SectionType",
    "EntityType",
    "TableKind",
    "parse",
    "parse_point",
    "parse_header",
    "parse_tables",
    "parse_table",
    "parse_blocks",
    "parse_block",
    "parse_entities",
]
