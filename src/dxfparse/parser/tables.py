"""Grammars of the TABLES section and the VPORT, LTYPE and LAYER records."""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, NamedTuple

from .. import colors
from ..diagnostics import DiagnosticKind
from ..flags import LayerFlag, apply_flags
from ..models import Layer, LayerTable, LineType, LineTypeTable, Table, Tables, ViewPort, ViewPortTable
from .cursor import GroupCursor
from .points import parse_point

log = logging.getLogger(__name__)

END_OF_TABLE = "ENDTAB"

RecordHandler = Callable[[GroupCursor, Any], bool]


class TableKind(Enum):
    VPORT = "VPORT"
    LTYPE = "LTYPE"
    LAYER = "LAYER"

    @classmethod
    def from_name(cls, name: object) -> "TableKind | None":
        for kind in cls:
            if kind.value == name:
                return kind
        return None


def _read_record(
    cursor: GroupCursor,
    record: Any,
    scalars: dict[int, str],
    points: dict[int, str] | None = None,
    handler: RecordHandler | None = None,
) -> Any:
    """Read the groups of one table record until the next code 0.

    Handle (5), owner handle (330) and the subclass markers (100) are shared
    by all records, every other unclaimed group is reported and skipped.
    """
    points = points or {}
    cursor.advance()
    while cursor.code != 0:
        code = cursor.code
        if handler is not None and handler(cursor, record):
            continue
        if code in scalars:
            setattr(record, scalars[code], cursor.value)
            cursor.advance()
        elif code in points:
            setattr(record, points[code], parse_point(cursor))
        elif code == 5:
            record.handle = cursor.value
            cursor.advance()
        elif code == 330:
            record.owner_handle = cursor.value
            cursor.advance()
        elif code == 100:
            cursor.advance()
        else:
            cursor.skip_unhandled()
    return record


def parse_view_port(cursor: GroupCursor) -> ViewPort:
    return _read_record(
        cursor,
        ViewPort(),
        scalars={
            2: "name",
            40: "view_height",
            41: "aspect_ratio",
            42: "lens_length",
            43: "front_clipping_plane",
            44: "back_clipping_plane",
            45: "view_height",
            50: "snap_rotation_angle",
            51: "view_twist_angle",
            63: "ambient_color",
            79: "orthographic_type",
            281: "render_mode",
            282: "default_lighting_type",
            292: "default_lighting_on",
            421: "ambient_color",
            431: "ambient_color",
        },
        points={
            10: "lower_left_corner",
            11: "upper_right_corner",
            12: "center",
            13: "snap_base_point",
            14: "snap_spacing",
            15: "grid_spacing",
            16: "view_direction_from_target",
            17: "view_target",
            110: "ucs_origin",
            111: "ucs_x_axis",
            112: "ucs_y_axis",
        },
    )


def _line_type_group(cursor: GroupCursor, line_type: LineType) -> bool:
    if cursor.code != 49:
        return False
    line_type.pattern.append(cursor.value)
    cursor.advance()
    return True


def parse_line_type(cursor: GroupCursor) -> LineType:
    line_type = _read_record(
        cursor,
        LineType(),
        scalars={2: "name", 3: "description", 40: "pattern_length", 72: "alignment", 73: "element_count"},
        handler=_line_type_group,
    )
    if line_type.element_count > 0 and line_type.element_count != len(line_type.pattern):
        cursor.report(
            DiagnosticKind.PATTERN_LENGTH_MISMATCH,
            f"LTYPE {line_type.name} declares {line_type.element_count} pattern elements "
            f"but has {len(line_type.pattern)}",
        )
    return line_type


def _layer_group(cursor: GroupCursor, layer: Layer) -> bool:
    code = cursor.code
    value = cursor.value
    if code == 62:
        # A negative color index switches the layer off.
        layer.visible = value >= 0
        layer.color_index = abs(value)
        layer.color = colors.lookup(abs(value))
    elif code == 70:
        apply_flags(layer, value, LayerFlag)
    elif code == 290:
        layer.plot = value
    elif code == 420:
        layer.color = value
    else:
        return False
    cursor.advance()
    return True


def parse_layer(cursor: GroupCursor) -> Layer:
    return _read_record(
        cursor,
        Layer(),
        scalars={2: "name", 6: "line_type", 370: "lineweight"},
        handler=_layer_group,
    )


class TableDefinition(NamedTuple):
    attribute: str
    table_type: type[Table]
    parse_record: Callable[[GroupCursor], Any]


TABLE_DEFINITIONS: dict[TableKind, TableDefinition] = {
    TableKind.VPORT: TableDefinition("view_port", ViewPortTable, parse_view_port),
    TableKind.LTYPE: TableDefinition("line_type", LineTypeTable, parse_line_type),
    TableKind.LAYER: TableDefinition("layer", LayerTable, parse_layer),
}


def parse_table(cursor: GroupCursor, kind: TableKind) -> Table:
    """Parse one table starting at its (2, kind) group.

    Parameters
    ----------
    cursor : GroupCursor
        Cursor on the group holding the table name
    kind : TableKind
        Kind of the table, selects the record grammar

    Returns
    -------
    Table
        The table with all named records, the cursor is after ENDTAB
    """
    definition = TABLE_DEFINITIONS[kind]
    table = definition.table_type()
    cursor.advance()
    while not cursor.is_group(0, END_OF_TABLE):
        if cursor.stops_at_eof(f"{kind.value} table"):
            return table
        code = cursor.code
        if code == 0:
            if cursor.value == kind.value:
                record = definition.parse_record(cursor)
                if record.name is None:
                    cursor.report(
                        DiagnosticKind.MISSING_RECORD_NAME, f"{kind.value} record {record.handle} has no name"
                    )
                else:
                    table.add(record)
            else:
                cursor.skip_unhandled()
        elif code == 5:
            table.handle = cursor.value
            cursor.advance()
        elif code == 330:
            table.owner_handle = cursor.value
            cursor.advance()
        elif code == 70:
            table.expected_count = cursor.value
            cursor.advance()
        elif code == 100:
            cursor.advance()
        else:
            cursor.skip_unhandled()

    if table.record_count != table.expected_count:
        cursor.report(
            DiagnosticKind.TABLE_COUNT_MISMATCH,
            f"Parsed {table.record_count} {kind.value}'s but expected {table.expected_count}",
        )
    cursor.advance()
    return table


def parse_tables(cursor: GroupCursor, tables: Tables | None = None) -> Tables:
    """Parse the TABLES section up to and including its ENDSEC.

    Unknown table kinds are reported and their groups skipped one by one.
    Tables found again replace the earlier ones of the same kind.
    """
    if tables is None:
        tables = Tables()
    while not cursor.is_group(0, "ENDSEC"):
        if cursor.stops_at_eof("TABLES section"):
            return tables
        if not cursor.is_group(0, "TABLE"):
            cursor.advance()
            continue

        group = cursor.advance()
        kind = TableKind.from_name(group.value) if group.code == 2 else None
        if kind is None:
            cursor.report(DiagnosticKind.UNKNOWN_TABLE, f"Unhandled table {group.value}")
            if group.code != 0:
                cursor.advance()
            continue

        log.debug(f"{kind.value} Table {{")
        setattr(tables, TABLE_DEFINITIONS[kind].attribute, parse_table(cursor, kind))
        log.debug("}")
    cursor.advance()
    return tables
