"""Grammars of the supported entity types and the ENTITIES loop.

Every grammar starts on the (0, TYPE) group of its entity and stops on the
next code 0 group. Groups an entity does not claim itself go through the
common property grammar.
"""

import logging
import math
from collections.abc import Callable
from enum import Enum

from ..diagnostics import DiagnosticKind
from ..flags import AttdefFlag, LwPolylineFlag, PolylineFlag, TextGenerationFlag, VertexFlag, apply_flags
from ..models import (
    Arc,
    Attdef,
    Circle,
    Dimension,
    Entity,
    Insert,
    Line,
    LwPolyline,
    LwPolylineVertex,
    MText,
    PointEntity,
    Polyline,
    Solid,
    Text,
    Vertex,
)
from .common import read_entity
from .cursor import GroupCursor
from .points import parse_point

log = logging.getLogger(__name__)


class EntityType(Enum):
    LINE = "LINE"
    CIRCLE = "CIRCLE"
    ARC = "ARC"
    LWPOLYLINE = "LWPOLYLINE"
    POLYLINE = "POLYLINE"
    TEXT = "TEXT"
    MTEXT = "MTEXT"
    DIMENSION = "DIMENSION"
    SOLID = "SOLID"
    POINT = "POINT"
    INSERT = "INSERT"
    ATTDEF = "ATTDEF"

    @classmethod
    def from_name(cls, name: object) -> "EntityType | None":
        """Get the entity type of a type name, None if it is not supported."""
        for entity_type in cls:
            if entity_type.value == name:
                return entity_type
        return None


def angle_length(start_angle: float, end_angle: float) -> float:
    """Sweep from start to end angle in radians, crossing 0 if needed."""
    length = end_angle - start_angle
    if length < 0:
        length += 2 * math.pi
    return length


def _line_group(cursor: GroupCursor, entity: Line) -> bool:
    # The start point goes first, wherever it appears.
    if cursor.code == 10:
        entity.vertices.insert(0, parse_point(cursor))
        return True
    if cursor.code == 11:
        entity.vertices.append(parse_point(cursor))
        return True
    return False


def parse_line(cursor: GroupCursor) -> Line:
    return read_entity(
        cursor,
        Line(),
        scalars={39: "thickness"},
        points={210: "extrusion_direction"},
        handler=_line_group,
    )


def _circle_group(cursor: GroupCursor, entity: Circle) -> bool:
    if cursor.code == 50:
        entity.start_angle = math.radians(cursor.value)
    elif cursor.code == 51:
        entity.end_angle = math.radians(cursor.value)
    else:
        return False
    cursor.advance()
    return True


def parse_circle(cursor: GroupCursor) -> Circle:
    """Parse a CIRCLE or an ARC, both share the same groups."""
    entity = Arc() if cursor.value == EntityType.ARC.value else Circle()
    read_entity(
        cursor,
        entity,
        scalars={39: "thickness", 40: "radius"},
        points={10: "center", 210: "extrusion_direction"},
        handler=_circle_group,
    )
    if entity.end_angle is not None:
        entity.angle_length = angle_length(entity.start_angle or 0.0, entity.end_angle)
    return entity


def parse_lw_polyline_vertices(cursor: GroupCursor, count: int) -> list[LwPolylineVertex]:
    """Parse the vertices of a LWPOLYLINE starting at the x group of the first.

    Every vertex starts with a code 10 group, a second code 10 without a
    code 0 in between is the start of the next vertex. Unknown codes inside
    a vertex (e.g. the vertex identifier 91) are skipped, except after the
    last vertex where they belong to the polyline again.

    Parameters
    ----------
    cursor : GroupCursor
        Cursor on the first x group
    count : int
        Number of vertices still expected, 0 or less reads all vertices

    Returns
    -------
    list[LwPolylineVertex]
        Parsed vertices, the cursor is on the first group after them
    """
    vertices: list[LwPolylineVertex] = []
    while cursor.code == 10 and (count <= 0 or len(vertices) < count):
        is_last = count > 0 and len(vertices) == count - 1
        vertex = LwPolylineVertex(x=cursor.value)
        cursor.advance()
        while cursor.code not in (0, 10):
            code = cursor.code
            if code == 20:
                vertex.y = cursor.value
            elif code == 30:
                vertex.z = cursor.value
            elif code == 40:
                vertex.start_width = cursor.value
            elif code == 41:
                vertex.end_width = cursor.value
            elif code == 42:
                if cursor.value != 0:
                    vertex.bulge = cursor.value
            elif is_last or count <= 0:
                break
            cursor.advance()
        vertices.append(vertex)
    return vertices


def _lw_polyline_group(cursor: GroupCursor, entity: LwPolyline) -> bool:
    code = cursor.code
    if code == 10:
        remaining = entity.vertex_count - len(entity.vertices)
        entity.vertices.extend(parse_lw_polyline_vertices(cursor, remaining))
        return True
    if code == 70:
        apply_flags(entity, cursor.value, LwPolylineFlag)
    elif code == 90:
        entity.vertex_count = cursor.value
    elif code == 43:
        if cursor.value != 0:
            entity.width = cursor.value
    else:
        return False
    cursor.advance()
    return True


def parse_lw_polyline(cursor: GroupCursor) -> LwPolyline:
    entity = read_entity(
        cursor,
        LwPolyline(),
        scalars={38: "elevation", 39: "depth"},
        points={210: "extrusion_direction"},
        handler=_lw_polyline_group,
    )
    if len(entity.vertices) != entity.vertex_count:
        cursor.report(
            DiagnosticKind.VERTEX_COUNT_MISMATCH,
            f"LWPOLYLINE {entity.handle} declares {entity.vertex_count} vertices but has {len(entity.vertices)}",
        )
    return entity


def _vertex_group(cursor: GroupCursor, entity: Vertex) -> bool:
    code = cursor.code
    if code == 70:
        apply_flags(entity, cursor.value, VertexFlag)
    elif 71 <= code <= 74:
        entity.faces.append(cursor.value)
    else:
        return False
    cursor.advance()
    return True


def parse_vertex(cursor: GroupCursor) -> Vertex:
    return read_entity(
        cursor,
        Vertex(),
        scalars={
            10: "x",
            20: "y",
            30: "z",
            40: "start_width",
            41: "end_width",
            42: "bulge",
            50: "curve_fit_tangent_direction",
        },
        handler=_vertex_group,
    )


def parse_polyline_vertices(cursor: GroupCursor) -> list[Vertex]:
    """Collect the VERTEX entities following a POLYLINE up to its SEQEND."""
    vertices = []
    while not cursor.stops_at_eof("POLYLINE"):
        if cursor.is_group(0, "VERTEX"):
            vertices.append(parse_vertex(cursor))
        elif cursor.is_group(0, "SEQEND"):
            read_entity(cursor, Entity())
            break
        else:
            cursor.report(DiagnosticKind.UNHANDLED_GROUP, f"POLYLINE vertices end without SEQEND at {cursor.current}")
            break
    return vertices


def _polyline_group(cursor: GroupCursor, entity: Polyline) -> bool:
    code = cursor.code
    if code == 10:
        # Dummy point, only its z value (the elevation) has a meaning.
        point = parse_point(cursor)
        if point.z is not None:
            entity.elevation = point.z
        return True
    if code == 70:
        apply_flags(entity, cursor.value, PolylineFlag)
    elif code == 66:
        pass
    else:
        return False
    cursor.advance()
    return True


def parse_polyline(cursor: GroupCursor) -> Polyline:
    entity = read_entity(
        cursor,
        Polyline(),
        scalars={
            30: "elevation",
            39: "thickness",
            40: "start_width",
            41: "end_width",
            71: "mesh_m_count",
            72: "mesh_n_count",
            73: "smooth_m_density",
            74: "smooth_n_density",
            75: "surface_type",
        },
        points={210: "extrusion_direction"},
        handler=_polyline_group,
    )
    entity.vertices = parse_polyline_vertices(cursor)
    return entity


def _text_group(cursor: GroupCursor, entity: Text | Attdef) -> bool:
    if cursor.code != 71:
        return False
    apply_flags(entity, cursor.value, TextGenerationFlag)
    cursor.advance()
    return True


def parse_text(cursor: GroupCursor) -> Text:
    return read_entity(
        cursor,
        Text(),
        scalars={
            1: "text",
            7: "text_style",
            39: "thickness",
            40: "text_height",
            41: "x_scale",
            50: "rotation",
            51: "oblique_angle",
            72: "halign",
            73: "valign",
        },
        points={10: "start_point", 11: "end_point", 210: "extrusion_direction"},
        handler=_text_group,
    )


def _mtext_group(cursor: GroupCursor, entity: MText) -> bool:
    # Long texts are split into chunks, all of them are concatenated in order.
    if cursor.code not in (1, 3):
        return False
    entity.text += cursor.value
    cursor.advance()
    return True


def parse_mtext(cursor: GroupCursor) -> MText:
    return read_entity(
        cursor,
        MText(),
        scalars={
            7: "text_style",
            40: "height",
            41: "width",
            44: "line_spacing_factor",
            50: "rotation",
            71: "attachment_point",
            72: "drawing_direction",
        },
        points={10: "position", 11: "direction"},
        handler=_mtext_group,
    )


def parse_dimension(cursor: GroupCursor) -> Dimension:
    return read_entity(
        cursor,
        Dimension(),
        scalars={
            1: "text",
            2: "block",
            3: "style_name",
            42: "actual_measurement",
            50: "angle",
            53: "text_rotation",
            70: "dimension_type",
            71: "attachment_point",
        },
        points={10: "anchor_point", 11: "middle_of_text", 13: "definition_point_1", 14: "definition_point_2"},
    )


def _solid_group(cursor: GroupCursor, entity: Solid) -> bool:
    if not 10 <= cursor.code <= 13:
        return False
    index = cursor.code - 10
    entity.points[index] = parse_point(cursor)
    return True


def parse_solid(cursor: GroupCursor) -> Solid:
    return read_entity(
        cursor,
        Solid(),
        scalars={39: "thickness"},
        points={210: "extrusion_direction"},
        handler=_solid_group,
    )


def parse_point_entity(cursor: GroupCursor) -> PointEntity:
    return read_entity(
        cursor,
        PointEntity(),
        scalars={39: "thickness", 50: "x_axis_angle"},
        points={10: "position", 210: "extrusion_direction"},
    )


def _insert_group(cursor: GroupCursor, entity: Insert) -> bool:
    if cursor.code != 66:
        return False
    entity.attributes_follow = cursor.value != 0
    cursor.advance()
    return True


def parse_insert(cursor: GroupCursor) -> Insert:
    return read_entity(
        cursor,
        Insert(),
        scalars={
            2: "name",
            41: "x_scale",
            42: "y_scale",
            43: "z_scale",
            44: "column_spacing",
            45: "row_spacing",
            50: "rotation",
            70: "column_count",
            71: "row_count",
        },
        points={10: "position", 210: "extrusion_direction"},
        handler=_insert_group,
    )


def _attdef_group(cursor: GroupCursor, entity: Attdef) -> bool:
    if cursor.code != 70:
        return _text_group(cursor, entity)
    apply_flags(entity, cursor.value, AttdefFlag)
    cursor.advance()
    return True


def parse_attdef(cursor: GroupCursor) -> Attdef:
    return read_entity(
        cursor,
        Attdef(),
        scalars={
            1: "text",
            2: "tag",
            3: "prompt",
            7: "text_style",
            10: "x",
            20: "y",
            30: "z",
            39: "thickness",
            40: "text_height",
            41: "scale",
            50: "rotation",
            51: "oblique_angle",
            72: "horizontal_justification",
            73: "field_length",
            74: "vertical_justification",
            210: "extrusion_direction_x",
            220: "extrusion_direction_y",
            230: "extrusion_direction_z",
        },
        handler=_attdef_group,
    )


ENTITY_GRAMMARS: dict[EntityType, Callable[[GroupCursor], Entity]] = {
    EntityType.LINE: parse_line,
    EntityType.CIRCLE: parse_circle,
    EntityType.ARC: parse_circle,
    EntityType.LWPOLYLINE: parse_lw_polyline,
    EntityType.POLYLINE: parse_polyline,
    EntityType.TEXT: parse_text,
    EntityType.MTEXT: parse_mtext,
    EntityType.DIMENSION: parse_dimension,
    EntityType.SOLID: parse_solid,
    EntityType.POINT: parse_point_entity,
    EntityType.INSERT: parse_insert,
    EntityType.ATTDEF: parse_attdef,
}


def parse_entities(cursor: GroupCursor, for_block: bool) -> list[Entity]:
    """Parse entities until the end of the ENTITIES section or of a block.

    Parameters
    ----------
    cursor : GroupCursor
        Cursor on the first group of the first entity
    for_block : bool
        True when reading the entities of a BLOCK, the list then ends at
        ENDBLK which is left for the block grammar. Otherwise it ends at
        ENDSEC which is consumed.

    Returns
    -------
    list[Entity]
        Parsed entities in file order, each with a handle
    """
    end_value = "ENDBLK" if for_block else "ENDSEC"
    entities: list[Entity] = []
    while not cursor.is_group(0, end_value):
        if cursor.stops_at_eof("BLOCK" if for_block else "ENTITIES section"):
            return entities
        if for_block and cursor.is_group(0, "ENDSEC"):
            cursor.report(DiagnosticKind.UNTERMINATED_SECTION, "BLOCK is not terminated by ENDBLK")
            return entities
        if cursor.code != 0:
            # Remaining groups of a skipped entity.
            cursor.advance()
            continue

        entity_type = EntityType.from_name(cursor.value)
        if entity_type is None:
            cursor.report(DiagnosticKind.UNKNOWN_ENTITY, f"Unhandled entity {cursor.value}")
            cursor.advance()
            continue

        log.debug(f"{entity_type.value} {{")
        entity = ENTITY_GRAMMARS[entity_type](cursor)
        log.debug("}")
        cursor.handles.ensure_handle(entity)
        entities.append(entity)

    if not for_block:
        cursor.advance()
    return entities
