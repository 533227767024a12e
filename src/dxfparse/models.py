"""Data models of a parsed DXF document.

This module contains the dataclasses produced by the parser: points, the
supported entity types, blocks, the VPORT / LTYPE / LAYER tables and the
document that owns all of them.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .diagnostics import Diagnostic

log = logging.getLogger(__name__)

Handle = str | int


@dataclass(frozen=True)
class Point:
    """A 2D or 3D point.

    Parameters
    ----------
    x : float
        X coordinate
    y : float
        Y coordinate
    z : float | None
        Z coordinate, None when the file only supplied x and y
    """

    x: float
    y: float
    z: float | None = None

    @property
    def is_3d(self) -> bool:
        return self.z is not None

    def as_tuple(self) -> tuple[float, ...]:
        if self.z is None:
            return (self.x, self.y)
        return (self.x, self.y, self.z)

    def __eq__(self, value: object, /) -> bool:
        if not isinstance(value, Point):
            return False
        if self.is_3d != value.is_3d:
            return False
        return bool(np.allclose(self.as_tuple(), value.as_tuple()))

    def __hash__(self) -> int:
        return hash(self.as_tuple())


HeaderValue = str | int | float | bool | Point


@dataclass
class Entity:
    """Properties shared by every entity type.

    A color index of 0 means BYBLOCK and 256 means BYLAYER, in both cases
    ``color`` stays None.
    """

    type: str = ""
    handle: Handle | None = None
    layer: str | None = None
    line_type: str | None = None
    line_type_scale: float | None = None
    visible: bool = True
    color_index: int | None = None
    color: int | None = None
    in_paper_space: bool = False
    owner_handle: str | None = None
    material_object_handle: str | None = None
    lineweight: int | None = None


@dataclass
class Line(Entity):
    vertices: list[Point] = field(default_factory=list)
    thickness: float | None = None
    extrusion_direction: Point | None = None


@dataclass
class Circle(Entity):
    """A circle, angles are stored in radians."""

    center: Point | None = None
    radius: float | None = None
    start_angle: float | None = None
    end_angle: float | None = None
    angle_length: float | None = None
    thickness: float | None = None
    extrusion_direction: Point | None = None


@dataclass
class Arc(Circle):
    pass


@dataclass
class LwPolylineVertex:
    x: float = 0.0
    y: float = 0.0
    z: float | None = None
    start_width: float | None = None
    end_width: float | None = None
    bulge: float | None = None


@dataclass
class LwPolyline(Entity):
    vertices: list[LwPolylineVertex] = field(default_factory=list)
    vertex_count: int = 0
    elevation: float | None = None
    depth: float | None = None
    width: float | None = None
    shape: bool = False
    plinegen: bool = False
    extrusion_direction: Point | None = None


@dataclass
class Vertex(Entity):
    """A VERTEX of a POLYLINE, coordinates are kept as separate values."""

    x: float | None = None
    y: float | None = None
    z: float | None = None
    start_width: float | None = None
    end_width: float | None = None
    bulge: float | None = None
    curve_fit_tangent_direction: float | None = None
    faces: list[int] = field(default_factory=list)
    curve_fitting_vertex: bool = False
    curve_fit_tangent: bool = False
    spline_vertex: bool = False
    spline_control_point: bool = False
    three_d_polyline_vertex: bool = False
    three_d_polyline_mesh: bool = False
    polyface_mesh_vertex: bool = False


@dataclass
class Polyline(Entity):
    vertices: list[Vertex] = field(default_factory=list)
    elevation: float | None = None
    thickness: float | None = None
    start_width: float | None = None
    end_width: float | None = None
    mesh_m_count: int | None = None
    mesh_n_count: int | None = None
    smooth_m_density: int | None = None
    smooth_n_density: int | None = None
    surface_type: int | None = None
    extrusion_direction: Point | None = None
    shape: bool = False
    includes_curve_fit_vertices: bool = False
    includes_spline_fit_vertices: bool = False
    is_3d_polyline: bool = False
    is_3d_polygon_mesh: bool = False
    is_3d_polygon_mesh_closed: bool = False
    is_polyface_mesh: bool = False
    has_continuous_linetype_pattern: bool = False


@dataclass
class Text(Entity):
    """A single line TEXT.

    ``halign`` and ``valign`` are only meaningful when ``end_point`` is set.
    """

    text: str | None = None
    start_point: Point | None = None
    end_point: Point | None = None
    text_height: float | None = None
    x_scale: float | None = None
    rotation: float | None = None
    oblique_angle: float | None = None
    text_style: str | None = None
    thickness: float | None = None
    halign: int | None = None
    valign: int | None = None
    backwards: bool = False
    mirrored: bool = False
    extrusion_direction: Point | None = None


@dataclass
class MText(Entity):
    text: str = ""
    position: Point | None = None
    height: float | None = None
    width: float | None = None
    attachment_point: int | None = None
    drawing_direction: int | None = None
    text_style: str | None = None
    direction: Point | None = None
    rotation: float | None = None
    line_spacing_factor: float | None = None


@dataclass
class Dimension(Entity):
    block: str | None = None
    style_name: str | None = None
    dimension_type: int | None = None
    anchor_point: Point | None = None
    middle_of_text: Point | None = None
    definition_point_1: Point | None = None
    definition_point_2: Point | None = None
    attachment_point: int | None = None
    actual_measurement: float | None = None
    text: str | None = None
    angle: float | None = None
    text_rotation: float | None = None


@dataclass
class Solid(Entity):
    """A SOLID with its four corners, missing corners stay None."""

    points: list[Point | None] = field(default_factory=lambda: [None, None, None, None])
    thickness: float | None = None
    extrusion_direction: Point | None = None


@dataclass
class PointEntity(Entity):
    position: Point | None = None
    thickness: float | None = None
    x_axis_angle: float | None = None
    extrusion_direction: Point | None = None


@dataclass
class Insert(Entity):
    name: str | None = None
    position: Point | None = None
    x_scale: float | None = None
    y_scale: float | None = None
    z_scale: float | None = None
    rotation: float | None = None
    column_count: int | None = None
    row_count: int | None = None
    column_spacing: float | None = None
    row_spacing: float | None = None
    attributes_follow: bool = False
    extrusion_direction: Point | None = None


@dataclass
class Attdef(Entity):
    """An attribute definition, position and extrusion are kept as scalars."""

    text: str | None = None
    tag: str | None = None
    prompt: str | None = None
    text_style: str = "STANDARD"
    x: float | None = None
    y: float | None = None
    z: float | None = None
    thickness: float | None = None
    text_height: float | None = None
    scale: float = 1
    rotation: float | None = None
    oblique_angle: float | None = None
    invisible: bool = False
    constant: bool = False
    verification_required: bool = False
    preset: bool = False
    backwards: bool = False
    mirrored: bool = False
    horizontal_justification: int | None = None
    field_length: int | None = None
    vertical_justification: int | None = None
    extrusion_direction_x: float | None = None
    extrusion_direction_y: float | None = None
    extrusion_direction_z: float | None = None


@dataclass
class Block:
    name: str | None = None
    name2: str | None = None
    handle: Handle | None = None
    layer: str | None = None
    position: Point | None = None
    type: int = 0
    xref_path: str | None = None
    paper_space: bool = False
    owner_handle: str | None = None
    entities: list[Entity] = field(default_factory=list)
    anonymous: bool = False
    non_constant_attributes: bool = False
    xref: bool = False
    xref_overlay: bool = False
    externally_dependent: bool = False
    resolved_xref: bool = False
    referenced_xref: bool = False


@dataclass
class ViewPort:
    name: str | None = None
    handle: str | None = None
    owner_handle: str | None = None
    lower_left_corner: Point | None = None
    upper_right_corner: Point | None = None
    center: Point | None = None
    snap_base_point: Point | None = None
    snap_spacing: Point | None = None
    grid_spacing: Point | None = None
    view_direction_from_target: Point | None = None
    view_target: Point | None = None
    view_height: float | None = None
    aspect_ratio: float | None = None
    lens_length: float | None = None
    front_clipping_plane: float | None = None
    back_clipping_plane: float | None = None
    snap_rotation_angle: float | None = None
    view_twist_angle: float | None = None
    orthographic_type: int | None = None
    ucs_origin: Point | None = None
    ucs_x_axis: Point | None = None
    ucs_y_axis: Point | None = None
    render_mode: int | None = None
    default_lighting_type: int | None = None
    default_lighting_on: bool | None = None
    ambient_color: int | str | None = None


@dataclass
class LineType:
    name: str | None = None
    handle: str | None = None
    owner_handle: str | None = None
    description: str | None = None
    alignment: int | None = None
    pattern_length: float | None = None
    element_count: int = 0
    pattern: list[float] = field(default_factory=list)


@dataclass
class Layer:
    name: str | None = None
    handle: str | None = None
    owner_handle: str | None = None
    visible: bool = True
    color_index: int | None = None
    color: int | None = None
    line_type: str | None = None
    lineweight: int | None = None
    plot: bool = True
    frozen: bool = False
    frozen_in_new_viewports: bool = False
    locked: bool = False


@dataclass
class Table(ABC):
    """Common part of the symbol tables.

    ``expected_count`` is the record count the file declares (group 70),
    it is only compared against the parsed records, never enforced.
    """

    handle: str | None = None
    owner_handle: str | None = None
    expected_count: int = 0

    @property
    @abstractmethod
    def record_count(self) -> int:
        pass

    @abstractmethod
    def add(self, record: Any) -> None:
        pass


@dataclass
class ViewPortTable(Table):
    # Several records may share a name to describe a multiple viewport setup.
    view_ports: list[ViewPort] = field(default_factory=list)

    @property
    def record_count(self) -> int:
        return len(self.view_ports)

    def add(self, record: ViewPort) -> None:
        self.view_ports.append(record)


@dataclass
class LineTypeTable(Table):
    line_types: dict[str, LineType] = field(default_factory=dict)

    @property
    def record_count(self) -> int:
        return len(self.line_types)

    def add(self, record: LineType) -> None:
        self.line_types[record.name] = record


@dataclass
class LayerTable(Table):
    layers: dict[str, Layer] = field(default_factory=dict)

    @property
    def record_count(self) -> int:
        return len(self.layers)

    def add(self, record: Layer) -> None:
        self.layers[record.name] = record


@dataclass
class Tables:
    view_port: ViewPortTable | None = None
    line_type: LineTypeTable | None = None
    layer: LayerTable | None = None


@dataclass
class Document:
    """Root of a parsed DXF file.

    Block entities and top-level entities are disjoint lists, nothing is
    shared between two places of the document.
    """

    header: dict[str, HeaderValue] = field(default_factory=dict)
    tables: Tables = field(default_factory=Tables)
    blocks: dict[str, Block] = field(default_factory=dict)
    entities: list[Entity] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list, repr=False, compare=False)

    def query(self, types: str | Iterable[str] | None = None) -> Iterator[Entity]:
        """Iterate over the top-level entities of the given types.

        Parameters
        ----------
        types : str | Iterable[str] | None
            One type name, several names, or a space separated string of
            names. None returns all entities.
        """
        if types is None:
            yield from self.entities
            return
        if isinstance(types, str):
            types = types.split()
        type_set = {name.upper() for name in types}
        for entity in self.entities:
            if entity.type.upper() in type_set:
                yield entity

    def layer(self, name: str) -> Layer | None:
        if self.tables.layer is None:
            return None
        return self.tables.layer.layers.get(name)

    def get_statistics(self) -> dict[str, Any]:
        """Count entities per type and the blocks, layers and line types."""
        entity_types: dict[str, int] = {}
        for entity in self.entities:
            entity_types[entity.type] = entity_types.get(entity.type, 0) + 1
        return {
            "entities": entity_types,
            "blocks": len(self.blocks),
            "block_entities": sum(len(block.entities) for block in self.blocks.values()),
            "layers": 0 if self.tables.layer is None else self.tables.layer.record_count,
            "line_types": 0 if self.tables.line_type is None else self.tables.line_type.record_count,
            "view_ports": 0 if self.tables.view_port is None else self.tables.view_port.record_count,
            "header_variables": len(self.header),
        }
