"""JSON export of a parsed DXF document.

Points are written as objects with x, y and (if present) z, every record
with a color also gets that color split into red, green and blue.
"""

import dataclasses
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

from .. import colors
from ..models import Block, Document, Entity, Point, Tables

log = logging.getLogger(__name__)


def _export_point(point: Point) -> dict[str, float]:
    point_data = {"x": point.x, "y": point.y}
    if point.z is not None:
        point_data["z"] = point.z
    return point_data


def export_color(color: tuple[int, int, int]) -> dict[str, int]:
    return {"r": color[0], "g": color[1], "b": color[2]}


def _export_value(value: Any) -> Any:
    """Convert a model value into plain JSON types."""
    if isinstance(value, Point):
        return _export_point(value)
    if isinstance(value, Enum):
        return value.value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _export_record(value)
    if isinstance(value, dict):
        return {str(key): _export_value(item) for key, item in value.items()}
    if isinstance(value, (list | tuple)):
        return [_export_value(item) for item in value]
    return value


def _export_record(record: Any) -> dict[str, Any]:
    """Export the fields of a dataclass record, adding its RGB color."""
    record_data = {field.name: _export_value(getattr(record, field.name)) for field in dataclasses.fields(record)}
    color = getattr(record, "color", None)
    if isinstance(color, int):
        record_data["rgb"] = export_color(colors.to_rgb(color))
    return record_data


class JsonExporter:
    """Exports a parsed DXF document to a JSON file.

    Parameters
    ----------
    output_path : Path
        Path where the JSON file will be saved
    """

    def __init__(self, output_path: Path) -> None:
        self.output_path = output_path
        self._statistics: dict[str, int] = {}

    def export_document(self, document: Document) -> None:
        """Write the document as JSON.

        Raises
        ------
        OSError
            If the JSON file cannot be written
        """
        export_data = {
            "header": _export_value(document.header),
            "tables": self._export_tables(document.tables),
            "blocks": {name: self._export_block(block) for name, block in document.blocks.items()},
            "entities": [self._export_entity(entity) for entity in document.entities],
            "diagnostics": self._export_diagnostics(document),
        }

        try:
            with open(self.output_path, "w", encoding="utf-8") as json_file:
                json.dump(export_data, json_file, indent=2, ensure_ascii=False)
        except OSError as e:
            raise OSError(f"Cannot write JSON file {self.output_path}: {e}") from e

        self._statistics = {
            "header_variables": len(document.header),
            "blocks": len(document.blocks),
            "entities": len(document.entities),
            "diagnostics": len(document.diagnostics),
        }
        log.info(f"Exported {len(document.entities)} entities to {self.output_path}")

    def get_exported_statistics(self) -> dict[str, int]:
        return dict(self._statistics)

    def _export_tables(self, tables: Tables) -> dict[str, Any]:
        tables_data = {}
        for field in dataclasses.fields(tables):
            table = getattr(tables, field.name)
            if table is None:
                continue
            tables_data[field.name] = _export_record(table)
        return tables_data

    def _export_block(self, block: Block) -> dict[str, Any]:
        block_data = _export_record(block)
        block_data["entities"] = [self._export_entity(entity) for entity in block.entities]
        return block_data

    def _export_entity(self, entity: Entity) -> dict[str, Any]:
        """Export one entity, ``type`` first to keep the JSON readable."""
        entity_data = _export_record(entity)
        return {"type": entity_data.pop("type"), **entity_data}

    def _export_diagnostics(self, document: Document) -> dict[str, Any]:
        counts: dict[str, int] = {}
        for diagnostic in document.diagnostics:
            counts[diagnostic.kind.value] = counts.get(diagnostic.kind.value, 0) + 1
        return {
            "total": len(document.diagnostics),
            "by_kind": counts,
            "messages": [str(diagnostic) for diagnostic in document.diagnostics],
        }
