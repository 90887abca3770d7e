"""JSON exporter for tile layouts."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar

from poolpave.application.dtos import LayoutOutput
from poolpave.domain.value_objects import Statistics, Tile

from .base import ExporterRegistry


def tile_to_dict(tile: Tile) -> dict[str, Any]:
    """Plain-data form of a tile for serialisation."""
    side = tile.side.value if isinstance(tile.side, Enum) else tile.side
    return {
        "id": tile.id,
        "x": round(tile.x, 3),
        "y": round(tile.y, 3),
        "width": round(tile.width, 3),
        "height": round(tile.height, 3),
        "angle": round(tile.angle, 3),
        "is_partial": tile.is_partial,
        "side": side,
        "origin": tile.origin.value,
        "cut_percentage": tile.cut_percentage,
        "area_mm2": round(tile.area, 3),
    }


def statistics_to_dict(stats: Statistics) -> dict[str, Any]:
    return {
        "full_count": stats.full_count,
        "partial_count": stats.partial_count,
        "total_area_m2": round(stats.total_area_m2, 4),
        "subtotal": stats.subtotal,
        "order_quantity": stats.order_quantity,
        "wastage_percent": stats.wastage_percent,
    }


@ExporterRegistry.register("json")
class JsonExporter:
    """Exports a layout as JSON with ``tiles`` and ``statistics``."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def to_dict(self, output: LayoutOutput) -> dict[str, Any]:
        return {
            "kind": output.kind,
            "errors": list(output.errors),
            "warnings": list(output.warnings),
            "statistics": statistics_to_dict(output.statistics),
            "tiles": [tile_to_dict(t) for t in output.tiles],
        }

    def export_string(self, output: LayoutOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent, ensure_ascii=False)

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

