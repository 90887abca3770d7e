"""CSV exporter: one row per tile."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import ClassVar

from poolpave.application.dtos import LayoutOutput

from .base import ExporterRegistry
from .json_exporter import tile_to_dict


@ExporterRegistry.register("csv")
class CsvExporter:
    """Exports tiles as CSV rows for spreadsheets and cutting lists."""

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    columns: ClassVar[tuple[str, ...]] = (
        "id",
        "x",
        "y",
        "width",
        "height",
        "angle",
        "is_partial",
        "side",
        "origin",
        "cut_percentage",
        "area_mm2",
    )

    def export_string(self, output: LayoutOutput) -> str:
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=self.columns, lineterminator="\n")
        writer.writeheader()
        for tile in output.tiles:
            writer.writerow(tile_to_dict(tile))
        return buffer.getvalue()

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
