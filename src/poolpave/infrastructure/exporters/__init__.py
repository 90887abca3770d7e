"""Exporters for tile layouts.

Importing this package registers the built-in exporters with
ExporterRegistry.
"""

from .base import Exporter, ExporterRegistry
from .csv_exporter import CsvExporter
from .json_exporter import JsonExporter, statistics_to_dict, tile_to_dict

__all__ = [
    "CsvExporter",
    "Exporter",
    "ExporterRegistry",
    "JsonExporter",
    "statistics_to_dict",
    "tile_to_dict",
]
