"""Infrastructure layer - output formatting and export."""

from .exporters import CsvExporter, ExporterRegistry, JsonExporter
from .formatters import LayoutReportFormatter, MaterialsSummaryFormatter, TileListFormatter

__all__ = [
    "CsvExporter",
    "ExporterRegistry",
    "JsonExporter",
    "LayoutReportFormatter",
    "MaterialsSummaryFormatter",
    "TileListFormatter",
]
