"""Infrastructure layer - formatters and exporters."""

from .exporters import (
    CsvCutListExporter,
    Exporter,
    ExporterRegistry,
    JsonLayoutExporter,
)
from .formatters import CutListFormatter, LayoutGroupFormatter, ProductionStatsFormatter

__all__ = [
    "CsvCutListExporter",
    "CutListFormatter",
    "Exporter",
    "ExporterRegistry",
    "JsonLayoutExporter",
    "LayoutGroupFormatter",
    "ProductionStatsFormatter",
]
