"""File exporters for production layouts, with a format registry."""

from __future__ import annotations

import csv
import io
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import asdict
from pathlib import Path
from typing import Any, ClassVar, Protocol, runtime_checkable

from wardrobes.application.dtos import ProductionLayoutOutput
from wardrobes.domain.services import format_mm

logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Attributes:
        format_name: Registry name of the format (e.g., "csv").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export_string(self, output: ProductionLayoutOutput) -> str:
        """Render the layout output in this format."""
        ...

    def export(self, output: ProductionLayoutOutput, path: Path) -> None:
        """Write the layout output to a file."""
        ...


class ExporterRegistry:
    """Format name to exporter class lookup used by ``wardrobes export``.

    Exporters register themselves with the ``@ExporterRegistry.register``
    decorator. Registering the same class twice is a no-op; registering a
    different class under a taken name replaces it with a warning.
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator registering an exporter class under ``format_name``."""
        key = format_name.lower()

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            current = cls._exporters.get(key)
            if current is not None and current is not exporter_class:
                logger.warning(
                    f"Format '{key}' now exported by {exporter_class.__name__} "
                    f"instead of {current.__name__}"
                )
            cls._exporters[key] = exporter_class
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Exporter class for a format name, ignoring case.

        Raises:
            KeyError: If the format is unknown. The message lists the
                formats that are available.
        """
        try:
            return cls._exporters[format_name.lower()]
        except KeyError:
            raise KeyError(
                f"Unknown export format '{format_name}'. "
                f"Available formats: {', '.join(cls.available_formats()) or 'none'}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)


class _FileExporter(ABC):
    """Shared file writing for text-based exporters."""

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export_string(self, output: ProductionLayoutOutput) -> str:
        """Render the layout output as text."""

    def export(self, output: ProductionLayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported {self.format_name} to {path}")


@ExporterRegistry.register("csv")
class CsvCutListExporter(_FileExporter):
    """Cut list as CSV, one row per panel, sizes as final production values.

    The laminate column is blank for panels with no laminate chosen.
    """

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    HEADER: ClassVar[list[str]] = [
        "Code",
        "Room",
        "Unit",
        "Panel Type",
        "Row",
        "Column",
        "Width (mm)",
        "Height (mm)",
        "Laminate",
    ]

    def export_string(self, output: ProductionLayoutOutput) -> str:
        rounding = output.settings.rounding_mm
        labels = output.panel_labels()
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(self.HEADER)
        for panel in output.panels:
            writer.writerow(
                [
                    labels.get((panel.group_key, panel.id), ""),
                    panel.room_name,
                    panel.unit_label,
                    panel.panel_type.value,
                    panel.row,
                    panel.col,
                    format_mm(panel.width_mm, rounding),
                    format_mm(panel.height_mm, rounding),
                    panel.laminate_code,
                ]
            )
        return buffer.getvalue()


@ExporterRegistry.register("json")
class JsonLayoutExporter(_FileExporter):
    """Full layout as JSON: cut list, adjusted unit grids and counts."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def to_dict(self, output: ProductionLayoutOutput) -> dict[str, Any]:
        groups = []
        for group in output.adjusted_groups:
            data = asdict(group)
            data["overall_height_mm"] = group.overall_height_mm
            groups.append(data)
        return {
            "settings": asdict(output.settings),
            "stats": asdict(output.stats),
            "panels": [asdict(panel) for panel in output.panels],
            "groups": groups,
        }

    def export_string(self, output: ProductionLayoutOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent)
