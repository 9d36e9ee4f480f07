"""Text formatters for production cut lists and unit layouts."""

from __future__ import annotations

from wardrobes.application.dtos import ProductionLayoutOutput
from wardrobes.domain import LayoutGroup, PanelItem, ProductionStats
from wardrobes.domain.services import format_mm, sort_for_cutting


class CutListFormatter:
    """Formats the production cut list as a table."""

    def __init__(self, sort_by_size: bool = False) -> None:
        """Initialize formatter.

        Args:
            sort_by_size: List the largest panels first instead of in
                extraction order.
        """
        self._sort_by_size = sort_by_size

    def format(self, output: ProductionLayoutOutput) -> str:
        if not output.panels:
            return "No panels in cut list."

        rounding = output.settings.rounding_mm
        labels = output.panel_labels()
        panels: list[PanelItem] = (
            sort_for_cutting(output.panels) if self._sort_by_size else output.panels
        )

        lines = [
            "CUT LIST",
            "=" * 86,
            f"{'Code':<10} {'Room':<18} {'Unit':<16} {'Type':<8} "
            f"{'Pos':<6} {'Width':>8} {'Height':>8} {'Area (m2)':>9}",
            "-" * 86,
        ]

        total_area = 0.0
        for panel in panels:
            position = f"L{panel.col}" if panel.row == 0 else f"R{panel.row}C{panel.col}"
            area_m2 = panel.area_mm2 / 1_000_000
            lines.append(
                f"{labels.get((panel.group_key, panel.id), ''):<10} "
                f"{panel.room_name[:18]:<18} {panel.unit_label[:16]:<16} "
                f"{panel.panel_type.value:<8} {position:<6} "
                f"{format_mm(panel.width_mm, rounding):>8} "
                f"{format_mm(panel.height_mm, rounding):>8} {area_m2:>9.3f}"
            )
            total_area += area_m2

        lines.append("-" * 86)
        lines.append(f"{'TOTAL':<70} {total_area:>15.3f}")
        return "\n".join(lines)


class ProductionStatsFormatter:
    """Formats panel counts as a one-line summary."""

    def format(self, stats: ProductionStats) -> str:
        return (
            f"Panels: {stats.total_panels} "
            f"(shutters: {stats.shutter_count}, loft: {stats.loft_count})"
        )


class LayoutGroupFormatter:
    """Formats unit grids for the production preview.

    Each unit prints its overall envelope, the column widths and row
    heights, then the shutter grid row by row with each panel's label.
    """

    def __init__(self, rounding_mm: float = 1.0) -> None:
        self._rounding = rounding_mm

    def _mm(self, value: float) -> str:
        return format_mm(value, self._rounding)

    def format(self, groups: list[LayoutGroup]) -> str:
        if not groups:
            return "No units to lay out."
        return "\n\n".join(self.format_group(group) for group in groups)

    def format_group(self, group: LayoutGroup) -> str:
        lines = [
            f"{group.prefix}  {group.unit_label} ({group.unit_code}) - {group.room_name}",
            "=" * 60,
            f"Overall:  {self._mm(group.total_width_mm)} x "
            f"{self._mm(group.overall_height_mm)} mm",
            f"Columns:  {' | '.join(self._mm(w) for w in group.col_widths_mm) or '-'}",
            f"Rows:     {' | '.join(self._mm(h) for h in group.row_heights_mm) or '-'}",
        ]

        if group.loft_panels:
            lines.append(f"Loft:     {self._mm(group.loft_height_mm)} mm")
            lines.append(
                "  " + "  ".join(
                    f"{p.label} {self._mm(p.width_mm)}x{self._mm(p.height_mm)}"
                    for p in group.loft_panels
                )
            )

        rows = sorted({s.row for s in group.shutters})
        for row in rows:
            cells = sorted((s for s in group.shutters if s.row == row), key=lambda s: s.col)
            lines.append(
                "  " + "  ".join(
                    f"{s.label} {self._mm(s.width_mm)}x{self._mm(s.height_mm)}"
                    for s in cells
                )
            )
        return "\n".join(lines)
