"""Panel extraction from drawn units.

Turns the units drawn in each room into the flat production cut list:
one ``PanelItem`` per shutter cell, plus one per loft column when the
unit has a loft. Loft-only units produce loft panels alone.

Ordering is part of the contract. Shutters are emitted row-major (row
ascending, then column ascending) and loft panels in column order; label
numbering in the aggregation step follows this order.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..entities import DrawnUnit, Room
from ..value_objects import PanelItem, PanelType, ProductionSettings
from .labeling import unit_label
from .sizing import apply_production_sizing, resolve_spans

__all__ = ["PanelExtractionService", "build_room_units", "extract_panels"]

logger = logging.getLogger(__name__)

DEFAULT_ROOM_NAME = "Quotation"


def build_room_units(
    rooms: Sequence[Room],
    current_units: Sequence[DrawnUnit],
    active_room_index: int = 0,
) -> list[Room]:
    """Combine saved rooms with the units currently on the canvas.

    The canvas holds the live units of the active room, which may be newer
    than the copy saved on the room. A quotation without rooms is treated
    as a single room named "Quotation".

    Args:
        rooms: Rooms of the quotation in display order.
        current_units: Units currently drawn on the canvas.
        active_room_index: Index of the room being edited.

    Returns:
        Rooms whose position is their room index.
    """
    if not rooms:
        return [Room(name=DEFAULT_ROOM_NAME, units=list(current_units))]
    return [
        Room(
            name=room.name,
            units=list(current_units) if index == active_room_index else list(room.units),
        )
        for index, room in enumerate(rooms)
    ]


class PanelExtractionService:
    """Extracts production panels from drawn units.

    Example:
        >>> from wardrobes.domain import DrawnUnit, Room
        >>> unit = DrawnUnit(id="u1", width_mm=2700, height_mm=2400, shutter_count=3)
        >>> panels = PanelExtractionService().extract([Room("Master Bedroom", [unit])])
        >>> [(p.row, p.col) for p in panels]
        [(1, 1), (1, 2), (1, 3)]
        >>> {p.width_mm for p in panels}
        {900.0}
    """

    def __init__(self, settings: ProductionSettings | None = None) -> None:
        self.settings = settings or ProductionSettings()

    def extract(self, rooms: Sequence[Room]) -> list[PanelItem]:
        """Extract panels for every unit of every room.

        Units without a real-world width or height are skipped.

        Args:
            rooms: Rooms in quotation order; position is the room index.

        Returns:
            Panels grouped by room, then unit, in extraction order.
        """
        panels: list[PanelItem] = []
        for room_index, room in enumerate(rooms):
            for unit_index, unit in enumerate(room.units):
                if not unit.is_drawn:
                    logger.debug(
                        f"Skipping unit {unit.id!r} in room {room.name!r}: "
                        f"size {unit.width_mm}x{unit.height_mm}mm"
                    )
                    continue
                panels.extend(
                    self.extract_unit(unit, room_index, room.name, unit_index)
                )
        return panels

    def extract_unit(
        self, unit: DrawnUnit, room_index: int, room_name: str, unit_index: int
    ) -> list[PanelItem]:
        """Extract shutter and loft panels for a single unit."""
        if not unit.is_drawn:
            return []

        label = unit_label(unit.unit_type, unit_index)

        def make(panel_id: str, panel_type: PanelType, row: int, col: int,
                 width_mm: float, height_mm: float) -> PanelItem:
            return PanelItem(
                id=panel_id,
                room_index=room_index,
                room_name=room_name,
                unit_id=unit.id,
                unit_index=unit_index,
                unit_label=label,
                unit_type=unit.unit_type,
                panel_type=panel_type,
                row=row,
                col=col,
                width_mm=self._width(width_mm),
                height_mm=self._height(height_mm),
                laminate_code=self.settings.laminate_code(panel_type),
            )

        panels: list[PanelItem] = []
        if not unit.loft_only:
            col_widths, row_heights = self._shutter_spans(unit)
            for row, height_mm in enumerate(row_heights, start=1):
                for col, width_mm in enumerate(col_widths, start=1):
                    panels.append(
                        make(f"{unit.id}-{row}-{col}", PanelType.SHUTTER,
                             row, col, width_mm, height_mm)
                    )

        if unit.has_loft and self.settings.include_loft:
            loft_height_mm = self._loft_height(unit)
            if loft_height_mm > 0:
                for col, width_mm in enumerate(self._loft_spans(unit), start=1):
                    panels.append(
                        make(f"{unit.id}-loft-{col}", PanelType.LOFT,
                             0, col, width_mm, loft_height_mm)
                    )
            else:
                logger.debug(f"Unit {unit.id!r} has a loft without height")

        return panels

    def _width(self, value_mm: float) -> float:
        return apply_production_sizing(
            value_mm, self.settings.width_reduction_mm, self.settings.rounding_mm
        )

    def _height(self, value_mm: float) -> float:
        return apply_production_sizing(
            value_mm, self.settings.height_reduction_mm, self.settings.rounding_mm
        )

    def _shutter_spans(self, unit: DrawnUnit) -> tuple[list[float], list[float]]:
        box = unit.box
        col_widths = resolve_spans(
            unit.width_mm,
            unit.shutter_count,
            spans_mm=unit.column_widths_mm,
            dividers=unit.shutter_divider_xs,
            start_px=box.x if box else 0.0,
            size_px=box.width if box else 0.0,
        )
        row_heights = resolve_spans(
            unit.height_mm,
            unit.section_count,
            spans_mm=unit.row_heights_mm,
            dividers=unit.horizontal_divider_ys,
            start_px=box.y if box else 0.0,
            size_px=box.height if box else 0.0,
        )
        return col_widths, row_heights

    def _loft_spans(self, unit: DrawnUnit) -> list[float]:
        loft_width_mm = unit.loft_width_mm if unit.loft_width_mm > 0 else unit.width_mm
        loft_box = unit.loft_box
        return resolve_spans(
            loft_width_mm,
            unit.loft_shutter_count,
            spans_mm=unit.loft_widths_mm,
            dividers=unit.loft_divider_xs,
            start_px=loft_box.x if loft_box else 0.0,
            size_px=loft_box.width if loft_box else 0.0,
        )

    def _loft_height(self, unit: DrawnUnit) -> float:
        if unit.loft_height_mm > 0:
            return unit.loft_height_mm
        # Fall back to the drawn loft box, scaled like the shutter area
        if unit.loft_box and unit.box and unit.box.height > 0:
            return unit.loft_box.height * (unit.height_mm / unit.box.height)
        return 0.0


def extract_panels(
    rooms: Sequence[Room], settings: ProductionSettings | None = None
) -> list[PanelItem]:
    """Extract the production cut list for a set of rooms."""
    return PanelExtractionService(settings).extract(rooms)
