"""Group aggregation: collapse the cut list into one grid per unit."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..entities import GroupLoftPanel, GroupShutter, LayoutGroup
from ..value_objects import PanelItem, PanelType
from .labeling import panel_label, room_code, unit_code

__all__ = ["GroupAggregationService", "aggregate", "recalculate_group"]

logger = logging.getLogger(__name__)


def _max_per_index(pairs: Iterable[tuple[int, float]]) -> list[float]:
    """Largest value per 1-based index; indices never seen get 0."""
    largest: dict[int, float] = {}
    for index, value in pairs:
        largest[index] = max(value, largest.get(index, value))
    if not largest:
        return []
    return [largest.get(index, 0) for index in range(1, max(largest) + 1)]


def recalculate_group(group: LayoutGroup) -> None:
    """Refresh a group's derived grid dimensions from its panels, in place.

    Column widths and row heights are the largest shutter in each column
    and row. A column or row number with no shutters yields a 0 entry
    rather than being compacted away. Loft-only groups take their columns
    from the loft panels and have no rows.
    """
    if group.is_loft_only:
        group.col_widths_mm = _max_per_index(
            (panel.col, panel.width_mm) for panel in group.loft_panels
        )
        group.row_heights_mm = []
    else:
        group.col_widths_mm = _max_per_index(
            (shutter.col, shutter.width_mm) for shutter in group.shutters
        )
        group.row_heights_mm = _max_per_index(
            (shutter.row, shutter.height_mm) for shutter in group.shutters
        )
    group.loft_height_mm = max(
        (panel.height_mm for panel in group.loft_panels), default=0
    )
    group.total_width_mm = sum(group.col_widths_mm)
    group.total_height_mm = sum(group.row_heights_mm)

    if any(width == 0 for width in group.col_widths_mm):
        logger.debug(f"Group {group.key} has an empty column: {group.col_widths_mm}")


class GroupAggregationService:
    """Builds layout groups from extracted panels.

    Unit numbers count units per ``(room_index, room_code)`` in the order
    units are first seen, so callers must pass panels extracted from a
    stably ordered unit list to keep numbers stable across renders.
    """

    def aggregate(self, panels: Sequence[PanelItem]) -> list[LayoutGroup]:
        """Group panels by unit and derive each unit's grid.

        Args:
            panels: Panels in extraction order.

        Returns:
            One group per ``(room_index, unit_id)``, in first-seen order.
        """
        groups: dict[str, LayoutGroup] = {}
        unit_counts: dict[tuple[int, str], int] = {}

        for item in panels:
            group = groups.get(item.group_key)
            if group is None:
                code = room_code(item.room_name)
                count_key = (item.room_index, code)
                unit_counts[count_key] = unit_counts.get(count_key, 0) + 1
                group = LayoutGroup(
                    key=item.group_key,
                    room_index=item.room_index,
                    room_name=item.room_name,
                    room_code=code,
                    unit_label=item.unit_label,
                    unit_code=unit_code(item.unit_type),
                    unit_number=unit_counts[count_key],
                    unit_id=item.unit_id,
                    unit_index=item.unit_index,
                )
                groups[item.group_key] = group

            if item.panel_type is PanelType.SHUTTER:
                group.shutters.append(
                    GroupShutter(
                        row=item.row,
                        col=item.col,
                        width_mm=item.width_mm,
                        height_mm=item.height_mm,
                        label=panel_label(
                            group.room_code,
                            group.unit_number,
                            PanelType.SHUTTER,
                            len(group.shutters) + 1,
                        ),
                        id=item.id,
                    )
                )
            elif item.panel_type is PanelType.LOFT:
                group.loft_panels.append(
                    GroupLoftPanel(
                        col=item.col,
                        width_mm=item.width_mm,
                        height_mm=item.height_mm,
                        label=panel_label(
                            group.room_code,
                            group.unit_number,
                            PanelType.LOFT,
                            len(group.loft_panels) + 1,
                        ),
                        id=item.id,
                    )
                )

        for group in groups.values():
            recalculate_group(group)

        logger.debug(f"Aggregated {len(panels)} panels into {len(groups)} groups")
        return list(groups.values())


def aggregate(panels: Sequence[PanelItem]) -> list[LayoutGroup]:
    """Build layout groups from extracted panels."""
    return GroupAggregationService().aggregate(panels)
