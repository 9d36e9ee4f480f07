"""Edit handlers that turn operator actions into ``UnitOverrides``.

``apply_overrides`` only applies the sparse map it is given. The handlers
here keep the grid consistent before that happens. A width edit on one
shutter is written for the whole column, and a height edit for the whole
row. All handlers return new objects and leave their inputs untouched.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Mapping

from ..entities import LayoutGroup
from ..value_objects import DEFAULT_GAP_MM, PanelOverride, UnitOverrides
from .sizing import round_half_up

__all__ = [
    "reset_unit",
    "set_gap",
    "set_overall_height",
    "set_overall_width",
    "set_panel_height",
    "set_panel_width",
]

logger = logging.getLogger(__name__)


def _with_panels(
    overrides: UnitOverrides, panel_ids: Iterable[str], **dims: float | None
) -> UnitOverrides:
    panels = dict(overrides.panels)
    for panel_id in panel_ids:
        panels[panel_id] = replace(panels.get(panel_id, PanelOverride()), **dims)
    return replace(overrides, panels=panels)


def _without_dimension(overrides: UnitOverrides, name: str, ids: set[str]) -> UnitOverrides:
    """Clear one dimension from the given panel overrides, dropping empty ones."""
    panels: dict[str, PanelOverride] = {}
    for panel_id, override in overrides.panels.items():
        if panel_id in ids:
            override = replace(override, **{name: None})
        if override.width_mm is not None or override.height_mm is not None:
            panels[panel_id] = override
    return replace(overrides, panels=panels)


def set_panel_width(
    group: LayoutGroup,
    overrides: UnitOverrides | None,
    panel_id: str,
    width_mm: float,
) -> UnitOverrides:
    """Set a panel's width, propagated to every shutter in its column.

    Loft panels are edited individually. Unknown ids leave the overrides
    unchanged.
    """
    overrides = overrides or UnitOverrides()
    shutter = group.find_shutter(panel_id)
    if shutter is not None:
        targets = [s.id for s in group.shutters if s.col == shutter.col]
    elif group.find_loft_panel(panel_id) is not None:
        targets = [panel_id]
    else:
        logger.debug(f"Group {group.key}: width edit for unknown panel {panel_id!r}")
        return overrides
    return _with_panels(overrides, targets, width_mm=width_mm)


def set_panel_height(
    group: LayoutGroup,
    overrides: UnitOverrides | None,
    panel_id: str,
    height_mm: float,
) -> UnitOverrides:
    """Set a panel's height, propagated to every shutter in its row.

    A loft edit applies to the whole loft row, since loft panels share a
    height. Unknown ids leave the overrides unchanged.
    """
    overrides = overrides or UnitOverrides()
    shutter = group.find_shutter(panel_id)
    if shutter is not None:
        targets = [s.id for s in group.shutters if s.row == shutter.row]
    elif group.find_loft_panel(panel_id) is not None:
        targets = [panel.id for panel in group.loft_panels]
    else:
        logger.debug(f"Group {group.key}: height edit for unknown panel {panel_id!r}")
        return overrides
    return _with_panels(overrides, targets, height_mm=height_mm)


def set_overall_width(
    group: LayoutGroup, overrides: UnitOverrides | None, width_mm: float
) -> UnitOverrides:
    """Request a new overall width.

    Earlier per-panel width edits are cleared so the proportional rescale
    is not overwritten by them.
    """
    overrides = overrides or UnitOverrides()
    ids = {s.id for s in group.shutters} | {p.id for p in group.loft_panels}
    overrides = _without_dimension(overrides, "width_mm", ids)
    return replace(overrides, overall_width_mm=width_mm)


def set_overall_height(
    group: LayoutGroup, overrides: UnitOverrides | None, height_mm: float
) -> UnitOverrides:
    """Request a new overall height, loft included.

    Earlier shutter height edits are cleared; loft height edits are kept
    because the loft is not rescaled.
    """
    overrides = overrides or UnitOverrides()
    overrides = _without_dimension(
        overrides, "height_mm", {s.id for s in group.shutters}
    )
    return replace(overrides, overall_height_mm=height_mm)


def set_gap(
    group: LayoutGroup, overrides: UnitOverrides | None, gap_mm: float
) -> UnitOverrides:
    """Change the gap between shutters while keeping the outer envelope.

    The envelope (shutters plus the old gaps) is redistributed evenly over
    the columns and rows after subtracting the new gaps. ``group`` should be
    the group as currently displayed, overrides included.

    Args:
        group: Group with the current overrides applied.
        overrides: Current overrides for the group.
        gap_mm: New gap between adjacent shutters.

    Returns:
        Overrides with the new gap and an explicit size for every shutter.
    """
    overrides = overrides or UnitOverrides()
    old_gap = overrides.gap_mm if overrides.gap_mm is not None else DEFAULT_GAP_MM
    if not group.shutters:
        return replace(overrides, gap_mm=gap_mm)

    def redistribute(sizes: list[float]) -> int:
        count = len(sizes)
        envelope = sum(sizes) + (count - 1) * old_gap
        return round_half_up((envelope - (count - 1) * gap_mm) / count)

    col_width = redistribute(group.col_widths_mm)
    row_height = redistribute(group.row_heights_mm)
    overrides = _with_panels(
        overrides,
        [s.id for s in group.shutters],
        width_mm=col_width,
        height_mm=row_height,
    )
    return replace(overrides, gap_mm=gap_mm)


def reset_unit(
    overrides_by_key: Mapping[str, UnitOverrides], key: str
) -> dict[str, UnitOverrides]:
    """Drop every override of one group, restoring its derived layout."""
    return {k: v for k, v in overrides_by_key.items() if k != key}
