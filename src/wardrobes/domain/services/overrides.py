"""Override application: lay operator edits over a derived layout group.

``apply_overrides`` never mutates its inputs. Steps always run in this
order, since the result differs otherwise:

1. Overall width scaling (columns, shutters, loft panels).
2. Overall height scaling (rows, shutters; the loft keeps its height).
3. Direct per-panel sizes.
4. Recalculation of the grid from the edited panels, when step 3 ran.

Scaled sizes are rounded independently per element. The overall total is
then set to the requested value, so it may differ from the sum of the
rounded parts by a few millimetres.
"""

from __future__ import annotations

import copy
import logging
from typing import Mapping, Sequence

from ..entities import LayoutGroup
from ..value_objects import PanelOverride, UnitOverrides
from .group_aggregation import recalculate_group
from .sizing import round_half_up

__all__ = ["apply_all_overrides", "apply_overrides"]

logger = logging.getLogger(__name__)


def _scale_width(group: LayoutGroup, overall_width_mm: float) -> None:
    if overall_width_mm == group.total_width_mm:
        return
    if group.total_width_mm == 0:
        logger.debug(f"Group {group.key}: cannot scale width from zero")
        return

    scale = overall_width_mm / group.total_width_mm
    group.col_widths_mm = [round_half_up(w * scale) for w in group.col_widths_mm]
    for shutter in group.shutters:
        shutter.width_mm = round_half_up(shutter.width_mm * scale)
    for panel in group.loft_panels:
        panel.width_mm = round_half_up(panel.width_mm * scale)
    group.total_width_mm = overall_width_mm


def _scale_height(group: LayoutGroup, overall_height_mm: float) -> None:
    target_height = overall_height_mm - group.loft_height_mm
    if target_height <= 0 or group.total_height_mm <= 0:
        logger.debug(
            f"Group {group.key}: ignoring overall height {overall_height_mm}mm "
            f"(loft {group.loft_height_mm}mm, shutters {group.total_height_mm}mm)"
        )
        return
    if target_height == group.total_height_mm:
        return

    scale = target_height / group.total_height_mm
    group.row_heights_mm = [round_half_up(h * scale) for h in group.row_heights_mm]
    for shutter in group.shutters:
        shutter.height_mm = round_half_up(shutter.height_mm * scale)
    group.total_height_mm = target_height


def _apply_panel(group: LayoutGroup, panel_id: str, override: PanelOverride) -> None:
    panel = group.find_shutter(panel_id) or group.find_loft_panel(panel_id)
    if panel is None:
        logger.debug(f"Group {group.key}: no panel {panel_id!r}, override ignored")
        return
    if override.width_mm is not None:
        panel.width_mm = override.width_mm
    if override.height_mm is not None:
        panel.height_mm = override.height_mm


def apply_overrides(
    group: LayoutGroup, overrides: UnitOverrides | None = None
) -> LayoutGroup:
    """Produce a new layout group with operator overrides applied.

    Per-panel overrides are applied exactly as given. Expanding one edit
    to the rest of its column or row is the edit handler's job (see
    ``wardrobes.domain.services.edits``).

    Args:
        group: The derived group. Left untouched.
        overrides: Sparse edits for this group, or None.

    Returns:
        A new group with consistent grid dimensions.
    """
    result = copy.deepcopy(group)
    if overrides is None or overrides.is_empty:
        return result

    if overrides.overall_width_mm is not None:
        _scale_width(result, overrides.overall_width_mm)
    if overrides.overall_height_mm is not None:
        _scale_height(result, overrides.overall_height_mm)

    if overrides.panels:
        for panel_id, override in overrides.panels.items():
            _apply_panel(result, panel_id, override)
        recalculate_group(result)

    return result


def apply_all_overrides(
    groups: Sequence[LayoutGroup],
    overrides_by_key: Mapping[str, UnitOverrides] | None = None,
) -> list[LayoutGroup]:
    """Apply each group's overrides, looked up by group key."""
    overrides_by_key = overrides_by_key or {}
    return [apply_overrides(group, overrides_by_key.get(group.key)) for group in groups]
