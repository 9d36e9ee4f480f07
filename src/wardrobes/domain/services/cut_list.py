"""Cut list helpers: statistics, deleted-panel filtering and ordering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Collection, Sequence

from ..value_objects import PanelItem, PanelType

__all__ = ["ProductionStats", "calculate_stats", "filter_deleted", "sort_for_cutting"]


@dataclass(frozen=True)
class ProductionStats:
    """Panel counts for a cut list."""

    total_panels: int
    shutter_count: int
    loft_count: int


def calculate_stats(panels: Sequence[PanelItem]) -> ProductionStats:
    return ProductionStats(
        total_panels=len(panels),
        shutter_count=sum(1 for p in panels if p.panel_type is PanelType.SHUTTER),
        loft_count=sum(1 for p in panels if p.panel_type is PanelType.LOFT),
    )


def filter_deleted(
    panels: Sequence[PanelItem], deleted_ids: Collection[str]
) -> list[PanelItem]:
    """Drop panels the operator removed from production.

    Args:
        panels: Extracted panels.
        deleted_ids: Qualified panel ids (``"<room_index>:<panel_id>"``).
    """
    if not deleted_ids:
        return list(panels)
    return [panel for panel in panels if panel.qualified_id not in deleted_ids]


def sort_for_cutting(panels: Sequence[PanelItem]) -> list[PanelItem]:
    """Sort panels by area (largest first) for efficient cutting."""
    return sorted(panels, key=lambda p: p.area_mm2, reverse=True)
