"""Domain services for the production panel-layout engine.

This package provides the pure, synchronous pipeline:
- Panel extraction from drawn units
- Group aggregation into per-unit grids, with labeling
- Override application and the edit handlers that build overrides
- Cut list statistics and filtering
"""

from .cut_list import (
    ProductionStats,
    calculate_stats,
    filter_deleted,
    sort_for_cutting,
)
from .edits import (
    reset_unit,
    set_gap,
    set_overall_height,
    set_overall_width,
    set_panel_height,
    set_panel_width,
)
from .group_aggregation import GroupAggregationService, aggregate, recalculate_group
from .labeling import (
    ROOM_CODES,
    UNIT_CODES,
    UNIT_TYPE_LABELS,
    panel_label,
    room_code,
    unit_code,
    unit_label,
)
from .overrides import apply_all_overrides, apply_overrides
from .panel_extraction import PanelExtractionService, build_room_units, extract_panels
from .sizing import (
    apply_production_sizing,
    build_edges,
    format_mm,
    resolve_spans,
    round_half_up,
    round_to_step,
)

__all__ = [
    "GroupAggregationService",
    "PanelExtractionService",
    "ProductionStats",
    "ROOM_CODES",
    "UNIT_CODES",
    "UNIT_TYPE_LABELS",
    "aggregate",
    "apply_all_overrides",
    "apply_overrides",
    "apply_production_sizing",
    "build_edges",
    "build_room_units",
    "calculate_stats",
    "extract_panels",
    "filter_deleted",
    "format_mm",
    "panel_label",
    "recalculate_group",
    "reset_unit",
    "resolve_spans",
    "room_code",
    "round_half_up",
    "round_to_step",
    "set_gap",
    "set_overall_height",
    "set_overall_width",
    "set_panel_height",
    "set_panel_width",
    "sort_for_cutting",
    "unit_code",
    "unit_label",
]
