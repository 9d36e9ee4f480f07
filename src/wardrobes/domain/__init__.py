"""Domain layer - the production panel-layout engine."""

from .entities import DrawnUnit, GroupLoftPanel, GroupShutter, LayoutGroup, Room
from .services import (
    GroupAggregationService,
    PanelExtractionService,
    ProductionStats,
    aggregate,
    apply_all_overrides,
    apply_overrides,
    extract_panels,
)
from .value_objects import (
    DEFAULT_GAP_MM,
    GAP_OPTIONS,
    Box,
    PanelItem,
    PanelOverride,
    PanelType,
    ProductionSettings,
    UnitOverrides,
)

__all__ = [
    "Box",
    "DEFAULT_GAP_MM",
    "DrawnUnit",
    "GAP_OPTIONS",
    "GroupAggregationService",
    "GroupLoftPanel",
    "GroupShutter",
    "LayoutGroup",
    "PanelExtractionService",
    "PanelItem",
    "PanelOverride",
    "PanelType",
    "ProductionSettings",
    "ProductionStats",
    "Room",
    "UnitOverrides",
    "aggregate",
    "apply_all_overrides",
    "apply_overrides",
    "extract_panels",
]
