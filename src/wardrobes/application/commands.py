"""Application commands (use cases) for production layouts."""

from __future__ import annotations

import logging
from typing import Collection, Mapping, Sequence

from wardrobes.domain import (
    GroupAggregationService,
    PanelExtractionService,
    ProductionSettings,
    Room,
    UnitOverrides,
    apply_all_overrides,
)
from wardrobes.domain.services import calculate_stats, filter_deleted

from .dtos import ProductionLayoutOutput

logger = logging.getLogger(__name__)


class BuildProductionLayoutCommand:
    """Command to build the production cut list and unit grids.

    Runs the full pipeline: extraction, deleted-panel filtering,
    aggregation and override application. Every call re-derives from the
    rooms given, so nothing is cached between calls.
    """

    def __init__(
        self,
        aggregation_service: GroupAggregationService | None = None,
    ) -> None:
        self.aggregation_service = aggregation_service or GroupAggregationService()

    def execute(
        self,
        rooms: Sequence[Room],
        settings: ProductionSettings | None = None,
        overrides_by_key: Mapping[str, UnitOverrides] | None = None,
        deleted_panel_ids: Collection[str] = (),
    ) -> ProductionLayoutOutput:
        """Execute the layout build.

        Args:
            rooms: Rooms in quotation order, units in a stable order.
            settings: Production sizing settings. Defaults apply when None.
            overrides_by_key: Operator overrides keyed by group key.
            deleted_panel_ids: Panels removed from production.

        Returns:
            ProductionLayoutOutput with the cut list and both sets of groups.
        """
        settings = settings or ProductionSettings()
        output = ProductionLayoutOutput(settings=settings)

        if not any(room.units for room in rooms):
            output.errors.append("No units drawn")
            return output

        extraction = PanelExtractionService(settings)
        panels = filter_deleted(extraction.extract(rooms), set(deleted_panel_ids))
        groups = self.aggregation_service.aggregate(panels)

        unknown = set(overrides_by_key or {}) - {group.key for group in groups}
        if unknown:
            logger.warning(f"Overrides for unknown units ignored: {sorted(unknown)}")

        output.panels = panels
        output.groups = groups
        output.adjusted_groups = apply_all_overrides(groups, overrides_by_key)
        output.stats = calculate_stats(panels)
        logger.info(
            f"Built production layout: {output.stats.total_panels} panels "
            f"in {len(groups)} units"
        )
        return output
