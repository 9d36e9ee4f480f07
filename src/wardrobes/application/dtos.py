"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from wardrobes.domain import LayoutGroup, PanelItem, ProductionSettings, ProductionStats


@dataclass
class ProductionLayoutOutput:
    """Result of building the production layout for a quotation.

    Attributes:
        panels: Cut list before overrides, deleted panels removed. Export
            consumers use these sizes as final.
        groups: Derived per-unit grids, before overrides.
        adjusted_groups: Grids with each unit's overrides applied, for the
            production preview.
        stats: Panel counts of ``panels``.
        settings: Settings the panels were sized with.
        errors: Input problems that prevented a layout.
    """

    panels: list[PanelItem] = field(default_factory=list)
    groups: list[LayoutGroup] = field(default_factory=list)
    adjusted_groups: list[LayoutGroup] = field(default_factory=list)
    stats: ProductionStats = field(default_factory=lambda: ProductionStats(0, 0, 0))
    settings: ProductionSettings = field(default_factory=ProductionSettings)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def panel_labels(self) -> dict[tuple[str, str], str]:
        """Shop-floor label of every panel, keyed by (group key, panel id)."""
        labels: dict[tuple[str, str], str] = {}
        for group in self.groups:
            for shutter in group.shutters:
                labels[(group.key, shutter.id)] = shutter.label
            for loft in group.loft_panels:
                labels[(group.key, loft.id)] = loft.label
        return labels

    def group(self, key: str) -> LayoutGroup | None:
        """Adjusted group for a key, or None."""
        for group in self.adjusted_groups:
            if group.key == key:
                return group
        return None
