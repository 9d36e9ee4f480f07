"""Conversion of validated configuration models into domain objects."""

from wardrobes.application.config.schema import (
    BoxConfig,
    QuotationConfiguration,
    UnitConfig,
)
from wardrobes.domain import (
    Box,
    DrawnUnit,
    PanelOverride,
    ProductionSettings,
    Room,
    UnitOverrides,
)


def _to_box(config: BoxConfig | None) -> Box | None:
    if config is None:
        return None
    return Box(x=config.x, y=config.y, width=config.width, height=config.height)


def _to_spans(spans: list[float] | None) -> tuple[float, ...] | None:
    return tuple(spans) if spans is not None else None


def config_to_unit(config: UnitConfig) -> DrawnUnit:
    """Convert a unit configuration to a DrawnUnit."""
    return DrawnUnit(
        id=config.id,
        unit_type=config.unit_type,
        width_mm=config.width_mm,
        height_mm=config.height_mm,
        shutter_count=config.shutter_count,
        section_count=config.section_count,
        loft_enabled=config.loft_enabled,
        loft_only=config.loft_only,
        loft_shutter_count=config.loft_shutter_count,
        loft_height_mm=config.loft_height_mm,
        loft_width_mm=config.loft_width_mm,
        box=_to_box(config.box),
        loft_box=_to_box(config.loft_box),
        shutter_divider_xs=tuple(config.shutter_divider_xs),
        horizontal_divider_ys=tuple(config.horizontal_divider_ys),
        loft_divider_xs=tuple(config.loft_divider_xs),
        column_widths_mm=_to_spans(config.column_widths_mm),
        row_heights_mm=_to_spans(config.row_heights_mm),
        loft_widths_mm=_to_spans(config.loft_widths_mm),
    )


def config_to_rooms(config: QuotationConfiguration) -> list[Room]:
    """Convert configured rooms to domain rooms, preserving order."""
    return [
        Room(name=room.name, units=[config_to_unit(unit) for unit in room.units])
        for room in config.rooms
    ]


def config_to_settings(config: QuotationConfiguration) -> ProductionSettings:
    settings = config.settings
    return ProductionSettings(
        width_reduction_mm=settings.width_reduction_mm,
        height_reduction_mm=settings.height_reduction_mm,
        rounding_mm=settings.rounding_mm,
        include_loft=settings.include_loft,
        gap_mm=settings.gap_mm,
        shutter_laminate_code=settings.shutter_laminate_code,
        loft_laminate_code=settings.loft_laminate_code,
    )


def config_to_overrides(config: QuotationConfiguration) -> dict[str, UnitOverrides]:
    """Convert saved overrides to the map keyed by group key."""
    return {
        key: UnitOverrides(
            overall_width_mm=unit.overall_width_mm,
            overall_height_mm=unit.overall_height_mm,
            gap_mm=unit.gap_mm,
            panels={
                panel_id: PanelOverride(
                    width_mm=panel.width_mm, height_mm=panel.height_mm
                )
                for panel_id, panel in unit.panels.items()
            },
        )
        for key, unit in config.overrides.items()
    }
