"""Pytest configuration and shared fixtures for production layout tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from wardrobes.application import BuildProductionLayoutCommand, ProductionLayoutOutput
from wardrobes.application.config import (
    config_to_overrides,
    config_to_rooms,
    config_to_settings,
    load_config,
)
from wardrobes.domain import DrawnUnit, LayoutGroup, PanelItem, PanelType, Room
from wardrobes.domain.services import aggregate, extract_panels

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


@pytest.fixture
def make_panel() -> Callable[..., PanelItem]:
    """Factory for single cut-list panels of unit "u1" in a "Master Bedroom"."""

    def factory(
        unit_id: str = "u1",
        row: int = 1,
        col: int = 1,
        width_mm: float = 500,
        height_mm: float = 2000,
        panel_type: PanelType = PanelType.SHUTTER,
        room_index: int = 0,
        room_name: str = "Master Bedroom",
        laminate_code: str = "",
    ) -> PanelItem:
        suffix = f"loft-{col}" if panel_type is PanelType.LOFT else f"{row}-{col}"
        return PanelItem(
            id=f"{unit_id}-{suffix}",
            room_index=room_index,
            room_name=room_name,
            unit_id=unit_id,
            unit_index=0,
            unit_label="Wardrobe 1",
            unit_type="wardrobe",
            panel_type=panel_type,
            row=0 if panel_type is PanelType.LOFT else row,
            col=col,
            width_mm=width_mm,
            height_mm=height_mm,
            laminate_code=laminate_code,
        )

    return factory


@pytest.fixture
def assert_grid_consistent() -> Callable[[LayoutGroup], None]:
    """Check that column widths and row heights are the max of their shutters."""

    def check(group: LayoutGroup) -> None:
        for index, width in enumerate(group.col_widths_mm, start=1):
            widths = [s.width_mm for s in group.shutters if s.col == index]
            assert width == (max(widths) if widths else 0)
        for index, height in enumerate(group.row_heights_mm, start=1):
            heights = [s.height_mm for s in group.shutters if s.row == index]
            assert height == (max(heights) if heights else 0)

    return check


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the quotation JSON fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def make_unit() -> Callable[..., DrawnUnit]:
    """Factory for drawn units with a 2700x2400mm three-door default."""

    def factory(**overrides) -> DrawnUnit:
        values = {
            "id": "u1",
            "unit_type": "wardrobe",
            "width_mm": 2700.0,
            "height_mm": 2400.0,
            "shutter_count": 3,
            "section_count": 1,
        }
        values.update(overrides)
        return DrawnUnit(**values)

    return factory


@pytest.fixture
def build_group() -> Callable[..., LayoutGroup]:
    """Extract and aggregate a single unit in a "Master Bedroom"."""

    def factory(unit: DrawnUnit, room_name: str = "Master Bedroom") -> LayoutGroup:
        groups = aggregate(extract_panels([Room(room_name, [unit])]))
        assert len(groups) == 1
        return groups[0]

    return factory


@pytest.fixture
def scenario_a_group(make_unit, build_group) -> LayoutGroup:
    """One row of three 900x2400 shutters, no loft."""
    return build_group(make_unit())


@pytest.fixture
def scenario_b_group(make_unit, build_group) -> LayoutGroup:
    """Three 900x2400 shutters under a two-column, 400mm loft."""
    return build_group(
        make_unit(loft_enabled=True, loft_shutter_count=2, loft_height_mm=400.0)
    )


@pytest.fixture
def two_column_group(make_unit, build_group) -> LayoutGroup:
    """Two 1200mm columns, 2400mm overall width."""
    return build_group(make_unit(width_mm=2400.0, height_mm=2000.0, shutter_count=2))


@pytest.fixture
def quotation_output() -> ProductionLayoutOutput:
    """Layout output built from the valid quotation fixture."""
    config = load_config(FIXTURES_PATH / "valid_quotation.json")
    return BuildProductionLayoutCommand().execute(
        config_to_rooms(config),
        settings=config_to_settings(config),
        overrides_by_key=config_to_overrides(config),
        deleted_panel_ids=config.deleted_panels,
    )
