"""Integration tests for BuildProductionLayoutCommand.

These tests run the full pipeline from rooms to adjusted groups:
- Cut list, groups and stats stay consistent with each other
- Deleted panels and overrides are honoured
- Input problems are reported as errors rather than raised
"""

import logging

import pytest

from wardrobes.application import BuildProductionLayoutCommand
from wardrobes.domain import (
    PanelType,
    ProductionSettings,
    Room,
    UnitOverrides,
)


@pytest.fixture
def command() -> BuildProductionLayoutCommand:
    return BuildProductionLayoutCommand()


@pytest.fixture
def rooms(make_unit) -> list[Room]:
    return [
        Room(
            "Master Bedroom",
            [
                make_unit(id="w1", loft_enabled=True, loft_shutter_count=2, loft_height_mm=400.0),
                make_unit(id="w2", width_mm=1800.0, shutter_count=2),
            ],
        ),
        Room("Kids Bedroom", [make_unit(id="w1", width_mm=1200.0, shutter_count=2)]),
    ]


class TestBuildProductionLayout:
    """End-to-end layout builds."""

    def test_panels_groups_and_stats(self, command, rooms) -> None:
        result = command.execute(rooms)

        assert result.is_valid
        assert result.stats.total_panels == len(result.panels) == 9
        assert result.stats.shutter_count == 7
        assert result.stats.loft_count == 2
        assert [g.key for g in result.groups] == ["0:w1", "0:w2", "1:w1"]
        assert [g.prefix for g in result.groups] == ["MB1", "MB2", "KB1"]

    def test_every_panel_has_a_label(self, command, rooms) -> None:
        result = command.execute(rooms)
        labels = result.panel_labels()

        assert len(labels) == len(result.panels)
        assert labels[("1:w1", "w1-1-2")] == "KB1-S2"
        assert labels[("0:w1", "w1-loft-2")] == "MB1-L2"

    def test_overrides_only_touch_adjusted_groups(self, command, rooms) -> None:
        result = command.execute(
            rooms, overrides_by_key={"0:w2": UnitOverrides(overall_width_mm=2000)}
        )

        assert result.group("0:w2").total_width_mm == 2000
        assert result.group("0:w2").col_widths_mm == [1000, 1000]
        assert result.groups[1].total_width_mm == 1800
        assert {p.width_mm for p in result.panels if p.unit_id == "w2"} == {900}

    def test_unadjusted_groups_equal_derived(self, command, rooms) -> None:
        result = command.execute(rooms)
        assert result.adjusted_groups == result.groups

    def test_deleted_panels_removed_everywhere(self, command, rooms) -> None:
        result = command.execute(rooms, deleted_panel_ids={"0:w1-loft-2", "1:w1-1-1"})

        ids = {p.qualified_id for p in result.panels}
        assert "0:w1-loft-2" not in ids
        assert "1:w1-1-1" not in ids
        assert "0:w1-1-1" in ids
        assert result.stats.loft_count == 1
        kids = result.group("1:w1")
        assert [s.id for s in kids.shutters] == ["w1-1-2"]
        assert kids.col_widths_mm == [0, 600]

    def test_settings_applied(self, command, rooms) -> None:
        settings = ProductionSettings(width_reduction_mm=2, include_loft=False)
        result = command.execute(rooms, settings=settings)

        assert result.settings is settings
        assert all(p.panel_type is PanelType.SHUTTER for p in result.panels)
        assert result.groups[0].col_widths_mm == [898, 898, 898]

    def test_repeatable(self, command, rooms) -> None:
        assert command.execute(rooms) == command.execute(rooms)


class TestInputProblems:
    """Problems reported through the output instead of exceptions."""

    def test_no_units(self, command) -> None:
        result = command.execute([Room("Study", [])])

        assert not result.is_valid
        assert result.errors == ["No units drawn"]
        assert result.panels == []

    def test_no_rooms(self, command) -> None:
        assert command.execute([]).errors == ["No units drawn"]

    def test_unknown_override_key_logged(self, command, rooms, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="wardrobes.application.commands"):
            result = command.execute(
                rooms, overrides_by_key={"5:ghost": UnitOverrides(gap_mm=3)}
            )

        assert result.is_valid
        assert "5:ghost" in caplog.text
        assert result.adjusted_groups == result.groups

    def test_undrawn_units_skipped(self, command, make_unit) -> None:
        result = command.execute(
            [Room("Bedroom", [make_unit(id="draft", width_mm=0), make_unit(id="w1")])]
        )

        assert result.is_valid
        assert [g.key for g in result.groups] == ["0:w1"]
        assert result.groups[0].unit_label == "Wardrobe 2"
        assert result.groups[0].unit_number == 1
