"""Unit tests for apply_overrides.

Tests for:
- No-op overrides (None and empty)
- Overall width / height proportional scaling and per-element rounding
- Zero-total guards
- Per-panel overrides and grid recalculation
- Order of operations and input immutability
"""

from __future__ import annotations

import copy
import math

from wardrobes.domain import PanelOverride, UnitOverrides
from wardrobes.domain.services import aggregate
from wardrobes.domain.services.overrides import apply_all_overrides, apply_overrides


def all_numbers(group) -> list[float]:
    values = [*group.col_widths_mm, *group.row_heights_mm]
    values += [group.total_width_mm, group.total_height_mm, group.loft_height_mm]
    for shutter in group.shutters:
        values += [shutter.width_mm, shutter.height_mm]
    for panel in group.loft_panels:
        values += [panel.width_mm, panel.height_mm]
    return values


class TestNoOpOverrides:
    """Absent or empty overrides leave the group as derived."""

    def test_none_returns_equal_group(self, scenario_b_group) -> None:
        assert apply_overrides(scenario_b_group, None) == scenario_b_group

    def test_empty_overrides_return_equal_group(self, scenario_b_group) -> None:
        assert apply_overrides(scenario_b_group, UnitOverrides()) == scenario_b_group

    def test_is_empty(self) -> None:
        assert UnitOverrides().is_empty
        assert not UnitOverrides(gap_mm=3).is_empty
        edited = UnitOverrides(panels={"u1-1-1": PanelOverride(width_mm=950)})
        assert not edited.is_empty

    def test_empty_overrides_still_copy(self, scenario_a_group) -> None:
        result = apply_overrides(scenario_a_group, UnitOverrides())
        assert result is not scenario_a_group
        assert result.shutters[0] is not scenario_a_group.shutters[0]

    def test_matching_overall_width_is_noop(self, scenario_a_group) -> None:
        result = apply_overrides(scenario_a_group, UnitOverrides(overall_width_mm=2700))
        assert result == scenario_a_group


class TestOverallWidth:
    """Overall width rescales every column proportionally."""

    def test_scale_is_exact(self, two_column_group) -> None:
        result = apply_overrides(two_column_group, UnitOverrides(overall_width_mm=3000))

        assert result.total_width_mm == 3000
        assert result.col_widths_mm == [1500, 1500]
        assert [s.width_mm for s in result.shutters] == [1500, 1500]
        assert result.row_heights_mm == two_column_group.row_heights_mm

    def test_loft_panels_scaled(self, scenario_b_group) -> None:
        result = apply_overrides(scenario_b_group, UnitOverrides(overall_width_mm=5400))

        assert [p.width_mm for p in result.loft_panels] == [2700, 2700]
        assert [p.height_mm for p in result.loft_panels] == [400, 400]

    def test_rounding_drift_is_kept(self, scenario_a_group) -> None:
        """900 * 2800/2700 = 933.3 per column; the total keeps the typed value."""
        result = apply_overrides(scenario_a_group, UnitOverrides(overall_width_mm=2800))

        assert result.col_widths_mm == [933, 933, 933]
        assert result.total_width_mm == 2800
        assert sum(result.col_widths_mm) == 2799

    def test_zero_total_skips_scaling(self, make_panel) -> None:
        group = aggregate([make_panel(width_mm=0)])[0]
        result = apply_overrides(group, UnitOverrides(overall_width_mm=1000))

        assert result.total_width_mm == 0
        assert result.col_widths_mm == [0]
        assert result.shutters[0].width_mm == 0
        assert all(math.isfinite(value) for value in all_numbers(result))


class TestOverallHeight:
    """Overall height includes the loft; only shutter rows rescale."""

    def test_without_loft(self, scenario_a_group) -> None:
        result = apply_overrides(scenario_a_group, UnitOverrides(overall_height_mm=2100))

        assert result.total_height_mm == 2100
        assert result.row_heights_mm == [2100]
        assert {s.height_mm for s in result.shutters} == {2100}

    def test_loft_height_subtracted(self, scenario_b_group) -> None:
        result = apply_overrides(scenario_b_group, UnitOverrides(overall_height_mm=3200))

        assert result.total_height_mm == 2800
        assert result.row_heights_mm == [2800]
        assert result.loft_height_mm == 400
        assert result.overall_height_mm == 3200
        assert {p.height_mm for p in result.loft_panels} == {400}

    def test_multiple_rows_scaled(self, make_unit, build_group) -> None:
        group = build_group(make_unit(section_count=2, height_mm=2000))
        result = apply_overrides(group, UnitOverrides(overall_height_mm=2500))

        assert result.row_heights_mm == [1250, 1250]
        assert result.total_height_mm == 2500

    def test_loft_taller_than_request_ignored(self, scenario_b_group) -> None:
        result = apply_overrides(scenario_b_group, UnitOverrides(overall_height_mm=300))
        assert result == scenario_b_group

    def test_request_equal_to_loft_ignored(self, scenario_b_group) -> None:
        result = apply_overrides(scenario_b_group, UnitOverrides(overall_height_mm=400))
        assert result.total_height_mm == 2400

    def test_loft_only_group_unchanged(self, make_unit, build_group) -> None:
        """A loft-only group has no shutter rows to stretch."""
        group = build_group(
            make_unit(
                width_mm=0,
                height_mm=0,
                loft_only=True,
                loft_width_mm=2000,
                loft_height_mm=400,
                loft_shutter_count=2,
            )
        )
        result = apply_overrides(group, UnitOverrides(overall_height_mm=1500))

        assert result == group
        assert result.row_heights_mm == []
        assert result.total_height_mm == 0
        assert [(p.width_mm, p.height_mm) for p in result.loft_panels] == [
            (1000, 400),
            (1000, 400),
        ]
        assert all(math.isfinite(value) for value in all_numbers(result))

    def test_zero_total_height_skips_scaling(self, make_panel) -> None:
        group = aggregate([make_panel(height_mm=0)])[0]
        result = apply_overrides(group, UnitOverrides(overall_height_mm=1000))

        assert result == group
        assert result.total_height_mm == 0
        assert result.row_heights_mm == [0]
        assert all(math.isfinite(value) for value in all_numbers(result))

    def test_width_and_height_together(self, two_column_group) -> None:
        result = apply_overrides(
            two_column_group,
            UnitOverrides(overall_width_mm=3000, overall_height_mm=2200),
        )
        assert (result.total_width_mm, result.total_height_mm) == (3000, 2200)
        assert {(s.width_mm, s.height_mm) for s in result.shutters} == {(1500, 2200)}


class TestPanelOverrides:
    """Per-panel sizes and the recalculated grid."""

    def test_single_column_edit(self, scenario_a_group) -> None:
        panel_id = scenario_a_group.shutters[0].id
        result = apply_overrides(
            scenario_a_group,
            UnitOverrides(panels={panel_id: PanelOverride(width_mm=1000)}),
        )

        assert result.col_widths_mm[0] == 1000
        assert result.total_width_mm == 2800
        assert result.shutters[0].width_mm == 1000
        assert result.shutters[0].height_mm == 2400

    def test_grid_stays_consistent_for_partial_edit(
        self, make_unit, build_group, assert_grid_consistent
    ) -> None:
        """A sparse edit touching one panel of a column still updates the max."""
        group = build_group(make_unit(section_count=2, shutter_count=2, width_mm=1800))
        result = apply_overrides(
            group,
            UnitOverrides(panels={"u1-1-1": PanelOverride(width_mm=1000, height_mm=1300)}),
        )

        assert result.col_widths_mm == [1000, 900]
        assert result.row_heights_mm == [1300, 1200]
        assert result.total_height_mm == 2500
        assert_grid_consistent(result)

    def test_loft_panel_override(self, scenario_b_group) -> None:
        result = apply_overrides(
            scenario_b_group,
            UnitOverrides(panels={"u1-loft-2": PanelOverride(width_mm=1200, height_mm=450)}),
        )

        assert [p.width_mm for p in result.loft_panels] == [1350, 1200]
        assert result.loft_height_mm == 450
        assert result.col_widths_mm == [900, 900, 900]

    def test_unknown_panel_ignored(self, scenario_a_group) -> None:
        result = apply_overrides(
            scenario_a_group,
            UnitOverrides(panels={"missing": PanelOverride(width_mm=5)}),
        )
        assert result == scenario_a_group

    def test_panel_edits_layer_after_scaling(self, two_column_group) -> None:
        """Scaling runs first, then the panel value wins, then totals are rebuilt."""
        result = apply_overrides(
            two_column_group,
            UnitOverrides(
                overall_width_mm=3000,
                panels={"u1-1-1": PanelOverride(width_mm=1000)},
            ),
        )

        assert result.col_widths_mm == [1000, 1500]
        assert result.total_width_mm == 2500


class TestPurity:
    """apply_overrides never mutates its inputs."""

    def test_group_not_mutated(self, scenario_b_group) -> None:
        before = copy.deepcopy(scenario_b_group)
        apply_overrides(
            scenario_b_group,
            UnitOverrides(
                overall_width_mm=3000,
                overall_height_mm=3000,
                panels={"u1-1-1": PanelOverride(width_mm=1000)},
            ),
        )
        assert scenario_b_group == before

    def test_repeatable(self, scenario_a_group) -> None:
        overrides = UnitOverrides(overall_width_mm=2800)
        assert apply_overrides(scenario_a_group, overrides) == apply_overrides(
            scenario_a_group, overrides
        )

    def test_apply_all_by_key(self, make_unit) -> None:
        from wardrobes.domain import Room
        from wardrobes.domain.services import extract_panels

        rooms = [Room("Master Bedroom", [make_unit(id="a"), make_unit(id="b")])]
        groups = aggregate(extract_panels(rooms))
        result = apply_all_overrides(groups, {"0:b": UnitOverrides(overall_width_mm=5400)})

        assert [g.total_width_mm for g in result] == [2700, 5400]
        assert result[0] == groups[0]
