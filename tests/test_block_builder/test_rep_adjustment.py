"""Tests for theme-driven rep rewriting."""

from __future__ import annotations

from program_engine.block_builder.rep_adjustment import (
    adjust_for_power,
    adjust_reps,
    leading_set_count,
    reduce_leading_sets,
)
from program_engine.math.week_themes import theme_for_week


class TestReduceLeadingSets:
    def test_drops_one_set(self) -> None:
        assert reduce_leading_sets("3×8-12") == "2×8-12"

    def test_floor_is_one_set(self) -> None:
        assert reduce_leading_sets("1×10") == "1×10"

    def test_ascii_x_is_normalised(self) -> None:
        assert reduce_leading_sets("3x5") == "2×5"

    def test_suffix_preserved(self) -> None:
        assert reduce_leading_sets("2×8-12 each side") == "1×8-12 each side"

    def test_without_set_count_unchanged(self) -> None:
        assert reduce_leading_sets("30-45s") == "30-45s"

    def test_leading_set_count(self) -> None:
        assert leading_set_count("4×6") == 4
        assert leading_set_count("Full flow") is None


class TestAdjustReps:
    def test_deload_reduces_sets(self) -> None:
        assert adjust_reps("2×8-12", theme_for_week(5), is_deload=True) == "1×8-12"

    def test_tempo_week_appends_annotation(self) -> None:
        assert adjust_reps("2×8-12", theme_for_week(6), is_deload=False) == "2×8-12 (3-1-1 tempo)"

    def test_power_week_lowers_ranges(self) -> None:
        theme = theme_for_week(8)
        assert adjust_reps("2×8-12", theme, is_deload=False) == "2×5-8"
        assert adjust_reps("3×10-15", theme, is_deload=False) == "3×6-10"

    def test_deload_takes_precedence_over_focus(self) -> None:
        assert adjust_reps("3×8-12", theme_for_week(6), is_deload=True) == "2×8-12"

    def test_other_weeks_unchanged(self) -> None:
        for week in (1, 2, 3, 4, 7, 9, 10):
            assert adjust_reps("2×8-12", theme_for_week(week), is_deload=False) == "2×8-12"

    def test_power_leaves_other_specs_alone(self) -> None:
        assert adjust_for_power("45-60s") == "45-60s"
