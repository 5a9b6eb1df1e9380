"""Tests for weekly schedule templates and primary-focus enhancement."""

from __future__ import annotations

from program_engine.models.enums import Pillar
from program_engine.scheduling.schedule_templates import (
    SCHEDULE_TEMPLATES,
    day_pillars,
    enhance_primary_focus,
    get_schedule_template,
    schedule_for,
)

S, M, R, T, C = Pillar.STRENGTH, Pillar.MOBILITY, Pillar.RUNNING, Pillar.TAI_CHI, Pillar.CARDIO
ALL = (S, M, R, T, C)


class TestGetScheduleTemplate:
    def test_templates_have_one_entry_per_day(self) -> None:
        for days, template in SCHEDULE_TEMPLATES.items():
            assert len(template) == days

    def test_four_day_template(self) -> None:
        assert get_schedule_template(4) == ((S, M), (R, T), (M, T), (S, C))

    def test_unsupported_counts_fall_back_to_five(self) -> None:
        assert get_schedule_template(2) == SCHEDULE_TEMPLATES[5]
        assert get_schedule_template(7) == SCHEDULE_TEMPLATES[5]


class TestScheduleFor:
    def test_days_are_subsets_of_selection(self) -> None:
        for days in range(1, 8):
            for day in schedule_for(days, [S, M]):
                assert set(day) <= {S, M}

    def test_filtering_can_leave_empty_days(self) -> None:
        assert schedule_for(4, [S, M]) == [[S, M], [], [M], [S]]

    def test_all_pillars_keep_template_order(self) -> None:
        assert schedule_for(3, ALL) == [[S, M], [R, T], [S, M]]

    def test_primary_focus_swapped_into_even_days(self) -> None:
        assert schedule_for(4, [S, M], primary_focus=S) == [[S, M], [], [S], [S]]

    def test_primary_outside_selection_is_ignored(self) -> None:
        assert schedule_for(4, [S, M], primary_focus=R) == schedule_for(4, [S, M])


class TestEnhancePrimaryFocus:
    def test_replaces_last_pillar_on_even_days(self) -> None:
        schedule = [[M, T], [M, T], [S, M]]
        assert enhance_primary_focus(schedule, R) == [[R, M], [M, T], [R, S]]

    def test_day_already_with_primary_unchanged(self) -> None:
        assert enhance_primary_focus([[R, T]], R) == [[R, T]]

    def test_empty_days_stay_empty(self) -> None:
        assert enhance_primary_focus([[], [S]], T) == [[], [S]]

    def test_day_length_preserved(self) -> None:
        schedule = [[S, M], [R, T], [M, T], [C, S], [S, M], [R, T]]
        enhanced = enhance_primary_focus(schedule, C)
        assert [len(d) for d in enhanced] == [len(d) for d in schedule]


class TestDayPillars:
    def test_one_indexed(self) -> None:
        assert day_pillars([[S], [R], [M]], 2) == [R]

    def test_wraps_past_template_length(self) -> None:
        assert day_pillars([[S], [R], [M]], 4) == [S]

    def test_empty_schedule(self) -> None:
        assert day_pillars([], 1) == []
