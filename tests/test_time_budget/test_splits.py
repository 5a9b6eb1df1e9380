"""Tests for per-pillar time splits."""

from __future__ import annotations

import pytest

from program_engine.models.enums import Mode, Pillar
from program_engine.time_budget.splits import allocated_minutes, recommended_time_splits

S, M, R, T = Pillar.STRENGTH, Pillar.MOBILITY, Pillar.RUNNING, Pillar.TAI_CHI


class TestRecommendedTimeSplits:
    def test_short_with_primary(self) -> None:
        splits = recommended_time_splits(30, Mode.SHORT, [S, M], primary_focus=S)
        assert splits[M] == pytest.approx(7.5)
        assert splits[S] == pytest.approx(15.75)

    def test_full_without_primary_shares_evenly(self) -> None:
        splits = recommended_time_splits(45, Mode.FULL, [S, T, M])
        assert splits[M] == pytest.approx(9)
        assert splits[S] == pytest.approx(18)
        assert splits[T] == pytest.approx(18)

    def test_mobility_floor(self) -> None:
        assert recommended_time_splits(10, Mode.SHORT, [M])[M] == 5
        assert recommended_time_splits(20, Mode.FULL, [M])[M] == 8

    def test_full_primary_takes_half_then_others_share(self) -> None:
        splits = recommended_time_splits(60, Mode.FULL, [S, R, T], primary_focus=R)
        assert splits[R] == pytest.approx(24)
        assert splits[S] == pytest.approx(12)
        assert splits[T] == pytest.approx(12)

    def test_mobility_primary_gets_no_extra_share(self) -> None:
        splits = recommended_time_splits(45, Mode.FULL, [S, M], primary_focus=M)
        assert splits[M] == pytest.approx(9)
        assert splits[S] == pytest.approx(36)

    def test_no_time_left_for_others(self) -> None:
        splits = recommended_time_splits(5, Mode.SHORT, [S, M])
        assert S not in splits

    def test_tiny_cap_never_goes_negative(self) -> None:
        # The mobility floor alone is larger than a 5-minute cap.
        splits = recommended_time_splits(5, Mode.FULL, [R, M], primary_focus=R)
        assert splits[M] == 8
        assert all(minutes >= 0 for minutes in splits.values())


class TestAllocatedMinutes:
    def test_uses_split_when_present(self) -> None:
        assert allocated_minutes({S: 12.5}, S, 45, 2) == 12.5

    def test_even_share_fallback(self) -> None:
        assert allocated_minutes({}, S, 45, 2) == 22.0

    def test_zero_pillar_count_guarded(self) -> None:
        assert allocated_minutes({}, S, 30, 0) == 30.0

    def test_empty_split_falls_back_to_even_share(self) -> None:
        assert allocated_minutes({S: 0.0}, S, 5, 1) == 5.0
