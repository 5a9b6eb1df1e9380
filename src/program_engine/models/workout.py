"""Transient workout structures built during one generation run."""

from __future__ import annotations

from dataclasses import dataclass, field

from program_engine.models.enums import Pillar
from program_engine.models.library import IntervalSet


@dataclass(frozen=True)
class WorkoutItem:
    """One exercise occurrence inside a generated block."""

    name: str
    reps: str | None = None
    rest_sec: int | None = None
    cues: tuple[str, ...] = field(default_factory=tuple)
    exercise_id: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class WorkoutBlock:
    """A pillar-scoped segment of a training day.

    Running and cardio blocks carry their ``interval_set`` instead of
    items. ``duration_cap_min`` is a planning cap on the reported duration;
    it never alters the content itself.
    """

    pillar: Pillar
    title: str
    items: tuple[WorkoutItem, ...] = field(default_factory=tuple)
    rest_sec: int | None = None
    interval_set: IntervalSet | None = None
    duration_cap_min: int | None = None

    @property
    def is_interval(self) -> bool:
        return self.interval_set is not None

    @property
    def estimated_duration_min(self) -> int:
        """Duration in whole minutes, recomputed from the block's contents."""
        # Imported here: the estimator depends on these models.
        from program_engine.math.durations import (
            estimate_block_duration,
            estimate_interval_duration,
        )

        if self.interval_set is not None:
            minutes = estimate_interval_duration(self.interval_set)
        else:
            minutes = estimate_block_duration(self.items, self.rest_sec)
        if self.duration_cap_min is not None:
            minutes = min(minutes, self.duration_cap_min)
        return minutes
