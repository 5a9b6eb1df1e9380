"""Progression-aware exercise selection for exercise-built blocks."""

from __future__ import annotations

from typing import Sequence

from program_engine.block_builder.pillar_defaults import max_exercises
from program_engine.models.enums import BASIC_EXERCISE_WEEKS, Mode, Pillar
from program_engine.models.library import Exercise

_BASIC_MARKERS = ("basic", "assist")
_ADVANCED_MARKER = "advanced"


def is_early_week_friendly(exercise: Exercise) -> bool:
    """Basic/assisted variations, or anything not marked advanced."""
    name = exercise.name.lower()
    if any(marker in name for marker in _BASIC_MARKERS):
        return True
    return _ADVANCED_MARKER not in name


def select_exercises(
    exercises: Sequence[Exercise], week: int, mode: Mode, pillar: Pillar,
) -> list[Exercise]:
    """Pick the first N exercises for a block in library order.

    During the first three weeks advanced variations are skipped. No
    shuffling: the same library always yields the same selection.
    """
    limit = max_exercises(pillar, mode)
    if week <= BASIC_EXERCISE_WEEKS:
        return [e for e in exercises if is_early_week_friendly(e)][:limit]
    return list(exercises[:limit])
