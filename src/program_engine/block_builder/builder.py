"""BlockBuilder: turns a (week, day, pillar) slot into a workout block.

Running and cardio slots are filled from interval sets, stepping up
through the library as weeks progress. Every other pillar prefers a
workout template at the user's fitness level and falls back to assembling
a block from individual exercises. Both paths apply the week theme:
repetition rewrites via ``adjust_reps`` and rest scaled by the theme's
rest multiplier.
"""

from __future__ import annotations

import logging
import math

from program_engine.block_builder.exercise_selection import select_exercises
from program_engine.block_builder.pillar_defaults import default_reps, default_rest_sec
from program_engine.block_builder.rep_adjustment import adjust_reps
from program_engine.math.durations import estimate_template_duration
from program_engine.models.enums import (
    DEFAULT_TEMPLATE_REST_SEC,
    DELOAD_INTERVAL_STEP_BACK,
    TEMPLATE_DURATION_TOLERANCE,
    FitnessLevel,
    Mode,
    Pillar,
)
from program_engine.models.library import Exercise, Library, WorkoutTemplate
from program_engine.models.program import WeekTheme
from program_engine.models.workout import WorkoutBlock, WorkoutItem

logger = logging.getLogger(__name__)

_TEMPLATE_FALLBACK_REPS = "2×8-12"
_TEMPLATE_FALLBACK_NAME = "Exercise"


class BlockBuilder:
    """Builds one block per scheduled pillar slot.

    Usage::

        builder = BlockBuilder(library)
        block = builder.build(Pillar.STRENGTH, week=3, allocated_min=20.0,
                              theme=theme, is_deload=False, mode=Mode.FULL,
                              fitness_level=FitnessLevel.BEGINNER)
    """

    def __init__(self, library: Library) -> None:
        self.library = library

    def build(
        self,
        pillar: Pillar,
        week: int,
        allocated_min: float,
        theme: WeekTheme,
        is_deload: bool,
        mode: Mode,
        fitness_level: FitnessLevel,
    ) -> WorkoutBlock | None:
        """Build the block for one slot.

        Returns:
            A WorkoutBlock, or None when the library has no content for
            the pillar (the slot is then simply left out of the day).
        """
        if pillar.uses_intervals:
            block = self.build_interval_block(pillar, week, allocated_min, is_deload)
        else:
            block = self.build_exercise_block(
                pillar, week, allocated_min, theme, is_deload, mode, fitness_level,
            )
        if block is None:
            logger.debug("No %s content for week %d, leaving slot empty", pillar.value, week)
        return block

    # ------------------------------------------------------------------
    # Interval path (running / cardio)
    # ------------------------------------------------------------------

    def build_interval_block(
        self,
        pillar: Pillar,
        week: int,
        allocated_min: float,
        is_deload: bool,
    ) -> WorkoutBlock | None:
        """Pick an interval set by week; deload weeks step back two sets.

        The library order is treated as easiest-first, so week 1 takes
        the first set and later weeks move along the list until it runs
        out.
        """
        candidates = self.library.intervals_for(pillar)
        if not candidates:
            return None

        index = min(max(week - 1, 0), len(candidates) - 1)
        if is_deload and index > 0:
            index = max(0, index - DELOAD_INTERVAL_STEP_BACK)
        selected = candidates[index]

        return WorkoutBlock(
            pillar=pillar,
            title=selected.name,
            interval_set=selected,
            duration_cap_min=max(0, math.ceil(allocated_min)),
        )

    # ------------------------------------------------------------------
    # Template / exercise path
    # ------------------------------------------------------------------

    def build_exercise_block(
        self,
        pillar: Pillar,
        week: int,
        allocated_min: float,
        theme: WeekTheme,
        is_deload: bool,
        mode: Mode,
        fitness_level: FitnessLevel,
    ) -> WorkoutBlock | None:
        template = self.find_template(pillar, fitness_level, allocated_min)
        if template is not None:
            return self.block_from_template(template, theme, is_deload)

        exercises = self.library.exercises_for(pillar)
        if not exercises:
            return None
        selected = select_exercises(exercises, week, mode, pillar)
        return self.block_from_exercises(pillar, selected, theme, is_deload)

    def find_template(
        self, pillar: Pillar, fitness_level: FitnessLevel, allocated_min: float,
    ) -> WorkoutTemplate | None:
        """First template at the user's level that roughly fits the allocation."""
        limit = allocated_min * TEMPLATE_DURATION_TOLERANCE
        for template in self.library.templates_for(pillar):
            if (
                template.difficulty == fitness_level.value
                and estimate_template_duration(template) <= limit
            ):
                return template
        return None

    def block_from_template(
        self, template: WorkoutTemplate, theme: WeekTheme, is_deload: bool,
    ) -> WorkoutBlock:
        items = []
        for entry in template.ordered_items:
            referenced = self.library.exercise(entry.exercise_id)
            name = entry.name or (referenced.name if referenced else None) or _TEMPLATE_FALLBACK_NAME
            items.append(WorkoutItem(
                name=name,
                reps=adjust_reps(entry.reps or _TEMPLATE_FALLBACK_REPS, theme, is_deload),
                rest_sec=_scaled_rest(entry.rest_sec or DEFAULT_TEMPLATE_REST_SEC, theme),
                exercise_id=entry.exercise_id,
                notes=entry.notes,
            ))
        return WorkoutBlock(pillar=template.pillar, title=template.name, items=tuple(items))

    def block_from_exercises(
        self,
        pillar: Pillar,
        exercises: list[Exercise],
        theme: WeekTheme,
        is_deload: bool,
    ) -> WorkoutBlock:
        items = tuple(
            WorkoutItem(
                name=exercise.name,
                reps=adjust_reps(exercise.default_reps or default_reps(pillar), theme, is_deload),
                rest_sec=_scaled_rest(exercise.default_rest_sec or default_rest_sec(pillar), theme),
                cues=exercise.cues,
                exercise_id=exercise.id,
            )
            for exercise in exercises
        )
        return WorkoutBlock(pillar=pillar, title=f"{pillar.label} Block", items=items)


def _scaled_rest(rest_sec: int, theme: WeekTheme) -> int:
    return math.floor(rest_sec * theme.rest_multiplier)
