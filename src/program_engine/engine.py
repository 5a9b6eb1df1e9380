"""ProgramEngine: the orchestrator that assembles a multi-week program."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping

from program_engine.block_builder import BlockBuilder
from program_engine.math.week_themes import build_week_records, is_deload_week, theme_for_week
from program_engine.models.enums import Pillar
from program_engine.models.library import Library
from program_engine.models.preferences import Preferences
from program_engine.models.program import GeneratedProgram, ProgramDay, ProgramRecord
from program_engine.models.workout import WorkoutBlock
from program_engine.scheduling.schedule_templates import day_pillars, schedule_for
from program_engine.time_budget.splits import allocated_minutes, recommended_time_splits
from program_engine.time_budget.trimmer import total_duration, trim

logger = logging.getLogger(__name__)


class ProgramEngine:
    """Generates a program from preferences and a library snapshot.

    Generation is a pure function of its inputs apart from the default
    ``start_date`` (today). The engine keeps no state between calls.

    Usage:
        engine = ProgramEngine()
        program = engine.generate(preferences, library)
    """

    def generate(
        self,
        preferences: Preferences,
        library: Library,
        start_date: date | None = None,
    ) -> GeneratedProgram:
        """Plan every week and training day of the program.

        Args:
            preferences: Validated preference profile.
            library: Content snapshot to draw blocks from.
            start_date: Program start; defaults to today.

        Returns:
            The program record, one theme record per week and one day
            record per (week, day-of-week) slot.
        """
        builder = BlockBuilder(library)
        schedule = schedule_for(
            preferences.days_per_week, preferences.pillars, preferences.primary_focus,
        )

        days: list[ProgramDay] = []
        for week in range(1, preferences.week_length + 1):
            for day_of_week in range(1, preferences.days_per_week + 1):
                days.append(self.plan_day(
                    builder, preferences, week, day_of_week,
                    day_pillars(schedule, day_of_week),
                ))

        program = GeneratedProgram(
            program=ProgramRecord(
                start_date=start_date or date.today(),
                length_weeks=preferences.week_length,
            ),
            weeks=build_week_records(preferences.week_length),
            days=tuple(days),
        )
        logger.info(
            "Generated %d-week program: %d days, %d planned minutes",
            preferences.week_length, len(program.days), program.total_duration_min,
        )
        return program

    def plan_day(
        self,
        builder: BlockBuilder,
        preferences: Preferences,
        week: int,
        day_of_week: int,
        pillars: list[Pillar],
    ) -> ProgramDay:
        """Build, then trim, the blocks for one training day."""
        blocks = self.build_day_blocks(builder, preferences, week, pillars)
        trimmed = trim(
            blocks,
            preferences.max_duration_min,
            preferences.default_mode,
            preferences.primary_focus,
        )
        logger.debug(
            "Week %d day %d: %s -> %d blocks",
            week, day_of_week, [p.value for p in pillars], len(trimmed),
        )
        return ProgramDay(
            week_number=week,
            day_of_week=day_of_week,
            mode=preferences.default_mode,
            blocks=trimmed,
            est_total_min=total_duration(trimmed),
        )

    def build_day_blocks(
        self,
        builder: BlockBuilder,
        preferences: Preferences,
        week: int,
        pillars: list[Pillar],
    ) -> list[WorkoutBlock]:
        """Untrimmed blocks for a day, one per pillar with library content."""
        theme = theme_for_week(week)
        deload = is_deload_week(week)
        splits = recommended_time_splits(
            preferences.max_duration_min,
            preferences.default_mode,
            pillars,
            preferences.primary_focus,
        )

        blocks: list[WorkoutBlock] = []
        for pillar in pillars:
            block = builder.build(
                pillar,
                week=week,
                allocated_min=allocated_minutes(
                    splits, pillar, preferences.max_duration_min, len(pillars),
                ),
                theme=theme,
                is_deload=deload,
                mode=preferences.default_mode,
                fitness_level=preferences.fitness_level,
            )
            if block is not None:
                blocks.append(block)
        return blocks


def build_personalized_program(
    preferences: Preferences | Mapping[str, Any],
    library: Library | Mapping[str, Any],
    start_date: date | None = None,
) -> GeneratedProgram:
    """Record-level entry point: accepts raw dicts or typed models."""
    if not isinstance(preferences, Preferences):
        preferences = Preferences.from_record(preferences)
    if not isinstance(library, Library):
        library = Library.from_records(library)
    return ProgramEngine().generate(preferences, library, start_date)
