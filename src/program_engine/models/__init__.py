"""Data models for the program engine."""

from program_engine.models.enums import FitnessLevel, Mode, Pillar
from program_engine.models.library import (
    Exercise,
    IntervalSet,
    IntervalStep,
    Library,
    TemplateItem,
    WorkoutTemplate,
)
from program_engine.models.preferences import Preferences
from program_engine.models.program import (
    GeneratedProgram,
    ProgramDay,
    ProgramRecord,
    ProgramWeek,
    WeekTheme,
)
from program_engine.models.workout import WorkoutBlock, WorkoutItem

__all__ = [
    "Exercise",
    "FitnessLevel",
    "GeneratedProgram",
    "IntervalSet",
    "IntervalStep",
    "Library",
    "Mode",
    "Pillar",
    "Preferences",
    "ProgramDay",
    "ProgramRecord",
    "ProgramWeek",
    "TemplateItem",
    "WeekTheme",
    "WorkoutBlock",
    "WorkoutItem",
    "WorkoutTemplate",
]
