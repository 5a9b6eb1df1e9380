"""Generated program output: program record, week themes, day plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from program_engine.models.enums import Mode
from program_engine.models.workout import WorkoutBlock


@dataclass(frozen=True)
class WeekTheme:
    """Progression parameters for one week.

    Attributes:
        name: Short theme name ("Foundation", "Deload", ...).
        intensity: Relative intensity in (0, 1].
        rest_multiplier: Factor applied to every rest interval (> 0).
        focus: Focus tags; "tempo" and "power" change rep prescriptions.
    """

    name: str
    intensity: float
    rest_multiplier: float
    focus: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ProgramRecord:
    start_date: date
    length_weeks: int


@dataclass(frozen=True)
class ProgramWeek:
    """Theme record for one week of the program."""

    week_number: int
    title: str
    theme: WeekTheme
    is_deload: bool = False


@dataclass(frozen=True)
class ProgramDay:
    """One finalised training day."""

    week_number: int
    day_of_week: int  # 1-7
    mode: Mode
    blocks: tuple[WorkoutBlock, ...] = field(default_factory=tuple)
    est_total_min: int = 0


@dataclass(frozen=True)
class GeneratedProgram:
    """Output of ProgramEngine.generate()."""

    program: ProgramRecord
    weeks: tuple[ProgramWeek, ...] = field(default_factory=tuple)
    days: tuple[ProgramDay, ...] = field(default_factory=tuple)

    def days_for_week(self, week_number: int) -> tuple[ProgramDay, ...]:
        return tuple(d for d in self.days if d.week_number == week_number)

    def day(self, week_number: int, day_of_week: int) -> ProgramDay | None:
        for d in self.days:
            if d.week_number == week_number and d.day_of_week == day_of_week:
                return d
        return None

    @property
    def total_duration_min(self) -> int:
        return sum(d.est_total_min for d in self.days)
