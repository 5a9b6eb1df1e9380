"""Week theme progression: a fixed ten-week curve with one deload week.

The curve ramps intensity from 0.6 to 0.95 while trimming rest, with
week 5 reserved as a deload regardless of program length. Programs
longer than ten weeks hold the week-10 parameters.
"""

from __future__ import annotations

from program_engine.models.enums import DELOAD_WEEK
from program_engine.models.program import ProgramWeek, WeekTheme

_WEEK_THEMES: dict[int, WeekTheme] = {
    1: WeekTheme("Foundation", 0.6, 1.3, ("form", "basics")),
    2: WeekTheme("Consistency", 0.7, 1.2, ("habits", "routine")),
    3: WeekTheme("Quality", 0.7, 1.1, ("technique", "control")),
    4: WeekTheme("Strength", 0.8, 1.0, ("strength", "stability")),
    5: WeekTheme("Deload", 0.5, 1.5, ("recovery", "mobility")),
    6: WeekTheme("Tempo", 0.8, 1.0, ("tempo", "control")),
    7: WeekTheme("Unilateral", 0.8, 1.0, ("single-leg", "balance")),
    8: WeekTheme("Flow", 0.9, 0.9, ("power", "flow")),
    9: WeekTheme("Integration", 0.9, 0.9, ("complex", "chains")),
    10: WeekTheme("Mastery", 0.95, 0.8, ("mastery", "progress")),
}
_LAST_THEMED_WEEK = max(_WEEK_THEMES)

# Display titles shown on the program calendar.
_WEEK_TITLES: dict[int, str] = {
    1: "Foundation & Form",
    2: "Building Consistency",
    3: "Movement Quality",
    4: "Strength & Stability",
    5: "Deload & Recovery",
    6: "Tempo & Control",
    7: "Unilateral Focus",
    8: "Power & Flow",
    9: "Integration",
    10: "Mastery & Progress",
    11: "Advanced Patterns",
    12: "Peak Performance",
}


def theme_for_week(week_number: int) -> WeekTheme:
    """Return the theme for a 1-indexed week.

    Weeks past the table reuse the final (week 10) entry; anything below
    week 1 is treated as week 1.
    """
    week = min(max(week_number, 1), _LAST_THEMED_WEEK)
    return _WEEK_THEMES[week]


def is_deload_week(week_number: int) -> bool:
    return week_number == DELOAD_WEEK


def week_title(week_number: int) -> str:
    return _WEEK_TITLES.get(week_number, f"Week {week_number}")


def build_week_records(length_weeks: int) -> tuple[ProgramWeek, ...]:
    """One theme record per week of the program."""
    return tuple(
        ProgramWeek(
            week_number=week,
            title=week_title(week),
            theme=theme_for_week(week),
            is_deload=is_deload_week(week),
        )
        for week in range(1, length_weeks + 1)
    )
