"""Weekly schedule templates: which pillars are trained on which day.

Each template lists, per training day, the pillars scheduled for that
day. Templates exist for 3-6 training days; any other count uses the
5-day template. The generator filters every day to the user's selected
pillars and then biases alternating days toward the primary focus.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from program_engine.models.enums import Pillar

logger = logging.getLogger(__name__)

_S = Pillar.STRENGTH
_M = Pillar.MOBILITY
_R = Pillar.RUNNING
_T = Pillar.TAI_CHI
_C = Pillar.CARDIO

FALLBACK_DAYS_PER_WEEK = 5

SCHEDULE_TEMPLATES: dict[int, tuple[tuple[Pillar, ...], ...]] = {
    3: (
        (_S, _M),
        (_R, _T),
        (_S, _M),
    ),
    4: (
        (_S, _M),
        (_R, _T),
        (_M, _T),
        (_S, _C),
    ),
    5: (
        (_S, _M),
        (_R, _T),
        (_M, _T),
        (_C, _S),
        (_S, _M),
    ),
    6: (
        (_S, _M),
        (_R, _T),
        (_M, _T),
        (_C, _S),
        (_S, _M),
        (_R, _T),
    ),
}


def get_schedule_template(days_per_week: int) -> tuple[tuple[Pillar, ...], ...]:
    """Look up the raw weekly template.

    Unsupported day counts fall back to the 5-day template.
    """
    template = SCHEDULE_TEMPLATES.get(days_per_week)
    if template is None:
        logger.debug(
            "No schedule template for %d days/week, using %d-day template",
            days_per_week, FALLBACK_DAYS_PER_WEEK,
        )
        template = SCHEDULE_TEMPLATES[FALLBACK_DAYS_PER_WEEK]
    return template


def schedule_for(
    days_per_week: int,
    pillars: Iterable[Pillar],
    primary_focus: Pillar | None = None,
) -> list[list[Pillar]]:
    """Build the per-day pillar lists for a user.

    Args:
        days_per_week: Requested training days per week.
        pillars: Pillars the user selected.
        primary_focus: Optional pillar to emphasise.

    Returns:
        One pillar list per template day, each a subset of ``pillars``.
        Days may be empty when none of their pillars were selected.
    """
    selected = set(pillars)
    schedule = [
        [pillar for pillar in day if pillar in selected]
        for day in get_schedule_template(days_per_week)
    ]
    if primary_focus is not None and primary_focus in selected:
        schedule = enhance_primary_focus(schedule, primary_focus)
    return schedule


def enhance_primary_focus(
    schedule: Sequence[Sequence[Pillar]], primary_focus: Pillar,
) -> list[list[Pillar]]:
    """Swap the primary focus into every other day.

    On even-indexed days (0, 2, 4 ...) that do not already train the
    primary focus, the day's last pillar is dropped and the primary focus
    leads the day. Day length is preserved, so empty days stay empty.
    """
    enhanced: list[list[Pillar]] = []
    for index, day in enumerate(schedule):
        if index % 2 == 0 and day and primary_focus not in day:
            enhanced.append([primary_focus, *day[:-1]])
        else:
            enhanced.append(list(day))
    return enhanced


def day_pillars(schedule: Sequence[Sequence[Pillar]], day_of_week: int) -> list[Pillar]:
    """Pillars for a 1-indexed day, wrapping past the end of the template."""
    if not schedule:
        return []
    return list(schedule[(day_of_week - 1) % len(schedule)])
