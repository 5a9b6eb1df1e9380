"""User preference profile driving program generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, TypeVar

from program_engine.exceptions import InvalidPreferencesError
from program_engine.models.enums import (
    DEFAULT_DAYS_PER_WEEK,
    DEFAULT_FITNESS_LEVEL,
    DEFAULT_MAX_DURATION_MIN,
    DEFAULT_MODE,
    DEFAULT_PILLARS,
    DEFAULT_WEEK_LENGTH,
    MAX_DAY_OF_WEEK,
    MIN_DAY_OF_WEEK,
    FitnessLevel,
    Mode,
    Pillar,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True)
class Preferences:
    """Validated, defaulted preference profile.

    Attributes:
        week_length: Program length in weeks.
        days_per_week: Training days per week (1-7).
        max_duration_min: Per-session time cap in minutes.
        default_mode: Session variant used for every generated day.
        fitness_level: Matches template difficulty tags.
        pillars: Selected pillars, non-empty, in the user's order.
        primary_focus: Optional emphasised pillar; must be in ``pillars``.
        equipment: Equipment tag -> available flag.
    """

    week_length: int = DEFAULT_WEEK_LENGTH
    days_per_week: int = DEFAULT_DAYS_PER_WEEK
    max_duration_min: int = DEFAULT_MAX_DURATION_MIN
    default_mode: Mode = DEFAULT_MODE
    fitness_level: FitnessLevel = DEFAULT_FITNESS_LEVEL
    pillars: tuple[Pillar, ...] = DEFAULT_PILLARS
    primary_focus: Pillar | None = None
    equipment: Mapping[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.pillars:
            raise InvalidPreferencesError("At least one pillar must be selected")
        if self.primary_focus is not None and self.primary_focus not in self.pillars:
            raise InvalidPreferencesError(
                f"Primary focus {self.primary_focus.value!r} is not a selected pillar"
            )
        if self.week_length < 1:
            raise InvalidPreferencesError(
                f"week_length must be positive, got {self.week_length}"
            )
        if not MIN_DAY_OF_WEEK <= self.days_per_week <= MAX_DAY_OF_WEEK:
            raise InvalidPreferencesError(
                f"days_per_week must be between {MIN_DAY_OF_WEEK} and "
                f"{MAX_DAY_OF_WEEK}, got {self.days_per_week}"
            )

    @property
    def is_short_mode(self) -> bool:
        return self.default_mode == Mode.SHORT

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Preferences:
        """Build Preferences from a raw settings record.

        Missing, null or zero fields fall back to the documented defaults.
        Unknown pillars and an unselected primary focus are dropped rather
        than rejected, so a slightly stale record still yields a program.
        """
        pillars = _parse_pillars(record.get("pillars"))
        primary = Pillar.parse(record["primary_focus"]) if record.get("primary_focus") else None
        if primary is not None and primary not in pillars:
            logger.warning(
                "Ignoring primary focus %s: not among selected pillars", primary.value,
            )
            primary = None

        days = int(record.get("days_per_week") or DEFAULT_DAYS_PER_WEEK)
        days = max(MIN_DAY_OF_WEEK, min(MAX_DAY_OF_WEEK, days))

        return cls(
            week_length=max(1, int(record.get("week_length") or DEFAULT_WEEK_LENGTH)),
            days_per_week=days,
            max_duration_min=int(record.get("max_duration_min") or DEFAULT_MAX_DURATION_MIN),
            default_mode=_parse_enum(Mode, record.get("default_mode"), DEFAULT_MODE),
            fitness_level=_parse_enum(
                FitnessLevel, record.get("fitness_level"), DEFAULT_FITNESS_LEVEL,
            ),
            pillars=pillars,
            primary_focus=primary,
            equipment={
                str(k): bool(v) for k, v in (record.get("equipment") or {}).items()
            },
        )


def _parse_pillars(raw: Any) -> tuple[Pillar, ...]:
    if not raw:
        return DEFAULT_PILLARS
    pillars: list[Pillar] = []
    for value in raw:
        pillar = Pillar.parse(value)
        if pillar is None:
            logger.warning("Dropping unknown pillar %r from preferences", value)
        elif pillar not in pillars:
            pillars.append(pillar)
    if not pillars:
        logger.warning("No recognised pillars in preferences, using defaults")
        return DEFAULT_PILLARS
    return tuple(pillars)


def _parse_enum(enum_cls: type[E], value: Any, default: E) -> E:
    if not value:
        return default
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        logger.warning("Unknown %s %r, using %s", enum_cls.__name__, value, default.value)
        return default
