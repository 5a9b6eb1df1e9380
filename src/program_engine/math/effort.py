"""Rough effort descriptors for generated sessions: RPE, calories, labels."""

from __future__ import annotations

import math

from program_engine.models.enums import FitnessLevel, Pillar

# Baseline RPE by pillar before difficulty / fitness adjustments.
_PILLAR_BASE_RPE: dict[Pillar, float] = {
    Pillar.STRENGTH: 6,
    Pillar.RUNNING: 7,
    Pillar.CARDIO: 6,
    Pillar.TAI_CHI: 4,
    Pillar.MOBILITY: 3,
}
_DEFAULT_BASE_RPE = 5

_DIFFICULTY_RPE_SHIFT: dict[str, float] = {
    "beginner": -1,
    "moderate": 1,
}

_FITNESS_RPE_SHIFT: dict[FitnessLevel, float] = {
    FitnessLevel.BEGINNER: 1,
    FitnessLevel.MODERATE: -0.5,
}

# Approximate MET values (Ainsworth compendium ballpark).
_PILLAR_MET: dict[Pillar, float] = {
    Pillar.STRENGTH: 6.0,
    Pillar.RUNNING: 8.0,
    Pillar.CARDIO: 5.5,
    Pillar.TAI_CHI: 4.0,
    Pillar.MOBILITY: 2.5,
}
_DEFAULT_MET = 4.0


def estimate_rpe(
    pillar: Pillar,
    difficulty: str | None,
    fitness_level: FitnessLevel,
) -> int:
    """Estimate session RPE on the 1-10 scale.

    Harder content raises RPE; fitter users perceive the same content as
    easier.
    """
    rpe = _PILLAR_BASE_RPE.get(pillar, _DEFAULT_BASE_RPE)
    rpe += _DIFFICULTY_RPE_SHIFT.get(difficulty or "", 0)
    rpe += _FITNESS_RPE_SHIFT.get(fitness_level, 0)
    # Half-up rounding: 4.5 reads as 5, not 4.
    return max(1, min(10, math.floor(rpe + 0.5)))


def estimate_calories(
    duration_min: float, pillar: Pillar, body_weight_kg: float = 70.0,
) -> int:
    """Calories = MET × body weight (kg) × hours."""
    met = _PILLAR_MET.get(pillar, _DEFAULT_MET)
    return round(met * body_weight_kg * (duration_min / 60))


def format_duration(minutes: float) -> str:
    """Format minutes as ``"45min"``, ``"1h"`` or ``"1h 15min"``."""
    if minutes < 60:
        return f"{round(minutes)}min"
    hours = int(minutes // 60)
    remaining = round(minutes % 60)
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}min"
