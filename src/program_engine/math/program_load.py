"""Program load summaries: weekly minutes per pillar, session-RPE load, monotony.

Session load follows Foster's session-RPE method (minutes × RPE) and
monotony is mean/std of the seven daily loads in a week.

References:
    - Foster (1998): Monotony and strain
    - Foster et al. (2001): A new approach to monitoring exercise training
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from program_engine.math.effort import estimate_rpe
from program_engine.models.enums import MAX_DAY_OF_WEEK, FitnessLevel, Pillar
from program_engine.models.program import GeneratedProgram, ProgramDay


def weekly_minutes(program: GeneratedProgram) -> pd.DataFrame:
    """Tabulate planned minutes per pillar for every week.

    Args:
        program: A generated program.

    Returns:
        DataFrame indexed by ``week_number`` with one column per pillar
        (minutes), ``total_min`` and ``sessions`` (days with at least one
        block).
    """
    rows = []
    for week in program.weeks:
        row: dict[str, float] = {p.value: 0.0 for p in Pillar}
        sessions = 0
        for day in program.days_for_week(week.week_number):
            if day.blocks:
                sessions += 1
            for block in day.blocks:
                row[block.pillar.value] += block.estimated_duration_min
        row["week_number"] = week.week_number
        row["total_min"] = sum(row[p.value] for p in Pillar)
        row["sessions"] = sessions
        rows.append(row)

    columns = ["week_number", *(p.value for p in Pillar), "total_min", "sessions"]
    frame = pd.DataFrame(rows, columns=columns)
    return frame.set_index("week_number")


def session_load(day: ProgramDay, fitness_level: FitnessLevel) -> float:
    """Session-RPE load for one day: Σ block minutes × block RPE."""
    load = 0.0
    for block in day.blocks:
        difficulty = block.interval_set.difficulty if block.interval_set else None
        rpe = estimate_rpe(block.pillar, difficulty, fitness_level)
        load += block.estimated_duration_min * rpe
    return load


def daily_loads(
    program: GeneratedProgram, week_number: int, fitness_level: FitnessLevel,
) -> np.ndarray:
    """Seven daily loads for a week; unplanned days count as zero."""
    loads = np.zeros(MAX_DAY_OF_WEEK, dtype=np.float64)
    for day in program.days_for_week(week_number):
        loads[day.day_of_week - 1] = session_load(day, fitness_level)
    return loads


def weekly_monotony(
    program: GeneratedProgram, week_number: int, fitness_level: FitnessLevel,
) -> float:
    """Training monotony for one week.

    Returns:
        mean / std of the daily loads, or 0.0 when the week is flat.
    """
    loads = daily_loads(program, week_number, fitness_level)
    std = float(np.std(loads, ddof=0))
    if std < 1e-6:
        return 0.0
    return float(np.mean(loads)) / std
