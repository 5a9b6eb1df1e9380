"""Theme-driven rewriting of repetition specifications.

Exactly one rule applies per call, checked in this order:

1. Deload week: drop one set from the leading set count (floor 1)
2. "tempo" focus: append a 3-1-1 tempo annotation
3. "power" focus: swap hypertrophy rep ranges for lower power ranges
4. otherwise: unchanged
"""

from __future__ import annotations

import re

from program_engine.models.enums import POWER_REP_REPLACEMENTS, TEMPO_ANNOTATION
from program_engine.models.program import WeekTheme

_LEADING_SETS_RE = re.compile(r"(\d+)\s*[×xX]\s*")


def leading_set_count(reps: str) -> int | None:
    """Set count of a ``<sets>×<reps>`` spec, or None when there is none."""
    match = _LEADING_SETS_RE.search(reps)
    return int(match.group(1)) if match else None


def reduce_leading_sets(reps: str) -> str:
    """``"3×8-12"`` -> ``"2×8-12"``; one set is the floor.

    Specs without a set count are returned unchanged.
    """
    match = _LEADING_SETS_RE.search(reps)
    if not match:
        return reps
    sets = max(1, int(match.group(1)) - 1)
    return f"{reps[:match.start()]}{sets}×{reps[match.end():]}"


def add_tempo(reps: str) -> str:
    return f"{reps}{TEMPO_ANNOTATION}"


def adjust_for_power(reps: str) -> str:
    for old, new in POWER_REP_REPLACEMENTS:
        reps = reps.replace(old, new)
    return reps


def adjust_reps(base_reps: str, theme: WeekTheme, is_deload: bool) -> str:
    """Apply the week's repetition rule to a base spec."""
    if is_deload:
        return reduce_leading_sets(base_reps)
    if "tempo" in theme.focus:
        return add_tempo(base_reps)
    if "power" in theme.focus:
        return adjust_for_power(base_reps)
    return base_reps
