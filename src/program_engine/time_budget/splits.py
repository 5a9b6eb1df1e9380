"""Recommended per-pillar time allocation for a single session."""

from __future__ import annotations

from typing import Mapping, Sequence

from program_engine.models.enums import (
    MOBILITY_FULL_FRACTION,
    MOBILITY_FULL_MIN,
    MOBILITY_SHORT_FRACTION,
    MOBILITY_SHORT_MIN,
    PRIMARY_SPLIT_FULL,
    PRIMARY_SPLIT_SHORT,
    Mode,
    Pillar,
)


def recommended_time_splits(
    max_duration_min: float,
    mode: Mode,
    pillars: Sequence[Pillar],
    primary_focus: Pillar | None = None,
) -> dict[Pillar, float]:
    """Split a session's minutes across pillars.

    Mobility always receives a slice (a warm-up/cool-down floor), the
    primary focus takes most of what is left, and remaining pillars share
    the rest equally.

    Args:
        max_duration_min: Session cap in minutes.
        mode: Short sessions give mobility 25% (min 5 min) and the primary
            focus 70% of the remainder; full sessions 20% (min 8 min) and 50%.
        pillars: Pillars trained in the session.
        primary_focus: Optional emphasised pillar.

    Returns:
        Mapping pillar -> allocated minutes.
    """
    if mode == Mode.SHORT:
        mobility = max(MOBILITY_SHORT_MIN, max_duration_min * MOBILITY_SHORT_FRACTION)
    else:
        mobility = max(MOBILITY_FULL_MIN, max_duration_min * MOBILITY_FULL_FRACTION)

    splits: dict[Pillar, float] = {Pillar.MOBILITY: mobility}
    remaining = max(0.0, max_duration_min - mobility)

    if (
        primary_focus is not None
        and primary_focus in pillars
        and primary_focus != Pillar.MOBILITY
    ):
        share = PRIMARY_SPLIT_SHORT if mode == Mode.SHORT else PRIMARY_SPLIT_FULL
        primary_min = remaining * share
        splits[primary_focus] = primary_min
        remaining -= primary_min

    others = [p for p in pillars if p != Pillar.MOBILITY and p != primary_focus]
    if others and remaining > 0:
        per_pillar = remaining / len(others)
        for pillar in others:
            splits[pillar] = per_pillar

    return splits


def allocated_minutes(
    splits: Mapping[Pillar, float],
    pillar: Pillar,
    max_duration_min: float,
    pillar_count: int,
) -> float:
    """Minutes for ``pillar``, falling back to an even share of the session."""
    allocated = splits.get(pillar)
    if allocated is not None and allocated > 0:
        return allocated
    return float(int(max_duration_min // max(pillar_count, 1)))
