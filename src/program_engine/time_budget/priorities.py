"""Item priority tables used when a block has to be shortened.

Each (pillar, mode) pair maps to an ordered tuple of (keyword, weight)
pairs. An item scores the sum of the weights of every keyword found in
its lower-cased name, plus a flat bonus when it carries coaching cues.
Compound and foundational movements score highest so they survive
trimming.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from program_engine.models.enums import CUES_PRIORITY_BONUS, Mode, Pillar
from program_engine.models.workout import WorkoutItem

KeywordWeights = tuple[tuple[str, int], ...]

_BASE_PRIORITIES: dict[Pillar, KeywordWeights] = {
    Pillar.STRENGTH: (
        ("squat", 10),
        ("deadlift", 10),
        ("push", 9),
        ("pull", 9),
        ("hip", 8),
        ("bridge", 7),
        ("lunge", 7),
        ("split", 7),
        ("plank", 6),
        ("single", 5),   # single-leg / single-arm variations
        ("core", 5),
        ("calf", 3),
    ),
    Pillar.MOBILITY: (
        ("hip", 10),
        ("shoulder", 9),
        ("spine", 8),
        ("car", 8),      # controlled articular rotations
        ("ankle", 7),
        ("neck", 6),
        ("hamstring", 6),
        ("couch", 5),
        ("stretch", 4),
    ),
    Pillar.TAI_CHI: (
        ("commencement", 10),
        ("stance", 9),
        ("wild horse", 8),
        ("white crane", 8),
        ("brush knee", 7),
        ("repulse", 6),
        ("wave hands", 6),
        ("golden", 5),
        ("flow", 4),
    ),
    Pillar.RUNNING: (
        ("interval", 10),
        ("tempo", 8),
        ("easy", 6),
        ("recovery", 4),
    ),
    Pillar.CARDIO: (
        ("interval", 10),
        ("brisk", 8),
        ("walk", 6),
        ("low impact", 5),
    ),
}

# Short sessions lean harder on the big compound lifts.
_SHORT_MODE_BOOSTS: dict[Pillar, dict[str, int]] = {
    Pillar.STRENGTH: {"squat": 2, "deadlift": 2, "push": 1, "pull": 1},
}


def pillar_priorities(pillar: Pillar, mode: Mode) -> KeywordWeights:
    """Keyword weights for a pillar in the given mode.

    Every pillar has a table; the short-mode boosts only touch strength.
    """
    base = _BASE_PRIORITIES.get(pillar, ())
    boosts = _SHORT_MODE_BOOSTS.get(pillar, {}) if mode == Mode.SHORT else {}
    if not boosts:
        return base
    return tuple((keyword, weight + boosts.get(keyword, 0)) for keyword, weight in base)


def item_priority(item: WorkoutItem, priorities: Iterable[tuple[str, int]]) -> int:
    name = item.name.lower()
    score = sum(weight for keyword, weight in priorities if keyword in name)
    if item.cues:
        score += CUES_PRIORITY_BONUS
    return score


def prioritize_items(
    items: Sequence[WorkoutItem], pillar: Pillar, mode: Mode,
) -> list[tuple[int, WorkoutItem]]:
    """Items paired with their original index, highest priority first.

    The sort is stable, so equal scores keep block order.
    """
    priorities = pillar_priorities(pillar, mode)
    scored = [(item_priority(item, priorities), index, item) for index, item in enumerate(items)]
    scored.sort(key=lambda entry: -entry[0])
    return [(index, item) for _, index, item in scored]
