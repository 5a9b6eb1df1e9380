"""Per-pillar fallbacks for exercises that carry no prescription of their own."""

from __future__ import annotations

from program_engine.models.enums import Mode, Pillar

_DEFAULT_REPS: dict[Pillar, str] = {
    Pillar.STRENGTH: "2×8-12",
    Pillar.MOBILITY: "30-45s",
    Pillar.TAI_CHI: "3-5 repetitions",
    Pillar.RUNNING: "See intervals",
    Pillar.CARDIO: "See intervals",
}
_FALLBACK_REPS = "2×8-12"

_DEFAULT_REST_SEC: dict[Pillar, int] = {
    Pillar.STRENGTH: 60,
    Pillar.MOBILITY: 0,
    Pillar.TAI_CHI: 30,
    Pillar.RUNNING: 0,
    Pillar.CARDIO: 0,
}
_FALLBACK_REST_SEC = 45

# (short, full) exercise counts per block
_MAX_EXERCISES: dict[Pillar, tuple[int, int]] = {
    Pillar.STRENGTH: (3, 5),
    Pillar.MOBILITY: (4, 6),
    Pillar.TAI_CHI: (3, 5),
    Pillar.RUNNING: (1, 1),
    Pillar.CARDIO: (1, 1),
}
_FALLBACK_MAX_EXERCISES = 4


def default_reps(pillar: Pillar) -> str:
    return _DEFAULT_REPS.get(pillar, _FALLBACK_REPS)


def default_rest_sec(pillar: Pillar) -> int:
    return _DEFAULT_REST_SEC.get(pillar, _FALLBACK_REST_SEC)


def max_exercises(pillar: Pillar, mode: Mode) -> int:
    limits = _MAX_EXERCISES.get(pillar)
    if limits is None:
        return _FALLBACK_MAX_EXERCISES
    short, full = limits
    return short if mode == Mode.SHORT else full
