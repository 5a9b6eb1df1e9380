"""Duration estimation from free-text repetition specifications.

Repetition specs are written by coaches ("2×8-12", "30-45s",
"3-5 circles/side", "Full flow") so parsing is heuristic. The text is
classified once into a tagged ``RepSpec`` by ordered pattern matching;
estimation is then a plain dispatch over the variants.

Pattern order matters more than the patterns themselves: "2×8-12" also
matches the bare rep-range pattern, and "30-45s" also matches set×rep
style digit scans, so the first match in the order below wins:

    1. Timed    - number or range followed by a seconds marker
    2. SetRep   - <sets>×<min>[-<max>]
    3. RepRange - bare number or range
    4. Keyword  - "circle"/"car" (45 s), "flow"/"sequence" (120 s)
    5. Unparsed - 60 s
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Union

from program_engine.models.enums import (
    CIRCLE_KEYWORD_SEC,
    DEFAULT_INTER_SET_REST_SEC,
    DEFAULT_INTERVAL_COOLDOWN_SEC,
    DEFAULT_INTERVAL_WARMUP_SEC,
    DEFAULT_TEMPLATE_REST_SEC,
    FLOW_KEYWORD_SEC,
    SECONDS_PER_REP,
    UNPARSED_ITEM_SEC,
)

if TYPE_CHECKING:
    from program_engine.models.library import IntervalSet, WorkoutTemplate
    from program_engine.models.workout import WorkoutItem


_RANGE = r"(\d+)(?:\s*[-–]\s*(\d+))?"
_TIMED_RE = re.compile(_RANGE + r"\s*(?:seconds?|secs?|s)\b")
_SET_REP_RE = re.compile(r"(\d+)\s*[×x]\s*" + _RANGE)
_REP_RE = re.compile(_RANGE)

_CIRCLE_KEYWORDS = ("circle", "car")
_FLOW_KEYWORDS = ("flow", "sequence")


# ---------------------------------------------------------------------------
# Tagged parse result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Blank:
    """Empty specification; contributes no work time."""


@dataclass(frozen=True)
class Timed:
    seconds: float


@dataclass(frozen=True)
class SetRep:
    sets: int
    min_reps: int
    max_reps: int

    @property
    def avg_reps(self) -> float:
        return (self.min_reps + self.max_reps) / 2


@dataclass(frozen=True)
class RepRange:
    min_reps: int
    max_reps: int

    @property
    def avg_reps(self) -> float:
        return (self.min_reps + self.max_reps) / 2


@dataclass(frozen=True)
class Keyword:
    seconds: float


@dataclass(frozen=True)
class Unparsed:
    """Nothing recognisable; estimated with a flat default."""


RepSpec = Union[Blank, Timed, SetRep, RepRange, Keyword, Unparsed]


def _endpoints(match: re.Match, first_group: int = 1) -> tuple[int, int]:
    low = int(match.group(first_group))
    high = match.group(first_group + 1)
    return low, int(high) if high is not None else low


def parse_rep_spec(text: str | None) -> RepSpec:
    """Classify a repetition specification.

    Args:
        text: Free-text spec, e.g. ``"2×8-12"`` or ``"30-45s"``.

    Returns:
        The first matching variant in the documented order.
    """
    if not text or not text.strip():
        return Blank()
    lowered = text.lower()

    timed = _TIMED_RE.search(lowered)
    if timed:
        low, high = _endpoints(timed)
        return Timed(seconds=(low + high) / 2)

    set_rep = _SET_REP_RE.search(lowered)
    if set_rep:
        low, high = _endpoints(set_rep, first_group=2)
        return SetRep(sets=int(set_rep.group(1)), min_reps=low, max_reps=high)

    reps = _REP_RE.search(lowered)
    if reps:
        low, high = _endpoints(reps)
        return RepRange(min_reps=low, max_reps=high)

    if any(k in lowered for k in _CIRCLE_KEYWORDS):
        return Keyword(seconds=CIRCLE_KEYWORD_SEC)
    if any(k in lowered for k in _FLOW_KEYWORDS):
        return Keyword(seconds=FLOW_KEYWORD_SEC)

    return Unparsed()


def spec_seconds(spec: RepSpec, rest_sec: float = DEFAULT_INTER_SET_REST_SEC) -> float:
    """Estimated work seconds for a parsed spec, including inter-set rest."""
    if isinstance(spec, Blank):
        return 0.0
    if isinstance(spec, (Timed, Keyword)):
        return spec.seconds
    if isinstance(spec, SetRep):
        work = spec.sets * spec.avg_reps * SECONDS_PER_REP
        return work + (spec.sets - 1) * rest_sec
    if isinstance(spec, RepRange):
        return spec.avg_reps * SECONDS_PER_REP
    return float(UNPARSED_ITEM_SEC)


def estimate_item_seconds(
    reps: str | None, rest_sec: float = DEFAULT_INTER_SET_REST_SEC,
) -> float:
    """Estimate work seconds for a repetition spec.

    >>> estimate_item_seconds("2×8-12", 45)
    95.0
    >>> estimate_item_seconds("30-45s", 0)
    37.5
    """
    return spec_seconds(parse_rep_spec(reps), rest_sec)


def estimate_item_duration(item: WorkoutItem) -> float:
    """Work estimate plus the item's own rest, in seconds."""
    work = estimate_item_seconds(item.reps, item.rest_sec or DEFAULT_INTER_SET_REST_SEC)
    return work + (item.rest_sec or 0)


def estimate_block_duration(items: Iterable[WorkoutItem], rest_sec: int | None = None) -> int:
    """Whole minutes for a sequence of items plus block-level rest."""
    total = sum(estimate_item_duration(item) for item in items)
    return math.ceil((total + (rest_sec or 0)) / 60)


def estimate_template_duration(template: WorkoutTemplate) -> int:
    """Whole minutes for a library template, items at their stored rest."""
    total = 0.0
    for item in template.items:
        rest = item.rest_sec or DEFAULT_TEMPLATE_REST_SEC
        total += estimate_item_seconds(item.reps, rest) + rest
    return math.ceil(total / 60)


def estimate_interval_duration(interval: IntervalSet) -> int:
    """Whole minutes for an interval set, warmup and cooldown included."""
    warmup = interval.warmup_sec if interval.warmup_sec is not None else DEFAULT_INTERVAL_WARMUP_SEC
    cooldown = (
        interval.cooldown_sec
        if interval.cooldown_sec is not None
        else DEFAULT_INTERVAL_COOLDOWN_SEC
    )
    work = sum((step.work_sec + step.rest_sec) * step.repeat for step in interval.steps)
    return math.ceil(warmup / 60 + work / 60 + cooldown / 60)
