"""Time-budget trimming: fit a day's blocks into the session cap.

When a day's estimated total exceeds the cap, blocks are placed in three
priority tiers against a shrinking budget:

1. Core pass: core pillars (mobility) are always kept, shrunk to fit
2. Primary pass: the primary focus takes a large share of what is left
3. Secondary pass: other pillars split the remainder; short scraps are dropped

Each pass is a pure function of an immutable ``BudgetState`` and returns a
new one, so a pass can be exercised on its own from any starting budget.

Individual blocks shrink via a greedy, knapsack-like walk over their items
in priority order. The result is best-effort: the trimmer never reports
overage itself; use ``validate_time_budget`` for that.
"""

from __future__ import annotations

import dataclasses
import logging
import math
import re
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from program_engine.block_builder.rep_adjustment import reduce_leading_sets
from program_engine.math.durations import Timed, estimate_item_duration, parse_rep_spec
from program_engine.models.enums import (
    BUDGET_SATURATION,
    CORE_PILLARS,
    MIN_ITEM_SLOT_SEC,
    MIN_REST_SEC,
    MIN_SECONDARY_BLOCK_MIN,
    MIN_SECONDARY_BUDGET_MIN,
    PRIMARY_FULL_SHARE,
    PRIMARY_SHORT_SHARE,
    REST_CUT_FACTOR,
    SECONDARY_SHARE,
    SHRINK_ATTEMPT_THRESHOLD,
    TIMED_RANGE_WIDTH_SEC,
    TIMED_TARGET_FACTOR,
    Mode,
    Pillar,
)
from program_engine.models.workout import WorkoutBlock, WorkoutItem
from program_engine.time_budget.priorities import prioritize_items

logger = logging.getLogger(__name__)

_TIMED_RANGE_RE = re.compile(r"(\d+)\s*[-–]\s*(\d+)")


@dataclass(frozen=True)
class BudgetState:
    """Accumulator threaded through the trimming passes."""

    remaining_min: float
    accepted: tuple[WorkoutBlock, ...] = field(default_factory=tuple)

    def accept(self, block: WorkoutBlock) -> BudgetState:
        return BudgetState(
            remaining_min=self.remaining_min - block.estimated_duration_min,
            accepted=self.accepted + (block,),
        )

    @property
    def placed_pillars(self) -> frozenset[Pillar]:
        return frozenset(b.pillar for b in self.accepted)


@dataclass(frozen=True)
class BudgetCheck:
    """Result of validate_time_budget()."""

    valid: bool
    total_duration_min: int
    overage_min: int


def total_duration(blocks: Sequence[WorkoutBlock]) -> int:
    return sum(b.estimated_duration_min for b in blocks)


def validate_time_budget(blocks: Sequence[WorkoutBlock], max_duration_min: float) -> BudgetCheck:
    """Compare a block set against the cap and report any overage."""
    total = total_duration(blocks)
    overage = max(0, total - max_duration_min)
    return BudgetCheck(valid=overage == 0, total_duration_min=total, overage_min=overage)


# ---------------------------------------------------------------------------
# Day-level trimming
# ---------------------------------------------------------------------------


def trim(
    blocks: Sequence[WorkoutBlock],
    max_duration_min: float,
    mode: Mode,
    primary_focus: Pillar | None = None,
) -> tuple[WorkoutBlock, ...]:
    """Fit ``blocks`` into ``max_duration_min``.

    Args:
        blocks: The day's untrimmed blocks.
        max_duration_min: Session cap in minutes.
        mode: Session mode; changes the primary-focus share and item priorities.
        primary_focus: Optional emphasised pillar.

    Returns:
        ``blocks`` unchanged when already within the cap, otherwise the
        accepted blocks in placement order (core, primary, secondary).
    """
    total = total_duration(blocks)
    if total <= max_duration_min:
        return tuple(blocks)

    state = BudgetState(remaining_min=max_duration_min)
    state = core_pass(blocks, state, mode)
    state = primary_pass(blocks, state, mode, primary_focus)
    state = secondary_pass(blocks, state, mode, primary_focus)

    logger.debug(
        "Trimmed day from %d to %d min (cap %s)",
        total, total_duration(state.accepted), max_duration_min,
    )
    return state.accepted


def core_pass(blocks: Sequence[WorkoutBlock], state: BudgetState, mode: Mode) -> BudgetState:
    """Keep every core block, shrunk to the remaining budget."""
    for block in blocks:
        if block.pillar not in CORE_PILLARS:
            continue
        target = max(0.0, min(state.remaining_min, block.estimated_duration_min))
        state = state.accept(trim_block(block, target, mode))
    return state


def primary_pass(
    blocks: Sequence[WorkoutBlock],
    state: BudgetState,
    mode: Mode,
    primary_focus: Pillar | None,
) -> BudgetState:
    """Give the primary-focus blocks the lion's share of what is left."""
    if primary_focus is None or primary_focus in CORE_PILLARS:
        return state
    for block in blocks:
        if block.pillar != primary_focus:
            continue
        if state.remaining_min <= 0:
            break
        if mode == Mode.SHORT:
            target = state.remaining_min * PRIMARY_SHORT_SHARE
        else:
            target = min(
                state.remaining_min * PRIMARY_FULL_SHARE, block.estimated_duration_min,
            )
        state = state.accept(trim_block(block, target, mode))
    return state


def secondary_pass(
    blocks: Sequence[WorkoutBlock],
    state: BudgetState,
    mode: Mode,
    primary_focus: Pillar | None,
) -> BudgetState:
    """Fill leftover time with the remaining pillars, half the budget at a time."""
    placed = state.placed_pillars
    for block in blocks:
        if (
            block.pillar in CORE_PILLARS
            or block.pillar == primary_focus
            or block.pillar in placed
        ):
            continue
        if state.remaining_min <= MIN_SECONDARY_BUDGET_MIN:
            break
        target = min(state.remaining_min * SECONDARY_SHARE, block.estimated_duration_min)
        trimmed = trim_block(block, target, mode)
        if trimmed.estimated_duration_min >= MIN_SECONDARY_BLOCK_MIN:
            state = state.accept(trimmed)
        else:
            logger.debug(
                "Dropping %s block %r: %d min after trimming",
                block.pillar.value, block.title, trimmed.estimated_duration_min,
            )
    return state


# ---------------------------------------------------------------------------
# Block-level trimming
# ---------------------------------------------------------------------------


def trim_block(block: WorkoutBlock, target_minutes: float, mode: Mode) -> WorkoutBlock:
    """Shrink one block to roughly ``target_minutes``.

    Interval blocks keep their content and tighten their duration cap.
    Item blocks keep the highest-priority items that fit, shrinking an
    item instead of dropping it while less than 80% of the target is used,
    and stop once 95% is used. Kept items stay in block order.
    """
    if block.estimated_duration_min <= target_minutes:
        return block

    if block.is_interval:
        return dataclasses.replace(block, duration_cap_min=max(0, math.floor(target_minutes)))

    target_sec = target_minutes * 60 - (block.rest_sec or 0)
    kept: list[tuple[int, WorkoutItem]] = []
    used = 0.0

    for index, item in prioritize_items(block.items, block.pillar, mode):
        duration = estimate_item_duration(item)
        if used + duration <= target_sec:
            kept.append((index, item))
            used += duration
        elif used < target_sec * SHRINK_ATTEMPT_THRESHOLD:
            modified = modify_item_for_time(item, target_sec - used, mode)
            if modified is not None:
                kept.append((index, modified))
                used += estimate_item_duration(modified)

        if used >= target_sec * BUDGET_SATURATION:
            break

    kept.sort(key=lambda entry: entry[0])
    return dataclasses.replace(block, items=tuple(item for _, item in kept))


def modify_item_for_time(
    item: WorkoutItem, available_sec: float, mode: Mode,
) -> WorkoutItem | None:
    """Shrink an item to fit ``available_sec``, or return None.

    Alternatives are tried in order, each applied to the original item:
    one fewer set, a narrower timed range, 30% less rest. The first that
    fits wins; changes are never combined. ``mode`` is accepted for
    symmetry with the priority tables.
    """
    if available_sec < MIN_ITEM_SLOT_SEC:
        return None
    if estimate_item_duration(item) <= available_sec:
        return item

    for candidate in _shrink_candidates(item, available_sec):
        if estimate_item_duration(candidate) <= available_sec:
            return candidate
    return None


def _shrink_candidates(item: WorkoutItem, available_sec: float) -> Iterator[WorkoutItem]:
    if item.reps:
        fewer_sets = reduce_leading_sets(item.reps)
        if fewer_sets != item.reps:
            yield dataclasses.replace(item, reps=fewer_sets)

        narrowed = _narrow_timed_range(item.reps, available_sec)
        if narrowed is not None:
            yield dataclasses.replace(item, reps=narrowed)

    if item.rest_sec and item.rest_sec > MIN_REST_SEC:
        rested = max(MIN_REST_SEC, math.floor(item.rest_sec * REST_CUT_FACTOR))
        yield dataclasses.replace(item, rest_sec=rested)


def _narrow_timed_range(reps: str, available_sec: float) -> str | None:
    """``"30-60s"`` with 50 s available -> ``"30-40s"``.

    Only timed ranges are narrowed; the upper bound drops to 80% of the
    available time but never below the original lower bound.
    """
    if not isinstance(parse_rep_spec(reps), Timed):
        return None
    match = _TIMED_RANGE_RE.search(reps)
    if not match:
        return None
    low, high = int(match.group(1)), int(match.group(2))
    target = min(high, math.floor(available_sec * TIMED_TARGET_FACTOR))
    if target < low:
        return None
    return f"{max(low, target - TIMED_RANGE_WIDTH_SEC)}-{target}s"
