"""Row-shaped serialization for GeneratedProgram objects.

Converts a generated program into plain dicts shaped like the persisted
``programs`` / ``program_weeks`` / ``program_days`` rows, with each day's
blocks embedded as JSON documents. Persistence itself is the caller's job.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from program_engine.models.program import GeneratedProgram, ProgramDay
from program_engine.models.workout import WorkoutBlock, WorkoutItem


def to_program_records(program: GeneratedProgram, user_id: str = "") -> dict:
    """Convert a GeneratedProgram into row dicts.

    Returns:
        ``{"program": {...}, "weeks": [...], "days": [...]}``.
    """
    return {
        "program": {
            "user_id": user_id,
            "start_date": program.program.start_date.isoformat(),
            "length_weeks": program.program.length_weeks,
        },
        "weeks": [
            {"week_number": week.week_number, "theme": week.title}
            for week in program.weeks
        ],
        "days": [_day_row(day) for day in program.days],
    }


def to_program_json_string(
    program: GeneratedProgram, user_id: str = "", indent: int | None = 2,
) -> str:
    """Stable JSON (sorted keys) so identical programs give identical text."""
    return json.dumps(
        to_program_records(program, user_id), indent=indent, sort_keys=True, ensure_ascii=False,
    )


def block_document(block: WorkoutBlock) -> dict:
    """Embedded block document; absent optional fields are omitted."""
    doc: dict = {
        "type": block.pillar.value,
        "title": block.title,
        "items": [_item_document(item) for item in block.items],
        "estimated_duration_min": block.estimated_duration_min,
    }
    if block.rest_sec is not None:
        doc["rest_sec"] = block.rest_sec
    if block.interval_set is not None:
        doc["interval_set_id"] = block.interval_set.id
    return doc


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _day_row(day: ProgramDay) -> dict:
    return {
        "week_number": day.week_number,
        "day_of_week": day.day_of_week,
        "mode": day.mode.value,
        "workout_template_id": None,
        "interval_set_id": None,
        "blocks": [block_document(block) for block in day.blocks],
        "est_total_min": day.est_total_min,
    }


def _item_document(item: WorkoutItem) -> dict:
    doc: dict = {"name": item.name}
    if item.exercise_id is not None:
        doc["id"] = item.exercise_id
        doc["exercise_id"] = item.exercise_id
    if item.reps is not None:
        doc["reps"] = item.reps
    if item.rest_sec is not None:
        doc["rest_sec"] = item.rest_sec
    if item.cues:
        doc["cues"] = list(item.cues)
    if item.notes is not None:
        doc["notes"] = item.notes
    return doc
