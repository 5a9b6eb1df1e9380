"""Content library snapshot: exercises, workout templates, interval sets.

The library arrives already filtered to visibility-eligible entries; the
engine treats it as an immutable snapshot for one generation call.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from program_engine.exceptions import LibraryFormatError
from program_engine.models.enums import Pillar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Exercise:
    """A single library exercise with optional coaching defaults."""

    id: str
    pillar: Pillar
    name: str
    cues: tuple[str, ...] = field(default_factory=tuple)
    default_reps: str | None = None
    default_rest_sec: int | None = None
    is_public: bool = True


@dataclass(frozen=True)
class TemplateItem:
    """One line of a workout template.

    Either references a library exercise (``exercise_id``) or stands alone
    with its own ``name``.
    """

    exercise_id: str | None = None
    name: str | None = None
    reps: str | None = None
    notes: str | None = None
    rest_sec: int | None = None
    sort_order: int | None = None


@dataclass(frozen=True)
class WorkoutTemplate:
    id: str
    pillar: Pillar
    name: str
    difficulty: str | None = None
    items: tuple[TemplateItem, ...] = field(default_factory=tuple)

    @property
    def ordered_items(self) -> tuple[TemplateItem, ...]:
        """Items by ``sort_order``; unordered items keep their position at the end."""
        return tuple(sorted(
            self.items,
            key=lambda item: (item.sort_order is None, item.sort_order or 0),
        ))


@dataclass(frozen=True)
class IntervalStep:
    """``repeat`` × (work + rest) seconds."""

    label: str
    work_sec: int
    rest_sec: int = 0
    repeat: int = 1


@dataclass(frozen=True)
class IntervalSet:
    id: str
    pillar: Pillar
    name: str
    warmup_sec: int | None = None
    cooldown_sec: int | None = None
    steps: tuple[IntervalStep, ...] = field(default_factory=tuple)
    difficulty: str | None = None


@dataclass(frozen=True)
class Library:
    """Immutable library snapshot consumed by one generation run."""

    exercises: tuple[Exercise, ...] = field(default_factory=tuple)
    templates: tuple[WorkoutTemplate, ...] = field(default_factory=tuple)
    intervals: tuple[IntervalSet, ...] = field(default_factory=tuple)

    def exercises_for(self, pillar: Pillar) -> tuple[Exercise, ...]:
        return tuple(e for e in self.exercises if e.pillar == pillar)

    def templates_for(self, pillar: Pillar) -> tuple[WorkoutTemplate, ...]:
        return tuple(t for t in self.templates if t.pillar == pillar)

    def intervals_for(self, pillar: Pillar) -> tuple[IntervalSet, ...]:
        return tuple(i for i in self.intervals if i.pillar == pillar)

    def exercise(self, exercise_id: str | None) -> Exercise | None:
        if exercise_id is None:
            return None
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None

    @classmethod
    def from_records(cls, records: Mapping[str, Any]) -> Library:
        """Build a Library from raw row dicts.

        ``records`` holds ``exercises``, ``templates`` (each with ``items``)
        and ``intervals`` (each with ``steps``, possibly JSON-encoded).
        Rows with an unknown pillar are skipped with a warning.

        Raises:
            LibraryFormatError: If ``records`` is not a mapping or a
                collection is not a list.
        """
        if not isinstance(records, Mapping):
            raise LibraryFormatError(
                f"Library snapshot must be a mapping, got {type(records).__name__}"
            )
        return cls(
            exercises=tuple(_load(records, "exercises", _exercise_from_row)),
            templates=tuple(_load(records, "templates", _template_from_row)),
            intervals=tuple(_load(records, "intervals", _interval_from_row)),
        )


# ---------------------------------------------------------------------------
# Row converters
# ---------------------------------------------------------------------------


def _load(
    records: Mapping[str, Any],
    collection: str,
    convert: Callable[[Mapping[str, Any], Pillar], Any],
) -> Iterable[Any]:
    rows = records.get(collection) or []
    if not isinstance(rows, list):
        raise LibraryFormatError(f"{collection} must be a list", collection=collection)
    for row in rows:
        if not isinstance(row, Mapping):
            raise LibraryFormatError(
                f"{collection} rows must be mappings, got {type(row).__name__}",
                collection=collection,
            )
        if row.get("id") is None:
            logger.warning("Skipping %s row without an id: %r", collection, row.get("name"))
            continue
        pillar = Pillar.parse(row.get("pillar"))
        if pillar is None:
            logger.warning(
                "Skipping %s row %s with unknown pillar %r",
                collection, row.get("id"), row.get("pillar"),
            )
            continue
        yield convert(row, pillar)


def _nested_rows(values: Iterable[Any], collection: str) -> Iterable[Mapping[str, Any]]:
    for value in values:
        if not isinstance(value, Mapping):
            raise LibraryFormatError(
                f"{collection} entries must be mappings, got {type(value).__name__}",
                collection=collection,
            )
        yield value


def _exercise_from_row(row: Mapping[str, Any], pillar: Pillar) -> Exercise:
    return Exercise(
        id=str(row["id"]),
        pillar=pillar,
        name=row.get("name") or "",
        cues=tuple(row.get("cues") or ()),
        default_reps=row.get("default_reps"),
        default_rest_sec=row.get("default_rest_sec"),
        is_public=bool(row.get("is_public", True)),
    )


def _template_from_row(row: Mapping[str, Any], pillar: Pillar) -> WorkoutTemplate:
    items = tuple(
        TemplateItem(
            exercise_id=item.get("exercise_id"),
            name=item.get("name"),
            reps=item.get("reps"),
            notes=item.get("notes"),
            rest_sec=item.get("rest_sec"),
            sort_order=item.get("sort_order"),
        )
        for item in _nested_rows(row.get("items") or (), "templates")
    )
    return WorkoutTemplate(
        id=str(row["id"]),
        pillar=pillar,
        name=row.get("name") or "",
        difficulty=row.get("difficulty"),
        items=items,
    )


def _interval_from_row(row: Mapping[str, Any], pillar: Pillar) -> IntervalSet:
    raw_steps = row.get("steps") or []
    if isinstance(raw_steps, str):
        try:
            raw_steps = json.loads(raw_steps)
        except json.JSONDecodeError as exc:
            raise LibraryFormatError(
                f"Interval set {row.get('id')} has malformed steps: {exc}",
                collection="intervals",
            ) from exc
    steps = tuple(
        IntervalStep(
            label=step.get("label") or "",
            work_sec=int(step.get("work_sec") or 0),
            rest_sec=int(step.get("rest_sec") or 0),
            repeat=int(step.get("repeat") or 1),
        )
        for step in _nested_rows(raw_steps, "intervals")
    )
    return IntervalSet(
        id=str(row["id"]),
        pillar=pillar,
        name=row.get("name") or "",
        warmup_sec=row.get("warmup_sec"),
        cooldown_sec=row.get("cooldown_sec"),
        steps=steps,
        difficulty=row.get("difficulty"),
    )
