"""Tests for the library snapshot model and its row loader."""

from __future__ import annotations

import json

import pytest

from program_engine.exceptions import LibraryFormatError
from program_engine.models.enums import Pillar
from program_engine.models.library import Library, TemplateItem, WorkoutTemplate


class TestFromRecords:
    def test_loads_all_collections(self, library: Library) -> None:
        assert len(library.exercises) == 13
        assert len(library.templates) == 2
        assert len(library.intervals) == 10

    def test_lookups_by_pillar(self, library: Library) -> None:
        assert len(library.exercises_for(Pillar.MOBILITY)) == 6
        assert [t.id for t in library.templates_for(Pillar.STRENGTH)] == ["st-beginner", "st-moderate"]
        assert library.intervals_for(Pillar.CARDIO) == ()

    def test_exercise_lookup(self, library: Library) -> None:
        assert library.exercise("mob-hip").name == "Hip Flexor Stretch"
        assert library.exercise("missing") is None
        assert library.exercise(None) is None

    def test_interval_steps_may_be_json_text(self) -> None:
        steps = json.dumps([{"label": "run", "work_sec": 120, "rest_sec": 60, "repeat": 3}])
        library = Library.from_records({
            "intervals": [{"id": 7, "pillar": "running", "name": "Hills", "steps": steps}],
        })
        interval = library.intervals[0]
        assert interval.id == "7"
        assert interval.steps[0].work_sec == 120
        assert interval.steps[0].repeat == 3

    def test_unknown_pillar_rows_skipped(self) -> None:
        library = Library.from_records({
            "exercises": [
                {"id": "a", "pillar": "yoga", "name": "Sun Salutation"},
                {"id": "b", "pillar": "Strength", "name": "Row"},
            ],
        })
        assert [e.id for e in library.exercises] == ["b"]

    def test_rows_without_id_skipped(self) -> None:
        library = Library.from_records({
            "exercises": [
                {"pillar": "strength", "name": "Row"},
                {"id": "b", "pillar": "strength", "name": "Press"},
            ],
        })
        assert [e.id for e in library.exercises] == ["b"]

    def test_row_not_a_mapping(self) -> None:
        with pytest.raises(LibraryFormatError) as excinfo:
            Library.from_records({"exercises": ["oops"]})
        assert excinfo.value.collection == "exercises"

    def test_template_item_not_a_mapping(self) -> None:
        with pytest.raises(LibraryFormatError) as excinfo:
            Library.from_records({
                "templates": [{"id": "t", "pillar": "strength", "items": ["Squat"]}],
            })
        assert excinfo.value.collection == "templates"

    def test_interval_step_not_a_mapping(self) -> None:
        with pytest.raises(LibraryFormatError) as excinfo:
            Library.from_records({
                "intervals": [{"id": "x", "pillar": "running", "steps": [3]}],
            })
        assert excinfo.value.collection == "intervals"

    def test_not_a_mapping(self) -> None:
        with pytest.raises(LibraryFormatError):
            Library.from_records([])  # type: ignore[arg-type]

    def test_collection_not_a_list(self) -> None:
        with pytest.raises(LibraryFormatError) as excinfo:
            Library.from_records({"templates": {"id": "t"}})
        assert excinfo.value.collection == "templates"

    def test_malformed_step_json(self) -> None:
        with pytest.raises(LibraryFormatError):
            Library.from_records({
                "intervals": [{"id": "x", "pillar": "running", "steps": "[{"}],
            })


class TestWorkoutTemplate:
    def test_ordered_items_puts_unordered_last(self) -> None:
        template = WorkoutTemplate(
            id="t", pillar=Pillar.STRENGTH, name="T",
            items=(
                TemplateItem(name="c"),
                TemplateItem(name="b", sort_order=2),
                TemplateItem(name="a", sort_order=1),
            ),
        )
        assert [i.name for i in template.ordered_items] == ["a", "b", "c"]
