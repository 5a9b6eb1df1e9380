"""Tests for row-shaped program serialization."""

from __future__ import annotations

import json

from program_engine.serialization import block_document, to_program_json_string, to_program_records


class TestToProgramRecords:
    def test_program_row(self, short_strength_program) -> None:
        records = to_program_records(short_strength_program, user_id="user-1")
        assert records["program"] == {
            "user_id": "user-1",
            "start_date": "2026-01-05",
            "length_weeks": 10,
        }

    def test_week_rows(self, short_strength_program) -> None:
        weeks = to_program_records(short_strength_program)["weeks"]
        assert len(weeks) == 10
        assert weeks[0] == {"week_number": 1, "theme": "Foundation & Form"}
        assert weeks[4]["theme"] == "Deload & Recovery"

    def test_day_rows(self, short_strength_program) -> None:
        days = to_program_records(short_strength_program)["days"]
        assert len(days) == 40
        first = days[0]
        assert first["week_number"] == 1
        assert first["day_of_week"] == 1
        assert first["mode"] == "short"
        assert first["workout_template_id"] is None
        assert first["interval_set_id"] is None
        assert first["est_total_min"] == 22
        assert [b["type"] for b in first["blocks"]] == ["strength", "mobility"]

    def test_empty_day_row(self, short_strength_program) -> None:
        second = to_program_records(short_strength_program)["days"][1]
        assert second["blocks"] == []
        assert second["est_total_min"] == 0


class TestBlockDocument:
    def test_template_block(self, short_strength_program) -> None:
        doc = block_document(short_strength_program.day(1, 1).blocks[0])
        assert doc["title"] == "Beginner Full Body"
        assert doc["estimated_duration_min"] == 17
        assert "rest_sec" not in doc
        assert "interval_set_id" not in doc
        assert doc["items"][0] == {
            "name": "Goblet Squat",
            "id": "ex-bw-squat",
            "exercise_id": "ex-bw-squat",
            "reps": "2×8-12",
            "rest_sec": 78,
        }
        assert "exercise_id" not in doc["items"][1]

    def test_exercise_block_carries_cues(self, short_strength_program) -> None:
        mobility = block_document(short_strength_program.day(1, 1).blocks[1])
        assert mobility["items"][0]["cues"] == ["Breathe out"]
        assert "cues" not in mobility["items"][1]

    def test_interval_block(self, running_program) -> None:
        doc = block_document(running_program.day(1, 2).blocks[0])
        assert doc["type"] == "running"
        assert doc["interval_set_id"] == "run-01"
        assert doc["items"] == []
        assert doc["estimated_duration_min"] == 18


class TestJsonString:
    def test_round_trips_through_json(self, short_strength_program) -> None:
        text = to_program_json_string(short_strength_program, user_id="u")
        assert json.loads(text) == to_program_records(short_strength_program, user_id="u")

    def test_keeps_unicode(self, short_strength_program) -> None:
        assert "2×8-12" in to_program_json_string(short_strength_program)

    def test_compact_output(self, short_strength_program) -> None:
        assert "\n" not in to_program_json_string(short_strength_program, indent=None)
