"""Shared test fixtures: library snapshots, preference profiles, generated programs."""

from __future__ import annotations

from datetime import date

import pytest

from program_engine.engine import ProgramEngine
from program_engine.models.enums import FitnessLevel, Mode, Pillar
from program_engine.models.library import Library
from program_engine.models.preferences import Preferences
from program_engine.models.program import GeneratedProgram

START = date(2026, 1, 5)  # a Monday


def _strength_template_rows() -> list[dict]:
    return [
        {
            "id": "st-beginner",
            "pillar": "strength",
            "name": "Beginner Full Body",
            "difficulty": "beginner",
            # Stored out of order on purpose; sort_order decides.
            "items": [
                {"exercise_id": "ex-bw-squat", "name": "Goblet Squat", "reps": "2×8-12",
                 "rest_sec": 60, "sort_order": 1},
                {"name": "Glute Bridge", "reps": "2×10-15", "rest_sec": 60, "sort_order": 3},
                {"name": "Push-Up", "reps": "2×8-12", "rest_sec": 60, "sort_order": 2},
                {"name": "Dead Bug", "reps": "2×8-12", "rest_sec": 45, "sort_order": 4},
                {"name": "Calf Raise", "reps": "2×10-15", "rest_sec": 45, "sort_order": 5},
            ],
        },
        {
            "id": "st-moderate",
            "pillar": "strength",
            "name": "Moderate Barbell",
            "difficulty": "moderate",
            "items": [
                {"name": "Back Squat", "reps": "3×5", "rest_sec": 120, "sort_order": 1},
                {"name": "Deadlift", "reps": "3×5", "rest_sec": 120, "sort_order": 2},
            ],
        },
    ]


def _exercise_rows() -> list[dict]:
    strength = [
        {"id": "ex-bw-squat", "pillar": "strength", "name": "Bodyweight Squat",
         "cues": ["Knees track toes"]},
        {"id": "ex-incline-push", "pillar": "strength", "name": "Incline Push-Up"},
        {"id": "ex-pistol", "pillar": "strength", "name": "Advanced Pistol Squat"},
        {"id": "ex-bridge", "pillar": "strength", "name": "Glute Bridge"},
        {"id": "ex-bird-dog", "pillar": "strength", "name": "Bird Dog"},
    ]
    mobility = [
        {"id": "mob-hip", "pillar": "mobility", "name": "Hip Flexor Stretch",
         "default_reps": "45-60s", "default_rest_sec": 15, "cues": ["Breathe out"]},
        {"id": "mob-shoulder", "pillar": "mobility", "name": "Shoulder CARs",
         "default_reps": "45-60s", "default_rest_sec": 15},
        {"id": "mob-spine", "pillar": "mobility", "name": "Thoracic Spine Rotation",
         "default_reps": "45-60s", "default_rest_sec": 15},
        {"id": "mob-ankle", "pillar": "mobility", "name": "Ankle Rocks",
         "default_reps": "45-60s", "default_rest_sec": 15},
        {"id": "mob-pancake", "pillar": "mobility", "name": "Advanced Pancake Stretch",
         "default_reps": "45-60s", "default_rest_sec": 15},
        {"id": "mob-neck", "pillar": "mobility", "name": "Neck Release",
         "default_reps": "45-60s", "default_rest_sec": 15},
    ]
    tai_chi = [
        {"id": "tc-commencement", "pillar": "tai_chi", "name": "Commencement Form"},
        {"id": "tc-flow", "pillar": "tai_chi", "name": "Tai Chi Flow Sequence",
         "default_reps": "Full flow"},
    ]
    return strength + mobility + tai_chi


def _interval_rows() -> list[dict]:
    # Easiest first: level N runs N minutes, four rounds, one minute walk.
    return [
        {
            "id": f"run-{level:02d}",
            "pillar": "running",
            "name": f"Run/Walk Level {level}",
            "warmup_sec": 300,
            "cooldown_sec": 300,
            "steps": [{"label": "run", "work_sec": 60 * level, "rest_sec": 60, "repeat": 4}],
            "difficulty": "beginner",
        }
        for level in range(1, 11)
    ]


@pytest.fixture
def library_records() -> dict:
    """Raw library snapshot as it would arrive from the content store."""
    return {
        "exercises": _exercise_rows(),
        "templates": _strength_template_rows(),
        "intervals": _interval_rows(),
    }


@pytest.fixture
def library(library_records: dict) -> Library:
    return Library.from_records(library_records)


@pytest.fixture
def short_strength_prefs() -> Preferences:
    """10 weeks, 4 days, 30-minute short sessions, strength focus."""
    return Preferences(
        week_length=10,
        days_per_week=4,
        max_duration_min=30,
        default_mode=Mode.SHORT,
        fitness_level=FitnessLevel.BEGINNER,
        pillars=(Pillar.STRENGTH, Pillar.MOBILITY),
        primary_focus=Pillar.STRENGTH,
    )


@pytest.fixture
def running_prefs() -> Preferences:
    """12 weeks, 3 days, full 45-minute sessions, running and mobility."""
    return Preferences(
        week_length=12,
        days_per_week=3,
        max_duration_min=45,
        default_mode=Mode.FULL,
        fitness_level=FitnessLevel.BEGINNER,
        pillars=(Pillar.RUNNING, Pillar.MOBILITY),
    )


@pytest.fixture
def short_strength_program(short_strength_prefs: Preferences, library: Library) -> GeneratedProgram:
    return ProgramEngine().generate(short_strength_prefs, library, start_date=START)


@pytest.fixture
def running_program(running_prefs: Preferences, library: Library) -> GeneratedProgram:
    return ProgramEngine().generate(running_prefs, library, start_date=START)
