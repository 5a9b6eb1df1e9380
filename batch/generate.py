"""Batch generator: builds a program from JSON library and preference snapshots.

Usage:
    python -m batch.generate                                  # paths from env
    python -m batch.generate --library lib.json --preferences prefs.json \
        --output program.json --start-date 2026-01-05
    python -m batch.generate --summary                        # weekly minutes table
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from program_engine.engine import build_personalized_program
from program_engine.exceptions import ProgramEngineError
from program_engine.math.program_load import weekly_minutes
from program_engine.serialization import to_program_json_string

from batch.config import LIBRARY_PATH, LOG_LEVEL, OUTPUT_PATH, PREFERENCES_PATH

logger = logging.getLogger(__name__)


def _load_json(path: Path) -> dict:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a multi-week workout program")
    parser.add_argument("--library", type=Path, default=LIBRARY_PATH, help="Library snapshot JSON")
    parser.add_argument(
        "--preferences", type=Path, default=PREFERENCES_PATH, help="Preferences record JSON",
    )
    parser.add_argument(
        "--output", default=OUTPUT_PATH, help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--start-date", type=date.fromisoformat, default=None, help="Program start (YYYY-MM-DD)",
    )
    parser.add_argument("--user-id", default="", help="Owner written into the program record")
    parser.add_argument(
        "--summary", action="store_true", help="Print weekly minutes per pillar instead of JSON",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Execute one generation run. Returns a process exit code."""
    try:
        library = _load_json(args.library)
        preferences = _load_json(args.preferences)
    except FileNotFoundError as exc:
        logger.error("Input not found: %s", exc.filename)
        return 1
    except json.JSONDecodeError as exc:
        logger.error("Invalid JSON input: %s", exc)
        return 1

    try:
        program = build_personalized_program(preferences, library, args.start_date)
    except ProgramEngineError as exc:
        logger.error("Could not generate program: %s", exc)
        return 1

    if args.summary:
        print(weekly_minutes(program).to_string())
        return 0

    text = to_program_json_string(program, user_id=args.user_id)
    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote %d program days to %s", len(program.days), args.output)
    else:
        print(text)
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return run(_parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
