"""Environment-variable-based configuration for the batch program generator."""

from __future__ import annotations

import os
from pathlib import Path

LIBRARY_PATH: Path = Path(os.environ.get("PROGRAM_LIBRARY_PATH", "data/library.json"))
PREFERENCES_PATH: Path = Path(os.environ.get("PROGRAM_PREFERENCES_PATH", "data/preferences.json"))
OUTPUT_PATH: str = os.environ.get("PROGRAM_OUTPUT_PATH", "")
LOG_LEVEL: str = os.environ.get("PROGRAM_LOG_LEVEL", "INFO").upper()
