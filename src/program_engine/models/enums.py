"""Enumerations and planning constants for the program engine.

Every tunable number the generator relies on lives here so the
heuristics can be read (and adjusted) in one place.
"""

from __future__ import annotations

from enum import Enum


class Pillar(str, Enum):
    """Fitness category used to tag library content and schedule slots."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    RUNNING = "running"
    TAI_CHI = "tai_chi"
    MOBILITY = "mobility"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"Tai Chi"``."""
        return self.value.replace("_", " ").title()

    @property
    def uses_intervals(self) -> bool:
        """Running and cardio slots are filled from interval sets."""
        return self in (Pillar.RUNNING, Pillar.CARDIO)

    @classmethod
    def parse(cls, value: object) -> Pillar | None:
        """Return the matching pillar, or None for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class Mode(str, Enum):
    """Session variant: time-constrained ``short`` or complete ``full``."""

    SHORT = "short"
    FULL = "full"


class FitnessLevel(str, Enum):
    """Self-reported fitness level; doubles as template difficulty tag."""

    BEGINNER = "beginner"
    EASY = "easy"
    MODERATE = "moderate"


# ---------------------------------------------------------------------------
# Preference defaults (applied when a field is absent)
# ---------------------------------------------------------------------------
DEFAULT_WEEK_LENGTH = 10
DEFAULT_DAYS_PER_WEEK = 5
DEFAULT_MAX_DURATION_MIN = 45
DEFAULT_MODE = Mode.FULL
DEFAULT_FITNESS_LEVEL = FitnessLevel.BEGINNER
DEFAULT_PILLARS = (
    Pillar.STRENGTH,
    Pillar.TAI_CHI,
    Pillar.RUNNING,
    Pillar.MOBILITY,
)

MIN_DAY_OF_WEEK = 1
MAX_DAY_OF_WEEK = 7

# ---------------------------------------------------------------------------
# Duration estimation
# ---------------------------------------------------------------------------
SECONDS_PER_REP = 2.5
DEFAULT_INTER_SET_REST_SEC = 45     # inter-set rest when an item has none
DEFAULT_TEMPLATE_REST_SEC = 45      # per-item rest for template estimates
UNPARSED_ITEM_SEC = 60
CIRCLE_KEYWORD_SEC = 45             # controlled articular rotations
FLOW_KEYWORD_SEC = 120              # tai chi flows / sequences
DEFAULT_INTERVAL_WARMUP_SEC = 300
DEFAULT_INTERVAL_COOLDOWN_SEC = 300

# ---------------------------------------------------------------------------
# Progression
# ---------------------------------------------------------------------------
DELOAD_WEEK = 5
DELOAD_INTERVAL_STEP_BACK = 2       # easier interval set during deload
BASIC_EXERCISE_WEEKS = 3            # weeks favouring basic variations
TEMPLATE_DURATION_TOLERANCE = 1.2   # template may exceed allocation by 20%
TEMPO_ANNOTATION = " (3-1-1 tempo)"
POWER_REP_REPLACEMENTS = (
    ("8-12", "5-8"),
    ("10-15", "6-10"),
)

# ---------------------------------------------------------------------------
# Time budget
# ---------------------------------------------------------------------------
CORE_PILLARS = frozenset({Pillar.MOBILITY})
PRIMARY_SHORT_SHARE = 0.7
PRIMARY_FULL_SHARE = 0.6
SECONDARY_SHARE = 0.5
MIN_SECONDARY_BLOCK_MIN = 5         # blocks shorter than this are dropped
MIN_SECONDARY_BUDGET_MIN = 5        # stop placing secondary work below this
CUES_PRIORITY_BONUS = 2
SHRINK_ATTEMPT_THRESHOLD = 0.8      # try shrinking items below 80% used
BUDGET_SATURATION = 0.95            # stop once 95% of the target is used
MIN_ITEM_SLOT_SEC = 15
MIN_REST_SEC = 15
REST_CUT_FACTOR = 0.7
TIMED_TARGET_FACTOR = 0.8
TIMED_RANGE_WIDTH_SEC = 10

# Recommended per-pillar time splits
MOBILITY_SHORT_FRACTION = 0.25
MOBILITY_SHORT_MIN = 5
MOBILITY_FULL_FRACTION = 0.2
MOBILITY_FULL_MIN = 8
PRIMARY_SPLIT_SHORT = 0.7
PRIMARY_SPLIT_FULL = 0.5
