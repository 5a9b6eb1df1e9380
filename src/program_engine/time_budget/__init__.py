"""Time budget: allocate and trim session minutes."""

from program_engine.time_budget.splits import allocated_minutes, recommended_time_splits
from program_engine.time_budget.trimmer import (
    BudgetCheck,
    BudgetState,
    trim,
    trim_block,
    validate_time_budget,
)

__all__ = [
    "BudgetCheck",
    "BudgetState",
    "allocated_minutes",
    "recommended_time_splits",
    "trim",
    "trim_block",
    "validate_time_budget",
]
