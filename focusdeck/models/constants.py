"""Constants for focusdeck.

This module centralizes all magic numbers and default values used throughout the application.
"""

from focusdeck.models.task import Effort, Priority


# Task defaults
DEFAULT_PRIORITY = Priority.P2
DEFAULT_EFFORT = Effort.M

# RICE defaults (overridable through EngineConfig)
DEFAULT_REACH = 3
DEFAULT_IMPACT = 3
DEFAULT_CONFIDENCE = 4

# Effort multipliers: each larger tier halves the score per unit of impact
EFFORT_MULTIPLIERS = {
    Effort.XS.value: 1,
    Effort.S.value: 2,
    Effort.M.value: 4,
    Effort.L.value: 8,
    Effort.XL.value: 16,
}
UNKNOWN_EFFORT_MULTIPLIER = EFFORT_MULTIPLIERS[Effort.M.value]

# Sort ranks for next-best-actions
PRIORITY_RANKS = {
    Priority.P0.value: 0,
    Priority.P1.value: 1,
    Priority.P2.value: 2,
    Priority.P3.value: 3,
}
UNKNOWN_PRIORITY_RANK = 4

EFFORT_RANKS = {
    Effort.XS.value: 0,
    Effort.S.value: 1,
    Effort.M.value: 2,
    Effort.L.value: 3,
    Effort.XL.value: 4,
}
UNKNOWN_EFFORT_RANK = EFFORT_RANKS[Effort.M.value]

# RICE scores closer than this are treated as tied when ranking
RICE_TIE_EPSILON = 0.1

# Insights
INSIGHT_BUCKET_SIZE = 5
QUICK_WIN_EFFORTS = (Effort.XS.value, Effort.S.value)

# Quick-add
LABEL_KEYWORDS = ("sales", "ops", "labs", "finance", "content", "personal", "admin")
DUE_HOUR = 23
DUE_MINUTE = 59
FRIDAY = 5  # Sunday = 0 ... Saturday = 6
