"""Prioritization engine for focusdeck."""

from focusdeck.engine.quick_add import parse_quick_add, format_parsed_task
from focusdeck.engine.rice import (
    calculate_rice_score,
    calculate_task_rice,
    format_rice_score,
    get_rice_advice,
)
from focusdeck.engine.ranking import get_next_best_actions
from focusdeck.engine.insights import get_rice_insights
from focusdeck.engine.today import build_today_view

__all__ = [
    "parse_quick_add",
    "format_parsed_task",
    "calculate_rice_score",
    "calculate_task_rice",
    "format_rice_score",
    "get_rice_advice",
    "get_next_best_actions",
    "get_rice_insights",
    "build_today_view",
]
