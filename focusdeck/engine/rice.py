"""RICE scoring for focusdeck.

score = (reach * impact * confidence) / effort_multiplier

Multipliers double per effort tier (XS=1 ... XL=16). Inputs are trusted and
never clamped; an unknown effort falls back to the M multiplier.
"""

import logging
import math
from typing import Any, Optional

from focusdeck.config import EngineConfig, resolve_config
from focusdeck.models.constants import (
    EFFORT_MULTIPLIERS,
    UNKNOWN_EFFORT_MULTIPLIER,
)
from focusdeck.models.rice import RICEParams
from focusdeck.models.task import Task
from focusdeck.models.values import enum_to_value

logger = logging.getLogger(__name__)


def effort_multiplier(effort: Any) -> int:
    """Look up the effort multiplier, falling back to M for unknown efforts."""
    return EFFORT_MULTIPLIERS.get(enum_to_value(effort), UNKNOWN_EFFORT_MULTIPLIER)


def calculate_rice_score(params: RICEParams) -> float:
    """Compute a RICE score from explicit parameters.

    Non-finite results (NaN / inf from malformed numeric input) are returned
    unchanged and logged.
    """
    numerator = params.reach * params.impact * params.confidence
    score = numerator / effort_multiplier(params.effort)
    if not math.isfinite(score):
        logger.warning(f"Non-finite RICE score {score} for params {params}")
    return score


def calculate_task_rice(task: Task, config: Optional[EngineConfig] = None) -> float:
    """Return the task's RICE score.

    A cached `rice_score` is returned verbatim, even when other fields changed
    since it was computed. Otherwise the score is computed from the configured
    default reach and confidence, the task's impact (or the default) and its
    effort.
    """
    if task.rice_score is not None:
        return task.rice_score

    cfg = resolve_config(config)
    params = RICEParams(
        reach=cfg.default_reach,
        impact=task.impact or cfg.default_impact,
        confidence=cfg.default_confidence,
        effort=enum_to_value(task.effort),
    )
    return calculate_rice_score(params)


def format_rice_score(score: float) -> str:
    """Map a score to its display tier. Cut points are inclusive."""
    if score >= 10:
        return "🔥 Very High"
    if score >= 5:
        return "⚡ High"
    if score >= 2:
        return "📈 Medium"
    if score >= 1:
        return "📉 Low"
    return "🐌 Very Low"


def get_rice_advice(task: Task, config: Optional[EngineConfig] = None) -> str:
    """Suggest what to do with a task based on its RICE score."""
    score = calculate_task_rice(task, config)

    if score >= 10:
        return "🚀 High impact! Consider making this a Must-Do."
    if score >= 5:
        return "⚡ Good candidate for Focus Block."
    if score >= 2:
        return "📈 Worth doing when you have time."
    if score >= 1:
        return "📉 Low priority. Consider delegating or deferring."
    return "🐌 Very low value. Consider archiving."
