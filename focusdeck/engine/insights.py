"""RICE insight buckets for focusdeck."""

import logging
from datetime import datetime
from typing import Iterable, Optional

from focusdeck.config import EngineConfig
from focusdeck.engine.ranking import active_tasks, is_overdue, with_rice_scores
from focusdeck.models.constants import INSIGHT_BUCKET_SIZE, QUICK_WIN_EFFORTS
from focusdeck.models.rice import RICEInsights
from focusdeck.models.task import Task
from focusdeck.models.values import enum_to_value

logger = logging.getLogger(__name__)


def _score_key(task: Task) -> float:
    return -(task.rice_score or 0)


def get_rice_insights(
    tasks: Iterable[Task],
    *,
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> RICEInsights:
    """Bucket active tasks by RICE score, effort and due date.

    Buckets are computed independently; a task can appear in several.
    `low_rice` is the tail of the same score-descending list that feeds
    `high_rice` (not a separate ascending sort), so ties resolve identically.
    """
    now = now or datetime.now()
    scored = with_rice_scores(active_tasks(tasks), config)

    by_score = sorted(scored, key=_score_key)
    quick_wins = sorted(
        (task for task in scored if enum_to_value(task.effort) in QUICK_WIN_EFFORTS),
        key=_score_key,
    )

    insights = RICEInsights(
        high_rice=by_score[:INSIGHT_BUCKET_SIZE],
        low_rice=by_score[-INSIGHT_BUCKET_SIZE:],
        quick_wins=quick_wins[:INSIGHT_BUCKET_SIZE],
        overdue=[task for task in scored if is_overdue(task.due_date, now)],
    )
    logger.debug(
        f"RICE insights over {len(scored)} active tasks: "
        f"{len(insights.quick_wins)} quick wins, {len(insights.overdue)} overdue"
    )
    return insights
