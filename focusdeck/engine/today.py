"""Today view: must-dos first, then ranked next best actions."""

from datetime import datetime
from typing import Iterable, Optional

from focusdeck.config import EngineConfig
from focusdeck.engine.ranking import get_next_best_actions, is_done
from focusdeck.models.rice import TodayView
from focusdeck.models.task import Task


def build_today_view(
    tasks: Iterable[Task],
    *,
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> TodayView:
    """Split tasks into open must-dos and ranked next best actions.

    Must-do tasks never appear in next best actions.
    """
    tasks = list(tasks)
    must_dos = [task for task in tasks if task.is_must_do]
    others = [task for task in tasks if not task.is_must_do]

    return TodayView(
        must_dos=[task for task in must_dos if not is_done(task)],
        next_best_actions=get_next_best_actions(others, now=now, config=config),
        must_do_completed=sum(1 for task in must_dos if is_done(task)),
        must_do_total=len(must_dos),
    )
