"""Next-best-action ranking for focusdeck.

Orders active tasks by, in precedence:
1. Priority (P0 first, unknown last)
2. Due date (dated before undated; overdue before upcoming; then earliest)
3. RICE score (higher first, only when scores differ by more than 0.1)
4. Effort (smaller first, unknown treated as M)
5. Last touched (older first)

The RICE step uses an epsilon, so the comparison is not expressible as a plain
tuple key; a comparator with a stable sort is used instead.
"""

from datetime import datetime
from functools import cmp_to_key
from typing import Any, Iterable, List, Optional

from focusdeck.config import EngineConfig, resolve_config
from focusdeck.engine.rice import calculate_task_rice
from focusdeck.models.constants import (
    EFFORT_RANKS,
    PRIORITY_RANKS,
    RICE_TIE_EPSILON,
    UNKNOWN_EFFORT_RANK,
    UNKNOWN_PRIORITY_RANK,
)
from focusdeck.models.task import Task, TaskStatus
from focusdeck.models.values import enum_to_value


def is_done(task: Task) -> bool:
    return enum_to_value(task.status) == TaskStatus.DONE.value


def active_tasks(tasks: Iterable[Task]) -> List[Task]:
    """Drop DONE tasks, preserving input order."""
    return [task for task in tasks if not is_done(task)]


def priority_rank(priority: Any) -> int:
    return PRIORITY_RANKS.get(enum_to_value(priority), UNKNOWN_PRIORITY_RANK)


def effort_rank(effort: Any) -> int:
    return EFFORT_RANKS.get(enum_to_value(effort), UNKNOWN_EFFORT_RANK)


def is_overdue(due_date: Optional[datetime], now: datetime) -> bool:
    """True when `due_date` is strictly before `now`.

    Naive datetimes are local time; mixed naive/aware pairs are compared in
    the due date's frame.
    """
    if due_date is None:
        return False
    if (due_date.tzinfo is None) != (now.tzinfo is None):
        if due_date.tzinfo is not None:
            now = now.astimezone(due_date.tzinfo)
        else:
            now = now.astimezone().replace(tzinfo=None)
    return due_date < now


def with_rice_scores(tasks: Iterable[Task], config: Optional[EngineConfig] = None) -> List[Task]:
    """Return copies of `tasks` with `rice_score` filled in."""
    cfg = resolve_config(config)
    return [task.model_copy(update={"rice_score": calculate_task_rice(task, cfg)}) for task in tasks]


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def compare_tasks(a: Task, b: Task, now: datetime) -> int:
    """Comparator for next-best-action order. Expects rice_score populated."""
    a_priority = priority_rank(a.priority)
    b_priority = priority_rank(b.priority)
    if a_priority != b_priority:
        return a_priority - b_priority

    if a.due_date and b.due_date:
        a_overdue = is_overdue(a.due_date, now)
        b_overdue = is_overdue(b.due_date, now)
        if a_overdue and not b_overdue:
            return -1
        if b_overdue and not a_overdue:
            return 1
        return _sign(a.due_date.timestamp() - b.due_date.timestamp())
    if a.due_date and not b.due_date:
        return -1
    if b.due_date and not a.due_date:
        return 1

    a_score = a.rice_score or 0
    b_score = b.rice_score or 0
    if abs(a_score - b_score) > RICE_TIE_EPSILON:
        return _sign(b_score - a_score)

    a_effort = effort_rank(a.effort)
    b_effort = effort_rank(b.effort)
    if a_effort != b_effort:
        return a_effort - b_effort

    return _sign(a.last_touched_at.timestamp() - b.last_touched_at.timestamp())


def get_next_best_actions(
    tasks: Iterable[Task],
    *,
    now: Optional[datetime] = None,
    config: Optional[EngineConfig] = None,
) -> List[Task]:
    """Rank active tasks into next-best-action order.

    Only DONE tasks are filtered out; callers exclude must-dos themselves.
    Returned tasks are copies carrying their computed `rice_score`.

    Args:
        tasks: Candidate tasks
        now: Reference time for overdue checks (read once, defaults to local now)
        config: Engine configuration for RICE defaults

    Returns:
        Tasks sorted best-first
    """
    now = now or datetime.now()
    scored = with_rice_scores(active_tasks(tasks), config)
    return sorted(scored, key=cmp_to_key(lambda a, b: compare_tasks(a, b, now)))
