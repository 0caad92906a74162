"""Task creation factory for focusdeck.

Centralizes task creation so defaults are applied the same way for explicit
API input and for quick-add drafts.
"""

import uuid
from datetime import datetime
from typing import Optional, List

from focusdeck.models.task import Task, TaskStatus, Priority, Effort
from focusdeck.models.parsed_task import ParsedTask
from focusdeck.models.constants import DEFAULT_PRIORITY, DEFAULT_EFFORT
from focusdeck.models.values import to_local_naive


def create_task_base(
    title: str,
    project_id: Optional[str] = None,
    project_name: Optional[str] = None,
    priority: Optional[Priority] = None,
    effort: Optional[Effort] = None,
    due_date: Optional[datetime] = None,
    labels: Optional[List[str]] = None,
    impact: Optional[float] = None,
    is_must_do: bool = False,
) -> Task:
    """Create a new INBOX task, applying default priority and effort.

    Args:
        title: Task title (required)
        project_id: Owning project ID
        project_name: Owning project name, carried for display
        priority: Task priority (defaults to P2)
        effort: Effort tier (defaults to M)
        due_date: Optional deadline; offset-aware values are converted to local time
        labels: Label keywords
        impact: RICE impact input (1-5)
        is_must_do: Must-do flag

    Returns:
        Task object with defaults applied
    """
    now = datetime.utcnow()
    return Task(
        id=str(uuid.uuid4()),
        title=title,
        project_id=project_id,
        project_name=project_name,
        priority=priority if priority is not None else DEFAULT_PRIORITY,
        effort=effort if effort is not None else DEFAULT_EFFORT,
        status=TaskStatus.INBOX,
        due_date=to_local_naive(due_date),
        is_must_do=is_must_do,
        labels=labels or [],
        impact=impact,
        created_at=now,
        last_touched_at=now,
    )


def create_task_from_parsed(parsed: ParsedTask, project_id: Optional[str] = None) -> Task:
    """Convert a quick-add draft into a Task.

    The caller resolves `parsed.project_name` to `project_id`.
    """
    return create_task_base(
        title=parsed.title,
        project_id=project_id,
        project_name=parsed.project_name if project_id else None,
        priority=parsed.priority,
        effort=parsed.effort,
        due_date=parsed.due_date,
        labels=parsed.labels,
    )
