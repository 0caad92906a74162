"""Repository layer for database operations."""

import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session

from focusdeck.models.task import Task, TaskStatus
from focusdeck.database.models import TaskDB
from focusdeck.models.values import enum_to_value, to_local_naive

logger = logging.getLogger(__name__)


class TaskRepository:
    """Repository for Task database operations."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, task: Task) -> Task:
        """Create a new task."""
        try:
            task_db = TaskDB.from_pydantic(task)
            self.db.add(task_db)
            self.db.commit()
            self.db.refresh(task_db)
            logger.debug(f"Created task {task.id}: {task.title[:50]}")
            return task_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create task {task.id}: {type(e).__name__}: {str(e)}")
            raise

    def get(self, task_id: str) -> Optional[Task]:
        """Get task by ID."""
        task_db = self.db.query(TaskDB).filter(TaskDB.id == task_id).first()
        return task_db.to_pydantic() if task_db else None

    def get_all(self) -> List[Task]:
        """Get all tasks ordered by priority, due date (undated last), then creation date."""
        tasks_db = self.db.query(TaskDB).order_by(
            TaskDB.priority.asc(),
            TaskDB.due_date.is_(None),
            TaskDB.due_date.asc(),
            TaskDB.created_at.asc(),
        ).all()
        return [task_db.to_pydantic() for task_db in tasks_db]

    def get_active(self) -> List[Task]:
        """Get all tasks that are not DONE."""
        tasks_db = self.db.query(TaskDB).filter(
            TaskDB.status != TaskStatus.DONE.value,
        ).all()
        return [task_db.to_pydantic() for task_db in tasks_db]

    def update(self, task: Task) -> Task:
        """Update an existing task."""
        task_db = self.db.query(TaskDB).filter(TaskDB.id == task.id).first()
        if not task_db:
            raise ValueError(f"Task {task.id} not found")

        # Handle enum values (Pydantic with use_enum_values=True returns strings)
        task_db.project_id = task.project_id
        task_db.title = task.title
        task_db.priority = enum_to_value(task.priority)
        task_db.effort = enum_to_value(task.effort)
        task_db.status = enum_to_value(task.status)
        task_db.due_date = to_local_naive(task.due_date)
        task_db.is_must_do = task.is_must_do
        task_db.labels = list(task.labels)
        task_db.impact = task.impact
        task_db.rice_score = task.rice_score
        task_db.last_touched_at = task.last_touched_at

        try:
            self.db.commit()
            self.db.refresh(task_db)
            logger.debug(f"Updated task {task.id}: {task.title[:50]}")
            return task_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to update task {task.id}: {type(e).__name__}: {str(e)}")
            raise

    def touch(self, task_id: str, **changes) -> Optional[Task]:
        """Apply field changes, bump last_touched_at and drop the cached RICE score.

        Returns None when the task does not exist.
        """
        task = self.get(task_id)
        if task is None:
            return None
        updated = task.model_copy(
            update={**changes, "last_touched_at": datetime.utcnow(), "rice_score": None}
        )
        return self.update(updated)

    def delete(self, task_id: str) -> bool:
        """Delete a task by ID."""
        task_db = self.db.query(TaskDB).filter(TaskDB.id == task_id).first()
        if not task_db:
            return False

        try:
            self.db.delete(task_db)
            self.db.commit()
            logger.debug(f"Deleted task {task_id}")
            return True
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to delete task {task_id}: {type(e).__name__}: {str(e)}")
            raise
