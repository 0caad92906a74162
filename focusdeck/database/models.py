"""SQLAlchemy database models for focusdeck."""

from datetime import datetime
from typing import TypeVar, Type
import uuid
from sqlalchemy import Column, String, Float, Boolean, DateTime, JSON, ForeignKey
from sqlalchemy.orm import relationship

from focusdeck.database.database import Base
from focusdeck.models.task import Priority, Effort, TaskStatus
from focusdeck.models.project import ProjectStatus
from focusdeck.models.values import enum_to_value, to_local_naive

T = TypeVar('T')


def value_to_enum(value: str, enum_class: Type[T], default: T) -> T:
    """Convert string to enum with fallback to default.

    Args:
        value: String value to convert
        enum_class: Enum class to convert to
        default: Default enum value if conversion fails

    Returns:
        Enum instance, or default if conversion fails
    """
    if not value:
        return default
    try:
        return enum_class(value)
    except (ValueError, AttributeError):
        return default


class ProjectDB(Base):
    """Database model for Project."""

    __tablename__ = "projects"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False, index=True)
    goal = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    priority = Column(String, nullable=False, default=Priority.P2.value)
    status = Column(String, nullable=False, default=ProjectStatus.ACTIVE.value)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    tasks = relationship("TaskDB", back_populates="project")

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from focusdeck.models.project import Project

        return Project(
            id=self.id,
            name=self.name,
            goal=self.goal,
            notes=self.notes,
            priority=value_to_enum(self.priority, Priority, Priority.P2),
            status=value_to_enum(self.status, ProjectStatus, ProjectStatus.ACTIVE),
            created_at=self.created_at,
        )

    @classmethod
    def from_pydantic(cls, project):
        """Create database model from Pydantic model."""
        return cls(
            id=project.id,
            name=project.name,
            goal=project.goal,
            notes=project.notes,
            priority=enum_to_value(project.priority),
            status=enum_to_value(project.status),
            created_at=project.created_at,
        )


class TaskDB(Base):
    """Database model for Task."""

    __tablename__ = "tasks"

    # Primary key
    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))

    # Project association
    project_id = Column(String, ForeignKey("projects.id", ondelete="SET NULL"), nullable=True, index=True)
    project = relationship("ProjectDB", back_populates="tasks")

    # Basic fields
    title = Column(String, nullable=False)
    priority = Column(String, nullable=False, default=Priority.P2.value, index=True)
    effort = Column(String, nullable=False, default=Effort.M.value)
    status = Column(String, nullable=False, default=TaskStatus.INBOX.value, index=True)
    due_date = Column(DateTime, nullable=True, index=True)
    is_must_do = Column(Boolean, nullable=False, default=False)

    # Labels (stored as JSON array)
    labels = Column(JSON, nullable=False, default=list)

    # RICE inputs / cache
    impact = Column(Float, nullable=True)
    rice_score = Column(Float, nullable=True)

    # Timestamps
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    last_touched_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def to_pydantic(self):
        """Convert database model to Pydantic model."""
        from focusdeck.models.task import Task

        return Task(
            id=self.id,
            title=self.title,
            project_id=self.project_id,
            project_name=self.project.name if self.project else None,
            priority=value_to_enum(self.priority, Priority, Priority.P2),
            effort=value_to_enum(self.effort, Effort, Effort.M),
            status=value_to_enum(self.status, TaskStatus, TaskStatus.INBOX),
            due_date=self.due_date,
            is_must_do=self.is_must_do,
            labels=self.labels or [],
            impact=self.impact,
            rice_score=self.rice_score,
            created_at=self.created_at,
            last_touched_at=self.last_touched_at,
        )

    @classmethod
    def from_pydantic(cls, task):
        """Create database model from Pydantic model."""
        # Handle enum values (Pydantic with use_enum_values=True returns strings)
        return cls(
            id=task.id,
            project_id=task.project_id,
            title=task.title,
            priority=enum_to_value(task.priority),
            effort=enum_to_value(task.effort),
            status=enum_to_value(task.status),
            due_date=to_local_naive(task.due_date),
            is_must_do=task.is_must_do,
            labels=list(task.labels),
            impact=task.impact,
            rice_score=task.rice_score,
            created_at=task.created_at,
            last_touched_at=task.last_touched_at,
        )
