"""Task data model for focusdeck."""

from datetime import datetime
from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, Field


class Priority(str, Enum):
    """Task priority (P0 = most urgent)."""
    P0 = "P0"
    P1 = "P1"
    P2 = "P2"
    P3 = "P3"


class Effort(str, Enum):
    """Coarse time-cost estimate, ordered XS < S < M < L < XL."""
    XS = "XS"  # 15m
    S = "S"    # 30m
    M = "M"    # 1h
    L = "L"    # 2h
    XL = "XL"  # 4h+


class TaskStatus(str, Enum):
    """Task status enumeration."""
    INBOX = "INBOX"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Task(BaseModel):
    """Canonical Task model."""

    id: str = Field(..., description="Unique task identifier (UUID v4)")
    title: str = Field(..., min_length=1, description="Task title")
    project_id: Optional[str] = Field(None, description="Owning project ID")
    project_name: Optional[str] = Field(None, description="Owning project name (read-only, for display)")
    priority: Priority = Field(Priority.P2, description="Task priority")
    effort: Effort = Field(Effort.M, description="Effort tier")
    status: TaskStatus = Field(TaskStatus.INBOX, description="Task status")
    due_date: Optional[datetime] = Field(None, description="Deadline (absent = no deadline)")
    is_must_do: bool = Field(False, description="Flagged as must-complete-today")
    labels: List[str] = Field(default_factory=list, description="Label keywords")
    impact: Optional[float] = Field(None, description="RICE impact input (1-5 scale)")
    rice_score: Optional[float] = Field(None, description="Cached RICE score")
    created_at: datetime = Field(..., description="Task creation timestamp")
    last_touched_at: datetime = Field(..., description="Last time the task was modified")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
