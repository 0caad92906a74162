"""Project data model for focusdeck."""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from focusdeck.models.task import Priority


class ProjectStatus(str, Enum):
    """Project status enumeration."""
    ACTIVE = "active"
    PAUSED = "paused"
    DONE = "done"


class Project(BaseModel):
    """Project groups tasks under a shared goal."""

    id: str = Field(..., description="Unique project identifier (UUID v4)")
    name: str = Field(..., min_length=1, description="Project name")
    goal: Optional[str] = Field(None, description="What done looks like")
    notes: Optional[str] = Field(None, description="Free-form notes")
    priority: Priority = Field(Priority.P2, description="Project priority")
    status: ProjectStatus = Field(ProjectStatus.ACTIVE, description="Project status")
    created_at: datetime = Field(..., description="Project creation timestamp")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
