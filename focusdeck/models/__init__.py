"""Data models for focusdeck."""

from focusdeck.models.task import Task, TaskStatus, Priority, Effort
from focusdeck.models.project import Project, ProjectStatus
from focusdeck.models.parsed_task import ParsedTask
from focusdeck.models.rice import RICEParams, RICEInsights, TodayView

__all__ = [
    "Task",
    "TaskStatus",
    "Priority",
    "Effort",
    "Project",
    "ProjectStatus",
    "ParsedTask",
    "RICEParams",
    "RICEInsights",
    "TodayView",
]
