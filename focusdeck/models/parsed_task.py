"""Quick-add parse result."""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class ParsedTask:
    """Structured draft extracted from one line of quick-add text.

    `labels` is None (never an empty list) when no label keyword matched.
    """

    title: str
    project_name: Optional[str] = None
    priority: Optional[str] = None
    effort: Optional[str] = None
    due_date: Optional[datetime] = None
    labels: Optional[List[str]] = None
