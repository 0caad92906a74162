"""RICE scoring inputs and insight buckets."""

from typing import List, Union
from pydantic import BaseModel, Field

from focusdeck.models.task import Effort, Task


class RICEParams(BaseModel):
    """Reach / Impact / Confidence (1-5 scale, not validated) plus effort tier.

    Effort is accepted as a raw string too so that out-of-enum values fall back
    to the default multiplier instead of failing validation.
    """

    reach: float
    impact: float
    confidence: float
    effort: Union[Effort, str]

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


class RICEInsights(BaseModel):
    """Categorized views over the active task set."""

    high_rice: List[Task] = Field(default_factory=list, description="Top 5 by RICE score")
    low_rice: List[Task] = Field(default_factory=list, description="Bottom 5 by RICE score")
    quick_wins: List[Task] = Field(default_factory=list, description="Top 5 XS/S tasks by RICE score")
    overdue: List[Task] = Field(default_factory=list, description="All tasks past their due date")


class TodayView(BaseModel):
    """Must-dos plus the ranked remainder of the active task set."""

    must_dos: List[Task] = Field(default_factory=list)
    next_best_actions: List[Task] = Field(default_factory=list)
    must_do_completed: int = 0
    must_do_total: int = 0
