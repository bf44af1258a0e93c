from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from fittrack.schemas.goal import GoalCategory


class WeeklyAchievement(BaseModel):
    week_start: date
    week_end: date
    category: GoalCategory
    target_value: float
    achieved_value: float
    percentage: int
    met: bool


class Badge(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    category: Literal["streak", "milestone", "consistency"]
    earned: bool


class GoalStats(BaseModel):
    """Aggregate of every past weekly goal. The default is the zero state."""

    total_goals_set: int = 0
    goals_met_count: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    weekly_history: list[WeeklyAchievement] = Field(default_factory=list)
    badges: list[Badge] = Field(default_factory=list)
