from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GoalType(str, Enum):
    weekly = "weekly"
    monthly = "monthly"


class GoalCategory(str, Enum):
    calories = "calories"
    workouts = "workouts"
    sleep = "sleep"


class GoalCreate(BaseModel):
    """Schema for creating a goal.

    Leave both dates empty to use the current week (weekly) or the
    current calendar month (monthly).
    """

    goal_type: GoalType
    category: GoalCategory
    target_value: float = Field(gt=0, allow_inf_nan=False)
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class GoalRead(BaseModel):
    id: int
    user_id: str
    goal_type: GoalType
    category: GoalCategory
    target_value: float
    start_date: date
    end_date: date
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class GoalProgress(BaseModel):
    goal: GoalRead
    current_value: float
    percentage: int = Field(ge=0, le=100)
    days_passed: int
    period_start: date
    period_end: date
