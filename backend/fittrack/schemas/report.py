from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field


class DailyPoint(BaseModel):
    date: date
    calories: int = 0
    workout_minutes: int = 0
    sleep_hours: float = 0.0
    weight: Optional[float] = None


class ReportStats(BaseModel):
    avg_calories: int = 0
    total_workouts: int = 0
    avg_workout_duration: int = 0
    avg_sleep_hours: float = 0.0
    avg_weight: float = 0.0
    weight_change: float = 0.0
    goals_met_days: int = 0
    total_days: int = 0
    calorie_goal: int


class CorrelationInsight(BaseModel):
    title: str
    description: str
    correlation: Literal["positive", "negative", "neutral"]
    value: Optional[str] = None


class MealPeriod(BaseModel):
    name: str
    calories: int
    count: int


class Report(BaseModel):
    start_date: date
    end_date: date
    stats: ReportStats
    daily: list[DailyPoint] = Field(default_factory=list)
    insights: list[CorrelationInsight] = Field(default_factory=list)
    meal_periods: list[MealPeriod] = Field(default_factory=list)
