from datetime import date
from typing import Literal

from pydantic import BaseModel


class DailySummary(BaseModel):
    date: date
    calories_consumed: int
    calories_remaining: int
    calorie_goal: int
    # "yes" once a workout is logged for the day
    workout_status: Literal["yes", "no"]
