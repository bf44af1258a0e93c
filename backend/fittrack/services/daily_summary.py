"""Today's calorie budget and workout status, derived from the logs."""

from datetime import date

from sqlalchemy.orm import Session

from fittrack.core.session import UserSession
from fittrack.schemas.summary import DailySummary
from fittrack.services.activity import count_workouts, sum_calories
from fittrack.services.user_settings import get_or_create_settings


def daily_summary(db: Session, session: UserSession, day: date) -> DailySummary:
    calorie_goal = get_or_create_settings(db, session).daily_calorie_goal
    consumed = int(sum_calories(db, session, day, day))
    workouts = count_workouts(db, session, day, day)
    return DailySummary(
        date=day,
        calories_consumed=consumed,
        # Never negative; going over the goal shows as 0 left
        calories_remaining=max(0, calorie_goal - consumed),
        calorie_goal=calorie_goal,
        workout_status="yes" if workouts > 0 else "no",
    )
