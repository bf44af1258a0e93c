"""Range queries over the activity logs that goals are measured against.

Each function is a single independent read for one user and an inclusive
date range.
"""

from datetime import date

from sqlalchemy import func
from sqlalchemy.orm import Session

from fittrack.core.session import UserSession
from fittrack.models.body import SleepEntry
from fittrack.models.gym_session import GymSession
from fittrack.models.meal import Meal


def sum_calories(db: Session, session: UserSession, start: date, end: date) -> float:
    total = (
        db.query(func.sum(Meal.calories))
        .filter(Meal.user_id == session.user_id)
        .filter(Meal.date >= start)
        .filter(Meal.date <= end)
        .scalar()
    )
    return float(total or 0)


def count_workouts(db: Session, session: UserSession, start: date, end: date) -> float:
    count = (
        db.query(func.count(GymSession.id))
        .filter(GymSession.user_id == session.user_id)
        .filter(GymSession.date >= start)
        .filter(GymSession.date <= end)
        .scalar()
    )
    return float(count or 0)


def sum_sleep_hours(db: Session, session: UserSession, start: date, end: date) -> float:
    total = (
        db.query(func.sum(SleepEntry.hours))
        .filter(SleepEntry.user_id == session.user_id)
        .filter(SleepEntry.date >= start)
        .filter(SleepEntry.date <= end)
        .scalar()
    )
    return float(total or 0)


CATEGORY_QUERIES = {
    "calories": sum_calories,
    "workouts": count_workouts,
    "sleep": sum_sleep_hours,
}


def achieved_value(db: Session, session: UserSession, category: str, start: date, end: date) -> float:
    """Logged amount for a goal category over [start, end]."""
    try:
        query = CATEGORY_QUERIES[category]
    except KeyError:
        raise ValueError(f"Unknown goal category: {category}")
    return query(db, session, start, end)
