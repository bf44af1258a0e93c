"""Progress of the user's currently active goals."""

import logging
from datetime import date
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fittrack.core.session import UserSession
from fittrack.core.time_utils import percentage_of
from fittrack.models.goal import Goal
from fittrack.schemas.goal import GoalProgress, GoalRead
from fittrack.services.activity import achieved_value
from fittrack.services.goal_store import list_active_goals

logger = logging.getLogger(__name__)


def days_passed(start: date, end: date, today: date) -> int:
    """Elapsed days of [start, end] including today, clamped to [1, window length]."""
    total_days = (end - start).days + 1
    elapsed = (today - start).days + 1
    return min(total_days, max(1, elapsed))


def goal_progress(db: Session, session: UserSession, goal: Goal, today: date) -> GoalProgress:
    target = float(goal.target_value)
    current = achieved_value(db, session, goal.category, goal.start_date, goal.end_date)
    return GoalProgress(
        goal=GoalRead.model_validate(goal),
        current_value=current,
        percentage=percentage_of(current, target),
        days_passed=days_passed(goal.start_date, goal.end_date, today),
        period_start=goal.start_date,
        period_end=goal.end_date,
    )


def load_goals_progress(
    db: Session, session: Optional[UserSession], today: date
) -> list[GoalProgress]:
    """Progress for every active goal.

    Returns an empty list when there is no user or any query fails.
    """
    if session is None:
        logger.info("No active user; skipping goal progress")
        return []

    try:
        goals = list_active_goals(db, session, today)
        return [goal_progress(db, session, goal, today) for goal in goals]
    except SQLAlchemyError:
        logger.exception("Error fetching goals progress", extra={"user_id": session.user_id})
        return []
