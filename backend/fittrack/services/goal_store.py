"""CRUD over a user's weekly and monthly goals.

Goals are immutable once created: there is no update, only delete and
recreate.
"""

import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from sqlalchemy.orm import Session

from fittrack.core.constants import GOAL_CATEGORIES, GOAL_TYPES
from fittrack.core.session import UserSession
from fittrack.core.time_utils import month_bounds, week_bounds
from fittrack.models.goal import Goal

logger = logging.getLogger(__name__)

# Goal.target_value is Numeric(10, 2)
TARGET_STEP = Decimal("0.01")


def default_window(goal_type: str, today: date) -> tuple[date, date]:
    """Current week (Mon-Sun) for weekly goals, current month for monthly."""
    if goal_type == "weekly":
        return week_bounds(today)
    return month_bounds(today)


def stored_target(value) -> Decimal:
    """Round a target to the two decimals the goals table keeps."""
    if value is None:
        raise ValueError("target_value is required")
    try:
        return Decimal(str(value)).quantize(TARGET_STEP, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError("target_value must be a number")


def list_goals(db: Session, session: UserSession) -> list[Goal]:
    return (
        db.query(Goal)
        .filter(Goal.user_id == session.user_id)
        .order_by(Goal.created_at.desc(), Goal.id.desc())
        .all()
    )


def list_active_goals(db: Session, session: UserSession, today: date) -> list[Goal]:
    """Goals whose [start_date, end_date] contains `today`, newest first."""
    return (
        db.query(Goal)
        .filter(Goal.user_id == session.user_id)
        .filter(Goal.start_date <= today)
        .filter(Goal.end_date >= today)
        .order_by(Goal.created_at.desc(), Goal.id.desc())
        .all()
    )


def list_weekly_goals(db: Session, session: UserSession) -> list[Goal]:
    """Every weekly goal, past and present.

    Ordered so that for any week the most recently created goal comes first.
    """
    return (
        db.query(Goal)
        .filter(Goal.user_id == session.user_id)
        .filter(Goal.goal_type == "weekly")
        .order_by(Goal.start_date.desc(), Goal.created_at.desc(), Goal.id.desc())
        .all()
    )


def get_goal(db: Session, session: UserSession, goal_id: int) -> Optional[Goal]:
    return (
        db.query(Goal)
        .filter(Goal.id == goal_id)
        .filter(Goal.user_id == session.user_id)
        .first()
    )


def create_goal(
    db: Session,
    session: UserSession,
    goal_type: str,
    category: str,
    target_value: float,
    today: date,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> Goal:
    """Validate and insert a goal. Raises ValueError on bad input."""
    if goal_type not in GOAL_TYPES:
        raise ValueError(f"goal_type must be one of {', '.join(GOAL_TYPES)}")
    if category not in GOAL_CATEGORIES:
        raise ValueError(f"category must be one of {', '.join(GOAL_CATEGORIES)}")
    target_value = stored_target(target_value)
    if target_value <= 0:
        raise ValueError("target_value must be at least 0.01")

    if start_date is None and end_date is None:
        start_date, end_date = default_window(goal_type, today)
    elif start_date is None or end_date is None:
        raise ValueError("start_date and end_date must be given together")
    if start_date > end_date:
        raise ValueError("start_date must be on or before end_date")

    goal = Goal(
        user_id=session.user_id,
        goal_type=goal_type,
        category=category,
        target_value=target_value,
        start_date=start_date,
        end_date=end_date,
    )
    db.add(goal)
    db.commit()
    db.refresh(goal)

    logger.info(
        "Goal created",
        extra={"user_id": session.user_id, "goal_id": goal.id, "category": category},
    )
    return goal


def delete_goal(db: Session, session: UserSession, goal_id: int) -> bool:
    """Delete a goal. Returns False if it does not exist for this user."""
    goal = get_goal(db, session, goal_id)
    if not goal:
        return False
    db.delete(goal)
    db.commit()
    logger.info("Goal deleted", extra={"user_id": session.user_id, "goal_id": goal_id})
    return True
