from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fittrack.core.session import UserSession, optional_user
from fittrack.core.time_utils import get_today
from fittrack.db import get_db
from fittrack.schemas.achievement import Badge, GoalStats
from fittrack.services.achievements import load_goal_stats
from fittrack.services.badges import evaluate_badges
from fittrack.services.refresh import RefreshGuard


router = APIRouter(prefix="/achievements", tags=["achievements"])

# Overlapping refreshes for the same user: the newest one wins
stats_guard: RefreshGuard[GoalStats] = RefreshGuard()


@router.get("/", response_model=GoalStats)
def get_achievements(
    session: Optional[UserSession] = Depends(optional_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    """
    Weekly goal history (last 12 weeks scored), streaks and badges.

    Without a signed-in user, or when the logs cannot be read, the zero
    state is returned.
    """
    if session is None:
        return GoalStats()
    return stats_guard.run(session.user_id, lambda: load_goal_stats(db, session, today))


@router.get("/badges/catalog", response_model=list[Badge])
def badge_catalog():
    """All badges, none earned."""
    return evaluate_badges(0, 0, 0)
