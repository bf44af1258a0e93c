from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fittrack.core.session import UserSession, optional_user, require_user
from fittrack.core.time_utils import get_today
from fittrack.db import get_db
from fittrack.schemas.goal import GoalCreate, GoalProgress, GoalRead
from fittrack.services import goal_store
from fittrack.services.progress import load_goals_progress


router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("/", response_model=list[GoalRead])
def list_goals(
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    return goal_store.list_goals(db, session)


@router.get("/progress", response_model=list[GoalProgress])
def get_goals_progress(
    session: Optional[UserSession] = Depends(optional_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    """
    Progress of every goal active today.

    Without a signed-in user, or when the logs cannot be read, this returns
    an empty list rather than an error.
    """
    return load_goals_progress(db, session, today)


@router.post("/", response_model=GoalRead)
def create_goal(
    payload: GoalCreate,
    session: UserSession = Depends(require_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    try:
        return goal_store.create_goal(
            db,
            session,
            goal_type=payload.goal_type.value,
            category=payload.category.value,
            target_value=payload.target_value,
            today=today,
            start_date=payload.start_date,
            end_date=payload.end_date,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.delete("/{goal_id}")
def delete_goal(
    goal_id: int,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    if not goal_store.delete_goal(db, session, goal_id):
        raise HTTPException(status_code=404, detail="Goal not found")
    return {"message": "Goal deleted"}
