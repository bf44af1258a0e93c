from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fittrack.core.session import UserSession, optional_user
from fittrack.core.time_utils import get_today
from fittrack.db import get_db
from fittrack.schemas.summary import DailySummary
from fittrack.services.daily_summary import daily_summary

router = APIRouter(prefix="/summary", tags=["summary"])


@router.get("/today", response_model=Optional[DailySummary])
def get_today_summary(
    session: Optional[UserSession] = Depends(optional_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    """Calories consumed and left against the daily goal, and whether a
    workout has been logged today. Null without a signed-in user."""
    if session is None:
        return None
    return daily_summary(db, session, today)
