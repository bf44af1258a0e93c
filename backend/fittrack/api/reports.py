from datetime import date, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from fittrack.core.session import UserSession, require_user
from fittrack.core.time_utils import get_today
from fittrack.db import get_db
from fittrack.schemas.report import Report
from fittrack.services.reports import load_report

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/", response_model=Report)
def get_report(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    session: UserSession = Depends(require_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    """
    Daily series, summary stats and insights for [start_date, end_date].

    Defaults to the last 7 days ending today.
    """
    end = end_date or today
    start = start_date or end - timedelta(days=6)
    try:
        return load_report(db, session, start, end)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
