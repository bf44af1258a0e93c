from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fittrack.core.session import UserSession, require_user
from fittrack.db import get_db
from fittrack.schemas.user_settings import (
    CalorieGoalUpdate,
    UserSettingsRead,
    WeightIntervalUpdate,
)
from fittrack.services.user_settings import get_or_create_settings, update_settings

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/", response_model=UserSettingsRead)
def read_settings(
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    return get_or_create_settings(db, session)


@router.put("/calorie_goal", response_model=UserSettingsRead)
def set_calorie_goal(
    payload: CalorieGoalUpdate,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    try:
        return update_settings(db, session, daily_calorie_goal=payload.daily_calorie_goal)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.put("/weight_interval", response_model=UserSettingsRead)
def set_weight_interval(
    payload: WeightIntervalUpdate,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    try:
        return update_settings(
            db, session, weight_measurement_interval=payload.weight_measurement_interval
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
