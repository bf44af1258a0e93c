from datetime import date, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from fittrack.core.constants import DAYS_PER_WEEK
from fittrack.core.session import UserSession, require_user
from fittrack.core.time_utils import get_today, week_bounds
from fittrack.db import get_db
from fittrack.models.gym_session import GymSession
from fittrack.schemas.logs import WorkoutCreate, WorkoutRead, WorkoutUpdate

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.post("/", response_model=WorkoutRead)
def create_workout(
    payload: WorkoutCreate,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    workout = GymSession(user_id=session.user_id, **payload.model_dump())
    db.add(workout)
    db.commit()
    db.refresh(workout)
    return workout


@router.get("/", response_model=list[WorkoutRead])
def list_workouts(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    query = db.query(GymSession).filter(GymSession.user_id == session.user_id)
    if start_date is not None:
        query = query.filter(GymSession.date >= start_date)
    if end_date is not None:
        query = query.filter(GymSession.date <= end_date)
    return query.order_by(GymSession.date.desc(), GymSession.id.desc()).all()


@router.get("/weekly_minutes")
def get_weekly_minutes(
    session: UserSession = Depends(require_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    """
    Workout minutes per day of the current week (Mon-Sun) and the week's
    session count. Days without a session appear with 0.
    """
    start, end = week_bounds(today)
    rows = (
        db.query(GymSession)
        .filter(GymSession.user_id == session.user_id)
        .filter(GymSession.date >= start)
        .filter(GymSession.date <= end)
        .all()
    )

    minutes_by_day: dict[date, int] = {}
    for row in rows:
        minutes_by_day[row.date] = minutes_by_day.get(row.date, 0) + row.duration

    days = []
    for i in range(DAYS_PER_WEEK):
        day = start + timedelta(days=i)
        days.append({"date": day, "duration": minutes_by_day.get(day, 0)})

    return {"week_start": start, "sessions": len(rows), "days": days}


@router.put("/{workout_id}", response_model=WorkoutRead)
def update_workout(
    workout_id: int,
    payload: WorkoutUpdate,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    workout = (
        db.query(GymSession)
        .filter(GymSession.id == workout_id, GymSession.user_id == session.user_id)
        .first()
    )
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")

    update_data = payload.model_dump(exclude_unset=True)
    if "date" in update_data and update_data["date"] is not None:
        try:
            update_data["date"] = date.fromisoformat(update_data["date"])
        except ValueError:
            raise HTTPException(status_code=422, detail="date must be YYYY-MM-DD")

    for key, value in update_data.items():
        if value is not None or key == "notes":
            setattr(workout, key, value)

    db.commit()
    db.refresh(workout)
    return workout


@router.delete("/{workout_id}")
def delete_workout(
    workout_id: int,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    workout = (
        db.query(GymSession)
        .filter(GymSession.id == workout_id, GymSession.user_id == session.user_id)
        .first()
    )
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")

    db.delete(workout)
    db.commit()
    return {"message": "Workout deleted"}
