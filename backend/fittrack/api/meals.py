from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from fittrack.core.session import UserSession, require_user
from fittrack.core.time_utils import hhmm_to_time, time_to_hhmm
from fittrack.db import get_db
from fittrack.models.meal import Meal
from fittrack.schemas.logs import MealCreate, MealRead, MealUpdate

router = APIRouter(prefix="/meals", tags=["meals"])


def _to_read(meal: Meal) -> MealRead:
    return MealRead(
        id=meal.id,
        date=meal.date,
        time=time_to_hhmm(meal.time),
        food=meal.food,
        calories=meal.calories,
    )


def _parse_time(value: str):
    try:
        parsed = hhmm_to_time(value)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if parsed is None:
        raise HTTPException(status_code=422, detail="time is required")
    return parsed


@router.post("/", response_model=MealRead)
def create_meal(
    payload: MealCreate,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    meal = Meal(
        user_id=session.user_id,
        date=payload.date,
        time=_parse_time(payload.time),
        food=payload.food,
        calories=payload.calories,
    )
    db.add(meal)
    db.commit()
    db.refresh(meal)
    return _to_read(meal)


@router.get("/", response_model=list[MealRead])
def list_meals(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    List meals, optionally filtered by [start_date, end_date].

      GET /meals?start_date=2025-01-06&end_date=2025-01-12
    """
    query = db.query(Meal).filter(Meal.user_id == session.user_id)
    if start_date is not None:
        query = query.filter(Meal.date >= start_date)
    if end_date is not None:
        query = query.filter(Meal.date <= end_date)

    # Most recent first
    meals = query.order_by(Meal.date.desc(), Meal.time.desc()).all()
    return [_to_read(m) for m in meals]


@router.put("/{meal_id}", response_model=MealRead)
def update_meal(
    meal_id: int,
    payload: MealUpdate,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    meal = db.query(Meal).filter(Meal.id == meal_id, Meal.user_id == session.user_id).first()
    if not meal:
        raise HTTPException(status_code=404, detail="Meal not found")

    update_data = payload.model_dump(exclude_unset=True)

    if "time" in update_data:
        meal.time = _parse_time(update_data.pop("time"))
    if "date" in update_data and update_data["date"] is not None:
        try:
            update_data["date"] = date.fromisoformat(update_data["date"])
        except ValueError:
            raise HTTPException(status_code=422, detail="date must be YYYY-MM-DD")

    for key, value in update_data.items():
        if value is not None:
            setattr(meal, key, value)

    db.commit()
    db.refresh(meal)
    return _to_read(meal)


@router.delete("/{meal_id}")
def delete_meal(
    meal_id: int,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    meal = db.query(Meal).filter(Meal.id == meal_id, Meal.user_id == session.user_id).first()
    if not meal:
        raise HTTPException(status_code=404, detail="Meal not found")

    db.delete(meal)
    db.commit()
    return {"message": "Meal deleted"}
