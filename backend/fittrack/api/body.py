"""Routers for the single-value daily logs: sleep, weight and waist.

The three logs share one shape (date, value, notes), so their routers are
built by one factory.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from fittrack.core.session import UserSession, require_user
from fittrack.db import get_db
from fittrack.models.body import SleepEntry, WaistEntry, WeightEntry
from fittrack.schemas.logs import (
    SleepCreate,
    SleepRead,
    WaistCreate,
    WaistRead,
    WeightCreate,
    WeightRead,
)


def make_entry_router(
    prefix: str,
    model,
    create_schema: type[BaseModel],
    read_schema: type[BaseModel],
    label: str,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])

    def _get_owned(db: Session, session: UserSession, entry_id: int):
        entry = (
            db.query(model)
            .filter(model.id == entry_id, model.user_id == session.user_id)
            .first()
        )
        if not entry:
            raise HTTPException(status_code=404, detail=f"{label} entry not found")
        return entry

    @router.post("/", response_model=read_schema)
    def create_entry(
        payload: create_schema,
        session: UserSession = Depends(require_user),
        db: Session = Depends(get_db),
    ):
        entry = model(user_id=session.user_id, **payload.model_dump())
        db.add(entry)
        db.commit()
        db.refresh(entry)
        return entry

    @router.get("/", response_model=list[read_schema])
    def list_entries(
        start_date: Optional[date] = Query(None),
        end_date: Optional[date] = Query(None),
        session: UserSession = Depends(require_user),
        db: Session = Depends(get_db),
    ):
        query = db.query(model).filter(model.user_id == session.user_id)
        if start_date is not None:
            query = query.filter(model.date >= start_date)
        if end_date is not None:
            query = query.filter(model.date <= end_date)
        # Most recent first
        return query.order_by(model.date.desc(), model.id.desc()).all()

    @router.put("/{entry_id}", response_model=read_schema)
    def update_entry(
        entry_id: int,
        payload: create_schema,
        session: UserSession = Depends(require_user),
        db: Session = Depends(get_db),
    ):
        entry = _get_owned(db, session, entry_id)
        for key, value in payload.model_dump().items():
            setattr(entry, key, value)
        db.commit()
        db.refresh(entry)
        return entry

    @router.delete("/{entry_id}")
    def delete_entry(
        entry_id: int,
        session: UserSession = Depends(require_user),
        db: Session = Depends(get_db),
    ):
        entry = _get_owned(db, session, entry_id)
        db.delete(entry)
        db.commit()
        return {"message": f"{label} entry deleted"}

    return router


sleep_router = make_entry_router("/sleep", SleepEntry, SleepCreate, SleepRead, "Sleep")
weight_router = make_entry_router("/weight", WeightEntry, WeightCreate, WeightRead, "Weight")
waist_router = make_entry_router("/waist", WaistEntry, WaistCreate, WaistRead, "Waist")
