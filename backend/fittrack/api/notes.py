from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from fittrack.core.session import UserSession, require_user
from fittrack.db import get_db
from fittrack.models.daily_note import DailyNote
from fittrack.schemas.logs import DailyNoteRead, DailyNoteUpsert

router = APIRouter(prefix="/notes", tags=["notes"])

SYMPTOM_TAGS = [
    "Nausea",
    "Upset Stomach",
    "Headache",
    "Fatigue",
    "Stressed",
    "Fever",
    "Cold/Flu",
    "Allergies",
    "Poor Sleep",
    "Overate",
    "Skipped Meal",
    "Alcohol",
    "Travel",
    "Period",
    "Medication",
]


@router.get("/tags", response_model=list[str])
def list_tags():
    return SYMPTOM_TAGS


@router.get("/", response_model=list[DailyNoteRead])
def list_notes(
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    query = db.query(DailyNote).filter(DailyNote.user_id == session.user_id)
    if start_date is not None:
        query = query.filter(DailyNote.date >= start_date)
    if end_date is not None:
        query = query.filter(DailyNote.date <= end_date)
    return query.order_by(DailyNote.date.desc()).all()


@router.put("/", response_model=DailyNoteRead)
def upsert_note(
    payload: DailyNoteUpsert,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    """Save the note for a day, replacing any note already saved for it."""
    row = (
        db.query(DailyNote)
        .filter(DailyNote.user_id == session.user_id, DailyNote.date == payload.date)
        .first()
    )
    if not row:
        row = DailyNote(user_id=session.user_id, date=payload.date)
        db.add(row)
    row.tags = list(payload.tags)
    row.severity = payload.severity
    row.notes = payload.notes or None
    db.commit()
    db.refresh(row)
    return row


@router.delete("/{note_id}")
def delete_note(
    note_id: int,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    row = (
        db.query(DailyNote)
        .filter(DailyNote.id == note_id, DailyNote.user_id == session.user_id)
        .first()
    )
    if not row:
        raise HTTPException(status_code=404, detail="Note not found")
    db.delete(row)
    db.commit()
    return {"message": "Note deleted"}
