from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fittrack.core.session import UserSession, require_user
from fittrack.db import get_db
from fittrack.models.workout_template import WorkoutTemplate
from fittrack.schemas.logs import (
    WorkoutTemplateCreate,
    WorkoutTemplateRead,
    WorkoutTemplateUpdate,
)

router = APIRouter(prefix="/templates", tags=["templates"])


def _clean_exercises(exercises: list[str]) -> list[str]:
    # Drop blank rows left over from the form
    return [e.strip() for e in exercises if e and e.strip()]


def _get_owned(db: Session, session: UserSession, template_id: int) -> WorkoutTemplate:
    template = (
        db.query(WorkoutTemplate)
        .filter(WorkoutTemplate.id == template_id, WorkoutTemplate.user_id == session.user_id)
        .first()
    )
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")
    return template


@router.post("/", response_model=WorkoutTemplateRead)
def create_template(
    payload: WorkoutTemplateCreate,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    name = payload.name.strip()
    if not name:
        raise HTTPException(status_code=422, detail="name is required")

    template = WorkoutTemplate(
        user_id=session.user_id,
        name=name,
        exercises=_clean_exercises(payload.exercises),
    )
    db.add(template)
    db.commit()
    db.refresh(template)
    return template


@router.get("/", response_model=list[WorkoutTemplateRead])
def list_templates(
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    # Newest first
    return (
        db.query(WorkoutTemplate)
        .filter(WorkoutTemplate.user_id == session.user_id)
        .order_by(WorkoutTemplate.created_at.desc(), WorkoutTemplate.id.desc())
        .all()
    )


@router.put("/{template_id}", response_model=WorkoutTemplateRead)
def update_template(
    template_id: int,
    payload: WorkoutTemplateUpdate,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    template = _get_owned(db, session, template_id)

    if payload.name is not None:
        name = payload.name.strip()
        if not name:
            raise HTTPException(status_code=422, detail="name is required")
        template.name = name
    if payload.exercises is not None:
        template.exercises = _clean_exercises(payload.exercises)

    db.commit()
    db.refresh(template)
    return template


@router.delete("/{template_id}")
def delete_template(
    template_id: int,
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    template = _get_owned(db, session, template_id)
    db.delete(template)
    db.commit()
    return {"message": "Template deleted"}
