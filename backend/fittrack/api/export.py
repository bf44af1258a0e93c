from datetime import date
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from fittrack.core.session import UserSession, require_user
from fittrack.core.time_utils import get_today
from fittrack.db import get_db
from fittrack.schemas.export import ExportEnvelope, ImportResult
from fittrack.services import exporter

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/json", response_model=ExportEnvelope)
def export_json(
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    return exporter.to_backup(exporter.collect(db, session))


@router.post("/json", response_model=ImportResult)
def import_json(
    payload: Any = Body(...),
    session: UserSession = Depends(require_user),
    db: Session = Depends(get_db),
):
    try:
        envelope = exporter.validate_backup(payload)
        return exporter.import_backup(db, session, envelope)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/csv/{data_type}", response_class=PlainTextResponse)
def export_csv(
    data_type: str,
    session: UserSession = Depends(require_user),
    today: date = Depends(get_today),
    db: Session = Depends(get_db),
):
    """CSV of one log (meals, workouts, weight, sleep) or `all` of them."""
    if data_type != "all" and data_type not in exporter.CSV_TYPES:
        raise HTTPException(status_code=404, detail=f"Unknown export type: {data_type}")

    data = exporter.collect(db, session)
    if data_type == "all":
        content = exporter.all_to_csv(data)
        filename = f"fittrack_all_data_{today.isoformat()}.csv"
    else:
        content = exporter.to_csv(data_type, getattr(data, data_type))
        filename = f"fittrack_{data_type}_{today.isoformat()}.csv"

    return PlainTextResponse(
        content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
