"""CSV and JSON export of a user's logs, and JSON backup import."""

import csv
import io
import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError
from sqlalchemy.orm import Session

from fittrack.core.constants import EXPORT_VERSION
from fittrack.core.session import UserSession
from fittrack.core.time_utils import hhmm_to_time, time_to_hhmm
from fittrack.models.body import SleepEntry, WaistEntry, WeightEntry
from fittrack.models.gym_session import GymSession
from fittrack.models.meal import Meal
from fittrack.schemas.export import ExportData, ExportEnvelope, ImportResult
from fittrack.schemas.logs import (
    MealCreate,
    SleepCreate,
    WaistCreate,
    WeightCreate,
    WorkoutCreate,
)

logger = logging.getLogger(__name__)

CSV_TYPES = ("meals", "workouts", "weight", "sleep")


def _rows(db: Session, model, session: UserSession):
    return (
        db.query(model)
        .filter(model.user_id == session.user_id)
        .order_by(model.date.desc(), model.id.desc())
        .all()
    )


def meal_dict(m: Meal) -> dict[str, Any]:
    return {"date": m.date.isoformat(), "time": time_to_hhmm(m.time), "food": m.food, "calories": m.calories}


def workout_dict(s: GymSession) -> dict[str, Any]:
    return {"date": s.date.isoformat(), "exercise": s.exercise, "duration": s.duration, "notes": s.notes}


def weight_dict(e: WeightEntry) -> dict[str, Any]:
    return {"date": e.date.isoformat(), "weight": float(e.weight), "notes": e.notes}


def waist_dict(e: WaistEntry) -> dict[str, Any]:
    return {"date": e.date.isoformat(), "waist": float(e.waist), "notes": e.notes}


def sleep_dict(e: SleepEntry) -> dict[str, Any]:
    return {"date": e.date.isoformat(), "hours": float(e.hours), "notes": e.notes}


def collect(db: Session, session: UserSession) -> ExportData:
    """Every log entry of the user, without ids."""
    return ExportData(
        meals=[meal_dict(m) for m in _rows(db, Meal, session)],
        workouts=[workout_dict(s) for s in _rows(db, GymSession, session)],
        weight=[weight_dict(e) for e in _rows(db, WeightEntry, session)],
        waist=[waist_dict(e) for e in _rows(db, WaistEntry, session)],
        sleep=[sleep_dict(e) for e in _rows(db, SleepEntry, session)],
    )


# --------- CSV --------- #

CSV_LAYOUT = {
    "meals": (["Date", "Time", "Food", "Calories"], ["date", "time", "food", "calories"]),
    "workouts": (["Date", "Exercise", "Duration (mins)", "Notes"], ["date", "exercise", "duration", "notes"]),
    "weight": (["Date", "Weight", "Notes"], ["date", "weight", "notes"]),
    "sleep": (["Date", "Hours", "Notes"], ["date", "hours", "notes"]),
}


def to_csv(data_type: str, entries: list[dict[str, Any]]) -> str:
    if data_type not in CSV_LAYOUT:
        raise ValueError(f"Unsupported export type: {data_type}")
    headers, keys = CSV_LAYOUT[data_type]

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(headers)
    for entry in entries:
        writer.writerow(["" if entry.get(k) is None else entry.get(k) for k in keys])
    return buf.getvalue().rstrip("\n")


def all_to_csv(data: ExportData) -> str:
    """All CSV tables in one document, one titled section per type."""
    sections = []
    for data_type in CSV_TYPES:
        entries = getattr(data, data_type)
        sections.append(f"=== {data_type.upper()} ===\n{to_csv(data_type, entries)}")
    return "\n\n".join(sections)


# --------- JSON backup --------- #

def to_backup(data: ExportData) -> ExportEnvelope:
    return ExportEnvelope(
        version=EXPORT_VERSION,
        export_date=datetime.now(timezone.utc),
        data=data,
    )


def validate_backup(payload: Any) -> ExportEnvelope:
    """Parse an uploaded backup document. Raises ValueError if malformed."""
    if not isinstance(payload, dict):
        raise ValueError("Backup must be a JSON object")
    try:
        return ExportEnvelope.model_validate(payload)
    except ValidationError as e:
        raise ValueError(f"Invalid backup file: {e.error_count()} problem(s)") from e


def import_backup(db: Session, session: UserSession, envelope: ExportEnvelope) -> ImportResult:
    """Append every entry of a backup to the user's logs.

    All entries are validated before anything is written, so a bad entry
    leaves the database untouched.
    """
    data = envelope.data
    try:
        meals = [MealCreate.model_validate(m) for m in data.meals]
        workouts = [WorkoutCreate.model_validate(w) for w in data.workouts]
        weights = [WeightCreate.model_validate(w) for w in data.weight]
        waists = [WaistCreate.model_validate(w) for w in data.waist]
        sleeps = [SleepCreate.model_validate(s) for s in data.sleep]
        meal_times = [hhmm_to_time(m.time) for m in meals]
    except ValidationError as e:
        raise ValueError(f"Invalid backup entry: {e.error_count()} problem(s)") from e
    if any(t is None for t in meal_times):
        raise ValueError("Every meal needs a time")

    uid = session.user_id
    rows = []
    rows += [
        Meal(user_id=uid, date=m.date, time=t, food=m.food, calories=m.calories)
        for m, t in zip(meals, meal_times)
    ]
    rows += [
        GymSession(user_id=uid, date=w.date, exercise=w.exercise, duration=w.duration, notes=w.notes)
        for w in workouts
    ]
    rows += [WeightEntry(user_id=uid, date=w.date, weight=w.weight, notes=w.notes) for w in weights]
    rows += [WaistEntry(user_id=uid, date=w.date, waist=w.waist, notes=w.notes) for w in waists]
    rows += [SleepEntry(user_id=uid, date=s.date, hours=s.hours, notes=s.notes) for s in sleeps]

    if rows:
        db.add_all(rows)
        db.commit()

    result = ImportResult(
        meals=len(meals),
        workouts=len(workouts),
        weight=len(weights),
        waist=len(waists),
        sleep=len(sleeps),
    )
    logger.info("Backup imported", extra={"user_id": uid, **result.model_dump()})
    return result
