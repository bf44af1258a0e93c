from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ExportData(BaseModel):
    meals: list[dict[str, Any]]
    workouts: list[dict[str, Any]]
    weight: list[dict[str, Any]]
    sleep: list[dict[str, Any]]
    # Older backups predate waist tracking
    waist: list[dict[str, Any]] = Field(default_factory=list)


class ExportEnvelope(BaseModel):
    version: str
    export_date: datetime
    data: ExportData


class ImportResult(BaseModel):
    meals: int = 0
    workouts: int = 0
    weight: int = 0
    waist: int = 0
    sleep: int = 0
