from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from fittrack.core.constants import SEVERITY_MAX, SEVERITY_MIN


class MealBase(BaseModel):
    date: date
    time: str  # 'HH:MM'
    food: str
    calories: int = Field(ge=0)


class MealCreate(MealBase):
    """Schema for logging a meal."""
    pass


class MealUpdate(BaseModel):
    """Schema for updating a meal (all fields optional)."""

    # Accept date as string for updates to avoid strict parsing issues
    date: Optional[str] = None
    time: Optional[str] = None
    food: Optional[str] = None
    calories: Optional[int] = Field(default=None, ge=0)

    model_config = ConfigDict(extra="ignore")


class MealRead(MealBase):
    id: int


class WorkoutBase(BaseModel):
    date: date
    exercise: str
    duration: int = Field(gt=0)  # minutes
    notes: Optional[str] = None


class WorkoutCreate(WorkoutBase):
    pass


class WorkoutUpdate(BaseModel):
    # Accept date as string for updates to avoid strict parsing issues
    date: Optional[str] = None
    exercise: Optional[str] = None
    duration: Optional[int] = Field(default=None, gt=0)
    notes: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class WorkoutRead(WorkoutBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class SleepBase(BaseModel):
    date: date
    hours: float = Field(ge=0, le=24)
    notes: Optional[str] = None


class SleepCreate(SleepBase):
    pass


class SleepRead(SleepBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class WeightBase(BaseModel):
    date: date
    weight: float = Field(gt=0)
    notes: Optional[str] = None


class WeightCreate(WeightBase):
    pass


class WeightRead(WeightBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class WaistBase(BaseModel):
    date: date
    waist: float = Field(gt=0)
    notes: Optional[str] = None


class WaistCreate(WaistBase):
    pass


class WaistRead(WaistBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class DailyNoteUpsert(BaseModel):
    date: date
    tags: list[str] = Field(default_factory=list)
    severity: Optional[int] = Field(default=None, ge=SEVERITY_MIN, le=SEVERITY_MAX)
    notes: Optional[str] = None


class DailyNoteRead(DailyNoteUpsert):
    id: int

    model_config = ConfigDict(from_attributes=True)


class WorkoutTemplateBase(BaseModel):
    name: str = Field(min_length=1)
    exercises: list[str] = Field(default_factory=list)


class WorkoutTemplateCreate(WorkoutTemplateBase):
    pass


class WorkoutTemplateUpdate(BaseModel):
    """Schema for updating a template (all fields optional)."""

    name: Optional[str] = Field(default=None, min_length=1)
    exercises: Optional[list[str]] = None

    model_config = ConfigDict(extra="ignore")


class WorkoutTemplateRead(WorkoutTemplateBase):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
