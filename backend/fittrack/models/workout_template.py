from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.sql import func
from fittrack.db import Base


class WorkoutTemplate(Base):
    __tablename__ = "workout_templates"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)

    name = Column(String, nullable=False)
    exercises = Column(JSON, nullable=False, default=list)  # e.g. ["Squat", "Bench Press"]

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
