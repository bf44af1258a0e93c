from sqlalchemy import Column, Integer, String, Date, DateTime
from sqlalchemy.sql import func
from fittrack.db import Base


class GymSession(Base):
    __tablename__ = "gym_sessions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)

    date = Column(Date, nullable=False, index=True)
    exercise = Column(String, nullable=False)
    duration = Column(Integer, nullable=False)  # minutes
    notes = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
