from sqlalchemy import Column, Integer, String, Date, DateTime, Time
from sqlalchemy.sql import func
from fittrack.db import Base


class Meal(Base):
    __tablename__ = "meals"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)

    date = Column(Date, nullable=False, index=True)
    # Local time of day the meal was eaten
    time = Column(Time, nullable=False)

    food = Column(String, nullable=False)
    calories = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
