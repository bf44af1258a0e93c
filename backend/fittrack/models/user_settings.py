from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from fittrack.db import Base


class UserSettings(Base):
    __tablename__ = "user_settings"

    # One row per user, created with defaults on first read
    user_id = Column(String, primary_key=True, index=True)

    daily_calorie_goal = Column(Integer, nullable=False)
    weight_measurement_interval = Column(Integer, nullable=False)  # days

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
