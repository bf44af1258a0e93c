from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, CheckConstraint
from sqlalchemy.sql import func
from fittrack.db import Base


class Goal(Base):
    __tablename__ = "goals"
    __table_args__ = (
        CheckConstraint("start_date <= end_date", name="ck_goals_date_range"),
        CheckConstraint("target_value > 0", name="ck_goals_target_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)

    goal_type = Column(String(10), nullable=False)   # weekly, monthly
    category = Column(String(20), nullable=False)    # calories, workouts, sleep
    target_value = Column(Numeric(10, 2), nullable=False)

    # Inclusive window; weekly goals default to Mon-Sun, monthly to the calendar month
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
