from sqlalchemy import Column, Integer, String, Date, DateTime, JSON, UniqueConstraint
from sqlalchemy.sql import func
from fittrack.db import Base


class DailyNote(Base):
    __tablename__ = "daily_notes"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_daily_notes_user_date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    date = Column(Date, nullable=False)

    tags = Column(JSON, nullable=False, default=list)  # e.g. ["Headache", "Poor Sleep"]
    severity = Column(Integer, nullable=True)  # 1-5
    notes = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
