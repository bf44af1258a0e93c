from sqlalchemy.orm import Session

from fittrack.core.config import settings
from fittrack.core.session import UserSession
from fittrack.models.user_settings import UserSettings


def get_or_create_settings(db: Session, session: UserSession) -> UserSettings:
    """Return the user's settings row, inserting defaults on first access."""
    row = db.query(UserSettings).filter(UserSettings.user_id == session.user_id).first()
    if not row:
        row = UserSettings(
            user_id=session.user_id,
            daily_calorie_goal=settings.default_calorie_goal,
            weight_measurement_interval=settings.default_weight_interval,
        )
        db.add(row)
        db.commit()
        db.refresh(row)
    return row


def update_settings(db: Session, session: UserSession, **fields) -> UserSettings:
    row = get_or_create_settings(db, session)
    for key, value in fields.items():
        if value is None:
            continue
        if value <= 0:
            raise ValueError(f"{key} must be > 0")
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    return row
