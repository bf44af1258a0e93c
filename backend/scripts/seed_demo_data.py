from datetime import date, time, timedelta
import random

from fittrack.core.time_utils import monday_of
from fittrack.db import Base, SessionLocal, engine
from fittrack.models.body import SleepEntry, WeightEntry
from fittrack.models.goal import Goal
from fittrack.models.gym_session import GymSession
from fittrack.models.meal import Meal

DEMO_USER = "demo-user"

MEALS = [
    (time(8, 0), "Oatmeal with berries", 350, 450),
    (time(12, 30), "Chicken salad", 500, 700),
    (time(19, 0), "Salmon and rice", 600, 850),
]


def clear_demo_user(db) -> None:
    """Delete every row of the demo user so we can reseed cleanly."""
    for model in (Meal, GymSession, SleepEntry, WeightEntry, Goal):
        db.query(model).filter(model.user_id == DEMO_USER).delete()
    db.commit()


def seed_demo_data(db, weeks: int = 12) -> None:
    """Insert `weeks` weeks of meals, workouts, sleep, weight and weekly goals."""
    today = date.today()
    # Go back weeks-1 full weeks + current week
    first_monday = monday_of(today) - timedelta(weeks=weeks - 1)

    rows = []
    weight = 82.0

    for week in range(weeks):
        week_start = first_monday + timedelta(weeks=week)

        rows.append(Goal(user_id=DEMO_USER, goal_type="weekly", category="workouts",
                         target_value=3, start_date=week_start, end_date=week_start + timedelta(days=6)))
        rows.append(Goal(user_id=DEMO_USER, goal_type="weekly", category="sleep",
                         target_value=49, start_date=week_start, end_date=week_start + timedelta(days=6)))

        for dow in range(7):
            d = week_start + timedelta(days=dow)
            # Skip future days
            if d > today:
                continue

            for t, food, low, high in MEALS:
                rows.append(Meal(user_id=DEMO_USER, date=d, time=t, food=food,
                                 calories=random.randint(low, high)))

            rows.append(SleepEntry(user_id=DEMO_USER, date=d, hours=round(random.uniform(6.0, 8.5), 1)))

            # Mon / Wed / Fri strength, sometimes skipped
            if dow in (0, 2, 4) and random.random() > 0.2:
                rows.append(GymSession(user_id=DEMO_USER, date=d, exercise="Strength training",
                                       duration=random.choice([45, 60, 75])))

            if dow % 3 == 0:
                weight -= random.uniform(0.0, 0.3)
                rows.append(WeightEntry(user_id=DEMO_USER, date=d, weight=round(weight, 1)))

    db.add_all(rows)
    db.commit()

    print(f"Seeded {len(rows)} demo rows for {DEMO_USER}")


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        clear_demo_user(db)
        seed_demo_data(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
