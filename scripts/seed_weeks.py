#!/usr/bin/env python3
"""
Seed N weeks of tracking data into the FitTrack API.

Pattern per week (Mon-Sun):
  - 3 meals every day
  - 7 nights of sleep
  - strength sessions on the days listed in WORKOUT_DAYS
  - one weekly workouts goal and one weekly sleep goal

Workout frequency ramps with WORKOUT_PLAN so that early weeks miss the
goal and later weeks meet it, which exercises streaks and badges.

Usage examples:
  - Against a local backend:
      python scripts/seed_weeks.py --base-url http://localhost:8000 --user demo-user
  - Against a deployment behind the gateway key:
      python scripts/seed_weeks.py --base-url https://<host>/api --user <id> --api-key <key>
"""

from __future__ import annotations

import argparse
import datetime as dt
import sys

try:
    import requests  # type: ignore
except Exception as exc:  # pragma: no cover
    print("This script requires the 'requests' package.\nInstall with: pip install requests", file=sys.stderr)
    raise


# Sessions per week, oldest week first
WORKOUT_PLAN = [1, 2, 2, 3, 3, 3, 4, 3, 3, 4, 4, 3]
WORKOUT_DAYS = [0, 2, 4, 5]  # Mon, Wed, Fri, Sat
WORKOUT_GOAL = 3
SLEEP_GOAL_HOURS = 49

MEALS = [("08:00", "Oatmeal", 400), ("12:30", "Chicken salad", 600), ("19:00", "Salmon and rice", 750)]


def monday_of_week(d: dt.date) -> dt.date:
    return d - dt.timedelta(days=d.weekday())


def post_json(base_url: str, path: str, payload: dict, headers: dict) -> None:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    r = requests.post(url, json=payload, headers=headers, timeout=15)
    if r.status_code >= 300:
        raise RuntimeError(f"{path} -> HTTP {r.status_code}: {r.text}")


def seed_week(base_url: str, headers: dict, week_start: dt.date, sessions: int, today: dt.date) -> None:
    week_end = week_start + dt.timedelta(days=6)
    for category, target in (("workouts", WORKOUT_GOAL), ("sleep", SLEEP_GOAL_HOURS)):
        post_json(base_url, "goals/", {
            "goal_type": "weekly",
            "category": category,
            "target_value": target,
            "start_date": week_start.isoformat(),
            "end_date": week_end.isoformat(),
        }, headers)

    for dow in range(7):
        day = week_start + dt.timedelta(days=dow)
        if day > today:
            break
        for hhmm, food, calories in MEALS:
            post_json(base_url, "meals/", {"date": day.isoformat(), "time": hhmm, "food": food, "calories": calories}, headers)
        post_json(base_url, "sleep/", {"date": day.isoformat(), "hours": 7.5, "notes": "seed"}, headers)

    for dow in WORKOUT_DAYS[:sessions]:
        day = week_start + dt.timedelta(days=dow)
        if day > today:
            continue
        post_json(base_url, "workouts/", {"date": day.isoformat(), "exercise": "Strength", "duration": 60, "notes": "seed"}, headers)


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed weeks of meals, workouts, sleep and weekly goals")
    ap.add_argument("--base-url", required=True, help="API base URL (e.g., http://localhost:8000)")
    ap.add_argument("--user", required=True, help="User id sent as X-User-Id")
    ap.add_argument("--api-key", default=None, help="Gateway key sent as X-API-Key")
    args = ap.parse_args()

    headers = {"X-User-Id": args.user}
    if args.api_key:
        headers["X-API-Key"] = args.api_key

    today = dt.date.today()
    this_monday = monday_of_week(today)
    weeks = len(WORKOUT_PLAN)

    # Week starts ending with the current week
    week_starts = [this_monday - dt.timedelta(weeks=weeks - 1 - i) for i in range(weeks)]

    for ws, sessions in zip(week_starts, WORKOUT_PLAN):
        seed_week(args.base_url, headers, ws, sessions, today)

    print(f"Seed complete: {weeks} weeks created.")


if __name__ == "__main__":
    main()
