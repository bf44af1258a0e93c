"""Weekly goal history, streaks and badges.

Every weekly goal a user has ever set is re-scored against the logs of the
week it belongs to. Nothing here is persisted; stats are rebuilt from the
source tables on every call.
"""

import logging
from datetime import date, timedelta
from typing import Callable, Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fittrack.core.config import settings
from fittrack.core.session import UserSession
from fittrack.core.time_utils import monday_of, percentage_of
from fittrack.models.goal import Goal
from fittrack.schemas.achievement import GoalStats, WeeklyAchievement
from fittrack.services.activity import achieved_value
from fittrack.services.badges import evaluate_badges
from fittrack.services.goal_store import list_weekly_goals

logger = logging.getLogger(__name__)

# (category, week_start, week_end) -> achieved value
Measure = Callable[[str, date, date], float]


def score_weeks(goals: Iterable[Goal], today: date, measure: Measure) -> list[WeeklyAchievement]:
    """One WeeklyAchievement per (week, category), most recent week first.

    `goals` must already be ordered by preference: the first goal seen for a
    given week and category is the one scored.
    """
    seen: set[tuple[date, str]] = set()
    history: list[WeeklyAchievement] = []

    for goal in goals:
        week_start = monday_of(goal.start_date)
        if week_start > today:
            continue

        key = (week_start, goal.category)
        if key in seen:
            continue
        seen.add(key)

        week_end = week_start + timedelta(days=6)
        target = float(goal.target_value)
        achieved = measure(goal.category, week_start, week_end)
        percentage = percentage_of(achieved, target)

        history.append(
            WeeklyAchievement(
                week_start=week_start,
                week_end=week_end,
                category=goal.category,
                target_value=target,
                achieved_value=achieved,
                percentage=percentage,
                met=percentage >= 100,
            )
        )

    history.sort(key=lambda w: w.week_start, reverse=True)
    return history


def current_streak(weeks_met: set[date], today: date, max_weeks: int = 52) -> int:
    """Consecutive met weeks ending with this week. Zero if this week is not met."""
    streak = 0
    check_week = monday_of(today)
    for _ in range(max_weeks):
        if check_week not in weeks_met:
            break
        streak += 1
        check_week -= timedelta(weeks=1)
    return streak


def longest_streak(weeks_met: set[date]) -> int:
    longest = 0
    run = 0
    prev: Optional[date] = None
    for week in sorted(weeks_met):
        if prev is not None and (week - prev).days == 7:
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        prev = week
    return longest


def build_goal_stats(
    history: list[WeeklyAchievement],
    total_goals_set: int,
    today: date,
    history_limit: int = 12,
    max_streak_weeks: int = 52,
) -> GoalStats:
    goals_met_count = sum(1 for w in history if w.met)

    # Any category met counts the whole week toward a streak
    weeks_met = {w.week_start for w in history if w.met}
    current = current_streak(weeks_met, today, max_streak_weeks)
    longest = longest_streak(weeks_met)

    return GoalStats(
        total_goals_set=total_goals_set,
        goals_met_count=goals_met_count,
        current_streak=current,
        longest_streak=longest,
        weekly_history=history[:history_limit],
        badges=evaluate_badges(goals_met_count, current, longest),
    )


def compute_goal_stats(db: Session, session: UserSession, today: date) -> GoalStats:
    """Stats over every weekly goal of the user. Query errors propagate."""
    goals = list_weekly_goals(db, session)

    def measure(category: str, start: date, end: date) -> float:
        return achieved_value(db, session, category, start, end)

    history = score_weeks(goals, today, measure)
    return build_goal_stats(
        history,
        total_goals_set=len(goals),
        today=today,
        history_limit=settings.history_limit,
        max_streak_weeks=settings.streak_lookback_weeks,
    )


def load_goal_stats(db: Session, session: Optional[UserSession], today: date) -> GoalStats:
    """Like compute_goal_stats, but falls back to the zero state.

    A missing user and a failed query are treated the same way: the error is
    logged and an empty GoalStats is returned.
    """
    if session is None:
        logger.info("No active user; returning empty goal stats")
        return GoalStats()

    try:
        return compute_goal_stats(db, session, today)
    except SQLAlchemyError:
        logger.exception("Error fetching achievements", extra={"user_id": session.user_id})
        return GoalStats()
