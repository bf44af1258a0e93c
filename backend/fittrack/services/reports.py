"""Period reports: per-day series, summary stats and simple insights.

`build_report` is pure and works on already-loaded rows; `load_report`
fetches the rows for a user and date range and hands them over.
"""

import math
from datetime import date
from typing import Sequence

from sqlalchemy.orm import Session

from fittrack.core import constants as C
from fittrack.core.session import UserSession
from fittrack.core.time_utils import days_in_range, round_half_up
from fittrack.models.body import SleepEntry, WeightEntry
from fittrack.models.gym_session import GymSession
from fittrack.models.meal import Meal
from fittrack.schemas.report import (
    CorrelationInsight,
    DailyPoint,
    MealPeriod,
    Report,
    ReportStats,
)
from fittrack.services.user_settings import get_or_create_settings


def round1(value: float) -> float:
    """One decimal place, halves away from zero (-0.25 -> -0.3)."""
    return math.copysign(round_half_up(abs(value) * 10) / 10, value)


def meal_period(hour: int) -> str:
    for name, start, end in C.MEAL_PERIODS:
        if start <= hour < end:
            return name
    return C.LATE_MEAL_PERIOD


def daily_series(
    start: date,
    end: date,
    meals: Sequence[Meal],
    sessions: Sequence[GymSession],
    sleep: Sequence[SleepEntry],
    weights: Sequence[WeightEntry],
) -> list[DailyPoint]:
    days: list[DailyPoint] = []
    for day in days_in_range(start, end):
        sleep_row = next((s for s in sleep if s.date == day), None)
        weight_row = next((w for w in weights if w.date == day), None)
        days.append(
            DailyPoint(
                date=day,
                calories=sum(m.calories for m in meals if m.date == day),
                workout_minutes=sum(s.duration for s in sessions if s.date == day),
                sleep_hours=float(sleep_row.hours) if sleep_row else 0.0,
                weight=float(weight_row.weight) if weight_row else None,
            )
        )
    return days


def report_stats(
    daily: list[DailyPoint],
    sessions: Sequence[GymSession],
    sleep: Sequence[SleepEntry],
    weights: Sequence[WeightEntry],
    calorie_goal: int,
) -> ReportStats:
    calorie_days = [d for d in daily if d.calories > 0]
    avg_calories = (
        round_half_up(sum(d.calories for d in daily) / len(calorie_days)) if calorie_days else 0
    )

    total_workouts = len(sessions)
    avg_workout = (
        round_half_up(sum(s.duration for s in sessions) / total_workouts) if total_workouts else 0
    )

    avg_sleep = round1(sum(float(s.hours) for s in sleep) / len(sleep)) if sleep else 0.0

    weighed = sorted((w for w in weights if float(w.weight) > 0), key=lambda w: w.date)
    avg_weight = round1(sum(float(w.weight) for w in weighed) / len(weighed)) if weighed else 0.0
    weight_change = (
        round1(float(weighed[-1].weight) - float(weighed[0].weight)) if len(weighed) >= 2 else 0.0
    )

    goals_met_days = sum(1 for d in daily if 0 < d.calories <= calorie_goal)

    return ReportStats(
        avg_calories=avg_calories,
        total_workouts=total_workouts,
        avg_workout_duration=avg_workout,
        avg_sleep_hours=avg_sleep,
        avg_weight=avg_weight,
        weight_change=weight_change,
        goals_met_days=goals_met_days,
        total_days=len(daily),
        calorie_goal=calorie_goal,
    )


def _sleep_insight(daily: list[DailyPoint]) -> CorrelationInsight | None:
    both = [d for d in daily if d.sleep_hours > 0 and d.workout_minutes > 0]
    if len(both) < C.MIN_DAYS_FOR_SLEEP_INSIGHT:
        return None

    avg_sleep = sum(d.sleep_hours for d in both) / len(both)
    good = [d.workout_minutes for d in both if d.sleep_hours >= avg_sleep]
    poor = [d.workout_minutes for d in both if d.sleep_hours < avg_sleep]
    good_avg = sum(good) / len(good) if good else 0.0
    poor_avg = sum(poor) / len(poor) if poor else 0.0

    if poor_avg > 0 and good_avg > poor_avg * C.SLEEP_WORKOUT_LIFT:
        lift = round_half_up((good_avg - poor_avg) / poor_avg * 100)
        return CorrelationInsight(
            title="Sleep Boosts Workouts",
            description=(
                f"On days with {avg_sleep:.1f}+ hours of sleep, you work out "
                f"{round_half_up(good_avg - poor_avg)} minutes longer on average."
            ),
            correlation="positive",
            value=f"+{lift}%",
        )
    return None


def _meal_timing_insight(meals: Sequence[Meal]) -> CorrelationInsight | None:
    if len(meals) < C.MIN_MEALS_FOR_TIMING_INSIGHT:
        return None

    first_hour, last_hour = C.EARLY_MEAL_HOURS
    morning = [m for m in meals if first_hour <= m.time.hour < last_hour]
    ratio = len(morning) / len(meals)
    if ratio >= C.EARLY_MEAL_RATIO:
        avg_cal = sum(m.calories for m in morning) / len(morning)
        return CorrelationInsight(
            title="Early Eater",
            description=(
                f"{round_half_up(ratio * 100)}% of your meals are before 10 AM, "
                f"averaging {round_half_up(avg_cal)} calories."
            ),
            correlation="positive",
            value=f"{round_half_up(ratio * 100)}%",
        )
    return CorrelationInsight(
        title="Late Starter",
        description=(
            "Most of your meals are consumed after 10 AM. "
            "Consider adding breakfast for sustained energy."
        ),
        correlation="neutral",
    )


def _workout_insight(daily: list[DailyPoint]) -> CorrelationInsight | None:
    workout_days = sum(1 for d in daily if d.workout_minutes > 0)
    consistency = workout_days / len(daily) * 100 if daily else 0.0
    if consistency >= C.WORKOUT_CONSISTENCY_PCT:
        return CorrelationInsight(
            title="Workout Warrior",
            description=(
                f"You worked out on {round_half_up(consistency)}% of days in this period. "
                "Great consistency!"
            ),
            correlation="positive",
            value=f"{round_half_up(consistency)}%",
        )
    if consistency > 0:
        return CorrelationInsight(
            title="Room to Grow",
            description=(
                f"You worked out on {workout_days} out of {len(daily)} days. "
                "Try adding one more workout per week!"
            ),
            correlation="negative",
            value=f"{round_half_up(consistency)}%",
        )
    return None


def _calorie_goal_insight(stats: ReportStats) -> CorrelationInsight | None:
    if stats.goals_met_days <= 0:
        return None
    pct = round_half_up(stats.goals_met_days / stats.total_days * 100)
    if pct >= C.GOAL_POSITIVE_PCT:
        correlation = "positive"
    elif pct >= C.GOAL_NEUTRAL_PCT:
        correlation = "neutral"
    else:
        correlation = "negative"
    return CorrelationInsight(
        title="Goal Achievement",
        description=(
            f"You stayed within your {stats.calorie_goal} calorie goal on "
            f"{stats.goals_met_days} days ({pct}%)."
        ),
        correlation=correlation,
        value=f"{pct}%",
    )


def correlation_insights(
    daily: list[DailyPoint], meals: Sequence[Meal], stats: ReportStats
) -> list[CorrelationInsight]:
    candidates = [
        _sleep_insight(daily),
        _meal_timing_insight(meals),
        _workout_insight(daily),
        _calorie_goal_insight(stats),
    ]
    return [i for i in candidates if i is not None]


def meal_periods(meals: Sequence[Meal]) -> list[MealPeriod]:
    totals = {name: [0, 0] for name, _, _ in C.MEAL_PERIODS}
    totals[C.LATE_MEAL_PERIOD] = [0, 0]
    for meal in meals:
        bucket = totals[meal_period(meal.time.hour)]
        bucket[0] += meal.calories
        bucket[1] += 1
    return [MealPeriod(name=name, calories=cal, count=n) for name, (cal, n) in totals.items()]


def build_report(
    start: date,
    end: date,
    meals: Sequence[Meal],
    sessions: Sequence[GymSession],
    sleep: Sequence[SleepEntry],
    weights: Sequence[WeightEntry],
    calorie_goal: int,
) -> Report:
    daily = daily_series(start, end, meals, sessions, sleep, weights)
    stats = report_stats(daily, sessions, sleep, weights, calorie_goal)
    return Report(
        start_date=start,
        end_date=end,
        stats=stats,
        daily=daily,
        insights=correlation_insights(daily, meals, stats),
        meal_periods=meal_periods(meals),
    )


def _in_range(db: Session, model, session: UserSession, start: date, end: date):
    return (
        db.query(model)
        .filter(model.user_id == session.user_id)
        .filter(model.date >= start)
        .filter(model.date <= end)
        .order_by(model.date, model.id)
        .all()
    )


def load_report(db: Session, session: UserSession, start: date, end: date) -> Report:
    if start > end:
        raise ValueError("start_date must be on or before end_date")

    user_settings = get_or_create_settings(db, session)
    return build_report(
        start,
        end,
        meals=_in_range(db, Meal, session, start, end),
        sessions=_in_range(db, GymSession, session, start, end),
        sleep=_in_range(db, SleepEntry, session, start, end),
        weights=_in_range(db, WeightEntry, session, start, end),
        calorie_goal=user_settings.daily_calorie_goal,
    )
