"""Period report: daily series, stats and insights."""

from datetime import date, time

import pytest

from factories import add_meal, add_sleep, add_weight, add_workout
from fittrack.services.reports import build_report, load_report, meal_period, round1
from fittrack.services.user_settings import update_settings

START = date(2025, 1, 13)
END = date(2025, 1, 16)


@pytest.fixture()
def week_of_logs(db, user):
    uid = user.user_id
    add_meal(db, uid, date(2025, 1, 13), 400, time(7, 0))
    add_meal(db, uid, date(2025, 1, 13), 600, time(12, 0))
    add_meal(db, uid, date(2025, 1, 14), 300, time(8, 0))
    add_meal(db, uid, date(2025, 1, 14), 900, time(19, 0))
    add_meal(db, uid, date(2025, 1, 15), 2500, time(13, 0))

    for day, minutes in [(13, 60), (14, 30), (15, 45), (16, 20)]:
        add_workout(db, uid, date(2025, 1, day), minutes)
    for day, hours in [(13, 8), (14, 6), (15, 8), (16, 6)]:
        add_sleep(db, uid, date(2025, 1, day), hours)

    add_weight(db, uid, date(2025, 1, 13), 80.0)
    add_weight(db, uid, date(2025, 1, 16), 79.4)


def test_daily_series(db, user, week_of_logs):
    report = load_report(db, user, START, END)
    assert [d.date for d in report.daily] == [date(2025, 1, d) for d in (13, 14, 15, 16)]
    assert [d.calories for d in report.daily] == [1000, 1200, 2500, 0]
    assert [d.workout_minutes for d in report.daily] == [60, 30, 45, 20]
    assert [d.sleep_hours for d in report.daily] == [8, 6, 8, 6]
    assert [d.weight for d in report.daily] == [80.0, None, None, 79.4]


def test_stats(db, user, week_of_logs):
    stats = load_report(db, user, START, END).stats
    assert stats.avg_calories == 1567
    assert stats.total_workouts == 4
    assert stats.avg_workout_duration == 39
    assert stats.avg_sleep_hours == 7.0
    assert stats.avg_weight == 79.7
    assert stats.weight_change == -0.6
    assert stats.goals_met_days == 2
    assert stats.total_days == 4
    assert stats.calorie_goal == 2000


def test_insights(db, user, week_of_logs):
    insights = load_report(db, user, START, END).insights
    assert [i.title for i in insights] == [
        "Sleep Boosts Workouts",
        "Early Eater",
        "Workout Warrior",
        "Goal Achievement",
    ]

    sleep, early, warrior, goal = insights
    assert sleep.value == "+110%"
    assert "28 minutes longer" in sleep.description
    assert early.value == "40%"
    assert "averaging 350 calories" in early.description
    assert warrior.value == "100%"
    assert goal.value == "50%"
    assert goal.correlation == "neutral"


def test_calorie_goal_comes_from_settings(db, user, week_of_logs):
    update_settings(db, user, daily_calorie_goal=1100)
    stats = load_report(db, user, START, END).stats
    assert stats.calorie_goal == 1100
    assert stats.goals_met_days == 1


def test_meal_periods(db, user, week_of_logs):
    periods = {p.name: (p.calories, p.count) for p in load_report(db, user, START, END).meal_periods}
    assert periods == {
        "Morning": (700, 2),
        "Lunch": (3100, 2),
        "Afternoon": (0, 0),
        "Evening": (900, 1),
    }


def test_empty_range_has_no_insights():
    report = build_report(START, END, [], [], [], [], calorie_goal=2000)
    assert report.insights == []
    assert report.stats.avg_calories == 0
    assert report.stats.total_days == 4


def test_late_starter_and_room_to_grow(db, user):
    for hour in (11, 12, 13, 18, 20):
        add_meal(db, user.user_id, START, 500, time(hour, 0))
    add_workout(db, user.user_id, START, 30)

    titles = [i.title for i in load_report(db, user, START, END).insights]
    assert "Late Starter" in titles
    assert "Room to Grow" in titles


def test_inverted_range_rejected(db, user):
    with pytest.raises(ValueError):
        load_report(db, user, END, START)


def test_meal_period_boundaries():
    assert meal_period(4) == "Evening"
    assert meal_period(5) == "Morning"
    assert meal_period(11) == "Lunch"
    assert meal_period(14) == "Afternoon"
    assert meal_period(18) == "Evening"


def test_round1_halves_away_from_zero():
    assert round1(0.25) == 0.3
    assert round1(-0.25) == -0.3
    assert round1(7.0) == 7.0


def test_report_endpoint_defaults_to_last_week(client):
    client.post("/meals/", json={"date": "2025-01-15", "time": "08:00", "food": "Toast", "calories": 300})
    r = client.get("/reports/")
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["start_date"] == "2025-01-09"
    assert data["end_date"] == "2025-01-15"
    assert data["stats"]["total_days"] == 7
    assert data["stats"]["avg_calories"] == 300


def test_report_endpoint_rejects_inverted_range(client):
    r = client.get("/reports/", params={"start_date": "2025-01-15", "end_date": "2025-01-10"})
    assert r.status_code == 422
