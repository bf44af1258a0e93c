"""Progress calculator and the activity queries behind it."""

from datetime import date, timedelta

import pytest
from sqlalchemy.exc import OperationalError

from factories import add_goal, add_meal, add_sleep, add_workout
from fittrack.core.session import UserSession
from fittrack.core.time_utils import percentage_of
from fittrack.services import progress as progress_service
from fittrack.services.activity import achieved_value, count_workouts, sum_calories, sum_sleep_hours
from fittrack.services.progress import days_passed, load_goals_progress

MONDAY = date(2024, 1, 1)


class TestActivityQueries:
    def test_sum_calories_in_range(self, db, user):
        add_meal(db, user.user_id, MONDAY, 500)
        add_meal(db, user.user_id, MONDAY + timedelta(days=1), 700)
        add_meal(db, user.user_id, MONDAY + timedelta(days=7), 900)
        add_meal(db, "other", MONDAY, 1000)
        assert sum_calories(db, user, MONDAY, MONDAY + timedelta(days=6)) == 1200

    def test_count_workouts_in_range(self, db, user):
        add_workout(db, user.user_id, MONDAY)
        add_workout(db, user.user_id, MONDAY)
        add_workout(db, user.user_id, MONDAY - timedelta(days=1))
        assert count_workouts(db, user, MONDAY, MONDAY + timedelta(days=6)) == 2

    def test_sum_sleep_hours(self, db, user):
        add_sleep(db, user.user_id, MONDAY, 7.5)
        add_sleep(db, user.user_id, MONDAY + timedelta(days=6), 8.25)
        assert sum_sleep_hours(db, user, MONDAY, MONDAY + timedelta(days=6)) == pytest.approx(15.75)

    def test_empty_range_is_zero(self, db, user):
        for category in ("calories", "workouts", "sleep"):
            assert achieved_value(db, user, category, MONDAY, MONDAY) == 0

    def test_unknown_category(self, db, user):
        with pytest.raises(ValueError):
            achieved_value(db, user, "steps", MONDAY, MONDAY)


class TestPercentage:
    @pytest.mark.parametrize(
        "value,target,expected",
        [(0, 10, 0), (5, 10, 50), (1200, 1000, 100), (10**9, 3, 100), (1, 8, 13), (1, 200, 1)],
    )
    def test_capped_and_rounded(self, value, target, expected):
        assert percentage_of(value, target) == expected

    def test_rounds_half_up(self):
        # 0.5% rounds up, unlike round() which would give 0
        assert percentage_of(1, 200) == 1
        assert percentage_of(5, 200) == 3

    def test_zero_target_rejected(self):
        with pytest.raises(ValueError):
            percentage_of(5, 0)


class TestGoalsProgress:
    def test_calorie_goal_over_target_is_capped(self, db, user):
        add_goal(db, user.user_id, "calories", 1000, MONDAY)
        add_meal(db, user.user_id, MONDAY, 500)
        add_meal(db, user.user_id, MONDAY + timedelta(days=1), 700)

        [progress] = load_goals_progress(db, user, MONDAY + timedelta(days=2))
        assert progress.current_value == 1200
        assert progress.percentage == 100

    def test_no_workouts_is_zero(self, db, user):
        add_goal(db, user.user_id, "workouts", 3, MONDAY)
        [progress] = load_goals_progress(db, user, MONDAY)
        assert progress.current_value == 0
        assert progress.percentage == 0

    def test_only_active_goals(self, db, user):
        add_goal(db, user.user_id, "sleep", 50, MONDAY - timedelta(days=7))
        add_goal(db, user.user_id, "sleep", 50, MONDAY + timedelta(days=7))
        current = add_goal(db, user.user_id, "sleep", 50, MONDAY)

        result = load_goals_progress(db, user, MONDAY + timedelta(days=3))
        assert [p.goal.id for p in result] == [current.id]

    def test_overlapping_goals_tracked_independently(self, db, user):
        add_goal(db, user.user_id, "workouts", 2, MONDAY)
        add_goal(db, user.user_id, "workouts", 4, MONDAY)
        add_workout(db, user.user_id, MONDAY)
        add_workout(db, user.user_id, MONDAY + timedelta(days=1))

        result = load_goals_progress(db, user, MONDAY + timedelta(days=1))
        assert sorted(p.percentage for p in result) == [50, 100]

    def test_monthly_goal_uses_its_own_range(self, db, user):
        add_goal(db, user.user_id, "sleep", 100, date(2024, 1, 1), date(2024, 1, 31), goal_type="monthly")
        add_sleep(db, user.user_id, date(2024, 1, 3), 8)
        add_sleep(db, user.user_id, date(2024, 1, 29), 7)
        add_sleep(db, user.user_id, date(2024, 2, 1), 9)

        [progress] = load_goals_progress(db, user, date(2024, 1, 20))
        assert progress.current_value == 15
        assert progress.percentage == 15
        assert progress.days_passed == 20

    def test_no_user_gives_empty_list(self, db):
        assert load_goals_progress(db, None, MONDAY) == []

    def test_query_failure_gives_empty_list(self, db, user, monkeypatch):
        add_goal(db, user.user_id, "sleep", 50, MONDAY)

        def broken(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("backend unreachable"))

        monkeypatch.setattr(progress_service, "list_active_goals", broken)
        assert load_goals_progress(db, user, MONDAY) == []


class TestDaysPassed:
    def test_clamped_to_window(self):
        start, end = date(2024, 1, 1), date(2024, 1, 7)
        assert days_passed(start, end, date(2023, 12, 31)) == 1
        assert days_passed(start, end, start) == 1
        assert days_passed(start, end, date(2024, 1, 4)) == 4
        assert days_passed(start, end, date(2024, 2, 1)) == 7
