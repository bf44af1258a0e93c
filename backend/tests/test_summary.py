"""Daily summary for today (conftest TODAY is 2025-01-15)."""


def test_summary_without_logs_uses_default_goal(client):
    r = client.get("/summary/today")
    assert r.status_code == 200, r.text
    assert r.json() == {
        "date": "2025-01-15",
        "calories_consumed": 0,
        "calories_remaining": 2000,
        "calorie_goal": 2000,
        "workout_status": "no",
    }


def test_summary_counts_only_today(client):
    client.put("/settings/calorie_goal", json={"daily_calorie_goal": 1800})
    client.post("/meals/", json={"date": "2025-01-15", "time": "08:00", "food": "Oats", "calories": 400})
    client.post("/meals/", json={"date": "2025-01-15", "time": "13:00", "food": "Wrap", "calories": 650})
    client.post("/meals/", json={"date": "2025-01-14", "time": "19:00", "food": "Curry", "calories": 900})
    client.post("/workouts/", json={"date": "2025-01-15", "exercise": "Run", "duration": 30})

    data = client.get("/summary/today").json()
    assert data["calories_consumed"] == 1050
    assert data["calories_remaining"] == 750
    assert data["calorie_goal"] == 1800
    assert data["workout_status"] == "yes"


def test_summary_over_goal_has_nothing_remaining(client):
    client.put("/settings/calorie_goal", json={"daily_calorie_goal": 500})
    client.post("/meals/", json={"date": "2025-01-15", "time": "12:00", "food": "Feast", "calories": 800})

    data = client.get("/summary/today").json()
    assert data["calories_consumed"] == 800
    assert data["calories_remaining"] == 0


def test_summary_without_user_is_null(anon_client):
    r = anon_client.get("/summary/today")
    assert r.status_code == 200
    assert r.json() is None
