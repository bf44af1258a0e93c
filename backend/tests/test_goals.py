"""Goal store and goal progress through the HTTP API."""


def test_create_weekly_goal_defaults_to_current_week(client):
    r = client.post("/goals/", json={"goal_type": "weekly", "category": "workouts", "target_value": 3})
    assert r.status_code == 200, r.text
    goal = r.json()
    assert goal["start_date"] == "2025-01-13"
    assert goal["end_date"] == "2025-01-19"
    assert goal["user_id"] == "user-1"


def test_create_monthly_goal_defaults_to_current_month(client):
    r = client.post("/goals/", json={"goal_type": "monthly", "category": "sleep", "target_value": 200})
    assert r.status_code == 200, r.text
    assert r.json()["start_date"] == "2025-01-01"
    assert r.json()["end_date"] == "2025-01-31"


def test_create_goal_with_custom_range(client):
    r = client.post("/goals/", json={
        "goal_type": "weekly",
        "category": "calories",
        "target_value": 14000,
        "start_date": "2025-01-06",
        "end_date": "2025-01-12",
    })
    assert r.status_code == 200, r.text
    assert r.json()["start_date"] == "2025-01-06"


def test_create_goal_rejects_non_positive_target(client):
    for target in (0, -5):
        r = client.post("/goals/", json={"goal_type": "weekly", "category": "workouts", "target_value": target})
        assert r.status_code == 422
    assert client.get("/goals/").json() == []


def test_create_goal_rejects_target_that_rounds_to_zero(client):
    for target in (0.001, 0.004):
        r = client.post("/goals/", json={"goal_type": "weekly", "category": "sleep", "target_value": target})
        assert r.status_code == 422, r.text
    assert client.get("/goals/").json() == []

    assert client.get("/goals/progress").status_code == 200
    assert client.get("/achievements/").status_code == 200


def test_create_goal_stores_target_at_two_decimals(client):
    r = client.post("/goals/", json={"goal_type": "weekly", "category": "sleep", "target_value": 0.005})
    assert r.status_code == 200, r.text
    assert r.json()["target_value"] == 0.01

    progress = client.get("/goals/progress").json()
    assert progress[0]["percentage"] == 0


def test_goal_read_includes_timestamps(client):
    goal = client.post("/goals/", json={"goal_type": "weekly", "category": "workouts", "target_value": 3}).json()
    assert goal["created_at"]
    assert goal["updated_at"]

    listed = client.get("/goals/").json()
    assert listed[0]["created_at"] == goal["created_at"]


def test_create_goal_rejects_inverted_or_partial_range(client):
    inverted = client.post("/goals/", json={
        "goal_type": "weekly", "category": "sleep", "target_value": 50,
        "start_date": "2025-01-19", "end_date": "2025-01-13",
    })
    assert inverted.status_code == 422

    partial = client.post("/goals/", json={
        "goal_type": "weekly", "category": "sleep", "target_value": 50,
        "start_date": "2025-01-13",
    })
    assert partial.status_code == 422


def test_create_goal_rejects_unknown_category(client):
    r = client.post("/goals/", json={"goal_type": "weekly", "category": "steps", "target_value": 5})
    assert r.status_code == 422


def test_new_goal_progress_starts_at_zero(client):
    client.post("/goals/", json={"goal_type": "weekly", "category": "calories", "target_value": 14000})

    r = client.get("/goals/progress")
    assert r.status_code == 200
    progress = r.json()
    assert len(progress) == 1
    assert progress[0]["current_value"] == 0
    assert progress[0]["percentage"] == 0
    assert progress[0]["days_passed"] == 3


def test_progress_reflects_logged_meals(client):
    client.post("/goals/", json={"goal_type": "weekly", "category": "calories", "target_value": 2000})
    client.post("/meals/", json={"date": "2025-01-13", "time": "08:00", "food": "Eggs", "calories": 500})
    client.post("/meals/", json={"date": "2025-01-14", "time": "13:00", "food": "Pasta", "calories": 700})
    # Outside the week
    client.post("/meals/", json={"date": "2025-01-12", "time": "13:00", "food": "Pizza", "calories": 900})

    progress = client.get("/goals/progress").json()
    assert progress[0]["current_value"] == 1200
    assert progress[0]["percentage"] == 60


def test_progress_without_user_is_empty(anon_client):
    r = anon_client.get("/goals/progress")
    assert r.status_code == 200
    assert r.json() == []


def test_delete_goal(client):
    goal = client.post("/goals/", json={"goal_type": "weekly", "category": "sleep", "target_value": 50}).json()

    # Another user cannot delete it
    r = client.delete(f"/goals/{goal['id']}", headers={"X-User-Id": "intruder"})
    assert r.status_code == 404

    assert client.delete(f"/goals/{goal['id']}").status_code == 200
    assert client.get("/goals/").json() == []
    assert client.delete(f"/goals/{goal['id']}").status_code == 404
