def test_root_ok(client):
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert "message" in data


def test_create_and_list_meal(client):
    payload = {
        "date": "2025-01-14",
        "time": "07:30",
        "food": "Oatmeal",
        "calories": 350,
    }
    cr = client.post("/meals/", json=payload)
    assert cr.status_code == 200, cr.text
    assert cr.json()["time"] == "07:30"

    # list within range
    lr = client.get("/meals/", params={"start_date": "2025-01-13", "end_date": "2025-01-19"})
    assert lr.status_code == 200
    assert any(m["food"] == "Oatmeal" for m in lr.json())


def test_meal_rejects_bad_time(client):
    r = client.post("/meals/", json={"date": "2025-01-14", "time": "lunchtime", "food": "Soup", "calories": 200})
    assert r.status_code == 422


def test_update_and_delete_meal(client):
    meal = client.post("/meals/", json={"date": "2025-01-14", "time": "12:00", "food": "Soup", "calories": 200}).json()

    ur = client.put(f"/meals/{meal['id']}", json={"calories": 250, "date": "2025-01-15"})
    assert ur.status_code == 200, ur.text
    assert ur.json()["calories"] == 250
    assert ur.json()["date"] == "2025-01-15"

    assert client.delete(f"/meals/{meal['id']}").status_code == 200
    assert client.delete(f"/meals/{meal['id']}").status_code == 404


def test_logs_require_user(anon_client):
    assert anon_client.get("/meals/").status_code == 401
    assert anon_client.post("/goals/", json={"goal_type": "weekly", "category": "sleep", "target_value": 50}).status_code == 401


def test_users_cannot_see_each_others_logs(client):
    client.post("/workouts/", json={"date": "2025-01-14", "exercise": "Run", "duration": 30})
    other = client.get("/workouts/", headers={"X-User-Id": "someone-else"})
    assert other.status_code == 200
    assert other.json() == []


def test_sleep_weight_waist_crud(client):
    for path, field, value in [("/sleep/", "hours", 7.5), ("/weight/", "weight", 80.2), ("/waist/", "waist", 88.0)]:
        cr = client.post(path, json={"date": "2025-01-14", field: value})
        assert cr.status_code == 200, cr.text
        entry_id = cr.json()["id"]

        ur = client.put(f"{path}{entry_id}", json={"date": "2025-01-14", field: value + 1, "notes": "edited"})
        assert ur.status_code == 200, ur.text
        assert ur.json()[field] == value + 1

        assert len(client.get(path).json()) == 1
        assert client.delete(f"{path}{entry_id}").status_code == 200
        assert client.get(path).json() == []


def test_weekly_workout_minutes(client):
    client.post("/workouts/", json={"date": "2025-01-13", "exercise": "Lift", "duration": 45})
    client.post("/workouts/", json={"date": "2025-01-13", "exercise": "Bike", "duration": 15})
    client.post("/workouts/", json={"date": "2025-01-10", "exercise": "Lift", "duration": 45})

    r = client.get("/workouts/weekly_minutes")
    assert r.status_code == 200
    data = r.json()
    assert data["week_start"] == "2025-01-13"
    assert data["sessions"] == 2
    assert [d["duration"] for d in data["days"]] == [60, 0, 0, 0, 0, 0, 0]


def test_daily_note_upsert_replaces_same_day(client):
    first = client.put("/notes/", json={"date": "2025-01-14", "tags": ["Headache"], "severity": 3})
    assert first.status_code == 200, first.text
    second = client.put("/notes/", json={"date": "2025-01-14", "tags": ["Fatigue"], "notes": "long day"})
    assert second.status_code == 200
    assert second.json()["id"] == first.json()["id"]

    notes = client.get("/notes/").json()
    assert len(notes) == 1
    assert notes[0]["tags"] == ["Fatigue"]
    assert notes[0]["severity"] is None


def test_daily_note_severity_range(client):
    r = client.put("/notes/", json={"date": "2025-01-14", "severity": 9})
    assert r.status_code == 422


def test_settings_defaults_and_updates(client):
    r = client.get("/settings/")
    assert r.status_code == 200
    assert r.json() == {"daily_calorie_goal": 2000, "weight_measurement_interval": 3}

    r = client.put("/settings/calorie_goal", json={"daily_calorie_goal": 1800})
    assert r.json()["daily_calorie_goal"] == 1800
    r = client.put("/settings/weight_interval", json={"weight_measurement_interval": 7})
    assert r.json() == {"daily_calorie_goal": 1800, "weight_measurement_interval": 7}

    assert client.put("/settings/calorie_goal", json={"daily_calorie_goal": 0}).status_code == 422


def test_api_key_required_when_configured(client, monkeypatch):
    from fittrack.core.config import settings

    monkeypatch.setattr(settings, "api_key", "secret")

    assert client.get("/meals/").status_code == 401
    assert client.get("/meals/", headers={"X-API-Key": "wrong"}).status_code == 401
    assert client.get("/meals/", headers={"X-API-Key": "secret"}).status_code == 200
    assert client.get("/meals/", headers={"Authorization": "Bearer secret"}).status_code == 200
