from fastapi.testclient import TestClient
from sqlalchemy import text


def _exercise_id(client, headers, muscle_group="legs"):
    return client.get("/api/exercises", params={"muscle_group": muscle_group}, headers=headers).json()[0]["id"]


def _create_workout(client, headers, date="2024-01-01", muscle_group="legs"):
    return client.post("/api/workouts", json={"date": date, "muscle_group": muscle_group}, headers=headers)


def test_get_or_create_returns_same_workout_for_natural_key(client: TestClient, user_headers):
    r_first = _create_workout(client, user_headers)
    assert r_first.status_code == 201, r_first.text
    first = r_first.json()
    assert first["completed"] is False
    assert first["sets"] == []

    r_again = _create_workout(client, user_headers)
    assert r_again.status_code == 200
    assert r_again.json()["id"] == first["id"]

    r_other = _create_workout(client, user_headers, muscle_group="back")
    assert r_other.status_code == 201
    assert r_other.json()["id"] != first["id"]


def test_add_sets_in_order(client: TestClient, user_headers):
    workout_id = _create_workout(client, user_headers).json()["id"]
    exercise_id = _exercise_id(client, user_headers)

    r = client.post(
        f"/api/workouts/{workout_id}/sets",
        json={"exercise_id": exercise_id, "reps": 12, "weight": 40.5, "rest_time": 90},
        headers=user_headers,
    )
    assert r.status_code == 201, r.text
    created = r.json()
    assert created["reps"] == 12
    assert created["exercise"]["id"] == exercise_id
    client.post(f"/api/workouts/{workout_id}/sets", json={"exercise_id": exercise_id, "reps": 10}, headers=user_headers)

    workout = client.get(f"/api/workouts/{workout_id}", headers=user_headers).json()
    assert [s["reps"] for s in workout["sets"]] == [12, 10]
    assert workout["sets"][1]["weight"] is None


def test_set_validation(client: TestClient, user_headers):
    workout_id = _create_workout(client, user_headers).json()["id"]
    exercise_id = _exercise_id(client, user_headers)
    url = f"/api/workouts/{workout_id}/sets"

    assert client.post(url, json={"exercise_id": exercise_id, "reps": 0}, headers=user_headers).status_code == 422
    assert client.post(url, json={"exercise_id": exercise_id, "reps": -3}, headers=user_headers).status_code == 422
    assert (
        client.post(url, json={"exercise_id": exercise_id, "reps": 5, "weight": -1}, headers=user_headers).status_code
        == 422
    )
    r_missing = client.post(url, json={"exercise_id": 999999, "reps": 5}, headers=user_headers)
    assert r_missing.status_code == 404
    assert r_missing.json()["code"] == "exercise_not_found"


def test_set_with_foreign_custom_exercise_is_rejected(client: TestClient, register_user):
    owner = register_user("41")
    other = register_user("42")
    exercise_id = client.post("/api/exercises", json={"name": "Secret", "muscle_group": "legs"}, headers=owner).json()["id"]
    workout_id = _create_workout(client, other).json()["id"]

    r = client.post(f"/api/workouts/{workout_id}/sets", json={"exercise_id": exercise_id, "reps": 5}, headers=other)
    assert r.status_code == 404


def test_workouts_are_not_visible_to_other_users(client: TestClient, register_user):
    owner = register_user("51")
    other = register_user("52")
    workout_id = _create_workout(client, owner).json()["id"]

    assert client.get(f"/api/workouts/{workout_id}", headers=other).status_code == 404
    assert client.put(f"/api/workouts/{workout_id}/complete", json={}, headers=other).status_code == 404
    assert client.get("/api/workouts", headers=other).json() == []


def test_complete_updates_stats_once(client: TestClient, user_headers, sync_engine):
    with sync_engine.begin() as connection:
        connection.execute(text("UPDATE user_stats SET current_streak = 2, best_streak = 5, total_workouts = 10"))

    workout_id = _create_workout(client, user_headers).json()["id"]
    exercise_id = _exercise_id(client, user_headers)
    for _ in range(5):
        client.post(f"/api/workouts/{workout_id}/sets", json={"exercise_id": exercise_id, "reps": 8}, headers=user_headers)

    r = client.put(f"/api/workouts/{workout_id}/complete", json={"duration": 45}, headers=user_headers)
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["workout"]["completed"] is True
    assert body["workout"]["duration"] == 45
    assert body["workout"]["completed_at"] is not None
    assert (body["stats"]["current_streak"], body["stats"]["best_streak"], body["stats"]["total_workouts"]) == (3, 5, 11)
    assert body["events"] == [
        {
            "type": "workout_completed",
            "payload": {"muscleGroupLabel": "Ноги", "setCount": 5, "durationMinutes": 45, "date": "2024-01-01"},
        },
        {"type": "stats_update", "payload": {"currentStreak": 3, "bestStreak": 5}},
    ]

    r_again = client.put(f"/api/workouts/{workout_id}/complete", json={"duration": 50}, headers=user_headers)
    assert r_again.status_code == 409
    assert r_again.json()["code"] == "already_completed"

    stats = client.get("/api/stats", headers=user_headers).json()
    assert (stats["current_streak"], stats["best_streak"], stats["total_workouts"]) == (3, 5, 11)
    workout = client.get(f"/api/workouts/{workout_id}", headers=user_headers).json()
    assert workout["duration"] == 45


def test_complete_without_body(client: TestClient, user_headers):
    workout_id = _create_workout(client, user_headers).json()["id"]
    r = client.put(f"/api/workouts/{workout_id}/complete", headers=user_headers)
    assert r.status_code == 200, r.text
    assert r.json()["workout"]["duration"] is None
    assert r.json()["stats"]["best_streak"] == 1


def test_complete_unknown_workout_is_not_found(client: TestClient, user_headers):
    r = client.put("/api/workouts/424242/complete", json={}, headers=user_headers)
    assert r.status_code == 404
    assert r.json()["code"] == "workout_not_found"


def test_sets_cannot_be_added_after_completion(client: TestClient, user_headers):
    workout_id = _create_workout(client, user_headers).json()["id"]
    exercise_id = _exercise_id(client, user_headers)
    client.put(f"/api/workouts/{workout_id}/complete", json={}, headers=user_headers)

    r = client.post(f"/api/workouts/{workout_id}/sets", json={"exercise_id": exercise_id, "reps": 5}, headers=user_headers)
    assert r.status_code == 409


def test_list_filters(client: TestClient, user_headers):
    legs_id = _exercise_id(client, user_headers, "legs")
    chest_id = _exercise_id(client, user_headers, "chest")

    first = _create_workout(client, user_headers, date="2024-01-01").json()["id"]
    second = _create_workout(client, user_headers, date="2024-01-02", muscle_group="chest").json()["id"]
    client.post(f"/api/workouts/{first}/sets", json={"exercise_id": legs_id, "reps": 10}, headers=user_headers)
    client.post(f"/api/workouts/{second}/sets", json={"exercise_id": chest_id, "reps": 12}, headers=user_headers)
    client.post(f"/api/workouts/{second}/sets", json={"exercise_id": legs_id, "reps": 6}, headers=user_headers)
    client.put(f"/api/workouts/{first}/complete", json={}, headers=user_headers)

    all_ids = [w["id"] for w in client.get("/api/workouts", headers=user_headers).json()]
    assert all_ids == [second, first]

    by_date = client.get("/api/workouts", params={"date": "2024-01-02"}, headers=user_headers).json()
    assert [w["id"] for w in by_date] == [second]

    completed = client.get("/api/workouts", params={"completed": "true"}, headers=user_headers).json()
    assert [w["id"] for w in completed] == [first]

    by_exercise = client.get("/api/workouts", params={"exercise_id": chest_id}, headers=user_headers).json()
    assert [w["id"] for w in by_exercise] == [second]
    assert [s["exercise_id"] for s in by_exercise[0]["sets"]] == [chest_id]
