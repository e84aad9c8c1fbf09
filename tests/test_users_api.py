from datetime import datetime

from beanie.exceptions import CollectionWasNotInitialized

from app.dependencies import get_store
from app.models.mongodb import UserDocument
from app.services.store import MongoStore
from app.utils.dates import format_date_string, utcnow
from main import app


def test_create_user_form(client):
    r = client.post("/api/users", data={"username": "fcc_test"})
    assert r.status_code == 200
    body = r.json()
    assert list(body) == ["username", "_id"]
    assert body["username"] == "fcc_test"
    assert body["_id"]


def test_create_user_json(client):
    r = client.post("/api/users", json={"username": "json_user"})
    assert r.status_code == 200
    assert r.json()["username"] == "json_user"


def test_create_user_missing_username(client, store):
    r = client.post("/api/users", data={})
    assert r.status_code == 400
    assert r.json() == {"error": "Username is required"}
    r = client.post("/api/users", json={"username": ""})
    assert r.status_code == 400
    assert store.users == {}


def test_create_user_malformed_json(client):
    r = client.post(
        "/api/users",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert r.status_code == 400


def test_list_users(client):
    client.post("/api/users", data={"username": "a"})
    client.post("/api/users", data={"username": "b"})
    r = client.get("/api/users")
    assert r.status_code == 200
    users = r.json()
    assert [u["username"] for u in users] == ["a", "b"]
    assert all(list(u) == ["_id", "username"] for u in users)


def test_list_users_store_failure(failing_client):
    r = failing_client.get("/api/users")
    assert r.status_code == 500
    assert r.json()["error"].startswith("Database error")


def test_add_exercise(client, user_id):
    r = client.post(
        f"/api/users/{user_id}/exercises",
        data={"description": "test", "duration": "60", "date": "1990-01-01"},
    )
    assert r.status_code == 200
    body = r.json()
    assert list(body) == ["username", "description", "duration", "date", "_id"]
    assert body == {
        "username": "fcc_test",
        "description": "test",
        "duration": 60,
        "date": "Mon Jan 01 1990",
        "_id": user_id,
    }


def test_add_exercise_json_number_duration(client, user_id):
    r = client.post(
        f"/api/users/{user_id}/exercises",
        json={"description": "run", "duration": 30},
    )
    assert r.status_code == 200
    assert r.json()["duration"] == 30


def test_add_exercise_defaults_date_to_today(client, user_id):
    r = client.post(
        f"/api/users/{user_id}/exercises",
        data={"description": "swim", "duration": "20"},
    )
    assert r.status_code == 200
    assert r.json()["date"] == format_date_string(utcnow())


def test_add_exercise_missing_fields(client, user_id, store):
    r = client.post(f"/api/users/{user_id}/exercises", data={"description": "x"})
    assert r.status_code == 400
    assert r.json() == {"error": "Description and duration are required fields."}
    r = client.post(f"/api/users/{user_id}/exercises", data={"duration": "10"})
    assert r.status_code == 400
    assert store.exercises == []


def test_add_exercise_invalid_duration(client, user_id):
    r = client.post(
        f"/api/users/{user_id}/exercises",
        data={"description": "x", "duration": "ten"},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "Duration must be a number."}


def test_add_exercise_invalid_date(client, user_id):
    r = client.post(
        f"/api/users/{user_id}/exercises",
        data={"description": "x", "duration": "10", "date": "not a date"},
    )
    assert r.status_code == 400


def test_add_exercise_unknown_user(client):
    r = client.post(
        "/api/users/5fb5853f734231456ccb3b05/exercises",
        data={"description": "x", "duration": "10"},
    )
    assert r.status_code == 404
    assert r.json() == {"error": "Could not find user"}


def test_add_exercise_store_failure(failing_client):
    r = failing_client.post(
        "/api/users/5fb5853f734231456ccb3b05/exercises",
        data={"description": "x", "duration": "10"},
    )
    assert r.status_code == 500
    assert "connection refused" in r.json()["error"]


def test_logs_single_exercise(client, user_id):
    client.post(
        f"/api/users/{user_id}/exercises",
        data={"description": "pushups", "duration": "15", "date": "2024-01-01"},
    )
    r = client.get(f"/api/users/{user_id}/logs")
    assert r.status_code == 200
    body = r.json()
    assert list(body) == ["username", "count", "_id", "log"]
    assert body["username"] == "fcc_test"
    assert body["_id"] == user_id
    assert body["count"] == 1
    assert body["log"] == [
        {"description": "pushups", "duration": 15, "date": "Mon Jan 01 2024"}
    ]
    assert isinstance(body["log"][0]["duration"], int)


def test_logs_limit(client, user_id):
    for i in range(5):
        client.post(
            f"/api/users/{user_id}/exercises",
            data={"description": f"ex{i}", "duration": "10"},
        )
    r = client.get(f"/api/users/{user_id}/logs", params={"limit": "2"})
    body = r.json()
    assert body["count"] == 2
    assert len(body["log"]) == 2

    r = client.get(f"/api/users/{user_id}/logs", params={"limit": "abc"})
    assert r.json()["count"] == 5


def test_logs_date_range(client, user_id):
    for day in ("2024-01-01", "2024-02-01", "2024-03-01"):
        client.post(
            f"/api/users/{user_id}/exercises",
            data={"description": day, "duration": "10", "date": day},
        )
    r = client.get(
        f"/api/users/{user_id}/logs",
        params={"from": "2024-01-15", "to": "2024-02-15"},
    )
    body = r.json()
    assert body["count"] == 1
    assert body["log"][0]["description"] == "2024-02-01"
    assert body["log"][0]["date"] == "Thu Feb 01 2024"


def test_logs_bounds_are_inclusive(client, user_id):
    for day in ("2024-01-01", "2024-02-01"):
        client.post(
            f"/api/users/{user_id}/exercises",
            data={"description": day, "duration": "10", "date": day},
        )
    r = client.get(
        f"/api/users/{user_id}/logs",
        params={"from": "2024-01-01", "to": "2024-02-01"},
    )
    assert r.json()["count"] == 2


def test_logs_malformed_dates_ignored(client, user_id):
    client.post(
        f"/api/users/{user_id}/exercises",
        data={"description": "x", "duration": "10", "date": "2024-01-01"},
    )
    r = client.get(f"/api/users/{user_id}/logs", params={"from": "garbage"})
    assert r.json()["count"] == 1


def test_logs_only_include_own_exercises(client, user_id):
    other = client.post("/api/users", data={"username": "other"}).json()["_id"]
    client.post(
        f"/api/users/{other}/exercises",
        data={"description": "x", "duration": "10"},
    )
    r = client.get(f"/api/users/{user_id}/logs")
    assert r.json()["count"] == 0
    assert r.json()["log"] == []


def test_logs_unknown_user(client):
    r = client.get("/api/users/5fb5853f734231456ccb3b05/logs")
    assert r.status_code == 404
    r = client.get("/api/users/not-an-id/logs")
    assert r.status_code == 404


def test_logged_date_round_trips(client, user_id):
    client.post(
        f"/api/users/{user_id}/exercises",
        data={"description": "x", "duration": "10", "date": "2023-07-14"},
    )
    logged = client.get(f"/api/users/{user_id}/logs").json()["log"][0]["date"]
    assert datetime.strptime(logged, "%a %b %d %Y").date().isoformat() == "2023-07-14"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_index_page(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "Exercise tracker" in r.text


def test_add_exercise_json_float_duration(client, user_id):
    r = client.post(
        f"/api/users/{user_id}/exercises",
        json={"description": "run", "duration": 2.5},
    )
    assert r.status_code == 200
    assert r.json()["duration"] == 2


def test_add_exercise_duration_out_of_range(client, user_id, store):
    r = client.post(
        f"/api/users/{user_id}/exercises",
        data={"description": "run", "duration": "99999999999999999999"},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "Duration is out of range."}
    assert store.exercises == []


def test_add_exercise_accepts_response_date_format(client, user_id):
    r = client.post(
        f"/api/users/{user_id}/exercises",
        data={"description": "x", "duration": "10", "date": "Mon Jan 01 2024"},
    )
    assert r.status_code == 200
    assert r.json()["date"] == "Mon Jan 01 2024"


def test_logs_filter_accepts_response_date_format(client, user_id):
    for day in ("2024-01-01", "2024-02-01", "2024-03-01"):
        client.post(
            f"/api/users/{user_id}/exercises",
            data={"description": day, "duration": "10", "date": day},
        )
    r = client.get(f"/api/users/{user_id}/logs", params={"from": "Thu Feb 01 2024"})
    body = r.json()
    assert body["count"] == 2
    assert [e["date"] for e in body["log"]] == ["Thu Feb 01 2024", "Fri Mar 01 2024"]


def test_logs_negative_limit(client, user_id):
    for i in range(3):
        client.post(
            f"/api/users/{user_id}/exercises",
            data={"description": f"ex{i}", "duration": "10"},
        )
    r = client.get(f"/api/users/{user_id}/logs", params={"limit": "-2"})
    assert r.json()["count"] == 2


def test_logs_store_failure(failing_client):
    r = failing_client.get("/api/users/5fb5853f734231456ccb3b05/logs")
    assert r.status_code == 500
    assert r.json() == {"error": "Database error: connection refused"}


def test_unconfigured_database_returns_500(client, monkeypatch):
    def not_initialized(*args, **kwargs):
        raise CollectionWasNotInitialized()

    monkeypatch.setattr(UserDocument, "find_all", not_initialized)
    app.dependency_overrides[get_store] = MongoStore

    r = client.get("/api/users")
    assert r.status_code == 500
    assert r.json()["error"].startswith("Could not retrieve users")
