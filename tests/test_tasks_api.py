from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from pydantic import TypeAdapter

_datetime = TypeAdapter(datetime)


def _ts(value: str) -> datetime:
    return _datetime.validate_python(value)


def _post(client: TestClient, title: str, day: str = "monday", week: str = "2024-01-07", tags: str = ""):
    resp = client.post(
        "/api/tasks",
        json={"title": title, "dayOfWeek": day, "weekDate": week, "tags": tags},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_list_is_an_empty_array(client: TestClient) -> None:
    resp = client.get("/api/tasks")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_task(client: TestClient) -> None:
    resp = client.post(
        "/api/tasks",
        json={"title": "Buy milk", "dayOfWeek": "monday", "weekDate": "2024-01-07", "tags": "errand"},
    )
    assert resp.status_code == 201
    body = resp.json()

    assert isinstance(body["id"], int)
    assert body["title"] == "Buy milk"
    assert body["completed"] is False
    assert body["dayOfWeek"] == "monday"
    assert body["weekDate"] == "2024-01-07"
    assert body["tags"] == "errand"
    assert _ts(body["createdAt"]) == _ts(body["updatedAt"])
    assert set(body) == {"id", "title", "completed", "dayOfWeek", "weekDate", "tags", "createdAt", "updatedAt"}


def test_create_without_tags_stores_empty_string(client: TestClient) -> None:
    resp = client.post("/api/tasks", json={"title": "x", "dayOfWeek": "friday", "weekDate": "2024-01-07"})
    assert resp.status_code == 201
    assert resp.json()["tags"] == ""


def test_create_with_empty_title_is_rejected(client: TestClient) -> None:
    resp = client.post(
        "/api/tasks",
        json={"title": "", "dayOfWeek": "monday", "weekDate": "2024-01-07", "tags": ""},
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Title, dayOfWeek, and weekDate are required"
    assert client.get("/api/tasks").json() == []


def test_create_with_missing_week_is_rejected(client: TestClient) -> None:
    resp = client.post("/api/tasks", json={"title": "x", "dayOfWeek": "monday"})
    assert resp.status_code == 400


def test_malformed_body_is_a_bad_request(client: TestClient) -> None:
    resp = client.post(
        "/api/tasks",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400


def test_update_is_a_full_overwrite(client: TestClient) -> None:
    created = _post(client, "Buy milk", tags="errand,shop")

    resp = client.put(
        f"/api/tasks/{created['id']}",
        json={
            "title": "Buy oat milk",
            "completed": True,
            "dayOfWeek": "thursday",
            "weekDate": "2024-01-14",
            "tags": "",
        },
    )
    assert resp.status_code == 200
    body = resp.json()

    assert body["id"] == created["id"]
    assert body["title"] == "Buy oat milk"
    assert body["completed"] is True
    assert body["dayOfWeek"] == "thursday"
    assert body["weekDate"] == "2024-01-14"
    assert body["tags"] == ""
    assert _ts(body["createdAt"]) == _ts(created["createdAt"])
    assert _ts(body["updatedAt"]) > _ts(created["updatedAt"])


def test_update_unknown_id_is_not_found(client: TestClient) -> None:
    resp = client.put(
        "/api/tasks/99999",
        json={"title": "x", "completed": False, "dayOfWeek": "monday", "weekDate": "2024-01-07", "tags": ""},
    )
    assert resp.status_code == 404
    assert client.get("/api/tasks").json() == []


def test_invalid_id_is_a_bad_request(client: TestClient) -> None:
    payload = {"title": "x", "completed": False, "dayOfWeek": "monday", "weekDate": "2024-01-07", "tags": ""}
    assert client.put("/api/tasks/abc", json=payload).status_code == 400
    resp = client.delete("/api/tasks/abc")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid task ID"


@pytest.mark.parametrize("raw", ["1_0", "%205", "5x", "99999999999999999999", "-99999999999999999999"])
def test_loose_or_oversized_ids_are_bad_requests(client: TestClient, raw: str) -> None:
    for i in range(10):
        _post(client, f"task {i}")
    payload = {"title": "x", "completed": False, "dayOfWeek": "monday", "weekDate": "2024-01-07", "tags": ""}

    assert client.delete(f"/api/tasks/{raw}").status_code == 400
    assert client.put(f"/api/tasks/{raw}", json=payload).status_code == 400
    assert len(client.get("/api/tasks").json()) == 10


def test_signed_ids_in_range_reach_the_store(client: TestClient) -> None:
    created = _post(client, "signed")

    assert client.delete("/api/tasks/9223372036854775807").status_code == 404
    assert client.delete("/api/tasks/-1").status_code == 404
    assert client.delete(f"/api/tasks/+{created['id']}").status_code == 200


def test_delete_twice(client: TestClient) -> None:
    created = _post(client, "temp")

    first = client.delete(f"/api/tasks/{created['id']}")
    assert first.status_code == 200
    assert first.json() == {"message": "Task deleted successfully"}

    second = client.delete(f"/api/tasks/{created['id']}")
    assert second.status_code == 404


def test_list_order_and_week_filter(client: TestClient) -> None:
    _post(client, "tue", day="tuesday")
    _post(client, "mon 1", day="monday")
    _post(client, "mon 2", day="monday")
    _post(client, "next week", day="monday", week="2024-01-14")

    titles = [t["title"] for t in client.get("/api/tasks").json()]
    assert titles == ["mon 1", "mon 2", "next week", "tue"]

    week = client.get("/api/tasks/week/2024-01-07").json()
    assert [t["title"] for t in week] == ["mon 1", "mon 2", "tue"]
    assert client.get("/api/tasks/week/2024-01").json() == []


def test_today_endpoints_use_the_configured_timezone(client: TestClient) -> None:
    # frozen clock: Monday 2024-01-08 in Los Angeles, week 2024-01-07
    _post(client, "today", day="monday", week="2024-01-07")
    _post(client, "later this week", day="wednesday", week="2024-01-07")
    _post(client, "last week monday", day="monday", week="2023-12-31")

    today = client.get("/api/tasks/today")
    assert today.status_code == 200
    assert [t["title"] for t in today.json()] == ["today"]

    this_week = client.get("/api/tasks/today/week").json()
    assert [t["title"] for t in this_week] == ["today", "later this week"]


def test_cors_preflight(client: TestClient) -> None:
    resp = client.options(
        "/api/tasks",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert resp.headers["access-control-allow-credentials"] == "true"

    extra = client.options(
        "/api/tasks",
        headers={"Origin": "https://tasks.example.com", "Access-Control-Request-Method": "DELETE"},
    )
    assert extra.status_code == 200

    denied = client.options(
        "/api/tasks",
        headers={"Origin": "https://evil.example.org", "Access-Control-Request-Method": "GET"},
    )
    assert "access-control-allow-origin" not in denied.headers
