"""
Tests for task API endpoints.

The app is wired to the in-memory services; the caller is authenticated
with the session cookie that registration sets.
"""

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient


def register(client: TestClient, username: str = "johndoe", email: str = "john.doe@example.com") -> dict:
    response = client.post(
        "/auth/register",
        json={
            "firstName": "John",
            "lastName": "Doe",
            "email": email,
            "username": username,
            "password": "Secret123!",
        },
    )
    assert response.status_code == 201
    return response.json()["user"]


@pytest.fixture
def client(app) -> TestClient:
    """A client holding a session cookie for a freshly registered user."""
    client = TestClient(app)
    register(client)
    return client


@pytest.fixture
def other_client(app) -> TestClient:
    client = TestClient(app)
    register(client, username="intruder", email="intruder@example.com")
    return client


class TestCreateTask:
    """Tests for POST /task"""

    def test_create_task_success(self, client):
        response = client.post("/task", json={"title": "Write docs", "dueDate": "2026-02-20"})

        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "Write docs"
        assert data["dueDate"] == "2026-02-20"
        assert data["isDone"] is False
        assert data["owner"]["username"] == "johndoe"
        assert "passwordHash" not in data["owner"]

    def test_duplicate_is_409(self, client):
        client.post("/task", json={"title": "Write docs", "dueDate": "2026-02-20"})
        response = client.post("/task", json={"title": "Write docs", "dueDate": "2026-02-20"})

        assert response.status_code == 409
        assert response.json()["error"] == "TASK_CONFLICT"

    @pytest.mark.parametrize(
        "body",
        [
            {"title": "ab"},
            {"title": "Write docs", "dueDate": "20-02-2026"},
            {"title": "Write docs", "description": "x" * 301},
            {},
        ],
    )
    def test_invalid_body_is_400(self, client, body):
        response = client.post("/task", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "Validation Error"

    def test_requires_session(self, app):
        response = TestClient(app).post("/task", json={"title": "Write docs"})

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"


class TestListTasks:
    """Tests for GET /task"""

    def test_list_with_filters(self, client):
        client.post("/task", json={"title": "Buy milk"})
        client.post("/task", json={"title": "Walk the dog", "isDone": True})

        response = client.get("/task", params={"isDone": "false"})

        assert response.status_code == 200
        assert [t["title"] for t in response.json()] == ["Buy milk"]

    def test_search_and_dates(self, client):
        client.post("/task", json={"title": "Buy milk", "dueDate": "2026-02-20"})
        client.post("/task", json={"title": "Buy bread", "dueDate": "2026-03-20"})

        response = client.get(
            "/task",
            params={"search": "Buy", "dueDateFrom": "2026-02-01", "dueDateTo": "2026-02-28"},
        )

        assert [t["title"] for t in response.json()] == ["Buy milk"]

    def test_other_users_tasks_are_invisible(self, client, other_client):
        client.post("/task", json={"title": "Mine"})
        assert other_client.get("/task").json() == []


class TestSingleTask:
    def test_get_update_toggle_delete(self, client):
        task_id = client.post("/task", json={"title": "Write docs"}).json()["id"]

        assert client.get(f"/task/{task_id}").json()["title"] == "Write docs"

        updated = client.patch(f"/task/{task_id}", json={"description": "All of it"}).json()
        assert updated["description"] == "All of it"
        assert updated["title"] == "Write docs"

        assert client.patch(f"/task/{task_id}/toggle").json()["isDone"] is True

        deleted = client.delete(f"/task/{task_id}")
        assert deleted.status_code == 200
        assert deleted.json()["id"] == task_id
        assert client.get(f"/task/{task_id}").status_code == 404

    def test_clear_due_date(self, client):
        task_id = client.post("/task", json={"title": "Write docs", "dueDate": "2026-02-20"}).json()["id"]

        response = client.patch(f"/task/{task_id}", json={"dueDate": None})

        assert response.json()["dueDate"] is None

    def test_missing_is_404(self, client):
        response = client.get("/task/does-not-exist")

        assert response.status_code == 404
        assert response.json()["error"] == "TASK_NOT_FOUND"

    @pytest.mark.parametrize("method", ["get", "patch", "delete"])
    def test_malformed_id_is_404(self, client, method):
        kwargs = {"json": {"title": "Renamed"}} if method == "patch" else {}
        response = getattr(client, method)("/task/not-a-uuid", **kwargs)

        assert response.status_code == 404
        assert response.json()["error"] == "TASK_NOT_FOUND"

    def test_toggle_malformed_id_is_404(self, client):
        assert client.patch("/task/not-a-uuid/toggle").status_code == 404

    @pytest.mark.parametrize(
        "method, suffix, body",
        [
            ("get", "", None),
            ("patch", "", {"title": "Hijacked"}),
            ("patch", "/toggle", None),
            ("delete", "", None),
        ],
    )
    def test_other_owner_is_403_without_task_data(self, client, other_client, method, suffix, body):
        task_id = client.post("/task", json={"title": "Secret plans"}).json()["id"]

        kwargs = {"json": body} if body is not None else {}
        response = getattr(other_client, method)(f"/task/{task_id}{suffix}", **kwargs)

        assert response.status_code == 403
        assert "Secret plans" not in response.text
        assert client.get(f"/task/{task_id}").json()["title"] == "Secret plans"


class TestDerivedViews:
    def test_statistics(self, client):
        client.post("/task", json={"title": "One"})
        client.post("/task", json={"title": "Two", "isDone": True})

        data = client.get("/task/statistics").json()

        assert data == {
            "total": 2,
            "completed": 1,
            "pending": 1,
            "overdue": 0,
            "completionRate": 50.0,
        }

    def test_upcoming_and_overdue(self, client, now):
        today = now.date()
        client.post("/task", json={"title": "Soon", "dueDate": (today + timedelta(days=3)).isoformat()})
        client.post("/task", json={"title": "Much later", "dueDate": (today + timedelta(days=10)).isoformat()})
        client.post("/task", json={"title": "Late", "dueDate": (today - timedelta(days=1)).isoformat()})

        assert [t["title"] for t in client.get("/task/upcoming").json()] == ["Soon"]
        assert [t["title"] for t in client.get("/task/upcoming", params={"days": 30}).json()] == [
            "Soon",
            "Much later",
        ]
        assert [t["title"] for t in client.get("/task/overdue").json()] == ["Late"]

    def test_upcoming_rejects_non_integer_days(self, client):
        assert client.get("/task/upcoming", params={"days": "soon"}).status_code == 400
