"""Tests for the HTTP routes."""
from datetime import date
from typing import Generator

import httpx
import pytest
from fastapi.testclient import TestClient

import core.migrate as migrate
from config.setting import settings
from core.dependencies import get_calendar_adapter, get_storage
from error import MigrationError
from main import app, lifespan
from service.calendar import CalendarExportAdapter
from service.storage import MemStorage

PREFIX = "/api/v1"


def _plan_body(**overrides) -> dict:
    body = {
        "course_name": "Calculus I",
        "exam_date": "2024-06-01",
        "weekly_study_time": 300,
        "study_preference": "short",
        "topics": ["Limits", "Derivatives"],
        "study_materials": ["Stewart ch. 2"],
        "resources": ["Textbook"],
    }
    body.update(overrides)
    return body


def _task_body(plan_id: int, **overrides) -> dict:
    body = {
        "study_plan_id": plan_id,
        "title": "Chain rule drills",
        "date": "2024-03-01",
        "duration": 45,
        "task_type": "practice",
    }
    body.update(overrides)
    return body


class CalendarStub:
    """Swaps the calendar service for a canned handler."""

    def __init__(self) -> None:
        self.handler = lambda request: httpx.Response(200, json={})

    def adapter(self) -> CalendarExportAdapter:
        return CalendarExportAdapter(
            base_url="http://calendar.test",
            transport=httpx.MockTransport(lambda request: self.handler(request)),
        )


@pytest.fixture
def calendar_stub() -> CalendarStub:
    return CalendarStub()


@pytest.fixture
def client(calendar_stub: CalendarStub) -> Generator[TestClient, None, None]:
    storage = MemStorage()
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_calendar_adapter] = calendar_stub.adapter
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _create_plan(client: TestClient, **overrides) -> dict:
    response = client.post(f"{PREFIX}/study-plans", json=_plan_body(**overrides))
    assert response.status_code == 201
    return response.json()


def _offline(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("network down", request=request)


class TestUsers:
    def test_register_hides_password(self, client: TestClient) -> None:
        response = client.post(
            f"{PREFIX}/users", json={"username": "ada", "password": "s3cret"}
        )

        assert response.status_code == 201
        assert response.json() == {"id": 1, "username": "ada"}

    def test_register_duplicate_username(self, client: TestClient) -> None:
        client.post(f"{PREFIX}/users", json={"username": "ada", "password": "a"})
        response = client.post(
            f"{PREFIX}/users", json={"username": "ada", "password": "b"}
        )

        assert response.status_code == 409
        assert response.json()["message"] == "Username already exists"

    def test_lookup(self, client: TestClient) -> None:
        client.post(f"{PREFIX}/users", json={"username": "ada", "password": "a"})

        assert client.get(f"{PREFIX}/users/1").json()["username"] == "ada"
        assert client.get(f"{PREFIX}/users/by-username/ada").json()["id"] == 1

    def test_missing_user(self, client: TestClient) -> None:
        assert client.get(f"{PREFIX}/users/42").status_code == 404
        assert client.get(f"{PREFIX}/users/by-username/nobody").status_code == 404


class TestStudyPlans:
    def test_create_seeds_tasks(self, client: TestClient) -> None:
        plan = _create_plan(client)

        assert plan["id"] == 1
        assert plan["selected_schedule"] == 1
        assert plan["topics_progress"] == {}
        assert plan["created_at"]

        tasks = client.get(f"{PREFIX}/study-plans/{plan['id']}/tasks").json()
        assert [(t["title"], t["task_type"], t["duration"]) for t in tasks] == [
            ("Limits", "study", 60),
            ("Derivatives", "study", 60),
            ("Review Stewart ch. 2", "review", 30),
        ]
        assert {t["date"] for t in tasks} == {date.today().isoformat()}

    def test_create_for_unknown_user(self, client: TestClient) -> None:
        response = client.post(f"{PREFIX}/study-plans", json=_plan_body(user_id=7))

        assert response.status_code == 400
        assert client.get(f"{PREFIX}/study-plans").json() == []

    def test_create_missing_field(self, client: TestClient) -> None:
        body = _plan_body()
        del body["topics"]

        assert client.post(f"{PREFIX}/study-plans", json=body).status_code == 422

    def test_list(self, client: TestClient) -> None:
        _create_plan(client, course_name="A")
        _create_plan(client, course_name="B")

        plans = client.get(f"{PREFIX}/study-plans").json()
        assert [p["course_name"] for p in plans] == ["A", "B"]

    def test_patch_changes_only_given_fields(self, client: TestClient) -> None:
        plan = _create_plan(client)

        response = client.patch(
            f"{PREFIX}/study-plans/{plan['id']}",
            json={"topics_progress": {"Limits": 40}},
        )

        assert response.status_code == 200
        updated = response.json()
        assert updated["topics_progress"] == {"Limits": 40}
        assert updated["course_name"] == plan["course_name"]
        assert updated["created_at"] == plan["created_at"]

    def test_patch_rejects_unknown_field(self, client: TestClient) -> None:
        plan = _create_plan(client)

        response = client.patch(
            f"{PREFIX}/study-plans/{plan['id']}", json={"colour": "blue"}
        )

        assert response.status_code == 422

    def test_patch_rejects_progress_out_of_range(self, client: TestClient) -> None:
        plan = _create_plan(client)

        response = client.patch(
            f"{PREFIX}/study-plans/{plan['id']}",
            json={"topics_progress": {"Limits": 150}},
        )

        assert response.status_code == 422
        assert client.get(f"{PREFIX}/study-plans/{plan['id']}").json()[
            "topics_progress"
        ] == {}

    def test_patch_missing_plan(self, client: TestClient) -> None:
        response = client.patch(f"{PREFIX}/study-plans/9", json={"course_name": "X"})

        assert response.status_code == 404

    def test_delete_keeps_tasks(self, client: TestClient) -> None:
        plan = _create_plan(client)

        response = client.delete(f"{PREFIX}/study-plans/{plan['id']}")
        assert response.status_code == 200
        assert response.json() == {"message": "Study plan deleted successfully"}

        assert client.get(f"{PREFIX}/study-plans/{plan['id']}").status_code == 404
        assert client.delete(f"{PREFIX}/study-plans/{plan['id']}").status_code == 404
        assert len(client.get(f"{PREFIX}/study-plans/{plan['id']}/tasks").json()) == 3


class TestStudyTasks:
    def test_crud(self, client: TestClient) -> None:
        plan = _create_plan(client, topics=[], study_materials=None)

        created = client.post(f"{PREFIX}/study-tasks", json=_task_body(plan["id"]))
        assert created.status_code == 201
        task = created.json()
        assert task["is_completed"] is False

        patched = client.patch(
            f"{PREFIX}/study-tasks/{task['id']}", json={"duration": 90}
        ).json()
        assert patched["duration"] == 90
        assert patched["title"] == task["title"]

        assert client.delete(f"{PREFIX}/study-tasks/{task['id']}").status_code == 200
        assert client.get(f"{PREFIX}/study-tasks/{task['id']}").status_code == 404

    def test_completion_toggle(self, client: TestClient) -> None:
        plan = _create_plan(client, topics=[], study_materials=None)
        task = client.post(
            f"{PREFIX}/study-tasks", json=_task_body(plan["id"])
        ).json()

        done = client.patch(
            f"{PREFIX}/study-tasks/{task['id']}/complete", json={"is_completed": True}
        )
        assert done.json()["is_completed"] is True

        undone = client.patch(
            f"{PREFIX}/study-tasks/{task['id']}/complete", json={"is_completed": False}
        )
        assert undone.json()["is_completed"] is False

    def test_complete_missing_task(self, client: TestClient) -> None:
        response = client.patch(
            f"{PREFIX}/study-tasks/5/complete", json={"is_completed": True}
        )

        assert response.status_code == 404


class TestStudyWeeks:
    def test_create_and_list(self, client: TestClient) -> None:
        plan = _create_plan(client)
        task = client.get(f"{PREFIX}/study-plans/{plan['id']}/tasks").json()[0]

        response = client.post(
            f"{PREFIX}/study-weeks",
            json={
                "study_plan_id": plan["id"],
                "week_start": "2024-03-04",
                "week_end": "2024-03-10",
                "monday_task": task,
            },
        )

        assert response.status_code == 201
        week = response.json()
        assert week["monday_task"] == task
        assert week["friday_task"] is None
        assert client.get(f"{PREFIX}/study-plans/{plan['id']}/weeks").json() == [week]

    def test_create_inverted_range(self, client: TestClient) -> None:
        response = client.post(
            f"{PREFIX}/study-weeks",
            json={
                "study_plan_id": 1,
                "week_start": "2024-03-10",
                "week_end": "2024-03-04",
            },
        )

        assert response.status_code == 422

    def test_patch_inverted_range(self, client: TestClient) -> None:
        week = client.post(
            f"{PREFIX}/study-weeks",
            json={
                "study_plan_id": 1,
                "week_start": "2024-03-04",
                "week_end": "2024-03-10",
            },
        ).json()

        response = client.patch(
            f"{PREFIX}/study-weeks/{week['id']}", json={"week_start": "2024-03-11"}
        )

        assert response.status_code == 422
        assert client.get(f"{PREFIX}/study-weeks/{week['id']}").json() == week

    def test_delete(self, client: TestClient) -> None:
        week = client.post(
            f"{PREFIX}/study-weeks",
            json={
                "study_plan_id": 1,
                "week_start": "2024-03-04",
                "week_end": "2024-03-10",
            },
        ).json()

        assert client.delete(f"{PREFIX}/study-weeks/{week['id']}").status_code == 200
        assert client.delete(f"{PREFIX}/study-weeks/{week['id']}").status_code == 404


class TestCalendar:
    def test_export_needs_authorization(
        self, client: TestClient, calendar_stub: CalendarStub
    ) -> None:
        plan = _create_plan(client)
        calendar_stub.handler = lambda request: httpx.Response(
            401, json={"authUrl": "https://accounts.example/auth"}
        )

        response = client.post(
            f"{PREFIX}/study-plans/{plan['id']}/calendar/export", json={}
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": False,
            "authUrl": "https://accounts.example/auth",
        }

    def test_export_sends_plan_tasks(
        self, client: TestClient, calendar_stub: CalendarStub
    ) -> None:
        plan = _create_plan(client)
        sent = {}

        def handler(request: httpx.Request) -> httpx.Response:
            sent["body"] = request.content
            return httpx.Response(200, json={"success": True, "events": []})

        calendar_stub.handler = handler

        response = client.post(
            f"{PREFIX}/study-plans/{plan['id']}/calendar/export",
            json={"calendar_name": "Finals", "sync_mode": "full"},
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "events": []}
        assert b'"calendarName":"Finals"' in sent["body"].replace(b" ", b"")
        assert sent["body"].count(b'"colorId"') == 3

    def test_export_missing_plan(self, client: TestClient) -> None:
        response = client.post(f"{PREFIX}/study-plans/3/calendar/export", json={})

        assert response.status_code == 404

    def test_export_failure(
        self, client: TestClient, calendar_stub: CalendarStub
    ) -> None:
        plan = _create_plan(client)
        calendar_stub.handler = lambda request: httpx.Response(
            500, json={"message": "Calendar quota exceeded"}
        )

        response = client.post(
            f"{PREFIX}/study-plans/{plan['id']}/calendar/export", json={}
        )

        assert response.status_code == 502
        assert response.json() == {"message": "Calendar quota exceeded"}

    def test_status_degrades_to_false(
        self, client: TestClient, calendar_stub: CalendarStub
    ) -> None:
        calendar_stub.handler = _offline

        response = client.get(f"{PREFIX}/calendar/status")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False}

    def test_auth_url(self, client: TestClient, calendar_stub: CalendarStub) -> None:
        calendar_stub.handler = lambda request: httpx.Response(
            200, json={"url": "https://accounts.example/auth"}
        )

        response = client.get(f"{PREFIX}/calendar/auth-url")

        assert response.json() == {"url": "https://accounts.example/auth"}

    def test_auth_url_unavailable(
        self, client: TestClient, calendar_stub: CalendarStub
    ) -> None:
        calendar_stub.handler = _offline

        response = client.get(f"{PREFIX}/calendar/auth-url")

        assert response.status_code == 502
        assert response.json() == {
            "message": "Could not retrieve Google authentication URL"
        }

    def test_disable_sync(
        self, client: TestClient, calendar_stub: CalendarStub
    ) -> None:
        calendar_stub.handler = lambda request: httpx.Response(200, json={})
        assert client.post(f"{PREFIX}/calendar/disable-sync").status_code == 200

        calendar_stub.handler = _offline
        assert client.post(f"{PREFIX}/calendar/disable-sync").status_code == 502


@pytest.mark.asyncio
async def test_lifespan_builds_memory_storage() -> None:
    async with lifespan(app):
        assert isinstance(app.state.storage, MemStorage)


@pytest.mark.asyncio
async def test_lifespan_aborts_when_migration_fails(monkeypatch, tmp_path) -> None:
    def fail_upgrade(config, revision):
        raise RuntimeError("disk full")

    monkeypatch.setattr(settings, "STORAGE_BACKEND", "sql")
    monkeypatch.setattr(settings, "DATABASE_URL", f"file:{tmp_path / 'app.db'}")
    monkeypatch.setattr(migrate.command, "upgrade", fail_upgrade)
    monkeypatch.delattr(app.state, "storage", raising=False)

    with pytest.raises(MigrationError):
        async with lifespan(app):
            pass

    assert not hasattr(app.state, "storage")
