"""
Tests for the API client contract.

Most tests stub the server with httpx.MockTransport; the end-to-end class
points the client at the real app through httpx.ASGITransport.
"""

from __future__ import annotations

import json

import httpx
import pytest

from app.client import ApiClient, ApiError
from app.client.api_client import join_url
from app.db import get_db
from app.features.tasks import Task, TaskCreate, TaskStatus, TaskUpdate
from app.main import app

BASE_URL = "http://api.test/api"

TASK_JSON = {
    "id": "3f2b8c1e-9a4d-4e2f-8b7a-1c2d3e4f5a6b",
    "name": "Write report",
    "description": None,
    "status": "UPCOMING",
    "priority": "MEDIUM",
    "assignedToName": None,
    "assignedToAvatar": None,
    "dueDate": None,
    "createdAt": "2024-06-01T10:00:00Z",
    "updatedAt": "2024-06-01T10:00:00Z",
}


def _client(handler) -> ApiClient:
    return ApiClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))


class TestUrl:
    @pytest.mark.parametrize(
        "base_url, endpoint",
        [
            ("http://api.test/api", "/exercises/tasks"),
            ("http://api.test/api/", "/exercises/tasks"),
            ("http://api.test/api", "exercises/tasks"),
            ("http://api.test/api/", "exercises/tasks"),
        ],
    )
    def test_single_separator(self, base_url: str, endpoint: str) -> None:
        assert join_url(base_url, endpoint) == "http://api.test/api/exercises/tasks"


class TestRequest:
    async def test_default_headers_and_override(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.headers)
            return httpx.Response(200, json={})

        async with _client(handler) as api:
            await api.request("/x", headers={"Accept": "text/plain"})

        assert seen["content-type"] == "application/json"
        assert seen["accept"] == "text/plain"

    async def test_returns_parsed_json(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "UP"})

        async with _client(handler) as api:
            assert await api.health() == {"status": "UP"}

    async def test_no_content_returns_none(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            # Body is not JSON; parsing it would fail
            return httpx.Response(204, content=b"")

        async with _client(handler) as api:
            assert await api.request("/exercises/tasks/1", method="DELETE") is None

    async def test_error_uses_message_field(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Task not found"})

        async with _client(handler) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.request("/exercises/tasks/1")

        assert str(exc_info.value) == "Task not found"
        assert exc_info.value.status_code == 404

    async def test_error_falls_back_to_error_field(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"error": "database offline"})

        async with _client(handler) as api:
            with pytest.raises(ApiError, match="database offline"):
                await api.request("/analytics/monthly")

    async def test_non_json_error_uses_status_line(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>bad gateway</html>")

        async with _client(handler) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.request("/health")

        assert exc_info.value.message == "API Error: 502 Bad Gateway"
        assert exc_info.value.body is None

    async def test_validation_error_keeps_body(self) -> None:
        errors = {"errors": [{"name": "Task name is required"}]}

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json=errors)

        async with _client(handler) as api:
            with pytest.raises(ApiError) as exc_info:
                await api.request("/exercises/tasks", method="POST", json={})

        assert exc_info.value.message.startswith("API Error: 422")
        assert exc_info.value.body == errors

    async def test_network_failure_propagates(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as api:
            with pytest.raises(httpx.ConnectError):
                await api.request("/health")


class TestLifecycle:
    async def test_no_connection_until_used(self) -> None:
        api = _client(lambda request: httpx.Response(200, json={}))

        assert not api.is_open

        await api.request("/x")
        assert api.is_open

        await api.aclose()
        assert not api.is_open

    async def test_context_manager_closes(self) -> None:
        async with _client(lambda request: httpx.Response(200, json={})) as api:
            assert api.is_open

        assert not api.is_open

    async def test_reusable_after_close(self) -> None:
        api = _client(lambda request: httpx.Response(200, json={"ok": True}))
        await api.aclose()

        assert await api.request("/x") == {"ok": True}
        await api.aclose()


class TestTypedHelpers:
    async def test_list_tasks_sends_status_and_parses(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            return httpx.Response(200, json=[TASK_JSON])

        async with _client(handler) as api:
            tasks = await api.list_tasks(TaskStatus.UPCOMING)

        assert seen["url"] == f"{BASE_URL}/exercises/tasks?status=UPCOMING"
        assert len(tasks) == 1
        assert isinstance(tasks[0], Task)
        assert tasks[0].name == "Write report"

    async def test_update_sends_only_set_fields(self) -> None:
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={**TASK_JSON, "status": "COMPLETED"})

        async with _client(handler) as api:
            task = await api.update_task(TASK_JSON["id"], TaskUpdate(status=TaskStatus.COMPLETED))

        assert seen == {"method": "PUT", "body": {"status": "COMPLETED"}}
        assert task.status == TaskStatus.COMPLETED


class TestAgainstApp:
    @pytest.fixture
    async def api(self, session_factory):
        async def override_get_db():
            async with session_factory() as session:
                yield session

        app.dependency_overrides[get_db] = override_get_db
        transport = httpx.ASGITransport(app=app)
        async with ApiClient(base_url="http://testserver/api", transport=transport) as client:
            yield client
        app.dependency_overrides.clear()

    async def test_task_lifecycle(self, api) -> None:
        created = await api.create_task(TaskCreate(name="Round trip"))
        assert created.status == TaskStatus.UPCOMING

        fetched = await api.get_task(created.id)
        assert fetched.name == "Round trip"

        assert await api.delete_task(created.id) is None

        with pytest.raises(ApiError) as exc_info:
            await api.get_task(created.id)
        assert exc_info.value.message == "Task not found"
        assert exc_info.value.status_code == 404

    async def test_empty_update_is_bad_request(self, api) -> None:
        created = await api.create_task(TaskCreate(name="Nothing to change"))

        with pytest.raises(ApiError, match="No update data provided"):
            await api.update_task(created.id, TaskUpdate())
