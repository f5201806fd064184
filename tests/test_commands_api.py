"""HTTP tests for the command endpoints using FastAPI's TestClient."""

import asyncio
import inspect
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from command_api.app.api.v1.endpoints import commands
from command_api.app.core.config import Settings
from command_api.app.main import create_app
from command_api.app.services.command_store import CommandStore


@pytest.fixture
def payload() -> Dict[str, Any]:
    return {
        "howTo": "Do Something",
        "platform": "Some Platform",
        "commandLine": "Some CommandLine",
    }


def _create(client: TestClient, payload: Dict[str, Any]) -> Dict[str, Any]:
    response = client.post("/api/v1/commands", json=payload)
    assert response.status_code == 201
    return response.json()


class TestCommandEndpoints:
    def test_list_returns_empty_array(self, client: TestClient) -> None:
        response = client.get("/api/v1/commands")

        assert response.status_code == 200
        assert response.json() == []

    def test_create_returns_201_with_location(self, client: TestClient, payload: Dict[str, Any]) -> None:
        response = client.post("/api/v1/commands", json=payload)

        assert response.status_code == 201
        body = response.json()
        assert body == {"id": 1, **payload}
        assert response.headers["location"].endswith("/api/v1/commands/1")

    def test_create_accepts_snake_case(self, client: TestClient) -> None:
        body = _create(client, {"how_to": "h", "platform": "p", "command_line": "c"})

        assert body["howTo"] == "h"
        assert body["commandLine"] == "c"

    def test_create_rejects_missing_fields(self, client: TestClient, store: CommandStore) -> None:
        response = client.post("/api/v1/commands", json={"platform": "p"})

        assert response.status_code == 422
        assert store.count() == 0

    def test_get_returns_resource(self, client: TestClient, payload: Dict[str, Any]) -> None:
        created = _create(client, payload)

        response = client.get(f"/api/v1/commands/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_returns_404(self, client: TestClient) -> None:
        response = client.get("/api/v1/commands/0")

        assert response.status_code == 404
        assert response.json() == {"detail": "Command not found"}

    def test_put_returns_204(self, client: TestClient, payload: Dict[str, Any]) -> None:
        created = _create(client, payload)

        response = client.put(
            f"/api/v1/commands/{created['id']}",
            json={**created, "howTo": "UPDATED"},
        )

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/api/v1/commands/{created['id']}").json()["howTo"] == "UPDATED"

    def test_put_mismatch_returns_400_and_keeps_record(
        self, client: TestClient, payload: Dict[str, Any]
    ) -> None:
        created = _create(client, payload)

        response = client.put(
            f"/api/v1/commands/{created['id'] + 1}",
            json={**created, "howTo": "UPDATED"},
        )

        assert response.status_code == 400
        assert client.get(f"/api/v1/commands/{created['id']}").json() == created

    def test_put_missing_returns_404(self, client: TestClient, payload: Dict[str, Any]) -> None:
        response = client.put("/api/v1/commands/3", json={"id": 3, **payload})

        assert response.status_code == 404

    def test_delete_returns_deleted_record(
        self, client: TestClient, store: CommandStore, payload: Dict[str, Any]
    ) -> None:
        created = _create(client, payload)

        response = client.delete(f"/api/v1/commands/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created
        assert store.count() == 0

    def test_delete_missing_returns_404(
        self, client: TestClient, store: CommandStore, payload: Dict[str, Any]
    ) -> None:
        _create(client, payload)

        response = client.delete("/api/v1/commands/-1")

        assert response.status_code == 404
        assert store.count() == 1

    @pytest.mark.parametrize("command_id", [99999999999999999999, -99999999999999999999])
    def test_ids_beyond_sqlite_range_are_not_found(
        self, store: CommandStore, payload: Dict[str, Any], command_id: int
    ) -> None:
        client = TestClient(create_app(store=store), raise_server_exceptions=False)
        _create(client, payload)
        path = f"/api/v1/commands/{command_id}"

        assert client.get(path).status_code == 404
        assert client.put(path, json={"id": command_id, **payload}).status_code == 404
        assert client.delete(path).status_code == 404
        assert store.count() == 1


def test_end_to_end_over_http(client: TestClient, payload: Dict[str, Any]) -> None:
    assert _create(client, payload)["id"] == 1
    assert client.get("/api/v1/commands/1").json() == {"id": 1, **payload}

    update = {**payload, "id": 1, "howTo": "UPDATED"}
    assert client.put("/api/v1/commands/1", json=update).status_code == 204
    assert client.get("/api/v1/commands/1").json()["howTo"] == "UPDATED"

    assert client.delete("/api/v1/commands/1").status_code == 200
    assert client.get("/api/v1/commands/1").status_code == 404


def test_custom_prefix(store: CommandStore) -> None:
    client = TestClient(create_app(settings=Settings(api_prefix="/api"), store=store))

    assert client.get("/api/commands").status_code == 200


def test_app_opens_store_from_settings(tmp_path) -> None:
    settings = Settings(database_url=str(tmp_path / "commands.db"))

    with TestClient(create_app(settings=settings)) as client:
        created = client.post(
            "/api/v1/commands",
            json={"howTo": "h", "platform": "p", "commandLine": "c"},
        )
        assert created.status_code == 201

    reopened = CommandStore(settings.database_url)
    try:
        assert reopened.count() == 1
    finally:
        reopened.close()


def test_handlers_run_in_threadpool() -> None:
    for route in commands.router.routes:
        assert not inspect.iscoroutinefunction(route.endpoint), route.name


def test_shutdown_without_startup_is_safe() -> None:
    app = create_app(settings=Settings(database_url=":memory:"))

    assert app.router.on_shutdown
    for handler in app.router.on_shutdown:
        asyncio.run(handler())
