"""Pytest fixtures for Command API tests."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from command_api.app.core.config import Settings
from command_api.app.main import create_app
from command_api.app.schemas.command import CommandCreate
from command_api.app.services.command_service import CommandService
from command_api.app.services.command_store import CommandStore


@pytest.fixture
def store() -> Generator[CommandStore, None, None]:
    """Create an empty in-memory store."""
    command_store = CommandStore(":memory:")
    yield command_store
    command_store.close()


@pytest.fixture
def service(store: CommandStore) -> CommandService:
    return CommandService(store)


@pytest.fixture
def sample_command() -> CommandCreate:
    """The command used throughout the scenarios."""
    return CommandCreate(
        how_to="Do Something",
        platform="Some Platform",
        command_line="Some CommandLine",
    )


@pytest.fixture
def client(store: CommandStore) -> TestClient:
    """HTTP client for an app serving the in-memory store."""
    settings = Settings(database_url=":memory:", api_prefix="/api/v1")
    return TestClient(create_app(settings=settings, store=store))
