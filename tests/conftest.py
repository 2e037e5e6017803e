"""Shared fixtures for the trip-journal test suite."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from unittest.mock import MagicMock

import httpx
import pytest

from trip_journal.auth import TokenManager
from trip_journal.client import JournalClient
from trip_journal.config import Config, ServerProfile, Settings

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fake_settings() -> Settings:
    return Settings(
        credential_path="./test-credentials.json",
        default_server="local",
        request_timeout=30.0,
        resource_timeout=60.0,
    )


@pytest.fixture
def fake_servers() -> dict[str, ServerProfile]:
    return {
        "local": ServerProfile(base_url="http://localhost:8000/"),
        "staging": ServerProfile(base_url="https://journal.example.com/api"),
    }


@pytest.fixture
def fake_config(fake_settings, fake_servers) -> Config:
    return Config(settings=fake_settings, servers=fake_servers)


@pytest.fixture
def mock_store():
    """MagicMock standing in for a CredentialStore with nothing saved."""
    store = MagicMock()
    store.get.return_value = None
    return store


@pytest.fixture
def tokens(mock_store) -> TokenManager:
    return TokenManager(mock_store, clock=lambda: NOW)


class FakeServer:
    """Routes requests to canned responses and records what was sent."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], object] = {}

    def add(self, method: str, path: str, status: int = 200, json_data=None, content: bytes | None = None) -> None:
        if content is None and json_data is not None:
            content = json.dumps(json_data).encode()
        self.routes[(method, path)] = httpx.Response(status, content=content or b"")

    def add_handler(self, method: str, path: str, handler) -> None:
        self.routes[(method, path)] = handler

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404)
        if isinstance(route, httpx.Response):
            return route
        return await route(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def client(fake_config, tokens, server) -> JournalClient:
    """Client whose transport is the in-process FakeServer."""
    c = JournalClient(fake_config, tokens)
    c._http = httpx.AsyncClient(transport=httpx.MockTransport(server))
    return c
