"""Pytest fixtures for Starlikers tests."""

import asyncio
import json
from typing import Any, Callable

import httpx
import pytest

from starlikers.api.models import Credentials
from starlikers.catalog.catalog import ConstellationCatalog
from starlikers.storage.config import APP_ID_ENV, APP_SECRET_ENV, ConfigManager


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials in the environment out of the tests."""
    monkeypatch.delenv(APP_ID_ENV, raising=False)
    monkeypatch.delenv(APP_SECRET_ENV, raising=False)


@pytest.fixture
def credentials() -> Credentials:
    """Test application credentials."""
    return Credentials(app_id="app-id", app_secret="app-secret")


@pytest.fixture
def catalog() -> ConstellationCatalog:
    """Built-in catalog."""
    return ConstellationCatalog()


@pytest.fixture
def config_manager(tmp_path) -> ConfigManager:
    """Config manager in a temporary directory."""
    return ConfigManager(tmp_path / "config").load()


@pytest.fixture
def star_chart_response() -> dict[str, Any]:
    """A successful star chart response."""
    return {"data": {"imageUrl": "https://img.test/ori.png"}}


@pytest.fixture
def moon_response() -> dict[str, Any]:
    """A successful moon phase response."""
    return {"data": {"imageUrl": "https://img.test/moon.png"}}


class RecordingHandler:
    """httpx.MockTransport handler that records requests.

    Replies with the given responses in order; the last one repeats.
    An exception instance in the list is raised instead of replying.
    """

    def __init__(self, *replies: httpx.Response | Exception):
        self.replies = list(replies)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self.replies)) - 1
        reply = self.replies[index]
        if isinstance(reply, Exception):
            raise reply
        return reply

    @property
    def calls(self) -> int:
        return len(self.requests)

    def json_body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture
def make_http_client() -> Callable[[RecordingHandler], httpx.AsyncClient]:
    """Build an httpx client backed by a recording handler."""
    def factory(handler: RecordingHandler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return factory


class FakeTransport:
    """In-memory ChartTransport that records calls.

    Each send() yields to the event loop once, so concurrent callers
    interleave the way real network calls do.
    """

    def __init__(self, *replies: Any):
        self.replies = list(replies)
        self.calls: list[tuple[str, str, Any]] = []
        self.closed = False

    async def send(
        self,
        endpoint_path: str,
        method: str = "GET",
        body: dict[str, Any] | None = None,
    ) -> Any:
        self.calls.append((endpoint_path, method, body))
        await asyncio.sleep(0)
        index = min(len(self.calls), len(self.replies)) - 1
        reply = self.replies[index]
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def close(self) -> None:
        self.closed = True


class FakeClock:
    """Manually advanced clock for cache tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
