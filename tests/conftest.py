"""Shared test fixtures for the Agent Score MCP test suite."""

import json
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from pathlib import Path
from typing import Any

import httpx
import pytest

from agent_score_mcp.client.config import ClientConfig, ConfigStore
from agent_score_mcp.client.executor import RequestExecutor

WALLET = "0xAAAAaaaaAAAAaaaaAAAAaaaaAAAAaaaa11111111"
TX_HASH = "0x" + "ab" * 32

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


def json_response(status_code: int, data: Any) -> httpx.Response:
    """Build a response with a JSON body and content type."""
    return httpx.Response(
        status_code,
        content=json.dumps(data).encode(),
        headers={"content-type": "application/json; charset=utf-8"},
    )


class RecordingUpstream:
    """Scripted upstream that records every request it receives."""

    def __init__(self, handler: Handler) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def config_store() -> ConfigStore:
    """Config store pointing at a fake upstream."""
    return ConfigStore(ClientConfig(base_url="https://api.example", timeout_ms=1000))


@pytest.fixture
async def make_executor(
    config_store: ConfigStore,
) -> AsyncGenerator[Callable[[Handler], tuple[RequestExecutor, RecordingUpstream]], None]:
    """Factory fixture creating executors backed by a scripted upstream.

    Usage:
        async def test_something(make_executor):
            executor, upstream = make_executor(lambda request: httpx.Response(200))
    """
    executors: list[RequestExecutor] = []

    def _make(handler: Handler) -> tuple[RequestExecutor, RecordingUpstream]:
        upstream = RecordingUpstream(handler)
        executor = RequestExecutor(config_store, transport=httpx.MockTransport(upstream))
        executors.append(executor)
        return executor, upstream

    yield _make

    for executor in executors:
        await executor.aclose()


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove process configuration variables that would leak into tests."""
    for name in (
        "DJD_BASE_URL",
        "DJD_TIMEOUT_MS",
        "DJD_TRANSPORT",
        "DJD_PORT",
        "DJD_HOST",
        "DJD_MCP_PATH",
        "DJD_ENV",
        "DJD_CONFIG_DIR",
        "TRANSPORT",
        "PORT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache and TOML source before and after each test."""
    from agent_score_mcp.config import get_settings
    from agent_score_mcp.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})
