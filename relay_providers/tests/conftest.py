"""Shared fixtures for the relay_providers test suite.

Every test runs with provider credentials and the config file variable
removed from the environment, so nothing leaks in from the developer's
shell. HTTP traffic never leaves the process: clients are built on an
``httpx.MockTransport`` whose handler records each request.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Type

import httpx
import pytest

from relay_providers.base.client import ProviderClient
from relay_providers.base.logging import BASE_LOGGER_NAME, LOG_LEVEL_ENV, get_logger
from relay_providers.config import ENV_FIELD_MAP, reset_config_cache
from relay_providers.config.defaults import CONFIG_FILE_ENV
from relay_providers.config.env import ENV_ALIASES, ENV_MAP

# Deliberately not placeholder-shaped (see config.env.is_placeholder).
API_KEY = "sk-relay-0123456789"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Remove provider keys, overrides and the config file pointer."""
    names = set(ENV_MAP.values())
    for aliases in ENV_ALIASES.values():
        names.update(aliases)
    for provider in ENV_MAP:
        names.update(f"{provider.upper()}_{suffix}" for suffix in ENV_FIELD_MAP.values())
    names.add(CONFIG_FILE_ENV)
    for name in names:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


class _RecordingHandler(logging.Handler):
    """Collect the JSON payload of every structured record."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.events: List[Dict[str, Any]] = []
        self.levels: List[int] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            payload = {"event": None, "message": record.getMessage()}
        self.events.append(payload)
        self.levels.append(record.levelno)


@pytest.fixture()
def relay_logs(monkeypatch: pytest.MonkeyPatch):
    """Capture structured events logged under the ``relay`` hierarchy at DEBUG."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    base = get_logger(BASE_LOGGER_NAME)
    handler = _RecordingHandler()
    base.addHandler(handler)
    try:
        yield handler
    finally:
        base.removeHandler(handler)


class Recorder:
    """Mock transport handler that records requests and replays responses."""

    def __init__(self, responses: Sequence[Any]) -> None:
        self._responses = list(responses)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
        if isinstance(item, Exception):
            raise item
        if callable(item):
            return item(request)
        return item

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def json(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


@pytest.fixture()
def make_client():
    """Build ``client_cls`` on a mock transport replaying ``responses``.

    Returns ``(client, recorder)``. ``configure`` may adjust the builder
    before ``build()``.
    """

    def _make(
        client_cls: Type[ProviderClient],
        *responses: Any,
        api_key: str = API_KEY,
        configure: Optional[Callable[[Any], Any]] = None,
    ) -> Tuple[Any, Recorder]:
        recorder = Recorder(responses or [httpx.Response(200, json={})])
        builder = client_cls.builder(api_key).transport(httpx.MockTransport(recorder))
        if configure is not None:
            configure(builder)
        return builder.build(), recorder

    return _make


def sse(*frames: Tuple[Optional[str], Any]) -> bytes:
    """Encode ``(event, data)`` pairs as an SSE body (dicts are JSON-encoded)."""
    lines: List[str] = []
    for event, data in frames:
        if event:
            lines.append(f"event: {event}")
        text = data if isinstance(data, str) else json.dumps(data)
        lines.extend(f"data: {line}" for line in text.split("\n"))
        lines.append("")
    return ("\n".join(lines) + "\n").encode("utf-8")


def sse_response(body: bytes, status: int = 200) -> httpx.Response:
    return httpx.Response(status, headers={"content-type": "text/event-stream"}, content=body)


class DroppingStream(httpx.AsyncByteStream):
    """Body that yields ``chunks`` and then fails like a dropped connection."""

    def __init__(self, chunks: Iterable[bytes]) -> None:
        self._chunks = list(chunks)
        self.closed = False

    async def __aiter__(self):
        for chunk in self._chunks:
            yield chunk
        raise httpx.ReadError("connection reset by peer")

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture()
def sse_helpers():
    """Expose the SSE body helpers to test modules."""
    return type(
        "SSEHelpers",
        (),
        {
            "sse": staticmethod(sse),
            "response": staticmethod(sse_response),
            "DroppingStream": DroppingStream,
        },
    )
