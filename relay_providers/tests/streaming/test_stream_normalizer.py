"""Stream lifecycle: ordered deltas, exactly one terminal event, failures surfaced last."""

from __future__ import annotations

import json
import logging

import httpx
import pytest

from relay_providers.base.errors import ErrorCode, ProviderError, RequestError, StreamError
from relay_providers.base.streaming import (
    END_OF_STREAM,
    StreamEvent,
    StreamFrame,
    StreamingCompletionResponse,
    frame_json,
    open_stream,
)
from relay_providers.openai import OpenAIClient

SSE = {"content-type": "text/event-stream"}


def translate(frame: StreamFrame):
    """Minimal translator: ``{"t": ...}`` text, ``{"u": {...}}`` usage, ``end``, ``{"err": ...}``."""
    if frame.data == "end":
        yield END_OF_STREAM
        return
    doc = frame_json(frame, provider="fake", model="m")
    if "err" in doc:
        raise ProviderError(code=ErrorCode.RATE_LIMIT, message=doc["err"], provider="fake", model="m")
    if "u" in doc:
        yield StreamEvent(provider="fake", model="m", usage=doc["u"])
    if "t" in doc:
        yield StreamEvent(provider="fake", model="m", delta=doc["t"])


def _stream(response: httpx.Response, **kwargs) -> StreamingCompletionResponse:
    return StreamingCompletionResponse(response, provider="fake", model="m", translator=translate, **kwargs)


def _chunk(data) -> bytes:
    text = data if isinstance(data, str) else json.dumps(data)
    return f"data: {text}\n\n".encode()


@pytest.mark.asyncio
async def test_a_b_terminal_in_order_exactly_once():
    body = _chunk({"t": "A"}) + _chunk({"t": "B"}) + _chunk("end") + _chunk({"t": "ignored"})
    events = [e async for e in _stream(httpx.Response(200, headers=SSE, content=body))]
    assert [e.delta for e in events[:-1]] == ["A", "B"]  # nosec B101
    final = events[-1]
    assert final.finish and final.error is None and final.kind == "final"  # nosec B101
    assert sum(1 for e in events if e.finish) == 1  # nosec B101


@pytest.mark.asyncio
async def test_connection_drop_after_a_is_failure(sse_helpers):
    body = sse_helpers.DroppingStream([_chunk({"t": "A"})])
    stream = _stream(httpx.Response(200, headers=SSE, stream=body))
    events = [e async for e in stream]
    assert [e.delta for e in events[:-1]] == ["A"]  # nosec B101
    final = events[-1]
    assert final.finish and final.is_error()  # nosec B101
    assert final.error_code == ErrorCode.TRANSIENT.value  # nosec B101
    assert final.error.startswith("transient:")  # nosec B101
    assert body.closed and stream.closed  # nosec B101


@pytest.mark.asyncio
async def test_undecodable_chunk_is_failure_terminal():
    body = _chunk({"t": "A"}) + _chunk("{oops") + _chunk({"t": "B"}) + _chunk("end")
    events = [e async for e in _stream(httpx.Response(200, headers=SSE, content=body))]
    assert [e.delta for e in events[:-1]] == ["A"]  # nosec B101
    assert events[-1].error_code == "decode"  # nosec B101


@pytest.mark.asyncio
async def test_provider_error_event_is_failure_terminal():
    body = _chunk({"t": "A"}) + _chunk({"err": "slow down"})
    events = [e async for e in _stream(httpx.Response(200, headers=SSE, content=body))]
    assert events[-1].error == "rate_limit:slow down"  # nosec B101


@pytest.mark.asyncio
async def test_eof_without_end_signal():
    body = _chunk({"t": "A"})
    strict = [e async for e in _stream(httpx.Response(200, headers=SSE, content=body))]
    assert strict[-1].error == "stream:stream closed before end-of-stream signal"  # nosec B101

    lenient = [
        e async for e in _stream(httpx.Response(200, headers=SSE, content=body), requires_end_signal=False)
    ]
    assert lenient[-1].finish and lenient[-1].error is None  # nosec B101


@pytest.mark.asyncio
async def test_long_error_messages_are_truncated():
    body = _chunk({"err": "x" * 1000})
    events = [e async for e in _stream(httpx.Response(200, headers=SSE, content=body))]
    assert events[-1].error == "rate_limit:" + "x" * 260  # nosec B101


@pytest.mark.asyncio
async def test_second_iteration_is_rejected():
    stream = _stream(httpx.Response(200, headers=SSE, content=_chunk("end")))
    assert len([e async for e in stream]) == 1  # nosec B101
    with pytest.raises(StreamError) as info:
        async for _ in stream:
            pass
    assert info.value.message == "stream already consumed"  # nosec B101


@pytest.mark.asyncio
async def test_usage_only_events_feed_metrics_and_final():
    body = _chunk({"u": {"prompt": 12}}) + _chunk({"t": "hi"}) + _chunk({"u": {"completion": 3}}) + _chunk("end")
    stream = _stream(httpx.Response(200, headers=SSE, content=body))
    events = [e async for e in stream]
    assert [e.kind for e in events] == ["text", "final"]  # nosec B101
    assert events[-1].usage == {"prompt": 12, "completion": 3, "total": 15}  # nosec B101
    assert stream.metrics.emitted == 1 and stream.final is events[-1]  # nosec B101
    assert stream.metrics.time_to_first_token_ms is not None  # nosec B101


@pytest.mark.asyncio
async def test_abandoning_releases_connection(sse_helpers):
    body = sse_helpers.DroppingStream([_chunk({"t": "A"}), _chunk({"t": "B"})])
    async with _stream(httpx.Response(200, headers=SSE, stream=body)) as stream:
        async for event in stream:
            assert event.delta == "A"  # nosec B101
            break
    assert stream.closed and body.closed  # nosec B101


@pytest.mark.asyncio
async def test_collect_accumulates_text_and_status():
    body = _chunk({"t": "Hel"}) + _chunk({"t": "lo"}) + _chunk("end")
    result = await _stream(httpx.Response(200, headers=SSE, content=body)).collect()
    assert result.text == "Hello"  # nosec B101
    assert result.meta.http_status == 200 and result.meta.extra["stream_events"] == 3  # nosec B101
    assert "stream_error" not in result.meta.extra  # nosec B101


@pytest.mark.asyncio
async def test_stream_logs_start_and_error(relay_logs):
    body = _chunk({"t": "A"})
    [e async for e in _stream(httpx.Response(200, headers=SSE, content=body))]
    names = [e.get("event") for e in relay_logs.events]
    assert "stream.start" in names and "stream.error" in names  # nosec B101
    error_level = relay_logs.levels[names.index("stream.error")]
    assert error_level == logging.WARNING  # nosec B101
    payload = relay_logs.events[names.index("stream.error")]
    assert payload["phase"] == "finalize" and payload["error_code"] == "stream"  # nosec B101


@pytest.mark.asyncio
async def test_open_stream_non_2xx_raises_before_streaming():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": {"message": "Rate limit reached", "type": "requests"}})

    client = OpenAIClient.builder("sk-x1").transport(httpx.MockTransport(handler)).build()
    request = client.post_sse("/chat/completions", json={"stream": True})
    with pytest.raises(RequestError) as info:
        await open_stream(client, request, model="gpt-4o", translator=translate)
    assert info.value.status_code == 429 and info.value.code is ErrorCode.RATE_LIMIT  # nosec B101
    assert info.value.message == "Rate limit reached"  # nosec B101
