from __future__ import annotations

import asyncio
import types

import httpx

from relay_providers.base.errors import (
    RETRYABLE_CODES,
    ConfigurationError,
    DecodeError,
    ErrorCode,
    ProviderError,
    RequestError,
    StreamError,
    UnsupportedCapabilityError,
    classify_exception,
    code_for_status,
)


def test_classify_provider_error_passthrough():
    e = DecodeError("bad chunk", "gemini")
    assert classify_exception(e) is ErrorCode.DECODE  # nosec B101 - assert is appropriate in unit tests


def test_classify_timeouts_and_transport_failures():
    assert classify_exception(asyncio.TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ReadTimeout("slow")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ReadError("reset")) is ErrorCode.TRANSIENT  # nosec B101
    assert classify_exception(httpx.RemoteProtocolError("peer closed")) is ErrorCode.TRANSIENT  # nosec B101


def test_classify_http_status_mapping():
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=429))
    assert classify_exception(e2) is ErrorCode.RATE_LIMIT  # nosec B101


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(Exception("model overloaded")) is ErrorCode.UNAVAILABLE  # nosec B101
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101


def test_code_for_status():
    assert code_for_status(401) is ErrorCode.AUTH  # nosec B101
    assert code_for_status(529) is ErrorCode.SERVER_ERROR  # nosec B101
    assert code_for_status(418) is ErrorCode.UNKNOWN  # nosec B101
    assert ErrorCode.RATE_LIMIT in RETRYABLE_CODES and ErrorCode.AUTH not in RETRYABLE_CODES  # nosec B101


def test_taxonomy_shares_root_type():
    errors = [
        ConfigurationError("missing_api_key", "anthropic"),
        RequestError("HTTP 500", "openai", code=ErrorCode.SERVER_ERROR, status_code=500),
        DecodeError("bad", "gemini"),
        StreamError("dropped", "together"),
        UnsupportedCapabilityError("embeddings", "anthropic"),
    ]
    assert all(isinstance(e, ProviderError) for e in errors)  # nosec B101
    assert [e.code for e in errors] == [  # nosec B101
        ErrorCode.CONFIGURATION,
        ErrorCode.SERVER_ERROR,
        ErrorCode.DECODE,
        ErrorCode.STREAM,
        ErrorCode.UNSUPPORTED,
    ]
    assert str(errors[0]) == "[anthropic] configuration: missing_api_key"  # nosec B101
    assert errors[1].log_fields() == {  # nosec B101
        "error_code": "server_error",
        "status": 500,
        "retryable": False,
        "error": "HTTP 500",
    }
