"""Structural success/error decoding of non-streaming JSON bodies."""

from __future__ import annotations

from typing import List, Optional

import httpx
import pytest
from pydantic import BaseModel

from relay_providers.base.errors import DecodeError, ErrorCode, RequestError
from relay_providers.base.response import (
    ApiErrorResponse,
    ApiResponse,
    decode_api_response,
    error_message_from_body,
    read_api_response,
)


class Completion(BaseModel):
    id: str
    choices: List[str]
    model: Optional[str] = None


def test_message_document_decodes_to_error_variant():
    result = decode_api_response({"message": "bad key"}, Completion, provider="p")
    assert not result.is_ok  # nosec B101
    assert result.error == ApiErrorResponse(message="bad key")  # nosec B101


def test_success_with_unrelated_message_field_stays_success():
    doc = {"id": "c1", "choices": ["hi"], "message": "irrelevant"}
    result = decode_api_response(doc, Completion, provider="p")
    assert result.is_ok  # nosec B101
    assert result.value.id == "c1"  # nosec B101


def test_partial_success_shape_is_not_accepted():
    # Missing required ``choices``: must not be coerced into a malformed success.
    result = decode_api_response({"id": "c1", "message": "quota exceeded"}, Completion, provider="p")
    assert not result.is_ok and result.error.message == "quota exceeded"  # nosec B101


@pytest.mark.parametrize(
    "doc, message, kind",
    [
        ({"error": {"message": "overloaded", "type": "overloaded_error"}}, "overloaded", "overloaded_error"),
        ({"error": {"code": 400, "message": "API key not valid", "status": "INVALID_ARGUMENT"}}, "API key not valid", "INVALID_ARGUMENT"),
        ({"error": "model not found"}, "model not found", None),
    ],
)
def test_nested_error_envelopes_are_lifted(doc, message, kind):
    result = decode_api_response(doc, Completion, provider="p")
    assert result.error.message == message and result.error.type == kind  # nosec B101


def test_neither_shape_is_decode_error():
    with pytest.raises(DecodeError) as info:
        decode_api_response({"unexpected": True}, Completion, provider="p", model="m")
    assert info.value.code is ErrorCode.DECODE and info.value.model == "m"  # nosec B101


def test_unwrap_error_variant_raises_request_error():
    result = decode_api_response({"message": "bad key"}, Completion, provider="p")
    with pytest.raises(RequestError) as info:
        result.unwrap("p", status_code=200)
    assert info.value.message == "bad key"  # nosec B101


def test_unwrap_empty_envelope_is_decode_error():
    with pytest.raises(DecodeError) as info:
        ApiResponse().unwrap("p", model="m")
    assert info.value.provider == "p" and info.value.model == "m"  # nosec B101


def test_read_non_2xx_uses_envelope_message():
    response = httpx.Response(401, json={"error": {"message": "invalid x-api-key", "type": "authentication_error"}})
    with pytest.raises(RequestError) as info:
        read_api_response(response, Completion, provider="anthropic")
    err = info.value
    assert err.status_code == 401 and err.code is ErrorCode.AUTH  # nosec B101
    assert err.message == "invalid x-api-key"  # nosec B101
    assert err.retryable is False  # nosec B101


def test_read_non_2xx_without_envelope():
    response = httpx.Response(503, content=b"")
    with pytest.raises(RequestError) as info:
        read_api_response(response, Completion, provider="p")
    assert info.value.message == "HTTP 503" and info.value.retryable  # nosec B101


def test_read_invalid_json_is_decode_error():
    with pytest.raises(DecodeError):
        read_api_response(httpx.Response(200, content=b"<html>"), Completion, provider="p")


def test_read_success():
    value = read_api_response(httpx.Response(200, json={"id": "x", "choices": []}), Completion, provider="p")
    assert value == Completion(id="x", choices=[])  # nosec B101


def test_error_message_from_plain_text_body():
    assert error_message_from_body(b"  upstream timeout \n") == "upstream timeout"  # nosec B101
    assert error_message_from_body(b'{"other": 1}') is None  # nosec B101
