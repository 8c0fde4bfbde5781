"""Canonical success/error envelope for non-streaming JSON responses.

Provider bodies carry no discriminant telling a success from an error, so
decoding is structural: the expected success model is validated first and
accepted only when its full shape validates (missing required fields reject
it; unrelated extra keys are ignored), otherwise the error shape
``{"message": str}`` is tried. A document matching neither raises
:class:`DecodeError`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Generic, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from .errors import RETRYABLE_CODES, DecodeError, ErrorCode, RequestError, code_for_status

T = TypeVar("T", bound=BaseModel)


class ApiErrorResponse(BaseModel):
    """Error payload carrying a human-readable message.

    Providers nest the message differently; ``{"error": {"message": ...}}``
    and ``{"error": "..."}`` are lifted to the top level before validation.
    """

    model_config = ConfigDict(extra="ignore")

    message: str
    type: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _lift_nested_error(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "message" in data:
            return data
        err = data.get("error")
        if isinstance(err, dict) and isinstance(err.get("message"), str):
            lifted = {"message": err["message"]}
            kind = err.get("type") or err.get("status")
            if isinstance(kind, str):
                lifted["type"] = kind
            return lifted
        if isinstance(err, str):
            return {"message": err}
        return data


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Two-variant envelope: exactly one of ``value`` or ``error`` is set."""

    value: Optional[T] = None
    error: Optional[ApiErrorResponse] = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self, provider: str, *, status_code: Optional[int] = None, model: Optional[str] = None) -> T:
        """Return the success value or raise :class:`RequestError` with the error message."""
        if self.error is not None:
            code = code_for_status(status_code) if status_code else ErrorCode.UNKNOWN
            raise RequestError(
                self.error.message,
                provider,
                code=code,
                model=model,
                status_code=status_code,
            )
        if self.value is None:
            raise DecodeError("response envelope holds neither a value nor an error", provider, model=model)
        return self.value


def decode_api_response(doc: Any, shape: Type[T], *, provider: str, model: Optional[str] = None) -> ApiResponse[T]:
    """Decode an already-parsed JSON document into an :class:`ApiResponse`."""
    try:
        return ApiResponse(value=shape.model_validate(doc))
    except ValidationError as success_exc:
        try:
            return ApiResponse(error=ApiErrorResponse.model_validate(doc))
        except ValidationError:
            raise DecodeError(
                f"response matches neither {shape.__name__} nor the error shape",
                provider,
                model=model,
                raw=success_exc,
            ) from success_exc


def parse_json_body(body: bytes | str, *, provider: str, model: Optional[str] = None) -> Any:
    """Parse a raw body as JSON, raising :class:`DecodeError` on malformed input."""
    try:
        return json.loads(body)
    except (ValueError, TypeError) as exc:
        raise DecodeError(f"response body is not valid JSON: {exc}", provider, model=model, raw=exc) from exc


def read_api_response(response: httpx.Response, shape: Type[T], *, provider: str, model: Optional[str] = None) -> T:
    """Decode a fully-read response into ``shape`` or raise a typed error.

    Non-2xx statuses always raise :class:`RequestError`; its message comes
    from the error envelope when the body has one.
    """
    status = response.status_code
    if not response.is_success:
        message = error_message_from_body(response.content) or f"HTTP {status}"
        code = code_for_status(status)
        raise RequestError(
            message,
            provider,
            code=code,
            model=model,
            status_code=status,
            retryable=code in RETRYABLE_CODES,
        )
    doc = parse_json_body(response.content, provider=provider, model=model)
    return decode_api_response(doc, shape, provider=provider, model=model).unwrap(
        provider, status_code=status, model=model
    )


def error_message_from_body(body: bytes | str) -> Optional[str]:
    """Best-effort extraction of the error envelope message from a raw body."""
    try:
        doc = json.loads(body)
    except (ValueError, TypeError):
        text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
        return text.strip() or None
    try:
        return ApiErrorResponse.model_validate(doc).message
    except ValidationError:
        return None


__all__ = [
    "ApiErrorResponse",
    "ApiResponse",
    "decode_api_response",
    "parse_json_body",
    "read_api_response",
    "error_message_from_body",
]
