"""Wire decoders turning a streaming HTTP body into frames.

Two framings are supported:

- Server-sent events (``text/event-stream``): ``event:``/``data:``/``id:``/
  ``retry:`` fields, multi-line ``data`` joined with ``\\n``, ``:`` comment
  lines ignored, a blank line dispatching the pending frame. A frame still
  pending when the body ends is dispatched as well.
- Newline-delimited JSON: every non-blank line is one frame.

Both produce :class:`StreamFrame` objects so provider translators handle a
single type. Decoders only frame; interpreting the payload (and recognizing
the provider's end-of-stream signal) is the translator's job.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, AsyncIterator, Optional

import httpx

from ..constants import EVENT_STREAM_MEDIA_TYPE
from ..errors import DecodeError


class _EndOfStream:
    """Sentinel a translator yields when the provider signals a clean end."""

    _instance: Optional["_EndOfStream"] = None

    def __new__(cls) -> "_EndOfStream":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "END_OF_STREAM"


END_OF_STREAM = _EndOfStream()


@dataclass(frozen=True)
class StreamFrame:
    """One decoded unit of a streaming body."""

    data: str
    event: str = "message"
    id: Optional[str] = None
    retry: Optional[int] = None


def frame_json(frame: StreamFrame, *, provider: str, model: Optional[str] = None) -> Any:
    """Parse ``frame.data`` as JSON, raising :class:`DecodeError` on failure."""
    try:
        return json.loads(frame.data)
    except ValueError as exc:
        raise DecodeError(
            f"undecodable stream chunk: {frame.data[:120]!r}",
            provider,
            model=model,
            raw=exc,
        ) from exc


async def iter_sse_events(response: httpx.Response) -> AsyncIterator[StreamFrame]:
    """Yield SSE frames from ``response`` in wire order."""
    event: Optional[str] = None
    data: list[str] = []
    last_id: Optional[str] = None
    retry: Optional[int] = None
    async for line in response.aiter_lines():
        if not line:
            if data:
                yield StreamFrame(data="\n".join(data), event=event or "message", id=last_id, retry=retry)
            event, data, retry = None, [], None
            continue
        if line.startswith(":"):
            continue
        field, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]
        if field == "event":
            event = value
        elif field == "data":
            data.append(value)
        elif field == "id":
            if "\0" not in value:
                last_id = value
        elif field == "retry":
            if value.isdigit():
                retry = int(value)
    if data:
        yield StreamFrame(data="\n".join(data), event=event or "message", id=last_id, retry=retry)


async def iter_json_lines(response: httpx.Response) -> AsyncIterator[StreamFrame]:
    """Yield one frame per non-blank line of a newline-delimited JSON body."""
    async for line in response.aiter_lines():
        stripped = line.strip()
        if stripped:
            yield StreamFrame(data=stripped)


def is_event_stream(response: httpx.Response) -> bool:
    content_type = response.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower() == EVENT_STREAM_MEDIA_TYPE


def iter_stream_payloads(response: httpx.Response) -> AsyncIterator[StreamFrame]:
    """Pick the decoder matching the response ``Content-Type``."""
    if is_event_stream(response):
        return iter_sse_events(response)
    return iter_json_lines(response)


__all__ = [
    "END_OF_STREAM",
    "StreamFrame",
    "frame_json",
    "iter_sse_events",
    "iter_json_lines",
    "is_event_stream",
    "iter_stream_payloads",
]
