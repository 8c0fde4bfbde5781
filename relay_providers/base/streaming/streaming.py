"""Streaming primitives for the provider layer.

Keeps streaming concerns separate from core request/response DTOs.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..models import CompletionResponse, ContentPart, ProviderMetadata


@dataclass
class ToolCallDelta:
    """Fragment of a streamed tool call.

    Providers send a tool call's ``id`` and ``name`` once (usually on the
    first fragment) and its JSON ``arguments`` as string pieces. Fragments of
    the same call share ``index``.
    """

    index: int
    id: Optional[str] = None
    name: Optional[str] = None
    arguments: str = ""


@dataclass
class StreamEvent:
    """Represents an incremental delta from a streaming provider.

    Fields:
      provider: canonical provider name
      model: model id/name
      delta: textual delta (may be empty for control events)
      tool_call: optional tool-call fragment
      finish: True on the terminal event (exactly one per stream)
      error: optional ``"<code>:<message>"`` string (set only on a failed terminal event)
      error_code: the ``<code>`` part of ``error``
      usage: token usage (``prompt``/``completion``/``total``) when known
      raw: provider-native chunk (optional, for debugging)
    """

    provider: str
    model: str
    delta: Optional[str] = None
    tool_call: Optional[ToolCallDelta] = None
    finish: bool = False
    error: Optional[str] = None
    error_code: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None
    raw: Optional[Any] = None

    @property
    def kind(self) -> str:
        if self.error is not None:
            return "error"
        if self.finish:
            return "final"
        if self.tool_call is not None:
            return "tool_call"
        return "text"

    def is_error(self) -> bool:
        return self.error is not None

    def has_content(self) -> bool:
        return bool(self.delta) or self.tool_call is not None


def _tool_call_part(call: ToolCallDelta) -> ContentPart:
    try:
        arguments: Any = json.loads(call.arguments) if call.arguments else {}
    except ValueError:
        arguments = call.arguments
    return ContentPart.tool_call(call.id or "", call.name or "", arguments)


def accumulate_events(events: Iterable[StreamEvent]) -> CompletionResponse:
    """Accumulate a sequence of StreamEvent into a CompletionResponse.

    - Concatenates text deltas in order.
    - Joins tool-call fragments per ``index`` (id/name from the first
      fragment carrying them, arguments concatenated and parsed as JSON).
    - Text delivered before a failure is kept; the failure is surfaced in
      ``meta.extra["stream_error"]``.
    """
    events_list: List[StreamEvent] = list(events)
    if not events_list:
        meta = ProviderMetadata(provider_name="unknown", model_name="unknown")
        return CompletionResponse(text="", meta=meta)

    provider = events_list[0].provider
    model = events_list[0].model
    text_parts: List[str] = []
    calls: Dict[int, ToolCallDelta] = {}
    order: List[int] = []
    usage: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    for e in events_list:
        if e.delta:
            text_parts.append(e.delta)
        if e.tool_call is not None:
            call = calls.get(e.tool_call.index)
            if call is None:
                call = calls[e.tool_call.index] = ToolCallDelta(index=e.tool_call.index)
                order.append(e.tool_call.index)
            call.id = call.id or e.tool_call.id
            call.name = call.name or e.tool_call.name
            call.arguments += e.tool_call.arguments
        if e.usage:
            usage = e.usage
        if e.error:
            error = e.error

    full_text = "".join(text_parts)
    parts: List[ContentPart] = [ContentPart(type="text", text=full_text)] if full_text else []
    parts.extend(_tool_call_part(calls[i]) for i in order)
    extra: Dict[str, Any] = {"stream_events": len(events_list)}
    if error is not None:
        extra["stream_error"] = error
    meta = ProviderMetadata(provider_name=provider, model_name=model, usage=usage, extra=extra)
    return CompletionResponse(text=full_text, parts=parts, meta=meta)


__all__ = [
    "ToolCallDelta",
    "StreamEvent",
    "accumulate_events",
]
