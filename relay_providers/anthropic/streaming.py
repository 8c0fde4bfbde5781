"""Translator for Anthropic Messages API server-sent events.

Event flow per message::

    message_start -> (content_block_start -> content_block_delta* -> content_block_stop)*
    -> message_delta -> message_stop

``ping`` events are ignored. ``message_stop`` is the end-of-stream signal.
An ``error`` event ends the stream as a failure.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator

from ..base.errors import ErrorCode, ProviderError, StreamError
from ..base.streaming import END_OF_STREAM, StreamEvent, StreamFrame, ToolCallDelta, TranslatorItem, frame_json

PROVIDER = "anthropic"

_ERROR_CODES = {
    "overloaded_error": ErrorCode.UNAVAILABLE,
    "rate_limit_error": ErrorCode.RATE_LIMIT,
    "api_error": ErrorCode.SERVER_ERROR,
    "authentication_error": ErrorCode.AUTH,
    "invalid_request_error": ErrorCode.VALIDATION,
}


class AnthropicStreamTranslator:
    """Stateful translator; one instance per stream."""

    def __init__(self, model: str) -> None:
        self.model = model

    def _event(self, **kwargs: Any) -> StreamEvent:
        return StreamEvent(provider=PROVIDER, model=self.model, **kwargs)

    def __call__(self, frame: StreamFrame) -> Iterator[TranslatorItem]:
        doc = frame_json(frame, provider=PROVIDER, model=self.model)
        if not isinstance(doc, dict):
            raise StreamError(f"unexpected stream chunk: {frame.data[:120]!r}", PROVIDER, model=self.model)
        kind = doc.get("type") or frame.event

        if kind == "message_start":
            usage = (doc.get("message") or {}).get("usage") or {}
            if "input_tokens" in usage:
                yield self._event(usage={"prompt": usage["input_tokens"]}, raw=doc)
        elif kind == "content_block_start":
            block = doc.get("content_block") or {}
            if block.get("type") == "tool_use":
                yield self._event(
                    tool_call=ToolCallDelta(index=doc.get("index", 0), id=block.get("id"), name=block.get("name")),
                    raw=doc,
                )
            elif block.get("type") == "text" and block.get("text"):
                yield self._event(delta=block["text"], raw=doc)
        elif kind == "content_block_delta":
            yield from self._delta(doc)
        elif kind == "message_delta":
            usage = doc.get("usage") or {}
            if "output_tokens" in usage:
                yield self._event(usage={"completion": usage["output_tokens"]}, raw=doc)
        elif kind == "message_stop":
            yield END_OF_STREAM
        elif kind == "error":
            raise self._error(doc.get("error") or {})

    def _delta(self, doc: Dict[str, Any]) -> Iterator[TranslatorItem]:
        delta = doc.get("delta") or {}
        if delta.get("type") == "text_delta":
            yield self._event(delta=delta.get("text", ""), raw=doc)
        elif delta.get("type") == "input_json_delta":
            yield self._event(
                tool_call=ToolCallDelta(index=doc.get("index", 0), arguments=delta.get("partial_json", "")),
                raw=doc,
            )

    def _error(self, err: Dict[str, Any]) -> ProviderError:
        kind = str(err.get("type") or "error")
        return ProviderError(
            code=_ERROR_CODES.get(kind, ErrorCode.STREAM),
            message=f"{kind}: {err.get('message', 'stream error')}",
            provider=PROVIDER,
            model=self.model,
        )


__all__ = ["AnthropicStreamTranslator"]
