"""OpenAI-compatible chat completion streaming.

Shared by every provider speaking the OpenAI chat-completions stream format
(OpenAI itself, Together). Each SSE ``data:`` frame carries one
``chat.completion.chunk`` object; the literal ``[DONE]`` ends the stream.
Usage arrives on a trailing chunk (``stream_options.include_usage``) or
alongside the last choice, depending on the provider.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterator

import httpx

from ..base.constants import SSE_DONE_SENTINEL
from ..base.errors import ErrorCode, ProviderError, StreamError
from ..base.streaming import (
    END_OF_STREAM,
    StreamEvent,
    StreamFrame,
    StreamingCompletionResponse,
    ToolCallDelta,
    TranslatorItem,
    frame_json,
    open_stream,
)

if TYPE_CHECKING:
    from ..base.client import ProviderClient


def usage_from(doc: Dict[str, Any]) -> Dict[str, Any] | None:
    usage = doc.get("usage")
    if not isinstance(usage, dict):
        return None
    return {
        "prompt": usage.get("prompt_tokens"),
        "completion": usage.get("completion_tokens"),
        "total": usage.get("total_tokens"),
    }


class OpenAICompatStreamTranslator:
    """Stateless per-chunk translation; one instance per stream."""

    def __init__(self, provider: str, model: str) -> None:
        self.provider = provider
        self.model = model

    def _event(self, **kwargs: Any) -> StreamEvent:
        return StreamEvent(provider=self.provider, model=self.model, **kwargs)

    def __call__(self, frame: StreamFrame) -> Iterator[TranslatorItem]:
        if frame.data.strip() == SSE_DONE_SENTINEL:
            yield END_OF_STREAM
            return
        doc = frame_json(frame, provider=self.provider, model=self.model)
        if not isinstance(doc, dict):
            raise StreamError(f"unexpected stream chunk: {frame.data[:120]!r}", self.provider, model=self.model)
        if isinstance(doc.get("error"), dict):
            err = doc["error"]
            raise ProviderError(
                code=ErrorCode.STREAM,
                message=str(err.get("message", "stream error")),
                provider=self.provider,
                model=self.model,
            )
        for choice in doc.get("choices") or []:
            delta = choice.get("delta") or {}
            text = delta.get("content")
            if text is None:
                # Legacy completion-style chunks carry the fragment in ``text``.
                text = choice.get("text")
            if text:
                yield self._event(delta=text, raw=doc)
            for call in delta.get("tool_calls") or []:
                function = call.get("function") or {}
                yield self._event(
                    tool_call=ToolCallDelta(
                        index=call.get("index", 0),
                        id=call.get("id"),
                        name=function.get("name"),
                        arguments=function.get("arguments") or "",
                    ),
                    raw=doc,
                )
        usage = usage_from(doc)
        if usage is not None:
            yield self._event(usage=usage, raw=doc)


async def send_compatible_streaming_request(
    client: "ProviderClient",
    request: httpx.Request,
    *,
    model: str,
) -> StreamingCompletionResponse:
    """Send an OpenAI-compatible streaming request and normalize its events."""
    return await open_stream(
        client,
        request,
        model=model,
        translator=OpenAICompatStreamTranslator(client.provider_name, model),
        requires_end_signal=True,
    )


__all__ = ["OpenAICompatStreamTranslator", "send_compatible_streaming_request", "usage_from"]
