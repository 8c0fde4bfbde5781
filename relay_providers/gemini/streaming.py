"""Translator for Gemini ``streamGenerateContent?alt=sse`` frames.

Every ``data:`` frame is a complete ``GenerateContentResponse`` fragment.
Gemini sends no end-of-stream marker: the body simply ends after the chunk
carrying ``finishReason``, so end of body is a clean completion.
"""

from __future__ import annotations

import json
from typing import Any, Iterator

from pydantic import ValidationError

from ..base.errors import DecodeError, ErrorCode, ProviderError
from ..base.response import ApiErrorResponse
from ..base.streaming import StreamEvent, StreamFrame, ToolCallDelta, TranslatorItem, frame_json
from .wire import PROVIDER, GenerateContentResponse, blocked_prompt_reason


class GeminiStreamTranslator:
    """Stateful translator (tool-call index counter); one instance per stream."""

    def __init__(self, model: str) -> None:
        self.model = model
        self._calls = 0

    def _event(self, **kwargs: Any) -> StreamEvent:
        return StreamEvent(provider=PROVIDER, model=self.model, **kwargs)

    def __call__(self, frame: StreamFrame) -> Iterator[TranslatorItem]:
        doc = frame_json(frame, provider=PROVIDER, model=self.model)
        if isinstance(doc, dict) and "error" in doc:
            try:
                message = ApiErrorResponse.model_validate(doc).message
            except ValidationError:
                message = "stream error"
            raise ProviderError(code=ErrorCode.STREAM, message=message, provider=PROVIDER, model=self.model)
        block_reason = blocked_prompt_reason(doc)
        if block_reason is not None:
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message=f"prompt blocked: {block_reason}",
                provider=PROVIDER,
                model=self.model,
            )
        try:
            chunk = GenerateContentResponse.model_validate(doc)
        except ValidationError as exc:
            raise DecodeError(
                f"unexpected stream chunk: {frame.data[:120]!r}", PROVIDER, model=self.model, raw=exc
            ) from exc
        for part in chunk.parts():
            if part.text:
                yield self._event(delta=part.text, raw=doc)
            elif part.functionCall is not None:
                call = part.functionCall
                yield self._event(
                    tool_call=ToolCallDelta(
                        index=self._calls,
                        id=call.name,
                        name=call.name,
                        arguments=json.dumps(call.args),
                    ),
                    raw=doc,
                )
                self._calls += 1
        if chunk.usageMetadata is not None:
            yield self._event(usage=chunk.usageMetadata.canonical(), raw=doc)


__all__ = ["GeminiStreamTranslator"]
