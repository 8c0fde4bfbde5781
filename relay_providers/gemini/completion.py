"""Gemini completion handle.

Non-streaming calls hit ``:generateContent``. Streaming switches endpoint to
``:streamGenerateContent`` and asks for SSE framing with ``alt=sse``, which
the client appends after the ``key`` query parameter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import httpx

from ..base.handles import BaseCompletionModel
from ..base.json_utils import drop_none, merge
from ..base.models import CompletionRequest, CompletionResponse, ProviderMetadata
from .streaming import GeminiStreamTranslator
from .wire import PROVIDER, GenerateContentResponse, model_path, to_content_parts, wire_contents


@dataclass(frozen=True)
class GeminiCompletionModel(BaseCompletionModel):
    RESPONSE_SHAPE = GenerateContentResponse
    REQUIRES_END_SIGNAL = False

    def completion_path(self) -> str:
        return model_path(self.model, "generateContent")

    def stream_path(self) -> str:
        return model_path(self.model, "streamGenerateContent")

    def create_completion_request(self, request: CompletionRequest) -> Dict[str, Any]:
        system, contents = wire_contents(request.messages, self.model)
        if request.preamble:
            system.insert(0, request.preamble)
        payload: Dict[str, Any] = {"contents": contents}
        if system:
            payload["systemInstruction"] = {"parts": [{"text": s} for s in system]}
        generation_config = drop_none(
            {"temperature": request.temperature, "maxOutputTokens": request.max_tokens}
        )
        if generation_config:
            payload["generationConfig"] = generation_config
        if request.tools:
            payload["tools"] = [
                {
                    "functionDeclarations": [
                        {"name": t.name, "description": t.description, "parameters": t.parameters}
                        for t in request.tools
                    ]
                }
            ]
        return merge(payload, request.additional_params)

    def create_stream_request(self, payload: Dict[str, Any]) -> httpx.Request:
        return self.client.post_sse(self.stream_path(), json=payload, model=self.model)

    def to_completion_response(self, wire: GenerateContentResponse) -> CompletionResponse:
        parts = to_content_parts(wire.parts())
        finish_reason = wire.candidates[0].finishReason if wire.candidates else None
        meta = ProviderMetadata(
            provider_name=PROVIDER,
            model_name=wire.modelVersion or self.model,
            response_id=wire.responseId,
            usage=wire.usageMetadata.canonical() if wire.usageMetadata else None,
            extra={"finish_reason": finish_reason} if finish_reason else {},
        )
        text = "".join(p.text or "" for p in parts if p.type == "text")
        return CompletionResponse(text=text, parts=parts, raw=wire.model_dump(exclude_none=True), meta=meta)

    def stream_translator(self) -> GeminiStreamTranslator:
        return GeminiStreamTranslator(self.model)


__all__ = ["GeminiCompletionModel"]
