"""Anthropic Messages API: wire shapes, payload builder and completion handle.

Notes
-----
- ``max_tokens`` is mandatory on the Messages API; when the request omits it
  the per-family default from :func:`default_max_tokens` is used.
- System messages and the request preamble are joined into the top-level
  ``system`` field; ``tool`` role messages become user ``tool_result`` blocks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from ..base.errors import ErrorCode, ProviderError
from ..base.handles import BaseCompletionModel
from ..base.json_utils import drop_none, merge
from ..base.models import CompletionRequest, CompletionResponse, ContentPart, Message, ProviderMetadata
from .streaming import AnthropicStreamTranslator

PROVIDER = "anthropic"
MESSAGES_PATH = "/v1/messages"

# Model families whose output limit allows 8192 tokens by default.
_LARGE_OUTPUT_FAMILIES = ("claude-3-5", "claude-3-7")


def default_max_tokens(model: str) -> int:
    return 8192 if model.startswith(_LARGE_OUTPUT_FAMILIES) else 4096


class AnthropicContentBlock(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str
    text: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    input: Optional[Dict[str, Any]] = None


class AnthropicUsage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    input_tokens: int
    output_tokens: int


class AnthropicMessageResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    model: str
    role: str
    content: List[AnthropicContentBlock]
    stop_reason: Optional[str] = None
    usage: Optional[AnthropicUsage] = None


def _block(part: ContentPart, model: str) -> Dict[str, Any]:
    data = part.data or {}
    if part.type == "text":
        return {"type": "text", "text": part.text or ""}
    if part.type == "image":
        return {
            "type": "image",
            "source": {"type": "base64", "media_type": data.get("media_type"), "data": data.get("data")},
        }
    if part.type == "tool_call":
        return {"type": "tool_use", "id": data.get("id"), "name": data.get("name"), "input": data.get("arguments") or {}}
    if part.type == "tool_result":
        return {"type": "tool_result", "tool_use_id": data.get("id"), "content": data.get("content", "")}
    raise ProviderError(
        code=ErrorCode.VALIDATION,
        message=f"content part type '{part.type}' is not accepted by the Messages API",
        provider=PROVIDER,
        model=model,
    )


def _wire_messages(messages: List[Message], model: str) -> tuple[List[str], List[Dict[str, Any]]]:
    system: List[str] = []
    wire: List[Dict[str, Any]] = []
    for m in messages:
        if m.role == "system":
            system.append(m.text_or_joined())
            continue
        role = "assistant" if m.role == "assistant" else "user"
        wire.append({"role": role, "content": [_block(p, model) for p in m.parts()]})
    return system, wire


@dataclass(frozen=True)
class AnthropicCompletionModel(BaseCompletionModel):
    """Completion handle for the Anthropic Messages API."""

    RESPONSE_SHAPE = AnthropicMessageResponse
    STREAM_DIRECTIVE = {"stream": True}
    REQUIRES_END_SIGNAL = True

    def completion_path(self) -> str:
        return MESSAGES_PATH

    def create_completion_request(self, request: CompletionRequest) -> Dict[str, Any]:
        system, messages = _wire_messages(request.messages, self.model)
        if request.preamble:
            system.insert(0, request.preamble)
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "max_tokens": request.max_tokens or default_max_tokens(self.model),
            "system": "\n\n".join(system) or None,
            "temperature": request.temperature,
        }
        if request.tools:
            payload["tools"] = [
                {"name": t.name, "description": t.description, "input_schema": t.parameters}
                for t in request.tools
            ]
        return merge(drop_none(payload), request.additional_params)

    def to_completion_response(self, wire: AnthropicMessageResponse) -> CompletionResponse:
        parts: List[ContentPart] = []
        for block in wire.content:
            if block.type == "text" and block.text is not None:
                parts.append(ContentPart(type="text", text=block.text))
            elif block.type == "tool_use":
                parts.append(ContentPart.tool_call(block.id or "", block.name or "", block.input or {}))
        usage = None
        if wire.usage is not None:
            usage = {
                "prompt": wire.usage.input_tokens,
                "completion": wire.usage.output_tokens,
                "total": wire.usage.input_tokens + wire.usage.output_tokens,
            }
        meta = ProviderMetadata(
            provider_name=PROVIDER,
            model_name=wire.model,
            response_id=wire.id,
            usage=usage,
            extra={"stop_reason": wire.stop_reason} if wire.stop_reason else {},
        )
        text = "".join(p.text or "" for p in parts if p.type == "text")
        return CompletionResponse(text=text, parts=parts, raw=wire.model_dump(), meta=meta)

    def stream_translator(self) -> AnthropicStreamTranslator:
        return AnthropicStreamTranslator(self.model)


__all__ = [
    "AnthropicCompletionModel",
    "AnthropicMessageResponse",
    "AnthropicContentBlock",
    "AnthropicUsage",
    "default_max_tokens",
    "MESSAGES_PATH",
]
