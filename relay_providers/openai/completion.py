"""OpenAI chat completions: wire shapes, payload builder and completion handle.

The same wire format is spoken by Together, whose completion handle
subclasses :class:`OpenAICompletionModel`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from ..base.errors import ErrorCode, ProviderError
from ..base.handles import BaseCompletionModel
from ..base.json_utils import drop_none, merge
from ..base.models import CompletionRequest, CompletionResponse, ContentPart, Message, ProviderMetadata
from ..base.streaming import StreamingCompletionResponse
from .streaming import OpenAICompatStreamTranslator, send_compatible_streaming_request

CHAT_COMPLETIONS_PATH = "/chat/completions"


class OpenAIFunctionCall(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    arguments: str = ""


class OpenAIToolCall(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    type: str = "function"
    function: OpenAIFunctionCall


class OpenAIChoiceMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: str
    content: Optional[str] = None
    tool_calls: Optional[List[OpenAIToolCall]] = None


class OpenAIChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    index: int = 0
    message: OpenAIChoiceMessage
    finish_reason: Optional[str] = None


class OpenAIUsage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    prompt_tokens: int
    completion_tokens: int = 0
    total_tokens: int


class OpenAIChatResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    model: str
    choices: List[OpenAIChoice]
    usage: Optional[OpenAIUsage] = None


def _user_content(parts: List[ContentPart], provider: str, model: str) -> Any:
    if len(parts) == 1 and parts[0].type == "text":
        return parts[0].text or ""
    out: List[Dict[str, Any]] = []
    for p in parts:
        data = p.data or {}
        if p.type == "text":
            out.append({"type": "text", "text": p.text or ""})
        elif p.type == "image":
            url = f"data:{data.get('media_type')};base64,{data.get('data')}"
            out.append({"type": "image_url", "image_url": {"url": url}})
        elif p.type == "audio":
            fmt = str(data.get("media_type", "audio/wav")).rsplit("/", 1)[-1]
            out.append({"type": "input_audio", "input_audio": {"data": data.get("data"), "format": fmt}})
        else:
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message=f"content part type '{p.type}' is not accepted in user messages",
                provider=provider,
                model=model,
            )
    return out


def wire_messages(messages: List[Message], *, provider: str, model: str) -> List[Dict[str, Any]]:
    """Translate canonical messages to chat-completions messages."""
    wire: List[Dict[str, Any]] = []
    for m in messages:
        parts = m.parts()
        results = [p for p in parts if p.type == "tool_result"]
        for r in results:
            data = r.data or {}
            wire.append({"role": "tool", "tool_call_id": data.get("id"), "content": data.get("content", "")})
        rest = [p for p in parts if p.type != "tool_result"]
        if not rest:
            continue
        if m.role == "assistant":
            calls = [p for p in rest if p.type == "tool_call"]
            text = "".join(p.text or "" for p in rest if p.type == "text")
            msg: Dict[str, Any] = {"role": "assistant", "content": text or None}
            if calls:
                msg["tool_calls"] = [
                    {
                        "id": (c.data or {}).get("id"),
                        "type": "function",
                        "function": {
                            "name": (c.data or {}).get("name"),
                            "arguments": json.dumps((c.data or {}).get("arguments") or {}),
                        },
                    }
                    for c in calls
                ]
            wire.append(msg)
        elif m.role == "system":
            wire.append({"role": "system", "content": m.text_or_joined()})
        else:
            wire.append({"role": "user", "content": _user_content(rest, provider, model)})
    return wire


@dataclass(frozen=True)
class OpenAICompletionModel(BaseCompletionModel):
    """Completion handle for the chat-completions API."""

    RESPONSE_SHAPE = OpenAIChatResponse
    STREAM_DIRECTIVE = {"stream": True, "stream_options": {"include_usage": True}}
    REQUIRES_END_SIGNAL = True

    def completion_path(self) -> str:
        return CHAT_COMPLETIONS_PATH

    def create_completion_request(self, request: CompletionRequest) -> Dict[str, Any]:
        provider = self.client.provider_name
        messages = wire_messages(request.messages, provider=provider, model=self.model)
        if request.preamble:
            messages.insert(0, {"role": "system", "content": request.preamble})
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        if request.tools:
            payload["tools"] = [
                {
                    "type": "function",
                    "function": {"name": t.name, "description": t.description, "parameters": t.parameters},
                }
                for t in request.tools
            ]
        return merge(drop_none(payload), request.additional_params)

    def to_completion_response(self, wire: OpenAIChatResponse) -> CompletionResponse:
        parts: List[ContentPart] = []
        finish_reason = None
        if wire.choices:
            choice = wire.choices[0]
            finish_reason = choice.finish_reason
            if choice.message.content:
                parts.append(ContentPart(type="text", text=choice.message.content))
            for call in choice.message.tool_calls or []:
                try:
                    arguments: Any = json.loads(call.function.arguments) if call.function.arguments else {}
                except ValueError:
                    arguments = call.function.arguments
                parts.append(ContentPart.tool_call(call.id, call.function.name, arguments))
        usage = None
        if wire.usage is not None:
            usage = {
                "prompt": wire.usage.prompt_tokens,
                "completion": wire.usage.completion_tokens,
                "total": wire.usage.total_tokens,
            }
        meta = ProviderMetadata(
            provider_name=self.client.provider_name,
            model_name=wire.model,
            response_id=wire.id,
            usage=usage,
            extra={"finish_reason": finish_reason} if finish_reason else {},
        )
        text = "".join(p.text or "" for p in parts if p.type == "text")
        return CompletionResponse(text=text, parts=parts, raw=wire.model_dump(), meta=meta)

    def stream_translator(self) -> OpenAICompatStreamTranslator:
        return OpenAICompatStreamTranslator(self.client.provider_name, self.model)

    async def stream(self, request: CompletionRequest) -> StreamingCompletionResponse:
        http_request = self.create_stream_request(self.stream_payload(request))
        return await send_compatible_streaming_request(self.client, http_request, model=self.model)


__all__ = [
    "OpenAICompletionModel",
    "OpenAIChatResponse",
    "OpenAIChoice",
    "OpenAIChoiceMessage",
    "OpenAIToolCall",
    "OpenAIFunctionCall",
    "OpenAIUsage",
    "wire_messages",
    "CHAT_COMPLETIONS_PATH",
]
