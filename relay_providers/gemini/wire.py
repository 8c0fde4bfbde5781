"""Gemini ``generateContent`` wire shapes and canonical conversions.

Field names follow the REST API's camelCase JSON.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from ..base.errors import ErrorCode, ProviderError
from ..base.models import ContentPart, Message

PROVIDER = "gemini"


class GeminiFunctionCall(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    args: Dict[str, Any] = {}


class GeminiPart(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: Optional[str] = None
    functionCall: Optional[GeminiFunctionCall] = None


class GeminiContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: Optional[str] = None
    parts: List[GeminiPart] = []


class GeminiCandidate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Optional[GeminiContent] = None
    finishReason: Optional[str] = None


class GeminiUsage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    promptTokenCount: Optional[int] = None
    candidatesTokenCount: Optional[int] = None
    totalTokenCount: Optional[int] = None

    def canonical(self) -> Dict[str, Optional[int]]:
        return {
            "prompt": self.promptTokenCount,
            "completion": self.candidatesTokenCount,
            "total": self.totalTokenCount,
        }


class GenerateContentResponse(BaseModel):
    """Success body of ``generateContent``; ``candidates`` is required."""

    model_config = ConfigDict(extra="ignore")

    candidates: List[GeminiCandidate]
    usageMetadata: Optional[GeminiUsage] = None
    modelVersion: Optional[str] = None
    responseId: Optional[str] = None

    def parts(self) -> List[GeminiPart]:
        if not self.candidates or self.candidates[0].content is None:
            return []
        return self.candidates[0].content.parts


def blocked_prompt_reason(doc: Any) -> Optional[str]:
    """Return ``promptFeedback.blockReason`` of a chunk that carries no candidates."""
    if not isinstance(doc, dict) or doc.get("candidates"):
        return None
    feedback = doc.get("promptFeedback")
    if isinstance(feedback, dict) and feedback.get("blockReason"):
        return str(feedback["blockReason"])
    return None


def model_path(model: str, method: str) -> str:
    """Return ``/v1beta/models/{model}:{method}`` (a leading ``models/`` is accepted)."""
    name = model[len("models/"):] if model.startswith("models/") else model
    return f"/v1beta/models/{name}:{method}"


def _wire_part(part: ContentPart, model: str) -> Dict[str, Any]:
    data = part.data or {}
    if part.type == "text":
        return {"text": part.text or ""}
    if part.type in ("image", "audio"):
        return {"inlineData": {"mimeType": data.get("media_type"), "data": data.get("data")}}
    if part.type == "tool_call":
        return {"functionCall": {"name": data.get("name"), "args": data.get("arguments") or {}}}
    if part.type == "tool_result":
        return {
            "functionResponse": {
                "name": data.get("name") or data.get("id"),
                "response": {"content": data.get("content", "")},
            }
        }
    raise ProviderError(  # pragma: no cover - ContentPartType is closed
        code=ErrorCode.VALIDATION,
        message=f"unsupported content part type '{part.type}'",
        provider=PROVIDER,
        model=model,
    )


def wire_contents(messages: List[Message], model: str) -> tuple[List[str], List[Dict[str, Any]]]:
    """Split canonical messages into system texts and Gemini ``contents``."""
    system: List[str] = []
    contents: List[Dict[str, Any]] = []
    for m in messages:
        if m.role == "system":
            system.append(m.text_or_joined())
            continue
        role = "model" if m.role == "assistant" else "user"
        contents.append({"role": role, "parts": [_wire_part(p, model) for p in m.parts()]})
    return system, contents


def to_content_parts(parts: List[GeminiPart]) -> List[ContentPart]:
    out: List[ContentPart] = []
    for p in parts:
        if p.text is not None:
            out.append(ContentPart(type="text", text=p.text))
        elif p.functionCall is not None:
            # Gemini has no call ids; the function name identifies the call.
            out.append(ContentPart.tool_call(p.functionCall.name, p.functionCall.name, p.functionCall.args))
    return out


__all__ = [
    "GeminiFunctionCall",
    "GeminiPart",
    "GeminiContent",
    "GeminiCandidate",
    "GeminiUsage",
    "GenerateContentResponse",
    "blocked_prompt_reason",
    "model_path",
    "wire_contents",
    "to_content_parts",
]
