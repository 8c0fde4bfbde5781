"""
Structured content part model for messages.

Providers exchange multi-part content (text, tool calls, tool results, media).
`ContentPart` captures a normalized, provider-agnostic shape that provider
clients translate to and from their wire formats.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal, Optional


# Known content part types seen across providers' structured messages.
ContentPartType = Literal[
    "text",          # Plain text content
    "tool_call",     # Tool call: data = {"id", "name", "arguments"}
    "tool_result",   # Tool result: data = {"id", "content"}
    "image",         # Image: data = {"media_type", "data"} (base64)
    "audio",         # Audio: data = {"media_type", "data"} (base64)
]


@dataclass
class ContentPart:
    """A single piece of structured message content.

    Attributes:
        type: The semantic kind of the content part, e.g., ``"text"`` or
            ``"tool_call"``.
        text: Optional textual content for human-readable parts.
        data: Optional payload for non-text parts (tool call arguments,
            tool results, base64 media).
    """

    type: ContentPartType
    text: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def tool_call(cls, id: str, name: str, arguments: Any) -> "ContentPart":
        return cls(type="tool_call", data={"id": id, "name": name, "arguments": arguments})

    @classmethod
    def tool_result(cls, id: str, content: str) -> "ContentPart":
        return cls(type="tool_result", data={"id": id, "content": content})

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the object."""
        return asdict(self)


__all__ = [
    "ContentPart",
    "ContentPartType",
]
