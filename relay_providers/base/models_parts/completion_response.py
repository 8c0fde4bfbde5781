"""
CompletionResponse DTO representing normalized provider responses.

The ``raw`` field can be used for debugging but is excluded from default
serialization to prevent large payloads from being logged unintentionally.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .content_part import ContentPart
from .provider_metadata import ProviderMetadata


@dataclass
class CompletionResponse:
    """Provider-agnostic response from a completion invocation.

    Attributes:
        text: Concatenated text output (empty when the model only called tools).
        parts: Structured content parts in provider order (text and tool calls).
        raw: Provider-native decoded payload for diagnostics only.
        meta: Execution `ProviderMetadata` for observability.
    """

    text: str
    meta: ProviderMetadata
    parts: List[ContentPart] = field(default_factory=list)
    raw: Optional[Any] = None

    @property
    def tool_calls(self) -> List[ContentPart]:
        return [p for p in self.parts if p.type == "tool_call"]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary excluding raw provider objects."""
        return {
            "text": self.text,
            "parts": [p.to_dict() for p in self.parts],
            "raw": None,
            "meta": self.meta.to_dict(),
        }


__all__ = [
    "CompletionResponse",
]
