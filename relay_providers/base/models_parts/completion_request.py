"""
CompletionRequest DTO for provider-agnostic completion invocations.

Completion model handles map this normalized request onto a provider wire
payload. The request carries the conversation, sampling parameters, tool
definitions and an ``additional_params`` escape hatch that is shallow-merged
over the provider payload as the last step.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .message import Message
from .tool_definition import ToolDefinition


@dataclass
class CompletionRequest:
    """Normalized completion request sent to completion model handles.

    Attributes:
        messages: Ordered list of chat `Message` instances (the last one is
            the prompt).
        preamble: Optional system prompt.
        temperature: Sampling temperature when supported by the provider.
        max_tokens: Maximum tokens for the completion (handles map the param name).
        tools: Tool definitions offered to the model.
        additional_params: JSON-serializable provider-specific keys merged
            shallowly over the built payload.

    Methods:
        to_dict: Return a JSON-serializable dictionary of the request.
    """

    messages: List[Message]
    preamble: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    tools: List[ToolDefinition] = field(default_factory=list)
    additional_params: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_prompt(cls, prompt: str, **kwargs: Any) -> "CompletionRequest":
        return cls(messages=[Message.user(prompt)], **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the request."""
        return {
            "messages": [m.to_dict() for m in self.messages],
            "preamble": self.preamble,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "tools": [t.to_dict() for t in self.tools],
            "additional_params": dict(self.additional_params),
        }


__all__ = [
    "CompletionRequest",
]
