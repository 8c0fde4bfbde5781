"""
Message DTO used across providers.

Defines the `Message` dataclass and the `Role` literal representing the sender
role. Content may be either plain text or a list of `ContentPart` objects for
providers that support structured messages.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Union

from .content_part import ContentPart


# Message roles used across providers.
Role = Literal["system", "user", "assistant", "tool"]


@dataclass
class Message:
    """A chat message used by provider-agnostic DTOs.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"``,
            ``"assistant"``, or ``"tool"``).
        content: Either a plain text string or a list of `ContentPart` items
            when structured content is available.
    """

    role: Role
    content: Union[str, List[ContentPart]]

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(role="user", content=text)

    @classmethod
    def assistant(cls, text: str) -> "Message":
        return cls(role="assistant", content=text)

    def is_structured(self) -> bool:
        """Return True if the message content is a structured list of parts."""
        return isinstance(self.content, list)

    def parts(self) -> List[ContentPart]:
        """Return the content as a list of parts, wrapping plain text."""
        if isinstance(self.content, str):
            return [ContentPart(type="text", text=self.content)]
        return list(self.content)

    def text_or_joined(self) -> str:
        """Return a flattened string representation of the message content.

        Text values are concatenated with newlines and non-text parts are
        represented by bracketed type tokens for compact logging.
        """
        if isinstance(self.content, str):
            return self.content
        return "\n".join(p.text if p.text else f"[{p.type}]" for p in self.content)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role": self.role,
            "content": (
                self.content if isinstance(self.content, str)
                else [p.to_dict() for p in self.content]
            ),
        }


__all__ = [
    "Message",
    "Role",
]
