"""TranscriptionModel Protocol (single-class module)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..models import TranscriptionRequest, TranscriptionResponse


@runtime_checkable
class TranscriptionModel(Protocol):
    """Transcription handle bound to a shared client and a model identifier."""

    model: str

    async def transcription(self, request: "TranscriptionRequest") -> "TranscriptionResponse":
        ...


__all__ = ["TranscriptionModel"]
