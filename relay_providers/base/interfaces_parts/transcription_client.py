"""TranscriptionClient Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .transcription_model import TranscriptionModel


@runtime_checkable
class TranscriptionClient(Protocol):
    """Provider client exposing the transcription capability."""

    def transcription_model(self, model: str) -> TranscriptionModel:
        ...


__all__ = ["TranscriptionClient"]
