"""
Transcription request/response DTOs.

The request carries raw audio bytes plus the file name used for multipart
uploads and media type detection.
"""
from __future__ import annotations

import mimetypes
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class TranscriptionRequest:
    """Normalized audio transcription request.

    Attributes:
        data: Raw audio bytes.
        filename: Original file name (drives the media type).
        language: Optional ISO-639-1 language hint.
        prompt: Optional text guiding the transcription style.
        temperature: Optional sampling temperature.
        additional_params: Provider-specific keys merged over the payload.
    """

    data: bytes
    filename: str
    language: Optional[str] = None
    prompt: Optional[str] = None
    temperature: Optional[float] = None
    additional_params: Dict[str, Any] = field(default_factory=dict)

    @property
    def media_type(self) -> str:
        guessed, _ = mimetypes.guess_type(self.filename)
        return guessed or "application/octet-stream"


@dataclass
class TranscriptionResponse:
    """Transcribed text plus the provider-native payload."""

    text: str
    raw: Optional[Any] = None


__all__ = ["TranscriptionRequest", "TranscriptionResponse"]
