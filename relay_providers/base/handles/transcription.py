"""Base transcription model handle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Type

import httpx
from pydantic import BaseModel

from ..models import TranscriptionRequest, TranscriptionResponse
from .common import execute_json

if TYPE_CHECKING:
    from ..client import ProviderClient


@dataclass(frozen=True)
class BaseTranscriptionModel:
    client: "ProviderClient"
    model: str

    RESPONSE_SHAPE: ClassVar[Type[BaseModel]]

    def create_transcription_request(self, request: TranscriptionRequest) -> httpx.Request:
        raise NotImplementedError

    def to_transcription_response(self, wire: Any) -> TranscriptionResponse:
        raise NotImplementedError

    async def transcription(self, request: TranscriptionRequest) -> TranscriptionResponse:
        http_request = self.create_transcription_request(request)
        wire, _ = await execute_json(
            self.client, http_request, self.RESPONSE_SHAPE, model=self.model, operation="transcription"
        )
        return self.to_transcription_response(wire)


__all__ = ["BaseTranscriptionModel"]
