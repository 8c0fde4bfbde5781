"""OpenAI audio transcription handle (multipart upload)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import httpx
from pydantic import BaseModel, ConfigDict

from ..base.handles import BaseTranscriptionModel
from ..base.models import TranscriptionRequest, TranscriptionResponse

TRANSCRIPTIONS_PATH = "/audio/transcriptions"
WHISPER_1 = "whisper-1"


class OpenAITranscriptionResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: str


@dataclass(frozen=True)
class OpenAITranscriptionModel(BaseTranscriptionModel):
    RESPONSE_SHAPE = OpenAITranscriptionResponse

    def create_transcription_request(self, request: TranscriptionRequest) -> httpx.Request:
        form: Dict[str, str] = {"model": self.model}
        if request.language:
            form["language"] = request.language
        if request.prompt:
            form["prompt"] = request.prompt
        if request.temperature is not None:
            form["temperature"] = str(request.temperature)
        form.update({k: str(v) for k, v in request.additional_params.items()})
        files = {"file": (request.filename, request.data, request.media_type)}
        return self.client.post(TRANSCRIPTIONS_PATH, files=files, data=form, model=self.model)

    def to_transcription_response(self, wire: OpenAITranscriptionResponse) -> TranscriptionResponse:
        return TranscriptionResponse(text=wire.text, raw=wire.model_dump())


__all__ = ["OpenAITranscriptionModel", "OpenAITranscriptionResponse", "TRANSCRIPTIONS_PATH", "WHISPER_1"]
