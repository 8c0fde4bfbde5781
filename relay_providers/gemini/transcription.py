"""Gemini transcription: audio sent inline to ``:generateContent``."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, Dict

import httpx

from ..base.handles import BaseTranscriptionModel
from ..base.json_utils import drop_none, merge
from ..base.models import TranscriptionRequest, TranscriptionResponse
from .wire import GenerateContentResponse, model_path

TRANSCRIBE_INSTRUCTION = "Transcribe the provided audio verbatim. Respond with the transcript only."


@dataclass(frozen=True)
class GeminiTranscriptionModel(BaseTranscriptionModel):
    RESPONSE_SHAPE = GenerateContentResponse

    def create_transcription_payload(self, request: TranscriptionRequest) -> Dict[str, Any]:
        instruction = TRANSCRIBE_INSTRUCTION
        if request.language:
            instruction += f" The spoken language is '{request.language}'."
        if request.prompt:
            instruction += f" {request.prompt}"
        payload: Dict[str, Any] = {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {"text": instruction},
                        {
                            "inlineData": {
                                "mimeType": request.media_type,
                                "data": base64.b64encode(request.data).decode("ascii"),
                            }
                        },
                    ],
                }
            ]
        }
        generation_config = drop_none({"temperature": request.temperature})
        if generation_config:
            payload["generationConfig"] = generation_config
        return merge(payload, request.additional_params)

    def create_transcription_request(self, request: TranscriptionRequest) -> httpx.Request:
        return self.client.post(
            model_path(self.model, "generateContent"),
            json=self.create_transcription_payload(request),
            model=self.model,
        )

    def to_transcription_response(self, wire: GenerateContentResponse) -> TranscriptionResponse:
        text = "".join(p.text or "" for p in wire.parts())
        return TranscriptionResponse(text=text, raw=wire.model_dump(exclude_none=True))


__all__ = ["GeminiTranscriptionModel", "TRANSCRIBE_INSTRUCTION"]
