"""OpenAI provider package and the OpenAI-compatible streaming sender."""

from .client import OpenAIClient
from .completion import OpenAIChatResponse, OpenAICompletionModel
from .embedding import (
    TEXT_EMBEDDING_3_LARGE,
    TEXT_EMBEDDING_3_SMALL,
    TEXT_EMBEDDING_ADA_002,
    OpenAIEmbeddingModel,
)
from .streaming import OpenAICompatStreamTranslator, send_compatible_streaming_request
from .transcription import WHISPER_1, OpenAITranscriptionModel

__all__ = [
    "OpenAIClient",
    "OpenAIChatResponse",
    "OpenAICompletionModel",
    "OpenAIEmbeddingModel",
    "OpenAITranscriptionModel",
    "OpenAICompatStreamTranslator",
    "send_compatible_streaming_request",
    "TEXT_EMBEDDING_3_SMALL",
    "TEXT_EMBEDDING_3_LARGE",
    "TEXT_EMBEDDING_ADA_002",
    "WHISPER_1",
]
