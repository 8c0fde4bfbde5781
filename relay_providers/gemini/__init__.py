"""Gemini provider package."""

from .client import GeminiClient
from .completion import GeminiCompletionModel
from .embedding import EMBEDDING_001, TEXT_EMBEDDING_004, GeminiEmbeddingModel
from .streaming import GeminiStreamTranslator
from .transcription import GeminiTranscriptionModel

# Well-known completion model identifiers.
GEMINI_1_5_FLASH = "gemini-1.5-flash"
GEMINI_1_5_PRO = "gemini-1.5-pro"
GEMINI_2_0_FLASH = "gemini-2.0-flash"

__all__ = [
    "GeminiClient",
    "GeminiCompletionModel",
    "GeminiEmbeddingModel",
    "GeminiTranscriptionModel",
    "GeminiStreamTranslator",
    "EMBEDDING_001",
    "TEXT_EMBEDDING_004",
    "GEMINI_1_5_FLASH",
    "GEMINI_1_5_PRO",
    "GEMINI_2_0_FLASH",
]
