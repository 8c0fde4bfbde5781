"""Interfaces (Protocols) split into single-class modules.

This package provides one Protocol per file while allowing
``relay_providers.base.interfaces`` to re-export a stable API.
"""

from .completion_model import CompletionModel
from .embedding_model import EmbeddingModel
from .transcription_model import TranscriptionModel
from .completion_client import CompletionClient
from .embeddings_client import EmbeddingsClient
from .transcription_client import TranscriptionClient
from .image_generation_client import ImageGenerationClient
from .audio_generation_client import AudioGenerationClient

__all__ = [
    "CompletionModel",
    "EmbeddingModel",
    "TranscriptionModel",
    "CompletionClient",
    "EmbeddingsClient",
    "TranscriptionClient",
    "ImageGenerationClient",
    "AudioGenerationClient",
]
