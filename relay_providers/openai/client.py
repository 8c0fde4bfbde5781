"""OpenAI client (bearer authentication).

Capabilities: completion, embeddings and transcription.
"""

from __future__ import annotations

from ..base.capabilities import Capability
from ..base.client import ProviderClient
from ..base.handles import resolve_ndims
from ..config.defaults import OPENAI_DEFAULT_BASE_URL
from .completion import OpenAICompletionModel
from .embedding import KNOWN_NDIMS, OpenAIEmbeddingModel
from .transcription import OpenAITranscriptionModel


class OpenAIClient(ProviderClient):
    provider_name = "openai"
    DEFAULT_BASE_URL = OPENAI_DEFAULT_BASE_URL
    API_KEY_HEADER = "Authorization"
    API_KEY_PREFIX = "Bearer "
    CAPABILITIES = frozenset({Capability.COMPLETION, Capability.EMBEDDINGS, Capability.TRANSCRIPTION})

    def completion_model(self, model: str) -> OpenAICompletionModel:
        return OpenAICompletionModel(self, model)

    def embedding_model(self, model: str) -> OpenAIEmbeddingModel:
        """Embedding handle with the dimensionality of a well-known model.

        Unknown models get ``ndims == 0``; prefer
        :meth:`embedding_model_with_ndims` for them.
        """
        return OpenAIEmbeddingModel(self, model, resolve_ndims(self, model, KNOWN_NDIMS))

    def embedding_model_with_ndims(self, model: str, ndims: int) -> OpenAIEmbeddingModel:
        return OpenAIEmbeddingModel(self, model, ndims)

    def transcription_model(self, model: str) -> OpenAITranscriptionModel:
        return OpenAITranscriptionModel(self, model)


__all__ = ["OpenAIClient"]
