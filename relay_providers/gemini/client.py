"""Gemini client (Google Generative Language API).

Authentication is a ``key`` query parameter merged into every request URL
by the shared transport; it never appears in a header. Streaming requests
additionally carry ``alt=sse``, placed after the key.

Capabilities: completion, embeddings and transcription.
"""

from __future__ import annotations

from ..base.capabilities import Capability
from ..base.client import ProviderClient
from ..base.handles import resolve_ndims
from ..config.defaults import GEMINI_DEFAULT_BASE_URL
from .completion import GeminiCompletionModel
from .embedding import KNOWN_NDIMS, GeminiEmbeddingModel
from .transcription import GeminiTranscriptionModel


class GeminiClient(ProviderClient):
    provider_name = "gemini"
    DEFAULT_BASE_URL = GEMINI_DEFAULT_BASE_URL
    API_KEY_QUERY_PARAM = "key"
    SSE_PARAMS = {"alt": "sse"}
    CAPABILITIES = frozenset({Capability.COMPLETION, Capability.EMBEDDINGS, Capability.TRANSCRIPTION})

    def completion_model(self, model: str) -> GeminiCompletionModel:
        return GeminiCompletionModel(self, model)

    def embedding_model(self, model: str) -> GeminiEmbeddingModel:
        """Embedding handle with the dimensionality of a well-known model.

        Unknown models get ``ndims == 0`` (a warning is logged); if that is
        the case prefer :meth:`embedding_model_with_ndims`.
        """
        return GeminiEmbeddingModel(self, model, resolve_ndims(self, model, KNOWN_NDIMS))

    def embedding_model_with_ndims(self, model: str, ndims: int) -> GeminiEmbeddingModel:
        return GeminiEmbeddingModel(self, model, ndims)

    def transcription_model(self, model: str) -> GeminiTranscriptionModel:
        return GeminiTranscriptionModel(self, model)


__all__ = ["GeminiClient"]
