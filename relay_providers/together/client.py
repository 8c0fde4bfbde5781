"""Together client (bearer authentication).

Capabilities: completion and embeddings. Transcription, image and audio
generation are reported as unsupported.
"""

from __future__ import annotations

from ..base.capabilities import Capability
from ..base.client import ProviderClient
from ..base.handles import resolve_ndims
from ..config.defaults import TOGETHER_DEFAULT_BASE_URL
from .completion import TogetherCompletionModel
from .embedding import KNOWN_NDIMS, TogetherEmbeddingModel


class TogetherClient(ProviderClient):
    provider_name = "together"
    DEFAULT_BASE_URL = TOGETHER_DEFAULT_BASE_URL
    API_KEY_HEADER = "Authorization"
    API_KEY_PREFIX = "Bearer "
    CAPABILITIES = frozenset({Capability.COMPLETION, Capability.EMBEDDINGS})

    def completion_model(self, model: str) -> TogetherCompletionModel:
        return TogetherCompletionModel(self, model)

    def embedding_model(self, model: str) -> TogetherEmbeddingModel:
        """Embedding handle; unknown models get ``ndims == 0`` (see ``embedding_model_with_ndims``)."""
        return TogetherEmbeddingModel(self, model, resolve_ndims(self, model, KNOWN_NDIMS))

    def embedding_model_with_ndims(self, model: str, ndims: int) -> TogetherEmbeddingModel:
        return TogetherEmbeddingModel(self, model, ndims)


__all__ = ["TogetherClient"]
