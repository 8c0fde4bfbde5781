"""EmbeddingsClient Protocol (single-class module).

Capability interface for clients that can hand out embedding models.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .embedding_model import EmbeddingModel


@runtime_checkable
class EmbeddingsClient(Protocol):
    """Provider client exposing the embeddings capability.

    ``embedding_model`` resolves the dimensionality from the provider's table
    of well-known models and falls back to ``0`` (with a logged warning) for
    unknown names. Prefer ``embedding_model_with_ndims`` whenever the
    dimensionality is known to the caller.
    """

    def embedding_model(self, model: str) -> EmbeddingModel:
        ...

    def embedding_model_with_ndims(self, model: str, ndims: int) -> EmbeddingModel:
        ...


__all__ = ["EmbeddingsClient"]
