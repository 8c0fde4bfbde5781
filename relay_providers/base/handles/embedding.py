"""Base embedding model handle and dimensionality resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Dict, List, Mapping, Sequence, Type, TypeVar

from pydantic import BaseModel

from ..errors import DecodeError
from ..logging import log_event
from ..models import Embedding
from .common import execute_json

if TYPE_CHECKING:
    from ..client import ProviderClient

E = TypeVar("E", bound="BaseEmbeddingModel")


@dataclass(frozen=True)
class BaseEmbeddingModel:
    """Embedding handle: shared client, model identifier and dimensionality.

    ``ndims == 0`` means the dimensionality is unknown (see ``ndims_known``).
    Inputs longer than ``MAX_DOCUMENTS`` are sent in consecutive batches.
    """

    client: "ProviderClient"
    model: str
    ndims: int = 0

    RESPONSE_SHAPE: ClassVar[Type[BaseModel]]
    MAX_DOCUMENTS: ClassVar[int] = 1024

    @property
    def ndims_known(self) -> bool:
        return self.ndims > 0

    @property
    def max_documents(self) -> int:
        return self.MAX_DOCUMENTS

    def embedding_path(self) -> str:
        raise NotImplementedError

    def create_embedding_request(self, texts: Sequence[str]) -> Dict[str, Any]:
        raise NotImplementedError

    def to_vectors(self, wire: Any) -> List[List[float]]:
        raise NotImplementedError

    async def embed_texts(self, texts: Sequence[str]) -> List[Embedding]:
        docs = list(texts)
        out: List[Embedding] = []
        for start in range(0, len(docs), self.MAX_DOCUMENTS):
            batch = docs[start:start + self.MAX_DOCUMENTS]
            request = self.client.post(
                self.embedding_path(), json=self.create_embedding_request(batch), model=self.model
            )
            wire, _ = await execute_json(
                self.client, request, self.RESPONSE_SHAPE, model=self.model, operation="embedding"
            )
            vectors = self.to_vectors(wire)
            if len(vectors) != len(batch):
                raise DecodeError(
                    f"expected {len(batch)} embeddings, got {len(vectors)}",
                    self.client.provider_name,
                    model=self.model,
                )
            out.extend(Embedding(document=doc, vec=vec) for doc, vec in zip(batch, vectors))
        return out


def resolve_ndims(client: "ProviderClient", model: str, known: Mapping[str, int]) -> int:
    """Look ``model`` up in a provider's table of well-known dimensionalities.

    Unknown models resolve to ``0`` and log an ``embedding.ndims.unknown``
    warning pointing at ``embedding_model_with_ndims``.
    """
    ndims = known.get(model)
    if ndims is not None:
        return ndims
    log_event(
        client.logger,
        "embedding.ndims.unknown",
        client.log_context(model),
        level=logging.WARNING,
        ndims=0,
        hint="use embedding_model_with_ndims() to set the dimensionality explicitly",
    )
    return 0


__all__ = ["BaseEmbeddingModel", "resolve_ndims"]
