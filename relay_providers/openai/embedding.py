"""OpenAI embeddings handle (also the wire format Together speaks)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, ConfigDict

from ..base.handles import BaseEmbeddingModel

EMBEDDINGS_PATH = "/embeddings"

TEXT_EMBEDDING_3_SMALL = "text-embedding-3-small"
TEXT_EMBEDDING_3_LARGE = "text-embedding-3-large"
TEXT_EMBEDDING_ADA_002 = "text-embedding-ada-002"

KNOWN_NDIMS: Dict[str, int] = {
    TEXT_EMBEDDING_3_SMALL: 1536,
    TEXT_EMBEDDING_3_LARGE: 3072,
    TEXT_EMBEDDING_ADA_002: 1536,
}


class OpenAIEmbeddingData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    embedding: List[float]
    index: int = 0


class OpenAIEmbeddingResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: List[OpenAIEmbeddingData]
    model: str = ""


@dataclass(frozen=True)
class OpenAIEmbeddingModel(BaseEmbeddingModel):
    RESPONSE_SHAPE = OpenAIEmbeddingResponse
    MAX_DOCUMENTS = 1024

    def embedding_path(self) -> str:
        return EMBEDDINGS_PATH

    def create_embedding_request(self, texts: Sequence[str]) -> Dict[str, Any]:
        return {"model": self.model, "input": list(texts)}

    def to_vectors(self, wire: OpenAIEmbeddingResponse) -> List[List[float]]:
        return [d.embedding for d in sorted(wire.data, key=lambda d: d.index)]


__all__ = [
    "OpenAIEmbeddingModel",
    "OpenAIEmbeddingResponse",
    "KNOWN_NDIMS",
    "EMBEDDINGS_PATH",
    "TEXT_EMBEDDING_3_SMALL",
    "TEXT_EMBEDDING_3_LARGE",
    "TEXT_EMBEDDING_ADA_002",
]
