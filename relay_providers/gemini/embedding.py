"""Gemini embeddings via ``:batchEmbedContents``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, ConfigDict

from ..base.handles import BaseEmbeddingModel
from .wire import model_path

EMBEDDING_001 = "embedding-001"
TEXT_EMBEDDING_004 = "text-embedding-004"

KNOWN_NDIMS: Dict[str, int] = {
    EMBEDDING_001: 768,
    TEXT_EMBEDDING_004: 768,
}


class GeminiEmbeddingValues(BaseModel):
    model_config = ConfigDict(extra="ignore")

    values: List[float]


class BatchEmbedContentsResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    embeddings: List[GeminiEmbeddingValues]


@dataclass(frozen=True)
class GeminiEmbeddingModel(BaseEmbeddingModel):
    RESPONSE_SHAPE = BatchEmbedContentsResponse
    # batchEmbedContents accepts at most 100 requests per call.
    MAX_DOCUMENTS = 100

    def embedding_path(self) -> str:
        return model_path(self.model, "batchEmbedContents")

    def create_embedding_request(self, texts: Sequence[str]) -> Dict[str, Any]:
        name = self.model if self.model.startswith("models/") else f"models/{self.model}"
        requests: List[Dict[str, Any]] = []
        for text in texts:
            requests.append({"model": name, "content": {"parts": [{"text": text}]}})
        return {"requests": requests}

    def to_vectors(self, wire: BatchEmbedContentsResponse) -> List[List[float]]:
        return [e.values for e in wire.embeddings]


__all__ = [
    "GeminiEmbeddingModel",
    "BatchEmbedContentsResponse",
    "KNOWN_NDIMS",
    "EMBEDDING_001",
    "TEXT_EMBEDDING_004",
]
