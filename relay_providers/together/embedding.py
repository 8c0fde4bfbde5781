"""Together embeddings (OpenAI-compatible wire format on ``/v1/embeddings``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from ..openai.embedding import OpenAIEmbeddingModel

EMBEDDINGS_PATH = "/v1/embeddings"

M2_BERT_80M_8K_RETRIEVAL = "togethercomputer/m2-bert-80M-8k-retrieval"
M2_BERT_80M_32K_RETRIEVAL = "togethercomputer/m2-bert-80M-32k-retrieval"
M2_BERT_80M_2K_RETRIEVAL = "togethercomputer/m2-bert-80M-2k-retrieval"
BGE_LARGE_EN_V1_5 = "BAAI/bge-large-en-v1.5"
BGE_BASE_EN_V1_5 = "BAAI/bge-base-en-v1.5"

KNOWN_NDIMS: Dict[str, int] = {
    M2_BERT_80M_8K_RETRIEVAL: 768,
    M2_BERT_80M_32K_RETRIEVAL: 768,
    M2_BERT_80M_2K_RETRIEVAL: 768,
    BGE_LARGE_EN_V1_5: 1024,
    BGE_BASE_EN_V1_5: 768,
}


@dataclass(frozen=True)
class TogetherEmbeddingModel(OpenAIEmbeddingModel):
    def embedding_path(self) -> str:
        return EMBEDDINGS_PATH


__all__ = [
    "TogetherEmbeddingModel",
    "KNOWN_NDIMS",
    "EMBEDDINGS_PATH",
    "M2_BERT_80M_8K_RETRIEVAL",
    "M2_BERT_80M_32K_RETRIEVAL",
    "M2_BERT_80M_2K_RETRIEVAL",
    "BGE_LARGE_EN_V1_5",
    "BGE_BASE_EN_V1_5",
]
