"""Together provider package."""

from .client import TogetherClient
from .completion import TogetherCompletionModel
from .embedding import (
    BGE_BASE_EN_V1_5,
    BGE_LARGE_EN_V1_5,
    M2_BERT_80M_8K_RETRIEVAL,
    TogetherEmbeddingModel,
)

__all__ = [
    "TogetherClient",
    "TogetherCompletionModel",
    "TogetherEmbeddingModel",
    "M2_BERT_80M_8K_RETRIEVAL",
    "BGE_LARGE_EN_V1_5",
    "BGE_BASE_EN_V1_5",
]
