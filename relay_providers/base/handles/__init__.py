"""Model handles produced by the capability factories."""

from .common import CallInfo, execute_json
from .completion import BaseCompletionModel
from .embedding import BaseEmbeddingModel, resolve_ndims
from .transcription import BaseTranscriptionModel

__all__ = [
    "CallInfo",
    "execute_json",
    "BaseCompletionModel",
    "BaseEmbeddingModel",
    "resolve_ndims",
    "BaseTranscriptionModel",
]
