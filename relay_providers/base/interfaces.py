"""
Provider-agnostic interfaces (Protocols) for the providers layer.

This module re-exports Protocols split into single-class modules under
``relay_providers.base.interfaces_parts`` to keep imports stable for
upstream code.
"""

from __future__ import annotations

from .interfaces_parts import (
    AudioGenerationClient,
    CompletionClient,
    CompletionModel,
    EmbeddingModel,
    EmbeddingsClient,
    ImageGenerationClient,
    TranscriptionClient,
    TranscriptionModel,
)

__all__ = [
    "CompletionModel",
    "EmbeddingModel",
    "TranscriptionModel",
    "CompletionClient",
    "EmbeddingsClient",
    "TranscriptionClient",
    "ImageGenerationClient",
    "AudioGenerationClient",
]
