"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``relay_providers.base.models_parts``.
"""

from .models_parts.content_part import ContentPart, ContentPartType
from .models_parts.message import Message, Role
from .models_parts.tool_definition import ToolDefinition
from .models_parts.provider_metadata import ProviderMetadata
from .models_parts.completion_request import CompletionRequest
from .models_parts.completion_response import CompletionResponse
from .models_parts.embedding import Embedding
from .models_parts.transcription import TranscriptionRequest, TranscriptionResponse

__all__ = [
    "ContentPart",
    "ContentPartType",
    "Message",
    "Role",
    "ToolDefinition",
    "ProviderMetadata",
    "CompletionRequest",
    "CompletionResponse",
    "Embedding",
    "TranscriptionRequest",
    "TranscriptionResponse",
]
