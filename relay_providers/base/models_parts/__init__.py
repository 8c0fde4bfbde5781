"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`relay_providers.base.models_parts` if needed, while `relay_providers.base.models`
remains the primary stable import path.
"""

from .content_part import ContentPart, ContentPartType
from .message import Message, Role
from .tool_definition import ToolDefinition
from .provider_metadata import ProviderMetadata
from .completion_request import CompletionRequest
from .completion_response import CompletionResponse
from .embedding import Embedding
from .transcription import TranscriptionRequest, TranscriptionResponse

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
