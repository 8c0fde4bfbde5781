"""
Providers Base Package

Exports the provider-agnostic core used by every provider package:

- Client: immutable ``ProviderClient`` handle and its ``ClientBuilder``
- Capabilities: declared capability registry and capability queries
- Models (DTOs): canonical completion/embedding/transcription objects
- Response decoding: success-or-error envelope (``ApiResponse``)
- Streaming: frame decoders, ``StreamEvent`` normalization, stream lifecycle
- Factory: lazy creation of provider clients by canonical name
"""

from .capabilities import (
    Capability,
    CapabilityResult,
    Supported,
    Unsupported,
    supports,
)
from .client import ClientBuilder, ProviderClient
from .errors import (
    ConfigurationError,
    DecodeError,
    ErrorCode,
    ProviderError,
    RequestError,
    StreamError,
    UnsupportedCapabilityError,
)
from .factory import ProviderFactory, UnknownProviderError
from .interfaces import (
    AudioGenerationClient,
    CompletionClient,
    CompletionModel,
    EmbeddingModel,
    EmbeddingsClient,
    ImageGenerationClient,
    TranscriptionClient,
    TranscriptionModel,
)
from .models import (
    CompletionRequest,
    CompletionResponse,
    ContentPart,
    ContentPartType,
    Embedding,
    Message,
    ProviderMetadata,
    Role,
    ToolDefinition,
    TranscriptionRequest,
    TranscriptionResponse,
)
from .response import ApiErrorResponse, ApiResponse, decode_api_response
from .streaming import (
    END_OF_STREAM,
    StreamEvent,
    StreamingCompletionResponse,
    StreamMetrics,
    ToolCallDelta,
    accumulate_events,
    finalize_stream,
)

__all__ = [
    # Client
    "ProviderClient",
    "ClientBuilder",
    # Capabilities
    "Capability",
    "CapabilityResult",
    "Supported",
    "Unsupported",
    "supports",
    # Interfaces
    "CompletionClient",
    "EmbeddingsClient",
    "TranscriptionClient",
    "ImageGenerationClient",
    "AudioGenerationClient",
    "CompletionModel",
    "EmbeddingModel",
    "TranscriptionModel",
    # Models
    "Role",
    "ContentPartType",
    "ContentPart",
    "Message",
    "ToolDefinition",
    "ProviderMetadata",
    "CompletionRequest",
    "CompletionResponse",
    "Embedding",
    "TranscriptionRequest",
    "TranscriptionResponse",
    # Responses
    "ApiResponse",
    "ApiErrorResponse",
    "decode_api_response",
    # Streaming
    "END_OF_STREAM",
    "StreamEvent",
    "ToolCallDelta",
    "StreamMetrics",
    "StreamingCompletionResponse",
    "accumulate_events",
    "finalize_stream",
    # Errors
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "RequestError",
    "DecodeError",
    "StreamError",
    "UnsupportedCapabilityError",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
]
