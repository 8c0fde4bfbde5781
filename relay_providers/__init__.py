"""relay_providers package

Unified client surface for several hosted model providers (Anthropic,
Gemini, Together and OpenAI) with one normalized streaming contract.

Public API (re-exported):
    - Version: ``__version__``
    - Clients: :class:`AnthropicClient`, :class:`GeminiClient`,
      :class:`TogetherClient`, :class:`OpenAIClient`
    - Factory: :func:`create`, :class:`ProviderFactory`
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode` and subclasses
    - Capability queries: :class:`Capability`, :func:`supports`

Example::

    client = create("anthropic")
    model = client.completion_model("claude-3-5-sonnet-latest")
    stream = await model.stream(CompletionRequest.from_prompt("hi"))
    async for event in stream:
        print(event.delta, end="")
"""

from typing import Any

from .anthropic import AnthropicClient
from .base import (
    Capability,
    CompletionRequest,
    CompletionResponse,
    ConfigurationError,
    DecodeError,
    ErrorCode,
    Message,
    ProviderClient,
    ProviderError,
    ProviderFactory,
    RequestError,
    StreamError,
    StreamEvent,
    UnknownProviderError,
    UnsupportedCapabilityError,
    supports,
)
from .gemini import GeminiClient
from .openai import OpenAIClient
from .together import TogetherClient

__version__ = "0.1.0"


def create(provider: str, **kwargs: Any) -> ProviderClient:
    """Create a provider client by canonical name (see :meth:`ProviderFactory.create`)."""
    return ProviderFactory.create(provider, **kwargs)


__all__ = [
    "__version__",
    "create",
    "ProviderFactory",
    "UnknownProviderError",
    "ProviderClient",
    "AnthropicClient",
    "GeminiClient",
    "TogetherClient",
    "OpenAIClient",
    "Capability",
    "supports",
    "CompletionRequest",
    "CompletionResponse",
    "Message",
    "StreamEvent",
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "RequestError",
    "DecodeError",
    "StreamError",
    "UnsupportedCapabilityError",
]
