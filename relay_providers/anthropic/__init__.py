"""Anthropic provider package."""

from .client import AnthropicClient, AnthropicClientBuilder
from .completion import AnthropicCompletionModel, default_max_tokens
from .streaming import AnthropicStreamTranslator

# Well-known model identifiers.
CLAUDE_3_7_SONNET = "claude-3-7-sonnet-latest"
CLAUDE_3_5_SONNET = "claude-3-5-sonnet-latest"
CLAUDE_3_5_HAIKU = "claude-3-5-haiku-latest"
CLAUDE_3_OPUS = "claude-3-opus-latest"

__all__ = [
    "AnthropicClient",
    "AnthropicClientBuilder",
    "AnthropicCompletionModel",
    "AnthropicStreamTranslator",
    "default_max_tokens",
    "CLAUDE_3_7_SONNET",
    "CLAUDE_3_5_SONNET",
    "CLAUDE_3_5_HAIKU",
    "CLAUDE_3_OPUS",
]
