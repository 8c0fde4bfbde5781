"""Anthropic client.

Authentication and protocol selection are static headers baked into the
shared transport:

- ``x-api-key``: the API key.
- ``anthropic-version``: protocol version (default ``2023-06-01``).
- ``anthropic-beta``: opt-in beta features, comma-joined in caller order;
  omitted when no feature is requested.
"""

from __future__ import annotations

from typing import Iterable

from ..base.capabilities import Capability
from ..base.client import ClientBuilder, ProviderClient
from ..config.defaults import ANTHROPIC_DEFAULT_BASE_URL, ANTHROPIC_DEFAULT_VERSION
from .completion import AnthropicCompletionModel


class AnthropicClientBuilder(ClientBuilder):
    def anthropic_version(self, version: str) -> "AnthropicClientBuilder":
        self.version(version)
        return self

    def anthropic_beta(self, flag: str) -> "AnthropicClientBuilder":
        self.feature(flag)
        return self

    def anthropic_betas(self, flags: Iterable[str]) -> "AnthropicClientBuilder":
        self.features(flags)
        return self


class AnthropicClient(ProviderClient):
    """Client for the Anthropic API (completion only)."""

    provider_name = "anthropic"
    DEFAULT_BASE_URL = ANTHROPIC_DEFAULT_BASE_URL
    DEFAULT_VERSION = ANTHROPIC_DEFAULT_VERSION
    API_KEY_HEADER = "x-api-key"
    VERSION_HEADER = "anthropic-version"
    FEATURE_HEADER = "anthropic-beta"
    CAPABILITIES = frozenset({Capability.COMPLETION})
    BUILDER = AnthropicClientBuilder

    def completion_model(self, model: str) -> AnthropicCompletionModel:
        return AnthropicCompletionModel(self, model)


__all__ = ["AnthropicClient", "AnthropicClientBuilder"]
