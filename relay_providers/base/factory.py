"""Provider Factory utilities.

Purpose
-------
Centralize creation of provider clients by canonical name. Client modules
are imported lazily using ``importlib`` so importing the factory does not pull
in every provider.

Configuration
-------------
Values come from :func:`relay_providers.config.get_provider_config` (defaults,
optional config file, environment) with explicit keyword arguments taking
precedence.

Failure semantics
-----------------
- Unknown names or unimportable client modules raise :class:`UnknownProviderError`.
- A missing API key or invalid configuration raises ``ConfigurationError``
  from the builder. No retries or fallbacks are attempted.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Iterable, Optional, Tuple, Type

import httpx

from ..config import ConfigFileError, get_provider_config
from .client import ProviderClient
from .constants import MISSING_API_KEY_ERROR
from .errors import ConfigurationError
from .http.transport import TimeoutTypes


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the client class is missing.
    """


class ProviderFactory:
    """Create provider clients based on a canonical name (e.g., ``"gemini"``)."""

    # Map canonical provider names to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "anthropic": {"module": "relay_providers.anthropic.client", "class": "AnthropicClient"},
        "gemini": {"module": "relay_providers.gemini.client", "class": "GeminiClient"},
        "together": {"module": "relay_providers.together.client", "class": "TogetherClient"},
        "openai": {"module": "relay_providers.openai.client", "class": "OpenAIClient"},
    }

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        return tuple(cls._PROVIDERS)

    @classmethod
    def client_class(cls, provider: str) -> Type[ProviderClient]:
        """Resolve the client class registered for ``provider``."""
        name = (provider or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")
        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc
        try:
            return getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Client class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

    @classmethod
    def create(
        cls,
        provider: str,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        version: Optional[str] = None,
        features: Optional[Iterable[str]] = None,
        timeout: TimeoutTypes = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> ProviderClient:
        """Create a provider client.

        Parameters
        ----------
        provider:
            Canonical provider name (e.g., ``"anthropic"``).
        api_key / base_url / version:
            Explicit values; when omitted they come from the merged config.
        features:
            Ordered opt-in feature flags (header-feature providers only).
        timeout / transport:
            Forwarded to the builder.

        Raises
        ------
        UnknownProviderError
            If the provider is unknown or its client cannot be imported.
        ConfigurationError
            If no API key is configured or the configuration is invalid.
        """
        klass = cls.client_class(provider)
        try:
            cfg = get_provider_config(
                klass.provider_name,
                {"api_key": api_key, "base_url": base_url, "version": version},
            )
        except ConfigFileError as exc:
            raise ConfigurationError(str(exc), klass.provider_name, raw=exc) from exc
        key = cfg.get("api_key")
        if not key:
            raise ConfigurationError(MISSING_API_KEY_ERROR, klass.provider_name)
        builder = klass.builder(key)
        if cfg.get("base_url"):
            builder.base_url(cfg["base_url"])
        if cfg.get("version"):
            builder.version(cfg["version"])
        if features:
            builder.features(features)
        if timeout is not None:
            builder.timeout(timeout)
        if transport is not None:
            builder.transport(transport)
        return builder.build()


__all__ = ["ProviderFactory", "UnknownProviderError"]
