"""Provider client core: immutable client handle and its builder.

``ProviderClient`` is the handle every capability hangs off. It owns a base
URL and a shared ``httpx.AsyncClient`` with authentication baked in, and it
never changes after :meth:`ClientBuilder.build`. Copies made with
:meth:`ProviderClient.copy` share the same transport (and connection pool).

Subclasses describe their provider declaratively through class attributes:

- ``provider_name``: canonical provider key used in errors and logs.
- ``DEFAULT_BASE_URL`` / ``DEFAULT_VERSION``: builder defaults.
- ``API_KEY_HEADER`` + ``API_KEY_PREFIX``: header authentication
  (``x-api-key: K`` or ``Authorization: Bearer K``).
- ``API_KEY_QUERY_PARAM``: query authentication (``?key=K`` on every URL).
- ``VERSION_HEADER`` / ``FEATURE_HEADER``: protocol version and opt-in
  feature flag headers.
- ``SSE_PARAMS``: query parameters marking a streaming request.
- ``CAPABILITIES``: the capability interfaces the client implements.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Dict, FrozenSet, Iterable, List, Mapping, Optional, Type, TypeVar

import httpx

from ..config.env import get_env_var_name, is_placeholder, resolve_provider_key
from .capabilities import (
    Capability,
    CapabilityResult,
    as_audio_generation,
    as_completion,
    as_embeddings,
    as_image_generation,
    as_transcription,
    detect_capabilities,
)
from .constants import DEFAULT_HTTP_TIMEOUT, EVENT_STREAM_MEDIA_TYPE, MISSING_API_KEY_ERROR
from .errors import RETRYABLE_CODES, ConfigurationError, RequestError, classify_exception
from .http import TransportConfig, build_async_client, join_url
from .http.transport import TimeoutTypes
from .log_support import redact_url
from .logging import LogContext, get_logger, log_event

C = TypeVar("C", bound="ProviderClient")


@dataclass(frozen=True)
class ProviderClient:
    """Immutable handle: base URL plus a shared, pre-authenticated transport."""

    base_url: str
    http: httpx.AsyncClient = field(repr=False, compare=False)

    provider_name: ClassVar[str] = "provider"
    DEFAULT_BASE_URL: ClassVar[str] = ""
    DEFAULT_VERSION: ClassVar[Optional[str]] = None
    API_KEY_HEADER: ClassVar[Optional[str]] = None
    API_KEY_PREFIX: ClassVar[str] = ""
    API_KEY_QUERY_PARAM: ClassVar[Optional[str]] = None
    VERSION_HEADER: ClassVar[Optional[str]] = None
    FEATURE_HEADER: ClassVar[Optional[str]] = None
    SSE_PARAMS: ClassVar[Mapping[str, str]] = {}
    CAPABILITIES: ClassVar[FrozenSet[Capability]] = frozenset()
    BUILDER: ClassVar[Type["ClientBuilder"]]

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def builder(cls, api_key: str) -> "ClientBuilder":
        return cls.BUILDER(cls, api_key)

    @classmethod
    def new(cls: Type[C], api_key: str) -> C:
        """Build a client with every default applied."""
        return cls.builder(api_key).build()

    @classmethod
    def from_env(cls: Type[C]) -> C:
        """Build a client from the provider's API key environment variable.

        Raises:
            ConfigurationError: when no candidate variable is set or it holds a
                placeholder value (same rule as the config layer).
        """
        key, used = resolve_provider_key(cls.provider_name)
        if not key:
            var = get_env_var_name(cls.provider_name) or f"{cls.provider_name.upper()}_API_KEY"
            raise ConfigurationError(f"{MISSING_API_KEY_ERROR}: {var} not set", cls.provider_name)
        if is_placeholder(key):
            raise ConfigurationError(f"{MISSING_API_KEY_ERROR}: {used} holds a placeholder value", cls.provider_name)
        return cls.new(key)

    @classmethod
    def auth_headers(cls, api_key: str, *, version: Optional[str], features: List[str]) -> Dict[str, str]:
        """Return the static headers baked into every request."""
        headers: Dict[str, str] = {}
        if cls.API_KEY_HEADER:
            headers[cls.API_KEY_HEADER] = f"{cls.API_KEY_PREFIX}{api_key}"
        if cls.VERSION_HEADER and version:
            headers[cls.VERSION_HEADER] = version
        if cls.FEATURE_HEADER and features:
            headers[cls.FEATURE_HEADER] = ",".join(features)
        return headers

    @classmethod
    def auth_params(cls, api_key: str) -> Dict[str, str]:
        """Return the default query parameters appended to every request URL."""
        if cls.API_KEY_QUERY_PARAM:
            return {cls.API_KEY_QUERY_PARAM: api_key}
        return {}

    # ------------------------------------------------------------------
    # Handle semantics
    # ------------------------------------------------------------------
    @property
    def logger(self) -> logging.Logger:
        return get_logger(self.provider_name)

    def log_context(self, model: Optional[str] = None) -> LogContext:
        return LogContext(provider=self.provider_name, model=model)

    def copy(self: C) -> C:
        """Return a new handle sharing this client's transport."""
        return replace(self)

    async def aclose(self) -> None:
        """Close the shared transport; every copy of this client is closed too."""
        await self.http.aclose()

    async def __aenter__(self: C) -> C:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Scoped request factory
    # ------------------------------------------------------------------
    def url(self, path: str) -> str:
        return join_url(self.base_url, path)

    def redact(self, url: Any) -> str:
        secrets = (self.API_KEY_QUERY_PARAM,) if self.API_KEY_QUERY_PARAM else ()
        return redact_url(str(url), secrets)

    def post(
        self,
        path: str,
        *,
        json: Any = None,
        files: Any = None,
        data: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        model: Optional[str] = None,
    ) -> httpx.Request:
        """Return a POST request for ``base_url``/``path`` carrying the client auth."""
        request = self.http.build_request(
            "POST",
            self.url(path),
            json=json,
            files=files,
            data=data,
            params=params,
            headers=headers,
        )
        log_event(
            self.logger,
            "http.request",
            self.log_context(model),
            level=logging.DEBUG,
            method=request.method,
            url=self.redact(request.url),
        )
        return request

    def post_sse(self, path: str, *, json: Any = None, model: Optional[str] = None) -> httpx.Request:
        """Like :meth:`post`, but asking for an event-stream response.

        Query-authenticated providers also get their streaming indicator
        (``SSE_PARAMS``) appended after the API key.
        """
        return self.post(
            path,
            json=json,
            params=dict(self.SSE_PARAMS) or None,
            headers={"Accept": EVENT_STREAM_MEDIA_TYPE},
            model=model,
        )

    async def send(self, request: httpx.Request, *, stream: bool = False, model: Optional[str] = None) -> httpx.Response:
        """Send ``request``; transport failures raise :class:`RequestError`."""
        try:
            return await self.http.send(request, stream=stream)
        except httpx.HTTPError as exc:
            code = classify_exception(exc)
            log_event(
                self.logger,
                "http.error",
                self.log_context(model),
                level=logging.WARNING,
                url=self.redact(request.url),
                error_code=code.value,
                error=str(exc) or type(exc).__name__,
            )
            raise RequestError(
                f"{type(exc).__name__}: {exc}",
                self.provider_name,
                code=code,
                model=model,
                retryable=code in RETRYABLE_CODES,
                raw=exc,
            ) from exc

    # ------------------------------------------------------------------
    # Capability queries (never raise)
    # ------------------------------------------------------------------
    def capabilities(self) -> FrozenSet[Capability]:
        return detect_capabilities(self)

    def as_completion(self) -> CapabilityResult[Any]:
        return as_completion(self)

    def as_embeddings(self) -> CapabilityResult[Any]:
        return as_embeddings(self)

    def as_transcription(self) -> CapabilityResult[Any]:
        return as_transcription(self)

    def as_image_generation(self) -> CapabilityResult[Any]:
        return as_image_generation(self)

    def as_audio_generation(self) -> CapabilityResult[Any]:
        return as_audio_generation(self)


class ClientBuilder:
    """Transient, mutable staging object consumed by :meth:`build`.

    Example::

        client = (
            AnthropicClient.builder(key)
            .anthropic_version("2023-06-01")
            .anthropic_beta("prompt-caching-2024-07-31")
            .build()
        )
    """

    def __init__(self, client_cls: Type[ProviderClient], api_key: str) -> None:
        self._client_cls = client_cls
        self._api_key = api_key
        self._base_url = client_cls.DEFAULT_BASE_URL
        self._version = client_cls.DEFAULT_VERSION
        self._features: List[str] = []
        self._headers: Dict[str, str] = {}
        self._timeout: TimeoutTypes = DEFAULT_HTTP_TIMEOUT
        self._transport: Optional[httpx.AsyncBaseTransport] = None

    @property
    def provider(self) -> str:
        return self._client_cls.provider_name

    def base_url(self, base_url: str) -> "ClientBuilder":
        self._base_url = base_url
        return self

    def version(self, version: str) -> "ClientBuilder":
        self._version = version
        return self

    def feature(self, flag: str) -> "ClientBuilder":
        """Append one opt-in feature flag (order is preserved)."""
        self._features.append(flag)
        return self

    def features(self, flags: Iterable[str]) -> "ClientBuilder":
        self._features.extend(flags)
        return self

    def header(self, name: str, value: str) -> "ClientBuilder":
        """Add an extra static header sent with every request."""
        self._headers[name] = value
        return self

    def timeout(self, timeout: TimeoutTypes) -> "ClientBuilder":
        self._timeout = timeout
        return self

    def transport(self, transport: httpx.AsyncBaseTransport) -> "ClientBuilder":
        self._transport = transport
        return self

    def build(self) -> ProviderClient:
        """Validate the staged configuration and produce the client.

        Raises:
            ConfigurationError: empty API key, unusable base URL, illegal
                header characters, feature flags on a provider without a
                feature header, or transport initialization failure.
        """
        cls = self._client_cls
        if not self._api_key:
            raise ConfigurationError(MISSING_API_KEY_ERROR, cls.provider_name)
        if self._features and not cls.FEATURE_HEADER:
            raise ConfigurationError("provider does not accept feature flags", cls.provider_name)
        headers = cls.auth_headers(self._api_key, version=self._version, features=self._features)
        headers.update(self._headers)
        config = TransportConfig(
            base_url=self._base_url,
            headers=headers,
            params=cls.auth_params(self._api_key),
            timeout=self._timeout,
            transport=self._transport,
        )
        http = build_async_client(config, provider=cls.provider_name)
        client = cls(base_url=config.base_url, http=http)
        log_event(
            client.logger,
            "client.build",
            client.log_context(),
            base_url=client.base_url,
            auth="query" if cls.API_KEY_QUERY_PARAM else "header",
            version=self._version if cls.VERSION_HEADER else None,
            features=list(self._features) or None,
        )
        return client


ProviderClient.BUILDER = ClientBuilder

__all__ = ["ProviderClient", "ClientBuilder"]
