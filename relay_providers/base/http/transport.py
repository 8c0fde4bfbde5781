"""Transport configuration for provider clients.

Purpose:
    Build one ``httpx.AsyncClient`` per provider client with authentication
    baked in permanently, either as static headers or as default query
    parameters merged into every request URL.

External dependencies:
    - ``httpx`` for the asynchronous, connection-pooling HTTP client.

Failure semantics:
    - Invalid header names or values (non-ASCII, control characters such as
      CR/LF) and unusable base URLs raise :class:`ConfigurationError` at
      construction time.
    - Any failure raised by ``httpx`` while creating the client (for example
      an unavailable TLS backend) is wrapped in :class:`ConfigurationError`
      with the original exception chained.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Union

import httpx

from ..errors import ConfigurationError

# RFC 9110 token characters for field names.
_HEADER_NAME_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
# Visible ASCII plus space and horizontal tab; no CR, LF or other controls.
_HEADER_VALUE_RE = re.compile(r"^[\t\x20-\x7e]*$")

TimeoutTypes = Union[None, float, httpx.Timeout]


@dataclass(frozen=True)
class TransportConfig:
    """Everything needed to construct a provider's shared HTTP client.

    Attributes:
        base_url: Absolute ``http``/``https`` URL every request path is joined to.
        headers: Static headers sent with every request (auth, version, features).
        params: Default query parameters sent with every request (query auth).
        timeout: Optional timeout; ``None`` leaves waits unbounded.
        transport: Optional injected transport (e.g. ``httpx.MockTransport``).
    """

    base_url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, str] = field(default_factory=dict)
    timeout: TimeoutTypes = None
    transport: Optional[httpx.AsyncBaseTransport] = None


def validate_header(name: str, value: str, *, provider: str) -> None:
    """Raise ``ConfigurationError`` unless ``name: value`` is a legal HTTP header."""
    if not _HEADER_NAME_RE.match(name or ""):
        raise ConfigurationError(f"invalid header name {name!r}", provider)
    if not isinstance(value, str) or not _HEADER_VALUE_RE.match(value):
        # The value may be a credential; never echo it.
        raise ConfigurationError(f"invalid characters in value of header {name!r}", provider)


def validate_base_url(base_url: str, *, provider: str) -> str:
    """Return ``base_url`` if it is an absolute http(s) URL, else raise."""
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ConfigurationError(f"invalid base url {base_url!r}", provider) from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"base url must be absolute http(s): {base_url!r}", provider)
    return base_url


def build_async_client(config: TransportConfig, *, provider: str) -> httpx.AsyncClient:
    """Validate ``config`` and return the provider's shared ``httpx.AsyncClient``."""
    validate_base_url(config.base_url, provider=provider)
    headers: Dict[str, str] = {}
    for name, value in config.headers.items():
        validate_header(name, value, provider=provider)
        headers[name] = value
    for name, value in config.params.items():
        if not isinstance(value, str) or not value:
            raise ConfigurationError(f"empty value for query parameter {name!r}", provider)
    try:
        return httpx.AsyncClient(
            headers=headers,
            params=dict(config.params),
            timeout=config.timeout,
            transport=config.transport,
        )
    except (httpx.HTTPError, ValueError, TypeError, OSError, ImportError) as exc:
        raise ConfigurationError(f"transport initialization failed: {exc}", provider) from exc


__all__ = [
    "TransportConfig",
    "TimeoutTypes",
    "validate_header",
    "validate_base_url",
    "build_async_client",
]
