"""ConfigurationError (single-class module).

Raised at construction time when a client cannot be built: missing or empty
credentials, header values that are illegal on the wire, a malformed base URL
or a transport that fails to initialize.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class ConfigurationError(ProviderError):
    """Client configuration could not be turned into a usable client."""

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        model: Optional[str] = None,
        raw: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.CONFIGURATION,
            message=message,
            provider=provider,
            model=model,
            retryable=False,
            raw=raw,
        )


__all__ = ["ConfigurationError"]
