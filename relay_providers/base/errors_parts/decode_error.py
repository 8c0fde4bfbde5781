"""DecodeError (single-class module)."""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class DecodeError(ProviderError):
    """A response body matched neither the expected success shape nor the error shape."""

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        model: Optional[str] = None,
        raw: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.DECODE,
            message=message,
            provider=provider,
            model=model,
            retryable=False,
            raw=raw,
        )


__all__ = ["DecodeError"]
