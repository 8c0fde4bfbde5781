"""RequestError (single-class module).

Raised when a request fails at the transport level or the provider answers
with a non-2xx status. When the body carried a decodable error envelope its
message is used verbatim.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class RequestError(ProviderError):
    """Network failure or provider-reported error for a single request.

    Attributes:
        status_code: HTTP status when a response was received, else ``None``.
    """

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        code: ErrorCode = ErrorCode.UNKNOWN,
        model: Optional[str] = None,
        status_code: Optional[int] = None,
        retryable: bool = False,
        raw: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            provider=provider,
            model=model,
            retryable=retryable,
            raw=raw,
        )
        self.status_code = status_code


__all__ = ["RequestError"]
