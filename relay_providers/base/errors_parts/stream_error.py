"""StreamError (single-class module).

Mid-stream failures: disconnection, an undecodable chunk, an error payload
reported by the provider inside the event stream, or misuse of a
single-consumer stream. The streaming normalizer converts these into a
failed terminal event instead of letting them escape the iterator.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class StreamError(ProviderError):
    """Failure while consuming an incremental completion stream."""

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        model: Optional[str] = None,
        raw: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.STREAM,
            message=message,
            provider=provider,
            model=model,
            retryable=False,
            raw=raw,
        )


__all__ = ["StreamError"]
