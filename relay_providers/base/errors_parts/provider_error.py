"""Root exception of the provider layer.

Every failure raised by a client, model handle or stream carries a
normalized :class:`ErrorCode` plus the provider (and model, when known) it
came from. The classes beside this module narrow it down to the failure
families callers usually branch on.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """A failed provider operation.

    Attributes:
        code: Normalized failure category.
        message: Human-readable description (provider text where available).
        provider: Provider key, e.g. ``"anthropic"``.
        model: Model identifier involved, if any.
        retryable: Whether repeating the same call may succeed. Nothing in
            this package retries; the flag is for the caller.
        raw: Underlying exception or validation error.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def log_fields(self) -> Dict[str, Any]:
        """Fields describing this error in a structured log event."""
        return {
            "error_code": self.code.value,
            "status": getattr(self, "status_code", None),
            "retryable": self.retryable,
            "error": self.message,
        }

    def __str__(self) -> str:
        where = f"{self.provider}/{self.model}" if self.model else self.provider
        return f"[{where}] {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
