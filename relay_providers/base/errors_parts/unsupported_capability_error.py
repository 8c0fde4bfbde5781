"""UnsupportedCapabilityError (single-class module).

Raised only when a caller explicitly unwraps an ``Unsupported`` capability
result. Capability queries themselves never raise.
"""
from __future__ import annotations

from .error_code import ErrorCode
from .provider_error import ProviderError


class UnsupportedCapabilityError(ProviderError):
    """Conversion to a capability the provider does not implement.

    Attributes:
        capability: Value of the requested capability (e.g., ``"embeddings"``).
    """

    def __init__(self, capability: str, provider: str) -> None:
        super().__init__(
            code=ErrorCode.UNSUPPORTED,
            message=f"{capability} is not supported by this provider",
            provider=provider,
        )
        self.capability = capability


__all__ = ["UnsupportedCapabilityError"]
