"""
Per-call metadata attached to completion results.

Handles fill in the transport facts (status, latency, request id) after the
provider-specific conversion has set the model, response id and usage.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ProviderMetadata:
    """What is known about the call that produced a result.

    Attributes:
        provider_name: Provider key, e.g. ``"together"``.
        model_name: Model reported by the provider (falls back to the requested one).
        http_status: Status of the HTTP response.
        request_id: ``request-id`` / ``x-request-id`` response header.
        response_id: Provider's message or response identifier.
        latency_ms: Time from send to decoded result (or terminal stream event).
        usage: Canonical token usage, ``{"prompt", "completion", "total"}``.
        extra: Provider-specific details such as ``finish_reason``.
    """

    provider_name: str
    model_name: str
    http_status: Optional[int] = None
    request_id: Optional[str] = None
    response_id: Optional[str] = None
    latency_ms: Optional[float] = None
    usage: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def record_call(
        self,
        http_status: Optional[int],
        latency_ms: Optional[float],
        request_id: Optional[str] = None,
    ) -> None:
        """Store transport facts; a request id already set by the provider wins."""
        self.http_status = http_status
        self.latency_ms = latency_ms
        self.request_id = self.request_id or request_id

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "ProviderMetadata",
]
