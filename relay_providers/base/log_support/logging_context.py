"""Identity fields attached to every structured provider log event."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Who a log event is about: provider, model and call identifiers.

    ``extra`` entries are flattened next to the named fields by
    :meth:`to_dict`; unset values are left out.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    response_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def with_ids(self, request_id: Optional[str] = None, response_id: Optional[str] = None) -> "LogContext":
        """Copy of this context carrying the identifiers of a finished call."""
        return replace(
            self,
            request_id=request_id or self.request_id,
            response_id=response_id or self.response_id,
            extra=dict(self.extra),
        )

    def to_dict(self) -> Dict[str, Any]:
        fields = {
            "provider": self.provider,
            "model": self.model,
            "request_id": self.request_id,
            "response_id": self.response_id,
            **self.extra,
        }
        return {k: v for k, v in fields.items() if v is not None}


__all__ = ["LogContext"]
