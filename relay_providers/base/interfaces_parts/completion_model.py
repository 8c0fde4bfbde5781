"""CompletionModel Protocol (single-class module).

Handle produced by a completion-capable client for one model identifier.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..models import CompletionRequest, CompletionResponse
    from ..streaming import StreamingCompletionResponse


@runtime_checkable
class CompletionModel(Protocol):
    """Completion handle bound to a shared client and a model identifier.

    Implementations build the provider wire payload from a canonical
    ``CompletionRequest``; ``stream`` applies the provider's streaming
    directive as a shallow merge before sending.
    """

    model: str

    def create_completion_request(self, request: "CompletionRequest") -> Dict[str, Any]:
        """Return the provider JSON payload for ``request`` (no I/O)."""
        ...

    async def completion(self, request: "CompletionRequest") -> "CompletionResponse":
        """Execute one non-streaming completion."""
        ...

    async def stream(self, request: "CompletionRequest") -> "StreamingCompletionResponse":
        """Open a streaming completion."""
        ...


__all__ = ["CompletionModel"]
