"""CompletionClient Protocol (single-class module).

Capability interface for clients that can hand out completion models.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .completion_model import CompletionModel


@runtime_checkable
class CompletionClient(Protocol):
    """Provider client exposing the completion capability.

    ``completion_model`` only captures identifiers; it must not perform I/O.
    """

    def completion_model(self, model: str) -> CompletionModel:
        ...


__all__ = ["CompletionClient"]
