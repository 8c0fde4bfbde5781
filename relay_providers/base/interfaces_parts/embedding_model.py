"""EmbeddingModel Protocol (single-class module)."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from ..models import Embedding


@runtime_checkable
class EmbeddingModel(Protocol):
    """Embedding handle bound to a shared client, a model and its dimensionality."""

    model: str
    ndims: int

    async def embed_texts(self, texts: Sequence[str]) -> List["Embedding"]:
        """Embed ``texts`` preserving input order."""
        ...


__all__ = ["EmbeddingModel"]
