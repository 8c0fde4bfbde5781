"""Embedding result DTO."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Embedding:
    """One embedded document.

    Attributes:
        document: The input text that was embedded.
        vec: The embedding vector.
    """

    document: str
    vec: List[float] = field(default_factory=list)

    @property
    def ndims(self) -> int:
        return len(self.vec)


__all__ = ["Embedding"]
