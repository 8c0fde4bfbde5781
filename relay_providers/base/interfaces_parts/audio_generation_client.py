"""AudioGenerationClient Protocol (single-class module).

No bundled provider implements audio generation; the interface exists so the
capability can be queried uniformly and reported as unsupported.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class AudioGenerationClient(Protocol):
    def audio_generation_model(self, model: str) -> Any:
        ...


__all__ = ["AudioGenerationClient"]
