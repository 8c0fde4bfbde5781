"""Typed capability conversions.

``as_completion(client)`` and friends return ``Supported`` wrapping the
client when it implements the capability, or ``Unsupported`` naming the
capability and provider otherwise. They never raise, so callers can branch
on availability before building any request. ``Unsupported.unwrap()`` raises
:class:`UnsupportedCapabilityError` for callers that prefer exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from ..errors import UnsupportedCapabilityError
from ..interfaces import (
    AudioGenerationClient,
    CompletionClient,
    EmbeddingsClient,
    ImageGenerationClient,
    TranscriptionClient,
)
from .core import Capability, supports

C = TypeVar("C")


@dataclass(frozen=True)
class Supported(Generic[C]):
    """The client implements ``capability``; ``client`` is typed accordingly."""

    capability: Capability
    client: C

    @property
    def is_supported(self) -> bool:
        return True

    def unwrap(self) -> C:
        return self.client


@dataclass(frozen=True)
class Unsupported:
    """The provider does not implement ``capability``."""

    capability: Capability
    provider: str

    @property
    def is_supported(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return f"{self.capability.value} is not supported by this provider"

    def error(self) -> UnsupportedCapabilityError:
        return UnsupportedCapabilityError(self.capability.value, self.provider)

    def unwrap(self) -> Any:
        raise self.error()


CapabilityResult = Union[Supported[C], Unsupported]


def _provider_name(client: Any) -> str:
    return str(getattr(client, "provider_name", type(client).__name__))


def as_capability(client: Any, capability: Capability) -> CapabilityResult[Any]:
    """Convert ``client`` to ``capability`` without raising."""
    if supports(client, capability):
        return Supported(capability, client)
    return Unsupported(capability, _provider_name(client))


def as_completion(client: Any) -> CapabilityResult[CompletionClient]:
    return as_capability(client, Capability.COMPLETION)


def as_embeddings(client: Any) -> CapabilityResult[EmbeddingsClient]:
    return as_capability(client, Capability.EMBEDDINGS)


def as_transcription(client: Any) -> CapabilityResult[TranscriptionClient]:
    return as_capability(client, Capability.TRANSCRIPTION)


def as_image_generation(client: Any) -> CapabilityResult[ImageGenerationClient]:
    return as_capability(client, Capability.IMAGE_GENERATION)


def as_audio_generation(client: Any) -> CapabilityResult[AudioGenerationClient]:
    return as_capability(client, Capability.AUDIO_GENERATION)


__all__ = [
    "Supported",
    "Unsupported",
    "CapabilityResult",
    "as_capability",
    "as_completion",
    "as_embeddings",
    "as_transcription",
    "as_image_generation",
    "as_audio_generation",
]
