"""Capability enumeration & detection utilities.

Every provider client declares the capabilities it implements in its
``CAPABILITIES`` class attribute. Detection cross-checks that declaration
against the capability Protocols so a client can never advertise a
capability whose factory methods it does not actually provide.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, FrozenSet, Type

from ..interfaces import (
    AudioGenerationClient,
    CompletionClient,
    EmbeddingsClient,
    ImageGenerationClient,
    TranscriptionClient,
)


class Capability(str, Enum):
    """Optional feature families a provider client may implement."""

    COMPLETION = "completion"
    EMBEDDINGS = "embeddings"
    TRANSCRIPTION = "transcription"
    IMAGE_GENERATION = "image_generation"
    AUDIO_GENERATION = "audio_generation"


CAPABILITY_INTERFACES: Dict[Capability, Type[Any]] = {
    Capability.COMPLETION: CompletionClient,
    Capability.EMBEDDINGS: EmbeddingsClient,
    Capability.TRANSCRIPTION: TranscriptionClient,
    Capability.IMAGE_GENERATION: ImageGenerationClient,
    Capability.AUDIO_GENERATION: AudioGenerationClient,
}


def declared_capabilities(client: Any) -> FrozenSet[Capability]:
    """Return the capabilities ``client`` declares (empty when undeclared)."""
    return frozenset(getattr(client, "CAPABILITIES", frozenset()))


def supports(client: Any, capability: Capability) -> bool:
    """Return True if ``client`` declares ``capability`` and implements its interface."""
    return capability in declared_capabilities(client) and isinstance(
        client, CAPABILITY_INTERFACES[capability]
    )


def detect_capabilities(client: Any) -> FrozenSet[Capability]:
    """Detect and return the set of capabilities supported by a client.

    Args:
        client: The provider client instance to inspect.

    Returns:
        FrozenSet[Capability]: Capabilities both declared and implemented.
    """
    return frozenset(cap for cap in Capability if supports(client, cap))


__all__ = [
    "Capability",
    "CAPABILITY_INTERFACES",
    "declared_capabilities",
    "supports",
    "detect_capabilities",
]
