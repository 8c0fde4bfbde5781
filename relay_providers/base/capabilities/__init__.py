"""Capability registry: declaration, detection and typed conversions."""

from .core import (
    CAPABILITY_INTERFACES,
    Capability,
    declared_capabilities,
    detect_capabilities,
    supports,
)
from .conversion import (
    CapabilityResult,
    Supported,
    Unsupported,
    as_audio_generation,
    as_capability,
    as_completion,
    as_embeddings,
    as_image_generation,
    as_transcription,
)

__all__ = [
    "Capability",
    "CAPABILITY_INTERFACES",
    "declared_capabilities",
    "detect_capabilities",
    "supports",
    "CapabilityResult",
    "Supported",
    "Unsupported",
    "as_capability",
    "as_completion",
    "as_embeddings",
    "as_transcription",
    "as_image_generation",
    "as_audio_generation",
]
