"""Environment variables holding provider API keys.

Each provider reads its key from one canonical variable; Gemini also accepts
``GOOGLE_API_KEY``. Lookups here never raise: a missing or unknown provider
resolves to ``None`` and the caller decides (``ProviderClient.from_env``
raises ``ConfigurationError``).
"""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "anthropic": "ANTHROPIC_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "together": "TOGETHER_API_KEY",
    "openai": "OPENAI_API_KEY",
}

# Accepted names in precedence order, canonical first.
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
}

_PLACEHOLDER_MARKERS = ("placeholder", "changeme", "example")


def is_placeholder(val: Optional[str]) -> bool:
    """True for values copied from sample configs rather than real keys."""
    if val is None:
        return False
    v = str(val).strip().lower()
    return v.startswith("test_") or any(marker in v for marker in _PLACEHOLDER_MARKERS)


def get_env_var_name(provider: str) -> Optional[str]:
    return ENV_MAP.get((provider or "").lower())


def get_env_var_candidates(provider: str) -> Iterator[str]:
    name = (provider or "").lower()
    names = ENV_ALIASES.get(name) or ((ENV_MAP[name],) if name in ENV_MAP else ())
    yield from names


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(key, variable_name)`` for the first non-empty candidate.

    ``(None, None)`` when no candidate variable is set.
    """
    for name in get_env_var_candidates(provider):
        value = os.environ.get(name)
        if value:
            return value, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
]
