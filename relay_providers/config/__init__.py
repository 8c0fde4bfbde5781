"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (models, base URLs, protocol version).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by RELAY_CONFIG_FILE
    3. Environment variables (e.g. GEMINI_MODEL, GEMINI_API_KEY)
    4. In-code overrides passed to the helper (``None`` values ignored)
* Provide a single call site: ``get_provider_config(provider: str)``.

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_EMBEDDING_MODEL, <PROVIDER>_TRANSCRIPTION_MODEL,
<PROVIDER>_API_KEY, <PROVIDER>_BASE_URL, e.g.
TOGETHER_MODEL, ANTHROPIC_BASE_URL. The API key additionally honors the
aliases declared in :mod:`relay_providers.config.env` (GOOGLE_API_KEY).

External Config File (Optional)
-------------------------------
Structure example::

    gemini:
      model: gemini-1.5-pro
    anthropic:
      base_url: https://anthropic.internal.example/
      version: "2023-06-01"

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* get_model(provider: str, kind: str = "model") -> str | None
* reset_config_cache() -> None

A config file that exists but does not parse raises :class:`ConfigFileError`.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MODEL,
    ANTHROPIC_DEFAULT_VERSION,
    CONFIG_FILE_ENV,
    GEMINI_DEFAULT_BASE_URL,
    GEMINI_DEFAULT_EMBEDDING_MODEL,
    GEMINI_DEFAULT_MODEL,
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_EMBEDDING_MODEL,
    OPENAI_DEFAULT_MODEL,
    OPENAI_DEFAULT_TRANSCRIPTION_MODEL,
    TOGETHER_DEFAULT_BASE_URL,
    TOGETHER_DEFAULT_EMBEDDING_MODEL,
    TOGETHER_DEFAULT_MODEL,
)
from .env import is_placeholder, resolve_provider_key

# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "anthropic": {
        "model": ANTHROPIC_DEFAULT_MODEL,
        "base_url": ANTHROPIC_DEFAULT_BASE_URL,
        "version": ANTHROPIC_DEFAULT_VERSION,
    },
    "gemini": {
        "model": GEMINI_DEFAULT_MODEL,
        "embedding_model": GEMINI_DEFAULT_EMBEDDING_MODEL,
        "transcription_model": GEMINI_DEFAULT_MODEL,
        "base_url": GEMINI_DEFAULT_BASE_URL,
    },
    "together": {
        "model": TOGETHER_DEFAULT_MODEL,
        "embedding_model": TOGETHER_DEFAULT_EMBEDDING_MODEL,
        "base_url": TOGETHER_DEFAULT_BASE_URL,
    },
    "openai": {
        "model": OPENAI_DEFAULT_MODEL,
        "embedding_model": OPENAI_DEFAULT_EMBEDDING_MODEL,
        "transcription_model": OPENAI_DEFAULT_TRANSCRIPTION_MODEL,
        "base_url": OPENAI_DEFAULT_BASE_URL,
    },
}


ENV_FIELD_MAP = {
    "model": "MODEL",
    "embedding_model": "EMBEDDING_MODEL",
    "transcription_model": "TRANSCRIPTION_MODEL",
    "base_url": "BASE_URL",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None


def reset_config_cache() -> None:
    """Forget the parsed external config file (tests and reloads)."""
    global _FILE_CACHE
    _FILE_CACHE = None


class ConfigFileError(ValueError):
    """The external config file exists but cannot be read or parsed."""

    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"invalid config file {path}: {cause}")
        self.path = path
        self.cause = cause


def _parse_config_text(text: str, suffix: str) -> Any:
    if suffix == ".json":
        return json.loads(text)
    # YAML is a superset of JSON, so anything else goes through the YAML loader.
    return yaml.safe_load(text)


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        _FILE_CACHE = {}
        return _FILE_CACHE
    p = Path(path).expanduser()
    if not p.exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    try:
        data = _parse_config_text(p.read_text(encoding="utf-8"), p.suffix.lower())
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConfigFileError(p, exc) from exc
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val:
            out[field] = val
    key, _ = resolve_provider_key(provider)
    if key and not is_placeholder(key):
        out["api_key"] = key
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    # 1. Defaults
    cfg |= DEFAULTS.get(name, {})

    # 2. External config file section
    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    # 3. Env overrides
    cfg |= _env_overrides(name)

    # 4. Explicit overrides
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def get_model(provider: str, kind: str = "model") -> Optional[str]:
    """Return the configured model for ``kind`` (``model``, ``embedding_model`` or ``transcription_model``)."""
    return get_provider_config(provider).get(kind)


__all__ = [
    "ConfigFileError",
    "DEFAULTS",
    "ENV_FIELD_MAP",
    "get_provider_config",
    "get_model",
    "reset_config_cache",
]
