"""JSON helpers shared by provider payload builders."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


def merge(base: Mapping[str, Any], override: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Shallow-merge ``override`` into a copy of ``base``.

    Top-level keys from ``override`` always replace the same key in ``base``;
    nested objects are replaced wholesale, never merged. Neither input is
    mutated.
    """
    merged = dict(base)
    if override:
        merged.update(override)
    return merged


def drop_none(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``payload`` without top-level ``None`` values."""
    return {k: v for k, v in payload.items() if v is not None}


__all__ = ["merge", "drop_none"]
