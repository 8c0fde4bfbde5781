"""Streaming metrics data structures.

Isolated within the streaming package to keep the normalizer small and cohesive.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class StreamMetrics:
    """Collected streaming metrics for a single stream.

    Attributes:
        emitted: Number of content deltas yielded to the caller.
        time_to_first_token_ms: Delay between opening and the first delta.
        total_duration_ms: Duration until the terminal event.
        prompt_tokens / completion_tokens / total_tokens: Usage when reported.
        tokens: Canonical ``{"prompt", "completion", "total"}`` mapping.
    """

    emitted: int = 0
    time_to_first_token_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None
    tokens: Optional[Dict[str, Any]] = None


def build_token_usage(prompt: Optional[int], completion: Optional[int], total: Optional[int] = None) -> Dict[str, Optional[int]]:
    """Return a canonical token usage mapping."""
    derived_total = total
    if derived_total is None and (prompt is not None and completion is not None):
        derived_total = prompt + completion
    return {"prompt": prompt, "completion": completion, "total": derived_total}


def apply_token_usage(metrics: StreamMetrics, usage: Dict[str, Any]) -> None:
    """Merge a (possibly partial) canonical usage mapping into ``metrics``.

    Providers report usage incrementally (Anthropic sends prompt tokens on
    ``message_start`` and completion tokens on ``message_delta``), so known
    values are kept when a later report omits them.
    """
    prompt = usage.get("prompt")
    completion = usage.get("completion")
    total = usage.get("total")
    if prompt is not None:
        metrics.prompt_tokens = prompt
    if completion is not None:
        metrics.completion_tokens = completion
    if total is not None:
        metrics.total_tokens = total
    metrics.tokens = build_token_usage(metrics.prompt_tokens, metrics.completion_tokens, total)
    metrics.total_tokens = metrics.tokens["total"]


__all__ = [
    "StreamMetrics",
    "apply_token_usage",
    "build_token_usage",
]
