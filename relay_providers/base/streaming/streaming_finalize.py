"""Finalize stream helper.

Located within the streaming package to localize terminal event creation and
normalized logging of metrics.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..logging import LogContext, normalized_log_event
from .streaming import StreamEvent
from .streaming_metrics import StreamMetrics


def finalize_stream(
    *,
    logger: logging.Logger,
    ctx: LogContext,
    provider: str,
    model: str,
    metrics: StreamMetrics,
    error: Optional[str] = None,
) -> StreamEvent:
    """Create the terminal `StreamEvent` and emit consolidated logging."""
    error_code: Optional[str] = None
    if error and ":" in error:
        error_code = error.split(":", 1)[0].strip() or None

    tokens_payload: Optional[Dict[str, Any]] = metrics.tokens
    normalized_log_event(
        logger,
        "stream.end" if error is None else "stream.error",
        ctx,
        phase="finalize",
        level=logging.INFO if error is None else logging.WARNING,
        attempt=None,
        emitted=metrics.emitted > 0,
        tokens=tokens_payload,
        error_code=error_code,
        emitted_count=metrics.emitted,
        time_to_first_token_ms=metrics.time_to_first_token_ms,
        total_duration_ms=metrics.total_duration_ms,
        error=error,
    )
    return StreamEvent(
        provider=provider,
        model=model,
        delta=None,
        finish=True,
        error=error,
        error_code=error_code,
        usage=tokens_payload,
    )


__all__ = ["finalize_stream"]
