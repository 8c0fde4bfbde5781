"""Base shared constants for provider clients.

Central location to avoid scattering magic strings across providers.

Security
--------
This module contains only generic sentinel strings and header names.
There are no credentials or tokens embedded. The following pragma suppresses
false positives from secret scanners that flag generic tokens like "missing_api_key".

# pragma: allowlist secret
"""
from __future__ import annotations

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

# Streaming request/response markers
EVENT_STREAM_MEDIA_TYPE = "text/event-stream"
SSE_DONE_SENTINEL = "[DONE]"

# Stream failure messages surfaced on the terminal event
STREAM_CLOSED_EARLY = "stream closed before end-of-stream signal"
STREAM_ALREADY_CONSUMED = "stream already consumed"

# The core never bounds wait time itself; callers opt in through the builder.
DEFAULT_HTTP_TIMEOUT = None

__all__ = [
    "MISSING_API_KEY_ERROR",
    "EVENT_STREAM_MEDIA_TYPE",
    "SSE_DONE_SENTINEL",
    "STREAM_CLOSED_EARLY",
    "STREAM_ALREADY_CONSUMED",
    "DEFAULT_HTTP_TIMEOUT",
]
