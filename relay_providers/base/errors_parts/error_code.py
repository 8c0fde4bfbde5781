"""``ErrorCode``: the failure categories shared by every provider.

The values double as the ``<code>`` prefix of a failed stream's terminal
``error`` string, so they must stay stable.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    # Raised before anything is sent.
    CONFIGURATION = "configuration"
    UNSUPPORTED = "unsupported"

    # Mapped from HTTP statuses or transport failures.
    AUTH = "auth"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"

    # Body handling.
    DECODE = "decode"
    STREAM = "stream"

    INTERNAL = "internal"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
