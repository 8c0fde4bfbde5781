"""Auxiliary logging helpers (formatters, context, redaction) used by base.logging."""

from .json_formatter import ISO, JsonFormatter
from .logging_context import LogContext
from .redaction import REDACTED, redact_url

__all__ = ["JsonFormatter", "ISO", "LogContext", "REDACTED", "redact_url"]
