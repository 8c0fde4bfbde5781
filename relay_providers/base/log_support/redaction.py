"""Credential redaction for log output.

URLs of query-authenticated providers carry the API key in the query string.
Anything that reaches a log line goes through :func:`redact_url` first so the
raw key is replaced by a fixed placeholder.
"""
from __future__ import annotations

from typing import Iterable
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

REDACTED = "****"


def redact_url(url: str, secret_params: Iterable[str]) -> str:
    """Return ``url`` with the values of ``secret_params`` replaced by ``****``.

    Parameter order and non-secret values are preserved. The placeholder is
    inserted verbatim (not percent-encoded) so log lines read naturally.
    """
    secrets = set(secret_params)
    if not secrets:
        return url
    parts = urlsplit(url)
    if not parts.query:
        return url
    pairs = parse_qsl(parts.query, keep_blank_values=True)
    redacted = [(k, REDACTED if k in secrets else v) for k, v in pairs]
    query = urlencode(redacted, safe="*")
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


__all__ = ["REDACTED", "redact_url"]
