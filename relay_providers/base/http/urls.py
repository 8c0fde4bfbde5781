"""Scheme-aware URL joining for scoped provider requests.

Only the boundary between the base URL path and the request path is
normalized: the base path loses its trailing slashes, the request path loses
its leading slashes and exactly one ``/`` is placed between them. The scheme
separator and any repeated slashes elsewhere are left untouched.
"""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit


def join_url(base_url: str, path: str) -> str:
    """Return ``base_url`` joined with ``path`` using exactly one separator.

    ``path`` may carry its own query string (``"v1/x?alt=sse"``); it is merged
    after any query already present on ``base_url``. An empty ``path`` returns
    the base URL unchanged.
    """
    if not path:
        return base_url
    parts = urlsplit(base_url)
    rel_path, _, rel_query = path.partition("?")
    joined_path = parts.path.rstrip("/") + "/" + rel_path.lstrip("/")
    query = "&".join(q for q in (parts.query, rel_query) if q)
    return urlunsplit((parts.scheme, parts.netloc, joined_path, query, parts.fragment))


__all__ = ["join_url"]
