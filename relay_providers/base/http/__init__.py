"""HTTP utilities package for provider clients.

Exposes URL joining and shared ``httpx.AsyncClient`` construction.
"""

from .transport import TransportConfig, build_async_client, validate_base_url, validate_header
from .urls import join_url

__all__ = [
    "TransportConfig",
    "build_async_client",
    "validate_base_url",
    "validate_header",
    "join_url",
]
