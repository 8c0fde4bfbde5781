"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `relay_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .configuration_error import ConfigurationError
from .request_error import RequestError
from .decode_error import DecodeError
from .stream_error import StreamError
from .unsupported_capability_error import UnsupportedCapabilityError
from .classification import RETRYABLE_CODES, classify_exception, code_for_status

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "RequestError",
    "DecodeError",
    "StreamError",
    "UnsupportedCapabilityError",
    "RETRYABLE_CODES",
    "classify_exception",
    "code_for_status",
]
