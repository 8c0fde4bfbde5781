"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``relay_providers.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.configuration_error import ConfigurationError
from .errors_parts.request_error import RequestError
from .errors_parts.decode_error import DecodeError
from .errors_parts.stream_error import StreamError
from .errors_parts.unsupported_capability_error import UnsupportedCapabilityError
from .errors_parts.classification import RETRYABLE_CODES, classify_exception, code_for_status

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
