"""Streaming package: events, wire decoders, metrics and the normalizer."""

from .streaming import StreamEvent, ToolCallDelta, accumulate_events
from .decoders import (
    END_OF_STREAM,
    StreamFrame,
    frame_json,
    is_event_stream,
    iter_json_lines,
    iter_sse_events,
    iter_stream_payloads,
)
from .streaming_metrics import StreamMetrics, apply_token_usage, build_token_usage
from .streaming_finalize import finalize_stream
from .normalizer import StreamingCompletionResponse, Translator, TranslatorItem, open_stream

__all__ = [
    "StreamEvent",
    "ToolCallDelta",
    "accumulate_events",
    "END_OF_STREAM",
    "StreamFrame",
    "frame_json",
    "is_event_stream",
    "iter_json_lines",
    "iter_sse_events",
    "iter_stream_payloads",
    "StreamMetrics",
    "apply_token_usage",
    "build_token_usage",
    "finalize_stream",
    "StreamingCompletionResponse",
    "Translator",
    "TranslatorItem",
    "open_stream",
]
