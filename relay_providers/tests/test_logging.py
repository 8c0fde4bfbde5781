"""Focused tests for relay_providers.base.logging.

Covers:
- _parse_level string parsing
- logger hierarchy re-rooting
- log_event None handling
- normalized_log_event required keys
- configure_logger file handler management
"""
from __future__ import annotations

import json
import logging

from relay_providers.base.log_support import JsonFormatter, LogContext, redact_url
from relay_providers.base.logging import (
    BASE_LOGGER_NAME,
    REQUIRED_NORMALIZED_KEYS,
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_get_logger_reroots_names():
    assert get_logger("gemini").name == "relay.gemini"  # nosec B101
    assert get_logger("relay.anthropic").name == "relay.anthropic"  # nosec B101
    base = get_logger()
    assert base.name == BASE_LOGGER_NAME and base.propagate is False  # nosec B101


def test_log_event_drops_none_and_merges_context(relay_logs):
    logger = get_logger("tests.logging")
    log_event(logger, "completion.end", LogContext(provider="p", model="m"), status=200, request_id=None)
    event = relay_logs.events[-1]
    assert event == {"event": "completion.end", "provider": "p", "model": "m", "status": 200}  # nosec B101


def test_log_event_respects_level(relay_logs, monkeypatch):
    monkeypatch.setenv("RELAY_LOG_LEVEL", "WARNING")
    logger = get_logger("tests.quiet")
    log_event(logger, "http.request", level=logging.DEBUG, url="https://x")
    assert all(e.get("event") != "http.request" for e in relay_logs.events)  # nosec B101


def test_normalized_log_event_emits_required_keys(relay_logs):
    logger = get_logger("tests.normalized")
    normalized_log_event(
        logger,
        "stream.end",
        LogContext(provider="p", model="m"),
        phase="finalize",
        error_code="timeout",
        emitted=3,
        tokens={"prompt": 10, "completion": 5},
        structured=False,
        phase_extra=None,
    )
    payload = relay_logs.events[-1]
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in payload, f"missing {key}"  # nosec B101
    assert payload["structured"] is False and payload["attempt"] is None  # nosec B101
    assert payload["tokens"] == {"prompt": 10, "completion": 5}  # nosec B101
    assert "phase_extra" not in payload  # nosec B101


def test_json_formatter_hoists_structured_message():
    record = logging.LogRecord("relay.x", logging.INFO, __file__, 1, json.dumps({"event": "e", "a": 1}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "e" and out["a"] == 1 and out["level"] == "INFO"  # nosec B101
    assert "msg" not in out  # nosec B101


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "relay.log"
    logger = configure_logger(level="INFO", file_path=str(path))
    try:
        log_event(get_logger("tests.file"), "client.build", provider="p")
        for h in logger.handlers:
            h.flush()
        lines = path.read_text(encoding="utf-8").strip().splitlines()
        assert json.loads(lines[-1])["event"] == "client.build"  # nosec B101
    finally:
        configure_logger(file_path=None)
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)  # nosec B101


def test_redact_url_keeps_order():
    url = "https://host/v1beta/models/m:streamGenerateContent?key=SECRET&alt=sse"
    assert redact_url(url, ["key"]) == "https://host/v1beta/models/m:streamGenerateContent?key=****&alt=sse"  # nosec B101
    assert redact_url(url, []) == url  # nosec B101


def test_log_context_with_ids_copies():
    ctx = LogContext(provider="openai", model="gpt-4o-mini", extra={"op": "embed"})
    bound = ctx.with_ids(request_id="req_1")
    assert bound.to_dict() == {  # nosec B101
        "provider": "openai",
        "model": "gpt-4o-mini",
        "request_id": "req_1",
        "op": "embed",
    }
    assert ctx.request_id is None and bound.extra is not ctx.extra  # nosec B101
