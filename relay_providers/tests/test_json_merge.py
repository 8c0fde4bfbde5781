"""Shallow merge used for request directives and ``additional_params``."""

from __future__ import annotations

from relay_providers.base.json_utils import drop_none, merge


def test_merge_adds_missing_key():
    assert merge({"model": "x"}, {"stream_tokens": True}) == {"model": "x", "stream_tokens": True}  # nosec B101


def test_merge_override_wins():
    assert merge({"model": "x", "stream_tokens": False}, {"stream_tokens": True}) == {  # nosec B101
        "model": "x",
        "stream_tokens": True,
    }


def test_merge_is_shallow_and_does_not_mutate():
    base = {"model": "x", "options": {"a": 1, "b": 2}}
    merged = merge(base, {"options": {"a": 9}})
    assert merged["options"] == {"a": 9}  # nosec B101
    assert base == {"model": "x", "options": {"a": 1, "b": 2}}  # nosec B101


def test_merge_with_no_override_copies():
    base = {"model": "x"}
    merged = merge(base, None)
    assert merged == base and merged is not base  # nosec B101


def test_drop_none_keeps_falsy_values():
    assert drop_none({"a": None, "b": 0, "c": ""}) == {"b": 0, "c": ""}  # nosec B101
