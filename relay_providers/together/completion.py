"""Together chat completions.

Together speaks the OpenAI chat-completions wire format on
``/v1/chat/completions``; streaming is requested with the
``stream_tokens`` flag instead of ``stream`` and the response is decoded by
the OpenAI-compatible streaming sender.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..openai.completion import OpenAICompletionModel

CHAT_COMPLETIONS_PATH = "/v1/chat/completions"


@dataclass(frozen=True)
class TogetherCompletionModel(OpenAICompletionModel):
    STREAM_DIRECTIVE = {"stream_tokens": True}

    def completion_path(self) -> str:
        return CHAT_COMPLETIONS_PATH


__all__ = ["TogetherCompletionModel", "CHAT_COMPLETIONS_PATH"]
