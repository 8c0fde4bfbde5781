"""relay_providers.config.defaults
===============================

Central place for small, stable default values used across the
relay_providers package. These defaults can be overridden via environment
variables, the external config file or builder calls.

This module intentionally avoids importing from other provider packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Anthropic ----
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com"
ANTHROPIC_DEFAULT_VERSION = "2023-06-01"
ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-latest"

# ---- Gemini ----
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"
GEMINI_DEFAULT_MODEL = "gemini-1.5-flash"
GEMINI_DEFAULT_EMBEDDING_MODEL = "text-embedding-004"

# ---- Together ----
TOGETHER_DEFAULT_BASE_URL = "https://api.together.xyz"
TOGETHER_DEFAULT_MODEL = "meta-llama/Llama-3-8b-chat-hf"
TOGETHER_DEFAULT_EMBEDDING_MODEL = "togethercomputer/m2-bert-80M-8k-retrieval"

# ---- OpenAI (also the compatible streaming wire format) ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
OPENAI_DEFAULT_EMBEDDING_MODEL = "text-embedding-3-small"
OPENAI_DEFAULT_TRANSCRIPTION_MODEL = "whisper-1"

# ---- External config ----
# Environment variable pointing at an optional JSON/YAML provider config file.
CONFIG_FILE_ENV = "RELAY_CONFIG_FILE"

__all__ = [
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_VERSION",
    "ANTHROPIC_DEFAULT_MODEL",
    "GEMINI_DEFAULT_BASE_URL",
    "GEMINI_DEFAULT_MODEL",
    "GEMINI_DEFAULT_EMBEDDING_MODEL",
    "TOGETHER_DEFAULT_BASE_URL",
    "TOGETHER_DEFAULT_MODEL",
    "TOGETHER_DEFAULT_EMBEDDING_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_EMBEDDING_MODEL",
    "OPENAI_DEFAULT_TRANSCRIPTION_MODEL",
    "CONFIG_FILE_ENV",
]
