"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. Keeps the rest of the app decoupled from how config is sourced.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from file_search_qa.core.errors import ConfigurationError

load_dotenv()

# Project root (directory holding data/ and the cache file)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent.parent

# Gemini API credential (required; checked when the client is built)
GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "").strip()

# Generation model used with the file_search tool
GEMINI_MODEL: str = (
    os.getenv("GEMINI_MODEL", "gemini-2.5-flash").strip() or "gemini-2.5-flash"
)

# Remote File Search store and the document indexed into it
STORE_DISPLAY_NAME: str = "ai-knowledge-base-store"
FILE_DISPLAY_NAME: str = "ai-knowledge-base"
DOCUMENT_PATH: Path = PROJECT_ROOT / "data" / "sample.txt"

# Local cache of the created store name. Key name matches existing cache files.
CACHE_FILE: Path = PROJECT_ROOT / ".file-search-cache.json"
CACHE_KEY: str = "fileSearchStoreName"

# Indexing operation polling (seconds). Timeout bounds the total wait.
# Env overrides are parsed by get_poll_settings() so bad values surface as ConfigurationError.
POLL_INTERVAL_SECONDS: float = 5.0
POLL_TIMEOUT_SECONDS: float = 600.0

# When true, a cached store name is checked against the API before it is trusted.
# Off by default: a cache hit costs zero remote calls.
VERIFY_CACHED_STORE: bool = os.getenv("VERIFY_CACHED_STORE", "").strip().lower() in (
    "1",
    "true",
    "yes",
)

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").strip().upper() or "WARNING"

# Console rule width for question/answer output
RULE_WIDTH: int = 80

QUESTIONS: tuple[str, ...] = (
    "What are the three main types of machine learning?",
    "Explain the difference between CNNs and RNNs.",
    "What are some key ethical considerations in AI development?",
    "What frameworks are commonly used for deep learning?",
)


def _positive_float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"{name} must be greater than 0, got {raw!r}")
    return value


def get_poll_settings() -> tuple[float, float]:
    """
    Return (interval, timeout) in seconds for indexing polls, read from env.

    Raises:
        ConfigurationError: If either value is not a positive number.
    """
    return (
        _positive_float_env("POLL_INTERVAL_SECONDS", POLL_INTERVAL_SECONDS),
        _positive_float_env("POLL_TIMEOUT_SECONDS", POLL_TIMEOUT_SECONDS),
    )
