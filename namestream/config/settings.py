"""
Settings
========
Centralised access to environment configuration.

- Settings: cached os.getenv lookups (one read per key per process).
- AppConfig: the resolved, read-only configuration for one process.
  Built once at startup via AppConfig.from_env(); request handling never
  touches os.environ directly.

API key precedence (first non-empty wins):
    explicit api_key argument
    > GROQ_API_KEY
    > NAMESTREAM_API_KEY
    > NAMESTREAM_DEV_API_KEY   (local-development fallback)

A local .env file is loaded first (python-dotenv) without overriding
variables that are already set in the real environment.
NAMESTREAM_LOG_LEVEL is read here too, so a level set only in .env works;
AppController applies it to SimpleLogger.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

API_KEY_ENV_ORDER: Tuple[str, ...] = (
    "GROQ_API_KEY",
    "NAMESTREAM_API_KEY",
    "NAMESTREAM_DEV_API_KEY",
)

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_MODEL = "llama-3.3-70b-versatile"
DEFAULT_TEMPERATURE = 0.5
DEFAULT_MAX_TOKENS = 1024
DEFAULT_TIMEOUT = 30.0
DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS: Tuple[str, ...] = ("DEBUG", "INFO", "WARN", "ERROR")


class Settings:
    _CACHE: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any | None = None) -> Any:
        if key not in cls._CACHE:
            cls._CACHE[key] = os.getenv(key, default)
        return cls._CACHE[key]

    @classmethod
    def clear(cls) -> None:
        cls._CACHE.clear()


def _float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _log_level(value: Any) -> str:
    level = str(value or "").strip().upper().replace("WARNING", "WARN")
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class AppConfig:
    api_key: Optional[str] = None
    api_key_source: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    model_name: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_output_tokens: int = DEFAULT_MAX_TOKENS
    timeout: float = DEFAULT_TIMEOUT
    api_url: str = DEFAULT_API_URL
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, api_key: Optional[str] = None, *, load_env_file: bool = True) -> "AppConfig":
        """
        Resolve the configuration once.

        Missing credentials are not an error here: the app still starts and the
        first request fails with ConfigurationError.
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        key, source = resolve_api_key(api_key)

        return cls(
            api_key=key,
            api_key_source=source,
            base_url=Settings.get("NAMESTREAM_BASE_URL", DEFAULT_BASE_URL) or DEFAULT_BASE_URL,
            model_name=Settings.get("NAMESTREAM_MODEL", DEFAULT_MODEL) or DEFAULT_MODEL,
            temperature=_float(Settings.get("NAMESTREAM_TEMPERATURE"), DEFAULT_TEMPERATURE),
            max_output_tokens=_int(Settings.get("NAMESTREAM_MAX_TOKENS"), DEFAULT_MAX_TOKENS),
            timeout=_float(Settings.get("NAMESTREAM_TIMEOUT"), DEFAULT_TIMEOUT),
            api_url=(Settings.get("NAMESTREAM_API_URL", DEFAULT_API_URL) or DEFAULT_API_URL).rstrip("/"),
            log_level=_log_level(Settings.get("NAMESTREAM_LOG_LEVEL", DEFAULT_LOG_LEVEL)),
        )


def resolve_api_key(explicit: Optional[str] = None) -> Tuple[Optional[str], Optional[str]]:
    """Return (key, source) following API_KEY_ENV_ORDER; (None, None) if nothing is set."""
    if explicit and explicit.strip():
        return explicit.strip(), "argument"
    for env_name in API_KEY_ENV_ORDER:
        value = (Settings.get(env_name) or "").strip()
        if value:
            return value, env_name
    return None, None
