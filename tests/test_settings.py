import os

import pytest

from namestream.app.controller import AppController
from namestream.config.settings import (
    API_KEY_ENV_ORDER,
    DEFAULT_BASE_URL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    AppConfig,
    Settings,
    resolve_api_key,
)
from namestream.utils.logging import SimpleLogger


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in API_KEY_ENV_ORDER + (
        "NAMESTREAM_BASE_URL",
        "NAMESTREAM_MODEL",
        "NAMESTREAM_TEMPERATURE",
        "NAMESTREAM_MAX_TOKENS",
        "NAMESTREAM_TIMEOUT",
        "NAMESTREAM_API_URL",
        "NAMESTREAM_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment():
    cfg = AppConfig.from_env(load_env_file=False)

    assert cfg.api_key is None
    assert cfg.api_key_source is None
    assert not cfg.has_api_key
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.model_name == DEFAULT_MODEL
    assert cfg.temperature == DEFAULT_TEMPERATURE == 0.5
    assert cfg.max_output_tokens == DEFAULT_MAX_TOKENS == 1024


def test_production_key_wins_over_dev_fallback(monkeypatch):
    monkeypatch.setenv("NAMESTREAM_DEV_API_KEY", "dev-key")
    monkeypatch.setenv("GROQ_API_KEY", "prod-key")

    assert resolve_api_key() == ("prod-key", "GROQ_API_KEY")


def test_dev_fallback_used_when_nothing_else_set(monkeypatch):
    monkeypatch.setenv("NAMESTREAM_DEV_API_KEY", "dev-key")
    monkeypatch.setenv("GROQ_API_KEY", "   ")

    cfg = AppConfig.from_env(load_env_file=False)
    assert cfg.api_key == "dev-key"
    assert cfg.api_key_source == "NAMESTREAM_DEV_API_KEY"


def test_explicit_key_wins(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "prod-key")
    assert resolve_api_key(" given ") == ("given", "argument")


def test_overrides_and_bad_numbers(monkeypatch):
    monkeypatch.setenv("NAMESTREAM_MODEL", "some-model")
    monkeypatch.setenv("NAMESTREAM_TEMPERATURE", "0.2")
    monkeypatch.setenv("NAMESTREAM_MAX_TOKENS", "lots")
    monkeypatch.setenv("NAMESTREAM_API_URL", "http://api:9000/")

    cfg = AppConfig.from_env(load_env_file=False)
    assert cfg.model_name == "some-model"
    assert cfg.temperature == 0.2
    assert cfg.max_output_tokens == DEFAULT_MAX_TOKENS
    assert cfg.api_url == "http://api:9000"


def test_dotenv_file_is_a_local_source(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("NAMESTREAM_DEV_API_KEY=from-dotenv\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    try:
        cfg = AppConfig.from_env()
    finally:
        # load_dotenv writes straight into os.environ
        os.environ.pop("NAMESTREAM_DEV_API_KEY", None)
    assert cfg.api_key == "from-dotenv"
    assert cfg.api_key_source == "NAMESTREAM_DEV_API_KEY"


def test_settings_cache(monkeypatch):
    monkeypatch.setenv("NAMESTREAM_MODEL", "first")
    assert Settings.get("NAMESTREAM_MODEL") == "first"
    monkeypatch.setenv("NAMESTREAM_MODEL", "second")
    assert Settings.get("NAMESTREAM_MODEL") == "first"
    Settings.clear()
    assert Settings.get("NAMESTREAM_MODEL") == "second"


def test_log_level_from_dotenv_reaches_logger(monkeypatch, tmp_path, capsys):
    (tmp_path / ".env").write_text("NAMESTREAM_LOG_LEVEL=debug\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    try:
        cfg = AppConfig.from_env()
    finally:
        os.environ.pop("NAMESTREAM_LOG_LEVEL", None)
    assert cfg.log_level == "DEBUG"

    SimpleLogger.set_enabled(True)
    try:
        AppController(config=cfg)
        SimpleLogger.debug("prompt details")
    finally:
        SimpleLogger.set_enabled(False)
        SimpleLogger.set_level("INFO")
    assert "prompt details" in capsys.readouterr().out


@pytest.mark.parametrize("raw,expected", [("warning", "WARN"), ("loud", "INFO"), ("", "INFO")])
def test_log_level_is_validated(monkeypatch, raw, expected):
    monkeypatch.setenv("NAMESTREAM_LOG_LEVEL", raw)
    assert AppConfig.from_env(load_env_file=False).log_level == expected
