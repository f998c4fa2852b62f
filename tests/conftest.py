from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Dict, List

import pytest

from namestream.config.settings import AppConfig, Settings
from namestream.utils.logging import SimpleLogger

GOOD_REPLY = """{
  "original_name": "Maria",
  "name_meaning": "beloved, wished-for child",
  "cultural_translation": "愛される子",
  "final_name": {
    "native_script": "真理愛",
    "romanized": "Maria",
    "pronunciation": "まりあ (ma-ri-a)",
    "meaning_in_english": "truth and love"
  }
}"""


class FakeCompletions:
    """Stands in for client.chat.completions; records every create() call."""

    def __init__(self, reply: Any = GOOD_REPLY, error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def create(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_fake_openai(completions: FakeCompletions) -> Any:
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture(autouse=True)
def _quiet_logger():
    SimpleLogger.set_enabled(False)
    yield
    SimpleLogger.set_enabled(True)


@pytest.fixture(autouse=True)
def _fresh_settings():
    Settings.clear()
    yield
    Settings.clear()


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(api_key="test-key", api_key_source="argument")
