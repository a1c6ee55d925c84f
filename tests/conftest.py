"""Shared fixtures: a throwaway config file and fake upstream clients."""
from typing import Dict, List, Optional

import pytest

from zen_sanctuary.services import ConfigService, LLMErrorKind, LLMServiceError

TEST_CONFIG = """
server:
  host: 127.0.0.1
  port: 9090
  static_dir: does-not-exist

llm:
  base_url: https://llm.example.test/v1/
  api_key_env: ZEN_TEST_LLM_KEY
  model_candidates:
    - model-a
    - model-b
    - model-c
  temperature: 0.5
  reminder_temperature: 0.0

chat:
  history_limit: 4
  max_sessions: 3
  persona_prompt: You are Zen.
  persona_ack: I am Zen. Understood.
  unavailable_response: Zen is resting.
  error_response: Zen is having a moment of silence.
  rate_limited_response: Zen needs a pause.

weather:
  api_key_env: ZEN_TEST_WEATHER_KEY
  base_url: https://weather.example.test/data/2.5/weather
  default_city: Kyoto
  cache_ttl_seconds: 600
  timeout_seconds: 1.0
  keywords:
    - weather
    - rain
    - temperature
    - umbrella
"""


@pytest.fixture
def config_path(tmp_path, monkeypatch) -> str:
    """Write the test config and isolate it from the real environment."""
    for name in ("ZEN_TEST_LLM_KEY", "ZEN_TEST_WEATHER_KEY", "DEFAULT_CITY", "PORT", "HOST"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "config.yml"
    path.write_text(TEST_CONFIG, encoding="utf-8")
    return str(path)


@pytest.fixture
def config_service(config_path) -> ConfigService:
    return ConfigService(config_path)


@pytest.fixture
def weather_key(monkeypatch) -> str:
    monkeypatch.setenv("ZEN_TEST_WEATHER_KEY", "weather-secret")
    return "weather-secret"


class FakeLLM:
    """Stands in for LLMService; records every prompt it is sent."""

    def __init__(self, reply: str = "All is calm.", model: Optional[str] = "model-a",
                 error: Optional[LLMServiceError] = None):
        self.reply = reply
        self.model = model
        self.error = error
        self.chat_calls: List[List[Dict]] = []
        self.text_calls: List[str] = []

    @property
    def is_available(self) -> bool:
        return self.model is not None

    async def select_model(self) -> Optional[str]:
        return self.model

    async def generate_chat(self, messages, temperature=None) -> str:
        self.chat_calls.append(messages)
        if self.error:
            raise self.error
        return self.reply

    async def generate_text(self, prompt, temperature=None) -> str:
        self.text_calls.append(prompt)
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def fake_llm() -> FakeLLM:
    return FakeLLM()


@pytest.fixture
def rate_limited() -> LLMServiceError:
    return LLMServiceError(LLMErrorKind.RATE_LIMITED, "quota exceeded")
