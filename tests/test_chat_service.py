"""Tests for chat prompt composition and memory updates."""

import pytest

from conftest import FakeLLM
from zen_sanctuary.models import WeatherSnapshot
from zen_sanctuary.services import ChatService, LLMErrorKind, LLMServiceError, SessionService

SNAPSHOT = WeatherSnapshot(city="Kyoto", temp=22, feels=20, description="light rain", humidity=63, wind=4)


class StubWeather:
    """Weather service double with a fixed snapshot."""

    def __init__(self, snapshot=SNAPSHOT, configured: bool = True) -> None:
        self.snapshot = snapshot
        self.is_configured = configured
        self.lookups = 0

    def mentions_weather(self, text: str) -> bool:
        return "weather" in text.lower() or "rain" in text.lower()

    async def get_current(self, city=None):
        self.lookups += 1
        return self.snapshot

    @staticmethod
    def format_annotation(snapshot) -> str:
        return f"[Current weather in {snapshot.city}: {snapshot.temp}°C]"


def make_chat(config_service, llm, weather=None, history_limit: int = 4):
    sessions = SessionService(history_limit=history_limit)
    service = ChatService(sessions, llm, weather or StubWeather(), config_service)
    return service, sessions


@pytest.mark.asyncio
async def test_plain_message_has_no_weather_annotation(config_service) -> None:
    """Test non-weather messages are sent without a weather bracket."""
    llm = FakeLLM()
    weather = StubWeather()
    service, _ = make_chat(config_service, llm, weather)

    await service.respond("How should I start my morning?")

    outgoing = llm.chat_calls[0][-1]["content"]
    assert outgoing == "How should I start my morning?"
    assert "[Current weather" not in outgoing
    assert weather.lookups == 0


@pytest.mark.asyncio
async def test_weather_message_gets_annotation(config_service) -> None:
    """Test weather questions carry the snapshot to the model."""
    llm = FakeLLM()
    service, _ = make_chat(config_service, llm)

    await service.respond("Is it going to rain?")

    outgoing = llm.chat_calls[0][-1]["content"]
    assert outgoing.startswith("Is it going to rain?")
    assert "[Current weather in Kyoto: 22°C]" in outgoing


@pytest.mark.asyncio
async def test_weather_unconfigured_skips_annotation(config_service) -> None:
    """Test no annotation when the weather provider is not configured."""
    llm = FakeLLM()
    weather = StubWeather(configured=False)
    service, _ = make_chat(config_service, llm, weather)

    await service.respond("What's the weather?")

    assert "[Current weather" not in llm.chat_calls[0][-1]["content"]
    assert weather.lookups == 0


@pytest.mark.asyncio
async def test_failed_weather_lookup_skips_annotation(config_service) -> None:
    """Test a failed fetch still lets the chat go through."""
    llm = FakeLLM()
    service, _ = make_chat(config_service, llm, StubWeather(snapshot=None))

    reply = await service.respond("What's the weather?")

    assert reply == "All is calm."
    assert "[Current weather" not in llm.chat_calls[0][-1]["content"]


@pytest.mark.asyncio
async def test_client_time_is_appended(config_service) -> None:
    """Test the client clock reading is passed through."""
    llm = FakeLLM()
    service, _ = make_chat(config_service, llm)

    await service.respond("Good evening", client_time="7:42 PM")

    assert llm.chat_calls[0][-1]["content"] == "Good evening\n[Client time: 7:42 PM]"


@pytest.mark.asyncio
async def test_persona_frames_history(config_service) -> None:
    """Test the persona pair opens the conversation before prior turns."""
    llm = FakeLLM(reply="Breathe.")
    service, _ = make_chat(config_service, llm)

    await service.respond("first")
    await service.respond("second")

    messages = llm.chat_calls[1]
    assert messages[0] == {"role": "user", "content": "You are Zen."}
    assert messages[1] == {"role": "assistant", "content": "I am Zen. Understood."}
    assert messages[2:] == [
        {"role": "user", "content": "first"},
        {"role": "assistant", "content": "Breathe."},
        {"role": "user", "content": "second"},
    ]


@pytest.mark.asyncio
async def test_history_stores_raw_message(config_service) -> None:
    """Test annotations are sent but not remembered."""
    llm = FakeLLM()
    service, sessions = make_chat(config_service, llm)

    await service.respond("Is it going to rain?", client_time="9:00")

    assert sessions.get_history()[0] == {"role": "user", "content": "Is it going to rain?"}


@pytest.mark.asyncio
async def test_history_cap_holds_across_calls(config_service) -> None:
    """Test the window stays bounded however long the chat runs."""
    llm = FakeLLM()
    service, sessions = make_chat(config_service, llm, history_limit=4)

    for i in range(10):
        await service.respond(f"message {i}")
        assert len(sessions.get_history()) <= 4

    assert sessions.get_history()[-2]["content"] == "message 9"


@pytest.mark.asyncio
async def test_no_model_raises_without_calling(config_service) -> None:
    """Test a degraded service refuses before contacting the model."""
    llm = FakeLLM(model=None)
    service, sessions = make_chat(config_service, llm)

    with pytest.raises(LLMServiceError) as exc_info:
        await service.respond("hello")

    assert exc_info.value.kind == LLMErrorKind.UNAVAILABLE
    assert llm.chat_calls == []
    assert sessions.get_history() == []


@pytest.mark.asyncio
async def test_failed_call_is_not_remembered(config_service, rate_limited) -> None:
    """Test a failed exchange leaves memory untouched."""
    llm = FakeLLM(error=rate_limited)
    service, sessions = make_chat(config_service, llm)

    with pytest.raises(LLMServiceError):
        await service.respond("hello")

    assert sessions.get_history() == []
