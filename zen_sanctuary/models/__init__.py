"""Models package."""
from .schemas import (
    ChatRequest,
    ChatClearRequest,
    ReminderRequest,
    ReminderIntent,
    WeatherSnapshot,
    HealthResponse,
    ConfigResponse,
)

__all__ = [
    "ChatRequest",
    "ChatClearRequest",
    "ReminderRequest",
    "ReminderIntent",
    "WeatherSnapshot",
    "HealthResponse",
    "ConfigResponse",
]
