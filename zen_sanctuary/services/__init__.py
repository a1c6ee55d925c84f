"""Services package."""
from .config_service import ConfigService
from .session_service import SessionService
from .llm_service import LLMErrorKind, LLMService, LLMServiceError
from .weather_service import WeatherService
from .chat_service import ChatService
from .reminder_service import ReminderService

__all__ = [
    "ConfigService",
    "SessionService",
    "LLMErrorKind",
    "LLMService",
    "LLMServiceError",
    "WeatherService",
    "ChatService",
    "ReminderService",
]
