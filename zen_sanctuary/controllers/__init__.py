"""Controllers package."""
from .chat_controller import ChatController
from .config_controller import ConfigController
from .reminder_controller import ReminderController
from .weather_controller import WeatherController

__all__ = [
    "ChatController",
    "ConfigController",
    "ReminderController",
    "WeatherController",
]
