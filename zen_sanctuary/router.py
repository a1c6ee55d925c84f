"""API router with all endpoints."""
import logging
from typing import Optional

from fastapi import APIRouter

from zen_sanctuary.models import ChatClearRequest, ChatRequest, ReminderRequest

logger = logging.getLogger(__name__)


def create_router(chat_controller, reminder_controller, weather_controller, config_controller) -> APIRouter:
    """Create API router with all endpoints.

    Args:
        chat_controller: Chat controller instance
        reminder_controller: Reminder controller instance
        weather_controller: Weather controller instance
        config_controller: Config controller instance

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix="/api")

    @router.get("/health")
    async def health_check():
        """Health check endpoint."""
        return config_controller.get_health()

    @router.get("/config")
    async def get_config():
        """Get current configuration (without sensitive data)."""
        return config_controller.get_config()

    @router.get("/weather")
    async def weather(city: Optional[str] = None):
        """Current weather for a city (default city when omitted)."""
        return await weather_controller.handle_weather(city)

    @router.post("/chat")
    async def chat(request: ChatRequest):
        """Send one message to Zen and get the reply."""
        return await chat_controller.handle_chat(request)

    @router.post("/chat/clear")
    async def clear_chat(request: Optional[ChatClearRequest] = None):
        """Forget the conversation history."""
        return await chat_controller.handle_clear(request)

    @router.post("/parse-reminder")
    async def parse_reminder(request: ReminderRequest):
        """Extract a structured reminder from natural language."""
        return await reminder_controller.handle_parse(request)

    return router
