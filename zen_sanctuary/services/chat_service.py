"""Chat service for turning a user message into a model reply."""
import logging
from typing import Dict, List, Optional

from zen_sanctuary.models import WeatherSnapshot
from zen_sanctuary.services.llm_service import LLMErrorKind, LLMServiceError
from zen_sanctuary.utils.colored_logger import get_plugin_logger

logger = logging.getLogger(__name__)
plugin_logger = get_plugin_logger(__name__, 'chat')


class ChatService:
    """Service for composing chat prompts and recording the exchange."""

    def __init__(self, session_service, llm_service, weather_service, config_service):
        """Initialize chat service.

        Args:
            session_service: Conversation memory
            llm_service: LLM API service
            weather_service: Weather lookup service
            config_service: Configuration service
        """
        self.session_service = session_service
        self.llm_service = llm_service
        self.weather_service = weather_service
        self.config_service = config_service

    def build_messages(self, history: List[Dict], outgoing: str) -> List[Dict]:
        """Frame the persona as the opening exchange, then history, then the new message."""
        persona_prompt, persona_ack = self.config_service.get_persona()
        messages = [
            {"role": "user", "content": persona_prompt},
            {"role": "assistant", "content": persona_ack},
        ]
        messages.extend(history)
        messages.append({"role": "user", "content": outgoing})
        return messages

    def compose_outgoing(
        self,
        message: str,
        client_time: Optional[str] = None,
        weather: Optional[WeatherSnapshot] = None
    ) -> str:
        """Append the client time and weather notes to the user's message."""
        parts = [message]
        if client_time:
            parts.append(f"[Client time: {client_time}]")
        if weather is not None:
            parts.append(self.weather_service.format_annotation(weather))
        return "\n".join(parts)

    async def _weather_for(self, message: str) -> Optional[WeatherSnapshot]:
        if not self.weather_service.is_configured:
            return None
        if not self.weather_service.mentions_weather(message):
            return None
        return await self.weather_service.get_current()

    async def respond(
        self,
        message: str,
        session_id: Optional[str] = None,
        client_time: Optional[str] = None
    ) -> str:
        """Send a message to the model with conversation context.

        Args:
            message: The user's message
            session_id: Conversation identifier
            client_time: Client-side time string, passed through to the model

        Returns:
            The model's reply text

        Raises:
            LLMServiceError: If no model is available or the call fails
        """
        if not self.llm_service.is_available:
            raise LLMServiceError(LLMErrorKind.UNAVAILABLE, "AI currently unavailable")

        weather = await self._weather_for(message)
        outgoing = self.compose_outgoing(message, client_time, weather)
        history = self.session_service.get_history(session_id)

        plugin_logger.info(
            f"Chat -> history={len(history)}, weather={'yes' if weather else 'no'}, "
            f"client_time={'yes' if client_time else 'no'}"
        )

        reply = await self.llm_service.generate_chat(self.build_messages(history, outgoing))

        self.session_service.append_exchange(session_id, message, reply)
        return reply
