"""Chat controller for handling chat-related operations."""
import logging
from typing import Dict, Optional, Union

from fastapi.responses import JSONResponse

from zen_sanctuary.models import ChatClearRequest, ChatRequest
from zen_sanctuary.services.llm_service import LLMErrorKind, LLMServiceError

logger = logging.getLogger(__name__)


def is_valid_message(message) -> bool:
    return isinstance(message, str) and bool(message.strip())


class ChatController:
    """Controller for chat operations."""

    def __init__(self, chat_service, session_service, config_service):
        """Initialize chat controller.

        Args:
            chat_service: Chat composition service
            session_service: Session management service
            config_service: Configuration service (for in-character phrases)
        """
        self.chat_service = chat_service
        self.session_service = session_service
        self.config_service = config_service

    def _error_response(self, error: LLMServiceError) -> JSONResponse:
        if error.kind == LLMErrorKind.RATE_LIMITED:
            message, phrase = "Too many requests", "rate_limited"
        elif error.kind in (LLMErrorKind.AUTH_FAILED, LLMErrorKind.UNAVAILABLE):
            message, phrase = "AI currently unavailable", "unavailable"
        else:
            message, phrase = "Chat failed", "error"

        return JSONResponse(
            status_code=error.status_code,
            content={
                "error": message,
                "response": self.config_service.get_chat_phrase(phrase),
            },
        )

    async def handle_chat(self, request: ChatRequest) -> Union[Dict, JSONResponse]:
        """Handle chat request.

        Args:
            request: ChatRequest with message, optional client time and session id

        Returns:
            ``{"response": text}`` or an error JSONResponse
        """
        if not is_valid_message(request.message):
            return JSONResponse(status_code=400, content={"error": "No message"})

        try:
            reply = await self.chat_service.respond(
                request.message,
                session_id=request.session_id,
                client_time=request.client_time,
            )
        except LLMServiceError as e:
            logger.error(f"Chat error ({e.kind.value}): {e}")
            return self._error_response(e)

        return {"response": reply}

    async def handle_clear(self, request: Optional[ChatClearRequest] = None) -> Dict:
        """Handle conversation reset request."""
        session_id = request.session_id if request else None
        self.session_service.clear(session_id)
        return {"status": "cleared"}
