"""Reminder controller for handling reminder parsing."""
import logging
from typing import Dict, Union

from fastapi.responses import JSONResponse

from zen_sanctuary.controllers.chat_controller import is_valid_message
from zen_sanctuary.models import ReminderRequest
from zen_sanctuary.services.llm_service import LLMServiceError

logger = logging.getLogger(__name__)


class ReminderController:
    """Controller for reminder operations."""

    def __init__(self, reminder_service):
        self.reminder_service = reminder_service

    async def handle_parse(self, request: ReminderRequest) -> Union[Dict, JSONResponse]:
        """Handle reminder parse request.

        Only transport-level failures become HTTP errors; an unreadable model
        reply still yields the default intent.
        """
        if not is_valid_message(request.message):
            return JSONResponse(status_code=400, content={"error": "No message"})

        try:
            intent = await self.reminder_service.parse(
                request.message, client_time=request.client_time
            )
        except LLMServiceError as e:
            logger.error(f"Reminder parse error ({e.kind.value}): {e}")
            return JSONResponse(
                status_code=e.status_code,
                content={"error": "Failed to parse reminder"},
            )

        return intent.to_response()
