"""Reminder service: ask the model to turn a request into a ReminderIntent."""
import logging
from datetime import datetime
from typing import Optional

from zen_sanctuary.models import ReminderIntent
from zen_sanctuary.services.llm_service import LLMErrorKind, LLMServiceError
from zen_sanctuary.utils.colored_logger import get_plugin_logger
from zen_sanctuary.utils.reminder_parser import parse_reminder_output

logger = logging.getLogger(__name__)
plugin_logger = get_plugin_logger(__name__, 'reminder')

FOCUS_TASK = "Focus session complete - take a break"
FOCUS_MINUTES = 25

REMINDER_PROMPT = """You extract reminders from short messages sent to a clock app.

Current local time: {now}
User message: "{message}"

Respond ONLY with JSON in this exact shape, no other text:
{{"isReminder": true/false, "task": "<what to do>", "minutesFromNow": <number>, "recurring": true/false, "intervalMinutes": <number>}}

Rules:
1. "in X minutes" or "in X hours": minutesFromNow is X converted to minutes.
2. "at HH:MM", "at 3pm" and similar: minutesFromNow is the number of minutes from the current time until that time. If that time has already passed today, use the same time tomorrow.
3. "every X minutes/hours": recurring is true, intervalMinutes is X in minutes, and minutesFromNow is the same interval unless a start time is given.
4. "pomodoro" or "focus" requests: isReminder true, task "{focus_task}", minutesFromNow {focus_minutes}, recurring false, intervalMinutes 0.
5. Keep task short, in the user's words, without the time phrase.
6. Anything that is not a reminder (questions, weather, small talk): {{"isReminder": false, "task": "", "minutesFromNow": 0, "recurring": false, "intervalMinutes": 0}}

Examples:
"remind me in 30 minutes to stretch" -> {{"isReminder": true, "task": "stretch", "minutesFromNow": 30, "recurring": false, "intervalMinutes": 0}}
"remind me to drink water every hour" -> {{"isReminder": true, "task": "drink water", "minutesFromNow": 60, "recurring": true, "intervalMinutes": 60}}
"what's the weather" -> {{"isReminder": false, "task": "", "minutesFromNow": 0, "recurring": false, "intervalMinutes": 0}}
"""


def format_now(now: datetime) -> str:
    """Human-readable local timestamp with a 24h clock for unambiguous math."""
    return now.strftime("%A, %B %d, %Y %H:%M")


def build_reminder_prompt(message: str, now_text: str) -> str:
    """Build the extraction prompt for one message.

    Args:
        message: The user's request, embedded literally
        now_text: Current local time as shown to the model

    Returns:
        Prompt text
    """
    return REMINDER_PROMPT.format(
        now=now_text,
        message=message,
        focus_task=FOCUS_TASK,
        focus_minutes=FOCUS_MINUTES,
    )


class ReminderService:
    """Service for extracting reminder intents with the LLM."""

    def __init__(self, llm_service, config_service):
        """Initialize reminder service.

        Args:
            llm_service: LLM API service
            config_service: Configuration service
        """
        self.llm_service = llm_service
        self.config_service = config_service

    async def parse(
        self,
        message: str,
        client_time: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> ReminderIntent:
        """Extract a reminder intent from a natural-language message.

        Args:
            message: The user's request
            client_time: Client-side time string; preferred over server time
            now: Server time override (tests)

        Returns:
            ReminderIntent; the default record when the reply is unreadable

        Raises:
            LLMServiceError: If no model is available or the call fails
        """
        if not self.llm_service.is_available:
            raise LLMServiceError(LLMErrorKind.UNAVAILABLE, "AI currently unavailable")

        now_text = client_time or format_now(now or datetime.now())
        prompt = build_reminder_prompt(message, now_text)

        raw = await self.llm_service.generate_text(
            prompt, temperature=self.config_service.get_temperature("reminder")
        )
        intent = parse_reminder_output(raw)

        plugin_logger.info(
            f"Reminder parse -> isReminder={intent.is_reminder}, "
            f"minutes={intent.minutes_from_now}, recurring={intent.recurring}"
        )
        return intent
