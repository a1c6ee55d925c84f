"""Parse a model's free-text answer into a ReminderIntent.

The model is asked for bare JSON but routinely wraps it in prose or code
fences, omits keys, or returns numbers as strings. Everything here treats the
text as untrusted: the result is always a complete record, and anything that
cannot be read becomes the "not a reminder" default.
"""
import json
import logging
from typing import Any, Dict

from zen_sanctuary.models import ReminderIntent

logger = logging.getLogger(__name__)

_DECODER = json.JSONDecoder()

DEFAULT_REMINDER = ReminderIntent()


def extract_json_object(text: str) -> Dict[str, Any]:
    """Return the brace-delimited object embedded in ``text``.

    Raises:
        ValueError: If there is no object or it does not decode to a dict
    """
    text = text or ""
    start = text.find("{")
    while start != -1:
        try:
            # raw_decode stops at the end of the first complete value
            data, _ = _DECODER.raw_decode(text, start)
        except json.JSONDecodeError:
            start = text.find("{", start + 1)
            continue
        except RecursionError:
            raise ValueError("Model output nests too deeply to decode")

        if isinstance(data, dict):
            return data
        start = text.find("{", start + 1)

    raise ValueError("No JSON object found in model output")


def _as_minutes(value: Any) -> int:
    if isinstance(value, bool) or not value:
        return 0
    try:
        minutes = round(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(minutes, 0)


def _as_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


def _as_text(value: Any) -> str:
    if not value or not isinstance(value, (str, int, float)):
        return ""
    return str(value).strip()


def parse_reminder_output(text: str) -> ReminderIntent:
    """Turn raw model output into a validated-or-default ReminderIntent.

    Args:
        text: Raw text returned by the model

    Returns:
        ReminderIntent with every field populated
    """
    try:
        data = extract_json_object(text)
    except ValueError as e:
        # json.JSONDecodeError is a ValueError
        logger.warning(f"Unreadable reminder output, using default: {e}")
        return DEFAULT_REMINDER.model_copy()

    return ReminderIntent(
        is_reminder=_as_flag(data.get("isReminder")),
        task=_as_text(data.get("task")),
        minutes_from_now=_as_minutes(data.get("minutesFromNow")),
        recurring=_as_flag(data.get("recurring")),
        interval_minutes=_as_minutes(data.get("intervalMinutes")),
    )
