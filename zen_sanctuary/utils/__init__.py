"""Utility helpers."""
from .colored_logger import get_plugin_logger, setup_colored_logging
from .reminder_parser import DEFAULT_REMINDER, parse_reminder_output

__all__ = [
    "get_plugin_logger",
    "setup_colored_logging",
    "DEFAULT_REMINDER",
    "parse_reminder_output",
]
