"""
Colored logging configuration for terminal output.
Component loggers (llm, weather, reminder, ...) get their own color so the
handshake, cache and parsing traffic is easy to follow in the console.
"""

import logging
import sys
from typing import Optional


class Colors:
    """ANSI color codes for terminal output."""
    RESET = '\033[0m'
    BOLD = '\033[1m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'
    MAGENTA = '\033[35m'
    CYAN = '\033[36m'
    WHITE = '\033[37m'

    BRIGHT_BLACK = '\033[90m'
    BRIGHT_RED = '\033[91m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_CYAN = '\033[96m'


# Component-specific colors
PLUGIN_COLORS = {
    'llm': Colors.GREEN,
    'weather': Colors.BRIGHT_BLUE,
    'reminder': Colors.MAGENTA,
    'chat': Colors.CYAN,
    'session': Colors.YELLOW,
    'default': Colors.WHITE
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colors records by component, falling back to level."""

    LEVEL_COLORS = {
        'DEBUG': Colors.BRIGHT_BLACK,
        'INFO': Colors.WHITE,
        'WARNING': Colors.YELLOW,
        'ERROR': Colors.RED,
        'CRITICAL': Colors.BRIGHT_RED + Colors.BOLD,
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None):
        if fmt is None:
            fmt = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        if datefmt is None:
            datefmt = '%Y-%m-%d %H:%M:%S'
        super().__init__(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        level_color = self.LEVEL_COLORS.get(record.levelname, Colors.WHITE)

        plugin_color = None
        if hasattr(record, 'plugin_type'):
            plugin_color = PLUGIN_COLORS.get(record.plugin_type, PLUGIN_COLORS['default'])

        formatted = super().format(record)

        # Errors keep their level color even on component loggers
        if plugin_color and record.levelno < logging.WARNING:
            return f"{plugin_color}{formatted}{Colors.RESET}"
        return f"{level_color}{formatted}{Colors.RESET}"


class PluginLogger:
    """Logger wrapper that tags every record with a component type."""

    def __init__(self, logger: logging.Logger, plugin_type: str):
        """
        Initialize plugin logger.

        Args:
            logger: Base logger
            plugin_type: Component type (llm, weather, reminder, chat, session)
        """
        self.logger = logger
        self.plugin_type = plugin_type

    def _log(self, level: int, msg: str, *args, **kwargs):
        extra = kwargs.get('extra', {})
        extra['plugin_type'] = self.plugin_type
        kwargs['extra'] = extra
        self.logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self._log(logging.ERROR, msg, *args, **kwargs)

    def critical(self, msg: str, *args, **kwargs):
        self._log(logging.CRITICAL, msg, *args, **kwargs)


def setup_colored_logging(level: int = logging.INFO) -> None:
    """
    Setup colored logging for the application.

    Args:
        level: Logging level (default: INFO)
    """
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)


def get_plugin_logger(name: str, plugin_type: str) -> PluginLogger:
    """
    Get a component logger with colored output.

    Args:
        name: Logger name (usually __name__)
        plugin_type: Component type (llm, weather, reminder, chat, session)

    Returns:
        PluginLogger instance
    """
    return PluginLogger(logging.getLogger(name), plugin_type)
