"""Colorful console logging for credhelper."""

import logging
import re
import sys
from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

if TYPE_CHECKING:
    from credhelper.config import Settings

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "white": "\033[37m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bg_red": "\033[41m",
}

# Log level colors
LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Component colors for logger names
COMPONENT_COLORS = {
    "credhelper.utils.parser": COLORS["bright_magenta"],
    "credhelper.arguments": COLORS["cyan"],
    "credhelper.config": COLORS["green"],
    "default": COLORS["white"],
}

PACKAGE_LOGGER = "credhelper"

URI_PATTERN = re.compile(r"(\w[\w+.\-]*://[^\s]+)")
LINE_PATTERN = re.compile(r"(line \d+)")


class ColorfulFormatter(logging.Formatter):
    """Colorful log formatter with zoned timestamps and component highlighting."""

    def __init__(self, use_colors: bool = True, timezone: str = "UTC") -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
            timezone: IANA zone name for timestamps.
        """
        super().__init__()
        self.use_colors = use_colors
        self.tz = ZoneInfo(timezone)

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        """Get color for a logger name/component."""
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created, tz=self.tz)
        return f"{dt.strftime('%H:%M:%S')}.{int(record.msecs):03d} {dt.strftime('%m/%d')}"

    def _format_level(self, record: logging.LogRecord) -> str:
        level = record.levelname
        color = LEVEL_COLORS.get(level, COLORS["white"])
        return self._colorize(f"{level:<8}", color)

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name
        # Shorten package prefix
        if name.startswith(f"{PACKAGE_LOGGER}."):
            name = name[len(PACKAGE_LOGGER) + 1 :]
        color = self._get_component_color(record.name)
        return self._colorize(f"{name:<16}", color)

    def _highlight_message(self, message: str) -> str:
        """Highlight URIs and line numbers in log messages."""
        if not self.use_colors:
            return message

        if "://" in message:
            message = URI_PATTERN.sub(
                f"{COLORS['bright_blue']}\\1{COLORS['reset']}",
                message,
            )

        if "line " in message:
            message = LINE_PATTERN.sub(
                f"{COLORS['bright_yellow']}\\1{COLORS['reset']}",
                message,
            )

        return message

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as 'time | level | component | message'."""
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._format_level(record)
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(settings: "Settings") -> logging.Logger:
    """Configure the credhelper package logger.

    Logs go to stderr; stdout carries the wire protocol. Colors are disabled
    when stderr is not a TTY. Calling this again only updates the level.

    Args:
        settings: Settings providing level, colors, and timezone

    Returns:
        The configured package logger
    """
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, settings.log_level, logging.WARNING))

    # Only add handler if not already configured
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            ColorfulFormatter(use_colors=use_colors, timezone=settings.log_timezone)
        )
        package_logger.addHandler(handler)
        package_logger.propagate = False

    return package_logger
