"""Log panel settings."""

from enum import IntEnum


class LogLevel(IntEnum):
    """Log panel threshold. Lower values show more entries."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Parse 'debug', 'info', 'warning' or 'error'; anything else is DEBUG."""
        try:
            return cls[value.upper()]
        except KeyError:
            return cls.DEBUG


LEVEL_COLORS = {
    LogLevel.DEBUG: "dim white",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}

# Colors for the component tag of each entry
COMPONENT_COLORS = {
    "TUI": "cyan",
    "Input": "bright_blue",
    "LLM": "magenta",
    "Dispatch": "green",
    "Tool": "bright_cyan",
    "Geocode": "yellow",
    "Weather": "bright_yellow",
}

LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500
