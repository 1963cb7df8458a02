"""
Log level enumeration

Six ordered severities with fixed-width labels and lenient name parsing.
"""

from enum import IntEnum
from typing import Dict


class UnknownLevelError(ValueError):
    """Raised when a level name cannot be parsed.

    The ``fallback`` attribute carries the default level so callers that
    choose to continue still get a usable value.
    """

    def __init__(self, text: str, fallback: "LogLevel"):
        super().__init__(f"No such log level {text}")
        self.text = text
        self.fallback = fallback


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Lower values are more verbose. Filtering keeps entries whose level
    is greater than or equal to the configured threshold.
    """

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5

    def __str__(self) -> str:
        """Fixed-width label, e.g. ``"INFO "``."""
        return self.label

    @property
    def label(self) -> str:
        """Five character label used in rendered lines."""
        return LEVEL_LABELS[self]

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Matching is case-insensitive and accepts the synonyms
        ``WARNING`` and ``ERR``.

        Args:
            level_str: Level name

        Returns:
            LogLevel enum value

        Raises:
            UnknownLevelError: If level_str is not a known name. The
                exception's ``fallback`` is DEFAULT_LEVEL.
        """
        key = level_str.strip().upper()
        try:
            return LEVEL_FROM_NAME[key]
        except KeyError:
            raise UnknownLevelError(key, DEFAULT_LEVEL) from None

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.TRACE: "\033[37m",     # White
            LogLevel.DEBUG: "\033[36m",     # Cyan
            LogLevel.INFO: "\033[32m",      # Green
            LogLevel.WARN: "\033[33m",      # Yellow
            LogLevel.ERROR: "\033[31m",     # Red
            LogLevel.FATAL: "\033[35m",     # Magenta
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


DEFAULT_LEVEL = LogLevel.INFO

UNKNOWN_LABEL = "?????"

LEVEL_LABELS: Dict[LogLevel, str] = {
    LogLevel.TRACE: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO ",
    LogLevel.WARN: "WARN ",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
}

LEVEL_FROM_NAME: Dict[str, LogLevel] = {
    "TRACE": LogLevel.TRACE,
    "DEBUG": LogLevel.DEBUG,
    "INFO": LogLevel.INFO,
    "WARN": LogLevel.WARN,
    "WARNING": LogLevel.WARN,
    "ERR": LogLevel.ERROR,
    "ERROR": LogLevel.ERROR,
    "FATAL": LogLevel.FATAL,
}


def level_label(level: int) -> str:
    """Render any integer level, using ``?????`` outside the enumeration."""
    try:
        return LEVEL_LABELS[LogLevel(level)]
    except ValueError:
        return UNKNOWN_LABEL


def to_level(value) -> LogLevel:
    """Coerce a LogLevel, int or level name into a LogLevel."""
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, str):
        return LogLevel.from_string(value)
    return LogLevel(value)
