"""
Log entry data structure

One entry is built per emitted message and handed to every writer.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict


@dataclass
class LogEntry:
    """
    Log entry data structure.

    ``message`` is the interpolated text without decoration; ``line`` is
    the fully decorated line produced by the registry's formatter.
    Writers pick whichever suits their destination.
    """

    level: int
    message: str
    logger_name: str = ""
    timestamp: datetime = field(default_factory=datetime.now)
    line: str = ""

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, int):
            raise TypeError("level must be LogLevel or int")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": int(self.level),
            "message": self.message,
            "logger_name": self.logger_name,
            "timestamp": self.timestamp.isoformat(),
            "line": self.line,
        }

    def __str__(self) -> str:
        return self.line or self.message
