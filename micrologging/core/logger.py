"""
Named logger - a display name bound to a registry's dispatch path
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional

from micrologging.core.log_level import LogLevel
from micrologging.core.registry import Registry, get_registry


@dataclass(frozen=True)
class Logger:
    """
    Lightweight logger handle.

    Holds no state besides its name and an optional registry; when the
    registry is None the default registry is looked up on every call.
    Creating or dropping a Logger has no side effects.
    """

    name: str = ""
    registry: Optional[Registry] = field(default=None, compare=False, repr=False)

    def _target(self) -> Registry:
        return self.registry if self.registry is not None else get_registry()

    def is_enabled_for(self, level: int) -> bool:
        return self._target().is_enabled_for(level)

    def log(self, level: int, fmt: Any, *args: Any) -> None:
        """Log a message at the given level."""
        self._target().dispatch(level, fmt, *args, name=self.name)

    def trace(self, fmt: Any, *args: Any) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, fmt, *args)

    def debug(self, fmt: Any, *args: Any) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, fmt, *args)

    def info(self, fmt: Any, *args: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, fmt, *args)

    def warn(self, fmt: Any, *args: Any) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, fmt, *args)

    def error(self, fmt: Any, *args: Any) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, fmt, *args)

    def fatal(self, fmt: Any, *args: Any) -> None:
        """Log fatal message. Does not exit the process."""
        self.log(LogLevel.FATAL, fmt, *args)


def get_logger(name: str = "", registry: Optional[Registry] = None) -> Logger:
    """
    Construct a named logger.

    Args:
        name: Display name; an empty name omits the name segment
        registry: Registry to dispatch to (default: the default registry
            at call time)
    """
    return Logger(name, registry)
