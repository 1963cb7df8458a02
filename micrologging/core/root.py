"""
Root-level functions operating on the default registry

Messages logged here carry no logger name.
"""

from typing import Any

from micrologging.core.log_level import LogLevel
from micrologging.core.registry import get_registry
from micrologging.writers.base_writer import BaseWriter


def add_output(output: Any) -> BaseWriter:
    """Append a writer or text stream to the default registry."""
    return get_registry().add_output(output)


def set_level(level) -> None:
    """Set the default registry's minimum level."""
    get_registry().set_level(level)


def get_level() -> LogLevel:
    return get_registry().level


def log(level: int, fmt: Any, *args: Any) -> None:
    get_registry().dispatch(level, fmt, *args)


def trace(fmt: Any, *args: Any) -> None:
    get_registry().dispatch(LogLevel.TRACE, fmt, *args)


def debug(fmt: Any, *args: Any) -> None:
    get_registry().dispatch(LogLevel.DEBUG, fmt, *args)


def info(fmt: Any, *args: Any) -> None:
    get_registry().dispatch(LogLevel.INFO, fmt, *args)


def warn(fmt: Any, *args: Any) -> None:
    get_registry().dispatch(LogLevel.WARN, fmt, *args)


def error(fmt: Any, *args: Any) -> None:
    get_registry().dispatch(LogLevel.ERROR, fmt, *args)


def fatal(fmt: Any, *args: Any) -> None:
    get_registry().dispatch(LogLevel.FATAL, fmt, *args)
