"""
Registry - the single authority on whether a message is emitted, and where

Every logger, named or not, funnels into Registry.dispatch. A default
registry is created at import time and reached through get_registry().
"""

from __future__ import annotations
import sys
import threading
from typing import Any, Iterable, NamedTuple, Optional, Tuple

from micrologging.core.log_entry import LogEntry
from micrologging.core.log_level import LogLevel, to_level
from micrologging.core.registry_config import RegistryConfig
from micrologging.formatters.line_formatter import LineFormatter, render_message
from micrologging.writers.base_writer import BaseWriter
from micrologging.writers.console_writer import ConsoleWriter
from micrologging.writers.stream_writer import as_writer


class _State(NamedTuple):
    level: LogLevel
    writers: Tuple[BaseWriter, ...]


class Registry:
    """
    Level threshold plus an ordered list of writers.

    Thread Safety:
        The threshold and the writer list live in one immutable snapshot.
        Mutations build a new snapshot under a lock; dispatch reads the
        snapshot once without locking, so concurrent dispatches run in
        parallel and never observe a half-applied change. Writers in the
        snapshot taken by a dispatch receive that dispatch's entry
        exactly once.

    Example:
        registry = Registry()
        registry.add_output(FileWriter("app.log"))
        registry.set_level(LogLevel.DEBUG)
        registry.dispatch(LogLevel.INFO, "connect to %s", "host1", name="net")
    """

    def __init__(
        self,
        config: Optional[RegistryConfig] = None,
        writers: Optional[Iterable[Any]] = None,
    ):
        """
        Initialize registry.

        Args:
            config: Registry configuration (default: RegistryConfig.default())
            writers: Initial writers or streams. When omitted, a console
                writer on standard output is installed if
                ``config.console_output`` is set.
        """
        self._config = config or RegistryConfig.default()
        self._formatter = LineFormatter(self._config.timestamp_format)
        self._lock = threading.Lock()
        self._writer_errors = 0

        if writers is not None:
            initial = tuple(as_writer(w) for w in writers)
        elif self._config.console_output:
            initial = (ConsoleWriter(colored=self._config.colored_output),)
        else:
            initial = ()
        self._state = _State(self._config.min_level, initial)

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def level(self) -> LogLevel:
        """Current minimum level."""
        return self._state.level

    @property
    def outputs(self) -> Tuple[BaseWriter, ...]:
        """Registered writers in insertion order."""
        return self._state.writers

    def add_output(self, output: Any) -> BaseWriter:
        """
        Append a writer.

        Args:
            output: BaseWriter instance, or any text stream with a
                ``write`` method (wrapped in a StreamWriter)

        Returns:
            The writer that was registered
        """
        writer = as_writer(output)
        with self._lock:
            state = self._state
            self._state = state._replace(writers=state.writers + (writer,))
        return writer

    def set_level(self, level) -> None:
        """
        Replace the minimum level.

        Args:
            level: LogLevel, int or level name

        Raises:
            UnknownLevelError: If a level name is not recognized
        """
        level = to_level(level)
        with self._lock:
            self._state = self._state._replace(level=level)

    def is_enabled_for(self, level: int) -> bool:
        """Check whether a message at ``level`` would be emitted."""
        return level >= self._state.level

    def dispatch(self, level: int, fmt: Any, *args: Any, name: str = "") -> None:
        """
        Filter, format and fan out a single message.

        Args:
            level: Message level
            fmt: printf-style format string, used verbatim without args
            *args: Format arguments
            name: Logger name shown in the line; omitted when empty
        """
        state = self._state
        if level < state.level:
            return

        entry = LogEntry(
            level=level,
            message=render_message(fmt, args),
            logger_name=name,
        )
        entry.line = self._formatter.format(entry)

        for writer in state.writers:
            try:
                writer.write(entry)
            except Exception as e:
                self._record_writer_error(writer, e)

    def _record_writer_error(self, writer: BaseWriter, error: Exception) -> None:
        with self._lock:
            self._writer_errors += 1
        if self._config.report_writer_errors:
            try:
                sys.stderr.write(f"Writer error ({writer!r}): {error}\n")
            except Exception:
                pass

    def flush(self) -> None:
        """Flush all writers."""
        for writer in self._state.writers:
            try:
                writer.flush()
            except Exception as e:
                self._record_writer_error(writer, e)

    def close(self) -> None:
        """Close all writers. The registry keeps them registered."""
        for writer in self._state.writers:
            try:
                writer.close()
            except Exception as e:
                self._record_writer_error(writer, e)

    def get_metrics(self) -> dict:
        """Get registry metrics."""
        with self._lock:
            return {
                "writers": len(self._state.writers),
                "writer_errors": self._writer_errors,
            }

    def __repr__(self) -> str:
        state = self._state
        return f"Registry(level={state.level.name}, writers={len(state.writers)})"


_default_registry = Registry()
_default_lock = threading.Lock()


def get_registry() -> Registry:
    """Return the process-wide default registry."""
    return _default_registry


def set_registry(registry: Registry) -> Registry:
    """
    Replace the process-wide default registry.

    Loggers created without an explicit registry resolve the default on
    every call, so they follow the replacement.

    Returns:
        The previous default registry
    """
    global _default_registry
    if not isinstance(registry, Registry):
        raise TypeError("registry must be a Registry instance")
    with _default_lock:
        previous = _default_registry
        _default_registry = registry
    return previous
