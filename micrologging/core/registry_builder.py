"""Registry builder pattern"""

from typing import Optional

from micrologging.core.log_level import to_level
from micrologging.core.registry import Registry
from micrologging.core.registry_config import RegistryConfig
from micrologging.writers.console_writer import ConsoleWriter
from micrologging.writers.file_writer import FileWriter
from micrologging.writers.stream_writer import as_writer
from micrologging.writers.syslog_writer import SyslogWriter


class RegistryBuilder:
    """
    Builder pattern for registry construction.

    Unlike ``Registry()``, a built registry has no console output unless
    ``with_console`` is called. Writers are registered in the order the
    builder methods were called.

    Example:
        registry = (RegistryBuilder()
            .with_level(LogLevel.DEBUG)
            .with_console()
            .with_file("logs/app.log")
            .build())
    """

    def __init__(self):
        self._config = RegistryConfig(console_output=False)
        self._writers = []

    def with_level(self, level) -> "RegistryBuilder":
        """Set minimum log level (LogLevel, int or name)."""
        self._config.min_level = to_level(level)
        return self

    def with_console(self, colored: bool = False, stream=None) -> "RegistryBuilder":
        """Enable console output."""
        self._config.console_output = True
        self._config.colored_output = colored
        self._writers.append(lambda: ConsoleWriter(colored=colored, stream=stream))
        return self

    def with_file(self, filepath) -> "RegistryBuilder":
        """Enable file output."""
        self._writers.append(lambda: FileWriter(filepath))
        return self

    def with_syslog(self, ident: Optional[str] = None, facility=None) -> "RegistryBuilder":
        """
        Enable system log output.

        Args:
            ident: Tag for the default syslog facility
            facility: Custom facility object (see SyslogWriter)
        """
        self._writers.append(lambda: SyslogWriter(facility=facility, ident=ident))
        return self

    def with_timestamp_format(self, timestamp_format: str) -> "RegistryBuilder":
        """Set strftime format used for line timestamps."""
        self._config.timestamp_format = timestamp_format
        return self

    def with_error_reporting(self, enabled: bool = True) -> "RegistryBuilder":
        """Print writer failures to stderr."""
        self._config.report_writer_errors = enabled
        return self

    def add_writer(self, writer) -> "RegistryBuilder":
        """
        Add a custom writer.

        Args:
            writer: BaseWriter instance or text stream

        Returns:
            Self for method chaining
        """
        adapted = as_writer(writer)
        self._writers.append(lambda: adapted)
        return self

    def build(self) -> Registry:
        """Build and return configured registry."""
        # Writers are opened at build time
        config = RegistryConfig(
            min_level=self._config.min_level,
            console_output=self._config.console_output,
            colored_output=self._config.colored_output,
            timestamp_format=self._config.timestamp_format,
            report_writer_errors=self._config.report_writer_errors,
        )
        return Registry(config, writers=[factory() for factory in self._writers])
