"""
Registry configuration management
"""

from dataclasses import dataclass

from micrologging.core.log_level import DEFAULT_LEVEL, LogLevel, to_level
from micrologging.formatters.line_formatter import DEFAULT_TIMESTAMP_FORMAT


@dataclass
class RegistryConfig:
    """
    Registry configuration.

    ``min_level`` may be given as a level name; it is parsed on
    construction.
    """

    # Filtering
    min_level: LogLevel = DEFAULT_LEVEL

    # Console settings
    console_output: bool = True
    colored_output: bool = False

    # Format settings
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT

    # Print writer failures to stderr instead of only counting them
    report_writer_errors: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.min_level = to_level(self.min_level)
        if not self.timestamp_format:
            raise ValueError("timestamp_format cannot be empty")

    @classmethod
    def default(cls) -> "RegistryConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "RegistryConfig":
        """Create configuration for debugging."""
        return cls(
            min_level=LogLevel.DEBUG,
            colored_output=True,
            report_writer_errors=True,
        )

    @classmethod
    def production_config(cls) -> "RegistryConfig":
        """Create configuration for production."""
        return cls(
            min_level=LogLevel.WARN,
            console_output=False,
        )
