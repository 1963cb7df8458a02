"""
Line formatter

Produces the decorated text line written to generic writers:

    (2024-01-31 12:34:56.789) [INFO ] (net) connect to host1
"""

from collections.abc import Mapping
from typing import Any, Tuple

from micrologging.core.log_entry import LogEntry
from micrologging.core.log_level import level_label

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def render_message(fmt: Any, args: Tuple[Any, ...]) -> str:
    """
    Interpolate printf-style arguments into a format string.

    Without arguments the format string is returned verbatim, so literal
    ``%`` characters survive. A single mapping argument is used for
    ``%(key)s`` placeholders. Mismatched arguments never raise; the
    problem is rendered inline instead.

    Args:
        fmt: Format string
        args: Positional arguments

    Returns:
        Rendered message
    """
    fmt = str(fmt)
    if not args:
        return fmt

    values = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]

    try:
        return fmt % values
    except Exception as e:
        return f"{fmt} [FORMAT ERROR: {type(e).__name__}: {e}] {_describe_args(args)}"


def _describe_args(args: Tuple[Any, ...]) -> str:
    """repr of the arguments, degrading to type names when a repr raises."""
    parts = []
    for arg in args:
        try:
            parts.append(repr(arg))
        except Exception:
            parts.append(f"<{type(arg).__name__}>")
    return "(" + ", ".join(parts) + ")"


class LineFormatter:
    """Format log entries as timestamped, leveled, optionally named lines."""

    def __init__(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT):
        """
        Initialize line formatter.

        Args:
            timestamp_format: strftime format for timestamps. When it
                ends in ``%f`` the microseconds are cut to milliseconds.
        """
        self.timestamp_format = timestamp_format

    def format_timestamp(self, entry: LogEntry) -> str:
        stamp = entry.timestamp.strftime(self.timestamp_format)
        if self.timestamp_format.endswith("%f"):
            stamp = stamp[:-3]
        return stamp

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry into a single line.

        Args:
            entry: Log entry to format

        Returns:
            Decorated line with surrounding whitespace stripped
        """
        parts = [f"({self.format_timestamp(entry)}) [{level_label(entry.level)}] "]
        if entry.logger_name:
            parts.append(f"({entry.logger_name}) ")
        parts.append(entry.message)
        return "".join(parts).strip()

    def __call__(self, entry: LogEntry) -> str:
        return self.format(entry)

    def __repr__(self) -> str:
        return f"LineFormatter(timestamp_format='{self.timestamp_format}')"
