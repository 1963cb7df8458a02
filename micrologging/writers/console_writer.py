"""Console writer with optional ANSI colors"""

import sys

from micrologging.core.log_entry import LogEntry
from micrologging.core.log_level import LogLevel
from micrologging.writers.stream_writer import StreamWriter


class ConsoleWriter(StreamWriter):
    """Write logs to the console, standard output by default."""

    def __init__(self, colored: bool = False, stream=None):
        """
        Initialize console writer.

        Args:
            colored: Wrap lines in ANSI color codes
            stream: Output stream (default: sys.stdout, looked up on
                every write so redirections are honored)
        """
        super().__init__(stream)
        self.colored = colored

    def _resolve_stream(self):
        return self._stream if self._stream is not None else sys.stdout

    def format(self, entry: LogEntry) -> str:
        msg = entry.line
        if not self.colored:
            return msg
        try:
            level = LogLevel(entry.level)
        except ValueError:
            return msg
        return f"{level.color_code}{msg}{level.reset_code}"
