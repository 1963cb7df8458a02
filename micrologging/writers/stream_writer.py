"""Stream writer for any object with a write() method"""

import threading
from typing import Any

from micrologging.core.log_entry import LogEntry
from micrologging.writers.base_writer import BaseWriter


class StreamWriter(BaseWriter):
    """Write decorated lines to a text stream."""

    def __init__(self, stream):
        """
        Initialize stream writer.

        Args:
            stream: Object with ``write(str)``; ``flush()`` is optional
        """
        self._stream = stream
        self._lock = threading.Lock()
        if not callable(getattr(self._resolve_stream(), "write", None)):
            raise TypeError("stream must provide a write() method")

    def _resolve_stream(self):
        return self._stream

    @property
    def stream(self):
        return self._resolve_stream()

    def format(self, entry: LogEntry) -> str:
        return entry.line

    def write(self, entry: LogEntry) -> None:
        """Write the entry's line followed by a newline."""
        msg = self.format(entry) + "\n"
        with self._lock:
            stream = self.stream
            if stream is None:
                return
            stream.write(msg)
            flush = getattr(stream, "flush", None)
            if flush is not None:
                flush()

    def flush(self) -> None:
        """Flush stream."""
        with self._lock:
            flush = getattr(self.stream, "flush", None)
            if flush is not None:
                flush()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(stream={self.stream!r})"


def as_writer(output: Any) -> BaseWriter:
    """
    Adapt an output to the writer interface.

    Writers are returned unchanged; plain text streams such as
    ``sys.stderr``, open files or ``io.StringIO`` are wrapped in a
    StreamWriter.

    Raises:
        TypeError: If output is neither a writer nor a stream
    """
    if isinstance(output, BaseWriter):
        return output
    return StreamWriter(output)
