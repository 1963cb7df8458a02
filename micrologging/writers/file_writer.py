"""File writer"""

from pathlib import Path

from micrologging.writers.stream_writer import StreamWriter


class FileWriter(StreamWriter):
    """Write logs to file."""

    def __init__(self, filepath: str, mode: str = "a", encoding: str = "utf-8"):
        """
        Initialize file writer.

        Args:
            filepath: Path to log file
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
        """
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        super().__init__(self._open())

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        return open(self.filepath, self.mode, encoding=self.encoding)

    def close(self) -> None:
        """Close file."""
        with self._lock:
            if self._stream is not None:
                self._stream.close()
                self._stream = None

    def __repr__(self) -> str:
        return f"FileWriter(filepath='{self.filepath}')"
