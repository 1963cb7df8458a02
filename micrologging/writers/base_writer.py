"""
Base writer interface
"""

from abc import ABC, abstractmethod

from micrologging.core.log_entry import LogEntry


class BaseWriter(ABC):
    """
    Abstract base class for log writers.

    The registry hands every writer the same entry; each writer decides
    whether it needs the decorated ``entry.line`` or the bare
    ``entry.message``.
    """

    @abstractmethod
    def write(self, entry: LogEntry) -> None:
        """
        Deliver a log entry to the destination.

        Args:
            entry: The log entry to write
        """
        pass

    def flush(self) -> None:
        """Flush buffered output, if any."""

    def close(self) -> None:
        """Release resources held by the writer."""
