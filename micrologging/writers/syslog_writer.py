"""
System log writer

Delivers the undecorated message to the system log. The log facility
stamps and tags entries itself, so the timestamp, level label and logger
name of the decorated line are left out.
"""

import os
import sys
from typing import Dict, Optional

from micrologging.core.log_entry import LogEntry
from micrologging.core.log_level import LogLevel
from micrologging.writers.base_writer import BaseWriter

# Level -> facility method name
SYSLOG_METHODS: Dict[LogLevel, str] = {
    LogLevel.TRACE: "debug",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "err",
    LogLevel.FATAL: "crit",
}

DEFAULT_SYSLOG_METHOD = "info"


class SyslogFacility:
    """
    Severity-specific delivery to the local syslog daemon.

    Backed by the standard ``syslog`` module, which is only available on
    Unix platforms.
    """

    def __init__(
        self,
        ident: Optional[str] = None,
        facility: Optional[int] = None,
        logoption: Optional[int] = None,
    ):
        """
        Initialize syslog facility.

        Args:
            ident: Tag prepended to every message (default: program name)
            facility: syslog facility code (default: LOG_USER)
            logoption: openlog options (default: LOG_PID)
        """
        import syslog

        self._syslog = syslog
        self.ident = ident or os.path.basename(sys.argv[0]) or "python"
        syslog.openlog(
            ident=self.ident,
            logoption=syslog.LOG_PID if logoption is None else logoption,
            facility=syslog.LOG_USER if facility is None else facility,
        )

    def _emit(self, priority: int, message: str) -> None:
        self._syslog.syslog(priority, message)

    def debug(self, message: str) -> None:
        self._emit(self._syslog.LOG_DEBUG, message)

    def info(self, message: str) -> None:
        self._emit(self._syslog.LOG_INFO, message)

    def warning(self, message: str) -> None:
        self._emit(self._syslog.LOG_WARNING, message)

    def err(self, message: str) -> None:
        self._emit(self._syslog.LOG_ERR, message)

    def crit(self, message: str) -> None:
        self._emit(self._syslog.LOG_CRIT, message)

    def close(self) -> None:
        self._syslog.closelog()


class SyslogWriter(BaseWriter):
    """Route entries to the severity-appropriate system log method."""

    def __init__(self, facility=None, ident: Optional[str] = None):
        """
        Initialize syslog writer.

        Args:
            facility: Object exposing ``debug``, ``info``, ``warning``,
                ``err`` and ``crit`` methods that each take a message
                (default: a new SyslogFacility)
            ident: Tag for the default SyslogFacility
        """
        self.facility = facility if facility is not None else SyslogFacility(ident=ident)

    @staticmethod
    def method_name(level: int) -> str:
        """Facility method used for a level; unknown levels map to info."""
        return SYSLOG_METHODS.get(level, DEFAULT_SYSLOG_METHOD)

    def write(self, entry: LogEntry) -> None:
        """Deliver the entry's undecorated message."""
        getattr(self.facility, self.method_name(entry.level))(entry.message)

    def close(self) -> None:
        close = getattr(self.facility, "close", None)
        if close is not None:
            close()

    def __repr__(self) -> str:
        return f"SyslogWriter(facility={self.facility!r})"
