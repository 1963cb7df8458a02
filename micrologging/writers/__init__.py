"""Writers module - Log output handlers"""

from micrologging.writers.base_writer import BaseWriter
from micrologging.writers.stream_writer import StreamWriter, as_writer
from micrologging.writers.console_writer import ConsoleWriter
from micrologging.writers.file_writer import FileWriter
from micrologging.writers.syslog_writer import SyslogFacility, SyslogWriter

__all__ = [
    "BaseWriter",
    "StreamWriter",
    "ConsoleWriter",
    "FileWriter",
    "SyslogFacility",
    "SyslogWriter",
    "as_writer",
]
