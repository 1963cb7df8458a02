"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

micrologging - A minimal leveled logging facility
A default registry, named child loggers and console/file/syslog writers
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from micrologging.core.log_level import LogLevel, UnknownLevelError
from micrologging.core.log_entry import LogEntry
from micrologging.core.registry_config import RegistryConfig
from micrologging.core.registry import Registry, get_registry, set_registry
from micrologging.core.registry_builder import RegistryBuilder
from micrologging.core.logger import Logger, get_logger
from micrologging.core.root import (
    add_output,
    set_level,
    get_level,
    log,
    trace,
    debug,
    info,
    warn,
    error,
    fatal,
)

# Import submodules (not all classes by default)
from micrologging import formatters
from micrologging import writers

__all__ = [
    "LogLevel",
    "UnknownLevelError",
    "LogEntry",
    "RegistryConfig",
    "Registry",
    "RegistryBuilder",
    "Logger",
    "get_logger",
    "get_registry",
    "set_registry",
    "add_output",
    "set_level",
    "get_level",
    "log",
    "trace",
    "debug",
    "info",
    "warn",
    "error",
    "fatal",
    "formatters",
    "writers",
]
