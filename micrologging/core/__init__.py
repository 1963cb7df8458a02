"""
Core module for micrologging

This module contains the fundamental classes:
- LogLevel: Log level enumeration
- LogEntry: Per-message record handed to writers
- RegistryConfig: Configuration management
- Registry: Level threshold, writer list and dispatch
- RegistryBuilder: Builder pattern for registry construction
- Logger: Named logger handle
"""

from micrologging.core.log_level import LogLevel, UnknownLevelError
from micrologging.core.log_entry import LogEntry
from micrologging.core.registry_config import RegistryConfig
from micrologging.core.registry import Registry, get_registry, set_registry
from micrologging.core.registry_builder import RegistryBuilder
from micrologging.core.logger import Logger, get_logger

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
]
