"""
Log formatters module

Builds the decorated line and interpolates messages.
"""

from micrologging.formatters.line_formatter import (
    DEFAULT_TIMESTAMP_FORMAT,
    LineFormatter,
    render_message,
)

__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "LineFormatter",
    "render_message",
]
