"""
Telemetry module for errcode-python.

Provides structured logging.
"""

from errcode_python.telemetry.logger import (
    ErrcodeLogger,
    JsonFormatter,
    LogLevel,
    TextFormatter,
    get_logger,
)

__all__ = [
    "ErrcodeLogger",
    "JsonFormatter",
    "LogLevel",
    "TextFormatter",
    "get_logger",
]
