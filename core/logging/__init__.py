"""Structured logging: JSON file output, colored console, bound context."""
from .config import bootstrap_logging, shutdown_logging
from .context import bind, unbind, log_context
from .logger import LogLevel, StructuredLogger, get_logger

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "bind",
    "unbind",
    "log_context",
    "LogLevel",
    "StructuredLogger",
    "get_logger",
]
