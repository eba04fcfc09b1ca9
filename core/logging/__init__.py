"""Structured logging: contextual fields, JSON file output, optional console."""
from .config import bootstrap_logging, shutdown_logging
from .context import bind, context, get_context, unbind
from .logger import StructuredLogger, get_logger, traceable

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "bind",
    "context",
    "get_context",
    "unbind",
    "StructuredLogger",
    "get_logger",
    "traceable",
]
