# logbridge/logger/log_backends/__init__.py
"""
Logger backends.

Shipped backends, in resolution order when nothing is preferred:
    structlog   # default
    inner       # stdlib logging fallback, always constructible

Select one explicitly with set_preferred_backend() or the LOG_BACKEND
environment variable read by initialize_logging().
"""

from .base import DEFAULT_LOGGER, LOGGER_INNER, LOGGER_STRUCTLOG, LoggerBackend
from .registry import BackendRegistry, backend_registry
from .bootstrap import (
    BackendInitResult,
    KNOWN_BACKENDS,
    backends_initialized,
    ensure_backends_initialized,
    initialize_backends,
    shutdown_backends,
)
from .inner_backend import InnerBackend, InnerLogger
from .structlog_backend import StructlogBackend, StructlogLogger

__all__ = [
    "LoggerBackend",
    "DEFAULT_LOGGER",
    "LOGGER_INNER",
    "LOGGER_STRUCTLOG",
    "BackendRegistry",
    "backend_registry",
    "BackendInitResult",
    "KNOWN_BACKENDS",
    "backends_initialized",
    "ensure_backends_initialized",
    "initialize_backends",
    "shutdown_backends",
    "InnerBackend",
    "InnerLogger",
    "StructlogBackend",
    "StructlogLogger",
]
