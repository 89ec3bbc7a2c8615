# logbridge/__init__.py
"""
logbridge: backend-agnostic loggers with process-wide backend selection.

Usage:
    from logbridge import initialize_logging, get_logger

    initialize_logging()
    logger = get_logger(__name__)
    logger.info("Broker started", port=10911)
"""

__version__ = "1.0.0"

from .api_error import AppError, ConfigurationError, LoggerInitError
from .logger import (
    DEFAULT_LOGGER,
    LOGGER_INNER,
    LOGGER_STRUCTLOG,
    BackendRegistry,
    InternalLogger,
    LoggerBackend,
    backend_registry,
    get_current_backend_type,
    get_logger,
    get_logging_config,
    get_preferred_backend,
    initialize_backends,
    initialize_logging,
    set_preferred_backend,
    shutdown_backends,
)

__all__ = [
    "AppError",
    "ConfigurationError",
    "LoggerInitError",
    "DEFAULT_LOGGER",
    "LOGGER_INNER",
    "LOGGER_STRUCTLOG",
    "BackendRegistry",
    "InternalLogger",
    "LoggerBackend",
    "backend_registry",
    "get_current_backend_type",
    "get_logger",
    "get_logging_config",
    "get_preferred_backend",
    "initialize_backends",
    "initialize_logging",
    "set_preferred_backend",
    "shutdown_backends",
]
