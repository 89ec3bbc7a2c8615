# logbridge/logger/logger_factory.py
"""
Logger facade.

Usage:
    from logbridge import get_logger, set_preferred_backend

    logger = get_logger(__name__)
    logger = get_logger(MyConsumer)      # named 'my.module.MyConsumer'

    set_preferred_backend("inner")       # opt into a specific backend
"""

from typing import Optional, Union
from logbridge.logger.internal_logger import InternalLogger
from logbridge.logger.log_backends.base import LoggerBackend
from logbridge.logger.log_backends.bootstrap import ensure_backends_initialized
from logbridge.logger.log_backends.registry import BackendRegistry, backend_registry
from .selector import BackendSelector

NameOrClass = Union[str, type]


def logger_name_for(name_or_class: NameOrClass) -> str:
    """
    Derive a logger name.

    Strings are used unchanged; classes become 'module.QualifiedName'.
    """
    if isinstance(name_or_class, str):
        return name_or_class
    if isinstance(name_or_class, type):
        return f"{name_or_class.__module__}.{name_or_class.__qualname__}"
    raise TypeError(
        f"Logger name must be a str or a class, got {type(name_or_class).__name__}"
    )


class LoggerFactory:
    """Hands out loggers from whichever backend the selector resolves."""

    def __init__(self, selector: BackendSelector) -> None:
        self._selector = selector

    @property
    def selector(self) -> BackendSelector:
        return self._selector

    def get_logger(self, name_or_class: NameOrClass) -> InternalLogger:
        """
        Get a logger for a name or class.

        Handles are not cached here; two calls may return different
        objects bound to the same backend.

        Raises:
            LoggerInitError: If no backend can be resolved
            TypeError: If name_or_class is neither a str nor a class
        """
        name = logger_name_for(name_or_class)
        return self._selector.resolve().get_logger_instance(name)

    def set_preferred_backend(self, logger_type: Optional[str]) -> None:
        self._selector.preferred_type = logger_type

    def get_preferred_backend(self) -> Optional[str]:
        return self._selector.preferred_type

    def current_backend(self) -> LoggerBackend:
        return self._selector.resolve()


def create_logger_factory(registry: BackendRegistry) -> LoggerFactory:
    """Build a facade with the standard default/fallback tiers."""
    return LoggerFactory(BackendSelector(registry))


# Facade over the process-wide registry
_default_factory = create_logger_factory(backend_registry)


def get_logger(name_or_class: NameOrClass) -> InternalLogger:
    """
    Get a logger from the process-wide registry.

    Runs backend bootstrap on first use if initialize_logging() has not.

    Args:
        name_or_class: Logger name, or a class whose qualified name is used

    Returns:
        InternalLogger bound to the resolved backend

    Raises:
        LoggerInitError: If no backend could be constructed at all
    """
    ensure_backends_initialized()
    return _default_factory.get_logger(name_or_class)


def set_preferred_backend(logger_type: Optional[str]) -> None:
    """
    Set the backend type to prefer for loggers created from now on.

    Unknown types are ignored at resolution time. None clears the preference.
    """
    _default_factory.set_preferred_backend(logger_type)


def get_preferred_backend() -> Optional[str]:
    return _default_factory.get_preferred_backend()


def get_current_backend_type() -> str:
    """Type tag of the backend get_logger() would use right now."""
    ensure_backends_initialized()
    return _default_factory.current_backend().logger_type


__all__ = [
    "LoggerFactory",
    "create_logger_factory",
    "logger_name_for",
    "get_logger",
    "set_preferred_backend",
    "get_preferred_backend",
    "get_current_backend_type",
]
