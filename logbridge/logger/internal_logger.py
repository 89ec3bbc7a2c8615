# logbridge/logger/internal_logger.py
"""
Backend-agnostic logger interface.

Usage:
    from logbridge import get_logger

    logger = get_logger(__name__)
    logger.info("Consumer started", group="orders")
    logger.warn("Retrying %s", topic)
    logger.error("Send failed", exc_info=exc)
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

TRACE = "trace"
DEBUG = "debug"
INFO = "info"
WARNING = "warning"
ERROR = "error"


class InternalLogger(ABC):
    """
    Logger handle returned by logbridge.

    Bound at creation to a name and the type tag of the backend that
    produced it; neither changes afterwards.
    """

    def __init__(self, name: str, logger_type: str) -> None:
        self._name = name
        self._logger_type = logger_type

    @property
    def name(self) -> str:
        return self._name

    @property
    def logger_type(self) -> str:
        """Type tag of the producing backend."""
        return self._logger_type

    @abstractmethod
    def _log(
        self,
        level: str,
        msg: str,
        args: Tuple[Any, ...],
        exc_info: Any,
        context: Dict[str, Any],
    ) -> None:
        """
        Emit one event through the backend.

        Args:
            level: One of trace, debug, info, warning, error
            msg: Message, %-style when args are given
            args: Positional message arguments
            exc_info: Exception, exc_info tuple, True, or None
            context: Structured key/value pairs
        """
        pass

    def trace(self, msg: str, *args: Any, exc_info: Any = None, **kwargs: Any) -> None:
        self._log(TRACE, msg, args, exc_info, kwargs)

    def debug(self, msg: str, *args: Any, exc_info: Any = None, **kwargs: Any) -> None:
        self._log(DEBUG, msg, args, exc_info, kwargs)

    def info(self, msg: str, *args: Any, exc_info: Any = None, **kwargs: Any) -> None:
        self._log(INFO, msg, args, exc_info, kwargs)

    def warning(self, msg: str, *args: Any, exc_info: Any = None, **kwargs: Any) -> None:
        self._log(WARNING, msg, args, exc_info, kwargs)

    warn = warning

    def error(self, msg: str, *args: Any, exc_info: Any = None, **kwargs: Any) -> None:
        self._log(ERROR, msg, args, exc_info, kwargs)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name!r} ({self._logger_type})>"


__all__ = ["InternalLogger", "TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]
