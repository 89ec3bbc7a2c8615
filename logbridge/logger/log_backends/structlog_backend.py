# logbridge/logger/log_backends/structlog_backend.py
"""Logger backend built on structlog."""

import logging
import threading
from typing import Any, Dict, Optional, Tuple
from structlog.typing import FilteringBoundLogger

from logbridge.config.structlog_config import (
    configuration_generation,
    configure_structlog,
    get_structlog_logger,
    is_configured,
)
from logbridge.logger.internal_logger import TRACE, InternalLogger
from .base import LoggerBackend, LOGGER_STRUCTLOG


class StructlogLogger(InternalLogger):
    """
    InternalLogger that forwards to a structlog BoundLogger.

    structlog has no trace level, so trace events go out at debug with
    trace=True in the event dict. structlog keeps the message under the
    'event' key; a context value passed as event= is renamed to 'event_value'.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name, LOGGER_STRUCTLOG)
        self._logger_instance: Optional[FilteringBoundLogger] = None
        self._generation = -1

    @property
    def _logger(self) -> FilteringBoundLogger:
        """
        Lazy-load logger instance.
        Rebound after structlog is reconfigured, so loggers created at
        import time pick up the configuration applied at startup.
        """
        generation = configuration_generation()
        if self._logger_instance is None or self._generation != generation:
            self._logger_instance = get_structlog_logger(self.name).bind(logger=self.name)
            self._generation = generation
        return self._logger_instance

    def _log(
        self,
        level: str,
        msg: str,
        args: Tuple[Any, ...],
        exc_info: Any,
        context: Dict[str, Any],
    ) -> None:
        if args:
            msg = msg % args
        if "event" in context:
            context["event_value"] = context.pop("event")
        if exc_info is not None:
            context["exc_info"] = exc_info
        if level == TRACE:
            context["trace"] = True
            level = "debug"
        getattr(self._logger, level)(msg, **context)


class StructlogBackend(LoggerBackend):
    """
    Default backend.

    Applies a default structlog configuration on construction when nothing
    in this process has configured structlog yet. That default gives way to
    the first explicit configure_structlog() call.
    """

    def __init__(self, **config: Any):
        """
        Initialize structlog backend.

        Args:
            **config: Optional configuration
                - log_level: Level used if structlog is not configured yet (default: INFO)
                - json_logs: Render JSON if structlog is not configured yet (default: False)
        """
        super().__init__(**config)

        if not is_configured():
            configure_structlog(
                int(config.get("log_level", logging.INFO)),
                json_logs=bool(config.get("json_logs", False)),
                implicit=True,
            )

        self._lock = threading.Lock()
        self._loggers_created = 0

    @property
    def logger_type(self) -> str:
        return LOGGER_STRUCTLOG

    def get_logger_instance(self, name: str) -> InternalLogger:
        with self._lock:
            self._loggers_created += 1
        return StructlogLogger(name)

    def get_metrics(self) -> Dict[str, Any]:
        return {
            "backend": self.logger_type,
            "loggers_created": self._loggers_created,
            "configured": is_configured(),
        }


__all__ = ["StructlogBackend", "StructlogLogger"]
