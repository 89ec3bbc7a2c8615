# logbridge/logger/log_backends/inner_backend.py
"""
Fallback logger backend on top of the standard library logging module.

Has no third-party requirements so it can always be constructed. Output
goes to a stream handler (stderr by default) under its own logger
hierarchy, which does not propagate to the root logger.
"""

import logging
import sys
import threading
from typing import Any, Dict, Optional, TextIO, Tuple

from logbridge.logger.internal_logger import InternalLogger
from .base import LoggerBackend, LOGGER_INNER

TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

_LEVELS = {
    "trace": TRACE_LEVEL,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_DEFAULT_FORMAT = "%(asctime)s %(levelname)-5s [%(threadName)s] %(name)s - %(message)s"


class InnerFormatter(logging.Formatter):
    """Plain text formatter that appends structured context, if any."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            pairs = " ".join(f"{key}={value!r}" for key, value in ctx.items())
            line = f"{line} | {pairs}"
        return line


class InnerLogger(InternalLogger):
    """InternalLogger backed by a stdlib logging.Logger."""

    def __init__(self, name: str, logger: logging.Logger) -> None:
        super().__init__(name, LOGGER_INNER)
        self._logger = logger

    def _log(
        self,
        level: str,
        msg: str,
        args: Tuple[Any, ...],
        exc_info: Any,
        context: Dict[str, Any],
    ) -> None:
        levelno = _LEVELS[level]
        if not self._logger.isEnabledFor(levelno):
            return
        self._logger.log(
            levelno,
            msg,
            *args,
            exc_info=exc_info,
            extra={"context": context} if context else None,
        )


class InnerBackend(LoggerBackend):
    """Always-available fallback backend."""

    def __init__(self, **config: Any):
        """
        Initialize inner backend.

        Args:
            **config: Optional configuration
                - log_level: Numeric level for the backend (default: INFO)
                - stream: Output stream (default: sys.stderr)
                - base_name: Root of the stdlib logger hierarchy (default: 'logbridge.inner')
                - fmt: logging format string
        """
        super().__init__(**config)

        self._base_name: str = config.get("base_name", "logbridge.inner")
        self._base = logging.getLogger(self._base_name)
        self._base.setLevel(int(config.get("log_level", logging.INFO)))
        self._base.propagate = False

        stream: Optional[TextIO] = config.get("stream")
        self._handler = logging.StreamHandler(stream or sys.stderr)
        self._handler.setFormatter(InnerFormatter(config.get("fmt", _DEFAULT_FORMAT)))
        self._base.addHandler(self._handler)

        self._loggers: Dict[str, InnerLogger] = {}
        self._lock = threading.Lock()

    @property
    def logger_type(self) -> str:
        return LOGGER_INNER

    def get_logger_instance(self, name: str) -> InternalLogger:
        """Get the cached logger for a name, creating it on first request."""
        cached = self._loggers.get(name)
        if cached is not None:
            return cached
        with self._lock:
            if name not in self._loggers:
                stdlib_logger = logging.getLogger(f"{self._base_name}.{name}")
                self._loggers[name] = InnerLogger(name, stdlib_logger)
            return self._loggers[name]

    def apply_config(self, **config: Any) -> None:
        """Update the backend level; handles already handed out follow it."""
        if "log_level" in config:
            self._base.setLevel(int(config["log_level"]))

    def get_metrics(self) -> Dict[str, Any]:
        return {
            "backend": self.logger_type,
            "loggers_created": len(self._loggers),
            "level": logging.getLevelName(self._base.level),
        }

    def shutdown(self) -> None:
        """Flush and detach this backend's handler."""
        self._handler.flush()
        self._base.removeHandler(self._handler)
        self._handler.close()


__all__ = ["InnerBackend", "InnerLogger", "InnerFormatter", "TRACE_LEVEL"]
