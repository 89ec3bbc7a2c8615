# logbridge/config/structlog_config.py
"""
Structlog configuration module.
Configured once per process, either explicitly at application startup or
implicitly with defaults when the structlog backend is built first. An
implicit configuration is replaced by the first explicit one.
"""
import sys
import os
import threading
from typing import Any, List, Optional
import structlog


class _StructlogState:
    """
    Thread-safe, process-safe singleton for structlog configuration state.

    This prevents race conditions during initialization and handles
    forked worker processes.
    """

    _instance: Optional["_StructlogState"] = None
    _lock = threading.Lock()

    _initialized: bool
    _implicit: bool
    _log_level: Optional[int]
    _process_id: Optional[int]
    _generation: int

    def __new__(cls) -> "_StructlogState":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:  # Double-check locking
                    instance = super().__new__(cls)
                    instance._initialized = False
                    instance._implicit = False
                    instance._log_level = None
                    instance._process_id = None  # Track which process configured
                    instance._generation = 0
                    cls._instance = instance
        return cls._instance

    @property
    def is_configured(self) -> bool:
        """Check if configured in the CURRENT process."""
        current_pid = os.getpid()
        return self._initialized and self._process_id == current_pid

    @property
    def is_implicit(self) -> bool:
        """Configured with defaults rather than by the application."""
        return self.is_configured and self._implicit

    @property
    def log_level(self) -> Optional[int]:
        return self._log_level

    @property
    def generation(self) -> int:
        """Bumped on every (re)configuration."""
        return self._generation

    def mark_configured(self, log_level: int, implicit: bool = False) -> None:
        """Mark structlog as configured with given level in this process."""
        with self._lock:
            current_pid = os.getpid()

            if self._initialized and self._process_id == current_pid and not self._implicit:
                if self._log_level == log_level:
                    return
                raise RuntimeError(
                    f"structlog already configured in this process. "
                    f"Current level: {self._log_level}, attempted: {log_level}"
                )

            self._log_level = log_level
            self._process_id = current_pid
            self._initialized = True
            self._implicit = implicit
            self._generation += 1

    def reset(self) -> None:
        """Reset state. FOR TESTING ONLY."""
        with self._lock:
            self._initialized = False
            self._implicit = False
            self._log_level = None
            self._process_id = None
            self._generation += 1


_state = _StructlogState()


def _build_renderer(json_logs: bool) -> Any:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.RichTracebackFormatter(
            show_locals=False,
            width=None,
        ),
    )


def configure_structlog(log_level: int, json_logs: bool = False, implicit: bool = False) -> None:
    """
    Configure structlog with the specified log level.

    Safe to call in forked processes: each process configures structlog
    independently.

    Args:
        log_level: Numeric logging level (e.g., logging.INFO)
        json_logs: Render events as JSON lines instead of console output
        implicit: Default configuration applied by a backend. Skipped if
            structlog is already configured, and replaced by the next
            explicit call.

    Raises:
        RuntimeError: If already configured explicitly in the same process
            with a different level
    """
    if _state.is_configured:
        if implicit:
            return
        if not _state.is_implicit:
            if _state.log_level == log_level:
                return
            raise RuntimeError(
                f"structlog already configured in this process. "
                f"Current level: {_state.log_level}, attempted: {log_level}"
            )

    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
    ]
    if json_logs:
        processors.append(structlog.processors.format_exc_info)
    processors.append(_build_renderer(json_logs))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    _state.mark_configured(log_level, implicit=implicit)


def get_structlog_logger(name: str = "app") -> Any:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name

    Returns:
        Configured structlog logger

    Raises:
        RuntimeError: If structlog hasn't been configured yet in this process
    """
    if not _state.is_configured:
        raise RuntimeError(
            "structlog not configured. "
            "Call configure_structlog() at application startup."
        )
    return structlog.get_logger(name)


def is_configured() -> bool:
    """Check if structlog has been configured in this process."""
    return _state.is_configured


def configuration_generation() -> int:
    """Changes whenever structlog is (re)configured in this process."""
    return _state.generation


def reset_structlog_config() -> None:
    """Forget the configuration of this process. FOR TESTING ONLY."""
    _state.reset()
    structlog.reset_defaults()


__all__ = [
    "configure_structlog",
    "configuration_generation",
    "get_structlog_logger",
    "is_configured",
    "reset_structlog_config",
]
