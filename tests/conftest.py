"""Shared fixtures and fake backends for logbridge tests."""

import io
import itertools
from typing import Any, Dict, List, Tuple

import pytest

from logbridge.config.structlog_config import reset_structlog_config
from logbridge.logger.initialize import reset_logging_config
from logbridge.logger.internal_logger import InternalLogger
from logbridge.logger.log_backends.base import LoggerBackend
from logbridge.logger.log_backends.bootstrap import reset_bootstrap, shutdown_backends
from logbridge.logger.log_backends.registry import BackendRegistry, backend_registry
from logbridge.logger.logger_factory import set_preferred_backend

_base_names = itertools.count()


class RecordingLogger(InternalLogger):
    """Logger that keeps every event in memory."""

    def __init__(self, name: str, logger_type: str) -> None:
        super().__init__(name, logger_type)
        self.events: List[Tuple[str, str, Tuple[Any, ...], Any, Dict[str, Any]]] = []

    def _log(self, level, msg, args, exc_info, context):
        self.events.append((level, msg, args, exc_info, context))


class FakeBackend(LoggerBackend):
    """Backend with a configurable tag that produces RecordingLoggers."""

    def __init__(self, logger_type: str, **config: Any):
        super().__init__(**config)
        self._logger_type = logger_type
        self.produced: List[RecordingLogger] = []
        self.shutdown_calls = 0

    @property
    def logger_type(self) -> str:
        return self._logger_type

    def get_logger_instance(self, name: str) -> InternalLogger:
        handle = RecordingLogger(name, self._logger_type)
        self.produced.append(handle)
        return handle

    def get_metrics(self) -> Dict[str, Any]:
        return {"backend": self._logger_type, "loggers_created": len(self.produced)}

    def shutdown(self) -> None:
        self.shutdown_calls += 1


class BrokenBackend(FakeBackend):
    """Backend whose construction always fails."""

    def __init__(self, logger_type: str = "structlog", **config: Any):
        raise ImportError(f"backend library for '{logger_type}' is not installed")


@pytest.fixture(autouse=True)
def reset_process_state():
    """Every test starts with an empty process-wide registry."""
    backend_registry.reset()
    reset_bootstrap()
    set_preferred_backend(None)
    reset_structlog_config()
    reset_logging_config()
    yield
    shutdown_backends()
    backend_registry.reset()
    reset_bootstrap()
    set_preferred_backend(None)
    reset_structlog_config()
    reset_logging_config()


@pytest.fixture
def registry() -> BackendRegistry:
    return BackendRegistry()


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def base_name() -> str:
    """Unique stdlib logger root so inner backends do not share handlers."""
    return f"logbridge_test.inner{next(_base_names)}"
