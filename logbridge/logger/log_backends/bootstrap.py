# logbridge/logger/log_backends/bootstrap.py
"""
One-time construction of the known logger backends.

Each backend is attempted in isolation. A backend that fails to build
(missing library, bad configuration) is reported to stderr and left out
of the registry; it never stops the others or escapes to the caller.
Failures are not routed through logbridge itself.
"""

import sys
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
from .base import LoggerBackend, LOGGER_INNER, LOGGER_STRUCTLOG
from .registry import BackendRegistry, backend_registry

# Called with the backend config keyword arguments given to initialize_backends()
BackendFactory = Callable[..., LoggerBackend]


@dataclass(frozen=True)
class BackendInitResult:
    """Outcome of one backend construction attempt."""

    logger_type: str
    backend: Optional[LoggerBackend] = None
    error: Optional[BaseException] = None
    registered: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and self.backend is not None


def _build_structlog_backend(**config: Any) -> LoggerBackend:
    # Imported here so a broken structlog install only removes this backend
    from .structlog_backend import StructlogBackend

    return StructlogBackend(**config)


def _build_inner_backend(**config: Any) -> LoggerBackend:
    from .inner_backend import InnerBackend

    return InnerBackend(**config)


# Construction order; the fallback goes last
KNOWN_BACKENDS: List[Tuple[str, BackendFactory]] = [
    (LOGGER_STRUCTLOG, _build_structlog_backend),
    (LOGGER_INNER, _build_inner_backend),
]


def _attempt(
    logger_type: str,
    factory: BackendFactory,
    registry: BackendRegistry,
    config: Dict[str, Any],
) -> BackendInitResult:
    try:
        backend = factory(**config)
    except Exception as e:
        print(
            f"Failed to initialize logger backend '{logger_type}': {e!r}",
            file=sys.stderr,
        )
        return BackendInitResult(logger_type=logger_type, error=e)

    registered = backend.do_register(registry)
    if not registered and registry.lookup(backend.logger_type) is not backend:
        # Tag already taken; release whatever this instance acquired
        try:
            backend.shutdown()
        except Exception as e:
            print(
                f"Error shutting down unregistered logger backend '{logger_type}': {e!r}",
                file=sys.stderr,
            )
    return BackendInitResult(
        logger_type=backend.logger_type,
        backend=backend,
        registered=registered,
    )


def initialize_backends(
    registry: Optional[BackendRegistry] = None,
    factories: Optional[Sequence[Tuple[str, BackendFactory]]] = None,
    **backend_config: Any,
) -> List[BackendInitResult]:
    """
    Construct and register every known backend once.

    Args:
        registry: Registry to populate. Defaults to the process-wide registry.
        factories: (type tag, factory) pairs. Defaults to KNOWN_BACKENDS.
        **backend_config: Keyword arguments passed to every factory
            (e.g. log_level, json_logs)

    Returns:
        One BackendInitResult per attempted backend, in attempt order
    """
    if registry is None:
        registry = backend_registry
    if factories is None:
        factories = KNOWN_BACKENDS

    return [
        _attempt(logger_type, factory, registry, backend_config)
        for logger_type, factory in factories
    ]


class _BootstrapState:
    """Init-once guard for the process-wide registry."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._initialized = False
        self._results: List[BackendInitResult] = []

    @property
    def initialized(self) -> bool:
        return self._initialized

    def ensure(self, **backend_config: Any) -> List[BackendInitResult]:
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    self._results = initialize_backends(**backend_config)
                    self._initialized = True
        return list(self._results)

    def reset(self) -> None:
        """Allow bootstrap to run again. FOR TESTING ONLY."""
        with self._lock:
            self._initialized = False
            self._results = []


_state = _BootstrapState()


def ensure_backends_initialized(**backend_config: Any) -> List[BackendInitResult]:
    """
    Run bootstrap against the process-wide registry if it has not run yet.

    Args:
        **backend_config: Passed to the backend factories on the first run only

    Returns:
        Results of the single bootstrap run
    """
    return _state.ensure(**backend_config)


def backends_initialized() -> bool:
    return _state.initialized


def reset_bootstrap() -> None:
    """Forget that bootstrap ran. FOR TESTING ONLY."""
    _state.reset()


def shutdown_backends(registry: Optional[BackendRegistry] = None) -> None:
    """
    Shutdown all registered backends.

    Backends stay registered; this is for process teardown only.
    """
    if registry is None:
        registry = backend_registry

    for backend in registry.backends():
        try:
            backend.shutdown()
        except Exception as e:
            print(
                f"Error shutting down logger backend '{backend.logger_type}': {e!r}",
                file=sys.stderr,
            )


__all__ = [
    "BackendFactory",
    "BackendInitResult",
    "KNOWN_BACKENDS",
    "initialize_backends",
    "ensure_backends_initialized",
    "backends_initialized",
    "reset_bootstrap",
    "shutdown_backends",
]
