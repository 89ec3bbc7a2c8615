# logbridge/logger/log_backends/registry.py
"""
Process-wide registry of logger backends, keyed by type tag.

Registration is idempotent: the first backend registered under a tag
wins and later attempts are no-ops. Entries are never removed.
"""

import threading
from typing import Any, Dict, List, Optional
from .base import LoggerBackend


class BackendRegistry:
    """
    Thread-safe mapping of type tag -> LoggerBackend.

    Writers serialize on a lock so check-and-insert is atomic. Readers
    do not take the lock; a backend is only stored once fully built.
    """

    def __init__(self) -> None:
        self._backends: Dict[str, LoggerBackend] = {}
        self._lock = threading.Lock()

    def register(self, logger_type: str, backend: LoggerBackend) -> bool:
        """
        Register a backend under a type tag unless the tag is taken.

        Args:
            logger_type: Backend type tag (e.g., 'structlog', 'inner')
            backend: Constructed backend instance

        Returns:
            True if inserted, False if a backend already held the tag
        """
        with self._lock:
            if logger_type in self._backends:
                return False
            self._backends[logger_type] = backend
            return True

    def lookup(self, logger_type: str) -> Optional[LoggerBackend]:
        """Get the backend registered under a tag, or None."""
        return self._backends.get(logger_type)

    def registered_types(self) -> List[str]:
        return sorted(self._backends)

    def backends(self) -> List[LoggerBackend]:
        return list(self._backends.values())

    def get_all_metrics(self) -> Dict[str, Any]:
        """
        Get metrics from all registered backends.

        Returns:
            Dictionary mapping type tags to their metrics
        """
        return {tag: backend.get_metrics() for tag, backend in list(self._backends.items())}

    def reset(self) -> None:
        """Drop every entry. FOR TESTING ONLY."""
        with self._lock:
            self._backends = {}

    def __contains__(self, logger_type: object) -> bool:
        return logger_type in self._backends

    def __len__(self) -> int:
        return len(self._backends)


# Global registry used by the module-level logger API
backend_registry = BackendRegistry()


__all__ = ["BackendRegistry", "backend_registry"]
