# logbridge/logger/selector.py
"""
Backend resolution.

Order, recomputed on every call:
    1. explicitly preferred type, if registered
    2. default type, if registered
    3. fallback type, if registered
    4. LoggerInitError
"""

from typing import Optional
from logbridge.api_error import LoggerInitError
from logbridge.logger.log_backends.base import DEFAULT_LOGGER, LOGGER_INNER, LoggerBackend
from logbridge.logger.log_backends.registry import BackendRegistry


class BackendSelector:
    """Picks the active backend out of a registry."""

    def __init__(
        self,
        registry: BackendRegistry,
        default_type: str = DEFAULT_LOGGER,
        fallback_type: str = LOGGER_INNER,
    ) -> None:
        self._registry = registry
        self._default_type = default_type
        self._fallback_type = fallback_type
        self._preferred_type: Optional[str] = None

    @property
    def registry(self) -> BackendRegistry:
        return self._registry

    @property
    def preferred_type(self) -> Optional[str]:
        return self._preferred_type

    @preferred_type.setter
    def preferred_type(self, logger_type: Optional[str]) -> None:
        # Unknown tags are accepted; resolve() skips them
        self._preferred_type = logger_type

    def resolve(self) -> LoggerBackend:
        """
        Get the backend to use right now.

        Raises:
            LoggerInitError: If neither preferred, default nor fallback is registered
        """
        preferred = self._preferred_type
        if preferred is not None:
            backend = self._registry.lookup(preferred)
            if backend is not None:
                return backend

        backend = self._registry.lookup(self._default_type)
        if backend is None:
            backend = self._registry.lookup(self._fallback_type)
        if backend is None:
            raise LoggerInitError(
                f"Logger init failed, please check logger: no backend registered "
                f"for '{preferred or self._default_type}' or fallback '{self._fallback_type}'"
            )
        return backend


__all__ = ["BackendSelector"]
