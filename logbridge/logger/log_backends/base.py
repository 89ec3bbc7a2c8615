# logbridge/logger/log_backends/base.py
"""Base classes for logger backends."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict
from logbridge.config.config_types import LoggerType
from logbridge.logger.internal_logger import InternalLogger

if TYPE_CHECKING:
    from .registry import BackendRegistry

LOGGER_STRUCTLOG = LoggerType.STRUCTLOG.value
LOGGER_INNER = LoggerType.INNER.value

# Used when no explicit preference is set
DEFAULT_LOGGER = LOGGER_STRUCTLOG


class LoggerBackend(ABC):
    """
    Abstract base class for logger backends.

    A backend wraps one concrete logging implementation and hands out
    InternalLogger instances bound to it. Backends are constructed once
    during bootstrap and then owned by a BackendRegistry.
    """

    def __init__(self, **config: Any):
        """
        Initialize backend with configuration.

        Args:
            **config: Backend-specific configuration options
        """
        self.config = config

    @property
    @abstractmethod
    def logger_type(self) -> str:
        """Type tag this backend registers under."""
        pass

    @abstractmethod
    def get_logger_instance(self, name: str) -> InternalLogger:
        """
        Produce a logger bound to this backend.

        Args:
            name: Logger name, usually a dotted module/class path

        Returns:
            InternalLogger whose logger_type equals this backend's tag
        """
        pass

    @abstractmethod
    def get_metrics(self) -> Dict[str, Any]:
        """
        Get health metrics for this backend.

        Returns:
            Dictionary with backend-specific metrics
        """
        pass

    def apply_config(self, **config: Any) -> None:
        """
        Apply settings that arrive after construction.

        Args:
            **config: Same keys the constructor accepts; unknown keys are ignored
        """
        pass

    def shutdown(self) -> None:
        """Release handlers and flush pending output."""
        pass

    def do_register(self, registry: "BackendRegistry") -> bool:
        """
        Register this backend under its own type tag.

        Returns:
            True if this backend was inserted, False if the tag was taken
        """
        return registry.register(self.logger_type, self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(logger_type={self.logger_type!r})"


__all__ = ["LoggerBackend", "LOGGER_STRUCTLOG", "LOGGER_INNER", "DEFAULT_LOGGER"]
