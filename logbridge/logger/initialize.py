# logbridge/logger/initialize.py
"""
Logging initialization.

Call once at application startup:

    from logbridge import initialize_logging

    initialize_logging()

Loggers obtained earlier (e.g. module-level get_logger(__name__)) follow
the configuration applied here.
"""
from typing import List, Optional
from dotenv import load_dotenv
from logbridge.api_error import ConfigurationError
from logbridge.config import LoggingConfig, configure_structlog, load_logging_config
from .log_backends.bootstrap import BackendInitResult, ensure_backends_initialized
from .log_backends.registry import backend_registry
from .logger_factory import set_preferred_backend


class _ConfigState:
    """
    Holds the logging configuration applied by initialize_logging().
    """

    _instance: Optional["_ConfigState"] = None
    _config: Optional[LoggingConfig]

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._config = None
        return cls._instance

    @property
    def config(self) -> LoggingConfig:
        """Get logging configuration."""
        if self._config is None:
            raise RuntimeError(
                "Logging not initialized. Call initialize_logging() at startup."
            )
        return self._config

    def set_config(self, config: Optional[LoggingConfig]) -> None:
        self._config = config


_state = _ConfigState()


def initialize_logging(
    config: Optional[LoggingConfig] = None,
    load_env: bool = True,
) -> List[BackendInitResult]:
    """
    Load logging configuration and bootstrap the logger backends.

    Args:
        config: Configuration to apply. Loaded from the environment if omitted.
        load_env: Read a .env file before loading configuration from the environment

    Returns:
        Bootstrap results, one per attempted backend

    Raises:
        ConfigurationError: If configuration is invalid, or structlog was
            already configured explicitly with a different level
    """
    if config is None:
        if load_env:
            load_dotenv()
        config = load_logging_config()

    try:
        configure_structlog(config.level_int, json_logs=config.json_enabled)
    except RuntimeError as e:
        raise ConfigurationError(str(e)) from e

    backend_config = {"log_level": config.level_int, "json_logs": config.json_enabled}
    results = ensure_backends_initialized(**backend_config)
    # Backends built earlier by an implicit bootstrap still carry defaults
    for backend in backend_registry.backends():
        backend.apply_config(**backend_config)

    set_preferred_backend(config.preferred_backend)
    _state.set_config(config)
    return results


def get_logging_config() -> LoggingConfig:
    """
    Get the applied logging configuration.

    Raises:
        RuntimeError: If initialize_logging() has not run
    """
    return _state.config


def reset_logging_config() -> None:
    """FOR TESTING ONLY."""
    _state.set_config(None)


__all__ = ["initialize_logging", "get_logging_config", "reset_logging_config"]
