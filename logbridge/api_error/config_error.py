# logbridge/api_error/config_error.py
from .ApiError import AppError


class ConfigurationError(AppError, RuntimeError):
    """
    Raised when logging configuration is invalid.
    """

    def __init__(self, message: str, code: str = "CONFIGURATION_ERROR"):
        super().__init__(message, code=code)


class LoggerInitError(ConfigurationError):
    """
    Raised when no logger backend can be resolved.

    There is nothing to log through at this point, so callers get the
    error instead of a silent no-op logger.
    """

    def __init__(self, message: str = "Logger init failed, please check logger"):
        super().__init__(message, code="LOGGER_INIT_FAILED")


__all__ = ["ConfigurationError", "LoggerInitError"]
