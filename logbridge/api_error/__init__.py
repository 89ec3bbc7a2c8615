# logbridge/api_error/__init__.py
from .ApiError import AppError
from .config_error import ConfigurationError, LoggerInitError

__all__ = ["AppError", "ConfigurationError", "LoggerInitError"]
