# logbridge/config/config_types.py
"""Configuration type definitions."""

from enum import Enum
import logging


class EnvBool(str, Enum):
    TRUE = "true"
    FALSE = "false"

    @property
    def enabled(self) -> bool:
        return self == EnvBool.TRUE

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


class EnvLogLevel(str, Enum):
    """
    Supported log levels.

    Inherits from str so enum values serialize naturally to JSON/strings
    without custom serialization logic.

    Examples:
        >>> EnvLogLevel.INFO
        <EnvLogLevel.INFO: 'INFO'>
        >>> str(EnvLogLevel.INFO)
        'INFO'
        >>> EnvLogLevel.INFO.level
        20
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def level(self) -> int:
        """Get numeric logging level for stdlib logging module."""
        return getattr(logging, self.value)

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


class LoggerType(str, Enum):
    """Type tags of the backends shipped with logbridge."""

    STRUCTLOG = "structlog"
    INNER = "inner"

    def __str__(self) -> str:
        return self.value


__all__ = [
    "EnvBool",
    "EnvLogLevel",
    "LoggerType",
]
