# logbridge/config/logging_config.py
"""
Logging configuration loaded from the environment.

Environment variables (all optional):
    LOG_LEVEL=INFO          # DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_BACKEND=structlog   # preferred backend type tag
    LOG_JSON=false          # render structlog output as JSON
"""

from typing import Any, List, Optional
from pydantic import BaseModel, ValidationError, field_validator
from .env_config import get_env
from .config_types import EnvBool, EnvLogLevel
from logbridge.api_error import ConfigurationError

_default_log_level_env_key = "LOG_LEVEL"
_default_log_backend_env_key = "LOG_BACKEND"
_default_log_json_env_key = "LOG_JSON"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_level: EnvLogLevel = EnvLogLevel.INFO
    preferred_backend: Optional[str] = None
    json_logs: EnvBool = EnvBool.FALSE

    model_config = {"frozen": True}

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("json_logs", mode="before")
    @classmethod
    def normalize_json_logs(cls, v: Any) -> Any:
        if isinstance(v, bool):
            return EnvBool.TRUE if v else EnvBool.FALSE
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("preferred_backend")
    @classmethod
    def normalize_preferred_backend(cls, v: Optional[str]) -> Optional[str]:
        """Blank means no explicit preference."""
        if v is None:
            return None
        v = v.strip().lower()
        return v or None

    @property
    def level_value(self) -> str:
        """Get string value of log level."""
        return self.log_level.value

    @property
    def level_int(self) -> int:
        """Get numeric log level."""
        return self.log_level.level

    @property
    def json_enabled(self) -> bool:
        return self.json_logs.enabled


def load_logging_config(
    log_level_env_key: str = _default_log_level_env_key,
    log_backend_env_key: str = _default_log_backend_env_key,
    log_json_env_key: str = _default_log_json_env_key,
) -> LoggingConfig:
    """
    Load logging configuration from environment.

    Args:
        log_level_env_key: Environment variable name for the level
        log_backend_env_key: Environment variable name for the preferred backend
        log_json_env_key: Environment variable name for JSON rendering

    Returns:
        LoggingConfig instance

    Raises:
        ConfigurationError: If any value is invalid
    """
    values = {
        "log_level": get_env(log_level_env_key),
        "preferred_backend": get_env(log_backend_env_key),
        "json_logs": get_env(log_json_env_key),
    }
    try:
        return LoggingConfig(**{k: v for k, v in values.items() if v is not None})

    except ValidationError as e:
        errors: List[str] = []
        for error in e.errors():
            field = ".".join(str(x) for x in error["loc"])
            msg = error["msg"]
            errors.append(f"{field}: {msg}")

        raise ConfigurationError(
            "Invalid logging configuration:\n"
            + "\n".join(f"  - {err}" for err in errors)
        ) from e


__all__ = [
    "LoggingConfig",
    "load_logging_config",
]
