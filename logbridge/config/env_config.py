# logbridge/config/env_config.py
import os
from typing import Optional


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get Env variable with optional default
    """
    return os.getenv(name, default=default)


__all__ = ["get_env"]
