# logbridge/logger/__init__.py
from .internal_logger import InternalLogger
from .log_backends import *
from .selector import BackendSelector
from .logger_factory import (
    LoggerFactory,
    create_logger_factory,
    get_current_backend_type,
    get_logger,
    get_preferred_backend,
    logger_name_for,
    set_preferred_backend,
)
from .initialize import get_logging_config, initialize_logging
