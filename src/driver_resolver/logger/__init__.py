"""Logging utilities for driver-resolver.

Structured logging with colored console output, a rotating log file and
a QueueHandler/QueueListener pipeline so coroutines never block on
handler I/O.

Usage:
    >>> from driver_resolver.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Resolving %s", project_key)  # %-style only

Environment Variables:
    DRIVER_RESOLVER_LOG_DIR: Override the log directory (used by tests).

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from driver_resolver.logger.config import (
    update_logger_from_config as _update_config,
)
from driver_resolver.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
)
from driver_resolver.logger.handlers import ConfigurationError
from driver_resolver.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from driver_resolver.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "SimpleConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config() -> None:
    """Update logger handler levels from the settings file."""
    _update_config(get_state())
