"""Configuration loading and updating for the logging system.

Uses late imports of the config module to avoid a circular dependency
between logger and config.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from driver_resolver.constants import (
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_DIR_ENV_VAR,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from driver_resolver.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str, Path]:
    """Load bootstrap console level, file level, and file path.

    Environment Variable Override:
        DRIVER_RESOLVER_LOG_DIR: Overrides the log directory path. Used
        during pytest runs to keep test logs out of the user's home.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    env_log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if env_log_dir:
        log_path = Path(env_log_dir).expanduser() / LOG_FILE_NAME
    else:
        log_path = (
            Path.home()
            / ".config"
            / DEFAULT_CONFIG_SUBDIR
            / "logs"
            / LOG_FILE_NAME
        )

    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, log_path


def update_logger_from_config(state: "_LoggerState") -> None:
    """Update logger handler levels from global config.

    Only updates handler levels, never adds or removes handlers.

    Args:
        state: Logger state object (from logger.state module)

    """
    try:
        from driver_resolver.config import ConfigManager  # noqa: PLC0415

        config = ConfigManager().load_global_config()
    except (ImportError, KeyError, AttributeError, OSError):
        # Config not usable yet; bootstrap levels stay in place
        return

    console_level = getattr(
        logging, config["console_log_level"], logging.WARNING
    )
    file_level = getattr(logging, config["log_level"], logging.INFO)

    if state.queue_listener is not None:
        for handler in state.queue_listener.handlers:
            if isinstance(handler, RotatingFileHandler):
                handler.setLevel(file_level)
            elif isinstance(handler, logging.StreamHandler):
                handler.setLevel(console_level)

    state.config_applied = True
