"""Main logger module providing public API functions.

- setup_logging(): Configure logging with the QueueHandler architecture
- get_logger(): Get or create a logger under the driver_resolver root
- flush_all_handlers(): Ensure pending records reach their handlers
- clear_logger_state(): Reset global logger state for tests
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from driver_resolver.constants import LOG_ROOT_NAME
from driver_resolver.logger.config import load_log_settings
from driver_resolver.logger.handlers import setup_root_logger
from driver_resolver.logger.state import get_state


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener.

    Waits (bounded) for the queue to drain, then flushes each handler.
    """
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    timeout = 5.0
    start_time = time.time()
    while not state.log_queue.empty():
        if time.time() - start_time > timeout:
            break
        time.sleep(0.01)

    time.sleep(0.1)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = LOG_ROOT_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging and return the requested logger.

    The root ``driver_resolver`` logger is initialized exactly once; child
    loggers propagate to it.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            if console_level is None or file_level is None or log_file is None:
                cfg_console, cfg_file, cfg_path = load_log_settings()
                console_level = console_level or cfg_console
                file_level = file_level or cfg_file
                log_file = log_file or cfg_path

            setup_root_logger(
                state,
                console_level,
                file_level,
                log_file,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(
    name: str = LOG_ROOT_NAME,
    enable_file_logging: bool = True,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Get or create a logger instance.

    Usage:
        >>> logger = get_logger(__name__)
        >>> logger.info("Resolved %s", version)

    Args:
        name: Logger name, typically __name__ for module loggers
        enable_file_logging: Whether to enable file logging

    Returns:
        Configured logger instance

    """
    return setup_logging(name=name, enable_file_logging=enable_file_logging)


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Stops the QueueListener and detaches handlers from every logger in the
    ``driver_resolver`` namespace. Logger objects stay registered because
    modules hold module-level references to them.
    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False
        state.config_applied = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(LOG_ROOT_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
