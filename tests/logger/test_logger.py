"""Tests for the logging package."""

import logging
from logging.handlers import QueueHandler, RotatingFileHandler

import pytest

from driver_resolver.logger import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from driver_resolver.logger.config import load_log_settings
from driver_resolver.logger.state import get_state


@pytest.fixture
def fresh_logging():
    clear_logger_state()
    yield
    clear_logger_state()


def _record(level: int, msg: str = "hello %s") -> logging.LogRecord:
    return logging.LogRecord(
        name="driver_resolver.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=("world",),
        exc_info=None,
    )


def test_setup_logging_writes_to_file(tmp_path, fresh_logging):
    log_file = tmp_path / "logs" / "test.log"

    logger = setup_logging(
        "driver_resolver.test",
        console_level="WARNING",
        file_level="DEBUG",
        log_file=log_file,
    )
    logger.debug("resolved %s", "v1.0")
    flush_all_handlers()

    assert "resolved v1.0" in log_file.read_text(encoding="utf-8")


def test_root_logger_only_has_queue_handler(tmp_path, fresh_logging):
    setup_logging(
        "driver_resolver.x",
        console_level="INFO",
        file_level="INFO",
        log_file=tmp_path / "a.log",
    )

    root = logging.getLogger("driver_resolver")
    assert [type(h) for h in root.handlers] == [QueueHandler]
    assert not logging.getLogger("driver_resolver.x").handlers
    handlers = get_state().queue_listener.handlers
    assert any(isinstance(h, RotatingFileHandler) for h in handlers)


def test_file_logging_can_be_disabled(fresh_logging):
    setup_logging(
        "driver_resolver",
        console_level="INFO",
        file_level="INFO",
        log_file=None,
        enable_file_logging=False,
    )

    handlers = get_state().queue_listener.handlers
    assert not any(isinstance(h, RotatingFileHandler) for h in handlers)


def test_get_logger_returns_child(fresh_logging):
    logger = get_logger("driver_resolver.core.cache", enable_file_logging=False)

    assert logger.name == "driver_resolver.core.cache"
    assert get_state().root_initialized


def test_clear_logger_state_resets(fresh_logging):
    get_logger("driver_resolver.y", enable_file_logging=False)

    clear_logger_state()

    state = get_state()
    assert not state.root_initialized
    assert state.queue_listener is None


def test_log_dir_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("DRIVER_RESOLVER_LOG_DIR", str(tmp_path))

    console, file_level, path = load_log_settings()

    assert (console, file_level) == ("WARNING", "INFO")
    assert path == tmp_path / "driver-resolver.log"


def test_hybrid_formatter_info_is_message_only():
    formatter = HybridConsoleFormatter("%(levelname)s - %(message)s")

    assert formatter.format(_record(logging.INFO)) == "hello world"


def test_hybrid_formatter_warning_is_structured():
    formatter = HybridConsoleFormatter("%(levelname)s - %(message)s")

    output = formatter.format(_record(logging.WARNING))

    assert "WARNING" in output
    assert output.endswith(" - hello world")


def test_colored_formatter_restores_levelname():
    formatter = ColoredConsoleFormatter("%(levelname)s")
    record = _record(logging.ERROR)

    assert formatter.format(record) == "\033[31mERROR\033[0m"
    assert record.levelname == "ERROR"
