"""Tests for the application logger utility."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

import pytest

import expomo.utils.logger as logger_mod
from expomo.utils.logger import get_log_path, get_logger


def test_get_logger_creates_log_file(isolated_logger):
    """Logger creates the log file inside user_log_dir."""
    logger = get_logger()

    assert isolated_logger.exists(), "Log file should be created on first use"
    assert isinstance(logger, logging.Logger)


def test_get_logger_returns_singleton():
    """Repeated calls return the same logger instance."""
    assert get_logger() is get_logger()


def test_get_logger_writes_message(isolated_logger):
    """Messages written to the logger appear in the log file."""
    logger = get_logger()
    logger.info("hello from test")
    for handler in logger.handlers:
        handler.flush()

    assert "hello from test" in isolated_logger.read_text(encoding="utf-8")


def test_child_loggers_reach_the_file(isolated_logger):
    """Module loggers under the expomo namespace share the file handler."""
    get_logger()
    logging.getLogger("expomo.models.pomodoro.session").warning("child message")
    for handler in logging.getLogger("expomo").handlers:
        handler.flush()

    assert "child message" in isolated_logger.read_text(encoding="utf-8")


def test_custom_log_file(tmp_path):
    """An explicit path overrides the user log directory."""
    target = tmp_path / "custom" / "expomo.log"

    get_logger(target).debug("custom")

    assert target.exists()


def test_logger_does_not_propagate():
    assert get_logger().propagate is False


def test_get_log_path_default(isolated_logger):
    assert get_log_path() == isolated_logger


def test_unwritable_log_file_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(OSError):
        get_logger(Path(blocker) / "debug.log")


def _rotating_handlers() -> list[logging.handlers.RotatingFileHandler]:
    return [
        h
        for h in logging.getLogger("expomo").handlers
        if isinstance(h, logging.handlers.RotatingFileHandler)
    ]


def test_file_attached_alongside_foreign_handler(isolated_logger):
    """A handler installed by someone else does not stop the log file opening."""
    foreign = logging.NullHandler()
    logging.getLogger("expomo").addHandler(foreign)
    try:
        get_logger().info("written despite foreign handler")
        for handler in _rotating_handlers():
            handler.flush()

        assert len(_rotating_handlers()) == 1
        assert "written despite foreign handler" in isolated_logger.read_text(encoding="utf-8")
    finally:
        logging.getLogger("expomo").removeHandler(foreign)


def test_reinitialising_same_path_keeps_one_handler(isolated_logger):
    get_logger()
    logger_mod._logger = None

    get_logger()

    assert len(_rotating_handlers()) == 1


def test_stale_file_handler_is_replaced(tmp_path, isolated_logger):
    get_logger(tmp_path / "old" / "debug.log")
    (old,) = _rotating_handlers()
    logger_mod._logger = None

    get_logger().info("fresh")

    (current,) = _rotating_handlers()
    assert current is not old
    assert old.stream is None
    assert current.baseFilename == str(isolated_logger)
