"""Shared test fixtures and configuration.

Keeps tests away from the real user config and log directories.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import MagicMock, patch

import pytest

from expomo.models.pomodoro.scheduler import PomodoroDurations
from expomo.models.pomodoro.session import TimerSession


def _close_log_files() -> None:
    logger = logging.getLogger("expomo")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Point the debug log at *tmp_path* and reset the logger singleton."""
    import expomo.utils.logger as logger_mod

    original = logger_mod._logger
    logger_mod._logger = None
    _close_log_files()

    with patch("expomo.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield tmp_path / "logs" / "debug.log"

    _close_log_files()
    logger_mod._logger = original


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a fresh global ConfigManager backed by a temporary directory."""
    import expomo.config as config_mod

    config_mod._config_manager = None
    with patch("expomo.config.user_config_dir", return_value=str(tmp_path / "config")):
        yield config_mod.get_config_manager()
    config_mod._config_manager = None


@pytest.fixture()
def durations() -> PomodoroDurations:
    """Short durations so tests can tick through whole intervals."""
    return PomodoroDurations(work=3, short_break=2, long_break=5, long_break_every=4)


@pytest.fixture()
def notifier() -> MagicMock:
    return MagicMock()


@pytest.fixture()
def session(durations, notifier) -> TimerSession:
    return TimerSession(durations=durations, notifier=notifier)
