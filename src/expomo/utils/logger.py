"""Debug log for ExPomo.

Everything under the ``expomo`` logger namespace goes to one rotating file,
by default ``debug.log`` in the platformdirs user log directory. The file is
the only sink: the logger does not propagate, so nothing reaches the
terminal while the full-screen timer is drawn.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "expomo"
_LOG_FILE = "debug.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_logger: logging.Logger | None = None


def get_log_path() -> Path:
    """Default location of the debug log."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def _file_handlers(logger: logging.Logger) -> list[logging.handlers.RotatingFileHandler]:
    return [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]


def _attach_log_file(logger: logging.Logger, log_path: Path) -> None:
    """Make *log_path* the logger's only rotating file.

    Handlers added by other code (pytest's capture handlers, for one) are
    left alone. A rotating handler for another path is closed and replaced.
    """
    target = os.path.abspath(log_path)
    for handler in _file_handlers(logger):
        if handler.baseFilename == target:
            return
        logger.removeHandler(handler)
        handler.close()

    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)


def get_logger(log_file: Path | None = None) -> logging.Logger:
    """Return the application logger, opening the log file on first call.

    *log_file* only takes effect on the first call. Raises OSError when the
    log file cannot be created.
    """
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    _attach_log_file(logger, Path(log_file) if log_file is not None else get_log_path())

    _logger = logger
    return _logger
