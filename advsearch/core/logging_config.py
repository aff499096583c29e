"""
Logging Configuration Module.

Configures the root logger for the search tools: a short console format on
stderr, and an optional rotating log file with timestamps.
"""

import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

# Configuration
LOG_FILENAME = "advsearch.log"
MAX_BYTES = 5 * 1024 * 1024  # 5 MB
BACKUP_COUNT = 5
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class SafeRotatingFileHandler(RotatingFileHandler):
    """
    A RotatingFileHandler that keeps logging when rotation is blocked.

    On Windows, rotation fails with PermissionError while another process
    holds the file. The handler then keeps writing to the current file.
    """

    def doRollover(self) -> None:
        try:
            super().doRollover()
        except PermissionError:
            if sys.platform != "win32":
                raise


def _file_handler(log_dir: str, level: int) -> Optional[logging.Handler]:
    """Builds the rotating file handler, or None if the file can't be opened."""
    try:
        os.makedirs(log_dir, exist_ok=True)
        handler = SafeRotatingFileHandler(
            os.path.join(log_dir, LOG_FILENAME),
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        print(f"Could not open search log in {log_dir}: {e}", file=sys.stderr)
        return None
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(level)
    return handler


def setup_logging(
    debug_mode: bool = False,
    log_to_console: bool = True,
    log_dir: Optional[str] = None,
) -> None:
    """
    Configures the root logger for a search tool.

    Replaces any handlers already on the root logger, so calling it twice
    does not duplicate output.

    Args:
        debug_mode (bool): If True, sets level to DEBUG. Defaults to INFO.
        log_to_console (bool): If True, logs to stderr.
        log_dir (str): Directory for advsearch.log. None disables file logging.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    level = logging.DEBUG if debug_mode else logging.INFO
    root_logger.setLevel(level)

    if log_dir is not None:
        file_handler = _file_handler(log_dir, level)
        if file_handler is not None:
            root_logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    logging.debug(f"Search logging started at {datetime.now().isoformat()}")


def get_logger(name: str) -> logging.Logger:
    """Returns the logger for a module (usually called with __name__)."""
    return logging.getLogger(name)
