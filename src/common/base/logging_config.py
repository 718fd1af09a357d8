"""
Logging setup for the markup pipeline.

The tokenizer, parser and renderer log under the ``markup`` logger
hierarchy. ``configure_logging`` sends every record to the console and to a
rotating file in ``constants.LOG_DIR``. The ``markup`` loggers get their own
level, so pipeline debug output can be enabled without the root logger.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional

import constants

APP_LOGGER_NAME = 'markup'
DEFAULT_LOG_FILENAME = 'markup.log'

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(filename)s:%(lineno)d:%(funcName)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

MAX_LOG_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 10

def _build_handlers(log_file_path: Path) -> List[logging.Handler]:
    """Console and rotating-file handlers sharing one formatter."""
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [
        logging.StreamHandler(),
        logging.handlers.RotatingFileHandler(
            log_file_path,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8',
        ),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers

def configure_logging(
    log_level: str = "INFO",
    app_log_level: str = "DEBUG",
    log_filename: Optional[str] = None
) -> Path:
    """
    Install console and file logging on the root logger.

    Calling it again replaces (and closes) the handlers from the previous call.

    Args:
        log_level: Root logger level
        app_log_level: Level for the ``markup`` logger hierarchy
        log_filename: File name inside ``constants.LOG_DIR``; defaults to markup.log

    Returns:
        Path of the log file being written
    """
    log_dir = Path(constants.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = log_dir / (log_filename or DEFAULT_LOG_FILENAME)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(log_file_path):
        root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())

    logging.getLogger(APP_LOGGER_NAME).setLevel(app_log_level.upper())

    root_logger.info(f"Logging initialized: root_level={log_level}, app_level={app_log_level}, log_file={log_file_path}")
    return log_file_path

def get_logger(name: str) -> logging.Logger:
    """Logger for a module, typically called with ``__name__``."""
    return logging.getLogger(name)
