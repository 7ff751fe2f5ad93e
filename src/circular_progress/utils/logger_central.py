"""
Centralized logging setup for Circular Progress applications.

Library modules only create module-level loggers; applications call one of the
functions below once at startup.

Key Functions:
    - configure_file_logging(): Console plus rotating file output
    - setup_logger(): Console-only logging for standalone applications
    - set_level(): Change the level of the root logger and its handlers
"""

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

# Simple global state
_current_log_file = None

# Expose standard log levels for convenience
DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR


def get_active_log_file() -> str | None:
    """Get the path to the active log file, if file logging is configured."""
    return _current_log_file


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger with the specified name."""
    return logging.getLogger(name)


def _create_handlers(log_file: str | None = None) -> list[logging.Handler]:
    """Create standard console and optional rotating file handlers."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(
            RotatingFileHandler(
                log_file,
                maxBytes=1024 * 1024,  # 1MB
                backupCount=3,
            )
        )
    return handlers


def set_level(level: int) -> None:
    """Set logging level for the root logger and all handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        handler.setLevel(level)


def configure_file_logging(
    log_dir: str | Path, file_identifier: str | None = None, level: int = DEBUG
) -> str | None:
    """Configure console and rotating file logging; returns the log file path."""
    global _current_log_file

    if file_identifier is None:
        file_identifier = f"app_log_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

    Path(log_dir).mkdir(parents=True, exist_ok=True)
    log_file = f"{log_dir}/{file_identifier}.log"

    try:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            handlers=_create_handlers(log_file),
            force=True,  # Override any existing configuration
        )
        _current_log_file = log_file
        logging.info(f"File logging configured to {log_file}")
        return log_file

    except OSError:
        logging.exception("Error setting up file logging")
        return None


def setup_logger(name: str | None = None, level: int = INFO) -> logging.Logger:
    """Configure console logging for a standalone application."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=_create_handlers(),
        force=True,
    )

    logger = get_logger(name)
    logger.info(f"Logger configured for {name or 'root'}")

    return logger
