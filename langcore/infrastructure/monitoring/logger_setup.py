"""Centralized logging configuration for the langcore application.

Sets up standard Python logging with appropriate levels, formatters,
and handlers (rich console output, optional rotating file).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from rich.logging import RichHandler

DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_LOG_FILE = None
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 3


def setup_logging(
    log_level: int = DEFAULT_LOG_LEVEL,
    log_format: str = DEFAULT_LOG_FORMAT,
    log_file: Optional[str] = DEFAULT_LOG_FILE,
    use_rich: bool = True,
) -> None:
    """Configures the root logger for the application.

    Args:
        log_level: The minimum logging level (e.g., logging.DEBUG, logging.INFO).
        log_format: The format string for file (and plain console) messages.
        log_file: Optional path to a file for logging output.
        use_rich: Render console logs with rich instead of a plain stream handler.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers attached to the root logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(log_format)

    if use_rich:
        # RichHandler renders its own time and level columns
        console_handler: logging.Handler = RichHandler(rich_tracebacks=True, show_path=False)
        console_handler.setFormatter(logging.Formatter('%(name)s - %(message)s'))
    else:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUP_COUNT,
                encoding='utf-8',
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            logging.info(f"Logging to file: {log_file}")
        except OSError as e:
            logging.error(f"Failed to set up file logging to {log_file}: {e}", exc_info=True)

    logging.debug(f"Logging configured. Level={logging.getLevelName(log_level)}")


def level_from_name(level_name: str, default: int = DEFAULT_LOG_LEVEL) -> int:
    """Maps a level name such as 'debug' to its logging constant."""
    level = logging.getLevelName(str(level_name).upper())
    return level if isinstance(level, int) else default
