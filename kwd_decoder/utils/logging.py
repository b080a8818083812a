"""Logging configuration for the KWD decoder."""
import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def setup_logging(
    log_dir: str,
    log_level: int = logging.INFO,
    console: bool = True
) -> Path:
    """Send decoder logs to a timestamped file and to stderr.

    Args:
        log_dir: Directory to store log files, created if missing
        log_level: Logging level (default: INFO)
        console: Also log to stderr

    Returns:
        Path of the log file that was created
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / f"kwd_decoder_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

    handlers = [(logging.FileHandler(log_file, encoding='utf-8'), FILE_FORMAT)]
    if console:
        handlers.append((logging.StreamHandler(sys.stderr), CONSOLE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    for handler, fmt in handlers:
        handler.setFormatter(logging.Formatter(fmt))
        handler.setLevel(log_level)
        root_logger.addHandler(handler)

    root_logger.info(f"Logging initialized at {logging.getLevelName(log_level)}")
    root_logger.info(f"Log file: {log_file}")
    return log_file


def log_exception(
    logger: logging.Logger,
    message: str,
    exc_info: Optional[BaseException] = None
) -> None:
    """Log an exception, with its cause chain when given."""
    if exc_info is None:
        logger.error(message)
        return
    logger.error(f"{message}: {exc_info}", exc_info=exc_info)
    cause = exc_info.__cause__
    while cause is not None:
        logger.error(f"  caused by {type(cause).__name__}: {cause}")
        cause = cause.__cause__
