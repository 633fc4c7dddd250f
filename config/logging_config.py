"""
Centralized logging configuration.
Engine modules use logging.getLogger(__name__); entry points call setup_logger.
"""
import logging
import logging.handlers
from pathlib import Path
from .constants import (
    LOG_LEVEL, LOG_FORMAT, LOG_FILE,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)


def setup_logger(name: str = None, log_file: str = LOG_FILE) -> logging.Logger:
    """
    Get or create a configured logger.

    Usage:
        from config.logging_config import setup_logger
        logger = setup_logger(__name__)
        logger.info("Message here")

    Args:
        name: Logger name. If None, uses 'vademecum'.
        log_file: Rotating log file path. Pass None to log to console only.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or 'vademecum')
    logger.setLevel(logging.DEBUG if log_file else getattr(logging, LOG_LEVEL))

    # Avoid adding handlers multiple times
    kinds = {type(h) for h in logger.handlers}

    if logging.StreamHandler not in kinds:
        # Console handler - INFO level
        console = logging.StreamHandler()
        console.setLevel(logging.INFO)
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console)

    if log_file and logging.handlers.RotatingFileHandler not in kinds:
        # File handler with rotation - DEBUG level
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
            backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


# Singleton logger for quick imports, console only until an entry point
# attaches the rotating file handler.
# Usage: from config.logging_config import logger
logger = setup_logger('vademecum', log_file=None)
