import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

LOGGER_NAME = 'careers_automation'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
MAX_LOG_SIZE_BYTES = 5 * 1024 * 1024  # 5MB
BACKUP_LOG_FILES = 5


def resolve_log_level(level: str | int) -> int:
    """Turns "debug", "INFO" or a numeric level into a logging level, INFO when unknown."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _rotating_file_handler(log_file_path: str) -> Optional[RotatingFileHandler]:
    """File handler for the run log; None when the log file cannot be opened."""
    log_dir = os.path.dirname(log_file_path)
    try:
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        return RotatingFileHandler(log_file_path,
                                   maxBytes=MAX_LOG_SIZE_BYTES,
                                   backupCount=BACKUP_LOG_FILES,
                                   encoding='utf-8')
    except OSError as e:
        print(f"Error setting up file handler for {log_file_path}: {e}")
        return None


def setup_automation_logger(log_file_path: str,
                            level: str | int = logging.INFO,
                            logger_name: str = LOGGER_NAME) -> logging.Logger:
    """
    Returns the run logger, writing to a rotating log file and the console.

    Handlers are attached on the first call only; later calls just update the
    level. The logger does not propagate to the root logger. When the log file
    cannot be created the run still logs to the console.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(resolve_log_level(level))
    logger.propagate = False

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [_rotating_file_handler(log_file_path), logging.StreamHandler()]
    for handler in handlers:
        if handler is None:
            continue
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if handlers[0] is None:
        logger.warning(f"Logging to console only, {log_file_path} is not writable")
    return logger
