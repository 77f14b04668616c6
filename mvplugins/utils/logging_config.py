"""
Logging configuration for the plugin toolkit.
"""

import os
import logging
import logging.handlers
import time
from typing import Dict, Optional, Union

# Global configuration
DEFAULT_LEVEL = logging.INFO
LOGGERS: Dict[str, logging.Logger] = {}
LOGGER_FORMAT = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_DIRECTORY = os.path.join(os.getcwd(), 'logs')


def resolve_level(level: Union[int, str, None]) -> int:
    """
    Turn a level name such as "debug" or "WARNING" into a logging level.

    Args:
        level: A logging level number, a level name, or None for the default.

    Returns:
        The numeric logging level.
    """
    if level is None:
        return DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_logging(level: Union[int, str, None] = DEFAULT_LEVEL,
                      log_directory: Optional[str] = None,
                      log_to_file: bool = True) -> None:
    """
    Configure the logging system.

    Args:
        level: The log level to use.
        log_directory: Where log files go. Defaults to LOG_DIRECTORY.
        log_to_file: Whether to attach the rotating file handlers.
    """
    level = resolve_level(level)

    # Configure the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOGGER_FORMAT, DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        log_directory = log_directory or LOG_DIRECTORY
        if not os.path.exists(log_directory):
            os.makedirs(log_directory)

        # All logs
        log_file = os.path.join(log_directory, f'plugins_{time.strftime("%Y%m%d_%H%M%S")}.log')
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        # Errors only
        error_log_file = os.path.join(log_directory, f'error_{time.strftime("%Y%m%d_%H%M%S")}.log')
        error_file_handler = logging.handlers.RotatingFileHandler(
            error_log_file,
            maxBytes=5*1024*1024,  # 5 MB
            backupCount=5,
            encoding='utf-8'
        )
        error_file_handler.setLevel(logging.ERROR)
        error_file_handler.setFormatter(formatter)
        root_logger.addHandler(error_file_handler)

    root_logger.info("Logging configured")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Loggers are cached so every module asking for "PLUGINS" shares one.

    Args:
        name: The name of the logger.

    Returns:
        The logger.
    """
    if name in LOGGERS:
        return LOGGERS[name]

    logger = logging.getLogger(name)
    LOGGERS[name] = logger
    return logger
