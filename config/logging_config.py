"""
Shared logging configuration.

Usage in any module:
    from config.logging_config import get_logger
    log = get_logger(__name__)
    log.info("Message here")
"""

import logging
import sys

from config.planner_config import LOG_LEVEL, PROJECT_ROOT

LOG_DIR = PROJECT_ROOT / 'logs'

# Names of loggers configured here, for set_level()
_configured = set()


def get_logger(name: str, level: int = LOG_LEVEL, log_to_file: bool = False) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default from PLANNER_LOG_LEVEL, INFO otherwise)
        log_to_file: If True, also log to logs/<name>.log

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    # Called once per module; repeat calls reuse the existing handlers
    if logger.handlers:
        return logger

    logger.setLevel(level)
    _configured.add(name)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(console)

    if log_to_file:
        LOG_DIR.mkdir(exist_ok=True)
        file_handler = logging.FileHandler(LOG_DIR / f'{name.split(".")[-1]}.log')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    return logger


def set_level(level: int):
    """Change the level of every logger handed out by get_logger()."""
    for name in _configured:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


def set_stream(stream):
    """Point the console handler of every logger from get_logger() at stream."""
    for name in _configured:
        for handler in logging.getLogger(name).handlers:
            if type(handler) is logging.StreamHandler:
                handler.setStream(stream)
