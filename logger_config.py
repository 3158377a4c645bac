"""
Logging configuration for the query API clients.

Loggers write to stdout so the same setup works locally and inside
AWS Lambda, where stdout is shipped to CloudWatch Logs.
"""
import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Names of the loggers configured by get_logger
_configured_loggers = set()


def _level_from_env() -> int:
    level_name = os.environ.get('LOG_LEVEL', 'INFO').upper()
    return getattr(logging, level_name, logging.INFO)


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger writing to stdout.

    Args:
        name: Logger name (usually the calling module's __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or 'query_api')

    if logger.handlers:
        return logger

    logger.setLevel(_level_from_env())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    # Handlers live on each module logger; the root logger would print twice
    logger.propagate = False
    _configured_loggers.add(logger.name)

    return logger


def set_level(level_name: str) -> None:
    """
    Apply a log level to every logger created by get_logger.

    Args:
        level_name: Standard logging level name ("DEBUG", "INFO", ...)
    """
    level = getattr(logging, level_name.upper(), logging.INFO)
    for name in _configured_loggers:
        logging.getLogger(name).setLevel(level)
