"""
Logger Configuration Module

Provides centralized logging configuration for the scoring engine and API.
Supports both file and console logging with different formatters.

Key Features:
- Configurable log levels
- File and console output
- Service-specific loggers
- Rotating file handlers
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

from .config import settings


def setup_logger(name: str, log_file: Optional[str] = None,
                 level: Union[str, int, None] = None,
                 logs_dir: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger with file and console handlers.

    Args:
        name: Logger name (e.g., 'scorer', 'cache')
        log_file: Optional log file name. If None, only console logging is used
        level: Optional log level. If None, uses level from settings
        logs_dir: Directory for the log file. Defaults to settings.LOGS_DIR

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Remove any existing handlers to prevent duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level or settings.LOG_LEVEL)

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_formatter = logging.Formatter(
        '%(levelname)s - %(name)s - %(message)s'
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        target_dir = logs_dir or settings.LOGS_DIR
        try:
            os.makedirs(target_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(target_dir, log_file),
                maxBytes=10*1024*1024,  # 10MB
                backupCount=5
            )
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.error(f"Error setting up file handler for {name}: {str(e)}")

    return logger


log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

# Service loggers, console only until configure_loggers() runs
app_logger = setup_logger('app', level=log_level)
api_logger = setup_logger('api', level=log_level)
catalog_logger = setup_logger('catalog', level=log_level)
scorer_logger = setup_logger('scorer', level=log_level)
risk_logger = setup_logger('risk', level=log_level)
aggregator_logger = setup_logger('aggregator', level=log_level)
cache_logger = setup_logger('cache', level=log_level)

_known_loggers = {
    'app': app_logger,
    'api': api_logger,
    'catalog': catalog_logger,
    'scorer': scorer_logger,
    'risk': risk_logger,
    'aggregator': aggregator_logger,
    'cache': cache_logger,
}

_loggers_configured = False


def configure_loggers(logs_dir: str) -> None:
    """
    Attach rotating file handlers to every service logger.

    Safe to call more than once; only the first call has an effect.
    """
    global _loggers_configured
    if _loggers_configured:
        return

    os.makedirs(logs_dir, exist_ok=True)
    for name in _known_loggers:
        setup_logger(name, f"{name}.log", level=log_level, logs_dir=logs_dir)

    app_logger.info(f"Loggers configured with directory: {logs_dir}")
    _loggers_configured = True


__all__ = [
    'app_logger',
    'api_logger',
    'catalog_logger',
    'scorer_logger',
    'risk_logger',
    'aggregator_logger',
    'cache_logger',
    'setup_logger',
    'configure_loggers',
]
