# -*- coding: utf-8 -*-
"""
Logger Module

This module provides logging utilities for the NCAA prediction service.
"""

import sys
import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

# Default log format
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Max log size for rotating file handler (10 MB)
MAX_LOG_SIZE = 10 * 1024 * 1024
MAX_LOG_BACKUPS = 5

NOISY_LOGGERS = ['werkzeug', 'matplotlib', 'urllib3']


def setup_logging(app_name: str, log_level: Union[int, str] = logging.INFO,
                  log_dir: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Set up logging for the application

    Args:
        app_name: Name of the logger to configure (usually the package name)
        log_level: Logging level (default: INFO)
        log_dir: Directory for a rotating log file. Console only when None.

    Returns:
        logging.Logger: Configured logger
    """
    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(app_name)
    logger.setLevel(log_level)

    # Clear existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"{app_name}_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = RotatingFileHandler(log_file, maxBytes=MAX_LOG_SIZE, backupCount=MAX_LOG_BACKUPS)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info(f"Log file: {log_file}")

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logger.info(f"Logging initialized for {app_name}")
    return logger
