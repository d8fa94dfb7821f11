"""Centralized logging configuration for the application."""
import logging
import os
from logging.handlers import RotatingFileHandler
from datetime import datetime
from typing import Optional
import pytz

from crypto_list.core.config import get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class TimezoneFormatter(logging.Formatter):
    """Formatter that renders record times in a fixed timezone."""

    def __init__(self, fmt=None, datefmt=None, tz=pytz.utc):
        super().__init__(fmt, datefmt)
        self.tz = tz

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, tz=self.tz)
        if datefmt:
            return dt.strftime(datefmt)
        return dt.strftime('%Y-%m-%d %H:%M:%S %Z')


def setup_logging(logs_dir: Optional[str] = None, level: Optional[str] = None):
    """Configure application-wide logging with file and console handlers.

    Args:
        logs_dir: Directory for log files (defaults to settings)
        level: Root log level name (defaults to settings)
    """
    settings = get_settings()
    logs_dir = logs_dir or settings.log_dir
    level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    # Ensure logs directory exists
    os.makedirs(logs_dir, exist_ok=True)

    formatter = TimezoneFormatter(
        LOG_FORMAT,
        datefmt=DATE_FORMAT,
        tz=pytz.timezone(settings.log_timezone)
    )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Main application log file (rotating)
    app_file_handler = RotatingFileHandler(
        os.path.join(logs_dir, "app.log"),
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=10,
        encoding='utf-8'
    )
    app_file_handler.setLevel(level)
    app_file_handler.setFormatter(formatter)
    root_logger.addHandler(app_file_handler)

    # Error log file (ERROR level only, rotating)
    error_file_handler = RotatingFileHandler(
        os.path.join(logs_dir, "error.log"),
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    error_file_handler.setLevel(logging.ERROR)
    error_file_handler.setFormatter(formatter)
    root_logger.addHandler(error_file_handler)

    # API log file (for coin feed requests)
    api_logger = logging.getLogger('api')
    for handler in list(api_logger.handlers):
        api_logger.removeHandler(handler)
        handler.close()
    api_logger.setLevel(logging.DEBUG)
    api_file_handler = RotatingFileHandler(
        os.path.join(logs_dir, "api.log"),
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=10,
        encoding='utf-8'
    )
    api_file_handler.setLevel(logging.DEBUG)
    api_file_handler.setFormatter(formatter)
    api_logger.addHandler(api_file_handler)

    logging.info(f"Logging system initialized - logs saved to '{logs_dir}/' directory")
