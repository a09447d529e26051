"""
Centralized logging configuration for fluentquery.

Builders log through the ``fluentquery`` logger hierarchy. Level, format and
an optional log file are taken from environment variables. Importing the
package configures nothing; applications that want this setup call
``setup_logging()`` themselves, otherwise records propagate to whatever
handlers the application installed.
"""

import logging
import logging.config
import os
import sys
from typing import Dict, Any, Optional


class ContextFilter(logging.Filter):
    """Add contextual information to log records."""

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.context = context or {}

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.context.items():
            setattr(record, key, value)
        return True


def get_log_level() -> str:
    """Get log level from environment variable or default to INFO."""
    return os.getenv("FLUENTQUERY_LOG_LEVEL", "INFO").upper()


def get_log_format() -> str:
    """Get log format based on environment."""
    env = os.getenv("FLUENTQUERY_ENV", "development").lower()

    if env == "production":
        return "%(asctime)s | %(name)s | %(levelname)s | %(message)s | %(pathname)s:%(lineno)d"
    return "%(asctime)s | %(name)-28s | %(levelname)-8s | %(message)s"


def get_logging_config() -> Dict[str, Any]:
    """Get the logging configuration dictionary."""
    log_level = get_log_level()

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": get_log_format(),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "standard",
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "fluentquery": {
                "level": log_level,
            },
        },
        "root": {
            "level": "WARNING",
            "handlers": ["console"],
        },
    }

    log_file = os.getenv("FLUENTQUERY_LOG_FILE")
    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": log_level,
            "formatter": "detailed",
            "filename": log_file,
            "maxBytes": 10 * 1024 * 1024,  # 10MB
            "backupCount": 5,
        }
        config["loggers"]["fluentquery"]["handlers"] = ["file"]

    return config


def setup_logging() -> None:
    """Setup logging configuration for the application."""
    logging.config.dictConfig(get_logging_config())

    logger = logging.getLogger("fluentquery.logging")
    logger.debug("Logging configured with level: %s", get_log_level())

    if os.getenv("FLUENTQUERY_LOG_FILE"):
        logger.info("File logging enabled: %s", os.getenv("FLUENTQUERY_LOG_FILE"))


def get_logger(name: str, context: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """
    Get a logger with the specified name and optional context.

    Args:
        name: Logger name (typically __name__ of the module)
        context: Optional context dictionary to add to all log records

    Returns:
        Configured logger instance
    """
    # Keep every logger under the package hierarchy
    if not name.startswith("fluentquery"):
        if name == "__main__":
            name = "fluentquery.main"
        else:
            name = f"fluentquery.{name}"

    logger = logging.getLogger(name)

    if context:
        logger.addFilter(ContextFilter(context))

    return logger

