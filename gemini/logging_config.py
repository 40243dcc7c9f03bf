"""
Logging configuration for Gemini client.

Provides structured logging for production use. Every handler carries the
credential redaction filter.
"""

import copy
import logging
import logging.config
from typing import Optional


DEFAULT_LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "redact": {
            "()": "gemini.utils.structured_logging.CredentialRedactionFilter"
        },
        "correlation": {
            "()": "gemini.utils.structured_logging.CorrelationIdFilter"
        }
    },
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S"
        },
        "detailed": {
            "format": (
                "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d "
                "- %(message)s (%(funcName)s)"
            ),
            "datefmt": "%Y-%m-%d %H:%M:%S"
        },
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(correlation_id)s %(message)s"
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "standard",
            "filters": ["redact", "correlation"],
            "stream": "ext://sys.stdout"
        }
    },
    "loggers": {
        "gemini": {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False
        }
    },
    "root": {
        "level": "WARNING",
        "handlers": ["console"]
    }
}


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    json_format: bool = False
) -> dict:
    """
    Setup logging configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional rotating log file path
        json_format: Use JSON formatting

    Returns:
        The applied dictConfig
    """
    config = copy.deepcopy(DEFAULT_LOGGING_CONFIG)

    if level:
        config["loggers"]["gemini"]["level"] = level.upper()

    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "detailed",
            "filters": ["redact", "correlation"],
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5
        }
        config["loggers"]["gemini"]["handlers"].append("file")

    if json_format:
        for handler in config["handlers"].values():
            handler["formatter"] = "json"

    logging.config.dictConfig(config)
    return config


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance under the package namespace.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(f"gemini.{name}")
