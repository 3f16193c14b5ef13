"""
Logging configuration for structured logging.

This module configures JSON logging that works well with Loki.
"""

import sys

from opentelemetry import trace
from pythonjsonlogger import jsonlogger

APP_LOGGERS = ("core", "api", "accounts", "licenses", "audit")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds trace context."""

    def add_fields(self, log_record, record, message_dict):
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)

        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            log_record["trace_id"] = format(span_context.trace_id, "032x")
            log_record["span_id"] = format(span_context.span_id, "016x")


def get_logging_config(environment: str = "development", log_file: str = None) -> dict:
    """
    Get logging configuration for the application.

    Args:
        environment: Environment name (development, production, test)
        log_file: Optional path of a rotating JSON log file

    Returns:
        Django logging configuration dictionary
    """
    log_level = "DEBUG" if environment == "development" else "INFO"

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": sys.stdout,
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "json",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        }
    handler_names = list(handlers)

    loggers = {
        "django": {
            "handlers": handler_names,
            "level": "INFO",
            "propagate": False,
        },
        "django.request": {
            "handlers": handler_names,
            "level": "WARNING",
            "propagate": False,
        },
        "django.db.backends": {
            "handlers": handler_names,
            "level": "WARNING",
            "propagate": False,
        },
    }
    for name in APP_LOGGERS:
        loggers[name] = {
            "handlers": handler_names,
            "level": "INFO" if name == "audit" else log_level,
            "propagate": False,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": CustomJsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s %(pathname)s %(lineno)d",
            },
            "simple": {
                "format": "{levelname} {message}",
                "style": "{",
            },
        },
        "handlers": handlers,
        "root": {
            "handlers": handler_names,
            "level": log_level,
        },
        "loggers": loggers,
    }
