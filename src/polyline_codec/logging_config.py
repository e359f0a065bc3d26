"""Structured logging configuration for polyline-codec"""

import logging
import sys
from typing import Optional

import structlog

from .config import get_config


def configure_logging(service_name: str = "polyline-codec", level: Optional[str] = None):
    """Configure structured logging for an application using the codec

    The codec modules only ever call ``structlog.get_logger``; applications
    call this once at startup.

    Args:
        service_name: Name bound to every log line as ``service``
        level: Log level (default: from LOG_LEVEL env var, else INFO)
    """
    config = get_config()
    log_level = (level or config.log_level).upper()

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level, logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    # Add service name to all logs
    structlog.contextvars.bind_contextvars(service=service_name)

    return structlog.get_logger()


def get_logger(name: Optional[str] = None):
    """Get a logger instance

    Args:
        name: Optional logger name (defaults to calling module)
    """
    return structlog.get_logger(name)
