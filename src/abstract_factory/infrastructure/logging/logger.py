"""Structured logging built on structlog over the standard logging module.

Log records never go to standard output; console logging writes to
standard error so program output stays clean. Loggers carry their own
processor chain, so the global structlog configuration of a host
application is left untouched.
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

import structlog

from abstract_factory.config.schemas import LoggingConfig

# Name given to handlers installed here, so reconfiguration only replaces our own
HANDLER_NAME = "abstract_factory"

LOG_FORMAT = "%(message)s"

PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.CallsiteParameterAdder(
        [
            structlog.processors.CallsiteParameter.MODULE,
            structlog.processors.CallsiteParameter.FUNC_NAME,
            structlog.processors.CallsiteParameter.LINENO,
        ]
    ),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "logger", "event"]),
]


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application.

    Args:
        config: Logging configuration, used as given. If None, it is loaded
               through ConfigurationManager, which expands environment variables.

    Returns:
        Configured structlog logger for the package.
    """
    if config is None:
        from abstract_factory.config.manager import ConfigurationManager

        config = ConfigurationManager().get_app_config().logging

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))

    for handler in root_logger.handlers[:]:
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()

    for handler in _build_handlers(config):
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)

    logger = get_logger("abstract_factory")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
    )
    return logger


def _build_handlers(config: LoggingConfig) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_file = config.file_path
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_file,
                maxBytes=config.max_size_mb * 1024 * 1024,
                backupCount=config.backup_count,
            )
        )

    if config.destination in ("console", "both"):
        handlers.append(logging.StreamHandler(sys.stderr))

    return handlers


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger wrapping the standard library logger of that name."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )
