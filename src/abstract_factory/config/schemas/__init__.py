"""Configuration schemas."""

from .app_schema import AppConfig
from .logging_schema import LoggingConfig

__all__ = ["AppConfig", "LoggingConfig"]
