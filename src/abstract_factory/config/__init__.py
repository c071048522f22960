"""Configuration package - schemas and the configuration manager."""

from .schemas import AppConfig, LoggingConfig

__all__ = ["AppConfig", "LoggingConfig"]
