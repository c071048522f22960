"""Base domain layer - exceptions and ports shared by every product family."""

from .exceptions import ConfigurationError, DomainException, UnsupportedFactoryError

__all__ = [
    "DomainException",
    "ConfigurationError",
    "UnsupportedFactoryError",
]
