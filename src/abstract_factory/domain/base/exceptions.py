"""Domain exceptions - base hierarchy for package errors."""
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class UnsupportedFactoryError(DomainException):
    """Raised when an unregistered factory name is requested."""
    def __init__(self, factory_name: str, available: Optional[List[str]] = None):
        self.factory_name = factory_name
        self.available = list(available or [])
        super().__init__(
            f"Unsupported factory '{factory_name}'. "
            f"Available factories: {', '.join(self.available) or 'none'}"
        )
