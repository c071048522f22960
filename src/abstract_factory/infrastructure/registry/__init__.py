"""Factory registry."""

from .factory_registry import FactoryRegistry, create_default_registry

__all__ = ["FactoryRegistry", "create_default_registry"]
