"""Concrete factory implementations."""

from .concrete_factories import ConcreteFactory1, ConcreteFactory2

__all__ = ["ConcreteFactory1", "ConcreteFactory2"]
