"""Product A family."""

from .product import AbstractProductA, ConcreteProductA1, ConcreteProductA2

__all__ = ["AbstractProductA", "ConcreteProductA1", "ConcreteProductA2"]
