"""Product B family."""

from .product import AbstractProductB, ConcreteProductB1, ConcreteProductB2

__all__ = ["AbstractProductB", "ConcreteProductB1", "ConcreteProductB2"]
