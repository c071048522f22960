"""Domain ports."""

from .factory_port import AbstractFactory

__all__ = ["AbstractFactory"]
