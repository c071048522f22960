"""Product A family - abstract interface and its concrete variants."""
from abc import ABC, abstractmethod


class AbstractProductA(ABC):
    """
    Base interface of the A product family.

    Every variant of the family implements this interface. Products are
    stateless: calling their operations has no side effects.
    """

    @abstractmethod
    def useful_function_a(self) -> str:
        """Describe the result produced by this variant."""


class ConcreteProductA1(AbstractProductA):
    """Variant 1 of product A, created by ConcreteFactory1."""

    def useful_function_a(self) -> str:
        return "The result of the product A1."


class ConcreteProductA2(AbstractProductA):
    """Variant 2 of product A, created by ConcreteFactory2."""

    def useful_function_a(self) -> str:
        return "The result of the product A2."
