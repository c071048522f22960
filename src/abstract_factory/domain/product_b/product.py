"""Product B family - abstract interface and its concrete variants.

Products of this family can collaborate with any product of the A family.
Proper interaction is only possible between products of the same variant,
but the interface deliberately accepts any AbstractProductA: keeping the
pairing consistent is the job of the factory that created the products.
"""
from abc import ABC, abstractmethod

from abstract_factory.domain.product_a import AbstractProductA


class AbstractProductB(ABC):
    """Base interface of the B product family."""

    @abstractmethod
    def useful_function_b(self) -> str:
        """Product B is able to do its own thing..."""

    @abstractmethod
    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        """
        ...but it can also collaborate with a product A.

        Args:
            collaborator: Any product of the A family. The variant is not checked.

        Returns:
            Description embedding the collaborator's own result verbatim.
        """


class ConcreteProductB1(AbstractProductB):
    """Variant 1 of product B, created by ConcreteFactory1."""

    def useful_function_b(self) -> str:
        return "The result of the product B1."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        """
        B1 only works correctly with variant A1, but it accepts any
        instance of AbstractProductA as an argument.
        """
        result = collaborator.useful_function_a()
        return f"The result of the B1 collaborating with the ({result})"


class ConcreteProductB2(AbstractProductB):
    """Variant 2 of product B, created by ConcreteFactory2."""

    def useful_function_b(self) -> str:
        return "The result of the product B2."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        """
        B2 only works correctly with variant A2, but it accepts any
        instance of AbstractProductA as an argument.
        """
        result = collaborator.useful_function_a()
        return f"The result of the B2 collaborating with the ({result})"
