"""Factory Port - interface for creating a family of related products.

The port declares one creation method per product family. The products
returned by a single factory belong to one variant and are therefore
compatible with each other. Callers depend on this port only and never
on a concrete factory or product class.
"""
from abc import ABC, abstractmethod

from abstract_factory.domain.product_a import AbstractProductA
from abstract_factory.domain.product_b import AbstractProductB


class AbstractFactory(ABC):
    """Port for creating one product of each family."""

    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        """Create a new product of the A family.

        Returns:
            A freshly constructed product; instances are never shared.
        """

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        """Create a new product of the B family.

        Returns:
            A freshly constructed product of the same variant as create_product_a.
        """
