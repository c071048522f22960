"""Concrete factories - one per product variant.

Each factory produces a family of products belonging to a single variant
and so guarantees the products it returns are compatible. The method
signatures return abstract products while a concrete product is
instantiated inside.
"""
from abstract_factory.domain.base.ports import AbstractFactory
from abstract_factory.domain.product_a import (
    AbstractProductA,
    ConcreteProductA1,
    ConcreteProductA2,
)
from abstract_factory.domain.product_b import (
    AbstractProductB,
    ConcreteProductB1,
    ConcreteProductB2,
)
from abstract_factory.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ConcreteFactory1(AbstractFactory):
    """Factory for variant 1 products."""

    def create_product_a(self) -> AbstractProductA:
        logger.debug("Creating product", factory="ConcreteFactory1", product="ConcreteProductA1")
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        logger.debug("Creating product", factory="ConcreteFactory1", product="ConcreteProductB1")
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    """Factory for variant 2 products."""

    def create_product_a(self) -> AbstractProductA:
        logger.debug("Creating product", factory="ConcreteFactory2", product="ConcreteProductA2")
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        logger.debug("Creating product", factory="ConcreteFactory2", product="ConcreteProductB2")
        return ConcreteProductB2()
