"""Abstract Factory - Root Package.

Abstract Factory is a creational design pattern that solves the problem of
creating entire product families without specifying their concrete classes.

The factory port declares one creation method per product family and
leaves the actual creation to concrete factory classes. Each concrete
factory corresponds to one product variant, so all of its products are
compatible with each other.

Key Components:
    - domain: product families and the factory port
    - infrastructure: concrete factories, the factory registry and logging
    - application: client code working through the abstract interfaces only
    - config: configuration schemas and manager
    - cli: command line entry point

Usage:
    >>> from abstract_factory import ConcreteFactory1, client_code
    >>> client_code(ConcreteFactory1())
    The result of the product B1.
    The result of the B1 collaborating with the (The result of the product A1.)
"""

from ._package import PACKAGE_NAME, __version__
from .application import client_code, run_demo
from .domain.base.ports import AbstractFactory
from .domain.product_a import AbstractProductA, ConcreteProductA1, ConcreteProductA2
from .domain.product_b import AbstractProductB, ConcreteProductB1, ConcreteProductB2
from .infrastructure.factories import ConcreteFactory1, ConcreteFactory2

__package_name__ = PACKAGE_NAME

__all__ = [
    "AbstractFactory",
    "AbstractProductA",
    "AbstractProductB",
    "ConcreteFactory1",
    "ConcreteFactory2",
    "ConcreteProductA1",
    "ConcreteProductA2",
    "ConcreteProductB1",
    "ConcreteProductB2",
    "client_code",
    "run_demo",
    "__version__",
]
