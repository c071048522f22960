"""Client code - works with factories and products only through their abstract types.

Any factory or product subclass can be passed to the client code without
breaking it.
"""
from abstract_factory.domain.base.ports import AbstractFactory
from abstract_factory.infrastructure.logging import get_logger

logger = get_logger(__name__)


def client_code(factory: AbstractFactory) -> None:
    """Create one product of each family and print what they produce."""
    logger.debug("Running client code", factory=type(factory).__name__)

    product_a = factory.create_product_a()
    product_b = factory.create_product_b()

    print(product_b.useful_function_b())
    print(product_b.another_useful_function_b(product_a))


def run_demo(first_factory: AbstractFactory, second_factory: AbstractFactory) -> None:
    """Show that the same client code works with two different factory types."""
    print("Client: Testing client code with the first factory type:")
    client_code(first_factory)

    print()

    print("Client: Testing the same client code with the second factory type:")
    client_code(second_factory)
