"""Factory Registry - name-based lookup of concrete factory classes."""
from typing import Dict, List, Type

from abstract_factory.domain.base.exceptions import ConfigurationError, UnsupportedFactoryError
from abstract_factory.domain.base.ports import AbstractFactory
from abstract_factory.infrastructure.factories import ConcreteFactory1, ConcreteFactory2
from abstract_factory.infrastructure.logging import get_logger

logger = get_logger(__name__)


class FactoryRegistry:
    """
    Registry of concrete factory classes keyed by variant name.

    Registration order is preserved. Every call to create_factory returns
    a new factory instance.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, Type[AbstractFactory]] = {}

    def register(self, name: str, factory_class: Type[AbstractFactory]) -> None:
        """Register a factory class under a name."""
        if name in self._factories:
            raise ConfigurationError(f"Factory '{name}' is already registered")
        if not (isinstance(factory_class, type) and issubclass(factory_class, AbstractFactory)):
            raise ConfigurationError(
                f"Factory '{name}' must be an AbstractFactory subclass, got {factory_class!r}"
            )
        self._factories[name] = factory_class
        logger.debug("Registered factory", name=name, factory=factory_class.__name__)

    def is_registered(self, name: str) -> bool:
        """Check whether a factory name is registered."""
        return name in self._factories

    def get_registered_names(self) -> List[str]:
        """Get registered factory names in registration order."""
        return list(self._factories)

    def create_factory(self, name: str) -> AbstractFactory:
        """Create a factory instance for a registered name."""
        factory_class = self._factories.get(name)
        if factory_class is None:
            logger.warning("Unknown factory requested", name=name)
            raise UnsupportedFactoryError(name, self.get_registered_names())
        return factory_class()


def create_default_registry() -> FactoryRegistry:
    """Create a registry holding the built-in factories."""
    registry = FactoryRegistry()
    registry.register("1", ConcreteFactory1)
    registry.register("2", ConcreteFactory2)
    return registry
