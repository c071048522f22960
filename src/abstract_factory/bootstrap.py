"""Application bootstrap - wires configuration, logging and the factory registry."""

from __future__ import annotations

from typing import List, Optional

from pydantic import ValidationError

from abstract_factory.application import client_code, run_demo
from abstract_factory.config import AppConfig, LoggingConfig
from abstract_factory.config.manager import get_config_manager
from abstract_factory.domain.base.exceptions import ConfigurationError
from abstract_factory.domain.base.ports import AbstractFactory
from abstract_factory.infrastructure.logging import get_logger, setup_logging
from abstract_factory.infrastructure.registry import FactoryRegistry, create_default_registry


class Application:
    """Application context holding configuration and the factory registry."""

    def __init__(self, config: AppConfig, registry: Optional[FactoryRegistry] = None) -> None:
        """Initialize the instance."""
        self.config = config
        self.registry = registry or create_default_registry()
        self.logger = get_logger(__name__)

    def list_factories(self) -> List[str]:
        """Get registered factory names."""
        return self.registry.get_registered_names()

    def create_factory(self, name: str) -> AbstractFactory:
        """Create the factory registered under name."""
        return self.registry.create_factory(name)

    def run_factory(self, name: str) -> None:
        """Run the client code once with a single named factory."""
        self.logger.info("Running client code", factory=name)
        client_code(self.create_factory(name))

    def run_demo(self) -> None:
        """Run the client code with the configured first and second factory types."""
        first, second = self.config.demo_factories
        self.logger.info("Running demonstration", factories=self.config.demo_factories)
        run_demo(self.create_factory(first), self.create_factory(second))


def create_application(
    config_path: Optional[str] = None, log_level: Optional[str] = None
) -> Application:
    """
    Create and configure the application.

    Args:
        config_path: Optional JSON configuration file.
        log_level: Optional log level overriding the configured one.

    Returns:
        Configured Application.

    Raises:
        ConfigurationError: If the configuration is invalid.
    """
    config = get_config_manager(config_path).get_app_config()
    if log_level:
        try:
            logging_config = LoggingConfig.model_validate(
                {**config.logging.model_dump(), "level": log_level}
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid log level override: {log_level}", details=e.errors()
            ) from e
        config = config.model_copy(update={"logging": logging_config})

    setup_logging(config.logging)
    return Application(config)
