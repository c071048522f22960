import logging

import pytest

from abstract_factory.infrastructure.factories import ConcreteFactory1, ConcreteFactory2
from abstract_factory.infrastructure.logging.logger import HANDLER_NAME
from abstract_factory.infrastructure.registry import create_default_registry


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration environment variables from leaking into tests."""
    for name in ("AF_LOG_LEVEL", "AF_LOG_DESTINATION", "AF_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_logging():
    """Remove handlers installed by setup_logging and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler.get_name() == HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def factory1():
    return ConcreteFactory1()


@pytest.fixture
def factory2():
    return ConcreteFactory2()


@pytest.fixture
def registry():
    return create_default_registry()
