"""
Shared pytest fixtures for unit tests
=====================================
"""

import pytest

from creational.core.logger import get_logger
from creational.infrastructure.config.settings import (
    AppSettings,
    LoggingSettings,
    RegistrySettings,
)
from creational.infrastructure.factories.registry_factory import CreationRegistryFactory


@pytest.fixture
def settings():
    """Default settings, isolated from the process environment"""
    return AppSettings(
        logging=LoggingSettings(console_enabled=False, file_enabled=False),
        registry=RegistrySettings(),
    )


@pytest.fixture
def logger(settings):
    return get_logger("tests.creational", settings.logging)


@pytest.fixture
def registry_factory(settings, logger):
    return CreationRegistryFactory(settings, logger)


@pytest.fixture
def gui_registry(registry_factory):
    return registry_factory.create_gui_registry()


@pytest.fixture
def payment_registry(registry_factory):
    return registry_factory.create_payment_registry()


@pytest.fixture
def generic_registry(registry_factory):
    return registry_factory.create_generic_registry()
