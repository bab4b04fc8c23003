"""
Unit Tests: Registry Factory, Button Factory and Startup Validation
===================================================================
"""

import pytest

from creational.core.exceptions import UnknownVariantError
from creational.domain.interfaces.products import GuiKind, GuiVariant
from creational.domain.products.gui import GUI_FAMILIES, MacButton, WindowsButton
from creational.infrastructure.config.settings import (
    AppSettings,
    LifecycleMode,
    LoggingSettings,
    RegistrySettings,
)
from creational.infrastructure.factories.button_factory import ButtonFactory
from creational.infrastructure.factories.registry_factory import CreationRegistryFactory
from creational.infrastructure.registry.creation_registry import CreationRegistry
from creational.infrastructure.startup_validation import StartupValidator


class TestCreationRegistryFactory:
    """Registries built by the factory are complete and frozen."""

    def test_create_all(self, registry_factory):
        registries = registry_factory.create_all()

        assert set(registries) == {"gui", "payments", "generic"}
        for registry in registries.values():
            assert registry.is_frozen
            assert registry.validate() == (True, [])

    def test_settings_drive_default_mode(self, logger):
        settings = AppSettings(
            logging=LoggingSettings(console_enabled=False),
            registry=RegistrySettings(default_lifecycle_mode="singleton"),
        )
        registry = CreationRegistryFactory(settings, logger).create_gui_registry()

        assert registry.default_mode is LifecycleMode.SINGLETON
        assert registry.resolve(GuiKind.BUTTON, GuiVariant.MAC) is \
            registry.resolve(GuiKind.BUTTON, GuiVariant.MAC)

    def test_validation_can_be_deferred(self, logger):
        settings = AppSettings(
            logging=LoggingSettings(console_enabled=False),
            registry=RegistrySettings(validate_on_startup=False),
        )
        registry = CreationRegistryFactory(settings, logger).create_payment_registry()

        assert not registry.is_frozen
        registry.freeze()
        assert registry.is_frozen


class TestButtonFactory:
    """Simple factory over the GUI registry."""

    def test_creates_requested_button(self, gui_registry):
        factory = ButtonFactory(gui_registry)

        assert isinstance(factory.create_button(GuiVariant.MAC), MacButton)
        assert isinstance(factory.create_button("windows"), WindowsButton)

    def test_always_new_button(self, gui_registry):
        factory = ButtonFactory(gui_registry)
        assert factory.create_button("mac") is not factory.create_button("mac")

    def test_invalid_variant(self, gui_registry):
        with pytest.raises(UnknownVariantError):
            ButtonFactory(gui_registry).create_button("android")


class TestStartupValidator:
    """Fail-fast totality checks across registries."""

    def test_all_registries_valid(self, settings, logger, registry_factory):
        validator = StartupValidator(settings, logger)

        is_valid, errors = validator.validate_registries(registry_factory.create_all())

        assert is_valid
        assert errors == []

    def test_incomplete_registry_reported(self, settings, logger, gui_registry):
        partial = CreationRegistry(GuiKind, GuiVariant, name="partial", logger=logger)
        partial.register_family(GuiVariant.WINDOWS, GUI_FAMILIES[GuiVariant.WINDOWS])

        is_valid, errors = StartupValidator(settings, logger).validate_registries({
            "gui": gui_registry,
            "partial": partial,
        })

        assert not is_valid
        assert errors == [
            "partial: missing constructor for (button, mac)",
            "partial: missing constructor for (checkbox, mac)",
        ]
