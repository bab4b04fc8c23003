"""
Creation Registry Factory
=========================
Composition root for the registries. Each create_*_registry() call
registers every variant family of one product family and, unless disabled
in settings, freezes the registry so a missing (kind, variant) pair fails
at startup instead of at call time.
"""

from typing import TYPE_CHECKING, Dict, Mapping, Type
from enum import Enum

from ...domain.interfaces.products import (
    GenericKind,
    GenericVariant,
    GuiKind,
    GuiVariant,
    PaymentKind,
    PaymentVariant,
)
from ...domain.products.generic import GENERIC_FAMILIES
from ...domain.products.gui import GUI_FAMILIES
from ...domain.products.payments import PAYMENT_FAMILIES
from ..registry.creation_registry import CreationRegistry

if TYPE_CHECKING:
    from ...core.logger import StructuredLogger
    from ..config.settings import AppSettings


class CreationRegistryFactory:
    """Factory for creating configured creation registries"""

    def __init__(self, settings: 'AppSettings', logger: 'StructuredLogger'):
        self.settings = settings
        self.logger = logger

    def create_gui_registry(self) -> CreationRegistry:
        """Mac and Windows buttons and checkboxes"""
        return self._build("gui", GuiKind, GuiVariant, GUI_FAMILIES)

    def create_payment_registry(self) -> CreationRegistry:
        """Credit card and PayPal payment methods"""
        return self._build("payments", PaymentKind, PaymentVariant, PAYMENT_FAMILIES)

    def create_generic_registry(self) -> CreationRegistry:
        """Numbered A/B product pairs"""
        return self._build("generic", GenericKind, GenericVariant, GENERIC_FAMILIES)

    def create_all(self) -> Dict[str, CreationRegistry]:
        return {
            "gui": self.create_gui_registry(),
            "payments": self.create_payment_registry(),
            "generic": self.create_generic_registry(),
        }

    def _build(
        self,
        name: str,
        kinds: Type[Enum],
        variants: Type[Enum],
        families: Mapping[Enum, Mapping],
    ) -> CreationRegistry:
        registry_settings = self.settings.registry
        registry = CreationRegistry(
            kinds,
            variants,
            name=name,
            logger=self.logger,
            default_mode=registry_settings.default_lifecycle_mode,
            log_resolutions=registry_settings.log_resolutions,
        )

        for variant, constructors in families.items():
            registry.register_family(variant, constructors)

        if registry_settings.validate_on_startup:
            registry.freeze()

        self.logger.info("registry_factory.registry_created", {
            "registry": name,
            "variants": [v.value for v in families],
            "frozen": registry.is_frozen,
        })

        return registry
