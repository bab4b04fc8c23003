"""
Button Factory
==============
Simple factory: one create_button(variant) call instead of a conditional at
every call site choosing between concrete button classes.
"""

from typing import TYPE_CHECKING, Optional

from ...domain.interfaces.products import Button, GuiKind
from ..config.settings import LifecycleMode
from ..registry.creation_registry import CreationRegistry

if TYPE_CHECKING:
    from ...core.logger import StructuredLogger


class ButtonFactory:
    """Factory for creating buttons of a requested look and feel"""

    def __init__(self, registry: CreationRegistry, logger: Optional['StructuredLogger'] = None):
        self.registry = registry
        self.logger = logger or registry.logger

    def create_button(self, variant) -> Button:
        """
        Create a new button for the given variant.

        Args:
            variant: GuiVariant member or its value ("mac", "windows")

        Returns:
            New Button instance

        Raises:
            UnknownVariantError: If the variant is not supported
        """
        button = self.registry.resolve(GuiKind.BUTTON, variant, LifecycleMode.TRANSIENT)

        self.logger.debug("button_factory.button_created", {
            "variant": button.variant.value,
            "type": type(button).__name__,
        })

        return button
