"""
Creational - polymorphic object creation
========================================
Abstract factory, factory method and singleton unified behind one
CreationRegistry: callers ask for a (ProductKind, Variant) and never name a
concrete class.

Usage:
    from creational import AppSettings, CreationRegistryFactory, get_logger

    factory = CreationRegistryFactory(AppSettings(), get_logger("app"))
    gui = factory.create_gui_registry()
    family = gui.resolve_family("mac")
    family.create_button().render()
"""

__version__ = "1.0.0"

from .core.exceptions import (
    CreationError,
    UnknownVariantError,
    UnknownKindError,
    VariantMismatchError,
    RegistryConfigurationError,
)
from .core.logger import get_logger
from .infrastructure.config.settings import AppSettings, LifecycleMode
from .infrastructure.registry import CreationRegistry, ProductFamily
from .infrastructure.factories import CreationRegistryFactory, ButtonFactory

__all__ = [
    '__version__',
    'CreationError',
    'UnknownVariantError',
    'UnknownKindError',
    'VariantMismatchError',
    'RegistryConfigurationError',
    'get_logger',
    'AppSettings',
    'LifecycleMode',
    'CreationRegistry',
    'ProductFamily',
    'CreationRegistryFactory',
    'ButtonFactory',
]
