"""
Factory Pattern Implementations
===============================
Factories assemble and freeze the creation registries from settings, and
expose simple factories on top of them.
"""

from .registry_factory import CreationRegistryFactory
from .button_factory import ButtonFactory

__all__ = [
    'CreationRegistryFactory',
    'ButtonFactory',
]
