"""
Creation Registry
=================
- singleton_slots.py: lazily created, lock-guarded shared instances
- family.py: creators bound to one variant
- creation_registry.py: closed (kind, variant) -> constructor table
"""

from ..config.settings import LifecycleMode
from .singleton_slots import SingletonSlots
from .family import ProductFamily
from .creation_registry import CreationRegistry

__all__ = [
    'LifecycleMode',
    'SingletonSlots',
    'ProductFamily',
    'CreationRegistry',
]
