"""
Core module for the creational framework: structured logging and exceptions.
"""

from .exceptions import (
    CreationError,
    UnknownVariantError,
    UnknownKindError,
    VariantMismatchError,
    RegistryConfigurationError,
)
from .logger import StructuredLogger, get_logger

__all__ = [
    'CreationError',
    'UnknownVariantError',
    'UnknownKindError',
    'VariantMismatchError',
    'RegistryConfigurationError',
    'StructuredLogger',
    'get_logger',
]
