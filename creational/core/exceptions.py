"""
Core Exceptions - Creational Framework
======================================
Centralized exception definitions for object creation and resolution.

All of these are caller errors (misconfiguration or misuse). The registry
raises them synchronously at the resolution call site and never retries.
"""

from typing import Any, Iterable, List


class CreationError(Exception):
    """Base exception for creation-resolution failures."""
    pass


class UnknownVariantError(CreationError, LookupError):
    """
    Raised when a requested Variant is not in the registry's closed set.
    """
    def __init__(self, variant: Any, known: Iterable[Any] = ()):
        self.variant = variant
        self.known = [getattr(v, 'value', v) for v in known]
        self.message = f"Unknown variant: {variant!r} (known: {self.known})"
        super().__init__(self.message)


class UnknownKindError(CreationError, LookupError):
    """
    Raised when a requested ProductKind is not in the registry's closed set.
    """
    def __init__(self, kind: Any, known: Iterable[Any] = ()):
        self.kind = kind
        self.known = [getattr(k, 'value', k) for k in known]
        self.message = f"Unknown product kind: {kind!r} (known: {self.known})"
        super().__init__(self.message)


class VariantMismatchError(CreationError, ValueError):
    """
    Raised when a collaboration operation receives a peer created under a
    different Variant than the receiving product.
    """
    def __init__(self, expected: Any, actual: Any):
        self.expected = expected
        self.actual = actual
        self.message = (
            f"Variant mismatch: product of variant {getattr(expected, 'value', expected)!r} "
            f"cannot collaborate with peer of variant {getattr(actual, 'value', actual)!r}"
        )
        super().__init__(self.message)


class RegistryConfigurationError(CreationError):
    """
    Raised when the registry table is incomplete, modified after freezing,
    or used before it was frozen.
    """
    def __init__(self, message: str, errors: List[str] = None):
        self.errors = list(errors or [])
        self.message = message
        if self.errors:
            message = f"{message}: {'; '.join(self.errors)}"
        super().__init__(message)
