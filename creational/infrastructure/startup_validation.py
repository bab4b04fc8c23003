"""
Startup Validation - Fail-Fast Registry Checks
==============================================
Checks that every registry is total before the application starts
resolving products.

Usage:
    validator = StartupValidator(settings, logger)
    is_valid, errors = validator.validate_registries(registries)
    if not is_valid:
        for error in errors:
            print(error)
        sys.exit(1)
"""

from typing import List, Mapping, Tuple

from ..core.logger import StructuredLogger
from .registry.creation_registry import CreationRegistry


class StartupValidator:
    """
    Validates registry configuration before startup.
    """

    def __init__(self, settings, logger: StructuredLogger):
        """
        Initialize startup validator.

        Args:
            settings: Application settings (AppSettings)
            logger: Structured logger instance
        """
        self.settings = settings
        self.logger = logger

    def validate_registries(self, registries: Mapping[str, CreationRegistry]) -> Tuple[bool, List[str]]:
        """
        Run the totality check of every registry.

        Returns:
            Tuple of (is_valid, error_messages); each message is prefixed
            with the registry name
        """
        errors = []

        for name, registry in registries.items():
            self.logger.info("startup_validation.checking_registry", {"registry": name})
            registry_ok, registry_errors = registry.validate()
            if not registry_ok:
                errors.extend(f"{name}: {error}" for error in registry_errors)

        is_valid = len(errors) == 0

        if is_valid:
            self.logger.info("startup_validation.passed", {
                "registries": list(registries.keys()),
                "status": "all_passed"
            })
        else:
            self.logger.error("startup_validation.failed", {
                "error_count": len(errors),
                "errors": errors
            })

        return is_valid, errors
