"""
Creation Registry - (ProductKind, Variant) -> constructor
=========================================================
Resolves creation requests into product instances without the caller
naming a concrete class.

Lifecycle of a registry:
1. Configuration: register() / register_family() fill the table
2. freeze(): totality check, then the table becomes read-only
3. Resolution: resolve_family() and resolve() may be called from any thread

Singleton resolutions are cached per ProductKind in a SingletonSlots
store owned by the registry. There is no teardown; cached instances live
as long as the registry.
"""

from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Type, Union

from ...core.exceptions import (
    RegistryConfigurationError,
    UnknownKindError,
    UnknownVariantError,
)
from ...core.logger import StructuredLogger, get_logger
from ...domain.interfaces.products import Product
from ..config.settings import LifecycleMode
from .family import ProductFamily
from .singleton_slots import SingletonSlots

Constructor = Callable[[], Product]
ModeLike = Union[LifecycleMode, str]


class CreationRegistry:
    """
    Closed, total mapping from (ProductKind, Variant) to a zero-argument
    constructor.

    Args:
        kinds: Enum class listing every ProductKind the registry supports
        variants: Enum class listing every Variant the registry supports
        name: Registry name used in log events
        logger: Structured logger (defaults to the module logger)
        default_mode: Lifecycle mode used when resolve() gets no mode
        log_resolutions: Emit a debug event on every resolve()
    """

    def __init__(
        self,
        kinds: Type[Enum],
        variants: Type[Enum],
        name: Optional[str] = None,
        logger: Optional[StructuredLogger] = None,
        default_mode: ModeLike = LifecycleMode.TRANSIENT,
        log_resolutions: bool = False,
    ):
        self.kinds = kinds
        self.variants = variants
        self.name = name or f"{kinds.__name__}/{variants.__name__}"
        self.logger = logger or get_logger(__name__)
        self.default_mode = self._coerce_mode(default_mode)
        self.log_resolutions = log_resolutions

        self._constructors: Dict[Tuple[Enum, Enum], Constructor] = {}
        self._table: Optional[Mapping[Tuple[Enum, Enum], Constructor]] = None
        self._singletons = SingletonSlots()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def is_frozen(self) -> bool:
        return self._table is not None

    def register(self, kind, variant, constructor: Constructor) -> 'CreationRegistry':
        """
        Register the constructor for one (kind, variant) pair.

        Returns:
            self, so registrations can be chained

        Raises:
            RegistryConfigurationError: If frozen, duplicated or not callable
            UnknownKindError / UnknownVariantError: Outside the closed sets
        """
        if self.is_frozen:
            raise RegistryConfigurationError(
                f"Registry '{self.name}' is frozen; cannot register new constructors"
            )

        kind = self._coerce_kind(kind)
        variant = self._coerce_variant(variant)

        if not callable(constructor):
            raise RegistryConfigurationError(
                f"Constructor for ({kind.value}, {variant.value}) is not callable"
            )

        key = (kind, variant)
        if key in self._constructors:
            raise RegistryConfigurationError(
                f"Duplicate registration for ({kind.value}, {variant.value}) in registry '{self.name}'"
            )

        self._constructors[key] = constructor
        return self

    def register_family(self, variant, constructors: Mapping) -> 'CreationRegistry':
        """Register every {kind: constructor} entry of one variant family."""
        for kind, constructor in constructors.items():
            self.register(kind, variant, constructor)
        return self

    def validate(self) -> Tuple[bool, List[str]]:
        """
        Check that every declared (kind, variant) pair has a constructor.

        Returns:
            Tuple of (is_valid, error_messages)
        """
        errors = [
            f"missing constructor for ({kind.value}, {variant.value})"
            for variant in self.variants
            for kind in self.kinds
            if (kind, variant) not in self._constructors
        ]
        return not errors, errors

    def freeze(self) -> 'CreationRegistry':
        """
        Validate the table and make it read-only.

        Raises:
            RegistryConfigurationError: If any (kind, variant) pair is missing
        """
        if self.is_frozen:
            return self

        is_valid, errors = self.validate()
        if not is_valid:
            self.logger.error("registry.validation_failed", {
                "registry": self.name,
                "error_count": len(errors),
                "errors": errors,
            })
            raise RegistryConfigurationError(
                f"Registry '{self.name}' is incomplete", errors=errors
            )

        self._table = MappingProxyType(dict(self._constructors))
        self.logger.info("registry.frozen", {
            "registry": self.name,
            "kinds": [k.value for k in self.kinds],
            "variants": [v.value for v in self.variants],
        })
        return self

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve_family(self, variant) -> ProductFamily:
        """
        Creators for every ProductKind, all bound to `variant`.

        Raises:
            UnknownVariantError: If variant is not in the closed set
        """
        table = self._require_frozen()
        variant = self._coerce_variant(variant)

        return ProductFamily(
            variant=variant,
            kinds=self.kinds,
            constructors={kind: table[(kind, variant)] for kind in self.kinds},
        )

    def resolve(self, kind, variant, mode: Optional[ModeLike] = None) -> Product:
        """
        Resolve one product.

        TRANSIENT builds a new instance on every call. SINGLETON returns the
        instance cached for `kind`, building it on first demand. When the
        cached instance came from another variant it is still returned (first
        creation wins) and a warning is logged.

        Raises:
            UnknownKindError / UnknownVariantError: Outside the closed sets
        """
        table = self._require_frozen()
        kind = self._coerce_kind(kind)
        variant = self._coerce_variant(variant)
        mode = self.default_mode if mode is None else self._coerce_mode(mode)

        if self.log_resolutions:
            self.logger.debug("registry.resolve", {
                "registry": self.name,
                "kind": kind.value,
                "variant": variant.value,
                "mode": mode.value,
            })

        constructor = table[(kind, variant)]

        if mode is LifecycleMode.TRANSIENT:
            return constructor()

        instance = self._singletons.get_or_create(kind, constructor)
        if instance.variant is not variant:
            self.logger.warning("registry.singleton_variant_ignored", {
                "registry": self.name,
                "kind": kind.value,
                "requested_variant": variant.value,
                "cached_variant": instance.variant.value,
            })
        return instance

    def constructor_for(self, kind, variant) -> Constructor:
        """Raw zero-argument constructor registered for (kind, variant)."""
        table = self._require_frozen()
        return table[(self._coerce_kind(kind), self._coerce_variant(variant))]

    def has_singleton(self, kind) -> bool:
        return self._singletons.has(self._coerce_kind(kind))

    def list_singletons(self) -> List[Enum]:
        """ProductKinds whose singleton slot is filled"""
        return self._singletons.keys()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_frozen(self) -> Mapping[Tuple[Enum, Enum], Constructor]:
        if self._table is None:
            raise RegistryConfigurationError(
                f"Registry '{self.name}' must be frozen before resolution"
            )
        return self._table

    def _coerce_kind(self, kind) -> Enum:
        try:
            return self.kinds(kind)
        except ValueError:
            self.logger.error("registry.unknown_kind", {
                "registry": self.name,
                "kind": str(kind),
            })
            raise UnknownKindError(kind, known=list(self.kinds)) from None

    def _coerce_variant(self, variant) -> Enum:
        try:
            return self.variants(variant)
        except ValueError:
            self.logger.error("registry.unknown_variant", {
                "registry": self.name,
                "variant": str(variant),
            })
            raise UnknownVariantError(variant, known=list(self.variants)) from None

    @staticmethod
    def _coerce_mode(mode: ModeLike) -> LifecycleMode:
        return LifecycleMode(mode)

    def __repr__(self) -> str:
        state = "frozen" if self.is_frozen else "configuring"
        return f"CreationRegistry(name={self.name!r}, {state})"
