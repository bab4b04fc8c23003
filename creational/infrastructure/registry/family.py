"""
Product Family - creators bound to one variant
==============================================
"""

from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping

from ...core.exceptions import UnknownKindError
from ...domain.interfaces.products import Product

Constructor = Callable[[], Product]


class ProductFamily:
    """
    Bundle of creators, one per ProductKind, all bound to the same Variant.

    Every product created through one family is compatible with every other
    product created through it. Creators are exposed both as
    create(kind) and as create_<kind value>() methods:

        family = registry.resolve_family(GuiVariant.MAC)
        button = family.create_button()
        checkbox = family.create(GuiKind.CHECKBOX)
    """

    _PREFIX = "create_"

    def __init__(self, variant: Enum, kinds: type, constructors: Mapping[Enum, Constructor]):
        self._variant = variant
        self._kinds = kinds
        self._constructors = MappingProxyType(dict(constructors))

    @property
    def variant(self) -> Enum:
        return self._variant

    @property
    def kinds(self) -> List[Enum]:
        return list(self._constructors.keys())

    def create(self, kind) -> Product:
        """Build a new product of `kind` from this family's variant."""
        try:
            kind = self._kinds(kind)
        except ValueError:
            raise UnknownKindError(kind, known=list(self._kinds)) from None
        return self._constructors[kind]()

    def creators(self) -> Dict[str, Constructor]:
        """Mapping of create_<kind> names to zero-argument creators"""
        return {
            f"{self._PREFIX}{kind.value}": self._constructors[kind]
            for kind in self._constructors
        }

    def __getattr__(self, name: str) -> Constructor:
        # Only reached for attributes not found normally
        if name.startswith(self._PREFIX):
            kind_value = name[len(self._PREFIX):]
            for kind, constructor in self._constructors.items():
                if kind.value == kind_value:
                    return constructor
        raise AttributeError(f"{type(self).__name__!s} has no attribute {name!r}")

    def __dir__(self):
        return list(super().__dir__()) + list(self.creators().keys())

    def __repr__(self) -> str:
        return f"ProductFamily(variant={self._variant.value!r}, kinds={[k.value for k in self.kinds]})"
