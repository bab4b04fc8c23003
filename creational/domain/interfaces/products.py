"""
Product Interfaces - Capability surfaces of created objects
===========================================================
Abstract interfaces every concrete product implements. Calling code only
ever talks to these types; concrete classes live in domain.products.

Each concrete product carries two class attributes:
- kind:    the ProductKind role it fulfills
- variant: the Variant family that produced it

Two products are compatible only when they share a variant. Collaboration
operations enforce this and raise VariantMismatchError for a foreign peer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Union

from ...core.exceptions import VariantMismatchError


# === PRODUCT KINDS ===

class GuiKind(str, Enum):
    """Widgets produced by a GUI family"""
    BUTTON = "button"
    CHECKBOX = "checkbox"


class PaymentKind(str, Enum):
    """Payment products"""
    PAYMENT_METHOD = "payment_method"


class GenericKind(str, Enum):
    """Abstract A/B product pair"""
    PRODUCT_A = "product_a"
    PRODUCT_B = "product_b"


class OperationKind(str, Enum):
    """Single-operation products made by factory-method creators"""
    OPERATION = "operation"


# === VARIANTS ===

class GuiVariant(str, Enum):
    """Operating system look and feel"""
    MAC = "mac"
    WINDOWS = "windows"


class PaymentVariant(str, Enum):
    """Payment providers"""
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"


class GenericVariant(str, Enum):
    """Numbered variants of the A/B pair"""
    VARIANT_1 = "variant_1"
    VARIANT_2 = "variant_2"


# === BASE PRODUCT ===

class Product(ABC):
    """Base class of every created object."""

    kind: ClassVar[Enum]
    variant: ClassVar[Enum]

    @abstractmethod
    def describe(self) -> str:
        """Short descriptive result of the product's main capability"""
        pass

    def is_compatible(self, other: 'Product') -> bool:
        """True when other is a product created under the same variant."""
        if not isinstance(other, Product):
            return False
        return type(self.variant) is type(other.variant) and self.variant is other.variant

    def ensure_compatible(self, other: 'Product') -> None:
        """
        Raise unless other shares this product's variant.

        Raises:
            TypeError: If other is not a Product at all
            VariantMismatchError: If other was created under another variant
        """
        if not isinstance(other, Product):
            raise TypeError(
                f"{type(self).__name__} can only work with a Product, got {type(other).__name__}"
            )
        if not self.is_compatible(other):
            raise VariantMismatchError(expected=self.variant, actual=other.variant)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(variant={self.variant.value!r})"


# === GUI CAPABILITIES ===

class Button(Product):
    kind = GuiKind.BUTTON

    @abstractmethod
    def render(self) -> str:
        pass

    def describe(self) -> str:
        return self.render()


class Checkbox(Product):
    kind = GuiKind.CHECKBOX

    @abstractmethod
    def render(self) -> str:
        pass

    def describe(self) -> str:
        return self.render()

    def render_with(self, button: Button) -> str:
        """Render this checkbox next to a button of the same look and feel."""
        self.ensure_compatible(button)
        return f"{self.render()} beside {button.render()}"


# === PAYMENT CAPABILITIES ===

Amount = Union[int, float, Decimal]


@dataclass(frozen=True)
class PaymentReceipt:
    """Outcome of PaymentMethod.pay()"""
    method: PaymentVariant
    amount: Amount
    message: str


class PaymentMethod(Product):
    kind = PaymentKind.PAYMENT_METHOD

    @abstractmethod
    def pay(self, amount: Amount) -> PaymentReceipt:
        pass

    def describe(self) -> str:
        return f"{self.variant.value} payment method"


# === GENERIC A/B CAPABILITIES ===

class ProductA(Product):
    kind = GenericKind.PRODUCT_A

    @abstractmethod
    def useful_function_a(self) -> str:
        pass

    def describe(self) -> str:
        return self.useful_function_a()


class ProductB(Product):
    """
    ProductB can work on its own, and can also collaborate with a ProductA.

    Only a ProductA of the same variant is a valid collaborator.
    """
    kind = GenericKind.PRODUCT_B

    @abstractmethod
    def useful_function_b(self) -> str:
        pass

    @abstractmethod
    def _collaborate(self, peer: ProductA) -> str:
        pass

    def collaborate(self, peer: ProductA) -> str:
        """
        Collaborate with a ProductA.

        Raises:
            VariantMismatchError: If peer was created under another variant
        """
        self.ensure_compatible(peer)
        return self._collaborate(peer)

    def describe(self) -> str:
        return self.useful_function_b()


# === SINGLE-OPERATION CAPABILITY ===

class OperationProduct(Product):
    kind = OperationKind.OPERATION

    @abstractmethod
    def operation(self) -> str:
        pass

    def describe(self) -> str:
        return self.operation()
