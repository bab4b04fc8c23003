"""
Creators - Factory Method
=========================
A Creator's main job is not creating products: perform_task() holds the
business flow, and make_product() is the single extension point deciding
which concrete product that flow works with.

Adding a variant means adding one Creator subclass and one Product class.
The base Creator, the product interfaces and calling code stay untouched.

RegistryCreator covers the same interface without subclassing: it is a
creator value bound to a registry entry and an operation.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, TYPE_CHECKING

from .interfaces.products import (
    Amount,
    Button,
    OperationProduct,
    PaymentMethod,
    PaymentReceipt,
    Product,
)
from .products.gui import MacButton, WindowsButton
from .products.operations import ConcreteProduct1, ConcreteProduct2
from .products.payments import CreditCardPayment, PayPalPayment

if TYPE_CHECKING:
    from ..infrastructure.registry.creation_registry import CreationRegistry


class Creator(ABC):
    """Anything that can make one product and run a task with it."""

    @abstractmethod
    def make_product(self) -> Product:
        pass

    @abstractmethod
    def operate(self, product: Product, *args, **kwargs) -> Any:
        pass

    def perform_task(self, *args, **kwargs) -> Any:
        product = self.make_product()
        return self.operate(product, *args, **kwargs)


# === PAYMENTS ===

class PaymentCreator(Creator):
    """Payment flow; the payment method itself is chosen by subclasses."""

    @abstractmethod
    def make_product(self) -> PaymentMethod:
        pass

    def operate(self, product: PaymentMethod, amount: Amount) -> PaymentReceipt:
        return product.pay(amount)


class CreditCardCreator(PaymentCreator):
    def make_product(self) -> PaymentMethod:
        return CreditCardPayment()


class PayPalCreator(PaymentCreator):
    def make_product(self) -> PaymentMethod:
        return PayPalPayment()


# === DIALOGS ===

class DialogCreator(Creator):
    """Renders a dialog around whichever button a subclass makes."""

    @abstractmethod
    def make_product(self) -> Button:
        pass

    def operate(self, product: Button) -> str:
        return f"Dialog with {product.render()}"

    def render(self) -> str:
        return self.perform_task()


class MacDialog(DialogCreator):
    def make_product(self) -> Button:
        return MacButton()


class WindowsDialog(DialogCreator):
    def make_product(self) -> Button:
        return WindowsButton()


# === GENERIC OPERATIONS ===

class OperationCreator(Creator):
    """The same creator code works with whichever product a subclass makes."""

    @abstractmethod
    def make_product(self) -> OperationProduct:
        pass

    def operate(self, product: OperationProduct) -> str:
        return f"Creator: The same creator's code has just worked with {product.operation()}"


class ConcreteCreator1(OperationCreator):
    def make_product(self) -> OperationProduct:
        return ConcreteProduct1()


class ConcreteCreator2(OperationCreator):
    def make_product(self) -> OperationProduct:
        return ConcreteProduct2()


# === REGISTRY-BACKED CREATOR ===

class RegistryCreator(Creator):
    """
    Creator value resolving its product through a CreationRegistry.

    Example:
        creator = RegistryCreator(
            registry, PaymentKind.PAYMENT_METHOD, PaymentVariant.PAYPAL,
            task=lambda method, amount: method.pay(amount),
        )
        receipt = creator.perform_task(20000)
    """

    def __init__(
        self,
        registry: 'CreationRegistry',
        kind: Enum,
        variant: Enum,
        task: Callable[..., Any],
        mode=None,
    ):
        self.registry = registry
        self.kind = kind
        self.variant = variant
        self.task = task
        self.mode = mode

    def make_product(self) -> Product:
        return self.registry.resolve(self.kind, self.variant, self.mode)

    def operate(self, product: Product, *args, **kwargs) -> Any:
        return self.task(product, *args, **kwargs)

    def __repr__(self) -> str:
        return (
            f"RegistryCreator(registry={self.registry.name!r}, "
            f"kind={getattr(self.kind, 'value', self.kind)!r}, "
            f"variant={getattr(self.variant, 'value', self.variant)!r})"
        )
