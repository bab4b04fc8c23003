"""
Variant families: one concrete class per (ProductKind, Variant).
"""

from .gui import MacButton, MacCheckbox, WindowsButton, WindowsCheckbox, GUI_FAMILIES
from .payments import CreditCardPayment, PayPalPayment, PAYMENT_FAMILIES
from .generic import (
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
    GENERIC_FAMILIES,
)
from .operations import ConcreteProduct1, ConcreteProduct2

__all__ = [
    'MacButton',
    'MacCheckbox',
    'WindowsButton',
    'WindowsCheckbox',
    'GUI_FAMILIES',
    'CreditCardPayment',
    'PayPalPayment',
    'PAYMENT_FAMILIES',
    'ConcreteProductA1',
    'ConcreteProductA2',
    'ConcreteProductB1',
    'ConcreteProductB2',
    'GENERIC_FAMILIES',
    'ConcreteProduct1',
    'ConcreteProduct2',
]
