from .products import (
    GuiKind,
    PaymentKind,
    GenericKind,
    OperationKind,
    GuiVariant,
    PaymentVariant,
    GenericVariant,
    Product,
    Button,
    Checkbox,
    PaymentMethod,
    PaymentReceipt,
    ProductA,
    ProductB,
    OperationProduct,
)

__all__ = [
    'GuiKind',
    'PaymentKind',
    'GenericKind',
    'OperationKind',
    'GuiVariant',
    'PaymentVariant',
    'GenericVariant',
    'Product',
    'Button',
    'Checkbox',
    'PaymentMethod',
    'PaymentReceipt',
    'ProductA',
    'ProductB',
    'OperationProduct',
]
