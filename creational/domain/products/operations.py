"""
Single-operation products for the generic factory-method creators.
"""

from ..interfaces.products import GenericVariant, OperationProduct


class ConcreteProduct1(OperationProduct):
    variant = GenericVariant.VARIANT_1

    def operation(self) -> str:
        return "{Result of the ConcreteProduct1}"


class ConcreteProduct2(OperationProduct):
    variant = GenericVariant.VARIANT_2

    def operation(self) -> str:
        return "{Result of the ConcreteProduct2}"
