"""
Generic A/B Variant Families
============================
Two numbered variants of the abstract A/B pair. A B product only
collaborates with the A product of its own variant.
"""

from ..interfaces.products import GenericVariant, ProductA, ProductB


class ConcreteProductA1(ProductA):
    variant = GenericVariant.VARIANT_1

    def useful_function_a(self) -> str:
        return "The result of the product A1."


class ConcreteProductA2(ProductA):
    variant = GenericVariant.VARIANT_2

    def useful_function_a(self) -> str:
        return "The result of the product A2."


class ConcreteProductB1(ProductB):
    variant = GenericVariant.VARIANT_1

    def useful_function_b(self) -> str:
        return "The result of the product B1."

    def _collaborate(self, peer: ProductA) -> str:
        return f"The result of the B1 collaborating with the ({peer.useful_function_a()})"


class ConcreteProductB2(ProductB):
    variant = GenericVariant.VARIANT_2

    def useful_function_b(self) -> str:
        return "The result of the product B2."

    def _collaborate(self, peer: ProductA) -> str:
        return f"The result of the B2 collaborating with the ({peer.useful_function_a()})"


GENERIC_FAMILIES = {
    GenericVariant.VARIANT_1: {
        ConcreteProductA1.kind: ConcreteProductA1,
        ConcreteProductB1.kind: ConcreteProductB1,
    },
    GenericVariant.VARIANT_2: {
        ConcreteProductA2.kind: ConcreteProductA2,
        ConcreteProductB2.kind: ConcreteProductB2,
    },
}
