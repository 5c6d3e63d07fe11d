"""
Concrete factories - each one produces the products of a single variant.

The method signatures return abstract products, while a concrete product
is instantiated inside each method.
"""

from .base_factory import AbstractFactory, FactoryVariant
from ..products import (
    AbstractProductA,
    AbstractProductB,
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
)


class ConcreteFactory1(AbstractFactory):
    """Factory for the first variant (A1 + B1)"""

    @property
    def variant(self) -> FactoryVariant:
        return FactoryVariant.FIRST

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    """Factory for the second variant (A2 + B2)"""

    @property
    def variant(self) -> FactoryVariant:
        return FactoryVariant.SECOND

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB2()
