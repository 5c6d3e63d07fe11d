"""
Product families - every variant implements one of the abstract product interfaces.
"""

from .base_product import AbstractProductA, AbstractProductB
from .product_a import ConcreteProductA1, ConcreteProductA2
from .product_b import ConcreteProductB1, ConcreteProductB2

__all__ = [
    'AbstractProductA',
    'AbstractProductB',
    'ConcreteProductA1',
    'ConcreteProductA2',
    'ConcreteProductB1',
    'ConcreteProductB2',
]
