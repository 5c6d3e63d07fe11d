"""
Factories - Abstract Factory implementation, one concrete factory per variant.
"""

from .base_factory import AbstractFactory, FactoryVariant
from .concrete_factories import ConcreteFactory1, ConcreteFactory2

__all__ = [
    'AbstractFactory',
    'FactoryVariant',
    'ConcreteFactory1',
    'ConcreteFactory2',
]
