"""
Abstract Factory Package

This package shows how a client can build whole families of related
products without knowing their concrete classes.

Architecture:
- Abstract Factory Pattern for product families
- Value Object Pattern for immutable products
"""

from .products import (
    AbstractProductA,
    AbstractProductB,
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
)
from .factories import (
    AbstractFactory,
    FactoryVariant,
    ConcreteFactory1,
    ConcreteFactory2,
)
from .client import client_code
from .demo import run_demo

__all__ = [
    # Products
    "AbstractProductA",
    "AbstractProductB",
    "ConcreteProductA1",
    "ConcreteProductA2",
    "ConcreteProductB1",
    "ConcreteProductB2",
    # Factories
    "AbstractFactory",
    "FactoryVariant",
    "ConcreteFactory1",
    "ConcreteFactory2",
    # Client
    "client_code",
    "run_demo",
]
