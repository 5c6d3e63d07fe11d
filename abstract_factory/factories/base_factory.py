"""
Base factory - Abstract base class using the Abstract Factory pattern.
Declares the methods that return the abstract products of one family.
"""

from abc import ABC, abstractmethod
from enum import Enum

from ..products import AbstractProductA, AbstractProductB


class FactoryVariant(Enum):
    """Product family variant enumeration"""
    FIRST = "1"
    SECOND = "2"


class AbstractFactory(ABC):
    """
    Abstract base class for product factories.

    Design Pattern: Abstract Factory
    Declares a set of methods returning different abstract products. The
    products of one factory form a family related by a common variant, and
    products of one variant are incompatible with those of another.

    Responsibilities:
    - Create product A of the factory's variant
    - Create product B of the same variant
    """

    @property
    @abstractmethod
    def variant(self) -> FactoryVariant:
        """Return the variant this factory produces"""
        pass

    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        """
        Create a new product A.

        Returns:
            Fresh product A instance of this factory's variant
        """
        pass

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        """
        Create a new product B.

        Returns:
            Fresh product B instance of this factory's variant
        """
        pass
