"""
Base products - Abstract base classes for both product families.
Every variant of a product must implement the matching interface.
"""

from abc import ABC, abstractmethod


class AbstractProductA(ABC):
    """
    Base interface of product A.

    Design Pattern: Abstract Factory (abstract product)
    Each distinct product of the family has its own interface, and all
    variants of the product implement it.
    """

    @abstractmethod
    def useful_function_a(self) -> str:
        """Return the fixed result of this variant"""
        pass


class AbstractProductB(ABC):
    """
    Base interface of product B.

    Product B can do its own thing, and it can also collaborate with
    product A. All products can interact with each other, but proper
    interaction is only possible between products of the same variant.
    """

    @abstractmethod
    def useful_function_b(self) -> str:
        """Return the fixed result of this variant"""
        pass

    @abstractmethod
    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        """
        Collaborate with a product A.

        Any AbstractProductA is accepted, even one from another variant.
        The factory is what guarantees that the products it hands out
        belong to the same variant.

        Args:
            collaborator: Product A instance whose result gets embedded

        Returns:
            Combined result of both products
        """
        pass
