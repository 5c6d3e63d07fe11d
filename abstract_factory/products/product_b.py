"""
Product B variants.

Concrete products are created by the matching concrete factories.
"""

from dataclasses import dataclass

from .base_product import AbstractProductA, AbstractProductB


@dataclass(frozen=True)
class ConcreteProductB1(AbstractProductB):
    """Product B, first variant"""

    def useful_function_b(self) -> str:
        return "The result of the product B1."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        """
        B1 only works correctly with A1, but it still accepts any
        AbstractProductA as an argument.
        """
        result = collaborator.useful_function_a()
        return f"The result of the B1 collaborating with the ({result})"


@dataclass(frozen=True)
class ConcreteProductB2(AbstractProductB):
    """Product B, second variant"""

    def useful_function_b(self) -> str:
        return "The result of the product B2."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        # Same looseness as B1: any product A is accepted
        result = collaborator.useful_function_a()
        return f"The result of the B2 collaborating with the ({result})"
