"""
Product A variants.
"""

from dataclasses import dataclass

from .base_product import AbstractProductA


@dataclass(frozen=True)
class ConcreteProductA1(AbstractProductA):
    """Product A, first variant"""

    def useful_function_a(self) -> str:
        return "The result of the product A1."


@dataclass(frozen=True)
class ConcreteProductA2(AbstractProductA):
    """Product A, second variant"""

    def useful_function_a(self) -> str:
        return "The result of the product A2."
