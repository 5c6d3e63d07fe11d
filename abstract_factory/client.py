"""
Client code - works with factories and products only through abstract types.

This lets any factory or product subclass be passed to the client code
without breaking it.
"""

import logging
import sys
from typing import Optional, TextIO

from .factories import AbstractFactory

logger = logging.getLogger(__name__)


def client_code(factory: AbstractFactory, out: Optional[TextIO] = None) -> None:
    """
    Request one product of each kind and print how they collaborate.

    Args:
        factory: Any AbstractFactory implementation
        out: Output stream (defaults to sys.stdout)
    """
    if out is None:
        out = sys.stdout

    logger.debug(f"Running client code with {type(factory).__name__}")

    product_a = factory.create_product_a()
    product_b = factory.create_product_b()

    out.write(product_b.useful_function_b() + "\n")
    out.write(product_b.another_useful_function_b(product_a) + "\n")
