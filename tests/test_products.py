"""
Tests for the product families.
"""

import dataclasses

import pytest

from abstract_factory.products import (
    AbstractProductA,
    AbstractProductB,
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
)


@pytest.mark.parametrize("product_class, expected", [
    (ConcreteProductA1, "The result of the product A1."),
    (ConcreteProductA2, "The result of the product A2."),
])
def test_product_a_returns_variant_literal(product_class, expected):
    product = product_class()

    assert product.useful_function_a() == expected
    assert product.useful_function_a() == product.useful_function_a()


@pytest.mark.parametrize("product_class, expected", [
    (ConcreteProductB1, "The result of the product B1."),
    (ConcreteProductB2, "The result of the product B2."),
])
def test_product_b_returns_variant_literal(product_class, expected):
    assert product_class().useful_function_b() == expected


@pytest.mark.parametrize("product_class, label", [
    (ConcreteProductB1, "B1"),
    (ConcreteProductB2, "B2"),
])
@pytest.mark.parametrize("collaborator_class", [ConcreteProductA1, ConcreteProductA2])
def test_collaboration_embeds_collaborator_result(product_class, label, collaborator_class):
    collaborator = collaborator_class()

    result = product_class().another_useful_function_b(collaborator)

    assert result == (
        f"The result of the {label} collaborating with the "
        f"({collaborator.useful_function_a()})"
    )


def test_mismatched_variants_are_not_rejected():
    result = ConcreteProductB1().another_useful_function_b(ConcreteProductA2())

    assert result == "The result of the B1 collaborating with the (The result of the product A2.)"


def test_collaboration_accepts_any_product_a():
    class CustomProductA(AbstractProductA):
        def useful_function_a(self) -> str:
            return "custom"

    result = ConcreteProductB2().another_useful_function_b(CustomProductA())

    assert result == "The result of the B2 collaborating with the (custom)"


@pytest.mark.parametrize("abstract_class", [AbstractProductA, AbstractProductB])
def test_abstract_products_cannot_be_instantiated(abstract_class):
    with pytest.raises(TypeError):
        abstract_class()


def test_incomplete_product_b_cannot_be_instantiated():
    class HalfProductB(AbstractProductB):
        def useful_function_b(self) -> str:
            return "half"

    with pytest.raises(TypeError):
        HalfProductB()


def test_products_are_immutable():
    product = ConcreteProductA1()

    with pytest.raises(dataclasses.FrozenInstanceError):
        product.name = "changed"


def test_products_compare_by_variant():
    assert ConcreteProductA1() == ConcreteProductA1()
    assert ConcreteProductA1() != ConcreteProductA2()
    assert ConcreteProductB1() != ConcreteProductB2()
