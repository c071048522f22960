"""Tests for the product families."""

import pytest

from abstract_factory.domain.product_a import (
    AbstractProductA,
    ConcreteProductA1,
    ConcreteProductA2,
)
from abstract_factory.domain.product_b import (
    AbstractProductB,
    ConcreteProductB1,
    ConcreteProductB2,
)


class TestProductA:
    """Test product A variants."""

    def test_abstract_product_a_cannot_be_instantiated(self):
        """Test that the family interface is abstract."""
        with pytest.raises(TypeError):
            AbstractProductA()

    @pytest.mark.parametrize(
        "product_class, expected",
        [
            (ConcreteProductA1, "The result of the product A1."),
            (ConcreteProductA2, "The result of the product A2."),
        ],
    )
    def test_useful_function_a_returns_variant_literal(self, product_class, expected):
        """Test that each variant returns its own fixed result."""
        product = product_class()
        assert isinstance(product, AbstractProductA)
        assert product.useful_function_a() == expected
        assert product.useful_function_a() == expected


class TestProductB:
    """Test product B variants."""

    def test_abstract_product_b_cannot_be_instantiated(self):
        """Test that the family interface is abstract."""
        with pytest.raises(TypeError):
            AbstractProductB()

    def test_useful_function_b_returns_variant_literal(self):
        """Test that each variant returns its own fixed result."""
        assert ConcreteProductB1().useful_function_b() == "The result of the product B1."
        assert ConcreteProductB2().useful_function_b() == "The result of the product B2."

    def test_matching_variant_collaboration(self):
        """Test collaboration between products of the same variant."""
        assert (
            ConcreteProductB1().another_useful_function_b(ConcreteProductA1())
            == "The result of the B1 collaborating with the (The result of the product A1.)"
        )
        assert (
            ConcreteProductB2().another_useful_function_b(ConcreteProductA2())
            == "The result of the B2 collaborating with the (The result of the product A2.)"
        )

    def test_cross_variant_collaboration_is_not_rejected(self):
        """Any product A is accepted, even one of another variant."""
        assert (
            ConcreteProductB1().another_useful_function_b(ConcreteProductA2())
            == "The result of the B1 collaborating with the (The result of the product A2.)"
        )
        assert (
            ConcreteProductB2().another_useful_function_b(ConcreteProductA1())
            == "The result of the B2 collaborating with the (The result of the product A1.)"
        )

    @pytest.mark.parametrize("product_class", [ConcreteProductB1, ConcreteProductB2])
    def test_collaborator_result_is_embedded_verbatim(self, product_class):
        """Test that the collaborator's result appears unchanged, exactly once."""
        class OtherProductA(AbstractProductA):
            def useful_function_a(self) -> str:
                return "custom (nested) result"

        result = product_class().another_useful_function_b(OtherProductA())
        assert result.endswith("(custom (nested) result)")
        assert result.count("custom (nested) result") == 1
