"""
Tests for the strategy kata.

These tests demonstrate:
- Each strategy computes its own amount and description
- Swapping strategies changes both on the next call, with nothing left over
"""

import pytest

from katas.patterns import strategy_bad
from katas.patterns.strategy_good import (
    DiscountCalculator,
    DiscountStrategy,
    RegularCustomerDiscount,
    StudentDiscount,
    VIPCustomerDiscount,
)


def test_strategies_calculate_different_amounts():
    assert RegularCustomerDiscount().calculate_discount(100) == 0
    assert VIPCustomerDiscount().calculate_discount(100) == 20
    assert StudentDiscount().calculate_discount(100) == 10


def test_calculator_delegates_to_current_strategy():
    calculator = DiscountCalculator(RegularCustomerDiscount())

    assert calculator.calculate_discount(100) == 0
    assert calculator.get_discount_info() == "Cliente regular - sin descuento"

    calculator.set_strategy(VIPCustomerDiscount())

    assert calculator.calculate_discount(100) == 20
    assert calculator.get_discount_info() == "Cliente VIP - 20% de descuento"


@pytest.mark.parametrize(
    "sequence",
    [
        (VIPCustomerDiscount, RegularCustomerDiscount, StudentDiscount),
        (StudentDiscount, VIPCustomerDiscount, RegularCustomerDiscount),
    ],
)
def test_swapping_leaves_no_residue(sequence):
    calculator = DiscountCalculator(sequence[0]())

    for strategy_cls in sequence[1:]:
        strategy = strategy_cls()
        calculator.set_strategy(strategy)

        assert calculator.strategy is strategy
        assert calculator.calculate_discount(250) == strategy_cls().calculate_discount(250)
        assert calculator.get_discount_info() == strategy_cls().description()


def test_custom_strategy_plugs_in():
    class FlatTenOff(DiscountStrategy):
        def calculate_discount(self, amount: float) -> float:
            return min(10.0, amount)

        def description(self) -> str:
            return "10 de descuento fijo"

    calculator = DiscountCalculator(FlatTenOff())

    assert calculator.calculate_discount(5) == 5
    assert calculator.calculate_discount(100) == 10
    assert calculator.get_discount_info() == "10 de descuento fijo"


def test_bad_calculator_keeps_two_chains_in_sync():
    calculator = strategy_bad.DiscountCalculator()

    assert calculator.calculate(100, "vip") == pytest.approx(20)
    assert calculator.info("vip") == "Cliente VIP - 20% de descuento"
    # an unknown type falls through both chains silently
    assert calculator.calculate(100, "gold") == 0
    assert calculator.info("gold") == ""
