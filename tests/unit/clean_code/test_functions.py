"""
Tests for the functions kata.

These tests demonstrate:
- Early-return validation (each rejection reason on its own)
- Discount applied above the threshold, observable on the recorded order
"""

import logging

import pytest

from katas.clean_code import functions_bad
from katas.clean_code.functions_good import OrderItem, OrderProcessor
from katas.domain.domain_type import PaymentMethod


@pytest.fixture
def processor() -> OrderProcessor:
    return OrderProcessor()


@pytest.fixture
def items() -> list[OrderItem]:
    return [
        OrderItem(name="Product 1", price=50, quantity=2),
        OrderItem(name="Product 2", price=30, quantity=1),
    ]


def test_valid_order_is_processed(processor: OrderProcessor, items: list[OrderItem]):
    assert processor.process_order("Juan Pérez", "customer@email.com", items, "credit_card") is True

    order = processor.processed_orders[0]
    assert order.subtotal == 130
    assert order.payment_method is PaymentMethod.CREDIT_CARD


@pytest.mark.parametrize(
    ("name", "email", "payment"),
    [
        ("", "email@test.com", "credit_card"),
        ("   ", "email@test.com", "credit_card"),
        ("Juan", "invalid-email", "credit_card"),
        ("Juan", "juan@test.com", "bitcoin"),
    ],
)
def test_invalid_orders_are_rejected(processor: OrderProcessor, items, name, email, payment):
    assert processor.process_order(name, email, items, payment) is False
    assert processor.processed_orders == ()


def test_order_without_items_is_rejected(processor: OrderProcessor):
    assert processor.process_order("Juan", "juan@test.com", [], "credit_card") is False


def test_discount_applies_over_threshold(processor: OrderProcessor):
    items = [OrderItem(name="Expensive Item", price=150, quantity=1)]

    assert processor.process_order("Cliente", "customer@email.com", items, "credit_card") is True

    order = processor.processed_orders[0]
    assert order.discount == 15
    assert order.total == 135


def test_no_discount_at_or_below_threshold(processor: OrderProcessor):
    items = [OrderItem(name="Test Product", price=50, quantity=2)]

    assert processor.process_order("Test User", "test@email.com", items, "paypal") is True
    assert processor.processed_orders[0].discount == 0
    assert processor.processed_orders[0].total == 100


def test_confirmation_is_logged(processor: OrderProcessor, items, caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.INFO, logger="katas.clean_code.functions_good"):
        processor.process_order("Juan", "juan@test.com", items, "debit_card")

    assert "Confirmation sent to juan@test.com" in caplog.text


def test_bad_variant_reaches_the_same_result_through_nesting():
    processor = functions_bad.OrderProcessor()
    items = [{"price": 150, "quantity": 1}]

    assert processor.process_order("Cliente", "c@email.com", items, "credit_card") is True
    assert processor.orders[0]["t"] == 135
    assert processor.process_order("", "c@email.com", items, "credit_card") is False
