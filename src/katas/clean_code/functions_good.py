"""Functions - corrected.

``process_order`` reads as a list of steps. Each step is a small method doing
one thing, and validation uses early returns instead of nesting.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..domain.domain_type import PaymentMethod

logger = logging.getLogger(__name__)

DISCOUNT_THRESHOLD = 100
DISCOUNT_RATE = 0.10


class OrderItem(BaseModel):
    """Line of an order."""

    name: str = Field(min_length=1)
    price: float = Field(gt=0)
    quantity: int = Field(gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


class ProcessedOrder(BaseModel):
    """Accepted order with its computed amounts."""

    customer_name: str
    customer_email: str
    items: tuple[OrderItem, ...]
    subtotal: float
    discount: float
    total: float
    payment_method: PaymentMethod

    model_config = ConfigDict(frozen=True)


class OrderProcessor:
    def __init__(self) -> None:
        self._processed: list[ProcessedOrder] = []

    @property
    def processed_orders(self) -> tuple[ProcessedOrder, ...]:
        return tuple(self._processed)

    def process_order(
        self,
        customer_name: str,
        customer_email: str,
        items: Sequence[OrderItem],
        payment_method: str,
    ) -> bool:
        if not self._is_valid_customer(customer_name, customer_email):
            return False
        if not items:
            logger.debug("Order for %s rejected: no items", customer_name)
            return False

        payment = PaymentMethod.parse(payment_method)
        if payment is None:
            logger.debug("Order for %s rejected: unsupported payment %r", customer_name, payment_method)
            return False

        subtotal = self._calculate_subtotal(items)
        discount = self._calculate_discount(subtotal)
        order = ProcessedOrder(
            customer_name=customer_name,
            customer_email=customer_email,
            items=tuple(items),
            subtotal=subtotal,
            discount=discount,
            total=subtotal - discount,
            payment_method=payment,
        )
        self._save(order)
        self._send_confirmation(order)
        return True

    def _is_valid_customer(self, name: str, email: str) -> bool:
        return bool(name.strip()) and self._is_valid_email(email)

    def _is_valid_email(self, email: str) -> bool:
        return "@" in email

    def _calculate_subtotal(self, items: Sequence[OrderItem]) -> float:
        return sum(item.subtotal for item in items)

    def _calculate_discount(self, subtotal: float) -> float:
        if subtotal <= DISCOUNT_THRESHOLD:
            return 0.0
        return round(subtotal * DISCOUNT_RATE, 2)

    def _save(self, order: ProcessedOrder) -> None:
        self._processed.append(order)

    def _send_confirmation(self, order: ProcessedOrder) -> None:
        logger.info("Confirmation sent to %s: total %.2f", order.customer_email, order.total)


__all__ = ["DISCOUNT_RATE", "DISCOUNT_THRESHOLD", "OrderItem", "OrderProcessor", "ProcessedOrder"]
