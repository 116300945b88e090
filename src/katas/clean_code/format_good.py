"""Format - corrected.

Three focused classes with consistent snake_case methods and fields. Related
lines are grouped, and every public method is a short sequence of named steps.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..domain.domain_type import PaymentMethod

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


class Product(BaseModel):
    id: int
    name: str
    stock: int = Field(ge=0)
    price: float = Field(ge=0)
    discounted_price: float | None = None

    model_config = ConfigDict(frozen=True)


DEFAULT_PRODUCTS: tuple[Product, ...] = (Product(id=1, name="Laptop", stock=50, price=1200),)


class ProductService:
    def __init__(self, products: Sequence[Product] = DEFAULT_PRODUCTS) -> None:
        self._products: dict[int, Product] = {product.id: product for product in products}

    def find_product(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def find_product_by_id_and_update_stock_and_calculate_discount_and_send_notification(
        self,
        product_id: int,
        quantity: int,
        discount_factor: float,
    ) -> Product | None:
        """Take ``quantity`` units out of stock and price the product at ``discount_factor``.

        Stock and discounted price change together or not at all: an unknown
        product, a non-positive quantity, insufficient stock or a non-positive
        discount factor returns None and leaves the catalog as it was.
        """
        product = self.find_product(product_id)
        if product is None or not 0 < quantity <= product.stock or discount_factor <= 0:
            logger.debug("Update of product %s rejected: quantity=%s factor=%s", product_id, quantity, discount_factor)
            return None

        updated = product.model_copy(
            update={
                "stock": product.stock - quantity,
                "discounted_price": self._calculate_discounted_price(product.price, discount_factor),
            }
        )
        self._products[product_id] = updated
        self._send_notification(updated)
        return updated

    def _calculate_discounted_price(self, price: float, discount_factor: float) -> float:
        return round(price * discount_factor, 2)

    def _send_notification(self, product: Product) -> None:
        logger.info("Product %s updated: stock=%s discounted_price=%s", product.id, product.stock, product.discounted_price)


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


class LineItem(BaseModel):
    price: float = Field(gt=0)
    quantity: int = Field(gt=0)

    model_config = ConfigDict(frozen=True)


class Order(BaseModel):
    id: int
    items: tuple[LineItem, ...]
    total: float
    payment_method: PaymentMethod

    model_config = ConfigDict(frozen=True)


class OrderProcessor:
    def __init__(self) -> None:
        self._orders: list[Order] = []

    def process_order(
        self,
        order_id: int,
        items: Sequence[LineItem | dict],
        payment_method: str,
    ) -> bool:
        payment = PaymentMethod.parse(payment_method)
        if not items or payment is None:
            return False

        try:
            line_items = tuple(LineItem.model_validate(item) for item in items)
        except ValidationError as e:
            logger.debug("Order %s rejected: invalid items (%d errors)", order_id, e.error_count())
            return False
        total = sum(item.price * item.quantity for item in line_items)

        self._orders.append(Order(id=order_id, items=line_items, total=total, payment_method=payment))
        return True

    def get_orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class ManagedUser(BaseModel):
    name: str
    email: str
    age: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)


class UserManager:
    def __init__(self) -> None:
        self._users: dict[str, ManagedUser] = {}

    def add_user(self, name: str, email: str, age: int) -> ManagedUser:
        user = ManagedUser(name=name, email=email, age=age)
        self._users[email] = user
        return user

    def find_user(self, email: str) -> ManagedUser | None:
        return self._users.get(email)

    def delete_user(self, email: str) -> bool:
        return self._users.pop(email, None) is not None


__all__ = [
    "LineItem",
    "ManagedUser",
    "Order",
    "OrderProcessor",
    "Product",
    "ProductService",
    "UserManager",
]
